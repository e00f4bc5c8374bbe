#!/usr/bin/env python3
"""
Traffic Dashboard - Live per-client network traffic chart with protocol drill-down.

Uses Textual TUI framework; polls a JSON metrics endpoint on a fixed interval.

This is the entry point script. The implementation is in src/dashboard/.
"""

from src.utils.cli import cli

if __name__ == "__main__":
    cli()

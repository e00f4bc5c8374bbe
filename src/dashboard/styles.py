"""
CSS styles for the Traffic Dashboard.

Contains:
- get_css: CSS for the dashboard screen
"""

from .models import ColorTheme, THEME


def get_css(theme: ColorTheme = THEME) -> str:
    """Generate CSS for the dashboard screen using theme colors."""
    return f"""
Screen {{
    background: {theme.background};
}}

#dashboard-container {{
    height: 1fr;
    padding: 0 1 1 1;
}}

#header-bar {{
    height: 3;
    background: {theme.surface_light};
    border-bottom: solid {theme.border};
    padding: 0 1;
}}

#titles {{
    width: 1fr;
    height: 3;
}}

#main-title {{
    text-style: bold;
    color: {theme.primary};
}}

#subtitle {{
    color: {theme.text_dim};
}}

#back-btn {{
    margin: 0 1;
    min-width: 12;
    background: {theme.surface_light};
    border: solid {theme.border};
    color: {theme.text};
}}

#back-btn:hover {{
    background: {theme.primary_dark};
    border: solid {theme.primary};
}}

#back-btn.-hidden {{
    display: none;
}}

#legend {{
    height: 1;
    padding: 0 1;
    background: {theme.surface};
    border-bottom: solid {theme.border};
    color: {theme.text};
    content-align: center middle;
}}

#chart-container {{
    width: 100%;
    height: 1fr;
    border: solid {theme.border};
    background: {theme.surface};
}}

#traffic-chart {{
    width: 100%;
    height: auto;
    padding: 1 1;
}}

#traffic-chart:focus {{
    background: {theme.surface_dark};
}}

#status-footer {{
    height: 3;
    background: {theme.surface};
    padding: 0 1;
    border-top: solid {theme.border};
    color: {theme.text};
    align: left middle;
}}

#status-indicator {{
    width: auto;
    padding: 0 1 0 0;
    color: {theme.text_dim};
    height: 3;
    content-align: left middle;
}}

#status-text {{
    width: 1fr;
    padding: 0 1;
    height: 3;
    content-align: left middle;
}}
"""

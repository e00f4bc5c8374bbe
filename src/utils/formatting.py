"""Human readable formatting helpers shared by the chart and the CLI."""

BYTE_UNITS = ['Bytes', 'KB', 'MB', 'GB', 'TB']


def format_bytes(num_bytes: float) -> str:
    """Format a byte count using 1024-based units.

    Values keep at most two decimals with trailing zeros dropped, so
    ``format_bytes(1536)`` is ``"1.5 KB"`` and ``format_bytes(1024)`` is
    ``"1 KB"``.
    """
    if num_bytes <= 0:
        return '0 Bytes'

    value = float(num_bytes)
    index = 0
    while value >= 1024 and index < len(BYTE_UNITS) - 1:
        value /= 1024
        index += 1

    text = f"{value:.2f}".rstrip('0').rstrip('.')
    return f"{text} {BYTE_UNITS[index]}"

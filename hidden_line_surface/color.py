#
# PROJECT: hidden-line-surface
# MODULE: hidden_line_surface/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

# Colours are 32-bit ARGB words, alpha in the most significant byte.
COL_BLACK = 0xFF000000
COL_WHITE = 0xFFFFFFFF

_ALPHA_OPAQUE = 0xFF


def parse_hex_color(hex_str):
    """
    Parse a hex color string to an (r, g, b) tuple.
    Accepts: '#RRGGBB' or 'RRGGBB' (case-insensitive).
    Returns: (r, g, b) tuple with values 0-255, or None on failure.
    """
    if hex_str is None:
        return None
    val = str(hex_str).strip().lstrip('#')
    if len(val) != 6:
        return None
    try:
        r = int(val[0:2], 16)
        g = int(val[2:4], 16)
        b = int(val[4:6], 16)
        return (r, g, b)
    except ValueError:
        return None


def rgb_to_argb(rgb, alpha: int = _ALPHA_OPAQUE) -> int:
    """Pack an (r, g, b) tuple into an ARGB word."""
    r, g, b = rgb
    return (alpha << 24) | (r << 16) | (g << 8) | b


def parse_argb(hex_str):
    """Parse '#RRGGBB' straight to an opaque ARGB word, or None on failure."""
    rgb = parse_hex_color(hex_str)
    if rgb is None:
        return None
    return rgb_to_argb(rgb)

"""Color int formatting used by color-producing expressions."""


def color_to_rgba_string(value: int) -> str:
    """
    Convert a 32-bit ARGB color int to an "rgba(r,g,b,a)" string.

    Red, green and blue are integers in [0, 255]; alpha is the alpha byte
    scaled to [0, 1] and rounded to three decimals.

    Signed ints (as produced by platforms where colors are 32-bit signed) are
    masked to their unsigned 32-bit value first.

    Args:
        value: ARGB color, e.g. 0xFFFF0000 for opaque red

    Returns:
        Color string, e.g. "rgba(255,0,0,1)"

    Raises:
        TypeError: If value is not an int

    Example:
        >>> color_to_rgba_string(0x80FF0000)
        'rgba(255,0,0,0.502)'
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"color must be an int, got {type(value).__name__}")

    value &= 0xFFFFFFFF
    alpha = (value >> 24) & 0xFF
    red = (value >> 16) & 0xFF
    green = (value >> 8) & 0xFF
    blue = value & 0xFF

    return f"rgba({red},{green},{blue},{round(alpha / 255, 3):g})"

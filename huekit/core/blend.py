"""Linear RGB blending for single-axis gradients."""

from rich.color_triplet import ColorTriplet

from .colorspace import parse_color, to_rgb


def blend_fraction(steps: int, position: int) -> float:
    """
    How far along a gradient a cell is, from 0.0 (start) to 1.0 (end).

    A gradient with no steps stays on its start color. Positions outside
    [0, steps] are clamped.
    """
    if steps <= 0:
        return 0.0
    return min(max(position / steps, 0.0), 1.0)


def _channel(a: int, b: int, t: float) -> int:
    # Round half up so the midpoint of 0..255 lands on 128
    return int(a + (b - a) * t + 0.5)


def blend_rgb(start: ColorTriplet, end: ColorTriplet, fraction: float) -> ColorTriplet:
    """Interpolate each channel between start and end."""
    t = min(max(fraction, 0.0), 1.0)
    return ColorTriplet(
        _channel(start.red, end.red, t),
        _channel(start.green, end.green, t),
        _channel(start.blue, end.blue, t),
    )


def blend_hex(start: str, end: str, steps: int, position: int) -> str:
    """
    Hex color at a position of a start-to-end gradient.

    Endpoints are read as full RGB, without profile degradation. Endpoints
    that do not parse count as black.

    Args:
        start: Color code at position 0
        end: Color code at position == steps
        steps: Number of discrete positions across the span
        position: Index of the current cell

    Returns:
        "#rrggbb" string
    """
    start_rgb = to_rgb(parse_color(start))
    end_rgb = to_rgb(parse_color(end))
    return blend_rgb(start_rgb, end_rgb, blend_fraction(steps, position)).hex

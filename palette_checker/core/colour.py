"""Colour math: hex/RGB/HSL conversion, WCAG luminance and contrast, distances.

All functions take and return plain values (hex strings, tuples, floats).
Malformed hex input never raises: hex_to_rgb degrades to black and
hex_to_hsl degrades to a neutral grey HSL(0, 50, 50).

HSL components are floats: h in [0, 360), s and l in [0, 100].
"""

import math
import re
from typing import NamedTuple

import numpy as np

HEX_RE = re.compile(r'^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$', re.IGNORECASE)

BLACK = '#0A0A0B'  # near-black used by the application cases
WHITE = '#FFFFFF'

SIMILARITY_THRESHOLD = 15.0

# Simplified RGB channel-mixing approximations, not LMS cone-space transforms.
CVD_MATRICES: dict[str, np.ndarray] = {
    'deuteranopia': np.array(
        [
            [0.625, 0.375, 0.0],
            [0.3, 0.7, 0.0],
            [0.0, 0.0, 1.0],
        ]
    ),
    'protanopia': np.array(
        [
            [0.567, 0.433, 0.0],
            [0.442, 0.558, 0.0],
            [0.0, 0.0, 1.0],
        ]
    ),
    'tritanopia': np.array(
        [
            [1.0, 0.0, 0.0],
            [0.0, 0.95, 0.05],
            [0.0, 0.567, 0.433],
        ]
    ),
}


class HSL(NamedTuple):
    h: float
    s: float
    l: float  # noqa: E741


NEUTRAL_HSL = HSL(0.0, 50.0, 50.0)


def is_hex(value: str) -> bool:
    return bool(HEX_RE.match(value.strip()))


def normalise_hex(value: str) -> str:
    """'336699' / '#336699' / '#336699 ' -> '#336699' upper-cased.

    Malformed values are returned stripped but otherwise untouched.
    """
    value = value.strip()
    m = HEX_RE.match(value)
    if not m:
        return value
    return '#' + ''.join(m.groups()).upper()


def hex_to_rgb(hex_str: str) -> tuple[int, int, int]:
    """Convert '#rrggbb' to (r, g, b). Returns black for malformed input."""
    m = HEX_RE.match(hex_str.strip())
    if not m:
        return (0, 0, 0)
    return (int(m.group(1), 16), int(m.group(2), 16), int(m.group(3), 16))


def _channel(value: float) -> int:
    # half-up: 0.5 -> 1, 2.5 -> 3
    return max(0, min(255, math.floor(value + 0.5)))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    return f'#{_channel(r):02X}{_channel(g):02X}{_channel(b):02X}'


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    rf, gf, bf = r / 255, g / 255, b / 255
    hi = max(rf, gf, bf)
    lo = min(rf, gf, bf)
    light = (hi + lo) / 2
    if hi == lo:
        return HSL(0.0, 0.0, light * 100)

    d = hi - lo
    sat = d / (2 - hi - lo) if light > 0.5 else d / (hi + lo)
    if hi == rf:
        hue = (gf - bf) / d + (6 if gf < bf else 0)
    elif hi == gf:
        hue = (bf - rf) / d + 2
    else:
        hue = (rf - gf) / d + 4
    return HSL(hue / 6 * 360, sat * 100, light * 100)


def clamp_hsl(h: float, s: float, l: float) -> HSL:  # noqa: E741
    """Normalise hue into [0, 360) and clamp s/l into [0, 100]."""
    return HSL(h % 360, max(0.0, min(100.0, s)), max(0.0, min(100.0, l)))


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:  # noqa: E741
    h, s, l = clamp_hsl(h, s, l)  # noqa: E741
    s /= 100
    l /= 100  # noqa: E741

    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = l - c / 2
    sector = int(h // 60)
    r, g, b = [
        (c, x, 0.0),
        (x, c, 0.0),
        (0.0, c, x),
        (0.0, x, c),
        (x, 0.0, c),
        (c, 0.0, x),
    ][sector % 6]
    return (_channel((r + m) * 255), _channel((g + m) * 255), _channel((b + m) * 255))


def hex_to_hsl(hex_str: str) -> HSL:
    """Convert hex to HSL. Malformed input returns NEUTRAL_HSL."""
    m = HEX_RE.match(hex_str.strip())
    if not m:
        return NEUTRAL_HSL
    return rgb_to_hsl(int(m.group(1), 16), int(m.group(2), 16), int(m.group(3), 16))


def hsl_to_hex(h: float, s: float, l: float) -> str:  # noqa: E741
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


def _linearise(channel: int) -> float:
    c = channel / 255
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(hex_str: str) -> float:
    """WCAG relative luminance of a hex colour, 0.0 (black) to 1.0 (white)."""
    r, g, b = hex_to_rgb(hex_str)
    return 0.2126 * _linearise(r) + 0.7152 * _linearise(g) + 0.0722 * _linearise(b)


def contrast_ratio(a: str, b: str) -> float:
    """WCAG contrast ratio, 1.0 to 21.0. Symmetric in its arguments."""
    la = relative_luminance(a)
    lb = relative_luminance(b)
    return (max(la, lb) + 0.05) / (min(la, lb) + 0.05)


def hue_delta(a: float, b: float) -> float:
    """Shortest angular distance between two hues, 0 to 180."""
    diff = abs(a - b) % 360
    return min(diff, 360 - diff)


def colour_distance(a: str, b: str) -> float:
    """Euclidean distance over (circular hue delta, sat delta, lightness delta).

    An HSL approximation tuned for "too similar" detection, not a perceptual metric.
    """
    ha = hex_to_hsl(a)
    hb = hex_to_hsl(b)
    dh = hue_delta(ha.h, hb.h)
    return math.sqrt(dh * dh + (ha.s - hb.s) ** 2 + (ha.l - hb.l) ** 2)


def rgb_manhattan(a: str, b: str) -> int:
    """Sum of absolute per-channel differences."""
    ra, ga, ba = hex_to_rgb(a)
    rb, gb, bb = hex_to_rgb(b)
    return abs(ra - rb) + abs(ga - gb) + abs(ba - bb)


def simulate_colour_blindness(hex_str: str, kind: str) -> str:
    """Simulate how a colour appears under a colour vision deficiency.

    kind is one of 'deuteranopia', 'protanopia', 'tritanopia'.
    Raises KeyError for any other kind.
    """
    matrix = CVD_MATRICES[kind]
    rgb = np.array(hex_to_rgb(hex_str), dtype=float)
    mixed = np.clip(np.floor(matrix @ rgb + 0.5), 0, 255).astype(int)
    return rgb_to_hex(int(mixed[0]), int(mixed[1]), int(mixed[2]))


def shift_rgb(hex_str: str, delta: int) -> str:
    """Add delta to every channel, clipped to 0..255."""
    r, g, b = hex_to_rgb(hex_str)
    return rgb_to_hex(r + delta, g + delta, b + delta)


def adjust_for_contrast(fg: str, bg: str, target: float, lighten: bool) -> str:
    """Step fg's channels by +/-5 until contrast against bg reaches target.

    Gives up after 50 steps and returns white (lighten) or near-black.
    """
    step = 5 if lighten else -5
    current = fg
    for _ in range(50):
        current = shift_rgb(current, step)
        if contrast_ratio(current, bg) >= target:
            return current
    return WHITE if lighten else BLACK


def text_colour_for(bg: str) -> str:
    """Black or white text, whichever reads better on bg."""
    return '#000000' if relative_luminance(bg) > 0.179 else WHITE


def circular_mean_hue(hues: list[float]) -> float:
    """Mean direction of a set of hues, in [0, 360). Empty input gives 0."""
    if not hues:
        return 0.0
    rad = np.radians(np.asarray(hues, dtype=float))
    angle = math.degrees(math.atan2(float(np.sin(rad).mean()), float(np.cos(rad).mean())))
    return angle % 360


_HUE_NAMES = {
    0: 'Rojo',
    30: 'Naranja',
    60: 'Amarillo',
    90: 'Lima',
    120: 'Verde',
    150: 'Turquesa',
    180: 'Cian',
    210: 'Azul cielo',
    240: 'Azul',
    270: 'Violeta',
    300: 'Magenta',
    330: 'Rosa',
}


def colour_name(hex_str: str) -> str:
    """Descriptive Spanish name, e.g. 'Azul oscuro vibrante'."""
    h, s, l = hex_to_hsl(hex_str)  # noqa: E741
    if l < 15:
        return 'Negro'
    if l > 85 and s < 10:
        return 'Blanco'
    if s < 10:
        return 'Gris oscuro' if l < 50 else 'Gris claro'

    name = _HUE_NAMES[math.floor(h / 30 + 0.5) * 30 % 360]
    if l < 30:
        name += ' oscuro'
    elif l > 70:
        name += ' claro'
    if s < 40:
        name += ' apagado'
    elif s > 80:
        name += ' vibrante'
    return name

"""Solution engine: pure interpreter for Fix variants.

apply_fix(colours, fix) always returns a new list with the same length
as colours. A fix that targets an index beyond the palette returns an
unchanged copy. HSL arithmetic is clamped after every adjustment.
"""

import logging
from collections.abc import Sequence

from palette_checker.core.colour import (
    adjust_for_contrast,
    clamp_hsl,
    hex_to_hsl,
    hsl_to_hex,
    shift_rgb,
)
from palette_checker.core.types import Fix, FixKind

logger = logging.getLogger(__name__)


def _in_range(colours: list[str], index: int | None) -> bool:
    return index is not None and 0 <= index < len(colours)


def _adjust_hsl(colours: list[str], fix: Fix) -> list[str]:
    index = fix.param('index')
    if not _in_range(colours, index):
        return colours
    h, s, l = hex_to_hsl(colours[index])  # noqa: E741
    h += fix.param('dh', 0.0)
    s += fix.param('ds', 0.0)
    l += fix.param('dl', 0.0)  # noqa: E741
    l_min = fix.param('l_min')
    l_max = fix.param('l_max')
    if l_min is not None:
        l = max(l_min, l)  # noqa: E741
    if l_max is not None:
        l = min(l_max, l)  # noqa: E741
    colours[index] = hsl_to_hex(*clamp_hsl(h, s, l))
    return colours


def _set_hsl(colours: list[str], fix: Fix) -> list[str]:
    index = fix.param('index')
    if not _in_range(colours, index):
        return colours
    current = hex_to_hsl(colours[index])
    h = fix.param('h', current.h)
    s = fix.param('s', current.s)
    l = fix.param('l', current.l)  # noqa: E741
    colours[index] = hsl_to_hex(*clamp_hsl(h, s, l))
    return colours


def _map_saturation(colours: list[str], fn) -> list[str]:
    result = []
    for c in colours:
        h, s, l = hex_to_hsl(c)  # noqa: E741
        result.append(hsl_to_hex(*clamp_hsl(h, fn(s), l)))
    return result


def _blend_hue(colours: list[str], target: float, weight: float) -> list[str]:
    result = []
    for c in colours:
        h, s, l = hex_to_hsl(c)  # noqa: E741
        # signed shortest arc from h to target, in (-180, 180]
        arc = (target - h + 180) % 360 - 180
        result.append(hsl_to_hex(*clamp_hsl(h + arc * weight, s, l)))
    return result


def _shift_rgb(colours: list[str], fix: Fix) -> list[str]:
    delta = fix.param('delta', 0)
    for index in fix.param('indices', ()):
        if _in_range(colours, index):
            colours[index] = shift_rgb(colours[index], delta)
    return colours


def _contrast_target(colours: list[str], fix: Fix) -> list[str]:
    index = fix.param('index')
    if not _in_range(colours, index):
        return colours
    colours[index] = adjust_for_contrast(
        colours[index],
        fix.param('background'),
        fix.param('target', 7.0),
        fix.param('lighten', False),
    )
    return colours


def apply_fix(colours: Sequence[str], fix: Fix) -> list[str]:
    """Apply fix to a copy of colours and return the copy."""
    result = list(colours)
    kind = fix.kind

    if kind == FixKind.ADJUST_HSL:
        result = _adjust_hsl(result, fix)
    elif kind == FixKind.SET_HSL:
        result = _set_hsl(result, fix)
    elif kind == FixKind.SET_SATURATION:
        value = fix.param('value', 50.0)
        result = _map_saturation(result, lambda _s: value)
    elif kind == FixKind.BLEND_SATURATION:
        target = fix.param('target', 50.0)
        weight = fix.param('weight', 0.5)
        result = _map_saturation(result, lambda s: s + (target - s) * weight)
    elif kind == FixKind.SHIFT_SATURATION:
        delta = fix.param('delta', 0.0)
        result = _map_saturation(result, lambda s: s + delta)
    elif kind == FixKind.BLEND_HUE:
        result = _blend_hue(result, fix.param('target', 0.0), fix.param('weight', 0.5))
    elif kind == FixKind.SHIFT_RGB:
        result = _shift_rgb(result, fix)
    elif kind == FixKind.CONTRAST_TARGET:
        result = _contrast_target(result, fix)
    elif kind == FixKind.IDENTITY:
        pass
    else:
        logger.warning('unknown fix kind %r, palette left unchanged', kind)

    return result

"""Palette rules.

Every .py file in this package that defines a `rule` object is
auto-registered by palette_checker.registry.discover().

The explicit imports below keep the modules visible to bundlers that
cannot see dynamic imports; keep the list in sync with the rule modules.
"""

import palette_checker.rules.adjacent_contrast as _adjacent_contrast  # noqa: F401
import palette_checker.rules.attention as _attention  # noqa: F401
import palette_checker.rules.colour_blindness as _colour_blindness  # noqa: F401
import palette_checker.rules.cultural as _cultural  # noqa: F401
import palette_checker.rules.emotions as _emotions  # noqa: F401
import palette_checker.rules.global_accessibility as _global_accessibility  # noqa: F401
import palette_checker.rules.harmony_outlier as _harmony_outlier  # noqa: F401
import palette_checker.rules.harmony_relations as _harmony_relations  # noqa: F401
import palette_checker.rules.memory as _memory  # noqa: F401
import palette_checker.rules.readability as _readability  # noqa: F401
import palette_checker.rules.saturation_balance as _saturation_balance  # noqa: F401
import palette_checker.rules.similarity as _similarity  # noqa: F401
import palette_checker.rules.trends as _trends  # noqa: F401

"""Rule auto-discovery and registration.

Scans palette_checker/rules/ for modules that define a `rule` object of
type Rule and collects them into a dict keyed by rule name.

When pkgutil.iter_modules finds nothing (zipped or frozen installs), the
known module list below is imported instead.
"""

import importlib
import logging
import pkgutil

from palette_checker.core.types import Rule

logger = logging.getLogger(__name__)

_registry: dict[str, Rule] = {}
_modules: dict[str, str] = {}

# Known rule module names, fallback when the package cannot be scanned
_RULE_MODULES = [
    'adjacent_contrast',
    'attention',
    'colour_blindness',
    'cultural',
    'emotions',
    'global_accessibility',
    'harmony_outlier',
    'harmony_relations',
    'memory',
    'readability',
    'saturation_balance',
    'similarity',
    'trends',
]


def discover() -> dict[str, Rule]:
    """Import all rule modules and return the registry."""
    if _registry:
        return _registry

    import palette_checker.rules as pkg

    found_modules = [
        modname for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__) if not modname.startswith('_')
    ]
    if not found_modules:
        logger.debug('pkgutil found no rule modules, using the known list')
        found_modules = _RULE_MODULES

    for modname in found_modules:
        module = importlib.import_module(f'palette_checker.rules.{modname}')
        rule = getattr(module, 'rule', None)
        if isinstance(rule, Rule):
            _registry[rule.name] = rule
            _modules[rule.name] = module.__name__

    logger.debug('registered %d rules', len(_registry))
    return _registry


def get(name: str) -> Rule:
    """Get a rule by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown rule: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_rules() -> dict[str, Rule]:
    """Return all registered rules."""
    return discover()


def module_for(name: str):
    """The module a rule was defined in (its docstring is the rule's documentation)."""
    get(name)
    return importlib.import_module(_modules[name])

"""
Configuration settings for the finance app.

Override any value in Django settings with a FINANCE_ prefix, e.g.
    FINANCE_CURRENCY_SYMBOL = 'Rs.'
"""


def _get_setting(name, default):
    from django.conf import settings
    return getattr(settings, f'FINANCE_{name}', default)


_DEFAULTS = {
    'CURRENCY_SYMBOL': '₹',

    # Fee tiers: admission once, tuition per month, exam per term
    'FEE_STRUCTURE': {
        'set1': {'admission_fee': 5000, 'tuition_fee': 1500, 'exam_fee': 500},
        'set2': {'admission_fee': 6000, 'tuition_fee': 2000, 'exam_fee': 600},
        'set3': {'admission_fee': 7000, 'tuition_fee': 2500, 'exam_fee': 700},
    },

    # Which tier each grade pays
    'FEE_TIERS': {
        'set1': ('Nursery', 'Kindergarten', 'Class I', 'Class II'),
        'set2': ('Class III', 'Class IV', 'Class V', 'Class VI'),
        'set3': ('Class VII', 'Class VIII', 'Class IX', 'Class X'),
    },
    'DEFAULT_FEE_TIER': 'set1',
}


class _ConfigProxy:
    """Lazy configuration proxy that loads settings only when accessed."""

    def __getattr__(self, name):
        if name in _DEFAULTS:
            return _get_setting(name, _DEFAULTS[name])
        raise AttributeError(f"Unknown config setting: {name}")


_config = _ConfigProxy()


def __getattr__(name):
    return getattr(_config, name)

"""
Configuration settings for the gradebook app.

These values can be overridden in Django settings by prefixing with GRADEBOOK_.
For example, to change PASS_MARK:
    GRADEBOOK_PASS_MARK = 35

All configuration values are lazily loaded to avoid Django setup issues.
"""


def _get_setting(name, default):
    """Get a gradebook setting from Django settings or use default."""
    from django.conf import settings
    return getattr(settings, f'GRADEBOOK_{name}', default)


# Define defaults as constants for direct use when Django settings are not needed
_DEFAULTS = {
    # Absolute marks a numeric subject needs; not a percentage of full marks
    'PASS_MARK': 33,
    # One failed subject is tolerated as a simple pass
    'MAX_FAILED_FOR_SIMPLE_PASS': 1,
    'NO_DATA_MARKER': 'No data',

    # Subjects assessed by letter grade in the lowest primary classes
    'LETTER_GRADED_SUBJECTS': ('Cursive', 'Drawing'),
    'LETTER_GRADED_GRADES': ('Class I', 'Class II'),

    # Performance grade: (exclusive lower bound, label), checked in order
    'PERFORMANCE_BANDS': ((89, 'A+'), (79, 'A'), (69, 'B'), (59, 'C')),
    'LOWEST_PERFORMANCE_GRADE': 'D',

    # Remarks: (inclusive lower bound, text), checked in order
    'REMARK_BANDS': (
        (90, 'Outstanding'),
        (80, 'Excellent'),
        (70, 'Very Good'),
        (60, 'Good'),
        (50, 'Satisfactory'),
    ),
    'DEFAULT_REMARK': 'Needs Improvement',
    'FAIL_REMARK': 'Requires serious attention',

    # Division on the class mark statement: (inclusive lower bound, label)
    'DIVISION_BANDS': ((60, 'First'), (45, 'Second')),
    'DEFAULT_DIVISION': 'Third',
    'FAIL_DIVISION': 'Fail',

    # Grade letter on the class mark statement: (inclusive lower bound, label)
    'STATEMENT_GRADE_BANDS': ((90, 'A+'), (80, 'A'), (70, 'B+'), (60, 'B'), (50, 'C+')),
    'DEFAULT_STATEMENT_GRADE': 'C',
    'FAIL_STATEMENT_GRADE': 'D',

    'UNRANKED': 'NA',

    # Curriculum override as {grade: {'subjects': [...]}}; None uses curriculum.py
    'GRADE_DEFINITIONS': None,
}


class _ConfigProxy:
    """
    Lazy configuration proxy that loads settings only when accessed.
    This avoids Django setup issues during module import.
    """

    def __getattr__(self, name):
        if name in _DEFAULTS:
            return _get_setting(name, _DEFAULTS[name])
        raise AttributeError(f"Unknown config setting: {name}")


# Module-level proxy object for attribute access
_config = _ConfigProxy()


def __getattr__(name):
    """Enable module-level attribute access via the config proxy."""
    return getattr(_config, name)

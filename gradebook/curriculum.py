"""
Default subject lists per grade.

Classes III to VIII split each subject into exam (60) and activity (40)
marks; every other class is marked out of 100 in a single total.
"""
from core.choices import Grade

from . import config
from .records import GradeDefinition, SubjectDefinition


def _single(*names):
    return [SubjectDefinition(name, 100, 0) for name in names]


def _split(*names):
    return [SubjectDefinition(name, 60, 40) for name in names]


_CORE_SUBJECTS = ('English', 'Mathematics', 'Science', 'Social Studies', 'Mizo')

DEFAULT_GRADE_DEFINITIONS = {
    Grade.NURSERY: GradeDefinition(
        _single('Pre-Reading', 'Pre-Writing', 'Numbers'), class_teacher_id=1
    ),
    Grade.KINDERGARTEN: GradeDefinition(
        _single('English', 'Mathematics', 'General Knowledge')
    ),
    Grade.I: GradeDefinition(
        _single('English', 'Mathematics', 'Environmental Science', 'Mizo')
    ),
    Grade.II: GradeDefinition(
        _single('English', 'Mathematics', 'Environmental Science', 'Mizo')
    ),
    Grade.III: GradeDefinition(_split(*_CORE_SUBJECTS), class_teacher_id=2),
    Grade.IV: GradeDefinition(_split(*_CORE_SUBJECTS)),
    Grade.V: GradeDefinition(_split(*_CORE_SUBJECTS, 'Hindi')),
    Grade.VI: GradeDefinition(_split(*_CORE_SUBJECTS, 'Hindi')),
    Grade.VII: GradeDefinition(_split(*_CORE_SUBJECTS, 'Hindi')),
    Grade.VIII: GradeDefinition(_split(*_CORE_SUBJECTS, 'Hindi'), class_teacher_id=3),
    Grade.IX: GradeDefinition(_single(*_CORE_SUBJECTS)),
    Grade.X: GradeDefinition(_single(*_CORE_SUBJECTS)),
}


def get_grade_definitions():
    """Curriculum for every grade, honouring GRADEBOOK_GRADE_DEFINITIONS."""
    override = config.GRADE_DEFINITIONS
    if not override:
        return dict(DEFAULT_GRADE_DEFINITIONS)

    definitions = dict(DEFAULT_GRADE_DEFINITIONS)
    for grade, definition in override.items():
        if not isinstance(definition, GradeDefinition):
            definition = GradeDefinition.from_dict(definition)
        definitions[Grade(grade)] = definition
    return definitions


def get_grade_definition(grade):
    try:
        return get_grade_definitions().get(Grade(grade))
    except ValueError:
        return None

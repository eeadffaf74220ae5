"""
Plain records for curriculum configuration and recorded marks.

Stored documents carry a subject's score in one of three shapes: a single
total (``marks``), split exam/activity marks (``examMarks`` +
``activityMarks``) or a letter grade (``grade``). Each shape is its own
class here so a mark can never hold two of them at once.
"""
import logging

logger = logging.getLogger(__name__)

LETTER_GRADING = 'letter'


def find_mark(results, subject_name):
    """The SubjectMark recorded for a subject, None if there is none."""
    for mark in results:
        if mark.subject == subject_name:
            return mark
    return None


def _pick(data, *keys):
    """Return the first non-None value among camelCase/snake_case keys."""
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return None


class SubjectDefinition:
    """One subject's scoring scheme within a grade's curriculum."""

    __slots__ = ('name', 'exam_full_marks', 'activity_full_marks', 'grading_system')

    def __init__(self, name, exam_full_marks=0, activity_full_marks=0, grading_system=None):
        self.name = name
        self.exam_full_marks = exam_full_marks or 0
        self.activity_full_marks = activity_full_marks or 0
        self.grading_system = grading_system

    @classmethod
    def from_dict(cls, data):
        return cls(
            name=data['name'],
            exam_full_marks=_pick(data, 'exam_full_marks', 'examFullMarks') or 0,
            activity_full_marks=_pick(data, 'activity_full_marks', 'activityFullMarks') or 0,
            grading_system=_pick(data, 'grading_system', 'gradingSystem'),
        )

    @property
    def full_marks(self):
        return self.exam_full_marks + self.activity_full_marks

    @property
    def is_letter_graded(self):
        return self.grading_system == LETTER_GRADING

    def __eq__(self, other):
        if not isinstance(other, SubjectDefinition):
            return NotImplemented
        return (
            self.name, self.exam_full_marks, self.activity_full_marks, self.grading_system
        ) == (
            other.name, other.exam_full_marks, other.activity_full_marks, other.grading_system
        )

    def __hash__(self):
        return hash((self.name, self.exam_full_marks, self.activity_full_marks, self.grading_system))

    def __repr__(self):
        return (
            f"SubjectDefinition({self.name!r}, exam={self.exam_full_marks}, "
            f"activity={self.activity_full_marks})"
        )


class GradeDefinition:
    """Curriculum for one grade level."""

    def __init__(self, subjects, class_teacher_id=None):
        self.subjects = tuple(subjects)
        self.class_teacher_id = class_teacher_id

    @classmethod
    def from_dict(cls, data):
        return cls(
            subjects=[SubjectDefinition.from_dict(s) for s in data.get('subjects', [])],
            class_teacher_id=_pick(data, 'class_teacher_id', 'classTeacherId'),
        )

    def get_subject(self, name):
        for subject in self.subjects:
            if subject.name == name:
                return subject
        return None

    def __repr__(self):
        return f"GradeDefinition({[s.name for s in self.subjects]!r})"


class SubjectMark:
    """Base class for a student's recorded score in one subject."""

    def __init__(self, subject):
        self.subject = subject

    @property
    def obtained(self):
        """Numeric marks this record contributes to totals."""
        return 0

    def to_dict(self):
        return {'subject': self.subject}

    @staticmethod
    def from_dict(data):
        """
        Build the matching mark variant from a stored document.

        A document holding both ``marks`` and split marks is resolved in
        favour of ``marks``.
        """
        subject = data['subject']
        marks = data.get('marks')
        exam_marks = _pick(data, 'exam_marks', 'examMarks')
        activity_marks = _pick(data, 'activity_marks', 'activityMarks')

        if marks is not None:
            if exam_marks is not None or activity_marks is not None:
                logger.warning(
                    f"Mark for {subject!r} has both total and split marks; using total"
                )
            return NumericSingleMark(subject, marks)
        if exam_marks is not None or activity_marks is not None:
            return NumericSplitMark(subject, exam_marks, activity_marks)
        if data.get('grade'):
            return LetterMark(subject, data['grade'])
        return NumericSingleMark(subject, None)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self):
        return hash(tuple(sorted(self.to_dict().items())))

    def __repr__(self):
        fields = ', '.join(f"{k}={v!r}" for k, v in self.to_dict().items())
        return f"{type(self).__name__}({fields})"


class NumericSingleMark(SubjectMark):
    """A subject scored as one total."""

    def __init__(self, subject, marks):
        super().__init__(subject)
        self.marks = marks

    @property
    def obtained(self):
        return self.marks or 0

    def to_dict(self):
        return {'subject': self.subject, 'marks': self.marks}


class NumericSplitMark(SubjectMark):
    """A subject scored as exam marks plus activity marks."""

    def __init__(self, subject, exam_marks=None, activity_marks=None):
        super().__init__(subject)
        self.exam_marks = exam_marks
        self.activity_marks = activity_marks

    @property
    def obtained(self):
        return (self.exam_marks or 0) + (self.activity_marks or 0)

    def to_dict(self):
        return {
            'subject': self.subject,
            'examMarks': self.exam_marks,
            'activityMarks': self.activity_marks,
        }


class LetterMark(SubjectMark):
    """A subject assessed by letter grade only."""

    def __init__(self, subject, grade):
        super().__init__(subject)
        self.grade = grade

    def to_dict(self):
        return {'subject': self.subject, 'grade': self.grade}


class Exam:
    """A student's marks for one terminal exam."""

    def __init__(self, id, name='', results=None):
        self.id = id
        self.name = name
        self.results = list(results or [])

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=data['id'],
            name=data.get('name', ''),
            results=[SubjectMark.from_dict(r) for r in data.get('results', [])],
        )

    def __repr__(self):
        return f"Exam({self.id!r}, results={len(self.results)})"

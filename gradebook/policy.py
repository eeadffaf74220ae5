from django.core.exceptions import ImproperlyConfigured

from . import config


class GradingPolicy:
    """
    Thresholds used to evaluate, grade and remark a student's result.

    Build one with ``GradingPolicy.from_settings()`` to pick up any
    GRADEBOOK_ overrides, or construct it directly in tests.
    """

    def __init__(
        self,
        pass_mark=33,
        max_failed_for_simple_pass=1,
        no_data_marker='No data',
        letter_graded_subjects=('Cursive', 'Drawing'),
        letter_graded_grades=('Class I', 'Class II'),
        performance_bands=((89, 'A+'), (79, 'A'), (69, 'B'), (59, 'C')),
        lowest_performance_grade='D',
        remark_bands=(
            (90, 'Outstanding'),
            (80, 'Excellent'),
            (70, 'Very Good'),
            (60, 'Good'),
            (50, 'Satisfactory'),
        ),
        default_remark='Needs Improvement',
        fail_remark='Requires serious attention',
        division_bands=((60, 'First'), (45, 'Second')),
        default_division='Third',
        fail_division='Fail',
        statement_grade_bands=(
            (90, 'A+'), (80, 'A'), (70, 'B+'), (60, 'B'), (50, 'C+'),
        ),
        default_statement_grade='C',
        fail_statement_grade='D',
        unranked='NA',
    ):
        self.pass_mark = pass_mark
        self.max_failed_for_simple_pass = max_failed_for_simple_pass
        self.no_data_marker = no_data_marker
        self.letter_graded_subjects = frozenset(letter_graded_subjects)
        self.letter_graded_grades = frozenset(str(g) for g in letter_graded_grades)
        self.performance_bands = tuple(performance_bands)
        self.lowest_performance_grade = lowest_performance_grade
        self.remark_bands = tuple(remark_bands)
        self.default_remark = default_remark
        self.fail_remark = fail_remark
        self.division_bands = tuple(division_bands)
        self.default_division = default_division
        self.fail_division = fail_division
        self.statement_grade_bands = tuple(statement_grade_bands)
        self.default_statement_grade = default_statement_grade
        self.fail_statement_grade = fail_statement_grade
        self.unranked = unranked

    @classmethod
    def from_settings(cls):
        policy = cls(
            pass_mark=config.PASS_MARK,
            max_failed_for_simple_pass=config.MAX_FAILED_FOR_SIMPLE_PASS,
            no_data_marker=config.NO_DATA_MARKER,
            letter_graded_subjects=config.LETTER_GRADED_SUBJECTS,
            letter_graded_grades=config.LETTER_GRADED_GRADES,
            performance_bands=config.PERFORMANCE_BANDS,
            lowest_performance_grade=config.LOWEST_PERFORMANCE_GRADE,
            remark_bands=config.REMARK_BANDS,
            default_remark=config.DEFAULT_REMARK,
            fail_remark=config.FAIL_REMARK,
            division_bands=config.DIVISION_BANDS,
            default_division=config.DEFAULT_DIVISION,
            fail_division=config.FAIL_DIVISION,
            statement_grade_bands=config.STATEMENT_GRADE_BANDS,
            default_statement_grade=config.DEFAULT_STATEMENT_GRADE,
            fail_statement_grade=config.FAIL_STATEMENT_GRADE,
            unranked=config.UNRANKED,
        )
        policy.validate()
        return policy

    def validate(self):
        """Raise ImproperlyConfigured if any band table is out of order."""
        if self.pass_mark < 0:
            raise ImproperlyConfigured(
                f"GRADEBOOK_PASS_MARK must not be negative (got {self.pass_mark})"
            )
        if self.max_failed_for_simple_pass < 0:
            raise ImproperlyConfigured(
                "GRADEBOOK_MAX_FAILED_FOR_SIMPLE_PASS must not be negative"
            )
        for setting, bands in (
            ('PERFORMANCE_BANDS', self.performance_bands),
            ('REMARK_BANDS', self.remark_bands),
            ('DIVISION_BANDS', self.division_bands),
            ('STATEMENT_GRADE_BANDS', self.statement_grade_bands),
        ):
            cutoffs = [cutoff for cutoff, _label in bands]
            if any(a <= b for a, b in zip(cutoffs, cutoffs[1:])):
                raise ImproperlyConfigured(
                    f"GRADEBOOK_{setting} cutoffs must be strictly descending, got {cutoffs}"
                )

    def is_letter_only(self, subject_name, grade):
        return (
            subject_name in self.letter_graded_subjects
            and str(grade) in self.letter_graded_grades
        )

    def __repr__(self):
        return f"GradingPolicy(pass_mark={self.pass_mark})"

"""
Result calculation helpers for the gradebook app.

Everything here works on plain records and never raises on missing data:
a student without recorded marks fails rather than passing silently.
"""
import logging
from collections import namedtuple

from core.choices import ResultStatus

from .policy import GradingPolicy
from .records import find_mark

logger = logging.getLogger(__name__)

StudentResult = namedtuple('StudentResult', ['final_result', 'failed_subjects'])


def _policy(policy):
    return policy if policy is not None else GradingPolicy.from_settings()


def is_subject_numeric(subject, grade, policy=None):
    """
    Check whether a subject is scored by marks rather than letter grade.

    Args:
        subject: SubjectDefinition
        grade: The student's grade (Grade or its value)
        policy: Optional GradingPolicy, defaults to the configured one

    Returns:
        bool: False for letter-graded subjects, subjects with no full marks
        and the letter-only subjects of the lowest primary classes
    """
    if subject.is_letter_graded:
        return False
    if subject.exam_full_marks == 0 and subject.activity_full_marks == 0:
        return False
    if _policy(policy).is_letter_only(subject.name, grade):
        return False
    return True


def subject_obtained_marks(subject_name, results):
    """Marks obtained in one subject, 0 when nothing is recorded."""
    mark = find_mark(results or [], subject_name)
    return mark.obtained if mark is not None else 0


def calculate_student_result(results, grade_def, grade, policy=None):
    """
    Work out PASS / SIMPLE PASS / FAIL for one student's exam.

    A numeric subject fails when its obtained marks fall below the absolute
    pass mark (33 by default), whatever the subject's full marks.

    Args:
        results: List of SubjectMark for the exam, or None
        grade_def: GradeDefinition for the student's grade, or None
        grade: The student's grade
        policy: Optional GradingPolicy

    Returns:
        StudentResult: (final_result, failed_subjects)
    """
    policy = _policy(policy)

    if results is None or grade_def is None:
        logger.debug(f"No results or curriculum for {grade}; treating as fail")
        return StudentResult(ResultStatus.FAIL, [policy.no_data_marker])

    failed_subjects = []
    for subject in grade_def.subjects:
        if not is_subject_numeric(subject, grade, policy):
            continue
        if subject.full_marks <= 0:
            continue
        obtained = subject_obtained_marks(subject.name, results)
        if obtained < policy.pass_mark:
            failed_subjects.append(subject.name)

    if not failed_subjects:
        final_result = ResultStatus.PASS
    elif len(failed_subjects) <= policy.max_failed_for_simple_pass:
        final_result = ResultStatus.SIMPLE_PASS
    else:
        final_result = ResultStatus.FAIL

    return StudentResult(final_result, failed_subjects)


def calculate_totals(results, grade_def, grade, policy=None, numeric_only=True):
    """
    Sum obtained and full marks over a grade's numeric subjects.

    With numeric_only=False every subject in the curriculum is summed, as
    the class mark statement does; letter marks contribute nothing.

    Returns:
        tuple: (total_marks, max_marks)
    """
    if grade_def is None:
        return 0, 0

    policy = _policy(policy)
    total = 0
    maximum = 0
    for subject in grade_def.subjects:
        if numeric_only and not is_subject_numeric(subject, grade, policy):
            continue
        total += subject_obtained_marks(subject.name, results)
        maximum += subject.full_marks
    return total, maximum


def calculate_percentage(total, maximum):
    if not maximum:
        return 0.0
    return total / maximum * 100


def get_performance_grade(percentage, result, grade=None, policy=None):
    """
    Letter grade for the report card.

    A failed result always gets the lowest grade. Otherwise the first band
    whose cutoff the percentage strictly exceeds wins. Every grade shares
    the same bands; ``grade`` is accepted so report pages can pass it along.
    """
    policy = _policy(policy)
    if result == ResultStatus.FAIL:
        return policy.lowest_performance_grade
    for cutoff, label in policy.performance_bands:
        if percentage > cutoff:
            return label
    return policy.lowest_performance_grade


def get_statement_grade(percentage, result, policy=None):
    """Grade letter on the class mark statement (cutoffs are inclusive)."""
    policy = _policy(policy)
    if result == ResultStatus.FAIL:
        return policy.fail_statement_grade
    for cutoff, label in policy.statement_grade_bands:
        if percentage >= cutoff:
            return label
    return policy.default_statement_grade


def get_remarks(percentage, result, policy=None):
    """Teacher's remark for the report card (cutoffs are inclusive)."""
    policy = _policy(policy)
    if result == ResultStatus.FAIL:
        return policy.fail_remark
    for cutoff, remark in policy.remark_bands:
        if percentage >= cutoff:
            return remark
    return policy.default_remark


def get_division(percentage, result, policy=None):
    """Division shown on the class mark statement."""
    policy = _policy(policy)
    if result == ResultStatus.FAIL:
        return policy.fail_division
    for cutoff, division in policy.division_bands:
        if percentage >= cutoff:
            return division
    return policy.default_division

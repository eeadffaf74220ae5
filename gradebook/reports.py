"""Class-level result tables: mark statement and promotion summary."""
import logging

import pandas as pd

from core.choices import FINAL_EXAM_ID, GRADES_LIST, Grade, ResultStatus

from .policy import GradingPolicy
from .ranking import StudentScore, calculate_ranks
from .utils import (
    calculate_percentage, calculate_student_result, calculate_totals,
    get_division, get_remarks, get_statement_grade,
)

logger = logging.getLogger(__name__)

MARK_STATEMENT_COLUMNS = [
    'student_id', 'roll_no', 'name', 'total_marks', 'max_marks', 'percentage',
    'result', 'division', 'grade', 'remarks', 'rank',
]

PROMOTE = 'promote'
DETAIN = 'detain'
GRADUATE = 'graduate'


def build_class_mark_statement(students, grade_def, exam_id, policy=None):
    """
    One row per active student for an exam, ordered by roll number.

    Totals cover every subject in the curriculum and the grade column uses
    the statement grade letters, not the report card bands.

    Args:
        students: Student records; inactive students are left out
        grade_def: GradeDefinition for the class
        exam_id: Exam to report on

    Returns:
        pd.DataFrame with MARK_STATEMENT_COLUMNS. Percentage is rounded to
        two places; rank is an int or the unranked marker.
    """
    policy = policy if policy is not None else GradingPolicy.from_settings()

    if grade_def is None:
        return pd.DataFrame(columns=MARK_STATEMENT_COLUMNS)

    class_students = sorted(
        (s for s in students if s.is_active), key=lambda s: s.roll_no
    )
    if not class_students:
        return pd.DataFrame(columns=MARK_STATEMENT_COLUMNS)

    rows = []
    for student in class_students:
        exam = student.get_exam(exam_id)
        results = exam.results if exam is not None else []
        total, maximum = calculate_totals(
            results, grade_def, student.grade, policy, numeric_only=False
        )
        percentage = calculate_percentage(total, maximum)
        result = calculate_student_result(results, grade_def, student.grade, policy).final_result

        rows.append({
            'student_id': student.id,
            'roll_no': student.roll_no,
            'name': student.name,
            'total_marks': total,
            'max_marks': maximum,
            'percentage': round(percentage, 2),
            'result': str(result),
            'division': get_division(percentage, result, policy),
            'grade': get_statement_grade(percentage, result, policy),
            'remarks': get_remarks(percentage, result, policy),
        })

    ranks = calculate_ranks(
        [StudentScore(r['student_id'], r['total_marks'], r['result']) for r in rows],
        policy,
    )
    statement = pd.DataFrame(rows)
    statement['rank'] = statement['student_id'].map(ranks)

    logger.info(
        f"Built mark statement for {len(statement)} students, exam {exam_id}"
    )
    return statement[MARK_STATEMENT_COLUMNS]


def get_promotion_decision(student, grade_def, policy=None):
    """
    What happens to a student at the end of the session.

    Students without final exam marks are detained, as are failures.
    Passing Class X students graduate; everyone else is promoted.
    """
    exam = student.get_exam(FINAL_EXAM_ID)
    if grade_def is None or exam is None or not exam.results:
        return DETAIN

    result = calculate_student_result(exam.results, grade_def, student.grade, policy)
    if result.final_result == ResultStatus.FAIL:
        return DETAIN
    if student.grade == Grade.X:
        return GRADUATE
    return PROMOTE


def build_promotion_summary(students, grade_definitions, policy=None):
    """
    Promotion counts per grade for active students.

    Returns:
        list: dicts with grade, total, to_promote, to_detain, to_graduate,
        one per grade that has at least one active student
    """
    policy = policy if policy is not None else GradingPolicy.from_settings()
    summary = []
    for grade in GRADES_LIST:
        class_students = [s for s in students if s.is_active and s.grade == grade]
        if not class_students:
            continue

        counts = {PROMOTE: 0, DETAIN: 0, GRADUATE: 0}
        for student in class_students:
            decision = get_promotion_decision(student, grade_definitions.get(grade), policy)
            counts[decision] += 1

        summary.append({
            'grade': grade,
            'total': len(class_students),
            'to_promote': counts[PROMOTE],
            'to_detain': counts[DETAIN],
            'to_graduate': counts[GRADUATE],
        })
    return summary

import logging
from collections import namedtuple

from core.choices import ResultStatus

from .policy import GradingPolicy
from .utils import calculate_student_result, calculate_totals

logger = logging.getLogger(__name__)

StudentScore = namedtuple('StudentScore', ['student_id', 'total_marks', 'result'])

RANKED_RESULTS = (ResultStatus.PASS, ResultStatus.SIMPLE_PASS)


def _as_score(entry):
    if isinstance(entry, StudentScore):
        return entry
    if isinstance(entry, dict):
        return StudentScore(
            student_id=entry.get('student_id', entry.get('studentId')),
            total_marks=entry.get('total_marks', entry.get('totalMarks', 0)),
            result=entry.get('result'),
        )
    return StudentScore(*entry)


def calculate_ranks(scores, policy=None):
    """
    Dense class ranks by total marks.

    Only PASS and SIMPLE PASS results are ranked; failed students and
    scores without a result get the unranked marker ('NA').
    Everyone else is ordered by total marks, highest first; equal totals
    share a rank and the next distinct total gets the next integer.
    Students with equal totals keep their input order.

    Args:
        scores: Iterable of StudentScore, (id, total, result) tuples or
            dicts with student_id/studentId, total_marks/totalMarks, result

    Returns:
        dict: {student_id: int rank or 'NA'}
    """
    policy = policy if policy is not None else GradingPolicy.from_settings()
    scores = [_as_score(entry) for entry in scores]

    ranks = {}
    rankable = []
    for score in scores:
        if score.result in RANKED_RESULTS:
            rankable.append(score)
        else:
            ranks[score.student_id] = policy.unranked

    rankable.sort(key=lambda s: s.total_marks or 0, reverse=True)

    rank = 0
    last_total = None
    for score in rankable:
        total = score.total_marks or 0
        if rank == 0 or total != last_total:
            rank += 1
        ranks[score.student_id] = rank
        last_total = total

    logger.debug(
        f"Ranked {len(rankable)} students, {len(scores) - len(rankable)} unranked"
    )
    return ranks


def build_class_scores(students, grade_def, exam_id, policy=None):
    """
    Rank input for every active student in a class.

    Totals only count numeric subjects; the result comes from the same
    exam's marks.
    """
    policy = policy if policy is not None else GradingPolicy.from_settings()
    scores = []
    for student in students:
        if not student.is_active:
            continue
        exam = student.get_exam(exam_id)
        results = exam.results if exam is not None else []
        total, _maximum = calculate_totals(results, grade_def, student.grade, policy)
        result = calculate_student_result(results, grade_def, student.grade, policy)
        scores.append(StudentScore(student.id, total, result.final_result))
    return scores

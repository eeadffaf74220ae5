from django.core.exceptions import ImproperlyConfigured
from django.test import SimpleTestCase, override_settings

from core.choices import ExamTerm, Grade, ResultStatus, StudentStatus
from students.records import Student

from . import config
from .curriculum import get_grade_definition, get_grade_definitions
from .policy import GradingPolicy
from .ranking import StudentScore, build_class_scores, calculate_ranks
from .records import (
    Exam, GradeDefinition, LetterMark, NumericSingleMark, NumericSplitMark,
    SubjectDefinition, SubjectMark, find_mark,
)
from .reports import (
    DETAIN, GRADUATE, MARK_STATEMENT_COLUMNS, PROMOTE,
    build_class_mark_statement, build_promotion_summary, get_promotion_decision,
)
from .utils import (
    calculate_percentage, calculate_student_result, calculate_totals,
    get_division, get_performance_grade, get_remarks, get_statement_grade,
    is_subject_numeric,
)


def split_definition(*names):
    return GradeDefinition([SubjectDefinition(n, 60, 40) for n in names])


def single_definition(*names):
    return GradeDefinition([SubjectDefinition(n, 100, 0) for n in names])


class SubjectMarkRecordTests(SimpleTestCase):
    """Tests for building mark variants from stored documents."""

    def test_single_marks(self):
        mark = SubjectMark.from_dict({'subject': 'English', 'marks': 72})
        self.assertIsInstance(mark, NumericSingleMark)
        self.assertEqual(mark.obtained, 72)

    def test_split_marks(self):
        mark = SubjectMark.from_dict({'subject': 'Science', 'examMarks': 40, 'activityMarks': 30})
        self.assertIsInstance(mark, NumericSplitMark)
        self.assertEqual(mark.obtained, 70)

    def test_split_marks_missing_half_counts_zero(self):
        mark = SubjectMark.from_dict({'subject': 'Science', 'exam_marks': 25})
        self.assertEqual(mark.obtained, 25)

    def test_letter_grade(self):
        mark = SubjectMark.from_dict({'subject': 'Drawing', 'grade': 'A'})
        self.assertIsInstance(mark, LetterMark)
        self.assertEqual(mark.obtained, 0)

    def test_conflicting_fields_prefer_total(self):
        with self.assertLogs('gradebook.records', level='WARNING'):
            mark = SubjectMark.from_dict(
                {'subject': 'Maths', 'marks': 50, 'examMarks': 10, 'activityMarks': 10}
            )
        self.assertIsInstance(mark, NumericSingleMark)
        self.assertEqual(mark.obtained, 50)

    def test_exam_from_dict(self):
        exam = Exam.from_dict({
            'id': 'terminal1',
            'name': 'First Terminal Exam',
            'results': [{'subject': 'English', 'marks': 80}],
        })
        self.assertEqual(find_mark(exam.results, 'English'), NumericSingleMark('English', 80))
        self.assertIsNone(find_mark(exam.results, 'Hindi'))


class SubjectClassifierTests(SimpleTestCase):
    """Tests for is_subject_numeric."""

    def test_marked_subject_is_numeric(self):
        self.assertTrue(is_subject_numeric(SubjectDefinition('English', 60, 40), Grade.V))

    def test_letter_grading_system(self):
        subject = SubjectDefinition('Moral Science', 100, 0, grading_system='letter')
        self.assertFalse(is_subject_numeric(subject, Grade.V))

    def test_no_full_marks(self):
        self.assertFalse(is_subject_numeric(SubjectDefinition('Games', 0, 0), Grade.V))

    def test_cursive_and_drawing_in_lowest_primary_classes(self):
        for grade in (Grade.I, Grade.II):
            for name in ('Cursive', 'Drawing'):
                with self.subTest(grade=grade, subject=name):
                    self.assertFalse(
                        is_subject_numeric(SubjectDefinition(name, 100, 0), grade)
                    )

    def test_drawing_marked_in_higher_classes(self):
        self.assertTrue(is_subject_numeric(SubjectDefinition('Drawing', 50, 50), Grade.III))


class ResultEvaluatorTests(SimpleTestCase):
    """Tests for calculate_student_result."""

    def setUp(self):
        self.grade_def = split_definition('English', 'Mathematics', 'Science')

    def passing_marks(self):
        return [
            NumericSplitMark('English', 50, 30),
            NumericSplitMark('Mathematics', 45, 35),
            NumericSplitMark('Science', 40, 20),
        ]

    def test_all_subjects_passed(self):
        result = calculate_student_result(self.passing_marks(), self.grade_def, Grade.V)
        self.assertEqual(result.final_result, ResultStatus.PASS)
        self.assertEqual(result.failed_subjects, [])

    def test_split_marks_below_pass_mark_fail(self):
        """20 exam + 10 activity = 30, under the absolute pass mark of 33."""
        marks = self.passing_marks()
        marks[0] = NumericSplitMark('English', 20, 10)
        result = calculate_student_result(marks, self.grade_def, Grade.V)
        self.assertEqual(result.final_result, ResultStatus.SIMPLE_PASS)
        self.assertEqual(result.failed_subjects, ['English'])

    def test_pass_mark_is_absolute(self):
        grade_def = GradeDefinition([SubjectDefinition('Hindi', 40, 10)])
        result = calculate_student_result(
            [NumericSingleMark('Hindi', 32)], grade_def, Grade.VI
        )
        self.assertEqual(result.failed_subjects, ['Hindi'])

        result = calculate_student_result(
            [NumericSingleMark('Hindi', 33)], grade_def, Grade.VI
        )
        self.assertEqual(result.final_result, ResultStatus.PASS)

    def test_two_failures_fail(self):
        marks = [
            NumericSplitMark('English', 10, 10),
            NumericSplitMark('Mathematics', 5, 5),
            NumericSplitMark('Science', 40, 20),
        ]
        result = calculate_student_result(marks, self.grade_def, Grade.V)
        self.assertEqual(result.final_result, ResultStatus.FAIL)
        self.assertEqual(result.failed_subjects, ['English', 'Mathematics'])

    def test_missing_subject_counts_as_zero(self):
        marks = self.passing_marks()[:2]
        result = calculate_student_result(marks, self.grade_def, Grade.V)
        self.assertEqual(result.failed_subjects, ['Science'])

    def test_single_marks(self):
        grade_def = single_definition('English', 'Mathematics')
        marks = [NumericSingleMark('English', 90), NumericSingleMark('Mathematics', 34)]
        result = calculate_student_result(marks, grade_def, Grade.IX)
        self.assertEqual(result.final_result, ResultStatus.PASS)

    def test_subjects_without_full_marks_never_fail(self):
        grade_def = GradeDefinition([
            SubjectDefinition('English', 100, 0),
            SubjectDefinition('Games', 0, 0),
            SubjectDefinition('Conduct', 100, 0, grading_system='letter'),
        ])
        result = calculate_student_result(
            [NumericSingleMark('English', 60)], grade_def, Grade.IV
        )
        self.assertEqual(result.final_result, ResultStatus.PASS)
        self.assertNotIn('Games', result.failed_subjects)
        self.assertNotIn('Conduct', result.failed_subjects)

    def test_letter_only_subjects_skipped_in_class_one(self):
        grade_def = single_definition('English', 'Cursive', 'Drawing')
        result = calculate_student_result(
            [NumericSingleMark('English', 70), LetterMark('Cursive', 'B'), LetterMark('Drawing', 'A')],
            grade_def,
            Grade.I,
        )
        self.assertEqual(result.final_result, ResultStatus.PASS)

    def test_missing_results_fail_with_marker(self):
        result = calculate_student_result(None, self.grade_def, Grade.V)
        self.assertEqual(result.final_result, ResultStatus.FAIL)
        self.assertEqual(result.failed_subjects, ['No data'])

    def test_missing_definition_fails_with_marker(self):
        result = calculate_student_result(self.passing_marks(), None, Grade.V)
        self.assertEqual(result.final_result, ResultStatus.FAIL)
        self.assertEqual(result.failed_subjects, ['No data'])

    def test_empty_results_fail_every_subject(self):
        result = calculate_student_result([], self.grade_def, Grade.V)
        self.assertEqual(result.final_result, ResultStatus.FAIL)
        self.assertEqual(len(result.failed_subjects), 3)

    def test_custom_pass_mark(self):
        policy = GradingPolicy(pass_mark=40)
        marks = self.passing_marks()
        marks[2] = NumericSplitMark('Science', 30, 5)
        result = calculate_student_result(marks, self.grade_def, Grade.V, policy)
        self.assertEqual(result.failed_subjects, ['Science'])

    @override_settings(GRADEBOOK_PASS_MARK=85)
    def test_pass_mark_from_settings(self):
        result = calculate_student_result(self.passing_marks(), self.grade_def, Grade.V)
        self.assertEqual(result.final_result, ResultStatus.FAIL)


class TotalsTests(SimpleTestCase):

    def test_totals_over_numeric_subjects(self):
        grade_def = GradeDefinition([
            SubjectDefinition('English', 60, 40),
            SubjectDefinition('Mathematics', 60, 40),
            SubjectDefinition('Games', 0, 0),
        ])
        marks = [NumericSplitMark('English', 50, 30), NumericSingleMark('Mathematics', 90)]
        self.assertEqual(calculate_totals(marks, grade_def, Grade.V), (170, 200))

    def test_totals_over_every_subject(self):
        grade_def = GradeDefinition([
            SubjectDefinition('English', 100, 0),
            SubjectDefinition('Drawing', 100, 0, grading_system='letter'),
        ])
        marks = [NumericSingleMark('English', 80), LetterMark('Drawing', 'A')]
        self.assertEqual(calculate_totals(marks, grade_def, Grade.V), (80, 100))
        self.assertEqual(
            calculate_totals(marks, grade_def, Grade.V, numeric_only=False), (80, 200)
        )

    def test_totals_without_definition(self):
        self.assertEqual(calculate_totals([], None, Grade.V), (0, 0))

    def test_percentage(self):
        self.assertEqual(calculate_percentage(150, 200), 75.0)
        self.assertEqual(calculate_percentage(10, 0), 0.0)


class PerformanceGraderTests(SimpleTestCase):
    """Tests for performance grade, remarks and division."""

    def test_grade_bands(self):
        cases = [
            (90, 'A+'), (89.5, 'A+'), (89, 'A'), (80, 'A'), (79, 'B'),
            (70, 'B'), (69, 'C'), (60, 'C'), (59, 'D'), (0, 'D'),
        ]
        for percentage, expected in cases:
            with self.subTest(percentage=percentage):
                self.assertEqual(
                    get_performance_grade(percentage, ResultStatus.PASS, Grade.V), expected
                )

    def test_fail_overrides_percentage(self):
        self.assertEqual(get_performance_grade(95, ResultStatus.FAIL, Grade.V), 'D')

    def test_simple_pass_graded_by_percentage(self):
        self.assertEqual(get_performance_grade(85, ResultStatus.SIMPLE_PASS, Grade.V), 'A')

    def test_remarks(self):
        cases = [
            (90, 'Outstanding'), (80, 'Excellent'), (79.99, 'Very Good'),
            (60, 'Good'), (50, 'Satisfactory'), (49, 'Needs Improvement'),
        ]
        for percentage, expected in cases:
            with self.subTest(percentage=percentage):
                self.assertEqual(get_remarks(percentage, 'PASS'), expected)

    def test_fail_remark(self):
        self.assertEqual(get_remarks(99, 'FAIL'), 'Requires serious attention')

    def test_grade_and_remark_use_different_cutoffs(self):
        self.assertEqual(get_performance_grade(90, 'PASS'), 'A+')
        self.assertEqual(get_performance_grade(89, 'PASS'), 'A')
        self.assertEqual(get_remarks(89, 'PASS'), 'Excellent')

    def test_statement_grade_bands(self):
        cases = [
            (90, 'A+'), (89.99, 'A'), (80, 'A'), (70, 'B+'), (60, 'B'),
            (50, 'C+'), (49.99, 'C'), (0, 'C'),
        ]
        for percentage, expected in cases:
            with self.subTest(percentage=percentage):
                self.assertEqual(get_statement_grade(percentage, 'PASS'), expected)

    def test_statement_grade_for_fail(self):
        self.assertEqual(get_statement_grade(95, 'FAIL'), 'D')

    def test_division(self):
        self.assertEqual(get_division(60, 'PASS'), 'First')
        self.assertEqual(get_division(45, 'SIMPLE PASS'), 'Second')
        self.assertEqual(get_division(44.9, 'PASS'), 'Third')
        self.assertEqual(get_division(88, 'FAIL'), 'Fail')


class RankCalculatorTests(SimpleTestCase):
    """Tests for dense class ranking."""

    def test_dense_ranks(self):
        ranks = calculate_ranks([
            StudentScore(1, 450, 'PASS'),
            StudentScore(2, 480, 'PASS'),
            StudentScore(3, 450, 'SIMPLE PASS'),
            StudentScore(4, 400, 'PASS'),
        ])
        self.assertEqual(ranks, {2: 1, 1: 2, 3: 2, 4: 3})

    def test_failed_students_not_ranked(self):
        ranks = calculate_ranks([
            StudentScore(1, 500, 'FAIL'),
            StudentScore(2, 300, 'PASS'),
        ])
        self.assertEqual(ranks[1], 'NA')
        self.assertEqual(ranks[2], 1)

    def test_accepts_stored_dicts(self):
        ranks = calculate_ranks([
            {'studentId': 'a', 'totalMarks': 10, 'result': 'PASS'},
            {'student_id': 'b', 'total_marks': 20, 'result': 'PASS'},
        ])
        self.assertEqual(ranks, {'a': 2, 'b': 1})

    def test_missing_result_not_ranked(self):
        ranks = calculate_ranks([
            {'studentId': 'a', 'totalMarks': 90},
            StudentScore('b', 80, None),
            StudentScore('c', 70, 'SIMPLE PASS'),
        ])
        self.assertEqual(ranks, {'a': 'NA', 'b': 'NA', 'c': 1})

    def test_ranks_follow_marks(self):
        scores = [StudentScore(i, total, 'PASS') for i, total in enumerate([5, 9, 9, 1, 7, 5])]
        ranks = calculate_ranks(scores)
        ordered = sorted(scores, key=lambda s: -s.total_marks)
        for higher, lower in zip(ordered, ordered[1:]):
            self.assertLessEqual(ranks[higher.student_id], ranks[lower.student_id])
            if higher.total_marks == lower.total_marks:
                self.assertEqual(ranks[higher.student_id], ranks[lower.student_id])

    def test_empty_class(self):
        self.assertEqual(calculate_ranks([]), {})


class GradingPolicyTests(SimpleTestCase):

    def test_defaults_from_settings(self):
        policy = GradingPolicy.from_settings()
        self.assertEqual(policy.pass_mark, 33)
        self.assertEqual(policy.unranked, 'NA')

    @override_settings(GRADEBOOK_PERFORMANCE_BANDS=((59, 'C'), (89, 'A+')))
    def test_unordered_bands_rejected(self):
        with self.assertRaises(ImproperlyConfigured):
            GradingPolicy.from_settings()

    def test_negative_pass_mark_rejected(self):
        with self.assertRaises(ImproperlyConfigured):
            GradingPolicy(pass_mark=-1).validate()

    def test_unknown_config_setting(self):
        with self.assertRaises(AttributeError):
            config.NOT_A_SETTING


class CurriculumTests(SimpleTestCase):

    def test_every_grade_defined(self):
        self.assertEqual(set(get_grade_definitions()), set(Grade))

    def test_middle_classes_split_marks(self):
        subject = get_grade_definition(Grade.V).get_subject('Hindi')
        self.assertEqual((subject.exam_full_marks, subject.activity_full_marks), (60, 40))

    def test_unknown_grade(self):
        self.assertIsNone(get_grade_definition('Class XII'))

    @override_settings(GRADEBOOK_GRADE_DEFINITIONS={
        'Class IX': {'subjects': [{'name': 'Physics', 'examFullMarks': 80, 'activityFullMarks': 20}]},
    })
    def test_override_from_settings(self):
        definition = get_grade_definition(Grade.IX)
        self.assertEqual([s.name for s in definition.subjects], ['Physics'])
        self.assertEqual(len(get_grade_definition(Grade.X).subjects), 5)


class ClassReportTests(SimpleTestCase):
    """Tests for the class mark statement and promotion summary."""

    def setUp(self):
        self.grade_def = single_definition('English', 'Mathematics')

    def make_student(self, id, roll_no, english, maths, grade=Grade.IX,
                     status=StudentStatus.ACTIVE, exam_id=ExamTerm.TERMINAL3):
        exam = Exam(exam_id, results=[
            NumericSingleMark('English', english),
            NumericSingleMark('Mathematics', maths),
        ])
        return Student(id, roll_no, f'Student {id}', grade, status=status,
                       academic_performance=[exam])

    def test_mark_statement(self):
        students = [
            self.make_student(1, 2, 95, 90),
            self.make_student(2, 1, 20, 10),
            self.make_student(3, 3, 60, 40),
            self.make_student(4, 4, 99, 99, status=StudentStatus.TRANSFERRED),
        ]
        statement = build_class_mark_statement(students, self.grade_def, ExamTerm.TERMINAL3)

        self.assertEqual(list(statement.columns), MARK_STATEMENT_COLUMNS)
        self.assertEqual(list(statement['roll_no']), [1, 2, 3])

        top = statement[statement['student_id'] == 1].iloc[0]
        self.assertEqual(top['total_marks'], 185)
        self.assertEqual(top['percentage'], 92.5)
        self.assertEqual(top['grade'], 'A+')
        self.assertEqual(top['division'], 'First')
        self.assertEqual(top['rank'], 1)

        failed = statement[statement['student_id'] == 2].iloc[0]
        self.assertEqual(failed['result'], 'FAIL')
        self.assertEqual(failed['rank'], 'NA')

        self.assertEqual(statement[statement['student_id'] == 3].iloc[0]['rank'], 2)

    def test_mark_statement_totals_every_subject(self):
        grade_def = GradeDefinition([
            SubjectDefinition('English', 100, 0),
            SubjectDefinition('Drawing', 100, 0, grading_system='letter'),
        ])
        exam = Exam(ExamTerm.TERMINAL1, results=[
            NumericSingleMark('English', 80), LetterMark('Drawing', 'A'),
        ])
        student = Student(1, 1, 'Student 1', Grade.V, academic_performance=[exam])
        row = build_class_mark_statement([student], grade_def, ExamTerm.TERMINAL1).iloc[0]

        self.assertEqual((row['total_marks'], row['max_marks']), (80, 200))
        self.assertEqual(row['percentage'], 40.0)
        self.assertEqual(row['result'], 'PASS')
        self.assertEqual(row['grade'], 'C')
        self.assertEqual(row['division'], 'Third')

    def test_mark_statement_grade_letters(self):
        students = [self.make_student(1, 1, 75, 70)]
        row = build_class_mark_statement(students, self.grade_def, ExamTerm.TERMINAL3).iloc[0]
        self.assertEqual(row['grade'], 'B+')

    def test_mark_statement_empty(self):
        statement = build_class_mark_statement([], self.grade_def, ExamTerm.TERMINAL1)
        self.assertTrue(statement.empty)
        self.assertEqual(list(statement.columns), MARK_STATEMENT_COLUMNS)

    def test_build_class_scores(self):
        students = [self.make_student(1, 1, 50, 50), self.make_student(2, 2, 10, 5)]
        scores = build_class_scores(students, self.grade_def, ExamTerm.TERMINAL3)
        self.assertEqual(scores[0], StudentScore(1, 100, ResultStatus.PASS))
        self.assertEqual(scores[1].result, ResultStatus.FAIL)

    def test_promotion_decisions(self):
        self.assertEqual(
            get_promotion_decision(self.make_student(1, 1, 60, 60), self.grade_def), PROMOTE
        )
        self.assertEqual(
            get_promotion_decision(self.make_student(2, 1, 60, 60, grade=Grade.X), self.grade_def),
            GRADUATE,
        )
        self.assertEqual(
            get_promotion_decision(self.make_student(3, 1, 10, 10), self.grade_def), DETAIN
        )

    def test_missing_final_exam_detains(self):
        student = self.make_student(1, 1, 90, 90, exam_id=ExamTerm.TERMINAL2)
        self.assertEqual(get_promotion_decision(student, self.grade_def), DETAIN)

    def test_promotion_summary(self):
        students = [
            self.make_student(1, 1, 60, 60),
            self.make_student(2, 2, 10, 10),
            self.make_student(3, 1, 70, 70, grade=Grade.X),
            self.make_student(4, 3, 70, 70, status=StudentStatus.TRANSFERRED),
        ]
        summary = build_promotion_summary(
            students, {Grade.IX: self.grade_def, Grade.X: self.grade_def}
        )
        self.assertEqual(summary, [
            {'grade': Grade.IX, 'total': 2, 'to_promote': 1, 'to_detain': 1, 'to_graduate': 0},
            {'grade': Grade.X, 'total': 1, 'to_promote': 0, 'to_detain': 0, 'to_graduate': 1},
        ])

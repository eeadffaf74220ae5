from django.test import SimpleTestCase

from core.choices import Grade
from core.utils import (
    format_date_for_display, format_date_for_storage, format_student_id,
    get_grade_code, get_next_grade,
)
from students.records import Student


class FormatDateForDisplayTests(SimpleTestCase):
    """Tests for converting stored dates to DD/MM/YYYY."""

    def test_iso_date(self):
        self.assertEqual(format_date_for_display('2024-03-05'), '05/03/2024')

    def test_empty_values(self):
        self.assertEqual(format_date_for_display(None), '')
        self.assertEqual(format_date_for_display(''), '')

    def test_non_iso_value_returned_unchanged(self):
        self.assertEqual(format_date_for_display('05/03/2024'), '05/03/2024')
        self.assertEqual(format_date_for_display('2024-3-5'), '2024-3-5')


class FormatDateForStorageTests(SimpleTestCase):
    """Tests for converting entered dates to YYYY-MM-DD."""

    def test_padded_display_date(self):
        self.assertEqual(format_date_for_storage('05/03/2024'), '2024-03-05')

    def test_unpadded_display_date(self):
        self.assertEqual(format_date_for_storage('5/3/2024'), '2024-03-05')

    def test_iso_passes_through(self):
        self.assertEqual(format_date_for_storage('2024-03-05'), '2024-03-05')

    def test_garbage_becomes_empty(self):
        self.assertEqual(format_date_for_storage('March 5th'), '')
        self.assertEqual(format_date_for_storage('05-03-2024'), '')

    def test_empty_values(self):
        self.assertEqual(format_date_for_storage(None), '')
        self.assertEqual(format_date_for_storage(''), '')

    def test_round_trip(self):
        """Display then storage gives back the stored ISO date."""
        for iso in ('2024-01-01', '1999-12-31', '2025-02-28', '2010-07-09'):
            with self.subTest(iso=iso):
                self.assertEqual(format_date_for_storage(format_date_for_display(iso)), iso)


class StudentIdTests(SimpleTestCase):
    """Tests for grade codes and printed student IDs."""

    def test_grade_codes(self):
        self.assertEqual(get_grade_code(Grade.NURSERY), 'NU')
        self.assertEqual(get_grade_code(Grade.KINDERGARTEN), 'KG')
        self.assertEqual(get_grade_code(Grade.V), '05')
        self.assertEqual(get_grade_code('Class X'), '10')

    def test_unknown_grade_code(self):
        self.assertEqual(get_grade_code('Class XI'), 'XX')
        self.assertEqual(get_grade_code(None), 'XX')

    def test_format_student_id(self):
        student = Student(id=1, roll_no=1, name='Aarav Sharma', grade=Grade.V)
        self.assertEqual(format_student_id(student, '2025-2026'), 'BMS250501')

    def test_format_student_id_two_digit_roll(self):
        student = Student(id=7, roll_no=23, name='Zoya Khan', grade=Grade.KINDERGARTEN)
        self.assertEqual(format_student_id(student, '2024-2025'), 'BMS24KG23')

    def test_format_student_id_roll_stored_as_text(self):
        student = Student.from_dict(
            {'id': 9, 'rollNo': '5', 'name': 'Mary', 'grade': 'Class III'}
        )
        self.assertEqual(format_student_id(student, '2025-2026'), 'BMS250305')


class NextGradeTests(SimpleTestCase):

    def test_next_grade(self):
        self.assertEqual(get_next_grade(Grade.NURSERY), Grade.KINDERGARTEN)
        self.assertEqual(get_next_grade(Grade.II), Grade.III)
        self.assertEqual(get_next_grade('Class IX'), Grade.X)

    def test_last_grade_has_no_next(self):
        self.assertIsNone(get_next_grade(Grade.X))

    def test_unknown_grade(self):
        self.assertIsNone(get_next_grade('Class XII'))

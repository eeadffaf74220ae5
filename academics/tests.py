from django.test import SimpleTestCase

from core.choices import AttendanceStatus, ExamTerm

from .utils import (
    AttendanceTally, TermMonth, attendance_percentage, format_attendance_percentage,
    get_months_for_term, get_session_start_year, get_term_calendar_months,
    merge_tallies, tally_attendance,
)

P = AttendanceStatus.PRESENT
A = AttendanceStatus.ABSENT
L = AttendanceStatus.LEAVE


class TermMonthTests(SimpleTestCase):
    """Tests for the term-to-month table."""

    def test_first_term(self):
        self.assertEqual(
            get_months_for_term('terminal1'),
            [TermMonth(3, 0), TermMonth(4, 0), TermMonth(5, 0), TermMonth(6, 0)],
        )

    def test_second_term(self):
        self.assertEqual(
            [m.month for m in get_months_for_term(ExamTerm.TERMINAL2)], [7, 8, 9]
        )

    def test_final_term_crosses_year(self):
        months = get_months_for_term('terminal3')
        self.assertEqual(len(months), 5)
        self.assertEqual([m.year_offset for m in months], [0, 0, 1, 1, 1])
        self.assertEqual([m.month for m in months], [10, 11, 0, 1, 2])

    def test_unknown_exam(self):
        self.assertEqual(get_months_for_term('midterm'), [])
        self.assertEqual(get_months_for_term(None), [])

    def test_every_month_covered_once(self):
        months = [m.month for term in ExamTerm for m in get_months_for_term(term)]
        self.assertEqual(sorted(months), list(range(12)))


class CalendarMonthTests(SimpleTestCase):

    def test_calendar_months(self):
        self.assertEqual(
            get_term_calendar_months('terminal3', '2025-2026'),
            [(2025, 11), (2025, 12), (2026, 1), (2026, 2), (2026, 3)],
        )

    def test_malformed_session(self):
        with self.assertLogs('academics.utils', level='WARNING'):
            self.assertEqual(get_term_calendar_months('terminal1', 'next year'), [])

    def test_start_year(self):
        self.assertEqual(get_session_start_year('2024-2025'), 2024)
        with self.assertLogs('academics.utils', level='WARNING'):
            self.assertIsNone(get_session_start_year(None))


class AttendanceTallyTests(SimpleTestCase):
    """Tests for counting attendance across daily records."""

    def test_tally(self):
        days = [
            {1: P, 2: A},
            {1: P, 2: L},
            {1: A, 2: P, 3: P},
        ]
        tally = tally_attendance(days, [1, 2])
        self.assertEqual(tally[1], AttendanceTally(2, 1))
        self.assertEqual(tally[2], AttendanceTally(1, 1))
        self.assertNotIn(3, tally)

    def test_tally_month_mapping_with_string_keys(self):
        month = {
            '2025-04-01': {'1': 'Present'},
            '2025-04-02': {'1': 'Absent'},
            '2025-04-03': {},
        }
        self.assertEqual(tally_attendance(month, [1]), {1: AttendanceTally(1, 1)})

    def test_unmarked_person(self):
        self.assertEqual(tally_attendance([{}], [9]), {9: AttendanceTally(0, 0)})

    def test_merge_tallies(self):
        merged = merge_tallies(
            {1: AttendanceTally(10, 2)},
            {1: AttendanceTally(8, 1), 2: AttendanceTally(5, 0)},
        )
        self.assertEqual(merged, {1: AttendanceTally(18, 3), 2: AttendanceTally(5, 0)})

    def test_percentage(self):
        self.assertEqual(attendance_percentage(AttendanceTally(3, 1)), 75.0)
        self.assertIsNone(attendance_percentage(AttendanceTally(0, 0)))

    def test_formatted_percentage(self):
        self.assertEqual(format_attendance_percentage(AttendanceTally(2, 1)), '66.67%')
        self.assertEqual(format_attendance_percentage(AttendanceTally(0, 0)), 'N/A')

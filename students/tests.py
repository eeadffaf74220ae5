from django.test import SimpleTestCase

from core.choices import Grade, StudentStatus
from finance.records import FeePayments
from gradebook.records import NumericSplitMark

from .records import Student


class StudentRecordTests(SimpleTestCase):
    """Tests for loading student documents."""

    def setUp(self):
        self.document = {
            'id': 2,
            'rollNo': 2,
            'name': 'Diya Patel',
            'grade': 'Class V',
            'status': 'Active',
            'feePayments': {
                'admissionFeePaid': True,
                'tuitionFeesPaid': {'April': True},
                'examFeesPaid': {'terminal1': True},
            },
            'academicPerformance': [
                {
                    'id': 'terminal1',
                    'name': 'First Terminal Exam',
                    'results': [{'subject': 'English', 'examMarks': 48, 'activityMarks': 35}],
                },
            ],
        }

    def test_from_dict(self):
        student = Student.from_dict(self.document)
        self.assertEqual(student.roll_no, 2)
        self.assertEqual(student.grade, Grade.V)
        self.assertTrue(student.is_active)
        self.assertIsInstance(student.fee_payments, FeePayments)
        self.assertTrue(student.fee_payments.is_tuition_paid('April'))
        self.assertFalse(student.fee_payments.is_tuition_paid('May'))

    def test_get_exam(self):
        student = Student.from_dict(self.document)
        exam = student.get_exam('terminal1')
        self.assertEqual(exam.results, [NumericSplitMark('English', 48, 35)])
        self.assertIsNone(student.get_exam('terminal3'))

    def test_missing_fee_record_stays_none(self):
        del self.document['feePayments']
        self.assertIsNone(Student.from_dict(self.document).fee_payments)

    def test_transferred_student_not_active(self):
        self.document['status'] = StudentStatus.TRANSFERRED
        self.assertFalse(Student.from_dict(self.document).is_active)

    def test_str(self):
        student = Student(id=1, roll_no=4, name='Aarav Sharma', grade=Grade.V)
        self.assertEqual(str(student), 'Aarav Sharma (Class V, Roll 4)')

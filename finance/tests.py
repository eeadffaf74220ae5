from django.test import SimpleTestCase, override_settings

from core.choices import ACADEMIC_MONTHS, Grade
from students.records import Student

from .records import FeePayments, FeeSet
from .utils import (
    calculate_dues, create_default_fee_payments, format_amount, get_fee_details,
)


def fully_paid():
    return FeePayments(
        admission_fee_paid=True,
        tuition_fees_paid={month: True for month in ACADEMIC_MONTHS},
        exam_fees_paid={'terminal1': True, 'terminal2': True, 'terminal3': True},
    )


class FeeDetailsTests(SimpleTestCase):
    """Tests for picking a grade's fee tier."""

    def test_tiers(self):
        self.assertEqual(get_fee_details(Grade.NURSERY), FeeSet(5000, 1500, 500))
        self.assertEqual(get_fee_details(Grade.II), FeeSet(5000, 1500, 500))
        self.assertEqual(get_fee_details(Grade.III), FeeSet(6000, 2000, 600))
        self.assertEqual(get_fee_details(Grade.VI), FeeSet(6000, 2000, 600))
        self.assertEqual(get_fee_details(Grade.VII), FeeSet(7000, 2500, 700))
        self.assertEqual(get_fee_details('Class X'), FeeSet(7000, 2500, 700))

    def test_unknown_grade_uses_first_tier(self):
        self.assertEqual(get_fee_details('Class XII'), FeeSet(5000, 1500, 500))

    def test_custom_structure(self):
        structure = {
            'set1': {'admissionFee': 100, 'tuitionFee': 10, 'examFee': 1},
            'set2': {'admissionFee': 200, 'tuitionFee': 20, 'examFee': 2},
            'set3': {'admissionFee': 300, 'tuitionFee': 30, 'examFee': 3},
        }
        self.assertEqual(get_fee_details(Grade.IV, structure), FeeSet(200, 20, 2))

    def test_custom_structure_with_other_tier_names(self):
        structure = {
            'primary': {'admissionFee': 1000, 'tuitionFee': 100, 'examFee': 10},
            'secondary': {'admissionFee': 2000, 'tuitionFee': 200, 'examFee': 20},
        }
        self.assertEqual(get_fee_details(Grade.V, structure), FeeSet(1000, 100, 10))

    def test_empty_structure(self):
        self.assertEqual(get_fee_details(Grade.V, {}), FeeSet(0, 0, 0))


class CalculateDuesTests(SimpleTestCase):
    """Tests for outstanding fee messages."""

    def test_no_payment_record_owes_everything(self):
        student = Student(id=1, roll_no=1, name='Aarav', grade=Grade.V)
        dues = calculate_dues(student)
        self.assertEqual(dues, [
            'Admission Fee (₹6,000)',
            'Tuition Fee: 12 month(s) pending (₹24,000)',
            'Exam Fee: Term 1, Term 2, Term 3 (₹1,800)',
        ])

    def test_fully_paid(self):
        student = Student(id=1, roll_no=1, name='Aarav', grade=Grade.V, fee_payments=fully_paid())
        self.assertEqual(calculate_dues(student), [])

    def test_partial_dues(self):
        payments = fully_paid()
        payments.tuition_fees_paid['February'] = False
        payments.tuition_fees_paid['March'] = False
        payments.exam_fees_paid['terminal3'] = False
        student = Student(id=2, roll_no=2, name='Diya', grade=Grade.IX, fee_payments=payments)
        self.assertEqual(calculate_dues(student), [
            'Tuition Fee: 2 month(s) pending (₹5,000)',
            'Exam Fee: Term 3 (₹700)',
        ])

    def test_months_missing_from_record_are_unpaid(self):
        payments = FeePayments(
            admission_fee_paid=True,
            tuition_fees_paid={'April': True},
            exam_fees_paid={'terminal1': True, 'terminal2': True, 'terminal3': True},
        )
        student = Student(id=3, roll_no=1, name='Zoya', grade=Grade.I, fee_payments=payments)
        self.assertEqual(calculate_dues(student), ['Tuition Fee: 11 month(s) pending (₹16,500)'])

    def test_stored_document(self):
        student = Student.from_dict({
            'id': 4,
            'rollNo': 1,
            'name': 'Mary',
            'grade': 'Class III',
            'feePayments': {
                'admissionFeePaid': False,
                'tuitionFeesPaid': {month: True for month in ACADEMIC_MONTHS},
                'examFeesPaid': {'terminal1': True, 'terminal2': True, 'terminal3': True},
            },
        })
        self.assertEqual(calculate_dues(student), ['Admission Fee (₹6,000)'])

    def test_dues_with_unmatched_tier_names(self):
        student = Student(id=5, roll_no=1, name='Aarav', grade=Grade.V)
        structure = {'primary': {'admissionFee': 1000, 'tuitionFee': 100, 'examFee': 10}}
        self.assertEqual(calculate_dues(student, structure), [
            'Admission Fee (₹1,000)',
            'Tuition Fee: 12 month(s) pending (₹1,200)',
            'Exam Fee: Term 1, Term 2, Term 3 (₹30)',
        ])

    @override_settings(FINANCE_CURRENCY_SYMBOL='Rs. ')
    def test_currency_symbol_setting(self):
        self.assertEqual(format_amount(12500), 'Rs. 12,500')


class DefaultFeePaymentsTests(SimpleTestCase):

    def test_new_admission(self):
        payments = create_default_fee_payments()
        self.assertTrue(payments.admission_fee_paid)
        self.assertEqual(len(payments.tuition_fees_paid), 12)
        self.assertFalse(any(payments.tuition_fees_paid.values()))
        self.assertFalse(any(payments.exam_fees_paid.values()))

    def test_unpaid_is_all_false(self):
        payments = FeePayments.unpaid()
        self.assertFalse(payments.admission_fee_paid)
        self.assertEqual(set(payments.exam_fees_paid), {'terminal1', 'terminal2', 'terminal3'})

    def test_to_dict(self):
        data = create_default_fee_payments().to_dict()
        self.assertTrue(data['admissionFeePaid'])
        self.assertFalse(data['examFeesPaid']['terminal2'])

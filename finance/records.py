from core.choices import ACADEMIC_MONTHS, ExamTerm


class FeeSet:
    """Amounts charged to one tier of grades."""

    def __init__(self, admission_fee, tuition_fee, exam_fee):
        self.admission_fee = admission_fee
        self.tuition_fee = tuition_fee
        self.exam_fee = exam_fee

    @classmethod
    def from_dict(cls, data):
        return cls(
            admission_fee=data.get('admission_fee', data.get('admissionFee', 0)),
            tuition_fee=data.get('tuition_fee', data.get('tuitionFee', 0)),
            exam_fee=data.get('exam_fee', data.get('examFee', 0)),
        )

    def __eq__(self, other):
        if not isinstance(other, FeeSet):
            return NotImplemented
        return (self.admission_fee, self.tuition_fee, self.exam_fee) == (
            other.admission_fee, other.tuition_fee, other.exam_fee
        )

    def __repr__(self):
        return (
            f"FeeSet(admission={self.admission_fee}, tuition={self.tuition_fee}, "
            f"exam={self.exam_fee})"
        )


class FeePayments:
    """
    A student's payment snapshot.

    Months and terms missing from the stored maps count as unpaid.
    """

    def __init__(self, admission_fee_paid=False, tuition_fees_paid=None, exam_fees_paid=None):
        self.admission_fee_paid = bool(admission_fee_paid)
        self.tuition_fees_paid = dict(tuition_fees_paid or {})
        self.exam_fees_paid = dict(exam_fees_paid or {})

    @classmethod
    def unpaid(cls):
        """Every fee outstanding."""
        return cls(
            admission_fee_paid=False,
            tuition_fees_paid={month: False for month in ACADEMIC_MONTHS},
            exam_fees_paid={term.value: False for term in ExamTerm},
        )

    @classmethod
    def from_dict(cls, data):
        return cls(
            admission_fee_paid=data.get('admission_fee_paid', data.get('admissionFeePaid', False)),
            tuition_fees_paid=data.get('tuition_fees_paid', data.get('tuitionFeesPaid')),
            exam_fees_paid=data.get('exam_fees_paid', data.get('examFeesPaid')),
        )

    def to_dict(self):
        return {
            'admissionFeePaid': self.admission_fee_paid,
            'tuitionFeesPaid': dict(self.tuition_fees_paid),
            'examFeesPaid': dict(self.exam_fees_paid),
        }

    def is_tuition_paid(self, month):
        return bool(self.tuition_fees_paid.get(month, False))

    def is_exam_fee_paid(self, term_id):
        return bool(self.exam_fees_paid.get(str(term_id), False))

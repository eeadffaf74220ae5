from core.choices import StudentStatus
from finance.records import FeePayments
from gradebook.records import Exam


class Student:
    """
    A student as handed over by the records store.

    ``fee_payments`` stays None for students admitted before fee tracking
    existed; fee helpers treat that as nothing paid.
    """

    def __init__(
        self,
        id,
        roll_no,
        name,
        grade,
        status=StudentStatus.ACTIVE,
        fee_payments=None,
        academic_performance=None,
    ):
        self.id = id
        self.roll_no = roll_no
        self.name = name
        self.grade = grade
        self.status = status
        self.fee_payments = fee_payments
        self.academic_performance = list(academic_performance or [])

    @classmethod
    def from_dict(cls, data):
        fee_payments = data.get('fee_payments', data.get('feePayments'))
        exams = data.get('academic_performance', data.get('academicPerformance')) or []
        return cls(
            id=data['id'],
            roll_no=data.get('roll_no', data.get('rollNo', 0)),
            name=data.get('name', ''),
            grade=data['grade'],
            status=data.get('status', StudentStatus.ACTIVE),
            fee_payments=FeePayments.from_dict(fee_payments) if fee_payments else None,
            academic_performance=[Exam.from_dict(e) for e in exams],
        )

    @property
    def is_active(self):
        return self.status == StudentStatus.ACTIVE

    def get_exam(self, exam_id):
        for exam in self.academic_performance:
            if exam.id == exam_id:
                return exam
        return None

    def __str__(self):
        return f"{self.name} ({self.grade}, Roll {self.roll_no})"

    def __repr__(self):
        return f"Student(id={self.id!r}, grade={self.grade!r}, roll_no={self.roll_no})"

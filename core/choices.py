from django.db import models
from django.utils.translation import gettext_lazy as _


class Grade(models.TextChoices):
    NURSERY = 'Nursery', _('Nursery')
    KINDERGARTEN = 'Kindergarten', _('Kindergarten')
    I = 'Class I', _('Class I')
    II = 'Class II', _('Class II')
    III = 'Class III', _('Class III')
    IV = 'Class IV', _('Class IV')
    V = 'Class V', _('Class V')
    VI = 'Class VI', _('Class VI')
    VII = 'Class VII', _('Class VII')
    VIII = 'Class VIII', _('Class VIII')
    IX = 'Class IX', _('Class IX')
    X = 'Class X', _('Class X')


# Promotion order, lowest first
GRADES_LIST = list(Grade)


class ExamTerm(models.TextChoices):
    TERMINAL1 = 'terminal1', _('First Terminal Exam')
    TERMINAL2 = 'terminal2', _('Second Terminal Exam')
    TERMINAL3 = 'terminal3', _('Final Terminal Exam')


FINAL_EXAM_ID = ExamTerm.TERMINAL3


class StudentStatus(models.TextChoices):
    ACTIVE = 'Active', _('Active')
    TRANSFERRED = 'Transferred', _('Transferred')


class AttendanceStatus(models.TextChoices):
    PRESENT = 'Present', _('Present')
    ABSENT = 'Absent', _('Absent')
    LEAVE = 'Leave', _('Leave')


# The academic year runs April to March
ACADEMIC_MONTHS = [
    'April', 'May', 'June', 'July', 'August', 'September',
    'October', 'November', 'December', 'January', 'February', 'March',
]


class ResultStatus(models.TextChoices):
    PASS = 'PASS', _('Pass')
    SIMPLE_PASS = 'SIMPLE PASS', _('Simple Pass')
    FAIL = 'FAIL', _('Fail')

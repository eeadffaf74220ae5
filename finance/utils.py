"""
Fee dues helpers.

Dues are returned as ready-to-print strings because the fee pages and the
transfer certificate show them verbatim.
"""
import logging

from core.choices import ACADEMIC_MONTHS, ExamTerm, Grade

from . import config
from .records import FeePayments, FeeSet

logger = logging.getLogger(__name__)


def get_fee_structure(fee_structure=None):
    """Fee tiers as {tier_name: FeeSet}, from the argument or settings."""
    raw = fee_structure if fee_structure is not None else config.FEE_STRUCTURE
    return {
        name: fee_set if isinstance(fee_set, FeeSet) else FeeSet.from_dict(fee_set)
        for name, fee_set in raw.items()
    }


def get_fee_details(grade, fee_structure=None):
    """
    FeeSet that applies to a grade.

    Falls back to the default tier when the grade is not in any tier, and
    to the first tier of the structure when that is missing too.
    """
    structure = get_fee_structure(fee_structure)
    tier = get_tier_name(grade)
    if tier in structure:
        return structure[tier]

    default_tier = config.DEFAULT_FEE_TIER
    if default_tier not in structure:
        default_tier = next(iter(structure), None)
    logger.debug(f"No fee tier for grade {grade!r}; using {default_tier}")
    if default_tier is None:
        return FeeSet(0, 0, 0)
    return structure[default_tier]


def format_amount(amount):
    return f"{config.CURRENCY_SYMBOL}{amount:,}"


def create_default_fee_payments():
    """Payment record for a new admission: admission fee settled, nothing else."""
    payments = FeePayments.unpaid()
    payments.admission_fee_paid = True
    return payments


def calculate_dues(student, fee_structure=None):
    """
    Outstanding fees for a student as printable messages.

    A student without a payment record owes everything.

    Args:
        student: Student record (uses grade and fee_payments)
        fee_structure: Optional {tier: FeeSet or dict}, defaults to settings

    Returns:
        list: Messages for admission, tuition and exam dues, in that order
    """
    fee_payments = getattr(student, 'fee_payments', None)
    if fee_payments is None:
        logger.debug(f"No fee record for student {getattr(student, 'id', None)}; all fees due")
        fee_payments = FeePayments.unpaid()

    fees = get_fee_details(student.grade, fee_structure)
    dues_messages = []

    if not fee_payments.admission_fee_paid:
        dues_messages.append(f"Admission Fee ({format_amount(fees.admission_fee)})")

    unpaid_months = [m for m in ACADEMIC_MONTHS if not fee_payments.is_tuition_paid(m)]
    if unpaid_months:
        amount = len(unpaid_months) * fees.tuition_fee
        dues_messages.append(
            f"Tuition Fee: {len(unpaid_months)} month(s) pending ({format_amount(amount)})"
        )

    unpaid_terms = [
        f"Term {number}"
        for number, term in enumerate(ExamTerm, start=1)
        if not fee_payments.is_exam_fee_paid(term.value)
    ]
    if unpaid_terms:
        amount = len(unpaid_terms) * fees.exam_fee
        dues_messages.append(
            f"Exam Fee: {', '.join(unpaid_terms)} ({format_amount(amount)})"
        )

    return dues_messages


def get_tier_name(grade):
    """Name of the fee tier a grade belongs to, None if unlisted."""
    try:
        grade_value = Grade(grade).value
    except ValueError:
        return None
    for tier, grades in config.FEE_TIERS.items():
        if grade_value in {str(g) for g in grades}:
            return tier
    return None

import re
import logging

from .choices import Grade, GRADES_LIST

logger = logging.getLogger(__name__)

ISO_DATE_RE = re.compile(r'^\d{4}-\d{2}-\d{2}$')
DISPLAY_DATE_RE = re.compile(r'^(\d{1,2})/(\d{1,2})/(\d{4})$')

STUDENT_ID_PREFIX = 'BMS'

GRADE_CODES = {
    Grade.NURSERY: 'NU',
    Grade.KINDERGARTEN: 'KG',
    Grade.I: '01',
    Grade.II: '02',
    Grade.III: '03',
    Grade.IV: '04',
    Grade.V: '05',
    Grade.VI: '06',
    Grade.VII: '07',
    Grade.VIII: '08',
    Grade.IX: '09',
    Grade.X: '10',
}


def format_date_for_display(iso_date):
    """
    Convert a stored YYYY-MM-DD date into DD/MM/YYYY.

    Values that are not ISO dates are returned unchanged so partially
    filled records still render something.
    """
    if not iso_date or not ISO_DATE_RE.match(iso_date):
        return iso_date or ''
    year, month, day = iso_date.split('-')
    return f"{day}/{month}/{year}"


def format_date_for_storage(display_date):
    """
    Convert a D/M/YYYY (or DD/MM/YYYY) date into YYYY-MM-DD.

    ISO input passes through untouched. Anything unparseable becomes ''.
    """
    if not display_date:
        return ''
    if ISO_DATE_RE.match(display_date):
        return display_date

    match = DISPLAY_DATE_RE.match(display_date)
    if not match:
        logger.debug(f"Unrecognised display date: {display_date!r}")
        return ''

    day, month, year = match.groups()
    return f"{year}-{month.zfill(2)}-{day.zfill(2)}"


def get_grade_code(grade):
    """Two-character code for a grade, 'XX' for anything unknown."""
    try:
        return GRADE_CODES[Grade(grade)]
    except ValueError:
        return 'XX'


def format_student_id(student, academic_year):
    """
    Build the printed student ID, e.g. BMS250501 for roll 1 of Class V
    in the 2025-2026 session.
    """
    year_suffix = academic_year[:4][-2:]
    grade_code = get_grade_code(student.grade)
    return f"{STUDENT_ID_PREFIX}{year_suffix}{grade_code}{str(student.roll_no).zfill(2)}"


def get_next_grade(current_grade):
    """Grade a student moves into on promotion, None after the last grade."""
    try:
        index = GRADES_LIST.index(current_grade)
    except ValueError:
        return None
    if index >= len(GRADES_LIST) - 1:
        return None
    return GRADES_LIST[index + 1]

"""
Attendance helpers for term report cards.

Attendance is stored one record per day per class, so a term's figures
come from walking every month that belongs to the term. Callers fetch
those months; the helpers here say which months to fetch and add up what
comes back.
"""
import logging
from collections import namedtuple

from core.choices import AttendanceStatus, ExamTerm

logger = logging.getLogger(__name__)

# month is 0-based (0 = January); year_offset is added to the session's start year
TermMonth = namedtuple('TermMonth', ['month', 'year_offset'])

AttendanceTally = namedtuple('AttendanceTally', ['present', 'absent'])

TERM_MONTHS = {
    ExamTerm.TERMINAL1: (
        TermMonth(3, 0), TermMonth(4, 0), TermMonth(5, 0), TermMonth(6, 0),
    ),
    ExamTerm.TERMINAL2: (
        TermMonth(7, 0), TermMonth(8, 0), TermMonth(9, 0),
    ),
    # The session crosses into the next calendar year in January
    ExamTerm.TERMINAL3: (
        TermMonth(10, 0), TermMonth(11, 0),
        TermMonth(0, 1), TermMonth(1, 1), TermMonth(2, 1),
    ),
}


def get_months_for_term(exam_id):
    """
    Months whose attendance counts towards an exam's term.

    Returns:
        list: TermMonth entries in calendar order, empty for unknown exams
    """
    try:
        term = ExamTerm(exam_id)
    except ValueError:
        logger.debug(f"Unknown exam id {exam_id!r}; no attendance months")
        return []
    return list(TERM_MONTHS[term])


def get_session_start_year(academic_year):
    """Start year of a 'YYYY-YYYY' session string, None if malformed."""
    try:
        return int(str(academic_year).split('-')[0])
    except (TypeError, ValueError):
        logger.warning(f"Malformed academic year: {academic_year!r}")
        return None


def get_term_calendar_months(exam_id, academic_year):
    """
    Calendar (year, month) pairs to fetch for a term, months numbered 1-12.

    >>> get_term_calendar_months('terminal3', '2025-2026')[-1]
    (2026, 3)
    """
    start_year = get_session_start_year(academic_year)
    if start_year is None:
        return []
    return [
        (start_year + tm.year_offset, tm.month + 1)
        for tm in get_months_for_term(exam_id)
    ]


def tally_attendance(daily_records, person_ids):
    """
    Count present and absent days per person.

    Args:
        daily_records: Iterable of {person_id: status} dicts, one per day.
            A mapping of date -> record (as returned per month) also works.
        person_ids: People to count; anyone else in the records is ignored

    Returns:
        dict: {person_id: AttendanceTally}. Leave and unmarked days are
        not counted either way.
    """
    if isinstance(daily_records, dict):
        daily_records = daily_records.values()

    counts = {pid: [0, 0] for pid in person_ids}
    for record in daily_records:
        for pid, count in counts.items():
            status = record.get(pid)
            if status is None:
                status = record.get(str(pid))
            if status == AttendanceStatus.PRESENT:
                count[0] += 1
            elif status == AttendanceStatus.ABSENT:
                count[1] += 1

    return {pid: AttendanceTally(*count) for pid, count in counts.items()}


def merge_tallies(*tallies):
    """Add up per-person tallies from several months."""
    merged = {}
    for tally in tallies:
        for pid, (present, absent) in tally.items():
            current = merged.get(pid, AttendanceTally(0, 0))
            merged[pid] = AttendanceTally(current.present + present, current.absent + absent)
    return merged


def attendance_percentage(tally):
    """Share of counted days present, None when no day was counted."""
    total_days = tally.present + tally.absent
    if total_days == 0:
        return None
    return tally.present / total_days * 100


def format_attendance_percentage(tally):
    percentage = attendance_percentage(tally)
    if percentage is None:
        return 'N/A'
    return f"{percentage:.2f}%"

"""
International Match Calendar

FIFA designates yearly windows in which friendlies count at full friendly
weight. The windows are approximated by fixed month/day ranges in
config.MATCH_CALENDAR_WINDOWS and do not depend on the year.
"""

from sumrank.config import MATCH_CALENDAR_WINDOWS
from sumrank.utils import coerce_datetime


def is_in_match_calendar_window(when, windows=MATCH_CALENDAR_WINDOWS) -> bool:
    """
    Check whether a match date falls inside a calendar window.

    Missing or unparseable dates are treated as outside every window, so a
    bad timestamp can only lower a friendly's importance, never inflate it.
    """
    moment = coerce_datetime(when)
    if moment is None:
        return False
    for month, first_day, last_day in windows:
        if moment.month == month and first_day <= moment.day <= last_day:
            return True
    return False

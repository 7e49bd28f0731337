import calendar
import logging
import re
from datetime import date
from typing import Any, Optional

logger = logging.getLogger(__name__)

# Wikidata precision codes
PRECISION_DAY = 11
PRECISION_MONTH = 10
PRECISION_YEAR = 9
PRECISION_DECADE = 8
PRECISION_CENTURY = 7

TIME_PATTERN = re.compile(r"^(?P<year>\d{1,16})-(?P<month>\d{2})-(?P<day>\d{2})")


def ordinal_suffix(n: int) -> str:
    if 11 <= n % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")


def _parse_year_month_day(time: str) -> Optional[tuple[int, int, int]]:
    """Split a Wikidata time string into year, month and day.

    Only the leading "+" is stripped. BCE dates ("-") are not parsed.
    """
    match = TIME_PATTERN.match(time[1:] if time.startswith("+") else time)
    if match is None:
        return None
    return int(match.group("year")), int(match.group("month")), int(match.group("day"))


def format_time(time: Any, precision: Any) -> str:
    """Render a Wikidata time value according to its precision.

    Day precision or finer gives "M/D/YYYY", month precision "Month YYYY",
    year precision the year, decade precision "1980s" and century
    precision "19th century". Anything else, and any value that does not
    parse, gives back the raw time string.
    """
    if not isinstance(time, str):
        return str(time)

    parts = _parse_year_month_day(time)
    if parts is None or not isinstance(precision, int) or isinstance(precision, bool):
        logger.debug(f"Keeping raw time {time!r} with precision {precision!r}")
        return time
    year, month, day = parts

    if precision >= PRECISION_DAY:
        try:
            parsed = date(year, month, day)
        except ValueError:
            logger.debug(f"Time {time!r} is not a calendar date")
            return time
        return f"{parsed.month}/{parsed.day}/{parsed.year}"

    if precision == PRECISION_MONTH:
        if not 1 <= month <= 12:
            return time
        return f"{calendar.month_name[month]} {year}"

    if precision == PRECISION_YEAR:
        return str(year)

    if precision == PRECISION_DECADE:
        return f"{year // 10 * 10}s"

    if precision == PRECISION_CENTURY:
        century = year // 100 + 1
        return f"{century}{ordinal_suffix(century)} century"

    return time

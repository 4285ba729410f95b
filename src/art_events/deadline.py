"""Deadline extraction for art event posts.

Tries an ordered table of compiled date patterns; the first pattern that
matches anywhere in the text wins, so table order encodes precedence. Only
the first match of each pattern is considered. A bare "M月D日" pattern sits
late in the table but can still pick up an unrelated date mentioned before
the real deadline; the order is kept as is because changing it changes which
date is reported.

Year-less dates take the reference year and roll over to next year when they
would lie more than ``rollover_days`` in the past. Days are only bounded by
31: "2/30" is accepted and normalized into the following month the same way
a calendar constructor overflows.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, tzinfo

logger = logging.getLogger(__name__)

END_OF_DAY = time(23, 59, 59)
MIDNIGHT = time(0, 0, 0)

# Reusable pattern fragments
_MD = r"([0-9]{1,2})[/月]([0-9]{1,2})"
_RANGE = r"[~\-〜～]"
_PERIOD = r"(?:開催期間|期間)"
_MARKER = r"(?:〆|締切|締め切り|デッドライン|deadline)"
# Stops "~1/15" from matching the head of "~1/150"; weekday brackets may follow
_TAIL = r"(?:[日\s）)（(]|$)"


@dataclass(frozen=True)
class DeadlinePattern:
    """A compiled date pattern and the groups holding its date parts."""

    name: str
    regex: re.Pattern[str]
    month_group: int
    day_group: int
    year_group: int | None = None


def _pattern(
    name: str,
    regex: str,
    month_group: int,
    day_group: int,
    year_group: int | None = None,
    flags: int = 0,
) -> DeadlinePattern:
    return DeadlinePattern(
        name=name,
        regex=re.compile(regex, flags),
        month_group=month_group,
        day_group=day_group,
        year_group=year_group,
    )


DEADLINE_PATTERNS: tuple[DeadlinePattern, ...] = (
    # 2024年1月15日
    _pattern("kanji_ymd", r"([0-9]{4})年([0-9]{1,2})月([0-9]{1,2})日", 2, 3, year_group=1),
    # 2024/1/15
    _pattern("slash_ymd", r"([0-9]{4})/([0-9]{1,2})/([0-9]{1,2})", 2, 3, year_group=1),
    # 〆: 1/15, 締切：1月15日
    _pattern("marker", rf"{_MARKER}[:\s：]*{_MD}日?", 1, 2, flags=re.IGNORECASE),
    # ～1/15
    _pattern("range_end", rf"{_RANGE}{_MD}{_TAIL}", 1, 2),
    # 開催期間: 2/1 ～ 2/16
    _pattern("period_range_end", rf"{_PERIOD}[:\s：]*.*?{_RANGE}{_MD}{_TAIL}", 1, 2, flags=re.IGNORECASE),
    # 期間: 2/16 まで
    _pattern("period_date", rf"{_PERIOD}[:\s：]*.*?{_MD}{_TAIL}", 1, 2, flags=re.IGNORECASE),
    # 1月15日
    _pattern("kanji_md", r"([0-9]{1,2})月([0-9]{1,2})日", 1, 2),
    # (2/15)
    _pattern("parenthesized", rf"[（(]{_MD}[)）]", 1, 2),
    # 2/15まで
    _pattern("until", rf"{_MD}日?(?:まで| まで)", 1, 2),
)

# Lean profile: fewer patterns, stricter separators, no weekday tails
_LEAN_RANGE = r"[~～\-]"
_LEAN_TAIL = r"(?:日|\s|$)"

LEAN_DEADLINE_PATTERNS: tuple[DeadlinePattern, ...] = (
    DEADLINE_PATTERNS[0],
    DEADLINE_PATTERNS[1],
    DEADLINE_PATTERNS[2],
    _pattern("range_end", rf"{_LEAN_RANGE}{_MD}{_LEAN_TAIL}", 1, 2),
    _pattern("period_range_end", rf"{_PERIOD}[:\s：].*?{_LEAN_RANGE}{_MD}{_LEAN_TAIL}", 1, 2, flags=re.IGNORECASE),
    _pattern("period_date", rf"{_PERIOD}[:\s：].*?{_MD}{_LEAN_TAIL}", 1, 2, flags=re.IGNORECASE),
    DEADLINE_PATTERNS[6],
)


def _calendar_datetime(
    year: int,
    month: int,
    day: int,
    time_of_day: time,
    tz: tzinfo | None,
) -> datetime | None:
    """Build a datetime, letting day overflow into the following month."""
    try:
        first = datetime.combine(date(year, month, 1), time_of_day, tzinfo=tz)
        return first + timedelta(days=day - 1)
    except (ValueError, OverflowError):
        return None


class DeadlineExtractor:
    """
    Extracts a deadline from post text.

    Args:
        patterns: Ordered pattern table. Defaults to DEADLINE_PATTERNS.
        time_of_day: Time attached to the matched day. End of day keeps
            same-day deadlines open until the day is over.
        rollover_days: Year-less dates further in the past than this move
            to next year.

    Usage:
        extractor = DeadlineExtractor()
        extractor.extract("〆切 12/15", now=datetime(2024, 3, 1))
        # datetime(2024, 12, 15, 23, 59, 59)
    """

    def __init__(
        self,
        patterns: tuple[DeadlinePattern, ...] | None = None,
        time_of_day: time = END_OF_DAY,
        rollover_days: int = 180,
    ):
        self._patterns = patterns or DEADLINE_PATTERNS
        self._time_of_day = time_of_day
        self._rollover = timedelta(days=rollover_days)

    @property
    def patterns(self) -> tuple[DeadlinePattern, ...]:
        return self._patterns

    def extract(self, text: str | None, now: datetime) -> datetime | None:
        """
        Extract the deadline.

        Args:
            text: Post text.
            now: Reference instant for year inference. The result carries
                its tzinfo.

        Returns:
            Deadline datetime, or None if no pattern yields a valid date.
        """
        if not text:
            return None

        for pattern in self._patterns:
            match = pattern.regex.search(text)
            if match is None:
                continue

            month = int(match.group(pattern.month_group))
            day = int(match.group(pattern.day_group))
            if not (1 <= month <= 12 and 1 <= day <= 31):
                logger.debug(f"Pattern {pattern.name} matched invalid date {month}/{day}")
                continue

            if pattern.year_group is not None:
                year = int(match.group(pattern.year_group))
            else:
                year = self._infer_year(month, day, now)

            deadline = _calendar_datetime(year, month, day, self._time_of_day, now.tzinfo)
            if deadline is None:
                continue

            logger.debug(f"Deadline {deadline.isoformat()} from pattern {pattern.name}")
            return deadline

        return None

    def _infer_year(self, month: int, day: int, now: datetime) -> int:
        """Pick the year for a year-less date relative to now."""
        year = now.year
        tentative = _calendar_datetime(year, month, day, self._time_of_day, now.tzinfo)
        if tentative is not None and tentative < now and now - tentative > self._rollover:
            year += 1
        return year

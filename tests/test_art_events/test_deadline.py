"""Tests for DeadlineExtractor."""

from datetime import datetime, timezone

import pytest

from src.art_events.deadline import (
    DEADLINE_PATTERNS,
    LEAN_DEADLINE_PATTERNS,
    MIDNIGHT,
    DeadlineExtractor,
)


class TestYearBearingPatterns:
    def test_kanji_full_date(self, deadline_extractor, reference_now):
        result = deadline_extractor.extract("2025年1月15日締切", reference_now)
        assert result == datetime(2025, 1, 15, 23, 59, 59)

    def test_slash_full_date(self, deadline_extractor, reference_now):
        result = deadline_extractor.extract("受付終了 2023/12/01", reference_now)
        # Explicit years are never rolled, even far in the past
        assert result == datetime(2023, 12, 1, 23, 59, 59)

    def test_full_date_beats_marker(self, deadline_extractor, reference_now):
        result = deadline_extractor.extract("〆 5/5\n最終締切 2024/12/01", reference_now)
        assert result == datetime(2024, 12, 1, 23, 59, 59)


class TestMarkerPattern:
    def test_slash(self, deadline_extractor, reference_now):
        result = deadline_extractor.extract("締切：12/15", reference_now)
        assert result.isoformat() == "2024-12-15T23:59:59"

    def test_kanji(self, deadline_extractor, reference_now):
        result = deadline_extractor.extract("締め切り 4月10日", reference_now)
        assert result == datetime(2024, 4, 10, 23, 59, 59)

    def test_english_case_insensitive(self, deadline_extractor, reference_now):
        result = deadline_extractor.extract("DEADLINE: 4/30", reference_now)
        assert result == datetime(2024, 4, 30, 23, 59, 59)


class TestYearInference:
    def test_recent_past_stays_in_current_year(self, deadline_extractor, reference_now):
        # 46 days before the reference instant: within the rollover window
        result = deadline_extractor.extract("〆 1/15", reference_now)
        assert result.isoformat() == "2024-01-15T23:59:59"

    def test_far_past_rolls_to_next_year(self, deadline_extractor):
        result = deadline_extractor.extract("〆 1/15", datetime(2024, 9, 1))
        assert result.isoformat() == "2025-01-15T23:59:59"

    def test_future_date_not_rolled(self, deadline_extractor, reference_now):
        result = deadline_extractor.extract("〆 12/15", reference_now)
        assert result.isoformat() == "2024-12-15T23:59:59"

    def test_same_day_is_still_open(self, deadline_extractor):
        now = datetime(2024, 6, 1, 18, 0, 0)
        result = deadline_extractor.extract("〆 6/1", now)
        assert result == datetime(2024, 6, 1, 23, 59, 59)
        assert result > now

    def test_year_end_posting(self, deadline_extractor):
        result = deadline_extractor.extract("締切：1/10", datetime(2024, 12, 20))
        assert result == datetime(2025, 1, 10, 23, 59, 59)

    def test_custom_rollover_window(self, reference_now):
        extractor = DeadlineExtractor(rollover_days=30)
        result = extractor.extract("〆 1/15", reference_now)
        assert result == datetime(2025, 1, 15, 23, 59, 59)

    def test_aware_reference_keeps_tzinfo(self, deadline_extractor):
        now = datetime(2024, 3, 1, tzinfo=timezone.utc)
        result = deadline_extractor.extract("〆 12/15", now)
        assert result.isoformat() == "2024-12-15T23:59:59+00:00"


class TestRangeAndPeriodPatterns:
    def test_range_end_with_weekday(self, deadline_extractor, reference_now):
        result = deadline_extractor.extract("受付 3/1～3/20(水)", reference_now)
        assert result == datetime(2024, 3, 20, 23, 59, 59)

    def test_range_end_wave_dash(self, deadline_extractor, reference_now):
        result = deadline_extractor.extract("受付 3/1〜3/20", reference_now)
        assert result == datetime(2024, 3, 20, 23, 59, 59)

    def test_range_end_not_followed_by_digit(self, deadline_extractor, reference_now):
        assert deadline_extractor.extract("番号~1/150", reference_now) is None

    def test_period_bare_date(self, deadline_extractor, reference_now):
        result = deadline_extractor.extract("期間：4月10日まで", reference_now)
        assert result == datetime(2024, 4, 10, 23, 59, 59)

    def test_period_with_spaced_range_takes_first_date(self, deadline_extractor, reference_now):
        # "～ 2/16" has a space after the range marker, so only the bare
        # period pattern matches and it takes the first date
        result = deadline_extractor.extract("開催期間：3/5 ～ 3/16", reference_now)
        assert result == datetime(2024, 3, 5, 23, 59, 59)


class TestLaterPatterns:
    def test_bare_kanji_date(self, deadline_extractor, reference_now):
        result = deadline_extractor.extract("5月5日に展示します", reference_now)
        assert result == datetime(2024, 5, 5, 23, 59, 59)

    def test_parenthesized(self, deadline_extractor, reference_now):
        result = deadline_extractor.extract("応募は（6/30）まで", reference_now)
        assert result == datetime(2024, 6, 30, 23, 59, 59)

    def test_until(self, deadline_extractor, reference_now):
        result = deadline_extractor.extract("7/7まで受付", reference_now)
        assert result == datetime(2024, 7, 7, 23, 59, 59)

    def test_table_order_beats_text_order(self, deadline_extractor, reference_now):
        # The parenthesized date comes first in the text, but bare 月日
        # precedes it in the pattern table
        result = deadline_extractor.extract("（5/5）から4月1日", reference_now)
        assert result == datetime(2024, 4, 1, 23, 59, 59)


class TestValidation:
    def test_invalid_month_and_day(self, deadline_extractor, reference_now):
        assert deadline_extractor.extract("締切：13/40", reference_now) is None

    def test_invalid_match_falls_through(self, deadline_extractor, reference_now):
        result = deadline_extractor.extract("締切：13/40\n5月5日", reference_now)
        assert result == datetime(2024, 5, 5, 23, 59, 59)

    def test_invalid_full_date_falls_through(self, deadline_extractor, reference_now):
        result = deadline_extractor.extract("2024年13月1日 (6/30)", reference_now)
        assert result == datetime(2024, 6, 30, 23, 59, 59)

    def test_day_overflow_is_lenient(self, deadline_extractor):
        result = deadline_extractor.extract("〆 2/30", datetime(2023, 1, 10))
        assert result == datetime(2023, 3, 2, 23, 59, 59)

    def test_day_zero_rejected(self, deadline_extractor, reference_now):
        assert deadline_extractor.extract("締切：5/0", reference_now) is None

    def test_no_date(self, deadline_extractor, reference_now):
        assert deadline_extractor.extract("いつでも参加OK", reference_now) is None

    def test_empty(self, deadline_extractor, reference_now):
        assert deadline_extractor.extract("", reference_now) is None


class TestPatternTable:
    def test_full_table_order(self):
        assert [p.name for p in DEADLINE_PATTERNS] == [
            "kanji_ymd",
            "slash_ymd",
            "marker",
            "range_end",
            "period_range_end",
            "period_date",
            "kanji_md",
            "parenthesized",
            "until",
        ]

    @pytest.mark.parametrize("pattern", DEADLINE_PATTERNS, ids=lambda p: p.name)
    def test_year_group_only_on_full_dates(self, pattern):
        assert (pattern.year_group is not None) == pattern.name.endswith("_ymd")


class TestLeanPatterns:
    @pytest.fixture
    def lean_extractor(self):
        return DeadlineExtractor(patterns=LEAN_DEADLINE_PATTERNS, time_of_day=MIDNIGHT)

    def test_midnight(self, lean_extractor, reference_now):
        result = lean_extractor.extract("締切：12/15", reference_now)
        assert result.isoformat() == "2024-12-15T00:00:00"

    def test_weekday_bracket_not_accepted(self, lean_extractor, reference_now):
        assert lean_extractor.extract("受付 3/1～3/20(水)", reference_now) is None

    def test_no_parenthesized_pattern(self, lean_extractor, reference_now):
        assert lean_extractor.extract("応募は（6/30）まで", reference_now) is None

# src/boatlog/utils/time.py
"""Time and date handling utilities."""

from __future__ import annotations

from datetime import UTC, date, datetime, time


class TimeUtils:
    """Time-related utility functions.

    Centralized utilities for working with dates and times:
    - Current time retrieval with the local timezone attached
    - Combining separately supplied dates and times
    """

    @staticmethod
    def now_localized() -> datetime:
        """Get current datetime with local timezone.

        Returns:
            Current datetime with local timezone
        """
        return datetime.now(UTC).astimezone()

    @staticmethod
    def combine_local(
        day: date | None, time_of_day: time | None, now: datetime | None = None
    ) -> datetime:
        """Build a local, timezone-aware datetime from optional parts.

        Missing parts are filled from a single reading of the clock, so the
        date and time defaults can never straddle midnight.

        Args:
            day: Calendar date (default: today)
            time_of_day: Wall-clock time (default: now)
            now: Clock reading to default from (default: current local time)

        Returns:
            Datetime in the local system timezone
        """
        current = now or TimeUtils.now_localized()
        naive = datetime.combine(
            current.date() if day is None else day,
            current.time() if time_of_day is None else time_of_day,
        )
        # astimezone() on a naive value interprets it as local time
        return naive.astimezone()


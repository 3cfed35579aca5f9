"""Tests for dashboard statistics."""

from datetime import date, datetime
from types import SimpleNamespace

from dental_clinic.domain.scheduling.statistics import (
    AppointmentStatistics,
    compute_statistics,
    week_start,
)


def appt(day, status, time="09:00"):
    return SimpleNamespace(date=day, time=time, status=status)


class TestWeekStart:
    def test_weekdays_map_to_monday(self):
        assert week_start(date(2024, 6, 10)) == date(2024, 6, 10)  # Monday
        assert week_start(date(2024, 6, 12)) == date(2024, 6, 10)  # Wednesday
        assert week_start(date(2024, 6, 15)) == date(2024, 6, 10)  # Saturday

    def test_sunday_belongs_to_previous_monday(self):
        assert week_start(date(2024, 6, 16)) == date(2024, 6, 10)


class TestComputeStatistics:
    def test_reference_scenario(self):
        appointments = [
            appt(date(2024, 6, 10), "confirmed"),  # Monday, same week
            appt(date(2024, 6, 14), "pending"),  # Friday, same week
            appt(date(2024, 5, 1), "canceled"),
        ]

        stats = compute_statistics(datetime(2024, 6, 12), appointments)

        assert stats.week_count == 2
        assert stats.today_count == 0
        assert stats.canceled_count == 1
        assert stats.pending_count == 1

    def test_today_counts_only_same_day(self):
        appointments = [
            appt(date(2024, 6, 12), "pending", "08:00"),
            appt(date(2024, 6, 12), "confirmed", "15:00"),
            appt(date(2024, 6, 12), "canceled", "16:00"),
            appt(date(2024, 6, 13), "pending"),
        ]

        stats = compute_statistics(datetime(2024, 6, 12, 10, 0), appointments)

        assert stats.today_count == 2

    def test_canceled_are_excluded_from_windows(self):
        appointments = [appt(date(2024, 6, 12), "canceled"), appt(date(2024, 6, 13), "canceled")]

        stats = compute_statistics(datetime(2024, 6, 12), appointments)

        assert stats.today_count == 0
        assert stats.week_count == 0
        assert stats.pending_count == 0
        assert stats.canceled_count == 2

    def test_week_is_bounded(self):
        appointments = [
            appt(date(2024, 6, 9), "confirmed"),  # Sunday before
            appt(date(2024, 6, 16), "confirmed"),  # Sunday, last day of week
            appt(date(2024, 6, 17), "confirmed"),  # next Monday
        ]

        stats = compute_statistics(datetime(2024, 6, 12), appointments)

        assert stats.week_count == 1

    def test_sunday_now_uses_week_started_six_days_before(self):
        appointments = [appt(date(2024, 6, 10), "pending"), appt(date(2024, 6, 17), "pending")]

        stats = compute_statistics(datetime(2024, 6, 16, 9, 0), appointments)

        assert stats.week_count == 1

    def test_pending_count_is_upcoming_load_not_status(self):
        appointments = [
            appt(date(2024, 6, 20), "confirmed"),
            appt(date(2024, 6, 21), "pending"),
            appt(date(2024, 6, 1), "pending"),  # past
        ]

        stats = compute_statistics(datetime(2024, 6, 12, 10, 0), appointments)

        assert stats.pending_count == 2

    def test_pending_count_leaves_out_today_once_past_midnight(self):
        appointments = [
            appt(date(2024, 6, 12), "confirmed", "08:00"),
            appt(date(2024, 6, 12), "pending", "14:00"),  # later today, still left out
            appt(date(2024, 6, 13), "pending", "08:00"),
        ]

        assert compute_statistics(datetime(2024, 6, 12, 10, 0), appointments).pending_count == 1
        assert compute_statistics(datetime(2024, 6, 12, 0, 0), appointments).pending_count == 3

    def test_plain_date_compares_by_day(self):
        appointments = [appt(date(2024, 6, 12), "pending", "08:00")]

        stats = compute_statistics(date(2024, 6, 12), appointments)

        assert stats.pending_count == 1
        assert stats.today_count == 1

    def test_empty(self):
        stats = compute_statistics(datetime(2024, 6, 12), [])

        assert stats == AppointmentStatistics(
            today_count=0, week_count=0, pending_count=0, canceled_count=0
        )

"""
Unit tests for pickup slot generation and validation.
"""

from datetime import datetime, time

import pytest

from liquorstore.models.store import BusinessHours, PickupSlot
from liquorstore.services.pickup_service import (PickupSlotPlanner,
                                                 generate_slots,
                                                 is_valid_slot,
                                                 parse_business_hours,
                                                 pickup_datetime)

EIGHT_TO_NINE = BusinessHours(open=time(8, 0), close=time(9, 0))


def at(hour, minute, second=0):
    return datetime(2026, 10, 19, hour, minute, second)


def values(slots):
    return [s.value for s in slots]


class TestGenerateSlots:
    """Tests for generate_slots()."""

    def test_rounds_now_up_to_next_quarter_hour(self):
        """08:05 starts at 08:15; 09:00 is the closing edge and not offered."""
        slots = generate_slots(EIGHT_TO_NINE, at(8, 5))
        assert values(slots) == ["08:15", "08:45"]

    def test_before_opening_starts_at_open(self):
        assert values(generate_slots(EIGHT_TO_NINE, at(7, 40))) == ["08:00", "08:30"]

    def test_closing_time_is_not_bookable(self):
        hours = BusinessHours(open=time(8, 0), close=time(8, 30))
        assert values(generate_slots(hours, at(6, 0))) == ["08:00"]

    def test_now_on_a_quarter_hour_is_kept(self):
        assert values(generate_slots(EIGHT_TO_NINE, at(8, 45))) == ["08:45"]

    def test_elapsed_seconds_push_to_next_quarter(self):
        """08:45:30 is past 08:45, so the next offer is 09:00, which is closing."""
        assert generate_slots(EIGHT_TO_NINE, at(8, 45, 30)) == []

    def test_rounding_carries_into_next_hour(self):
        hours = BusinessHours(open=time(10, 0), close=time(13, 0))
        assert values(generate_slots(hours, at(10, 50))) == ["11:00", "11:30", "12:00", "12:30"]

    def test_steps_are_thirty_minutes_from_start(self):
        hours = BusinessHours(open=time(8, 0), close=time(10, 0))
        assert values(generate_slots(hours, at(8, 5))) == ["08:15", "08:45", "09:15", "09:45"]

    def test_opening_minute_is_respected(self):
        hours = BusinessHours(open=time(8, 10), close=time(9, 30))
        assert values(generate_slots(hours, at(7, 0))) == ["08:15", "08:45", "09:15"]

    def test_after_close_is_empty(self):
        assert generate_slots(EIGHT_TO_NINE, at(9, 10)) == []

    def test_rounding_past_midnight_is_empty(self):
        hours = BusinessHours(open=time(20, 0), close=time(23, 59))
        assert generate_slots(hours, at(23, 50)) == []

    @pytest.mark.parametrize(
        "hours",
        [
            None,
            BusinessHours(),
            BusinessHours(open=time(8, 0)),
            BusinessHours(close=time(9, 0)),
        ],
    )
    def test_missing_hours_means_closed(self, hours):
        assert generate_slots(hours, at(8, 5)) == []

    def test_labels_are_twelve_hour(self):
        hours = BusinessHours(open=time(11, 30), close=time(13, 0))
        slots = generate_slots(hours, at(6, 0))
        assert slots == [
            PickupSlot(value="11:30", label="11:30 AM"),
            PickupSlot(value="12:00", label="12:00 PM"),
            PickupSlot(value="12:30", label="12:30 PM"),
        ]

    def test_slots_are_never_before_now(self):
        hours = BusinessHours(open=time(8, 0), close=time(22, 0))
        now = at(14, 52)
        for slot in generate_slots(hours, now):
            assert slot.value >= "14:52"


class TestIsValidSlot:
    """Tests for is_valid_slot()."""

    def test_exact_member(self):
        slots = generate_slots(EIGHT_TO_NINE, at(8, 5))
        assert is_valid_slot("08:45", slots)

    def test_not_a_member(self):
        slots = generate_slots(EIGHT_TO_NINE, at(8, 5))
        assert not is_valid_slot("08:30", slots)

    def test_no_fuzzy_matching(self):
        slots = generate_slots(EIGHT_TO_NINE, at(8, 5))
        assert not is_valid_slot("8:15", slots)

    @pytest.mark.parametrize("candidate", [None, ""])
    def test_empty_candidate(self, candidate):
        slots = generate_slots(EIGHT_TO_NINE, at(8, 5))
        assert not is_valid_slot(candidate, slots)

    def test_nothing_is_valid_when_closed(self):
        assert not is_valid_slot("08:15", [])


class TestBusinessHoursParsing:
    def test_parse_stored_hours(self):
        hours = parse_business_hours({"open": "10:00", "close": "21:30"})
        assert hours == BusinessHours(open=time(10, 0), close=time(21, 30))

    def test_malformed_value_counts_as_unset(self):
        hours = parse_business_hours({"open": "10:00", "close": "late"})
        assert hours.close is None
        assert generate_slots(hours, at(11, 0)) == []

    def test_missing_mapping(self):
        assert parse_business_hours(None) == BusinessHours()


class TestPickupDatetime:
    def test_same_day(self):
        assert pickup_datetime("15:45", at(15, 5)) == datetime(2026, 10, 19, 15, 45)

    def test_invalid_value(self):
        with pytest.raises(ValueError, match="Invalid pickup time"):
            pickup_datetime("soon", at(15, 5))


class TestPickupSlotPlanner:
    def test_open_and_closed(self):
        planner = PickupSlotPlanner(EIGHT_TO_NINE)
        assert planner.is_open(at(8, 5))
        assert not planner.is_open(at(9, 5))
        assert values(planner.slots(at(8, 5))) == ["08:15", "08:45"]

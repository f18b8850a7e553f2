# services/pickup_service.py
"""
pickup_service.py

Same-day pickup scheduling.

Slots start at the later of opening time and "now", rounded up to the next
quarter hour, and repeat every 30 minutes while they are strictly before
closing time. Example with business hours 08:00-09:00:

    now 07:40 -> 08:00, 08:30
    now 08:05 -> 08:15, 08:45
    now 08:50 -> (none, store closed for today)

An empty slot list is the "store closed" state, not an error.

Closing time itself is never offered: a store closing at 22:00 has a last
slot strictly before 22:00, whatever the rounding lands on.
"""

from datetime import datetime, time

from liquorstore.models.store import BusinessHours, PickupSlot
from liquorstore.utils.timeutil import format_12h, format_hhmm, parse_hhmm

ROUND_TO_MINUTES = 15
SLOT_STEP_MINUTES = 30
MINUTES_PER_DAY = 24 * 60


def parse_business_hours(data: dict | None) -> BusinessHours:
    return BusinessHours.from_record(data)


def _minutes(t: time) -> int:
    return t.hour * 60 + t.minute


def earliest_start(hours: BusinessHours, now: datetime) -> int:
    # A partially elapsed minute is already gone.
    now_minutes = _minutes(now.time())
    if now.second or now.microsecond:
        now_minutes += 1
    start = max(_minutes(hours.open), now_minutes)
    return -(-start // ROUND_TO_MINUTES) * ROUND_TO_MINUTES


def generate_slots(hours: BusinessHours | None, now: datetime) -> list[PickupSlot]:
    if hours is None or not hours.is_set:
        return []

    close = min(_minutes(hours.close), MINUTES_PER_DAY)
    slots: list[PickupSlot] = []
    minute = earliest_start(hours, now)
    while minute < close:
        t = time(minute // 60, minute % 60)
        slots.append(PickupSlot(value=format_hhmm(t), label=format_12h(t)))
        minute += SLOT_STEP_MINUTES
    return slots


def is_valid_slot(candidate: str | None, slots: list[PickupSlot]) -> bool:
    if not candidate:
        return False
    return any(slot.value == candidate for slot in slots)


def pickup_datetime(slot_value: str, now: datetime) -> datetime:
    # Pickups are same-day: the slot's time on now's calendar date.
    t = parse_hhmm(slot_value)
    if t is None:
        raise ValueError(f"Invalid pickup time: {slot_value!r}")
    return datetime.combine(now.date(), t, tzinfo=now.tzinfo)


class PickupSlotPlanner:
    # Binds one store's business hours; the clock is passed per call.

    def __init__(self, hours: BusinessHours | None):
        self.hours = hours

    def slots(self, now: datetime) -> list[PickupSlot]:
        return generate_slots(self.hours, now)

    def is_open(self, now: datetime) -> bool:
        return bool(self.slots(now))

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Slot:
    slot_id: str
    start_time: str  # HH:MM[:SS], venue local time
    end_time: str

    @property
    def label(self) -> str:
        return f"{format_time_of_day(self.start_time)} - {format_time_of_day(self.end_time)}"


def format_time_of_day(value: str) -> str:
    """Render "18:30:00" as "6:30 PM"."""
    hours, minutes = value.split(":")[:2]
    hour = int(hours)
    suffix = "PM" if hour >= 12 else "AM"
    return f"{hour % 12 or 12}:{minutes} {suffix}"

"""Patients and cancellation requests."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class PatientType(IntEnum):
    NORMAL = 1
    SPECIAL = 2
    EMERGENCY = 3


@dataclass(eq=False)
class Patient:
    """A request for an ambulance, or a cancellation of one."""

    ptype: PatientType | None = None
    pid: int = 0
    hid: int = 0
    distance: int = 0
    request_time: int = 0
    severity: int = 0
    pickup_time: int = 0
    waiting_time: int = 0
    cancellation_time: int = 0

    def calculate_waiting_time(self) -> int:
        """Set and return the time between request and pickup."""
        self.waiting_time = self.pickup_time - self.request_time
        return self.waiting_time


def cancellation_request(pid: int, hid: int, cancellation_time: int) -> Patient:
    """Build the record describing a cancellation of patient ``pid``."""
    return Patient(pid=pid, hid=hid, cancellation_time=cancellation_time)
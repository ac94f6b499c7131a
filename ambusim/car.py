"""Ambulance cars."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

from .patient import Patient


class CarType(IntEnum):
    NORMAL = 1
    SPECIAL = 2


class CarStatus(IntEnum):
    READY = 1
    ASSIGNED = 2
    LOADED = 3


@dataclass(eq=False)
class Car:
    """An ambulance belonging to a hospital."""

    DEFAULT_NORMAL_SPEED: ClassVar[int] = 5
    DEFAULT_SPECIAL_SPEED: ClassVar[int] = 11

    car_type: CarType = CarType.NORMAL
    speed: int = 0
    hid: int = 0
    status: CarStatus = CarStatus.READY
    busy_time: int = 0
    arrival_time: int = 0
    patient: Patient | None = None
    pickup_time: int = 0
    finish_time: int = 0

    def effective_speed(self) -> int:
        """Configured speed, or the default for the car type if none is set."""
        if self.speed <= 0:
            if self.car_type == CarType.NORMAL:
                return self.DEFAULT_NORMAL_SPEED
            return self.DEFAULT_SPECIAL_SPEED
        return self.speed

    def calculate_busy_time(self) -> int:
        """Add the latest trip (finish minus arrival) to the busy time and return it."""
        self.busy_time += self.finish_time - self.arrival_time
        return self.busy_time

    def remove_patient(self) -> None:
        self.patient = None
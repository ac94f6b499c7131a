"""Cancellation requests and their effect on cars already dispatched."""

from __future__ import annotations

from .car import Car
from .patient import Patient
from .queues import LinkedQueue, PriorityQueue


def _same_patient(held: Patient | None, patient: Patient) -> bool:
    return held is not None and (held is patient or held.pid == patient.pid)


def _find_car(cars: PriorityQueue[Car], patient: Patient) -> Car | None:
    return next((car for car, _ in cars if _same_patient(car.patient, patient)), None)


class CancelQueue(LinkedQueue[Patient]):
    """Queue of patients whose requests are to be cancelled."""

    def _find(self, patient: Patient) -> Patient | None:
        return next((entry for entry in self if _same_patient(entry, patient)), None)

    def _discard(self, patient: Patient) -> None:
        entry = self._find(patient)
        if entry is not None:
            self.remove(entry)

    def cancel_before_car_moves(
        self, patient: Patient, out_cars: PriorityQueue[Car], back_cars: PriorityQueue[Car]
    ) -> bool:
        """Drop a queued cancellation whose patient no car has been given yet."""
        entry = self._find(patient)
        if entry is None:
            return False
        if _find_car(out_cars, patient) or _find_car(back_cars, patient):
            return False
        self.remove(entry)
        return True

    def cancel_before_pickup(
        self, patient: Patient, out_cars: PriorityQueue[Car], back_cars: PriorityQueue[Car]
    ) -> bool:
        """Turn back a car still on its way to the patient."""
        car = _find_car(out_cars, patient)
        if car is None or _find_car(back_cars, patient) is not None:
            return False
        out_cars.remove(car)
        back_cars.enqueue(car, -car.finish_time)
        self._discard(patient)
        return True

    def cancel_on_car(
        self, patient: Patient, out_cars: PriorityQueue[Car], back_cars: PriorityQueue[Car]
    ) -> bool:
        """Reschedule a returning car that carries the patient by its finish time."""
        car = _find_car(back_cars, patient)
        if car is None:
            return False
        back_cars.remove(car)
        back_cars.enqueue(car, -car.finish_time)
        self._discard(patient)
        return True
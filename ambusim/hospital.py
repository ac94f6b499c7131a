"""Hospitals: waiting patients and the ambulances parked there."""

from __future__ import annotations

from .car import Car, CarStatus, CarType
from .patient import Patient, PatientType
from .queues import LinkedQueue, PriorityQueue


class Hospital:
    """A hospital that queues patients and dispatches its free cars to them."""

    def __init__(
        self,
        hospital_id: int,
        total_normal_cars: int,
        total_special_cars: int,
        normal_speed: int,
        special_speed: int,
    ) -> None:
        self.hospital_id = hospital_id
        self.total_normal_cars = total_normal_cars
        self.total_special_cars = total_special_cars
        self.normal_speed = normal_speed
        self.special_speed = special_speed

        self._normal_patients: LinkedQueue[Patient] = LinkedQueue()
        self._special_patients: LinkedQueue[Patient] = LinkedQueue()
        self._emergency_patients: PriorityQueue[Patient] = PriorityQueue()
        self._normal_cars: LinkedQueue[Car] = LinkedQueue()
        self._special_cars: LinkedQueue[Car] = LinkedQueue()

        for _ in range(total_normal_cars):
            self._normal_cars.enqueue(Car(CarType.NORMAL, normal_speed, hospital_id))
        for _ in range(total_special_cars):
            self._special_cars.enqueue(Car(CarType.SPECIAL, special_speed, hospital_id))

    @property
    def free_normal_cars(self) -> int:
        return len(self._normal_cars)

    @property
    def free_special_cars(self) -> int:
        return len(self._special_cars)

    @property
    def waiting_normal(self) -> int:
        return len(self._normal_patients)

    @property
    def waiting_special(self) -> int:
        return len(self._special_patients)

    @property
    def waiting_emergency(self) -> int:
        return len(self._emergency_patients)

    def receive_patient(self, patient: Patient) -> None:
        """Queue a patient by type; emergency patients are ordered by severity."""
        if patient.ptype == PatientType.NORMAL:
            self._normal_patients.enqueue(patient)
        elif patient.ptype == PatientType.SPECIAL:
            self._special_patients.enqueue(patient)
        elif patient.ptype == PatientType.EMERGENCY:
            self._emergency_patients.enqueue(patient, patient.severity)
        else:
            raise ValueError(f"unknown patient type: {patient.ptype!r}")

    def receive_back_car(self, car: Car) -> None:
        """Park a returning car and mark it ready."""
        if car.car_type == CarType.NORMAL:
            self._normal_cars.enqueue(car)
        elif car.car_type == CarType.SPECIAL:
            self._special_cars.enqueue(car)
        car.status = CarStatus.READY

    def assign_patient(self) -> Car | None:
        """Pair one waiting patient with a free car and return that car.

        Emergency patients come first and take a normal car, or a special one
        if no normal car is free. Then normal patients take normal cars, then
        special patients take special cars. Returns None if nothing can be paired.
        """
        if self._emergency_patients:
            car = None
            if self._normal_cars:
                car = self._normal_cars.dequeue()
            elif self._special_cars:
                car = self._special_cars.dequeue()
            if car is not None:
                car.patient, _ = self._emergency_patients.dequeue()
                return car
        if self._normal_patients and self._normal_cars:
            car = self._normal_cars.dequeue()
            car.patient = self._normal_patients.dequeue()
            return car
        if self._special_patients and self._special_cars:
            car = self._special_cars.dequeue()
            car.patient = self._special_patients.dequeue()
            return car
        return None

    def simulate_patient(self, x: int) -> Patient | None:
        """Take a waiting patient chosen by a random draw ``x`` in [0, 100)."""
        if 10 <= x < 20 and self._special_patients:
            return self._special_patients.dequeue()
        if 20 <= x < 25 and self._emergency_patients:
            patient, _ = self._emergency_patients.dequeue()
            return patient
        if 30 <= x < 40 and self._normal_patients:
            return self._normal_patients.dequeue()
        return None

    def simulate_car(self, x: int) -> Car | None:
        """Take a free car chosen by a random draw ``x`` in [0, 100)."""
        if 40 <= x < 45 and self._special_cars:
            return self._special_cars.dequeue()
        if 70 <= x < 75 and self._normal_cars:
            return self._normal_cars.dequeue()
        return None

    def assign_special_patients(self) -> list[Car]:
        """Pair waiting special patients with free special cars while both last."""
        assigned = []
        while self._special_patients and self._special_cars:
            car = self._special_cars.dequeue()
            car.patient = self._special_patients.dequeue()
            car.status = CarStatus.READY
            assigned.append(car)
        return assigned

    def __repr__(self) -> str:
        return (
            f"Hospital(id={self.hospital_id}, NC={self.free_normal_cars}, "
            f"SC={self.free_special_cars}, EP={self.waiting_emergency}, "
            f"SP={self.waiting_special}, NP={self.waiting_normal})"
        )
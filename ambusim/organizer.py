"""Input parsing and the time-stepped ambulance dispatch simulation."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

from .cancel import CancelQueue
from .car import Car, CarStatus
from .hospital import Hospital
from .patient import Patient, PatientType, cancellation_request
from .queues import LinkedQueue, PriorityQueue
from .redist import Redistributor

_TYPE_CODES = {
    "NP": PatientType.NORMAL,
    "SP": PatientType.SPECIAL,
    "EP": PatientType.EMERGENCY,
}


@dataclass
class SimulationInput:
    """Everything an input file describes."""

    distances: list[list[int]]
    special_speed: int
    normal_speed: int
    fleets: list[tuple[int, int]] = field(default_factory=list)
    requests: list[Patient] = field(default_factory=list)
    cancellations: list[Patient] = field(default_factory=list)

    @property
    def hospital_count(self) -> int:
        return len(self.fleets)


class _Tokens:
    def __init__(self, text: str) -> None:
        self._tokens: Iterator[str] = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def number(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None


def parse_input(text: str) -> SimulationInput:
    """Parse the whitespace-separated simulation input format."""
    tokens = _Tokens(text)
    count = tokens.number()
    if count < 0:
        raise ValueError(f"negative hospital count: {count}")
    distances = [[tokens.number() for _ in range(count)] for _ in range(count)]
    special_speed = tokens.number()
    normal_speed = tokens.number()
    fleets = []
    for _ in range(count):
        special = tokens.number()
        normal = tokens.number()
        fleets.append((special, normal))

    def check_hospital(hid: int) -> int:
        if not 1 <= hid <= count:
            raise ValueError(f"unknown hospital id: {hid}")
        return hid

    requests = []
    for _ in range(tokens.number()):
        code = tokens.word()
        if code not in _TYPE_CODES:
            raise ValueError(f"unknown patient type: {code!r}")
        ptype = _TYPE_CODES[code]
        request_time = tokens.number()
        pid = tokens.number()
        hid = check_hospital(tokens.number())
        distance = tokens.number()
        severity = tokens.number() if ptype == PatientType.EMERGENCY else 0
        requests.append(
            Patient(
                ptype=ptype,
                pid=pid,
                hid=hid,
                distance=distance,
                request_time=request_time,
                severity=severity,
            )
        )

    cancellations = []
    for _ in range(tokens.number()):
        cancel_time = tokens.number()
        pid = tokens.number()
        hid = check_hospital(tokens.number())
        cancellations.append(cancellation_request(pid, hid, cancel_time))

    return SimulationInput(
        distances=distances,
        special_speed=special_speed,
        normal_speed=normal_speed,
        fleets=fleets,
        requests=requests,
        cancellations=cancellations,
    )


def load_input(path: str | Path) -> SimulationInput:
    """Read and parse an input file."""
    return parse_input(Path(path).read_text())


class Organizer:
    """Runs the simulation one time step at a time."""

    MIN_STEPS = 5

    def __init__(
        self,
        data: SimulationInput,
        *,
        on_step: Callable[[str], None] | None = None,
        max_steps: int = 10_000,
    ) -> None:
        self.data = data
        self.on_step = on_step
        self.max_steps = max_steps
        self.timestep = 0
        self.redistributed = 0
        self.cancelled = 0
        self.hospitals = [
            Hospital(index, normal, special, data.normal_speed, data.special_speed)
            for index, (special, normal) in enumerate(data.fleets, start=1)
        ]
        self._redistributor = Redistributor(data.distances, self.hospitals)
        self.requests: LinkedQueue[Patient] = LinkedQueue(
            iter(sorted(data.requests, key=lambda p: p.request_time))
        )
        self.cancellations = CancelQueue(
            iter(sorted(data.cancellations, key=lambda p: p.cancellation_time))
        )
        self.finished: LinkedQueue[Patient] = LinkedQueue()
        self.out_cars: PriorityQueue[Car] = PriorityQueue()
        self.back_cars: PriorityQueue[Car] = PriorityQueue()

    def step(self) -> bool:
        """Advance one time step; return whether the simulation is complete."""
        self.timestep += 1
        self.add_patients()
        self.process_cancellations()
        self.handle_out_cars()
        self.handle_back_cars()
        self.assign_patients()
        if self.on_step is not None:
            self.on_step(self.status_report())
        return self.is_complete()

    def run(self, output_path: str | Path | None) -> str:
        """Step until complete, write the summary to ``output_path`` and return it."""
        while not self.step():
            if self.timestep >= self.max_steps:
                raise RuntimeError(
                    f"simulation did not finish within {self.max_steps} steps"
                )
        text = self.summary()
        if output_path is not None:
            Path(output_path).write_text(text)
        return text

    def is_complete(self) -> bool:
        if self.timestep < self.MIN_STEPS or self.requests:
            return False
        if any(
            h.waiting_emergency or h.waiting_normal or h.waiting_special
            for h in self.hospitals
        ):
            return False
        return not self.out_cars and not self.back_cars

    def status_report(self) -> str:
        lines = [
            "",
            f"Timestep: {self.timestep}",
            f"Out Cars: {len(self.out_cars)} Back Cars: {len(self.back_cars)}",
            f"Finished Patients: {len(self.finished)}",
        ]
        for hospital in self.hospitals:
            lines += [
                "",
                f"Hospital {hospital.hospital_id} Status:",
                f"EP: {hospital.waiting_emergency} NP: {hospital.waiting_normal}"
                f" SP: {hospital.waiting_special}",
            ]
        return "\n".join(lines) + "\n"

    def add_patients(self) -> None:
        """Hand every request that is due to its hospital."""
        while self.requests and self.requests.peek().request_time <= self.timestep:
            patient = self.requests.dequeue()
            hospital = self.hospitals[patient.hid - 1]
            overloaded = (
                hospital.free_normal_cars + hospital.free_special_cars
                <= hospital.waiting_emergency
            )
            if (
                patient.ptype == PatientType.EMERGENCY
                and overloaded
                and self.redistribute_emergency(patient) is not None
            ):
                continue
            hospital.receive_patient(patient)

    def process_cancellations(self) -> None:
        """Apply every cancellation that is due."""
        while (
            self.cancellations
            and self.cancellations.peek().cancellation_time <= self.timestep
        ):
            request = self.cancellations.dequeue()
            car = next(
                (
                    c
                    for c, _ in self.out_cars
                    if c.patient is not None and c.patient.pid == request.pid
                ),
                None,
            )
            if car is None:
                self.cancellations.cancel_on_car(request, self.out_cars, self.back_cars)
                continue
            previous_finish = car.finish_time
            # The car turns around and needs as long to return as it has travelled.
            car.finish_time = 2 * self.timestep - car.arrival_time
            if self.cancellations.cancel_before_pickup(
                request, self.out_cars, self.back_cars
            ):
                car.remove_patient()
                car.status = CarStatus.LOADED
                self.cancelled += 1
            else:
                car.finish_time = previous_finish

    def handle_out_cars(self) -> None:
        """Move cars that reached their patients to the back-car list."""
        while self.out_cars and self.out_cars.peek()[0].pickup_time <= self.timestep:
            car, _ = self.out_cars.dequeue()
            if car.patient is not None:
                car.patient.pickup_time = car.pickup_time
                car.patient.calculate_waiting_time()
            car.status = CarStatus.LOADED
            self.back_cars.enqueue(car, -car.finish_time)

    def handle_back_cars(self) -> None:
        """Return cars that reached their hospital and finish their patients."""
        while self.back_cars and self.back_cars.peek()[0].finish_time <= self.timestep:
            car, _ = self.back_cars.dequeue()
            if car.patient is not None:
                self.finished.enqueue(car.patient)
                car.remove_patient()
            car.calculate_busy_time()
            self.hospitals[car.hid - 1].receive_back_car(car)

    def assign_patients(self) -> None:
        """Dispatch free cars to waiting patients in every hospital."""
        for hospital in self.hospitals:
            while (car := hospital.assign_patient()) is not None:
                self._dispatch(car)

    def _dispatch(self, car: Car) -> None:
        assert car.patient is not None
        travel = car.patient.distance // car.effective_speed()
        car.arrival_time = self.timestep
        car.pickup_time = self.timestep + travel
        car.finish_time = car.pickup_time + travel
        car.status = CarStatus.ASSIGNED
        self.out_cars.enqueue(car, -car.pickup_time)

    def redistribute_emergency(self, patient: Patient) -> Hospital | None:
        """Send a patient to the nearest other hospital with free cars."""
        target = self._redistributor.redistribute(patient)
        if target is not None:
            self.redistributed += 1
        return target

    def average_wait_time(self) -> float:
        patients = list(self.finished)
        if not patients:
            return 0.0
        return sum(p.waiting_time for p in patients) / len(patients)

    def summary(self) -> str:
        lines = [
            f"Simulation Ended at TimeStep {self.timestep}",
            "",
            "Statistics:",
            f"Total Patients: {len(self.data.requests)}",
            f"Total Finished Patients: {len(self.finished)}",
            f"Average Wait Time: {self.average_wait_time():g}",
            f"Auto-Promoted Patients: {self.redistributed}",
        ]
        for hospital in self.hospitals:
            lines += [
                "",
                f"Hospital {hospital.hospital_id} Statistics:",
                f"Number of available Normal Cars: {hospital.free_normal_cars}",
                f"Number of available Special Cars: {hospital.free_special_cars}",
            ]
        return "\n".join(lines) + "\n"
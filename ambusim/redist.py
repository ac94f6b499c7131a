"""Moving patients to the nearest hospital that still has free cars."""

from __future__ import annotations

from collections.abc import Sequence

from .hospital import Hospital
from .patient import Patient


class Redistributor:
    """Sends patients to other hospitals using a hospital distance matrix."""

    def __init__(self, distances: Sequence[Sequence[int]], hospitals: Sequence[Hospital]) -> None:
        size = len(hospitals)
        if len(distances) != size or any(len(row) != size for row in distances):
            raise ValueError(f"distance matrix must be {size}x{size}")
        self.distances = [list(row) for row in distances]
        self.hospitals = list(hospitals)

    def find_nearest_hospital(self, patient: Patient) -> Hospital | None:
        """Nearest other hospital with a free car of any type, or None."""
        home = patient.hid - 1
        if not 0 <= home < len(self.hospitals):
            raise ValueError(f"unknown hospital id: {patient.hid}")
        candidates = [
            (distance, index)
            for index, distance in enumerate(self.distances[home])
            if index != home
            and (self.hospitals[index].free_normal_cars > 0
                 or self.hospitals[index].free_special_cars > 0)
        ]
        if not candidates:
            return None
        _, index = min(candidates)
        return self.hospitals[index]

    def redistribute(self, patient: Patient) -> Hospital | None:
        """Hand the patient to the nearest suitable hospital and return it."""
        target = self.find_nearest_hospital(patient)
        if target is None:
            return None
        patient.hid = target.hospital_id
        target.receive_patient(patient)
        return target
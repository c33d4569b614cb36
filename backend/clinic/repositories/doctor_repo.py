"""
Doctor repository implementation following SOLID principles.
"""

from typing import List

from ..domain.entities import Doctor
from ..domain.interfaces import IDoctorRepository
from .base import InMemoryRepository


class DoctorRepository(InMemoryRepository[Doctor], IDoctorRepository):
    """Repository for Doctor storage operations."""

    def find_by_specialization(self, specialization: str) -> List[Doctor]:
        return self.find(lambda doctor: doctor.specialization == specialization)

    def find_available(self) -> List[Doctor]:
        return self.find(lambda doctor: doctor.available)

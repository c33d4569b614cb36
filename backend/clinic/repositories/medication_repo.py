"""
Medication repository implementation following SOLID principles.
"""

from typing import Optional

from ..domain.entities import Medication
from ..domain.interfaces import IMedicationRepository
from .base import InMemoryRepository


class MedicationRepository(InMemoryRepository[Medication], IMedicationRepository):
    """Repository for the medication catalogue."""

    def find_by_name(self, name: str) -> Optional[Medication]:
        """Exact, case-sensitive match."""
        for medication in self._items:
            if medication.name == name:
                return medication
        return None

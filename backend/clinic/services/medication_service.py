"""
Medication service for business logic following SOLID principles.

Business Rules:
- Medication names are unique across the catalogue (exact, case-sensitive)
- The rule holds on add and on rename
"""

from typing import List, Optional

from ..core.exceptions import DuplicateNameError, NotFoundError
from ..core.notifications import Notifier
from ..domain.entities import Medication, Money
from ..domain.interfaces import IMedicationRepository


class MedicationService:
    """Application service for the medication catalogue."""

    def __init__(
        self,
        medication_repo: IMedicationRepository,
        notifier: Optional[Notifier] = None,
    ) -> None:
        self.medication_repo = medication_repo
        self.notifier = notifier or Notifier()

    def add_medication(
        self,
        name: str,
        dosage: str,
        price: Money,
        manufacturer: str = "",
        description: str = "",
    ) -> Medication:
        if self.medication_repo.find_by_name(name) is not None:
            raise self.notifier.failure(DuplicateNameError(name))

        with self.notifier.validating():
            medication = Medication(
                name=name,
                dosage=dosage,
                price=price,
                manufacturer=manufacturer,
                description=description,
            )
        created = self.medication_repo.add(medication)
        self.notifier.success(
            f"Medication added successfully with ID: {created.id}",
            medication_id=created.id,
        )
        return created

    def update_medication(
        self,
        medication_id: int,
        name: str,
        dosage: str,
        price: Money,
        manufacturer: str = "",
        description: str = "",
    ) -> Medication:
        medication = self.get_medication(medication_id)

        if name != medication.name:
            holder = self.medication_repo.find_by_name(name)
            if holder is not None and holder.id != medication_id:
                raise self.notifier.failure(DuplicateNameError(name))

        with self.notifier.validating():
            validated = Medication(
                name=name,
                dosage=dosage,
                price=price,
                manufacturer=manufacturer,
                description=description,
            )

        medication.name = validated.name
        medication.dosage = validated.dosage
        medication.price = validated.price
        medication.manufacturer = validated.manufacturer
        medication.description = validated.description

        self.notifier.success(
            f"Medication {medication_id} updated successfully",
            medication_id=medication_id,
        )
        return medication

    def remove_medication(self, medication_id: int) -> None:
        """Delete a catalogue entry.

        Patients already holding the medication keep it; see CascadeService.
        """
        if not self.medication_repo.remove(medication_id):
            raise self.notifier.failure(NotFoundError("Medication", medication_id))
        self.notifier.success(
            f"Medication {medication_id} removed successfully",
            medication_id=medication_id,
        )

    def get_medication(self, medication_id: int) -> Medication:
        medication = self.medication_repo.get_by_id(medication_id)
        if medication is None:
            raise self.notifier.failure(NotFoundError("Medication", medication_id))
        return medication

    def find_medication(self, medication_id: int) -> Optional[Medication]:
        return self.medication_repo.get_by_id(medication_id)

    def find_by_name(self, name: str) -> Optional[Medication]:
        return self.medication_repo.find_by_name(name)

    def list_medications(self) -> List[Medication]:
        return self.medication_repo.get_all()

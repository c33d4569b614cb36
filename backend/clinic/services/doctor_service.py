"""
Doctor service for business logic following SOLID principles.
"""

from typing import List, Optional

from ..core.exceptions import NotFoundError
from ..core.notifications import Notifier
from ..domain.entities import Doctor, Money
from ..domain.interfaces import IDoctorRepository


class DoctorService:
    """Application service for doctor-related use-cases."""

    def __init__(
        self, doctor_repo: IDoctorRepository, notifier: Optional[Notifier] = None
    ) -> None:
        self.doctor_repo = doctor_repo
        self.notifier = notifier or Notifier()

    def add_doctor(
        self,
        name: str,
        specialization: str,
        contact: str = "",
        email: str = "",
        consultation_fee: Money = 0,
        available: bool = True,
    ) -> Doctor:
        with self.notifier.validating():
            doctor = Doctor(
                name=name,
                specialization=specialization,
                contact=contact,
                email=email,
                consultation_fee=consultation_fee,
                available=available,
            )
        created = self.doctor_repo.add(doctor)
        self.notifier.success(
            f"Doctor added successfully with ID: {created.id}", doctor_id=created.id
        )
        return created

    def update_doctor(
        self,
        doctor_id: int,
        name: str,
        specialization: str,
        contact: str = "",
        email: str = "",
        consultation_fee: Money = 0,
        *,
        available: bool,
    ) -> Doctor:
        """Replace every field of a doctor record.

        ``available`` has no default so a full replace never flips it silently.
        """
        doctor = self.get_doctor(doctor_id)

        with self.notifier.validating():
            validated = Doctor(
                name=name,
                specialization=specialization,
                contact=contact,
                email=email,
                consultation_fee=consultation_fee,
                available=available,
            )

        doctor.name = validated.name
        doctor.specialization = validated.specialization
        doctor.contact = validated.contact
        doctor.email = validated.email
        doctor.consultation_fee = validated.consultation_fee
        doctor.available = validated.available

        self.notifier.success(
            f"Doctor {doctor_id} updated successfully", doctor_id=doctor_id
        )
        return doctor

    def set_availability(self, doctor_id: int, available: bool) -> Doctor:
        doctor = self.get_doctor(doctor_id)
        doctor.available = available
        state = "available" if available else "unavailable"
        self.notifier.success(
            f"Doctor {doctor_id} marked {state}", doctor_id=doctor_id
        )
        return doctor

    def remove_doctor(self, doctor_id: int) -> None:
        """Delete a doctor record without touching dependent records."""
        if not self.doctor_repo.remove(doctor_id):
            raise self.notifier.failure(NotFoundError("Doctor", doctor_id))
        self.notifier.success(
            f"Doctor {doctor_id} removed successfully", doctor_id=doctor_id
        )

    def get_doctor(self, doctor_id: int) -> Doctor:
        doctor = self.doctor_repo.get_by_id(doctor_id)
        if doctor is None:
            raise self.notifier.failure(NotFoundError("Doctor", doctor_id))
        return doctor

    def find_doctor(self, doctor_id: int) -> Optional[Doctor]:
        return self.doctor_repo.get_by_id(doctor_id)

    def list_doctors(self) -> List[Doctor]:
        return self.doctor_repo.get_all()

    def find_by_specialization(self, specialization: str) -> List[Doctor]:
        return self.doctor_repo.find_by_specialization(specialization)

    def find_available_doctors(self) -> List[Doctor]:
        return self.doctor_repo.find_available()

"""
Abstract interfaces for repositories following Interface Segregation Principle.

These interfaces define contracts without implementation details,
enabling dependency injection and easier testing.
"""

from abc import ABC, abstractmethod
from typing import Callable, Generic, List, Optional, TypeVar

from .entities import (
    Appointment,
    AppointmentStatus,
    Bill,
    Doctor,
    Medication,
    Patient,
    PaymentStatus,
    Prescription,
    User,
)

T = TypeVar("T")


class IReader(ABC, Generic[T]):
    """Interface for read operations shared by every repository."""

    @abstractmethod
    def get_by_id(self, entity_id: int) -> Optional[T]:
        """Get the stored entity by ID (a live handle), or None."""
        pass

    @abstractmethod
    def get_all(self) -> List[T]:
        """Get a snapshot of all entities in insertion order."""
        pass

    @abstractmethod
    def find(self, predicate: Callable[[T], bool]) -> List[T]:
        """Get all entities matching the predicate."""
        pass


class IWriter(ABC, Generic[T]):
    """Interface for write operations shared by every repository."""

    @abstractmethod
    def add(self, item: T) -> T:
        """Assign the next ID and store the entity."""
        pass

    @abstractmethod
    def remove(self, entity_id: int) -> bool:
        """Delete the entity; returns whether it was found."""
        pass


class IRepository(IReader[T], IWriter[T]):
    """Complete repository interface combining read/write operations."""

    pass


class IPatientRepository(IRepository[Patient]):
    @abstractmethod
    def find_by_disease(self, disease: str) -> List[Patient]:
        """Get patients diagnosed with the given disease."""
        pass

    @abstractmethod
    def find_by_age_range(self, min_age: int, max_age: int) -> List[Patient]:
        """Get patients whose age lies within [min_age, max_age]."""
        pass


class IDoctorRepository(IRepository[Doctor]):
    @abstractmethod
    def find_by_specialization(self, specialization: str) -> List[Doctor]:
        pass

    @abstractmethod
    def find_available(self) -> List[Doctor]:
        """Get doctors currently accepting appointments."""
        pass


class IAppointmentRepository(IRepository[Appointment]):
    @abstractmethod
    def find_by_date(self, date: str) -> List[Appointment]:
        pass

    @abstractmethod
    def find_by_doctor(self, doctor_id: int) -> List[Appointment]:
        pass

    @abstractmethod
    def find_by_patient(self, patient_id: int) -> List[Appointment]:
        pass

    @abstractmethod
    def find_by_status(self, status: AppointmentStatus) -> List[Appointment]:
        pass

    @abstractmethod
    def find_by_doctor_and_date(self, doctor_id: int, date: str) -> List[Appointment]:
        pass


class IMedicationRepository(IRepository[Medication]):
    @abstractmethod
    def find_by_name(self, name: str) -> Optional[Medication]:
        """Get the medication with exactly this name (case-sensitive)."""
        pass


class IPrescriptionRepository(IRepository[Prescription]):
    @abstractmethod
    def find_by_patient(self, patient_id: int) -> List[Prescription]:
        pass

    @abstractmethod
    def find_by_doctor(self, doctor_id: int) -> List[Prescription]:
        pass

    @abstractmethod
    def find_by_medication(self, medication_id: int) -> List[Prescription]:
        pass


class IBillRepository(IRepository[Bill]):
    @abstractmethod
    def find_by_patient(self, patient_id: int) -> List[Bill]:
        pass

    @abstractmethod
    def find_by_payment_status(self, status: PaymentStatus) -> List[Bill]:
        pass


class IUserRepository(IRepository[User]):
    @abstractmethod
    def find_by_username(self, username: str) -> Optional[User]:
        pass


class INotificationSink(ABC):
    """Severity-tagged event sink; delivery is not guaranteed."""

    @abstractmethod
    def info(self, message: str, **context) -> None:
        pass

    @abstractmethod
    def warning(self, message: str, **context) -> None:
        pass

    @abstractmethod
    def error(self, message: str, **context) -> None:
        pass


class IDisplay(ABC):
    """Presentation sink for human-facing messages. Purely advisory."""

    @abstractmethod
    def success(self, message: str) -> None:
        pass

    @abstractmethod
    def error(self, message: str) -> None:
        pass

    @abstractmethod
    def info(self, message: str) -> None:
        pass

    @abstractmethod
    def warning(self, message: str) -> None:
        pass

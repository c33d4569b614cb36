"""
Custom exceptions for the clinic core.
Following SOLID principles - centralized error handling.

Every service failure is one of these kinds, so callers can tell a missing
record from a broken reference or a scheduling clash without parsing text.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    NOT_FOUND = "NotFound"
    INVALID_REFERENCE = "InvalidReference"
    DUPLICATE_NAME = "DuplicateName"
    DUPLICATE_USERNAME = "DuplicateUsername"
    DOCTOR_UNAVAILABLE = "DoctorUnavailable"
    SLOT_CONFLICT = "SlotConflict"
    VALIDATION = "Validation"


class ClinicError(Exception):
    """Base class for recoverable service outcomes."""

    kind: ErrorKind

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}


class NotFoundError(ClinicError):
    """Raised when an id is absent from the target repository."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity: str, entity_id: int):
        super().__init__(
            f"{entity} with ID {entity_id} not found",
            {"entity": entity, "id": entity_id},
        )
        self.entity = entity
        self.entity_id = entity_id


class InvalidReferenceError(ClinicError):
    """Raised when a foreign id (patient, doctor, medication) does not resolve."""

    kind = ErrorKind.INVALID_REFERENCE

    def __init__(self, entity: str, entity_id: int):
        super().__init__(
            f"Invalid {entity.lower()} reference: ID {entity_id} does not exist",
            {"entity": entity, "id": entity_id},
        )
        self.entity = entity
        self.entity_id = entity_id


class DuplicateNameError(ClinicError):
    kind = ErrorKind.DUPLICATE_NAME

    def __init__(self, name: str):
        super().__init__(
            f"Medication with name '{name}' already exists", {"name": name}
        )
        self.name = name


class DuplicateUsernameError(ClinicError):
    kind = ErrorKind.DUPLICATE_USERNAME

    def __init__(self, username: str):
        super().__init__(
            f"Username '{username}' is already registered", {"username": username}
        )
        self.username = username


class DoctorUnavailableError(ClinicError):
    kind = ErrorKind.DOCTOR_UNAVAILABLE

    def __init__(self, doctor_id: int):
        super().__init__(
            f"Doctor with ID {doctor_id} is not available for appointments",
            {"doctor_id": doctor_id},
        )
        self.doctor_id = doctor_id


class SlotConflictError(ClinicError):
    """Raised when a doctor already holds the requested (date, time slot)."""

    kind = ErrorKind.SLOT_CONFLICT

    def __init__(self, doctor_id: int, date: str, time_slot: str):
        super().__init__(
            f"Doctor {doctor_id} is already booked on {date} at {time_slot}",
            {"doctor_id": doctor_id, "date": date, "time_slot": time_slot},
        )
        self.doctor_id = doctor_id
        self.date = date
        self.time_slot = time_slot


class ValidationError(ClinicError, ValueError):
    """Raised when a field value breaks an entity rule.

    Still a ValueError, so callers catching the entity contract keep working.
    """

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, {"field": field} if field else {})
        self.field = field

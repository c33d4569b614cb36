"""
Domain entities - Pure business logic, no framework dependencies.

Following SOLID principles:
- Single Responsibility: Each entity represents one business concept
- Open/Closed: Entities can be extended without modification

Cross-entity links are plain integer ids, never object references.
"""

from collections import Counter
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import List, Optional, Union

Money = Union[Decimal, int, float, str]


def to_money(value: Money) -> Decimal:
    """Normalize a numeric amount to Decimal (floats go through str).

    Raises:
        ValueError: If the value is not a finite number
    """
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError):
        raise ValueError(f"Invalid amount: {value!r}") from None
    if not amount.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")
    return amount


class AppointmentStatus(str, Enum):
    SCHEDULED = "Scheduled"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class PaymentStatus(str, Enum):
    PAID = "Paid"
    PENDING = "Pending"
    OVERDUE = "Overdue"


class Role(str, Enum):
    ADMIN = "Admin"
    DOCTOR = "Doctor"
    RECEPTION = "Reception"
    PHARMACIST = "Pharmacist"


@dataclass
class Patient:
    """Domain entity representing a Patient.

    ``medication_ids`` is a multiset (medication id -> reference count).
    Every prescription listing a medication adds one reference, so removing
    one prescription never hides a medication another prescription still
    grants.
    """

    id: Optional[int] = None
    name: str = ""
    age: int = 0
    disease: str = ""
    contact: str = ""
    address: str = ""
    blood_group: str = ""
    medication_ids: Counter = field(default_factory=Counter)

    def __post_init__(self):
        """Validate domain rules."""
        if not self.name or not self.name.strip():
            raise ValueError("Patient name is required")
        if self.age < 0:
            raise ValueError("Age cannot be negative")
        if not isinstance(self.medication_ids, Counter):
            self.medication_ids = Counter(self.medication_ids)

    def add_medication(self, medication_id: int) -> None:
        self.medication_ids[medication_id] += 1

    def retract_medication(self, medication_id: int) -> None:
        """Drop one reference; the id disappears once no reference is left."""
        remaining = self.medication_ids.get(medication_id, 0) - 1
        if remaining > 0:
            self.medication_ids[medication_id] = remaining
        else:
            self.medication_ids.pop(medication_id, None)

    def purge_medication(self, medication_id: int) -> None:
        self.medication_ids.pop(medication_id, None)

    def holds_medication(self, medication_id: int) -> bool:
        return self.medication_ids.get(medication_id, 0) > 0


@dataclass
class Doctor:
    """Domain entity representing a Doctor."""

    id: Optional[int] = None
    name: str = ""
    specialization: str = ""
    contact: str = ""
    email: str = ""
    consultation_fee: Decimal = Decimal("0")
    available: bool = True

    def __post_init__(self):
        """Validate domain rules."""
        if not self.name or not self.name.strip():
            raise ValueError("Doctor name is required")
        self.consultation_fee = to_money(self.consultation_fee)
        if self.consultation_fee < 0:
            raise ValueError("Consultation fee cannot be negative")
        if self.email and "@" not in self.email:
            raise ValueError("Invalid email format")


@dataclass
class Appointment:
    """Domain entity for Appointment business logic."""

    id: Optional[int] = None
    patient_id: int = 0
    doctor_id: int = 0
    date: str = ""  # YYYY-MM-DD
    time_slot: str = ""  # HH:MM-HH:MM
    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    notes: str = ""

    def __post_init__(self):
        """Validate business rules."""
        if self.patient_id <= 0:
            raise ValueError("Valid patient_id is required")
        if self.doctor_id <= 0:
            raise ValueError("Valid doctor_id is required")
        self.status = AppointmentStatus(self.status)

    @property
    def is_cancelled(self) -> bool:
        return self.status == AppointmentStatus.CANCELLED

    def occupies(self, doctor_id: int, date: str, time_slot: str) -> bool:
        return (
            self.doctor_id == doctor_id
            and self.date == date
            and self.time_slot == time_slot
        )


@dataclass
class Medication:
    """Domain entity for medication catalogue entries."""

    id: Optional[int] = None
    name: str = ""
    dosage: str = ""
    price: Decimal = Decimal("0")
    manufacturer: str = ""
    description: str = ""

    def __post_init__(self):
        """Validate business rules."""
        if not self.name or not self.name.strip():
            raise ValueError("Medication name is required")
        self.price = to_money(self.price)
        if self.price < 0:
            raise ValueError("Price cannot be negative")


@dataclass
class Prescription:
    """Domain entity for a prescription.

    ``medication_ids`` keeps the prescribed order and may repeat an id.
    """

    id: Optional[int] = None
    patient_id: int = 0
    doctor_id: int = 0
    date: str = ""
    medication_ids: List[int] = field(default_factory=list)
    instructions: str = ""

    def __post_init__(self):
        """Validate business rules."""
        if self.patient_id <= 0:
            raise ValueError("Valid patient_id is required")
        if self.doctor_id <= 0:
            raise ValueError("Valid doctor_id is required")
        self.medication_ids = list(self.medication_ids)


@dataclass
class Bill:
    """Domain entity for patient billing.

    The total is always derived from the three charge fields.
    """

    id: Optional[int] = None
    patient_id: int = 0
    date: str = ""
    consultation_fee: Decimal = Decimal("0")
    medication_charges: Decimal = Decimal("0")
    other_charges: Decimal = Decimal("0")
    payment_status: PaymentStatus = PaymentStatus.PENDING
    payment_method: str = ""

    def __post_init__(self):
        """Validate business rules."""
        if self.patient_id <= 0:
            raise ValueError("Valid patient_id is required")
        self.consultation_fee = to_money(self.consultation_fee)
        self.medication_charges = to_money(self.medication_charges)
        self.other_charges = to_money(self.other_charges)
        for charge in (
            self.consultation_fee,
            self.medication_charges,
            self.other_charges,
        ):
            if charge < 0:
                raise ValueError("Charges cannot be negative")
        self.payment_status = PaymentStatus(self.payment_status)

    @property
    def total_amount(self) -> Decimal:
        """Calculate the bill total."""
        return self.consultation_fee + self.medication_charges + self.other_charges

    @property
    def is_paid(self) -> bool:
        return self.payment_status == PaymentStatus.PAID


@dataclass
class User:
    """Domain entity representing a system user.

    ``password_secret`` is compared literally; no hashing is applied.
    """

    id: Optional[int] = None
    username: str = ""
    password_secret: str = ""
    role: Role = Role.RECEPTION
    active: bool = True

    def __post_init__(self):
        """Validate domain rules."""
        if not self.username or not self.username.strip():
            raise ValueError("Username is required")
        self.role = Role(self.role)

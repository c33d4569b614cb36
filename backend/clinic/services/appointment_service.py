"""
Appointment service following SOLID principles.

Booking is keyed on (doctor, date, time slot): a doctor holds at most one
live appointment per slot per day. Slots are opaque strings; the default
clinic grid is exposed as DEFAULT_TIME_SLOTS for presentation helpers.
"""

from typing import List, Optional, Sequence

from ..core.exceptions import (
    DoctorUnavailableError,
    InvalidReferenceError,
    NotFoundError,
    SlotConflictError,
)
from ..core.notifications import Notifier
from ..domain.entities import Appointment, AppointmentStatus
from ..domain.interfaces import IAppointmentRepository
from .doctor_service import DoctorService
from .patient_service import PatientService

# Ten 30-minute windows: morning 09:00-12:00, afternoon 14:00-16:00
DEFAULT_TIME_SLOTS = (
    "09:00-09:30",
    "09:30-10:00",
    "10:00-10:30",
    "10:30-11:00",
    "11:00-11:30",
    "11:30-12:00",
    "14:00-14:30",
    "14:30-15:00",
    "15:00-15:30",
    "15:30-16:00",
)


class AppointmentService:
    """Application service for appointment-related use-cases.

    This service demonstrates:
    - Single Responsibility: Handles only appointment business logic
    - Dependency Inversion: Depends on interfaces and sibling services
    """

    def __init__(
        self,
        appointment_repo: IAppointmentRepository,
        patient_service: PatientService,
        doctor_service: DoctorService,
        notifier: Optional[Notifier] = None,
        cancelled_slots_block: bool = False,
    ) -> None:
        self.appointment_repo = appointment_repo
        self.patient_service = patient_service
        self.doctor_service = doctor_service
        self.notifier = notifier or Notifier()
        self.cancelled_slots_block = cancelled_slots_block

    def book_appointment(
        self,
        patient_id: int,
        doctor_id: int,
        date: str,
        time_slot: str,
        notes: str = "",
    ) -> Appointment:
        """Book a new appointment with business rule validation.

        Business Rules:
        - Patient and doctor must exist
        - Doctor must be flagged available
        - No double booking of the doctor's (date, time slot)
        """
        if self.patient_service.find_patient(patient_id) is None:
            raise self.notifier.failure(InvalidReferenceError("Patient", patient_id))

        doctor = self.doctor_service.find_doctor(doctor_id)
        if doctor is None:
            raise self.notifier.failure(InvalidReferenceError("Doctor", doctor_id))
        if not doctor.available:
            raise self.notifier.failure(DoctorUnavailableError(doctor_id))

        if self._has_conflicting_appointment(doctor_id, date, time_slot):
            raise self.notifier.failure(
                SlotConflictError(doctor_id, date, time_slot)
            )

        with self.notifier.validating():
            appointment = Appointment(
                patient_id=patient_id,
                doctor_id=doctor_id,
                date=date,
                time_slot=time_slot,
                status=AppointmentStatus.SCHEDULED,
                notes=notes,
            )
        created = self.appointment_repo.add(appointment)
        self.notifier.success(
            f"Appointment booked successfully with ID: {created.id}",
            appointment_id=created.id,
            doctor_id=doctor_id,
            date=date,
            time_slot=time_slot,
        )
        return created

    def update_details(
        self,
        appointment_id: int,
        date: str,
        time_slot: str,
        status: AppointmentStatus,
        notes: str = "",
    ) -> Appointment:
        """Overwrite date, slot, status and notes.

        Conflict rules are not re-checked; rescheduling onto an occupied slot
        is the caller's responsibility.
        """
        appointment = self.get_appointment(appointment_id)
        with self.notifier.validating():
            status = AppointmentStatus(status)

        appointment.date = date
        appointment.time_slot = time_slot
        appointment.status = status
        appointment.notes = notes

        self.notifier.success(
            f"Appointment {appointment_id} updated successfully",
            appointment_id=appointment_id,
        )
        return appointment

    def update_status(
        self, appointment_id: int, status: AppointmentStatus
    ) -> Appointment:
        appointment = self.get_appointment(appointment_id)
        with self.notifier.validating():
            status = AppointmentStatus(status)
        appointment.status = status
        self.notifier.success(
            f"Appointment {appointment_id} status set to {appointment.status.value}",
            appointment_id=appointment_id,
        )
        return appointment

    def cancel_appointment(self, appointment_id: int) -> Appointment:
        """Soft-delete: the record stays with status Cancelled."""
        appointment = self.get_appointment(appointment_id)
        appointment.status = AppointmentStatus.CANCELLED
        self.notifier.success(
            f"Appointment {appointment_id} cancelled",
            appointment_id=appointment_id,
        )
        return appointment

    def complete_appointment(
        self,
        appointment_id: int,
        diagnosis: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> Appointment:
        """Mark an appointment as completed.

        A diagnosis, when given, becomes the patient's current disease.
        """
        appointment = self.get_appointment(appointment_id)

        if diagnosis is not None:
            self.patient_service.record_diagnosis(appointment.patient_id, diagnosis)

        appointment.status = AppointmentStatus.COMPLETED
        if notes:
            appointment.notes = (
                f"{appointment.notes}\n{notes}" if appointment.notes else notes
            )

        self.notifier.success(
            f"Appointment {appointment_id} completed",
            appointment_id=appointment_id,
        )
        return appointment

    def remove_appointment(self, appointment_id: int) -> None:
        """Hard delete, which also frees the slot."""
        if not self.appointment_repo.remove(appointment_id):
            raise self.notifier.failure(NotFoundError("Appointment", appointment_id))
        self.notifier.success(
            f"Appointment {appointment_id} removed",
            appointment_id=appointment_id,
        )

    def get_appointment(self, appointment_id: int) -> Appointment:
        appointment = self.appointment_repo.get_by_id(appointment_id)
        if appointment is None:
            raise self.notifier.failure(NotFoundError("Appointment", appointment_id))
        return appointment

    def list_appointments(self) -> List[Appointment]:
        return self.appointment_repo.get_all()

    def by_patient(self, patient_id: int) -> List[Appointment]:
        return self.appointment_repo.find_by_patient(patient_id)

    def by_doctor(self, doctor_id: int) -> List[Appointment]:
        return self.appointment_repo.find_by_doctor(doctor_id)

    def by_date(self, date: str) -> List[Appointment]:
        return self.appointment_repo.find_by_date(date)

    def by_status(self, status: AppointmentStatus) -> List[Appointment]:
        with self.notifier.validating():
            status = AppointmentStatus(status)
        return self.appointment_repo.find_by_status(status)

    def daily_schedule(self, date: str) -> List[Appointment]:
        """Get all appointments for a specific day, ordered by slot."""
        return sorted(
            self.appointment_repo.find_by_date(date),
            key=lambda appointment: (appointment.time_slot, appointment.doctor_id),
        )

    def available_slots(
        self,
        doctor_id: int,
        date: str,
        slots: Sequence[str] = DEFAULT_TIME_SLOTS,
    ) -> List[str]:
        """Get the slots of the grid still free for a doctor on a date."""
        taken = {
            appointment.time_slot
            for appointment in self.appointment_repo.find_by_doctor_and_date(
                doctor_id, date
            )
            if self._blocks_slot(appointment)
        }
        return [slot for slot in slots if slot not in taken]

    def _has_conflicting_appointment(
        self, doctor_id: int, date: str, time_slot: str
    ) -> bool:
        """Check whether the doctor already holds this slot on this date."""
        for appointment in self.appointment_repo.find_by_date(date):
            if not self._blocks_slot(appointment):
                continue
            if appointment.occupies(doctor_id, date, time_slot):
                return True
        return False

    def _blocks_slot(self, appointment: Appointment) -> bool:
        return self.cancelled_slots_block or not appointment.is_cancelled

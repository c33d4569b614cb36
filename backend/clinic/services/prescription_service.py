"""
Prescription service with cascading medication bookkeeping.

Every medication id listed on a prescription adds one reference to the
patient's medication multiset; updating or removing the prescription takes
exactly those references back. A medication therefore stays on the patient
record while any surviving prescription still lists it.
"""

from typing import Iterable, List, Optional

from ..core.exceptions import InvalidReferenceError, NotFoundError
from ..core.notifications import Notifier
from ..domain.entities import Prescription
from ..domain.interfaces import IPrescriptionRepository
from .doctor_service import DoctorService
from .medication_service import MedicationService
from .patient_service import PatientService


class PrescriptionService:
    """Application service for prescription-related use-cases."""

    def __init__(
        self,
        prescription_repo: IPrescriptionRepository,
        patient_service: PatientService,
        doctor_service: DoctorService,
        medication_service: MedicationService,
        notifier: Optional[Notifier] = None,
    ) -> None:
        self.prescription_repo = prescription_repo
        self.patient_service = patient_service
        self.doctor_service = doctor_service
        self.medication_service = medication_service
        self.notifier = notifier or Notifier()

    def create_prescription(
        self,
        patient_id: int,
        doctor_id: int,
        date: str,
        medication_ids: Iterable[int],
        instructions: str = "",
    ) -> Prescription:
        """Create a prescription and grant its medications to the patient.

        Business Rules:
        - Patient, doctor and every medication must exist
        - Duplicated ids add one reference each
        """
        medication_ids = list(medication_ids)

        patient = self.patient_service.find_patient(patient_id)
        if patient is None:
            raise self.notifier.failure(InvalidReferenceError("Patient", patient_id))
        if self.doctor_service.find_doctor(doctor_id) is None:
            raise self.notifier.failure(InvalidReferenceError("Doctor", doctor_id))
        self._validate_medications(medication_ids)

        with self.notifier.validating():
            prescription = Prescription(
                patient_id=patient_id,
                doctor_id=doctor_id,
                date=date,
                medication_ids=medication_ids,
                instructions=instructions,
            )
        created = self.prescription_repo.add(prescription)

        for medication_id in medication_ids:
            patient.add_medication(medication_id)

        self.notifier.success(
            f"Prescription created successfully with ID: {created.id}",
            prescription_id=created.id,
            patient_id=patient_id,
        )
        return created

    def update_prescription(
        self,
        prescription_id: int,
        medication_ids: Iterable[int],
        instructions: str = "",
    ) -> Prescription:
        """Replace the medication list and instructions.

        The old list is retracted from the patient in full and the new list
        granted in full; no diffing.
        """
        prescription = self.get_prescription(prescription_id)
        medication_ids = list(medication_ids)
        self._validate_medications(medication_ids)

        patient = self.patient_service.find_patient(prescription.patient_id)
        if patient is not None:
            for medication_id in prescription.medication_ids:
                patient.retract_medication(medication_id)
            for medication_id in medication_ids:
                patient.add_medication(medication_id)

        prescription.medication_ids = medication_ids
        prescription.instructions = instructions

        self.notifier.success(
            f"Prescription {prescription_id} updated successfully",
            prescription_id=prescription_id,
        )
        return prescription

    def remove_prescription(self, prescription_id: int) -> None:
        """Retract the prescription's medications, then delete it."""
        prescription = self.get_prescription(prescription_id)

        patient = self.patient_service.find_patient(prescription.patient_id)
        if patient is not None:
            for medication_id in prescription.medication_ids:
                patient.retract_medication(medication_id)

        self.prescription_repo.remove(prescription_id)
        self.notifier.success(
            f"Prescription {prescription_id} removed successfully",
            prescription_id=prescription_id,
        )

    def strip_medication(self, medication_id: int) -> List[Prescription]:
        """Remove every occurrence of a medication from stored prescriptions.

        Returns the prescriptions that changed.
        """
        changed = self.prescription_repo.find_by_medication(medication_id)
        for prescription in changed:
            patient = self.patient_service.find_patient(prescription.patient_id)
            occurrences = prescription.medication_ids.count(medication_id)
            if patient is not None:
                for _ in range(occurrences):
                    patient.retract_medication(medication_id)
            prescription.medication_ids = [
                mid for mid in prescription.medication_ids if mid != medication_id
            ]

        if changed:
            self.notifier.info(
                f"Medication {medication_id} stripped from "
                f"{len(changed)} prescription(s)",
                medication_id=medication_id,
                prescription_ids=[p.id for p in changed],
            )
        return changed

    def get_prescription(self, prescription_id: int) -> Prescription:
        prescription = self.prescription_repo.get_by_id(prescription_id)
        if prescription is None:
            raise self.notifier.failure(
                NotFoundError("Prescription", prescription_id)
            )
        return prescription

    def list_prescriptions(self) -> List[Prescription]:
        return self.prescription_repo.get_all()

    def by_patient(self, patient_id: int) -> List[Prescription]:
        return self.prescription_repo.find_by_patient(patient_id)

    def by_doctor(self, doctor_id: int) -> List[Prescription]:
        return self.prescription_repo.find_by_doctor(doctor_id)

    def _validate_medications(self, medication_ids: List[int]) -> None:
        for medication_id in medication_ids:
            if self.medication_service.find_medication(medication_id) is None:
                raise self.notifier.failure(
                    InvalidReferenceError("Medication", medication_id)
                )

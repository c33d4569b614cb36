"""
Patient service for business logic following SOLID principles.

This service:
- Keeps business rules separate from callers and repositories (Single Responsibility)
- Depends on abstractions (IPatientRepository) not concrete implementations (Dependency Inversion)
- Works with domain entities, identified by plain integer ids
"""

from typing import Iterable, List, Optional

from ..core.exceptions import InvalidReferenceError, NotFoundError
from ..core.notifications import Notifier
from ..domain.entities import Patient
from ..domain.interfaces import IMedicationRepository, IPatientRepository


class PatientService:
    """Application service for patient-related use-cases."""

    def __init__(
        self,
        patient_repo: IPatientRepository,
        medication_repo: Optional[IMedicationRepository] = None,
        notifier: Optional[Notifier] = None,
    ) -> None:
        self.patient_repo = patient_repo
        self.medication_repo = medication_repo
        self.notifier = notifier or Notifier()

    def add_patient(
        self,
        name: str,
        age: int,
        disease: str,
        contact: str = "",
        address: str = "",
        blood_group: str = "",
        medication_ids: Optional[Iterable[int]] = None,
    ) -> Patient:
        """Register a new patient.

        Business Rules:
        - Initial medication ids must exist in the medication catalogue
        - Nothing is stored unless every rule passes
        """
        medication_ids = list(medication_ids or [])
        for medication_id in medication_ids:
            if (
                self.medication_repo is None
                or self.medication_repo.get_by_id(medication_id) is None
            ):
                raise self.notifier.failure(
                    InvalidReferenceError("Medication", medication_id)
                )

        with self.notifier.validating():
            patient = Patient(
                name=name,
                age=age,
                disease=disease,
                contact=contact,
                address=address,
                blood_group=blood_group,
            )
        for medication_id in medication_ids:
            patient.add_medication(medication_id)

        created = self.patient_repo.add(patient)
        self.notifier.success(
            f"Patient added successfully with ID: {created.id}", patient_id=created.id
        )
        return created

    def update_patient(
        self,
        patient_id: int,
        name: str,
        age: int,
        disease: str,
        contact: str = "",
        address: str = "",
        blood_group: str = "",
    ) -> Patient:
        """Replace every demographic field of a patient.

        Medication bookkeeping is owned by prescriptions and left untouched.
        """
        patient = self.get_patient(patient_id)

        # Validate on a scratch entity so a bad value leaves the record intact
        with self.notifier.validating():
            Patient(name=name, age=age, disease=disease)

        patient.name = name
        patient.age = age
        patient.disease = disease
        patient.contact = contact
        patient.address = address
        patient.blood_group = blood_group

        self.notifier.success(
            f"Patient {patient_id} updated successfully", patient_id=patient_id
        )
        return patient

    def record_diagnosis(self, patient_id: int, diagnosis: str) -> Patient:
        """Set the patient's current disease after an examination."""
        patient = self.get_patient(patient_id)
        patient.disease = diagnosis
        self.notifier.success(
            f"Diagnosis recorded for patient {patient_id}: {diagnosis}",
            patient_id=patient_id,
        )
        return patient

    def remove_patient(self, patient_id: int) -> None:
        """Delete a patient record.

        Appointments, prescriptions and bills referencing the patient are not
        touched here; see CascadeService.
        """
        if not self.patient_repo.remove(patient_id):
            raise self.notifier.failure(NotFoundError("Patient", patient_id))
        self.notifier.success(
            f"Patient {patient_id} removed successfully", patient_id=patient_id
        )

    def get_patient(self, patient_id: int) -> Patient:
        """Get a specific patient by ID."""
        patient = self.patient_repo.get_by_id(patient_id)
        if patient is None:
            raise self.notifier.failure(NotFoundError("Patient", patient_id))
        return patient

    def find_patient(self, patient_id: int) -> Optional[Patient]:
        """Lookup without reporting; None when absent."""
        return self.patient_repo.get_by_id(patient_id)

    def list_patients(self) -> List[Patient]:
        return self.patient_repo.get_all()

    def find_by_disease(self, disease: str) -> List[Patient]:
        return self.patient_repo.find_by_disease(disease)

    def find_by_age_range(self, min_age: int, max_age: int) -> List[Patient]:
        return self.patient_repo.find_by_age_range(min_age, max_age)

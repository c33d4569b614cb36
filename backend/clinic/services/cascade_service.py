"""
Removal of records that other records depend on.

The entity services remove exactly one record and never look at who
references it. This service sits above them:

- ``dependents_of_*`` report which records reference an entity, so a caller
  can check before removing.
- ``remove_*`` honour the ``cascade_on_delete`` setting. When it is off the
  entity is removed alone and a warning lists the dependents left dangling.
  When it is on the dependents are cleaned up first.
"""

from typing import Dict, List, Optional

from ..core.notifications import Notifier
from .appointment_service import AppointmentService
from .billing_service import BillingService
from .doctor_service import DoctorService
from .medication_service import MedicationService
from .patient_service import PatientService
from .prescription_service import PrescriptionService

Dependents = Dict[str, List[int]]


class CascadeService:
    """Composite service coordinating removals across entity services."""

    def __init__(
        self,
        patient_service: PatientService,
        doctor_service: DoctorService,
        medication_service: MedicationService,
        appointment_service: AppointmentService,
        prescription_service: PrescriptionService,
        billing_service: BillingService,
        notifier: Optional[Notifier] = None,
        cascade_on_delete: bool = False,
    ) -> None:
        self.patient_service = patient_service
        self.doctor_service = doctor_service
        self.medication_service = medication_service
        self.appointment_service = appointment_service
        self.prescription_service = prescription_service
        self.billing_service = billing_service
        self.notifier = notifier or Notifier()
        self.cascade_on_delete = cascade_on_delete

    def dependents_of_patient(self, patient_id: int) -> Dependents:
        return {
            "appointments": [
                a.id for a in self.appointment_service.by_patient(patient_id)
            ],
            "prescriptions": [
                p.id for p in self.prescription_service.by_patient(patient_id)
            ],
            "bills": [b.id for b in self.billing_service.by_patient(patient_id)],
        }

    def dependents_of_doctor(self, doctor_id: int) -> Dependents:
        return {
            "appointments": [
                a.id for a in self.appointment_service.by_doctor(doctor_id)
            ],
            "prescriptions": [
                p.id for p in self.prescription_service.by_doctor(doctor_id)
            ],
        }

    def dependents_of_medication(self, medication_id: int) -> Dependents:
        return {
            "prescriptions": [
                p.id
                for p in self.prescription_service.list_prescriptions()
                if medication_id in p.medication_ids
            ],
            "patients": [
                p.id
                for p in self.patient_service.list_patients()
                if p.holds_medication(medication_id)
            ],
        }

    def remove_patient(self, patient_id: int) -> Dependents:
        """Remove a patient; returns the dependents found at removal time."""
        self.patient_service.get_patient(patient_id)
        dependents = self.dependents_of_patient(patient_id)

        if self.cascade_on_delete:
            for appointment_id in dependents["appointments"]:
                self.appointment_service.remove_appointment(appointment_id)
            for prescription_id in dependents["prescriptions"]:
                self.prescription_service.remove_prescription(prescription_id)
            for bill_id in dependents["bills"]:
                self.billing_service.remove_bill(bill_id)

        self.patient_service.remove_patient(patient_id)
        self._report("Patient", patient_id, dependents)
        return dependents

    def remove_doctor(self, doctor_id: int) -> Dependents:
        self.doctor_service.get_doctor(doctor_id)
        dependents = self.dependents_of_doctor(doctor_id)

        if self.cascade_on_delete:
            for appointment_id in dependents["appointments"]:
                self.appointment_service.remove_appointment(appointment_id)
            for prescription_id in dependents["prescriptions"]:
                self.prescription_service.remove_prescription(prescription_id)

        self.doctor_service.remove_doctor(doctor_id)
        self._report("Doctor", doctor_id, dependents)
        return dependents

    def remove_medication(self, medication_id: int) -> Dependents:
        self.medication_service.get_medication(medication_id)
        dependents = self.dependents_of_medication(medication_id)

        if self.cascade_on_delete:
            self.prescription_service.strip_medication(medication_id)
            for patient_id in dependents["patients"]:
                patient = self.patient_service.find_patient(patient_id)
                if patient is not None:
                    patient.purge_medication(medication_id)

        self.medication_service.remove_medication(medication_id)
        self._report("Medication", medication_id, dependents)
        return dependents

    def _report(self, entity: str, entity_id: int, dependents: Dependents) -> None:
        count = sum(len(ids) for ids in dependents.values())
        if not count:
            return
        if self.cascade_on_delete:
            self.notifier.info(
                f"{entity} {entity_id} removed together with {count} dependent record(s)",
                entity=entity,
                id=entity_id,
                dependents=dependents,
            )
        else:
            self.notifier.warning(
                f"{entity} {entity_id} removed; {count} dependent record(s) "
                "still reference it",
                entity=entity,
                id=entity_id,
                dependents=dependents,
            )


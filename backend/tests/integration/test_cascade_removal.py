"""
Integration tests for removing records that others depend on.
"""

import pytest

from clinic.core.exceptions import NotFoundError


def _populate(clinic):
    clinic.doctors.add_doctor("Gregory House", "Diagnostics", consultation_fee="150")
    clinic.patients.add_patient("Ana Souza", 34, "Migraine")
    clinic.patients.add_patient("Ben Carter", 58, "Diabetes")
    clinic.medications.add_medication("Aspirin", "100mg", "4.50")
    clinic.appointments.book_appointment(1, 1, "2024-05-01", "09:00-09:30")
    clinic.appointments.book_appointment(2, 1, "2024-05-01", "10:00-10:30")
    clinic.prescriptions.create_prescription(1, 1, "2024-05-01", [1])
    clinic.prescriptions.create_prescription(2, 1, "2024-05-01", [1, 1])
    clinic.billing.generate_bill(1, "2024-05-01", "150")
    return clinic


@pytest.mark.cascade
class TestRemovalWithoutCascade:
    def test_dependents_are_reported(self, clinic):
        _populate(clinic)

        assert clinic.records.dependents_of_patient(1) == {
            "appointments": [1],
            "prescriptions": [1],
            "bills": [1],
        }
        assert clinic.records.dependents_of_medication(1) == {
            "prescriptions": [1, 2],
            "patients": [1, 2],
        }

    def test_patient_removed_alone_with_warning(self, clinic, recording_display):
        _populate(clinic)

        dependents = clinic.records.remove_patient(1)

        assert clinic.patients.find_patient(1) is None
        assert dependents["appointments"] == [1]
        assert len(clinic.appointments.list_appointments()) == 2
        assert len(clinic.billing.list_bills()) == 1
        assert recording_display.messages[-1] == (
            "warning",
            "Patient 1 removed; 3 dependent record(s) still reference it",
        )

    def test_medication_removed_alone_keeps_patient_lists(self, clinic):
        _populate(clinic)

        clinic.records.remove_medication(1)

        assert clinic.medications.find_medication(1) is None
        assert clinic.patients.get_patient(1).holds_medication(1)

    def test_removing_unreferenced_record_is_quiet(self, clinic, recording_display):
        clinic.doctors.add_doctor("Lisa Cuddy", "Endocrinology")

        clinic.records.remove_doctor(1)

        assert recording_display.messages[-1][0] == "success"

    def test_missing_record(self, clinic):
        with pytest.raises(NotFoundError):
            clinic.records.remove_patient(5)


@pytest.mark.cascade
class TestRemovalWithCascade:
    def test_patient_cascade(self, cascading_clinic):
        clinic = _populate(cascading_clinic)

        clinic.records.remove_patient(1)

        assert [a.patient_id for a in clinic.appointments.list_appointments()] == [2]
        assert [p.patient_id for p in clinic.prescriptions.list_prescriptions()] == [2]
        assert clinic.billing.list_bills() == []

    def test_doctor_cascade(self, cascading_clinic):
        clinic = _populate(cascading_clinic)

        clinic.records.remove_doctor(1)

        assert clinic.appointments.list_appointments() == []
        assert clinic.prescriptions.list_prescriptions() == []
        assert not clinic.patients.get_patient(1).holds_medication(1)
        assert not clinic.patients.get_patient(2).holds_medication(1)

    def test_medication_cascade(self, cascading_clinic, recording_display):
        clinic = _populate(cascading_clinic)
        clinic.patients.add_patient("Cleo Diaz", 27, "Flu", medication_ids=[1])

        clinic.records.remove_medication(1)

        assert all(
            p.medication_ids == [] for p in clinic.prescriptions.list_prescriptions()
        )
        assert not any(p.holds_medication(1) for p in clinic.patients.list_patients())
        assert recording_display.messages[-1][0] == "info"

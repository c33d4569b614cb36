"""
Unit tests for PrescriptionService.

The patient returned by the mocked PatientService is a real entity, so the
medication multiset bookkeeping is checked on it directly.
"""

from unittest.mock import Mock

import pytest

from clinic.core.exceptions import InvalidReferenceError, NotFoundError
from clinic.domain.entities import Medication, Prescription
from clinic.services.prescription_service import PrescriptionService
from tests.factories.repository_factories import (
    PrescriptionRepositoryFactory,
    ServiceMockFactory,
)


@pytest.fixture
def mock_prescription_repo() -> Mock:
    return PrescriptionRepositoryFactory.create_mock_full()


@pytest.fixture
def mock_patient_service(domain_patient) -> Mock:
    mock_service = ServiceMockFactory.patient_service()
    mock_service.find_patient.return_value = domain_patient
    return mock_service


@pytest.fixture
def mock_doctor_service(domain_doctor) -> Mock:
    mock_service = ServiceMockFactory.doctor_service()
    mock_service.find_doctor.return_value = domain_doctor
    return mock_service


@pytest.fixture
def mock_medication_service() -> Mock:
    """Medications 1 and 2 exist; everything else is unknown."""
    catalogue = {1: Medication(id=1, name="Aspirin"), 2: Medication(id=2, name="Insulin")}
    mock_service = ServiceMockFactory.medication_service()
    mock_service.find_medication.side_effect = catalogue.get
    return mock_service


@pytest.fixture
def service(
    mock_prescription_repo,
    mock_patient_service,
    mock_doctor_service,
    mock_medication_service,
    mock_notifier,
) -> PrescriptionService:
    return PrescriptionService(
        mock_prescription_repo,
        mock_patient_service,
        mock_doctor_service,
        mock_medication_service,
        mock_notifier,
    )


@pytest.mark.services
@pytest.mark.prescription
class TestCreatePrescription:
    def test_create_grants_medications(self, service, domain_patient):
        prescription = service.create_prescription(1, 1, "2024-05-01", [1, 2])

        assert prescription.id == 1
        assert domain_patient.medication_ids == {1: 1, 2: 1}

    def test_duplicated_ids_add_one_reference_each(self, service, domain_patient):
        service.create_prescription(1, 1, "2024-05-01", [1, 1])
        assert domain_patient.medication_ids[1] == 2

    def test_unknown_patient(
        self, service, mock_patient_service, mock_prescription_repo
    ):
        mock_patient_service.find_patient.return_value = None

        with pytest.raises(InvalidReferenceError, match="patient reference"):
            service.create_prescription(9, 1, "2024-05-01", [1])

        mock_prescription_repo.add.assert_not_called()

    def test_unknown_doctor(self, service, mock_doctor_service):
        mock_doctor_service.find_doctor.return_value = None

        with pytest.raises(InvalidReferenceError, match="doctor reference"):
            service.create_prescription(1, 9, "2024-05-01", [1])

    def test_unknown_medication_changes_nothing(
        self, service, mock_prescription_repo, domain_patient
    ):
        with pytest.raises(InvalidReferenceError) as exc_info:
            service.create_prescription(1, 1, "2024-05-01", [1, 99])

        assert exc_info.value.entity_id == 99
        mock_prescription_repo.add.assert_not_called()
        assert not domain_patient.holds_medication(1)

    def test_accepts_any_iterable(self, service):
        prescription = service.create_prescription(1, 1, "2024-05-01", (m for m in [2]))
        assert prescription.medication_ids == [2]


@pytest.mark.services
@pytest.mark.prescription
class TestChangePrescription:
    @pytest.fixture
    def stored(self, mock_prescription_repo, domain_patient) -> Prescription:
        prescription = Prescription(
            id=1, patient_id=1, doctor_id=1, date="2024-05-01", medication_ids=[1, 2]
        )
        domain_patient.add_medication(1)
        domain_patient.add_medication(2)
        mock_prescription_repo.get_by_id.return_value = prescription
        return prescription

    def test_update_replaces_list(self, service, stored, domain_patient):
        service.update_prescription(1, [2], "Once daily")

        assert stored.medication_ids == [2]
        assert stored.instructions == "Once daily"
        assert not domain_patient.holds_medication(1)
        assert domain_patient.medication_ids[2] == 1

    def test_update_with_unknown_medication_changes_nothing(
        self, service, stored, domain_patient
    ):
        with pytest.raises(InvalidReferenceError):
            service.update_prescription(1, [42])

        assert stored.medication_ids == [1, 2]
        assert domain_patient.holds_medication(1)

    def test_update_missing(self, service, mock_prescription_repo):
        mock_prescription_repo.get_by_id.return_value = None
        with pytest.raises(NotFoundError):
            service.update_prescription(5, [1])

    def test_remove_retracts_medications(
        self, service, stored, domain_patient, mock_prescription_repo
    ):
        domain_patient.add_medication(1)  # a second prescription also lists it

        service.remove_prescription(1)

        assert domain_patient.medication_ids == {1: 1}
        mock_prescription_repo.remove.assert_called_once_with(1)

    def test_strip_medication(
        self, service, mock_prescription_repo, domain_patient, mock_notifier
    ):
        prescription = Prescription(
            id=3, patient_id=1, doctor_id=1, medication_ids=[1, 2, 1]
        )
        for medication_id in prescription.medication_ids:
            domain_patient.add_medication(medication_id)
        mock_prescription_repo.find_by_medication.return_value = [prescription]

        changed = service.strip_medication(1)

        assert changed == [prescription]
        assert prescription.medication_ids == [2]
        assert not domain_patient.holds_medication(1)
        assert domain_patient.holds_medication(2)
        mock_notifier.display.info.assert_called_once()

    def test_strip_unused_medication_is_silent(self, service, mock_notifier):
        assert service.strip_medication(7) == []
        mock_notifier.display.info.assert_not_called()

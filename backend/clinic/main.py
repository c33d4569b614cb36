"""
Application factory for the clinic records core.

Builds every repository and service, shares one Notifier between them and
applies the runtime settings. The resulting store lives for the process
only.

Usage:
    from clinic.main import create_clinic

    clinic = create_clinic()
    patient = clinic.patients.add_patient("Ana", 34, "Flu")
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .core.config import Settings, load_settings, log_settings
from .core.notifications import Notifier
from .domain.interfaces import IDisplay
from .repositories import (
    AppointmentRepository,
    BillRepository,
    DoctorRepository,
    MedicationRepository,
    PatientRepository,
    PrescriptionRepository,
    UserRepository,
)
from .services import (
    AppointmentService,
    AuthenticationService,
    BillingService,
    CascadeService,
    DoctorService,
    MedicationService,
    PatientService,
    PrescriptionService,
)

logger = logging.getLogger(__name__)


@dataclass
class Clinic:
    """Service container handed to the menu layer."""

    settings: Settings
    notifier: Notifier
    patients: PatientService
    doctors: DoctorService
    medications: MedicationService
    appointments: AppointmentService
    prescriptions: PrescriptionService
    billing: BillingService
    auth: AuthenticationService
    records: CascadeService


def create_clinic(
    settings: Optional[Settings] = None,
    display: Optional[IDisplay] = None,
    notifier: Optional[Notifier] = None,
) -> Clinic:
    """
    Wire a fresh, empty clinic.

    Args:
        settings: Runtime settings; loaded from the environment when omitted
        display: Presentation sink for human-facing messages
        notifier: Pre-built notifier; overrides ``display`` when given
    """
    settings = settings or load_settings()
    notifier = notifier or Notifier(display=display)

    medication_repo = MedicationRepository()

    patients = PatientService(PatientRepository(), medication_repo, notifier)
    doctors = DoctorService(DoctorRepository(), notifier)
    medications = MedicationService(medication_repo, notifier)
    appointments = AppointmentService(
        AppointmentRepository(),
        patients,
        doctors,
        notifier,
        cancelled_slots_block=settings.cancelled_slots_block,
    )
    prescriptions = PrescriptionService(
        PrescriptionRepository(), patients, doctors, medications, notifier
    )
    billing = BillingService(BillRepository(), patients, notifier)
    auth = AuthenticationService(UserRepository(), notifier)
    records = CascadeService(
        patients,
        doctors,
        medications,
        appointments,
        prescriptions,
        billing,
        notifier,
        cascade_on_delete=settings.cascade_on_delete,
    )

    log_settings(settings)
    logger.info("Clinic services initialized")

    return Clinic(
        settings=settings,
        notifier=notifier,
        patients=patients,
        doctors=doctors,
        medications=medications,
        appointments=appointments,
        prescriptions=prescriptions,
        billing=billing,
        auth=auth,
        records=records,
    )

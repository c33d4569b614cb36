"""Management commands for the clinic records backend."""

from __future__ import annotations

import logging
from typing import Optional

import click

from clinic.core.config import load_settings
from clinic.core.logging_config import setup_logging
from clinic.core.notifications import ConsoleDisplay
from clinic.domain.entities import Role
from clinic.main import Clinic, create_clinic
from clinic.services import DEFAULT_TIME_SLOTS


def seed_demo_data(clinic: Clinic) -> None:
    """Populate a fresh clinic with a small, consistent data set."""
    clinic.auth.register_user("admin", "admin123", Role.ADMIN)
    clinic.auth.register_user("reception", "desk123", Role.RECEPTION)

    house = clinic.doctors.add_doctor(
        "Gregory House", "Diagnostics", "555-0100", "house@clinic.test", "150.00"
    )
    cuddy = clinic.doctors.add_doctor(
        "Lisa Cuddy", "Endocrinology", "555-0101", "cuddy@clinic.test", "120.00"
    )

    aspirin = clinic.medications.add_medication("Aspirin", "100mg", "4.50", "Bayer")
    insulin = clinic.medications.add_medication(
        "Insulin", "10 IU", "32.00", "Novo Nordisk"
    )

    ana = clinic.patients.add_patient(
        "Ana Souza", 34, "Migraine", "555-0200", "12 Elm St", "O+"
    )
    ben = clinic.patients.add_patient(
        "Ben Carter", 58, "Diabetes", "555-0201", "4 Oak Ave", "A-"
    )

    clinic.appointments.book_appointment(ana.id, house.id, "2024-05-01", "09:00-09:30")
    clinic.appointments.book_appointment(ben.id, cuddy.id, "2024-05-01", "09:00-09:30")
    clinic.appointments.book_appointment(ben.id, house.id, "2024-05-01", "10:00-10:30")

    clinic.prescriptions.create_prescription(
        ana.id, house.id, "2024-05-01", [aspirin.id], "Twice daily after meals"
    )
    clinic.prescriptions.create_prescription(
        ben.id, cuddy.id, "2024-05-01", [insulin.id, aspirin.id], "Before breakfast"
    )

    clinic.billing.generate_bill(ana.id, "2024-05-01", house.consultation_fee, "9.00")
    bill = clinic.billing.generate_bill(
        ben.id, "2024-05-01", cuddy.consultation_fee, "36.50", "20.00"
    )
    clinic.billing.update_payment_status(bill.id, "Paid", "Card")


def build_demo_clinic(verbose: bool = False) -> Clinic:
    settings = load_settings()
    setup_logging(
        log_level=settings.log_level if verbose else "WARNING",
        log_to_file=settings.log_to_file,
        use_json_format=settings.log_json_format,
        log_dir=settings.log_dir,
    )
    display = ConsoleDisplay() if verbose else None
    clinic = create_clinic(settings, display=display)
    seed_demo_data(clinic)
    return clinic


@click.group()
def cli() -> None:
    """Entry point for management commands."""


@cli.command("demo")
@click.option("--verbose", is_flag=True, help="Show every service message.")
def demo(verbose: bool) -> None:
    """Seed an in-memory clinic and print a summary."""
    clinic = build_demo_clinic(verbose)

    click.echo(f"Patients:      {len(clinic.patients.list_patients())}")
    click.echo(f"Doctors:       {len(clinic.doctors.list_doctors())}")
    click.echo(f"Appointments:  {len(clinic.appointments.list_appointments())}")
    click.echo(f"Prescriptions: {len(clinic.prescriptions.list_prescriptions())}")
    click.echo(f"Revenue:       {clinic.billing.total_revenue():.2f}")
    click.echo(f"Outstanding:   {clinic.billing.outstanding_balance():.2f}")

    click.echo("\nSchedule for 2024-05-01:")
    for appointment in clinic.appointments.daily_schedule("2024-05-01"):
        doctor = clinic.doctors.get_doctor(appointment.doctor_id)
        patient = clinic.patients.get_patient(appointment.patient_id)
        click.echo(
            f"  {appointment.time_slot}  {doctor.name:<15} {patient.name} "
            f"[{appointment.status.value}]"
        )


@cli.command("slots")
@click.option("--doctor", "doctor_id", type=int, required=True, help="Doctor ID.")
@click.option("--date", "date", default="2024-05-01", show_default=True)
def slots(doctor_id: int, date: str) -> None:
    """List the free slots of a seeded doctor on a date."""
    clinic = build_demo_clinic()
    if clinic.doctors.find_doctor(doctor_id) is None:
        raise click.ClickException(f"No doctor found with ID {doctor_id}.")

    free = clinic.appointments.available_slots(doctor_id, date)
    taken = [slot for slot in DEFAULT_TIME_SLOTS if slot not in free]
    for slot in DEFAULT_TIME_SLOTS:
        marker = "booked" if slot in taken else "free"
        click.echo(f"{slot}  {marker}")


@cli.command("config")
@click.option("--env-file", default=None, help="Optional .env file to load first.")
def show_config(env_file: Optional[str]) -> None:
    """Print the effective settings."""
    logging.getLogger("clinic.core.config").setLevel(logging.ERROR)
    settings = load_settings(env_file)
    for key, value in settings.as_dict().items():
        click.echo(f"{key}={value}")


if __name__ == "__main__":
    cli()

"""
Billing service for business logic following SOLID principles.

Totals are never stored: ``Bill.total_amount`` is derived from the charge
fields, and revenue figures are recomputed from the bills on each call.
"""

from decimal import Decimal
from typing import List, Optional

from ..core.exceptions import InvalidReferenceError, NotFoundError, ValidationError
from ..core.notifications import Notifier
from ..domain.entities import Bill, Money, PaymentStatus, to_money
from ..domain.interfaces import IBillRepository
from .patient_service import PatientService


class BillingService:
    """Application service for patient billing."""

    def __init__(
        self,
        bill_repo: IBillRepository,
        patient_service: PatientService,
        notifier: Optional[Notifier] = None,
    ) -> None:
        self.bill_repo = bill_repo
        self.patient_service = patient_service
        self.notifier = notifier or Notifier()

    def generate_bill(
        self,
        patient_id: int,
        date: str,
        consultation_fee: Money,
        medication_charges: Money = 0,
        other_charges: Money = 0,
    ) -> Bill:
        """Create a Pending bill for an existing patient."""
        if self.patient_service.find_patient(patient_id) is None:
            raise self.notifier.failure(InvalidReferenceError("Patient", patient_id))

        with self.notifier.validating():
            bill = Bill(
                patient_id=patient_id,
                date=date,
                consultation_fee=consultation_fee,
                medication_charges=medication_charges,
                other_charges=other_charges,
                payment_status=PaymentStatus.PENDING,
            )
        created = self.bill_repo.add(bill)
        self.notifier.success(
            f"Bill generated successfully with ID: {created.id}. "
            f"Total amount: {created.total_amount:.2f}",
            bill_id=created.id,
            patient_id=patient_id,
            total_amount=str(created.total_amount),
        )
        return created

    def update_payment_status(
        self, bill_id: int, status: PaymentStatus, method: str = ""
    ) -> Bill:
        """Set the payment status and, when given, the payment method."""
        bill = self.get_bill(bill_id)
        with self.notifier.validating():
            status = PaymentStatus(status)

        bill.payment_status = status
        if method:
            bill.payment_method = method

        self.notifier.success(
            f"Bill {bill_id} payment status set to {status.value}",
            bill_id=bill_id,
        )
        return bill

    def update_charges(
        self,
        bill_id: int,
        consultation_fee: Optional[Money] = None,
        medication_charges: Optional[Money] = None,
        other_charges: Optional[Money] = None,
    ) -> Bill:
        """Overwrite the given charges; omitted ones are kept."""
        bill = self.get_bill(bill_id)

        new_charges = {
            "consultation_fee": consultation_fee,
            "medication_charges": medication_charges,
            "other_charges": other_charges,
        }
        normalized = {}
        for field_name, value in new_charges.items():
            if value is None:
                continue
            with self.notifier.validating():
                amount = to_money(value)
            if amount < 0:
                raise self.notifier.failure(
                    ValidationError("Charges cannot be negative", field_name)
                )
            normalized[field_name] = amount

        for field_name, amount in normalized.items():
            setattr(bill, field_name, amount)

        self.notifier.success(
            f"Bill {bill_id} charges updated. Total amount: {bill.total_amount:.2f}",
            bill_id=bill_id,
            total_amount=str(bill.total_amount),
        )
        return bill

    def remove_bill(self, bill_id: int) -> None:
        if not self.bill_repo.remove(bill_id):
            raise self.notifier.failure(NotFoundError("Bill", bill_id))
        self.notifier.success(f"Bill {bill_id} removed", bill_id=bill_id)

    def get_bill(self, bill_id: int) -> Bill:
        bill = self.bill_repo.get_by_id(bill_id)
        if bill is None:
            raise self.notifier.failure(NotFoundError("Bill", bill_id))
        return bill

    def list_bills(self) -> List[Bill]:
        return self.bill_repo.get_all()

    def by_patient(self, patient_id: int) -> List[Bill]:
        return self.bill_repo.find_by_patient(patient_id)

    def by_payment_status(self, status: PaymentStatus) -> List[Bill]:
        with self.notifier.validating():
            status = PaymentStatus(status)
        return self.bill_repo.find_by_payment_status(status)

    def total_revenue(self) -> Decimal:
        """Sum of every bill total, regardless of payment status."""
        return sum((bill.total_amount for bill in self.bill_repo.get_all()), Decimal("0"))

    def outstanding_balance(self) -> Decimal:
        """Sum of the totals of bills not yet paid."""
        return sum(
            (bill.total_amount for bill in self.bill_repo.get_all() if not bill.is_paid),
            Decimal("0"),
        )

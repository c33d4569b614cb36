"""
Bill repository implementation following SOLID principles.
"""

from typing import List

from ..domain.entities import Bill, PaymentStatus
from ..domain.interfaces import IBillRepository
from .base import InMemoryRepository


class BillRepository(InMemoryRepository[Bill], IBillRepository):
    """Repository for Bill storage operations."""

    def find_by_patient(self, patient_id: int) -> List[Bill]:
        return self.find(lambda bill: bill.patient_id == patient_id)

    def find_by_payment_status(self, status: PaymentStatus) -> List[Bill]:
        status = PaymentStatus(status)
        return self.find(lambda bill: bill.payment_status == status)

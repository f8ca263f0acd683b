from decimal import Decimal
from typing import Dict, Optional, Protocol, Type
from hospital.models.enums import PatientType
from hospital.utils.exceptions import StrategyNotConfiguredError
from hospital.utils.hospital_logger import HospitalLogger


class BillingStrategy(Protocol):
    def calculate_bill(self, duration_minutes: int, patient_type: PatientType) -> Decimal:
        ...


class StandardBillingStrategy:
    BASE_RATE = Decimal("500")
    PER_MINUTE_RATE = Decimal("10")

    def calculate_bill(self, duration_minutes: int, patient_type: PatientType) -> Decimal:
        return self.BASE_RATE + duration_minutes * self.PER_MINUTE_RATE


class PremiumBillingStrategy:
    BASE_RATE = Decimal("1000")
    PER_MINUTE_RATE = Decimal("15")
    DISCOUNT = Decimal("0.1")

    def calculate_bill(self, duration_minutes: int, patient_type: PatientType) -> Decimal:
        subtotal = self.BASE_RATE + duration_minutes * self.PER_MINUTE_RATE
        return subtotal - subtotal * self.DISCOUNT


class EmergencyBillingStrategy:
    BASE_RATE = Decimal("2000")
    PER_MINUTE_RATE = Decimal("20")
    SURCHARGE = Decimal("500")

    def calculate_bill(self, duration_minutes: int, patient_type: PatientType) -> Decimal:
        return self.BASE_RATE + duration_minutes * self.PER_MINUTE_RATE + self.SURCHARGE


BILLING_STRATEGIES: Dict[PatientType, Type[BillingStrategy]] = {
    PatientType.GENERAL: StandardBillingStrategy,
    PatientType.PREMIUM: PremiumBillingStrategy,
    PatientType.EMERGENCY: EmergencyBillingStrategy,
}

_missing = set(PatientType) - set(BILLING_STRATEGIES)
if _missing:
    raise RuntimeError(f"No billing strategy registered for: {', '.join(t.value for t in _missing)}")


class BillingContext:
    def __init__(self, strategy: Optional[BillingStrategy] = None):
        self._strategy = strategy

    @property
    def strategy(self) -> Optional[BillingStrategy]:
        return self._strategy

    def set_strategy(self, strategy: BillingStrategy) -> None:
        self._strategy = strategy

    def calculate_bill(self, duration_minutes: int, patient_type: PatientType) -> Decimal:
        if self._strategy is None:
            raise StrategyNotConfiguredError("Billing strategy not set")
        return self._strategy.calculate_bill(duration_minutes, patient_type)


class BillingService:
    def __init__(self, logger: HospitalLogger):
        self.logger = logger
        self._context = BillingContext()

    @staticmethod
    def get_strategy(patient_type: PatientType) -> BillingStrategy:
        strategy_cls = BILLING_STRATEGIES.get(patient_type, StandardBillingStrategy)
        return strategy_cls()

    def generate_bill(self, patient_type: PatientType, duration_minutes: int) -> Decimal:
        self._context.set_strategy(self.get_strategy(patient_type))
        bill = self._context.calculate_bill(duration_minutes, patient_type)

        self.logger.log(f"Bill generated: ${bill} for {patient_type.value} patient")
        return bill

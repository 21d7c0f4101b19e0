# pyright: standard

from typing import Any

from calchistory.models import (
    CalculationRecord,
    CalculationType,
    EosbInputs,
    EosbOutputs,
    GosiInputs,
    GosiOutputs,
    RecordMetadata,
    record_class_for,
)

BASE_TIME_MS = 1_700_000_000_000


class FakeClock:
    """Deterministic millisecond clock. Each call returns `now` and then advances it by `step`."""

    now: int
    step: int

    def __init__(self, now: int = BASE_TIME_MS, step: int = 1_000) -> None:
        self.now = now
        self.step = step

    def __call__(self) -> int:
        current = self.now
        self.now += self.step
        return current


def gosi_inputs(basic_salary: float = 10_000, housing_allowance: float = 2_500) -> GosiInputs:
    return {
        "basicSalary": basic_salary,
        "housingAllowance": housing_allowance,
        "isNonSaudi": False,
        "employerContributionRate": 0.1175,
        "employeeContributionRate": 0.0975,
    }


def gosi_outputs() -> GosiOutputs:
    return {
        "employeeContribution": 1218.75,
        "employerContribution": 1468.75,
        "totalContribution": 2687.5,
        "totalInsurableSalary": 12_500,
    }


def eosb_inputs() -> EosbInputs:
    return {
        "basicSalary": 15_000,
        "allowances": 5_000,
        "yearsOfService": 8.5,
        "terminationReason": "resignation",
        "contractType": "unlimited",
    }


def eosb_outputs() -> EosbOutputs:
    return {
        "totalAmount": 93_333.33,
        "yearsCalculation": "8 years 6 months",
        "eligibilityPercentage": 66.67,
        "breakdown": {"firstFiveYears": 50_000, "afterFiveYears": 70_000},
    }


def make_record(
    record_id: str,
    timestamp: int,
    type_tag: CalculationType = CalculationType.GOSI,
    inputs: dict[str, Any] | None = None,
    outputs: dict[str, Any] | None = None,
    metadata: RecordMetadata | None = None,
) -> CalculationRecord:
    """Builds a record directly, bypassing the store (for seeding backends and import payloads)."""
    return record_class_for(type_tag)(
        id=record_id,
        timestamp=timestamp,
        inputs=inputs if inputs is not None else {"basicSalary": 10_000},
        outputs=outputs if outputs is not None else {"totalContribution": 2_687.5},
        metadata=metadata,
    )

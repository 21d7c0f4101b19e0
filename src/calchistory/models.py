# pyright: standard
from enum import Enum
from typing import Any, Literal, TypedDict

from msgspec import Struct

from calchistory.consts import DEFAULT_STORAGE_KEY, MAX_RECORDS


class CalculationType(str, Enum):
    GOSI = "gosi"
    EOSB = "eosb"
    LEAVE = "leave"
    SAUDIZATION = "saudization"
    COMPLIANCE = "compliance"


class RecordMetadata(Struct, frozen=True, rename="camel", omit_defaults=True):
    """Freeform, searchable annotations attached to a calculation."""

    employee_name: str | None = None
    employee_id: str | None = None
    department: str | None = None
    notes: str | None = None


class _CalculationRecordBase(Struct, frozen=True, tag_field="type", omit_defaults=True):
    id: str
    timestamp: int
    inputs: dict[str, Any]
    outputs: dict[str, Any]
    metadata: RecordMetadata | None = None


class GosiRecord(_CalculationRecordBase, tag="gosi"):
    @property
    def type(self) -> Literal[CalculationType.GOSI]:
        return CalculationType.GOSI


class EosbRecord(_CalculationRecordBase, tag="eosb"):
    @property
    def type(self) -> Literal[CalculationType.EOSB]:
        return CalculationType.EOSB


class LeaveRecord(_CalculationRecordBase, tag="leave"):
    @property
    def type(self) -> Literal[CalculationType.LEAVE]:
        return CalculationType.LEAVE


class SaudizationRecord(_CalculationRecordBase, tag="saudization"):
    @property
    def type(self) -> Literal[CalculationType.SAUDIZATION]:
        return CalculationType.SAUDIZATION


class ComplianceRecord(_CalculationRecordBase, tag="compliance"):
    @property
    def type(self) -> Literal[CalculationType.COMPLIANCE]:
        return CalculationType.COMPLIANCE


type CalculationRecord = GosiRecord | EosbRecord | LeaveRecord | SaudizationRecord | ComplianceRecord


def record_class_for(type_tag: CalculationType) -> type[CalculationRecord]:
    match type_tag:
        case CalculationType.GOSI:
            return GosiRecord
        case CalculationType.EOSB:
            return EosbRecord
        case CalculationType.LEAVE:
            return LeaveRecord
        case CalculationType.SAUDIZATION:
            return SaudizationRecord
        case CalculationType.COMPLIANCE:
            return ComplianceRecord


# Payload shapes per calculation type. Keys match the persisted JSON.


class GosiInputs(TypedDict):
    basicSalary: float
    housingAllowance: float
    isNonSaudi: bool
    employerContributionRate: float
    employeeContributionRate: float


class GosiOutputs(TypedDict):
    employeeContribution: float
    employerContribution: float
    totalContribution: float
    totalInsurableSalary: float


class EosbInputs(TypedDict):
    basicSalary: float
    allowances: float
    yearsOfService: float
    terminationReason: str
    contractType: str


class EosbBreakdown(TypedDict):
    firstFiveYears: float
    afterFiveYears: float


class EosbOutputs(TypedDict):
    totalAmount: float
    yearsCalculation: str
    eligibilityPercentage: float
    breakdown: EosbBreakdown


class LeaveInputs(TypedDict):
    yearsOfService: float
    usedDays: int
    carryOverDays: int
    dailySalary: float


class LeaveOutputs(TypedDict):
    annualEntitlement: int
    remainingDays: int
    totalAccrued: int
    cashValue: float


class SaudizationInputs(TypedDict):
    totalEmployees: int
    saudiEmployees: int
    sector: str


class SaudizationOutputs(TypedDict):
    currentPercentage: float
    requiredPercentage: float
    isCompliant: bool
    shortfall: int


class ComplianceInputs(TypedDict):
    checkType: str
    parameters: dict[str, Any]


class ComplianceOutputs(TypedDict):
    status: Literal["compliant", "non-compliant", "warning"]
    score: float
    issues: list[str]
    recommendations: list[str]


class HistoryStats(Struct, frozen=True, rename="camel"):
    total: int
    by_type: dict[str, int]
    last_week: int
    last_month: int
    oldest_record: int | None = None
    newest_record: int | None = None


class StoreConfig(Struct, frozen=True):
    """
    Construction-time settings of a CalculationHistoryStore.

    storage_key: backend key holding the whole collection
    max_records: cap on the persisted collection; oldest records are evicted first
    """

    storage_key: str = DEFAULT_STORAGE_KEY
    max_records: int = MAX_RECORDS

    def __post_init__(self) -> None:
        if not self.storage_key:
            raise ValueError("StoreConfig.storage_key must not be empty.")
        if self.max_records < 1:
            raise ValueError("StoreConfig.max_records must be at least 1.")


def empty_type_counts() -> dict[str, int]:
    return {t.value: 0 for t in CalculationType}

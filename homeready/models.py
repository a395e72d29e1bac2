from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Record(BaseModel):
    """Immutable value record; serializes with camelCase keys via ``by_alias``."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


ScoreStatus = Literal["READY_NOW", "ALMOST_READY", "GETTING_CLOSE", "BUILDING", "EARLY_STAGE", "JUST_EXPLORING"]
Severity = Literal["critical", "significant", "minor"]


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------


class ScoreInput(Record):
    credit_score_range: Optional[str] = None
    annual_income: Optional[str] = None
    down_payment: Optional[str] = None
    price_range: Optional[str] = None
    monthly_debts: Optional[str] = None
    first_time_buyer: Optional[bool] = None
    veteran_status: Optional[str] = None
    # Collected by the extended intake; accepted but not scored yet.
    employment_years: Optional[str] = None
    utah_resident: Optional[bool] = None
    utah_residency_years: Optional[str] = None
    rural_interest: Optional[bool] = None


class ScoreValuesInput(Record):
    credit_score: Optional[float] = Field(default=None, ge=0)
    annual_income: float = Field(default=0.0, ge=0)
    monthly_debts: float = Field(default=0.0, ge=0)
    target_home_price: float = Field(default=0.0, ge=0)
    saved_for_down_payment: float = Field(default=0.0, ge=0)
    first_time_buyer: bool = False
    veteran_status: Optional[str] = None
    co_borrower_credit_score: Optional[float] = Field(default=None, ge=0)
    co_borrower_annual_income: Optional[float] = Field(default=None, ge=0)
    co_borrower_monthly_debts: Optional[float] = Field(default=None, ge=0)


class Profile(Record):
    """Resolved numeric facts about one applicant."""

    credit_score: Optional[int] = None
    annual_income: float
    target_price: float
    saved: float
    monthly_debts: float
    first_time_buyer: Optional[bool] = None
    veteran_status: Optional[str] = None
    employment_years: Optional[str] = None

    @property
    def monthly_income(self) -> float:
        return self.annual_income / 12


# ---------------------------------------------------------------------------
# Score components
# ---------------------------------------------------------------------------


class ScoreBreakdown(Record):
    credit: int = Field(ge=0, le=30)
    dti: int = Field(ge=0, le=25)
    down_payment: int = Field(ge=0, le=20)
    employment: int = Field(ge=0, le=15)
    reserves: int = Field(ge=0, le=10)
    bonus: int = Field(default=0, ge=0)
    penalty: int = Field(default=0, ge=0)


class ScoreSummary(Record):
    total: int
    status: ScoreStatus
    timeline: str


class Gap(Record):
    factor: str
    severity: Literal["high", "medium", "low"]
    current: str
    target: str
    points_lost: int
    potential_gain: int
    action_required: str


class Recommendation(Record):
    priority: int
    category: str
    title: str
    description: str
    impact: str


class ProgramDetail(Record):
    name: str
    eligible: bool
    reason: str
    benefit: str


class ProgramCheck(Record):
    eligible: bool
    reason: str
    benefit: str


class FhaCheck(ProgramCheck):
    down_payment_pct: float


class AssistanceEligibility(Record):
    first_home: ProgramCheck
    home_again: ProgramCheck
    fha: FhaCheck
    va: ProgramCheck
    any_eligible: bool
    best_program: Optional[str] = None
    total_potential_assistance: float = 0.0


# ---------------------------------------------------------------------------
# Solutions (tagged on ``type``)
# ---------------------------------------------------------------------------


class _SolutionBase(Record):
    description: str
    impact: str
    action_label: str


class AdjustPriceSolution(_SolutionBase):
    type: Literal["ADJUST_PRICE"] = "ADJUST_PRICE"
    new_price: int
    monthly_payment: int


class PayDownDebtSolution(_SolutionBase):
    type: Literal["PAY_DOWN_DEBT"] = "PAY_DOWN_DEBT"
    debt_reduction: int
    timeline: str


class IncreaseIncomeSolution(_SolutionBase):
    type: Literal["INCREASE_INCOME"] = "INCREASE_INCOME"
    income_increase: int
    timeline: str


class SaveMoreSolution(_SolutionBase):
    type: Literal["SAVE_MORE"] = "SAVE_MORE"
    savings_needed: int
    months: int
    timeline: str


class ImproveCreditSolution(_SolutionBase):
    type: Literal["IMPROVE_CREDIT"] = "IMPROVE_CREDIT"
    target_score: int = 660
    timeline: str


class DpaProgramsSolution(_SolutionBase):
    type: Literal["DPA_PROGRAMS"] = "DPA_PROGRAMS"
    program: str


class CombinationSolution(_SolutionBase):
    type: Literal["COMBINATION"] = "COMBINATION"
    parts: List[
        Union[
            AdjustPriceSolution,
            PayDownDebtSolution,
            IncreaseIncomeSolution,
            SaveMoreSolution,
            ImproveCreditSolution,
            DpaProgramsSolution,
        ]
    ] = Field(default_factory=list)


Solution = Annotated[
    Union[
        AdjustPriceSolution,
        PayDownDebtSolution,
        IncreaseIncomeSolution,
        SaveMoreSolution,
        ImproveCreditSolution,
        DpaProgramsSolution,
        CombinationSolution,
    ],
    Field(discriminator="type"),
]


# ---------------------------------------------------------------------------
# Primary blockers (tagged on ``type``; "no blocker" is ``None``)
# ---------------------------------------------------------------------------


class _BlockerBase(Record):
    severity: Severity
    headline: str
    subheadline: str
    current_value: str
    target_value: str
    solutions: List[Solution] = Field(default_factory=list)


class DtiBlocker(_BlockerBase):
    type: Literal["DTI"] = "DTI"
    current_dti: int


class DownPaymentBlocker(_BlockerBase):
    type: Literal["DOWN_PAYMENT"] = "DOWN_PAYMENT"
    saved: float
    required: float


class CreditBlocker(_BlockerBase):
    type: Literal["CREDIT"] = "CREDIT"
    credit_score: int


PrimaryBlocker = Annotated[Union[DtiBlocker, DownPaymentBlocker, CreditBlocker], Field(discriminator="type")]


# ---------------------------------------------------------------------------
# Sweet spot and path to goal
# ---------------------------------------------------------------------------


class TargetComparison(Record):
    price_difference: float
    score_difference: int
    payment_difference: int


class SweetSpot(Record):
    recommended_price: int
    score_at_price: int
    status_at_price: ScoreStatus
    timeline_at_price: str
    monthly_payment: int
    down_payment_needed: int
    dti_at_price: int
    why_this_works: str
    compared_to_target: TargetComparison


class _ChangeBase(Record):
    amount: int
    description: str
    impact: str


class DebtReductionChange(_ChangeBase):
    type: Literal["debt_reduction"] = "debt_reduction"


class IncomeIncreaseChange(_ChangeBase):
    type: Literal["income_increase"] = "income_increase"


class SavingsIncreaseChange(_ChangeBase):
    type: Literal["savings_increase"] = "savings_increase"


RequiredChange = Annotated[
    Union[DebtReductionChange, IncomeIncreaseChange, SavingsIncreaseChange], Field(discriminator="type")
]


class PathToGoal(Record):
    target_price: float
    current_score: int
    required_changes: List[RequiredChange]
    estimated_timeline: str
    encouragement: str


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


class ParsedValues(Record):
    credit_score: Optional[int] = None
    monthly_income: float
    annual_income: float
    monthly_debts: float
    target_price: float
    saved_amount: float
    current_dti: int


class ScoreResult(Record):
    total: int = Field(ge=0, le=100)
    status: ScoreStatus
    timeline: str
    color: str
    breakdown: ScoreBreakdown
    programs: List[str]
    program_details: List[ProgramDetail]
    gaps: List[Gap]
    recommendations: List[Recommendation]
    primary_blocker: Optional[PrimaryBlocker] = None
    sweet_spot: SweetSpot
    path_to_goal: Optional[PathToGoal] = None
    parsed_values: ParsedValues
    assistance: AssistanceEligibility


class PriceBudget(Record):
    max_price: int
    max_payment: int
    dti: int


class TargetBudget(Record):
    payment: int
    dti: int


class AffordabilityResult(Record):
    comfortable: PriceBudget
    stretch: PriceBudget
    at_target_price: TargetBudget
    monthly_income: int
    monthly_debts: float
    current_rate: float

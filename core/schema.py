from dataclasses import dataclass, field
from typing import Optional, Tuple

from config.settings import PERIODS_PER_YEAR
from core.validator import ensure_annual_rate, ensure_loan_inputs


@dataclass(frozen=True)
class LoanParameters:
    principal: float
    annual_rate_percent: float  # 年利率(%)
    term_periods: int  # 还款期数，不是年数
    periods_per_year: int = PERIODS_PER_YEAR

    def __post_init__(self):
        ensure_annual_rate(self.annual_rate_percent, self.periods_per_year)
        ensure_loan_inputs(self.principal, self.periodic_rate, self.term_periods)

    @property
    def periodic_rate(self) -> float:
        """期利率，每次访问重新计算"""
        return self.annual_rate_percent / 100 / self.periods_per_year


@dataclass(frozen=True)
class AmortizationEntry:
    period: int
    interest: float
    principal: float
    remaining_balance: float

    @property
    def payment(self) -> float:
        return self.interest + self.principal


@dataclass(frozen=True)
class AmortizationSchedule:
    entries: Tuple[AmortizationEntry, ...]
    periodic_payment: float
    total_interest: float

    @property
    def periods(self) -> int:
        return len(self.entries)

    @property
    def total_principal(self) -> float:
        return sum(e.principal for e in self.entries)

    @property
    def total_paid(self) -> float:
        return self.total_principal + self.total_interest

    @property
    def final_balance(self) -> float:
        return self.entries[-1].remaining_balance if self.entries else 0.0


@dataclass(frozen=True)
class ScenarioResult:
    extra_payment: float
    accelerated_payment: float
    periods_to_payoff: int
    months_saved: int
    interest_saved: float
    schedule: AmortizationSchedule = field(repr=False)


@dataclass(frozen=True)
class LoanResult:
    params: LoanParameters
    schedule: AmortizationSchedule
    scenario: Optional[ScenarioResult] = None

    @property
    def periodic_payment(self) -> float:
        return self.schedule.periodic_payment

    @property
    def total_interest(self) -> float:
        return self.schedule.total_interest

"""核心计算：期利率、等额本息月供、还款计划"""
import logging
import math
from typing import List, Tuple

from config.settings import PERIODS_PER_YEAR, MAX_PERIODS, BALANCE_TOLERANCE
from core.errors import DivergentSchedule, InvalidInput, IterationLimitExceeded
from core.schema import AmortizationEntry, AmortizationSchedule
from core.validator import ensure_annual_rate, ensure_loan_inputs, ensure_payment

logger = logging.getLogger(__name__)


def periodic_rate(annual_rate_percent: float, periods_per_year: int = PERIODS_PER_YEAR) -> float:
    """年利率(%) -> 期利率，例如 12 -> 0.01"""
    ensure_annual_rate(annual_rate_percent, periods_per_year)
    return annual_rate_percent / 100 / periods_per_year


def calc_payment(principal: float, rate: float, term_periods: int) -> float:
    """等额本息：返回每期还款额（不取整）

    P*r / (1 - (1+r)^-n)，分母用 expm1/log1p 计算：
    极小利率时 1+r 不丢精度，高利率长期限时不会溢出。
    利率为 0 时分母为 0，直接按本金/期数平摊。
    """
    ensure_loan_inputs(principal, rate, term_periods)
    if rate == 0:
        return principal / term_periods
    return principal * rate / -math.expm1(-term_periods * math.log1p(rate))


def _amortize(
    principal: float,
    rate: float,
    payment: float,
    max_periods: int,
) -> Tuple[List[AmortizationEntry], float, float]:
    """逐期摊还，余额归零即停止。返回 (明细, 总利息, 剩余本金)"""
    first_interest = principal * rate
    if payment <= first_interest:
        raise DivergentSchedule(payment, first_interest)

    limit = min(max_periods, MAX_PERIODS)
    # 尾差阈值按月供比例取，避免最后一期留下极小余额
    tolerance = BALANCE_TOLERANCE * payment

    entries: List[AmortizationEntry] = []
    balance = principal
    total_interest = 0.0

    for period in range(1, limit + 1):
        interest = balance * rate
        prin = payment - interest

        # 最后一期：只还剩余本金
        if prin >= balance - tolerance:
            prin = balance
            balance = 0.0
        else:
            balance -= prin

        total_interest += interest
        entries.append(AmortizationEntry(
            period=period,
            interest=interest,
            principal=prin,
            remaining_balance=balance,
        ))

        if balance <= 0:
            break

    if balance > 0 and max_periods > MAX_PERIODS:
        raise IterationLimitExceeded(MAX_PERIODS, balance)

    return entries, total_interest, balance


def generate_schedule(
    principal: float,
    rate: float,
    term_periods: int,
    payment: float,
) -> AmortizationSchedule:
    """生成还款计划表，余额提前还清时停止"""
    ensure_loan_inputs(principal, rate, term_periods)
    ensure_payment(payment)

    entries, total_interest, balance = _amortize(principal, rate, payment, term_periods)
    if balance > 0:
        raise InvalidInput(
            f"payment {payment:.6f} leaves {balance:.6f} outstanding after {term_periods} periods"
        )

    logger.debug(
        "schedule generated: principal=%s rate=%s periods=%d/%d total_interest=%.6f",
        principal, rate, len(entries), term_periods, total_interest,
    )
    return AmortizationSchedule(
        entries=tuple(entries),
        periodic_payment=payment,
        total_interest=total_interest,
    )

"""额外还款模拟：每期多还固定金额，计算提前还清期数和节省利息"""
import logging
from typing import Optional

from core.calculator import generate_schedule
from core.schema import AmortizationSchedule, ScenarioResult
from core.validator import ensure_extra_payment

logger = logging.getLogger(__name__)


def analyze_scenario(
    principal: float,
    rate: float,
    term_periods: int,
    payment: float,
    extra_payment: float,
    original: Optional[AmortizationSchedule] = None,
) -> ScenarioResult:
    """
    每期还款额 = 原月供 + extra_payment，重新生成计划。

    extra_payment 为 0 时得到与原计划相同的结果，不做特殊处理。
    original 可传入已生成的原计划以免重复计算，不会被修改。
    """
    ensure_extra_payment(extra_payment)

    if original is None:
        original = generate_schedule(principal, rate, term_periods, payment)

    accelerated_payment = payment + extra_payment
    accelerated = generate_schedule(principal, rate, term_periods, accelerated_payment)

    periods_to_payoff = accelerated.periods
    months_saved = term_periods - periods_to_payoff

    # 多还不会多付利息，负值只可能是浮点尾差
    interest_saved = max(original.total_interest - accelerated.total_interest, 0.0)

    logger.debug(
        "scenario extra=%s: payoff in %d of %d periods, interest saved %.6f",
        extra_payment, periods_to_payoff, term_periods, interest_saved,
    )
    return ScenarioResult(
        extra_payment=extra_payment,
        accelerated_payment=accelerated_payment,
        periods_to_payoff=periods_to_payoff,
        months_saved=months_saved,
        interest_saved=interest_saved,
        schedule=accelerated,
    )

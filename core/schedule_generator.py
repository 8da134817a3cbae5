"""
还款计划计算入口

由调用方显式调用 compute()，每次根据传入参数完整重算，不保存任何状态。
何时触发重算（失焦、提交、防抖）由调用方决定。
"""
import logging
from typing import Optional

from core.calculator import calc_payment, generate_schedule
from core.scenario import analyze_scenario
from core.schema import LoanParameters, LoanResult

logger = logging.getLogger(__name__)


def compute(params: LoanParameters, extra_payment: Optional[float] = None) -> LoanResult:
    """
    月供 -> 还款计划 -> （可选）额外还款模拟

    Args:
        params: 贷款参数
        extra_payment: 每期额外还款金额，None 表示不做模拟

    Returns:
        LoanResult，包含还款计划和模拟结果
    """
    rate = params.periodic_rate
    payment = calc_payment(params.principal, rate, params.term_periods)
    schedule = generate_schedule(params.principal, rate, params.term_periods, payment)

    scenario = None
    if extra_payment is not None:
        scenario = analyze_scenario(
            params.principal, rate, params.term_periods, payment,
            extra_payment, original=schedule,
        )

    logger.debug("computed %r (scenario=%s)", params, extra_payment is not None)
    return LoanResult(params=params, schedule=schedule, scenario=scenario)

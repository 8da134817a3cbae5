"""多个额外还款金额的方案对比"""
from typing import Iterable

import pandas as pd

from config.constants import SCENARIO_COLUMNS
from core.calculator import calc_payment, generate_schedule
from core.scenario import analyze_scenario
from core.schema import LoanParameters


def compare_extra_payments(params: LoanParameters, extra_payments: Iterable[float]) -> pd.DataFrame:
    """
    对同一笔贷款分别模拟多个额外还款金额。
    extra_payments 去重后按金额升序，每个金额一行。
    返回对比表 DataFrame
    """
    rate = params.periodic_rate
    payment = calc_payment(params.principal, rate, params.term_periods)
    original = generate_schedule(params.principal, rate, params.term_periods, payment)

    rows = []
    for extra in sorted(set(extra_payments)):
        result = analyze_scenario(
            params.principal, rate, params.term_periods, payment,
            extra, original=original,
        )
        rows.append({
            "extra_payment": result.extra_payment,
            "accelerated_payment": result.accelerated_payment,
            "periods_to_payoff": result.periods_to_payoff,
            "months_saved": result.months_saved,
            "total_interest": result.schedule.total_interest,
            "interest_saved": result.interest_saved,
            "total_paid": result.schedule.total_paid,
        })

    return pd.DataFrame(rows, columns=SCENARIO_COLUMNS)

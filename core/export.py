"""还款计划导出为扁平记录表"""
from datetime import date
from typing import Optional

import numpy as np
import pandas as pd

from config.constants import SCHEDULE_COLUMNS
from core.schema import AmortizationSchedule
from utils.date_utils import get_due_date


def schedule_to_frame(
    schedule: AmortizationSchedule,
    start_date: Optional[date] = None,
    repayment_day: int = 1,
) -> pd.DataFrame:
    """还款计划 -> DataFrame，数值不取整；未给起始日期时 due_date 为空"""
    entries = schedule.entries
    principal = np.array([e.principal for e in entries], dtype=float)
    interest = np.array([e.interest for e in entries], dtype=float)

    if start_date is not None:
        due_dates = [get_due_date(start_date, e.period, repayment_day).isoformat() for e in entries]
    else:
        due_dates = [None] * len(entries)

    df = pd.DataFrame({
        "period": [e.period for e in entries],
        "due_date": due_dates,
        "payment": principal + interest,
        "principal": principal,
        "interest": interest,
        "remaining_balance": [e.remaining_balance for e in entries],
        "cumulative_principal": np.cumsum(principal),
        "cumulative_interest": np.cumsum(interest),
    })
    return df[SCHEDULE_COLUMNS]

import calendar
from datetime import date

from dateutil.relativedelta import relativedelta

from config.settings import PERIODS_PER_YEAR


def get_due_date(start_date: date, period: int, repayment_day: int) -> date:
    """计算第 period 期的还款日"""
    target = start_date + relativedelta(months=period)
    # 确保还款日不超过当月最大天数
    max_day = calendar.monthrange(target.year, target.month)[1]
    day = min(repayment_day, max_day)
    return target.replace(day=day)


def years_to_periods(years: int, periods_per_year: int = PERIODS_PER_YEAR) -> int:
    """贷款年限 -> 还款期数：30 -> 360"""
    return years * periods_per_year

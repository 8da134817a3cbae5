from enum import Enum


class TermUnit(str, Enum):
    MONTHS = "months"
    YEARS = "years"


# 列定义
SCHEDULE_COLUMNS = [
    "period", "due_date", "payment", "principal", "interest",
    "remaining_balance", "cumulative_principal", "cumulative_interest",
]

SCENARIO_COLUMNS = [
    "extra_payment", "accelerated_payment", "periods_to_payoff",
    "months_saved", "total_interest", "interest_saved", "total_paid",
]

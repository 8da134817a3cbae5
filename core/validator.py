"""输入校验：validate_* 返回 (是否合法, 错误信息)，ensure_* 不合法时抛 InvalidInput"""
import math
from numbers import Integral, Real
from typing import Tuple

from config.settings import MAX_PERIODS
from core.errors import InvalidInput


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def validate_loan_inputs(
    principal: float,
    periodic_rate: float,
    term_periods: int,
) -> Tuple[bool, str]:
    """校验本金、期利率、期数"""
    if not _is_number(principal) or principal <= 0:
        return False, f"principal must be a positive number, got {principal!r}"

    if not _is_number(periodic_rate) or periodic_rate < 0:
        return False, f"periodic rate must be a non-negative number, got {periodic_rate!r}"

    if isinstance(term_periods, bool) or not isinstance(term_periods, Integral) or term_periods <= 0:
        return False, f"term must be a positive whole number of periods, got {term_periods!r}"

    if term_periods > MAX_PERIODS:
        return False, f"term must not exceed {MAX_PERIODS} periods, got {term_periods!r}"

    return True, ""


def validate_annual_rate(annual_rate_percent: float, periods_per_year: int) -> Tuple[bool, str]:
    """校验年利率(%)和每年期数"""
    if not _is_number(annual_rate_percent) or annual_rate_percent < 0:
        return False, f"annual rate must be a non-negative percentage, got {annual_rate_percent!r}"

    if isinstance(periods_per_year, bool) or not isinstance(periods_per_year, Integral) or periods_per_year <= 0:
        return False, f"periods per year must be a positive whole number, got {periods_per_year!r}"

    return True, ""


def validate_extra_payment(extra_payment: float) -> Tuple[bool, str]:
    """校验额外还款金额"""
    if not _is_number(extra_payment) or extra_payment < 0:
        return False, f"extra payment must be a non-negative number, got {extra_payment!r}"

    return True, ""


def validate_payment(payment: float) -> Tuple[bool, str]:
    """只校验是否为有限数值，是否足以覆盖利息由计算时判断"""
    if not _is_number(payment):
        return False, f"periodic payment must be a finite number, got {payment!r}"

    return True, ""


def ensure_payment(payment: float):
    ok, message = validate_payment(payment)
    if not ok:
        raise InvalidInput(message)


def ensure_loan_inputs(principal: float, periodic_rate: float, term_periods: int):
    ok, message = validate_loan_inputs(principal, periodic_rate, term_periods)
    if not ok:
        raise InvalidInput(message)


def ensure_annual_rate(annual_rate_percent: float, periods_per_year: int):
    ok, message = validate_annual_rate(annual_rate_percent, periods_per_year)
    if not ok:
        raise InvalidInput(message)


def ensure_extra_payment(extra_payment: float):
    ok, message = validate_extra_payment(extra_payment)
    if not ok:
        raise InvalidInput(message)

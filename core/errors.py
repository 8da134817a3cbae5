"""贷款计算异常"""


class LoanCalculationError(Exception):
    """所有贷款计算错误的基类"""


class InvalidInput(LoanCalculationError, ValueError):
    """输入参数非法：本金/期数非正、利率或额外还款为负等"""


class DivergentSchedule(LoanCalculationError, ValueError):
    """月供不足以覆盖首期利息，余额只会增长不会减少"""

    def __init__(self, payment: float, interest: float):
        self.payment = payment
        self.interest = interest
        super().__init__(
            f"periodic payment {payment:.6f} does not cover first-period interest {interest:.6f}"
        )


class IterationLimitExceeded(LoanCalculationError, RuntimeError):
    """循环超过期数上限仍未还清，属于程序缺陷"""

    def __init__(self, limit: int, balance: float):
        self.limit = limit
        self.balance = balance
        super().__init__(
            f"balance {balance:.6f} still outstanding after iteration limit of {limit} periods"
        )

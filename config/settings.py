# 每年还款期数（按月还款）
PERIODS_PER_YEAR = 12

# 单次计算允许的最大期数，超过视为计算异常
MAX_PERIODS = 6000

# 剩余本金小于该值即视为已还清（浮点尾差）
BALANCE_TOLERANCE = 1e-6

# 金额精度（仅用于命令行输出）
AMOUNT_PRECISION = 2
RATE_PRECISION = 4

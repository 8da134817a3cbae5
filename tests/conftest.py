import sys
import pytest
from pathlib import Path

# 确保项目根目录在 sys.path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from core.calculator import calc_payment


@pytest.fixture
def reference_loan():
    """100万, 年利率12%, 12期：(本金, 期利率, 期数, 月供)"""
    payment = calc_payment(1_000_000, 0.01, 12)
    return 1_000_000, 0.01, 12, payment

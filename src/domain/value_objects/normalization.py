"""入力値の正規化

不正な値は例外にせず、以下の方針で丸め込む。
- 数量: 0方向へ切り捨てた整数、下限0。NaN・負の無限大は0、正の無限大は MAX_QUANTITY
- 税率: [0, 1] に収める
"""
import math
import sys

MAX_QUANTITY = sys.maxsize


def normalize_quantity(value: float) -> int:
    """数量を0以上の整数に正規化する"""
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return MAX_QUANTITY if value > 0 else 0
    return max(0, math.trunc(value))


def clamp_tax_rate(rate: float) -> float:
    """税率を0〜1の範囲に収める"""
    return min(1.0, max(0.0, rate))

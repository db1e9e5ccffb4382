"""金額の丸め処理"""
import math
import sys

EPSILON = sys.float_info.epsilon


def round2(value: float) -> float:
    """小数点以下2桁に丸める

    浮動小数点の表現誤差（1.005 が 1.00499... になる等）を打ち消すため、
    イプシロンを加えてから 0.5 を境に正の無限大方向へ丸める。
    負の値のちょうど半分は0方向になる（-0.125 → -0.12）。

    Args:
        value: 丸める値

    Returns:
        float: 丸めた値。NaN・無限大はそのまま返す
    """
    if not math.isfinite(value):
        return value
    return math.floor((value + EPSILON) * 100 + 0.5) / 100

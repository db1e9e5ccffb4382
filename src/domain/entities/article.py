"""商品エンティティ"""
from dataclasses import dataclass
from typing import Iterable

from src.domain.value_objects.normalization import clamp_tax_rate, normalize_quantity
from src.domain.value_objects.rounding import round2

DEFAULT_TAX_RATE = 0.21


@dataclass(frozen=True, eq=False)
class Article:
    """レシートに載る商品を表すエンティティ

    frozen にして直接代入を禁止している。quantity だけは例外で、
    adjust_quantity が object.__setattr__ で書き換える唯一の変更経路になる。
    単価は負の値（値引き・返品）もそのまま受け付ける。
    """

    name: str
    unit_price: float
    quantity: int
    tax_rate: float = DEFAULT_TAX_RATE

    def __post_init__(self):
        """正規化"""
        object.__setattr__(self, "quantity", normalize_quantity(self.quantity))
        object.__setattr__(self, "tax_rate", clamp_tax_rate(self.tax_rate))

    def subtotal(self) -> float:
        """税抜小計（単価 × 数量）"""
        return round2(self.unit_price * self.quantity)

    def total_with_tax(self) -> float:
        """税込合計"""
        return round2(self.subtotal() * (1 + self.tax_rate))

    def adjust_quantity(self, delta: float) -> int:
        """数量を増減する

        Args:
            delta: 加算する値（負の値で減算）。合計は0方向へ切り捨てる

        Returns:
            int: 変更後の数量。0未満にはならない
        """
        object.__setattr__(self, "quantity", normalize_quantity(self.quantity + delta))
        return self.quantity

    def summary(self) -> str:
        """商品の要約行を返す"""
        return (
            f"Artículo: {self.name} | Cantidad: {self.quantity} | "
            f"Precio: {self.unit_price:.2f} | Subtotal: {self.subtotal():.2f} | "
            f"Total con IVA: {self.total_with_tax():.2f}"
        )


def combined_total(articles: Iterable[Article]) -> float:
    """複数商品の税込合計を返す"""
    return round2(sum(article.total_with_tax() for article in articles))

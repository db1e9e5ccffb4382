"""アプリケーション設定を表す値オブジェクト"""
import math
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from src.domain.value_objects.normalization import clamp_tax_rate


class ApplicationConfig(BaseModel):
    """アプリケーション設定の値オブジェクト"""

    # ログ設定
    log_level: str = Field(default="INFO", description="ログレベル")
    log_dir: Optional[str] = Field(default=None, description="ログファイルの出力先ディレクトリ")

    # レシート設定
    store_name: str = Field(default="Papelería Central", description="店舗名")
    register_number: int = Field(default=1, description="レジ番号")
    default_tax_rate: float = Field(default=0.21, description="標準税率")
    receipt_title: str = Field(default="Ticket de Compra", description="レシートのタイトル")
    currency_symbol: str = Field(default="€", description="通貨記号")

    @field_validator("default_tax_rate")
    @classmethod
    def validate_default_tax_rate(cls, v: float) -> float:
        """標準税率を0〜1に収める"""
        return clamp_tax_rate(v)

    @field_validator("register_number", mode="before")
    @classmethod
    def validate_register_number(cls, v):
        """小数のレジ番号は0方向へ切り捨てる"""
        if isinstance(v, float) and math.isfinite(v):
            return math.trunc(v)
        return v

    class Config:
        frozen = True

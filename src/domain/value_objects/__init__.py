"""値オブジェクト"""
from src.domain.value_objects.application_config import ApplicationConfig
from src.domain.value_objects.normalization import clamp_tax_rate, normalize_quantity
from src.domain.value_objects.rounding import round2

__all__ = ["ApplicationConfig", "clamp_tax_rate", "normalize_quantity", "round2"]

"""pytest共通設定"""
import io
from datetime import datetime

import pytest

from src.domain.entities.article import Article
from src.infrastructure.console.receipt_printer import ConsoleReceiptPrinter

FIXED_NOW = datetime(2025, 10, 16, 18, 45, 7)


@pytest.fixture
def fixed_clock():
    """固定日時を返す時計"""
    return lambda: FIXED_NOW


@pytest.fixture
def output() -> io.StringIO:
    """印字先のバッファ"""
    return io.StringIO()


@pytest.fixture
def printer(output: io.StringIO, fixed_clock) -> ConsoleReceiptPrinter:
    """テスト用のプリンター"""
    return ConsoleReceiptPrinter("Ticket de Compra", stream=output, clock=fixed_clock)


@pytest.fixture
def notebook() -> Article:
    """標準税率の商品"""
    return Article("Cuaderno A5", 3.50, 2)


@pytest.fixture
def pen() -> Article:
    """軽減税率の商品"""
    return Article("Bolígrafo azul", 1.20, 4, 0.10)

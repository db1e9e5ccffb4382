"""標準出力にレシートを印字するプリンター"""
import logging
import math
import sys
from datetime import datetime
from typing import Callable, Optional, TextIO

from src.domain.entities.article import Article
from src.domain.repositories.receipt_printer import IReceiptPrinter

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%d/%m/%Y, %H:%M:%S"
CLOSING_RULE = "=" * 37


class ConsoleReceiptPrinter(IReceiptPrinter):
    """コンソールにレシートを印字する IReceiptPrinter の実装"""

    def __init__(
        self,
        title: str,
        stream: Optional[TextIO] = None,
        clock: Callable[[], datetime] = datetime.now,
        currency_symbol: str = "€",
    ):
        """初期化

        Args:
            title: レシートのタイトル
            stream: 出力先。None の場合は書き込み時点の sys.stdout
            clock: 現在日時を返す関数。テストでは固定日時を渡す
            currency_symbol: 合計行に付ける通貨記号
        """
        self._title = title
        self._stream = stream
        self._clock = clock
        self.currency_symbol = currency_symbol

    @property
    def title(self) -> str:
        return self._title

    def print_header(self, store_name: str, register_number: float) -> None:
        timestamp = self._clock().strftime(TIMESTAMP_FORMAT)
        self._write(f"\n===== {self._title.upper()} =====")
        self._write(f"Tienda: {store_name}")
        self._write(f"Caja Nº: {math.trunc(register_number)}")
        self._write(f"Fecha: {timestamp}\n")
        logger.debug("ヘッダーを印字しました", extra={"context": {"store_name": store_name}})

    def print_article(self, article: Article) -> None:
        self._write(article.summary())
        logger.debug(
            "商品を印字しました",
            extra={"context": {"name": article.name, "quantity": article.quantity}},
        )

    def print_total(self, total: float) -> None:
        self._write(f"\nTOTAL A PAGAR: {total:.2f} {self.currency_symbol}")
        self._write(f"{CLOSING_RULE}\n")
        logger.debug("合計を印字しました", extra={"context": {"total": total}})

    def _write(self, line: str) -> None:
        print(line, file=self._stream or sys.stdout)

"""購入レシートを印字するユースケース"""
import logging

from src.domain.entities.article import Article, combined_total
from src.domain.repositories.receipt_printer import IReceiptPrinter

logger = logging.getLogger(__name__)


class PrintPurchaseTicketUseCase:
    """決まった商品の並びでレシートを印字するユースケース"""

    def __init__(
        self,
        printer: IReceiptPrinter,
        store_name: str,
        register_number: int,
        default_tax_rate: float,
    ):
        self.printer = printer
        self.store_name = store_name
        self.register_number = register_number
        self.default_tax_rate = default_tax_rate

    def execute(self) -> float:
        """レシートを印字する

        Returns:
            float: 支払合計

        Raises:
            Exception: 印字中にエラーが発生した場合
        """
        logger.info("レシートの印字を開始します")

        try:
            self.printer.print_header(self.store_name, self.register_number)

            # ステップ1: 商品を作成して印字
            notebook = Article("Cuaderno A5", 3.50, 2, self.default_tax_rate)
            self.printer.print_article(notebook)

            # ステップ2: 数量を変更して再度印字
            notebook.adjust_quantity(3)
            self.printer.print_article(notebook)

            # ステップ3: 別の商品を作成して印字
            pen = Article("Bolígrafo azul", 1.20, 4, 0.10)
            self.printer.print_article(pen)

            total = combined_total([notebook, pen])
            self.printer.print_total(total)

            logger.info("レシートの印字が完了しました", extra={"context": {"total": total}})
            return total

        except Exception as e:
            logger.error(f"レシートの印字中にエラーが発生しました: {e}")
            raise

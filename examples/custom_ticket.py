"""任意の商品でレシートを印字する例"""
import logging
import sys
from datetime import datetime
from pathlib import Path

# プロジェクトルートをPythonパスに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.domain.entities.article import Article, combined_total
from src.infrastructure.console.receipt_printer import ConsoleReceiptPrinter

# ロギングの設定
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main():
    """メイン処理"""
    printer = ConsoleReceiptPrinter(
        "Factura simplificada",
        clock=lambda: datetime(2025, 10, 16, 9, 30, 0),
    )
    printer.print_header("Papelería Norte", 3)

    articles = [
        Article("Carpeta de anillas", 4.95, 1),
        Article("Lápiz HB", 0.45, 12, 0.10),
        # 単価が負の行は値引きとして扱う
        Article("Descuento socio", -1.00, 1),
    ]
    for article in articles:
        printer.print_article(article)

    total = combined_total(articles)
    printer.print_total(total)
    logger.info(f"処理が完了しました: {total:.2f}")


if __name__ == "__main__":
    main()

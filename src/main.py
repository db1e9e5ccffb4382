"""メインエントリーポイント"""
import logging
import os
import sys
from pathlib import Path

# プロジェクトルートをPythonパスに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.infrastructure.config.config_loader import ConfigLoader
from src.infrastructure.console.receipt_printer import ConsoleReceiptPrinter
from src.infrastructure.logging.logging_setup import LoggingSetup
from src.usecases.print_purchase_ticket_use_case import PrintPurchaseTicketUseCase


def main() -> None:
    """メイン処理"""
    try:
        # 設定読み込み前は環境変数のログレベルで初期化し、読み込み後に再初期化する
        LoggingSetup.setup(os.getenv("LOG_LEVEL", "INFO"), project_root)
        config = ConfigLoader(project_root).load_config()
        log_dir = Path(config.log_dir) if config.log_dir else None
        LoggingSetup.setup(config.log_level, project_root, log_dir)
        logger = logging.getLogger(__name__)

        logger.info("=== レシート印字 開始 ===")

        printer = ConsoleReceiptPrinter(
            title=config.receipt_title,
            currency_symbol=config.currency_symbol,
        )
        use_case = PrintPurchaseTicketUseCase(
            printer=printer,
            store_name=config.store_name,
            register_number=config.register_number,
            default_tax_rate=config.default_tax_rate,
        )

        total = use_case.execute()
        logger.info(f"=== 成功: 支払合計 {total:.2f} {config.currency_symbol} ===")

    except Exception as e:
        logger = logging.getLogger(__name__)
        logger.error(f"=== エラー: {str(e)} ===", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()

"""設定の読み込みを行うサービス"""
import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from src.domain.value_objects.application_config import ApplicationConfig


class ConfigLoader:
    """環境変数から設定を読み込むサービス"""

    def __init__(self, project_root: Path) -> None:
        """初期化

        Args:
            project_root: プロジェクトルートディレクトリ
        """
        self.project_root = project_root
        self.logger = logging.getLogger(__name__)

    def load_config(self) -> ApplicationConfig:
        """アプリケーション設定を読み込む

        環境変数が未設定の項目は ApplicationConfig の既定値を使う。

        Returns:
            ApplicationConfig: アプリケーション設定

        Raises:
            ValueError: 設定値が無効な場合
        """
        load_dotenv(self.project_root / ".env")

        values = {
            "log_level": os.getenv("LOG_LEVEL"),
            "log_dir": self._parse_log_dir(os.getenv("LOG_DIR")),
            "store_name": os.getenv("TICKET_STORE_NAME"),
            "register_number": self._parse_register_number(os.getenv("TICKET_REGISTER_NUMBER")),
            "default_tax_rate": self._parse_tax_rate(os.getenv("TICKET_DEFAULT_TAX_RATE")),
            "receipt_title": os.getenv("TICKET_TITLE"),
            "currency_symbol": os.getenv("TICKET_CURRENCY_SYMBOL"),
        }

        try:
            config = ApplicationConfig(**{k: v for k, v in values.items() if v is not None})
        except ValidationError as e:
            raise ValueError(f"設定値が無効です: {str(e)}")

        self.logger.info(
            "設定を読み込みました",
            extra={"context": {
                "store_name": config.store_name,
                "register_number": config.register_number,
                "default_tax_rate": config.default_tax_rate,
            }},
        )
        return config

    def _parse_log_dir(self, value: Optional[str]) -> Optional[str]:
        """ログディレクトリをパースする（相対パスはプロジェクトルート基準）"""
        if not value:
            return None
        path = Path(value)
        if not path.is_absolute():
            path = self.project_root / path
        return str(path)

    def _parse_register_number(self, value: Optional[str]) -> Optional[float]:
        """レジ番号をパースする

        Args:
            value: 環境変数の値

        Returns:
            Optional[float]: パースされた値、無効な場合はNone
        """
        if not value:
            return None

        try:
            return float(value)
        except ValueError:
            self.logger.warning(
                f"TICKET_REGISTER_NUMBER の値が無効です: {value}。既定値を使用します。"
            )
            return None

    def _parse_tax_rate(self, value: Optional[str]) -> Optional[float]:
        """標準税率をパースする

        Args:
            value: 環境変数の値

        Returns:
            Optional[float]: パースされた値、無効な場合はNone
        """
        if not value:
            return None

        try:
            return float(value)
        except ValueError:
            self.logger.warning(
                f"TICKET_DEFAULT_TAX_RATE の値が無効です: {value}。既定値を使用します。"
            )
            return None

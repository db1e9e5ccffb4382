"""レシートプリンターのインターフェース"""
from abc import ABC, abstractmethod

from src.domain.entities.article import Article


class IReceiptPrinter(ABC):
    """レシートプリンターのインターフェース"""

    @abstractmethod
    def print_header(self, store_name: str, register_number: float) -> None:
        """ヘッダー（タイトル、店舗名、レジ番号、日時）を出力する

        Args:
            store_name: 店舗名
            register_number: レジ番号（小数は切り捨て）
        """
        pass

    @abstractmethod
    def print_article(self, article: Article) -> None:
        """商品の要約行を出力する

        Args:
            article: 商品エンティティ
        """
        pass

    @abstractmethod
    def print_total(self, total: float) -> None:
        """支払合計と締めの罫線を出力する

        Args:
            total: 支払合計
        """
        pass

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from src.infrastructure.logging.json_formatter import JSONFormatter, get_version


class LoggingSetup:

    @staticmethod
    def setup(log_level: str, project_root: Path, log_dir: Optional[Path] = None) -> Optional[Path]:
        """ロギングを初期化する

        レシートは標準出力に出すため、ログは標準エラー出力へ書き込む。
        log_dir が指定された場合はタイムスタンプ付きのログファイルにも書き込む。

        Returns:
            Optional[Path]: ログファイルのパス（ファイル出力なしの場合は None）
        """
        level = getattr(logging, log_level.upper(), logging.INFO)

        formatter = JSONFormatter(version=get_version(project_root))

        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(formatter)
        handlers: List[logging.Handler] = [stream_handler]

        log_file = None
        if log_dir is not None:
            log_dir.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = log_dir / f"app_{timestamp}.log"
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(formatter)
            handlers.append(file_handler)

        logging.basicConfig(
            level=level,
            handlers=handlers,
            force=True
        )

        if log_file is not None:
            logger = logging.getLogger(__name__)
            logger.info("ログファイルを初期化しました", extra={"context": {"log_file": str(log_file)}})

        return log_file

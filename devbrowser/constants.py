# constants.py
import os
import logging
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

# よく使われる開発サーバーのポート（スキャン順）
DEV_SERVER_PORTS = [3000, 3001, 5173, 5174, 8080, 8000, 4000, 4200]

DEFAULT_SLOW_MO = 50
DEFAULT_TIMEOUT = 30000
DEFAULT_SCREENSHOT_DIR = "tmp"
DEFAULT_SCREENSHOT_NAME = "verification"

INTERACTIVE_SELECTOR = 'a, button, input, select, textarea, [role="button"], [onclick]'
MAX_ELEMENTS = 50
MAX_TEXT_LENGTH = 30
MAX_HREF_LENGTH = 50

# レポート表示の上限
MAX_LISTED_ELEMENTS = 10
MAX_CONSOLE_ERROR_LENGTH = 100
CONSOLE_GRACE_MS = 1000

PROBE_CONNECT_TIMEOUT = 0.5


def _parse_int(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Invalid {key}={raw!r}, using default {default}")
        return default


@dataclass(frozen=True)
class VerifyConfig:
    """実行ごとに一度だけ環境変数から読み込む設定"""
    headless: bool = False
    slow_mo: int = DEFAULT_SLOW_MO
    timeout: int = DEFAULT_TIMEOUT
    screenshot_dir: str = DEFAULT_SCREENSHOT_DIR

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "VerifyConfig":
        if environ is None:
            environ = os.environ
        return cls(
            headless=environ.get("HEADLESS") == "true" or environ.get("CI") == "true",
            slow_mo=_parse_int(environ, "SLOW_MO", DEFAULT_SLOW_MO),
            timeout=_parse_int(environ, "TIMEOUT", DEFAULT_TIMEOUT),
            screenshot_dir=environ.get("SCREENSHOT_DIR") or DEFAULT_SCREENSHOT_DIR,
        )

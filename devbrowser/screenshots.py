# screenshots.py
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from playwright.async_api import Page

from .constants import logger


def ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def screenshot_timestamp(now: Optional[datetime] = None) -> str:
    """UTCのISO 8601（ミリ秒）から ':' と '.' を '-' に置換したもの"""
    if now is None:
        now = datetime.now(timezone.utc)
    iso = now.astimezone(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')
    return re.sub(r'[:.]', '-', iso)


def screenshot_filename(name: str, now: Optional[datetime] = None) -> str:
    return f"{name}-{screenshot_timestamp(now)}.png"


async def take_screenshot(page: Page, name: str, directory: str) -> str:
    out_dir = Path(directory)
    ensure_dir(out_dir)
    filepath = str(out_dir / screenshot_filename(name))
    await page.screenshot(path=filepath, full_page=True)
    logger.info(f"📸 Screenshot saved: {filepath}")
    return filepath

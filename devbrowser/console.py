# console.py
from typing import List

from playwright.async_api import Page, ConsoleMessage

from .constants import CONSOLE_GRACE_MS


class ConsoleMonitor:
    """
    ページのコンソールエラーを収集する。

    attach() 以降に出力されたものだけが対象で、読み込み中のエラーは拾わない。
    """

    def __init__(self):
        self.errors: List[str] = []

    def attach(self, page: Page) -> None:
        page.on('console', self._on_console)

    def _on_console(self, msg: ConsoleMessage) -> None:
        if msg.type == 'error':
            self.errors.append(msg.text)

    async def collect(self, page: Page, grace_ms: int = CONSOLE_GRACE_MS) -> List[str]:
        # 遅れて出るエラーを待つ
        await page.wait_for_timeout(grace_ms)
        return list(self.errors)

# session.py
from typing import Optional

from playwright.async_api import async_playwright, Page, Browser, Playwright

from .constants import logger, VerifyConfig


class BrowserSession:
    """1回の検証で使うブラウザとページ。終了時に必ず閉じる。"""

    def __init__(self, config: VerifyConfig):
        self.config = config
        self.playwright: Optional[Playwright] = None
        self.browser: Optional[Browser] = None
        self.page: Optional[Page] = None

    async def __aenter__(self):
        try:
            await self.initialize()
        except BaseException:
            await self.cleanup()
            raise
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.cleanup()

    async def initialize(self):
        logger.info(f"🚀 Launching browser (headless: {self.config.headless})...")
        self.playwright = await async_playwright().start()
        self.browser = await self.playwright.chromium.launch(
            headless=self.config.headless,
            slow_mo=self.config.slow_mo,
        )
        self.page = await self.browser.new_page()
        self.page.set_default_timeout(self.config.timeout)

    async def cleanup(self):
        logger.debug("Closing browser")
        browser, self.browser = self.browser, None
        playwright, self.playwright = self.playwright, None
        self.page = None
        try:
            if browser:
                await browser.close()
        finally:
            if playwright:
                await playwright.stop()

    async def goto(self, url: str):
        logger.info(f"📄 Navigating to: {url}")
        await self.page.goto(url, wait_until='networkidle')

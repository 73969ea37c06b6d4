"""
共通フィクスチャ
"""
import sys
import os
from unittest.mock import Mock, AsyncMock

import pytest

# プロジェクトルートをPythonパスに追加
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture
def mock_page():
    """Playwright Page のモック"""
    page = Mock()
    page.url = "http://localhost:3000/"
    page.viewport_size = {"width": 1280, "height": 720}
    page.title = AsyncMock(return_value="Test Page")
    page.goto = AsyncMock()
    page.eval_on_selector_all = AsyncMock(return_value=[])
    page.screenshot = AsyncMock()
    page.wait_for_timeout = AsyncMock()
    page.set_default_timeout = Mock()

    handlers = {}

    def on(event, handler):
        handlers.setdefault(event, []).append(handler)

    page.on = Mock(side_effect=on)
    page.handlers = handlers
    return page


@pytest.fixture
def mock_playwright(mock_page):
    """async_playwright().start() が返すモック一式"""
    playwright = Mock()
    browser = Mock()
    browser.new_page = AsyncMock(return_value=mock_page)
    browser.close = AsyncMock()
    playwright.chromium.launch = AsyncMock(return_value=browser)
    playwright.stop = AsyncMock()

    starter = Mock()
    starter.start = AsyncMock(return_value=playwright)
    factory = Mock(return_value=starter)

    return {
        'factory': factory,
        'playwright': playwright,
        'browser': browser,
        'page': mock_page,
    }

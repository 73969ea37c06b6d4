# verify.py
from typing import List, Optional

from .constants import (
    logger, VerifyConfig, DEFAULT_SCREENSHOT_NAME,
    MAX_LISTED_ELEMENTS, MAX_CONSOLE_ERROR_LENGTH, CONSOLE_GRACE_MS,
)
from .console import ConsoleMonitor
from .inspector import get_page_info, get_interactive_elements
from .models import Phase, VerificationResult, InteractiveElement
from .ports import resolve_target
from .report import write_report
from .screenshots import take_screenshot
from .session import BrowserSession


def _enter(result: VerificationResult, phase: Phase) -> None:
    logger.debug(f"Phase: {result.phase.value} -> {phase.value}")
    result.phase = phase


def log_elements(elements: List[InteractiveElement]) -> None:
    if not elements:
        return
    logger.info(f"🎯 Interactive elements ({len(elements)}):")
    for el in elements[:MAX_LISTED_ELEMENTS]:
        logger.info(f"   - {el.describe()}")
    if len(elements) > MAX_LISTED_ELEMENTS:
        logger.info(f"   ... and {len(elements) - MAX_LISTED_ELEMENTS} more")


def log_console_errors(errors: List[str]) -> None:
    if not errors:
        return
    logger.warning("⚠️  Console errors detected:")
    for err in errors:
        logger.warning(f"   - {err[:MAX_CONSOLE_ERROR_LENGTH]}")


async def verify(target_url: str, config: VerifyConfig,
                 screenshot_name: str = DEFAULT_SCREENSHOT_NAME,
                 grace_ms: int = CONSOLE_GRACE_MS) -> VerificationResult:
    """対象URLを開いてページ情報・要素・スクリーンショット・コンソールエラーを取得する"""
    result = VerificationResult(target_url=target_url)
    _enter(result, Phase.LAUNCHING)
    try:
        async with BrowserSession(config) as session:
            _enter(result, Phase.NAVIGATING)
            await session.goto(target_url)

            _enter(result, Phase.INSPECTING)
            result.page_info = await get_page_info(session.page)
            logger.info("✅ Page loaded successfully")
            logger.info(f"   Title: {result.page_info.title}")
            logger.info(f"   URL: {result.page_info.url}")

            result.elements = await get_interactive_elements(session.page)
            log_elements(result.elements)

            _enter(result, Phase.CAPTURING_SCREENSHOT)
            result.screenshot_path = await take_screenshot(
                session.page, screenshot_name or DEFAULT_SCREENSHOT_NAME, config.screenshot_dir
            )

            _enter(result, Phase.MONITORING_CONSOLE)
            monitor = ConsoleMonitor()
            monitor.attach(session.page)
            result.console_errors = await monitor.collect(session.page, grace_ms)
            log_console_errors(result.console_errors)

            _enter(result, Phase.CLOSING)
    except Exception as e:
        logger.error(f"❌ Verification failed: {e}")
        result.fail(str(e))
        return result

    _enter(result, Phase.DONE)
    logger.info("✅ Verification complete!")
    return result


async def run(url: Optional[str], config: VerifyConfig,
              screenshot_name: str = DEFAULT_SCREENSHOT_NAME,
              report_path: Optional[str] = None) -> VerificationResult:
    result = VerificationResult()
    _enter(result, Phase.RESOLVING)
    target_url = resolve_target(url)
    if target_url is None:
        result.fail("No dev server detected")
    else:
        result = await verify(target_url, config, screenshot_name)

    # レポートの失敗は終了コードに影響しない
    if report_path:
        try:
            write_report(result, report_path)
        except Exception as e:
            logger.error(f"❌ Report write failed: {e}")
    return result

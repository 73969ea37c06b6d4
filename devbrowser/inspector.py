# inspector.py
from typing import List

from playwright.async_api import Page

from .constants import INTERACTIVE_SELECTOR, MAX_ELEMENTS, MAX_TEXT_LENGTH, MAX_HREF_LENGTH
from .models import PageInfo, InteractiveElement

# 先頭 maxElements 件だけ属性を抜き出す（フィルタはPython側）
EXTRACT_ELEMENTS_JS = """
(els, [maxElements, maxText, maxHref]) => els.slice(0, maxElements).map((el, i) => {
    const text = (el.textContent || '').trim().slice(0, maxText);
    const href = el.getAttribute('href');
    return {
        index: i,
        tag: el.tagName.toLowerCase(),
        type: el.getAttribute('type'),
        text: text || null,
        name: el.getAttribute('name'),
        id: el.id || null,
        placeholder: el.getAttribute('placeholder'),
        href: href === null ? null : href.slice(0, maxHref),
    };
})
"""


async def get_page_info(page: Page) -> PageInfo:
    return PageInfo(
        url=page.url,
        title=await page.title(),
        viewport=page.viewport_size,
    )


async def get_interactive_elements(page: Page) -> List[InteractiveElement]:
    """
    操作可能な要素を列挙する。

    セレクタに一致した先頭50件から属性を取り出し、text/name/id/placeholder の
    いずれも持たない要素は除外する。アクセシビリティ監査ではなく簡易的なもの。
    """
    raw = await page.eval_on_selector_all(
        INTERACTIVE_SELECTOR,
        EXTRACT_ELEMENTS_JS,
        [MAX_ELEMENTS, MAX_TEXT_LENGTH, MAX_HREF_LENGTH],
    )
    elements = [InteractiveElement(**item) for item in raw[:MAX_ELEMENTS]]
    return [el for el in elements if el.is_identifiable]

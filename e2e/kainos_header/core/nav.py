from __future__ import annotations

import re

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page

from kainos_header.selectors import header_selectors as H


def header(page: Page) -> Locator:
    return page.locator(H.HEADER_SELECTOR)


def header_link(page: Page, name: str) -> Locator:
    return header(page).get_by_role("link", name=name, exact=True)


def role_by_loose_name(page: Page, role: str, name: str) -> Locator:
    """
    名前の部分一致・大文字小文字無視で role 要素を拾う。
    """
    return page.get_by_role(role, name=re.compile(re.escape(name), re.IGNORECASE))


def dismiss_cookie_banner(page: Page, settle_ms: int = 1000) -> bool:
    """
    バナーが出ていれば閉じる。出ていなければ何もしない。
    """
    btn = page.get_by_role("button", name=H.ACCEPT_COOKIES_BUTTON_NAME)
    try:
        visible = btn.is_visible()
    except PlaywrightError:
        # 複数ヒット (strict mode) 等は「出ていない」扱い
        return False
    if not visible:
        return False
    btn.click()
    # バナーが消えるのを待つ
    page.wait_for_timeout(settle_ms)
    return True


def click_and_wait_loaded(locator: Locator, page: Page) -> None:
    locator.click()
    page.wait_for_load_state("domcontentloaded")

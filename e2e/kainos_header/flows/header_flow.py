# e2e/kainos_header/flows/header_flow.py
from __future__ import annotations

import re
from typing import Iterable

from playwright.sync_api import Page, expect

from kainos_header.core.nav import (
    click_and_wait_loaded,
    dismiss_cookie_banner,
    header,
    header_link,
    role_by_loose_name,
)
from kainos_header.core.types import NavItem
from kainos_header.selectors import header_selectors as H


def _containing(text: str) -> "re.Pattern[str]":
    # expect() の部分一致はエスケープした正規表現で渡す
    return re.compile(re.escape(text))


def open_homepage(page: Page, base_url: str) -> None:
    page.goto(base_url)


def accept_cookies(page: Page) -> bool:
    return dismiss_cookie_banner(page)


def assert_logo_visible(page: Page) -> None:
    expect(page.locator(H.LOGO_IMG_SELECTOR)).to_be_visible()


def assert_logo_source(page: Page) -> None:
    expect(page.locator(H.LOGO_IMG_SELECTOR)).to_have_attribute("src", _containing(H.LOGO_SRC_FRAGMENT))


def assert_logo_links_home(page: Page) -> None:
    logo_link = header(page).get_by_role("link", name=re.compile(H.LOGO_LINK_NAME_PATTERN, re.IGNORECASE))
    expect(logo_link).to_have_attribute("href", H.LOGO_HREF)


def assert_nav_items(page: Page, items: Iterable[NavItem]) -> None:
    """
    各メニュー項目が見えていて href が期待値と完全一致すること。
    """
    for item in items:
        link = header_link(page, item.label)
        expect(link).to_be_visible()
        expect(link).to_have_attribute("href", item.url)


def assert_button_visible(page: Page, name: str) -> None:
    expect(role_by_loose_name(page, "button", name)).to_be_visible()


def assert_link_visible(page: Page, name: str) -> None:
    expect(role_by_loose_name(page, "link", name)).to_be_visible()


def assert_link_points_to(page: Page, name: str, url: str) -> None:
    expect(role_by_loose_name(page, "link", name)).to_have_attribute("href", url)


def hover_nav_item(page: Page, label: str, settle_ms: int = 500) -> None:
    header_link(page, label).hover()
    # ドロップダウン表示待ち
    page.wait_for_timeout(settle_ms)


def assert_dropdown_links(page: Page, labels: Iterable[str]) -> None:
    # ドロップダウンはヘッダ外に描画されるのでページ全体から探す
    for label in labels:
        expect(page.get_by_role("link", name=label)).to_be_visible()


def click_header_link(page: Page, label: str) -> None:
    click_and_wait_loaded(header_link(page, label), page)


def assert_url_contains(page: Page, fragment: str) -> None:
    expect(page).to_have_url(_containing(fragment))


def assert_title_contains(page: Page, text: str) -> None:
    expect(page).to_have_title(_containing(text))


def assert_keyboard_accessible(page: Page, elements=H.KEYBOARD_ACCESSIBLE_ELEMENTS) -> None:
    for role, name in elements:
        if role == "link":
            loc = header_link(page, name)
        else:
            loc = page.get_by_role(role, name=name)
        loc.focus()
        expect(loc).to_be_focused()


def assert_banner_landmark(page: Page) -> None:
    expect(page.locator(H.BANNER_LANDMARK_SELECTOR).first).to_be_visible()


def assert_main_nav_landmark(page: Page) -> None:
    expect(page.locator(H.MAIN_NAV_SELECTOR)).to_be_visible()

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict

from playwright.sync_api import Browser, BrowserContext, Page, Playwright, expect

from .types import Settings

logger = logging.getLogger(__name__)


@dataclass
class ScenarioPage:
    context: BrowserContext
    page: Page


def launch_options(settings: Settings) -> Dict[str, Any]:
    launch_kwargs: Dict[str, Any] = {
        "headless": settings.headless,
        "slow_mo": settings.slow_mo_ms,
    }
    if settings.channel:
        launch_kwargs["channel"] = settings.channel
    return launch_kwargs


def context_options(settings: Settings) -> Dict[str, Any]:
    vp = settings.site.viewport
    return {
        "viewport": {"width": vp.width, "height": vp.height},
        "ignore_https_errors": settings.site.ignore_https_errors,
    }


def launch_browser(pw: Playwright, settings: Settings) -> Browser:
    """
    ラン全体で1つだけ起動する。失敗はそのまま上に投げる（リトライしない）。
    """
    browser = pw.chromium.launch(**launch_options(settings))
    # expect() の待ちもページと同じタイムアウトに揃える
    expect.set_options(timeout=settings.timeout_ms)
    logger.info("Chromium launched (headless=%s, slow_mo=%sms)", settings.headless, settings.slow_mo_ms)
    return browser


def open_scenario_page(browser: Browser, settings: Settings) -> ScenarioPage:
    context = browser.new_context(**context_options(settings))
    try:
        page = context.new_page()
        page.set_default_timeout(settings.timeout_ms)
        page.set_default_navigation_timeout(settings.nav_timeout_ms)
    except Exception:
        close_quietly(context, "context")
        raise
    return ScenarioPage(context=context, page=page)


def close_scenario_page(bundle: ScenarioPage) -> None:
    close_quietly(bundle.page, "page")
    close_quietly(bundle.context, "context")


def close_quietly(resource: Any, label: str) -> None:
    if resource is None:
        return
    try:
        resource.close()
    except Exception as e:
        logger.warning("Failed to close %s: %s", label, e)

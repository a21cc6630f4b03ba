from __future__ import annotations

import os
from typing import Optional

from .site_loader import DEFAULT_SITE_CONFIG, load_site_config
from .types import Settings

_TRUTHY = ("1", "true", "yes", "y", "on")


def env_true(name: str, default: bool = False) -> bool:
    v = os.getenv(name)
    if v is None or not v.strip():
        return default
    return v.strip().lower() in _TRUTHY


def _env_int(name: str, default: int) -> int:
    v = (os.getenv(name) or "").strip()
    return int(v) if v else default


def load_settings(site_path: Optional[str] = None) -> Settings:
    """
    site.yaml を土台に環境変数で上書きする。
    HEADLESS は未指定なら headless。
    """
    site = load_site_config(site_path or os.getenv("SITE_CONFIG") or DEFAULT_SITE_CONFIG)
    headless = env_true("HEADLESS", default=True)

    return Settings(
        site=site,
        base_url=os.getenv("BASE_URL") or site.base_url,
        headless=headless,
        channel=os.getenv("PW_CHANNEL") or None,
        slow_mo_ms=_env_int("PW_SLOWMO_MS", 0 if headless else 100),
        timeout_ms=_env_int("PW_TIMEOUT_MS", 30000),
        nav_timeout_ms=_env_int("PW_NAV_TIMEOUT_MS", 45000),
        trace=env_true("PW_TRACE"),
        screenshot_dir=os.getenv("SCREENSHOT_DIR", "screenshots"),
        artifact_dir=os.getenv("ARTIFACT_DIR", "artifacts"),
        report_dir=os.getenv("REPORT_DIR", "reports"),
    )

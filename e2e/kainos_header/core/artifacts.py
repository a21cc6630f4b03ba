from __future__ import annotations

import base64
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from playwright.sync_api import Page

from .text import safe_name

logger = logging.getLogger(__name__)


@dataclass
class Artifacts:
    screenshot_dir: Path
    trace_dir: Path

    def screenshot_path(self, title: str, ts_ms: Optional[int] = None) -> Path:
        ts_ms = int(time.time() * 1000) if ts_ms is None else ts_ms
        self.screenshot_dir.mkdir(parents=True, exist_ok=True)
        return self.screenshot_dir / f"{safe_name(title)}_{ts_ms}.png"

    def trace_path(self, title: str, stamp: str) -> Path:
        name = safe_name(title, fallback="trace")
        d = self.trace_dir / name
        d.mkdir(parents=True, exist_ok=True)
        return d / f"trace_{name}_{stamp}.zip"

    def capture_failure(self, page: Page, title: str) -> Optional[Path]:
        """
        失敗したシナリオのフルページスクショを1枚だけ保存する。
        撮れなかった場合はログだけ残して None。
        """
        path = self.screenshot_path(title)
        try:
            page.screenshot(path=str(path), full_page=True)
        except Exception as e:
            logger.warning("Failure screenshot for %r not captured: %s", title, e)
            return None
        logger.info("Failure screenshot saved: %s", path)
        return path


def png_base64(path: Path) -> str:
    return base64.b64encode(path.read_bytes()).decode("ascii")


def get_artifacts(screenshot_dir: str, artifact_dir: str) -> Artifacts:
    return Artifacts(screenshot_dir=Path(screenshot_dir), trace_dir=Path(artifact_dir))

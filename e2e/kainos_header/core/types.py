from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class Viewport:
    width: int = 1920
    height: int = 1080


@dataclass(frozen=True)
class NavItem:
    label: str
    url: str


@dataclass(frozen=True)
class ReportConfig:
    title: str = "Header Test Report"
    metadata: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class SiteConfig:
    base_url: str
    viewport: Viewport = Viewport()
    ignore_https_errors: bool = True
    report: ReportConfig = ReportConfig()
    nav_items: Tuple[NavItem, ...] = ()
    services: Tuple[str, ...] = ()
    impacts: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Settings:
    site: SiteConfig
    base_url: str
    headless: bool = True
    channel: Optional[str] = None
    slow_mo_ms: int = 0
    timeout_ms: int = 30000
    nav_timeout_ms: int = 45000
    trace: bool = False
    screenshot_dir: str = "screenshots"
    artifact_dir: str = "artifacts"
    report_dir: str = "reports"

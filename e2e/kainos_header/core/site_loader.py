from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

from .types import NavItem, ReportConfig, SiteConfig, Viewport

DEFAULT_SITE_CONFIG = Path(__file__).resolve().parents[1] / "config" / "site.yaml"


def load_site_config(path: str | Path = DEFAULT_SITE_CONFIG) -> SiteConfig:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Site config not found: {p.resolve()}")

    raw = yaml.safe_load(p.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError("site config must be a mapping")
    return _to_site_config(raw)


def _to_site_config(d: Dict[str, Any]) -> SiteConfig:
    if not d.get("base_url"):
        raise ValueError(f"Missing key 'base_url' in site config: {d}")

    viewport = d.get("viewport") or {}
    if not isinstance(viewport, dict):
        raise ValueError("viewport must be a mapping")

    report = d.get("report") or {}
    if not isinstance(report, dict):
        raise ValueError("report must be a mapping")
    metadata = report.get("metadata") or {}
    if not isinstance(metadata, dict):
        raise ValueError("report.metadata must be a mapping")

    return SiteConfig(
        base_url=str(d["base_url"]),
        viewport=Viewport(
            width=int(viewport.get("width", 1920)),
            height=int(viewport.get("height", 1080)),
        ),
        ignore_https_errors=bool(d.get("ignore_https_errors", True)),
        report=ReportConfig(
            title=str(report.get("title") or ReportConfig.title),
            metadata={str(k): str(v) for k, v in metadata.items()},
        ),
        nav_items=_to_nav_items(d.get("nav_items") or []),
        services=_to_labels(d.get("services") or [], "services"),
        impacts=_to_labels(d.get("impacts") or [], "impacts"),
    )


def _to_nav_items(rows: List[Any]) -> Tuple[NavItem, ...]:
    out: List[NavItem] = []
    for row in rows:
        if not isinstance(row, dict):
            raise ValueError("Each nav item must be a dict")
        for k in ("label", "url"):
            if k not in row:
                raise ValueError(f"Missing key '{k}' in nav item: {row}")
        out.append(NavItem(label=str(row["label"]), url=str(row["url"])))
    return tuple(out)


def _to_labels(rows: List[Any], key: str) -> Tuple[str, ...]:
    if not isinstance(rows, list):
        raise ValueError(f"{key} must be a list")
    return tuple(str(r) for r in rows)

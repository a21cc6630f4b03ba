import re
from typing import Dict, List, Sequence


def normalize_text(s: str) -> str:
    return (s or "").strip().replace("\u3000", " ").replace("\n", " ")


def safe_name(s: str, fallback: str = "scenario") -> str:
    s = re.sub(r"[^a-zA-Z0-9_.-]+", "_", normalize_text(s))
    s = s.strip("_")
    return s[:120] if s else fallback


def table_rows(datatable: Sequence[Sequence[str]]) -> List[Dict[str, str]]:
    """
    Gherkin のデータテーブル（先頭行がヘッダ）を dict の行に変換する。
    """
    if not datatable:
        return []
    header = [normalize_text(h) for h in datatable[0]]
    return [dict(zip(header, (normalize_text(c) for c in row))) for row in datatable[1:]]


def column(rows: List[Dict[str, str]], name: str) -> List[str]:
    out = []
    for row in rows:
        if name not in row:
            raise KeyError(f"Column '{name}' not found in table row: {row}")
        out.append(row[name])
    return out

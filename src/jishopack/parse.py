from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List

from .core.contracts import DictionaryRecord
from .core.errors import UnexpectedShape


def _first(entry: Dict, key: str) -> str:
    items = entry.get(key) or []
    if not items:
        return ""
    return str(items[0] or "")


def _unique(items: Iterable[str]) -> List[str]:
    seen: set[str] = set()
    out: List[str] = []
    for x in items:
        if x in seen:
            continue
        seen.add(x)
        out.append(x)
    return out


def extract_jlpt_level(entry: Dict) -> str:
    """'jlpt-n3' -> 'N3'; '' when the entry carries no JLPT tag."""
    return _first(entry, "jlpt").replace("jlpt-", "").upper()


def extract_wanikani_level(entry: Dict) -> str:
    """'wanikani8' -> '8'. Case is left alone, unlike the JLPT tag."""
    return _first(entry, "tags").replace("wanikani", "")


def extract_reading(entry: Dict) -> str:
    japanese = entry.get("japanese") or []
    if not japanese:
        raise UnexpectedShape(
            f"Entry '{entry.get('slug', '')}' has no Japanese form to read from"
        )
    return str(japanese[0].get("reading") or "")


def extract_meanings(entry: Dict) -> List[str]:
    meanings: List[str] = []
    for sense in entry.get("senses", []) or []:
        meanings.extend(
            d.lower() for d in sense.get("english_definitions", []) or []
        )
    return _unique(meanings)


def extract_word_types(entry: Dict) -> List[str]:
    word_types: List[str] = []
    for sense in entry.get("senses", []) or []:
        for pos in sense.get("parts_of_speech", []) or []:
            pos = pos.lower()
            # Jisho lists "Wikipedia definition" as a part of speech.
            if "wikipedia" in pos:
                continue
            word_types.append(pos)
    return _unique(word_types)


def to_record(entry: Dict) -> DictionaryRecord:
    if not isinstance(entry, dict):
        raise UnexpectedShape(f"Entry is not an object: {entry!r}")
    return DictionaryRecord(
        slug=str(entry.get("slug", "")),
        is_common=bool(entry.get("is_common", False)),
        jlpt_level=extract_jlpt_level(entry),
        wanikani_level=extract_wanikani_level(entry),
        reading=extract_reading(entry),
        meanings=tuple(extract_meanings(entry)),
        word_types=tuple(extract_word_types(entry)),
    )


def normalize(raw: Any) -> List[DictionaryRecord]:
    """
    Map a parsed /search/words body to records, in the order Jisho sent them.
    A single malformed entry aborts the whole batch.
    """
    data = raw.get("data") if isinstance(raw, dict) else None
    if not isinstance(data, list):
        raise UnexpectedShape(
            "Response body has no 'data' list: "
            f"{json.dumps(raw, ensure_ascii=False, default=str)[:200]}"
        )
    return [to_record(entry) for entry in data]


def pretty_first_entry(rows: List[Dict]) -> str:
    if not rows:
        return "(no rows)"
    d = rows[0]
    sample = {
        "slug": d.get("slug"),
        "is_common": d.get("is_common"),
        "jlpt": d.get("jlpt"),
        "tags": d.get("tags"),
        "japanese": (d.get("japanese") or [])[:1],
    }
    return json.dumps(sample, ensure_ascii=False)[:600]

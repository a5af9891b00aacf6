from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple


class Tag(str, Enum):
    """Filter tokens understood by the Jisho search syntax."""

    COMMON = "#common"
    WASEI = "#wasei"
    KANJI = "#kanji"


@dataclass(frozen=True)
class LookupRequest:
    term: str
    filters: Tuple[str, ...] = field(default_factory=tuple)

    def filter_tokens(self) -> List[str]:
        return [f.value if isinstance(f, Tag) else f for f in self.filters]

    def tokens(self) -> List[str]:
        """Filters in caller order, then the term. No reordering here."""
        return self.filter_tokens() + [self.term]


@dataclass(frozen=True)
class DictionaryRecord:
    slug: str
    is_common: bool
    jlpt_level: str
    wanikani_level: str
    reading: str
    meanings: Tuple[str, ...] = ()
    word_types: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "slug": self.slug,
            "is_common": self.is_common,
            "jlpt_level": self.jlpt_level,
            "wanikani_level": self.wanikani_level,
            "reading": self.reading,
            "meanings": list(self.meanings),
            "word_type": list(self.word_types),
        }

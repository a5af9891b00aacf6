from __future__ import annotations

import re
from typing import Any, Iterable, List, Optional, Sequence
from urllib.parse import quote

from .config import JISHO_API_URL
from .core.contracts import LookupRequest, Tag
from .core.errors import InvalidArgument

# Same unreserved set as JavaScript's encodeURIComponent.
_URI_COMPONENT_SAFE = "-_.!~*'()"

_JLPT_PREFIXED = re.compile(r"[Nn]([0-9]+)")
_JLPT_DIGITS = re.compile(r"[0-9]+")


def check_term(term: Any) -> str:
    if not isinstance(term, str):
        raise InvalidArgument(
            f"Query value '{term}' is incompatible. It must be a string. Aborting!",
            value=term,
        )
    if not term:
        raise InvalidArgument(
            f"Query value '{term}' is empty. Aborting!", value=term
        )
    return term


def normalize_jlpt(level: Any) -> str:
    """
    Canonical lowercase JLPT level: 3, "3", "n3" and "N3" all give "n3".
    Everything else raises InvalidArgument.
    """
    if isinstance(level, int) and not isinstance(level, bool):
        if level >= 0:
            return f"n{level}"
    elif isinstance(level, str):
        s = level.strip()
        m = _JLPT_PREFIXED.fullmatch(s)
        if m:
            return f"n{m.group(1)}"
        if _JLPT_DIGITS.fullmatch(s):
            return f"n{s}"
    raise InvalidArgument(
        f"JLPT level needs to be in the format 'N3', 'n3' or 3. "
        f"Got '{level}' instead. Aborting!",
        value=level,
    )


def jlpt_tag(level: Any) -> str:
    return f"#jlpt-{normalize_jlpt(level)}"


def order_blocks(blocks: Iterable[Any]) -> List[str]:
    """
    Validate tokens and hoist '#common' to the front of the sequence.
    Everything else keeps its relative order.
    """
    tokens: List[str] = []
    common = False
    for b in blocks:
        if isinstance(b, Tag):
            b = b.value
        check_term(b)
        if b == Tag.COMMON.value:
            common = True
            continue
        tokens.append(b)
    if common:
        tokens.insert(0, Tag.COMMON.value)
    return tokens


def build_blocks(term: Any, filters: Sequence[Any] = ()) -> List[str]:
    check_term(term)
    req = LookupRequest(term=term, filters=tuple(filters))
    # The term never takes part in hoisting, even if it reads "#common".
    return order_blocks(req.filter_tokens()) + [req.term]


def query_string(blocks: Sequence[str]) -> str:
    """Human-readable query, as typed into the jisho.org search box."""
    return " ".join(blocks)


def encode_blocks(blocks: Sequence[str]) -> str:
    # Encode each token whole, then join with a literal space.
    return " ".join(quote(b, safe=_URI_COMPONENT_SAFE) for b in blocks)


def build_url(blocks: Sequence[str], base_url: Optional[str] = None) -> str:
    return f"{base_url or JISHO_API_URL}{encode_blocks(blocks)}"


def build_query(
    term: Any, filters: Sequence[Any] = (), base_url: Optional[str] = None
) -> str:
    """Full request URL for `term` narrowed by `filters`."""
    return build_url(build_blocks(term, filters), base_url=base_url)

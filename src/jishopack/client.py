from __future__ import annotations

import sys
from typing import Any, List, Optional, Sequence

from .config import DEBUG
from .core.contracts import DictionaryRecord, Tag
from .core.errors import UnsupportedOperation
from .core.interfaces import DictionaryLookup, JLPTInput, Transport
from .http import RequestTemplate, fetch_json, make_session
from .parse import normalize, pretty_first_entry
from .query import build_blocks, check_term, jlpt_tag, order_blocks


class JishoPack(DictionaryLookup):
    """
    Public façade over the Jisho word search API.

    Every lookup builds one token sequence, issues one GET and normalizes
    the body into DictionaryRecord values. Nothing is cached or retried.
    """

    def __init__(
        self,
        *,
        session: Optional[Transport] = None,
        template: Optional[RequestTemplate] = None,
        debug: Optional[bool] = None,
    ) -> None:
        self._session = session if session is not None else make_session()
        self._template = template or RequestTemplate()
        self._debug = DEBUG if debug is None else bool(debug)

    # pipeline -----------------------------------------------------------
    def _run(self, blocks: Sequence[str]) -> List[DictionaryRecord]:
        body = fetch_json(
            self._session, blocks, template=self._template, debug=self._debug
        )
        if self._debug and isinstance(body, dict):
            rows = body.get("data") or []
            print(
                f"[jisho] {len(rows)} entries, first: {pretty_first_entry(rows)}",
                file=sys.stderr,
            )
        return normalize(body)

    def lookup_blocks(self, blocks: Sequence[Any]) -> List[DictionaryRecord]:
        """Run a raw token sequence, e.g. ["#jlpt-n5", "#common", "犬"]."""
        return self._run(order_blocks(blocks))

    # DictionaryLookup methods -------------------------------------------
    def lookup(self, term: str, common: bool = False) -> List[DictionaryRecord]:
        filters = [Tag.COMMON] if common else []
        return self._run(build_blocks(term, filters))

    def lookup_common(self, term: str) -> List[DictionaryRecord]:
        return self.lookup(term, True)

    def lookup_prefix(
        self, term: str, common: bool = False
    ) -> List[DictionaryRecord]:
        return self.lookup(f"{check_term(term)}*", common)

    def lookup_suffix(
        self, term: str, common: bool = False
    ) -> List[DictionaryRecord]:
        return self.lookup(f"*{check_term(term)}", common)

    def lookup_by_jlpt(
        self, term: str, level: JLPTInput
    ) -> List[DictionaryRecord]:
        check_term(term)
        return self._run(build_blocks(term, [jlpt_tag(level)]))

    def lookup_wasei(
        self, term: str, common: bool = False
    ) -> List[DictionaryRecord]:
        filters = [Tag.WASEI, Tag.COMMON] if common else [Tag.WASEI]
        return self._run(build_blocks(term, filters))

    def lookup_kanji(
        self, term: str, common: bool = False
    ) -> List[DictionaryRecord]:
        filters = [Tag.KANJI, Tag.COMMON] if common else [Tag.KANJI]
        return self._run(build_blocks(term, filters))

    def lookup_kanji_grade(self, term: str, grade: int) -> List[DictionaryRecord]:
        # jisho.org's HTML search knows "#grade:N"; /api/v1 ignores it.
        raise UnsupportedOperation(
            f"Kanji grade lookup ('{term}', grade {grade}) is not supported "
            "by the Jisho JSON API."
        )

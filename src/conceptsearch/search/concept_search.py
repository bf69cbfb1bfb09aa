"""
概念搜尋模組

在句子中找出所有出現的概念 (concept)：
1. 字 (word) 是連續的字母與數字
2. 概念是以空白分隔的一串字
3. 概念與句子中的標點一律忽略
4. 任意長度的空白都等同單一空白
5. 不分大小寫
6. 概念的字依序出現、且前後是空白或句子邊界時，視為出現

使用方式:
    from conceptsearch import ConceptSearch

    search = ConceptSearch(["Indian", "West Indian", "Thai"])
    search.concepts_in("Which restaurants do West Indian food")
    # {"Indian", "West Indian"}
"""

from __future__ import annotations

import logging
import uuid
from typing import Callable, Dict, Iterable, List, Optional, Set, Tuple

from conceptsearch.config import SearchConfig, configure_logging
from conceptsearch.core.automaton import AhoCorasick
from conceptsearch.core.events import MatchEvent, MatchEventHandler
from conceptsearch.utils.logger import TimingContext, get_logger

from .normalizer import is_blank_phrase, preprocess_phrase


class ConceptSearch:
    """
    概念搜尋器

    功能:
    - 以 Aho-Corasick 狀態機一次掃描找出所有概念
    - 概念與句子使用相同的前處理 (preprocess_phrase)
    - 重疊的概念會全部回報 (例如 "Indian" 與 "West Indian")
    - 支援 on_event 回呼取得每個命中的位置

    建構後不再修改，可在多執行緒中共用同一個實例。

    Args:
        concepts: 概念清單
        config: 搜尋器配置，提供時會覆蓋 verbose / on_timing
        verbose: 是否開啟詳細日誌
        on_timing: 計時回呼 (operation, elapsed_seconds) -> None
        on_event: 命中事件回呼
    """

    def __init__(
        self,
        concepts: Iterable[str],
        *,
        config: Optional[SearchConfig] = None,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
        on_event: Optional[MatchEventHandler] = None,
    ):
        if config is not None:
            verbose = config.verbose
            on_timing = config.on_timing
        configure_logging(verbose)

        self._logger = get_logger("search.concept")
        self._timing_logger = get_logger("timing.search")
        self._timing_callback = on_timing
        self._on_event = on_event

        with self._log_timing("ConceptSearch.__init__"):
            indexed = self._dedupe_concepts(concepts)
            self._concepts: Tuple[str, ...] = tuple(indexed)
            self._fsm: AhoCorasick[str] = AhoCorasick(self._concepts, preprocess_phrase)

        self._logger.debug(f"Indexed {len(self._concepts)} concepts ({len(self._fsm)} states)")

    @property
    def concepts(self) -> Tuple[str, ...]:
        return self._concepts

    @property
    def automaton(self) -> AhoCorasick[str]:
        return self._fsm

    def concepts_in(self, sentence: str) -> Set[str]:
        """
        找出句子中出現的概念

        Args:
            sentence: 句子

        Returns:
            Set[str]: 出現過的概念 (原始拼寫)
        """
        return set(self.find_concepts(sentence))

    def find_concepts(self, sentence: str, *, silent: bool = False) -> List[str]:
        """
        依出現順序列出句子中的所有概念 (可重複)

        Args:
            sentence: 句子
            silent: 是否略過 on_event 回呼失敗時的日誌

        Returns:
            List[str]: 結尾位置較前者在前；同一位置結尾時較長的概念在前
        """
        with self._log_timing("ConceptSearch.find_concepts"):
            normalized = preprocess_phrase(sentence)
            found: List[str] = []
            trace_id = uuid.uuid4().hex if self._on_event is not None else None

            for start, end, concept in self._fsm.iter_matches(normalized):
                found.append(concept)
                if self._on_event is not None:
                    self._emit_event(
                        {
                            "type": "match",
                            "trace_id": trace_id,
                            "concept": concept,
                            "start": start,
                            "end": end,
                            "normalized": normalized,
                        },
                        silent=silent,
                    )

        if found:
            self._logger.debug(f"[Match] {sentence!r} -> {found}")
        return found

    def _dedupe_concepts(self, concepts: Iterable[str]) -> List[str]:
        """
        過濾無法比對的概念

        - 前處理後沒有任何字母/數字的概念會比對到每個空白，直接略過
        - 前處理後相同的概念只保留最後一個
        """
        by_normalized: Dict[str, str] = {}

        for concept in concepts:
            normalized = preprocess_phrase(concept)
            if is_blank_phrase(normalized):
                self._warn(f"略過空白概念: {concept!r}")
                continue

            previous = by_normalized.get(normalized)
            if previous is not None and previous != concept:
                self._warn(f"概念 {concept!r} 與 {previous!r} 前處理後相同 ({normalized!r})，保留 {concept!r}")
            by_normalized[normalized] = concept

        return list(by_normalized.values())

    def _warn(self, message: str) -> None:
        self._logger.warning(message)
        if self._on_event is not None:
            self._emit_event({"type": "warning", "message": message}, silent=False)

    def _emit_event(self, event: MatchEvent, *, silent: bool) -> None:
        try:
            self._on_event(event)
        except Exception:
            if not silent:
                self._logger.exception("on_event 回呼執行失敗")

    def _log_timing(self, operation: str) -> TimingContext:
        return TimingContext(
            operation=operation,
            logger=self._timing_logger,
            level=logging.DEBUG,
            callback=self._timing_callback,
        )

    def __repr__(self) -> str:
        return f"ConceptSearch(concepts={len(self._concepts)})"

"""
事件模型（Event Model）

搜尋器預設不直接輸出到 stdout。
若需要取得「本次在句子中找到哪些概念、位於何處」等資訊，請使用事件回呼（event handler）。

回呼拋出的例外會被記錄並忽略，不影響搜尋結果。
"""

from __future__ import annotations

from typing import Callable, Literal, TypedDict


class MatchEvent(TypedDict, total=False):
    type: Literal["match", "warning"]
    trace_id: str

    # match
    concept: str
    start: int
    end: int
    normalized: str

    # diagnostics
    message: str


MatchEventHandler = Callable[[MatchEvent], None]

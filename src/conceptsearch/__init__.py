"""
conceptsearch - 多詞概念搜尋器 (Multi-word Concept Search)

核心概念：
- 使用者提供概念字典 (可包含多個字的片語)
- 概念與句子經過相同的前處理 (小寫、去標點、前後補空白)
- 以字元 Trie 建立 Aho-Corasick 狀態機，一次線性掃描找出所有出現的概念

官方入口（穩定 API）：
- `conceptsearch.ConceptSearch`
- `conceptsearch.AhoCorasick`
"""

# =============================================================================
# 搜尋層（官方入口）
# =============================================================================
from conceptsearch.search import ConceptSearch, preprocess_phrase

# =============================================================================
# 核心層（進階用途）
# =============================================================================
from conceptsearch.core import (
    AhoCorasick,
    MatchEvent,
    MatchEventHandler,
    Trie,
    TrieNode,
    compute_dictionary_suffixes,
    compute_maximal_suffixes,
)

# =============================================================================
# 配置與日誌工具
# =============================================================================
from conceptsearch.config import DEFAULT_CONFIG, SearchConfig
from conceptsearch.utils.logger import enable_debug_logging, enable_timing_logging, get_logger

__all__ = [
    # Search
    "ConceptSearch",
    "preprocess_phrase",
    # Core (advanced)
    "AhoCorasick",
    "Trie",
    "TrieNode",
    "compute_maximal_suffixes",
    "compute_dictionary_suffixes",
    # Events
    "MatchEvent",
    "MatchEventHandler",
    # Config
    "SearchConfig",
    "DEFAULT_CONFIG",
    # Logging
    "get_logger",
    "enable_debug_logging",
    "enable_timing_logging",
]

__version__ = "0.1.0"

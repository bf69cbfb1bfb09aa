"""
核心層

字元 Trie 與建立在其上的 Aho-Corasick 狀態機，與語言、正規化方式無關。
"""

from .automaton import AhoCorasick, compute_dictionary_suffixes, compute_maximal_suffixes
from .events import MatchEvent, MatchEventHandler
from .trie import ROOT, Trie, TrieNode

__all__ = [
    "AhoCorasick",
    "compute_maximal_suffixes",
    "compute_dictionary_suffixes",
    "Trie",
    "TrieNode",
    "ROOT",
    "MatchEvent",
    "MatchEventHandler",
]

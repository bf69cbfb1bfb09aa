"""
Aho-Corasick 多模式字串匹配（無第三方依賴）

以字元 Trie 為基礎建立有限狀態機：
- maximal suffix：節點路徑在 Trie 中存在的最長真後綴 (傳統的 fail link)
- dictionary suffix：沿 maximal suffix 鏈找到的最近一個字典詞節點

掃描時每讀入一個字元就轉移一次狀態，並輸出在目前位置結尾的所有字典詞。
建構完成後自動機不再改變，可以被多個掃描同時共用。

@see https://en.wikipedia.org/wiki/Aho%E2%80%93Corasick_algorithm
"""

from __future__ import annotations

from typing import Callable, Dict, Generic, Iterable, Iterator, List, Tuple

from conceptsearch.utils.logger import TimingContext, get_logger

from .trie import ROOT, Trie, W

logger = get_logger("core.automaton")

SuffixLinks = Dict[int, int]


def _suffix_chain(node: int, links: SuffixLinks) -> Iterator[int]:
    """
    沿著 links 走訪直到 root (不含起點，含 root)

    非 root 節點在表中缺少項目代表建構錯誤，直接拋出 KeyError。
    """
    while node != ROOT:
        node = links[node]
        yield node


def compute_maximal_suffixes(trie: Trie[W]) -> SuffixLinks:
    """
    計算每個節點的 maximal suffix

    依 BFS 順序處理：子節點的 suffix 只依賴較淺節點已算好的 suffix。

    Returns:
        Dict[int, int]: 非 root 節點 index -> suffix 節點 index (找不到時為 root)
    """
    suffixes: SuffixLinks = {}

    for parent, child in trie.bfs_pairs():
        if parent == ROOT:
            suffixes[child] = ROOT
            continue

        label = trie.node(child).label
        target = ROOT
        for candidate in _suffix_chain(parent, suffixes):
            nxt = trie.child(candidate, label)
            if nxt is not None:
                target = nxt
                break
        suffixes[child] = target

    return suffixes


def compute_dictionary_suffixes(trie: Trie[W], maximal_suffixes: SuffixLinks) -> SuffixLinks:
    """
    計算每個節點的 dictionary suffix

    依 BFS 順序處理：maximal suffix 一定比節點淺，它的 dictionary suffix 已經算好，
    每個節點只查表一次。

    Args:
        trie: Trie
        maximal_suffixes: compute_maximal_suffixes() 的結果

    Returns:
        Dict[int, int]: 非 root 節點 index -> 最近的字典詞 suffix 節點 (找不到時為 root)
    """
    dict_suffixes: SuffixLinks = {}

    for _, node in trie.bfs_pairs():
        suffix = maximal_suffixes[node]
        if suffix == ROOT or trie.node(suffix).has_word:
            dict_suffixes[node] = suffix
        else:
            dict_suffixes[node] = dict_suffixes[suffix]

    return dict_suffixes


class AhoCorasick(Generic[W]):
    """
    Aho-Corasick 狀態機

    使用方式:
        ac = AhoCorasick(["he", "she", "his", "hers"], lambda w: w)
        ac.find_phrases_in("ushers")  # ["she", "he", "hers"]

    Args:
        phrases: 字典詞
        representation: 詞 -> 要索引的字元序列。掃描的文字必須使用同樣的正規化，
            否則比對不到。
    """

    def __init__(self, phrases: Iterable[W], representation: Callable[[W], str]) -> None:
        with TimingContext("AhoCorasick.build"):
            self._trie: Trie[W] = Trie.build(phrases, representation)
            self._max_suffixes = compute_maximal_suffixes(self._trie)
            self._dict_suffixes = compute_dictionary_suffixes(self._trie, self._max_suffixes)

        logger.debug(f"Automaton built: {len(self._trie)} states, {len(self._trie.words())} phrases")

    @property
    def trie(self) -> Trie[W]:
        return self._trie

    @property
    def maximal_suffixes(self) -> SuffixLinks:
        return dict(self._max_suffixes)

    @property
    def dictionary_suffixes(self) -> SuffixLinks:
        return dict(self._dict_suffixes)

    def __len__(self) -> int:
        return len(self._trie)

    def transition(self, state: int, ch: str) -> int:
        """狀態轉移：自身子節點優先，否則沿 maximal suffix 鏈回退，最後回到 root"""
        trie = self._trie
        while state != ROOT and trie.child(state, ch) is None:
            state = self._max_suffixes[state]
        nxt = trie.child(state, ch)
        return ROOT if nxt is None else nxt

    def outputs_at(self, state: int) -> List[W]:
        """
        列出在此狀態結尾的所有字典詞

        先輸出節點自己的詞 (最長)，再沿 dictionary suffix 鏈輸出，長度嚴格遞減。
        """
        return [self._trie.node(match).word for match in self._match_nodes(state)]

    def iter_matches(self, text: str) -> Iterator[Tuple[int, int, W]]:
        """
        逐一輸出 matches

        Yields:
            (start, end, word)
            - start: match 起始 index（含）
            - end: match 結束 index（不含）
        """
        state = ROOT
        for i, ch in enumerate(text):
            state = self.transition(state, ch)
            if state == ROOT:
                continue

            end = i + 1
            for match in self._match_nodes(state):
                node = self._trie.node(match)
                yield end - node.depth, end, node.word

    def find_phrases_in(self, text: str) -> List[W]:
        """
        依出現順序列出 text 中所有字典詞

        結尾位置較前者先輸出；同一位置結尾的詞，較長者先輸出。
        """
        return [word for _, _, word in self.iter_matches(text)]

    def _match_nodes(self, state: int) -> Iterator[int]:
        # root 不帶字典詞，也沒有 dictionary suffix
        if self._trie.node(state).has_word:
            yield state
        for suffix in _suffix_chain(state, self._dict_suffixes):
            if suffix == ROOT:
                return
            yield suffix

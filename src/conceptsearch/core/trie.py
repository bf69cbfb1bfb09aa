"""
字元 Trie (Prefix Tree)

以陣列 (arena) 保存所有節點，節點身分就是它在陣列中的 index。
後續的 suffix link 表都以 index 為 key，而不是以節點內容比較，
兩個內容相同 (同 label、同 word、同樣沒有子節點) 的節點仍是不同的狀態。

建構完成後 Trie 不再被修改，可以安全地被多個掃描共享。
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, Iterable, List, Optional, Tuple, TypeVar

W = TypeVar("W")

ROOT = 0


@dataclass
class TrieNode(Generic[W]):
    """
    Trie 節點

    屬性:
        label: 節點字元，root 為 None
        word: 若 root 到此節點的路徑恰為某個字典詞的表示，保存該詞
        children: 字元 -> 子節點 index
        parent: 父節點 index，root 為 None
        depth: root 到此節點的路徑長度
    """

    label: Optional[str] = None
    word: Optional[W] = None
    children: Dict[str, int] = field(default_factory=dict)
    parent: Optional[int] = None
    depth: int = 0

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def has_word(self) -> bool:
        return self.word is not None


class Trie(Generic[W]):
    """
    字典詞的字元前綴樹

    使用方式:
        trie = Trie.build(["he", "she", "his", "hers"], lambda w: w)
        node = trie.find("he")
        trie.node(node).word  # "he"
    """

    def __init__(self) -> None:
        self._nodes: List[TrieNode[W]] = [TrieNode()]

    @classmethod
    def build(cls, entries: Iterable[W], representation: Callable[[W], str]) -> "Trie[W]":
        """
        由字典詞依序建立 Trie

        Args:
            entries: 字典詞
            representation: 詞 -> 要索引的字元序列

        Returns:
            Trie: 相同表示重複插入時，後插入的詞覆蓋先前的詞
        """
        trie: Trie[W] = cls()
        for entry in entries:
            trie.insert(entry, representation)
        return trie

    def insert(self, word: W, representation: Callable[[W], str]) -> Optional[int]:
        """
        插入單一字典詞，回傳終點節點 index

        空字串表示不插入任何節點，回傳 None。
        """
        text = representation(word)
        if not text:
            return None

        node = ROOT
        for ch in text:
            nxt = self._nodes[node].children.get(ch)
            if nxt is None:
                nxt = len(self._nodes)
                self._nodes[node].children[ch] = nxt
                self._nodes.append(
                    TrieNode(label=ch, parent=node, depth=self._nodes[node].depth + 1)
                )
            node = nxt
        self._nodes[node].word = word
        return node

    def node(self, index: int) -> TrieNode[W]:
        return self._nodes[index]

    def child(self, index: int, ch: str) -> Optional[int]:
        return self._nodes[index].children.get(ch)

    def find(self, path: str) -> Optional[int]:
        """沿著 path 走訪，回傳抵達的節點 index；路徑不存在時回傳 None"""
        node = ROOT
        for ch in path:
            nxt = self._nodes[node].children.get(ch)
            if nxt is None:
                return None
            node = nxt
        return node

    def path(self, index: int) -> str:
        """root 到節點的字元路徑"""
        chars: List[str] = []
        node = self._nodes[index]
        while node.parent is not None:
            chars.append(node.label)
            node = self._nodes[node.parent]
        return "".join(reversed(chars))

    def words(self) -> List[W]:
        return [node.word for node in self._nodes if node.word is not None]

    def bfs_pairs(self) -> List[Tuple[int, int]]:
        """
        以廣度優先列舉 (parent, child)

        逐層輸出，父節點的配對一定先於其子節點的配對；
        同層兄弟依插入順序。每次呼叫都從目前的 Trie 重新計算。
        """
        pairs: List[Tuple[int, int]] = []
        queue: deque[int] = deque([ROOT])

        while queue:
            parent = queue.popleft()
            for child in self._nodes[parent].children.values():
                pairs.append((parent, child))
                queue.append(child)

        return pairs

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"Trie(nodes={len(self._nodes)}, words={len(self.words())})"

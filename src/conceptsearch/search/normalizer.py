"""
概念與句子的前處理

規則：
- 字 (word) 是連續的 Unicode 字母 (\\p{L}) 與十進位數字 (\\p{Nd})
- 標點、其他數字符號 (², ½, Ⅻ) 與任意長度的空白都視為單一空白
- 不分大小寫
- 前後各補一個空白，讓句首/句尾的概念也能比對，並避免概念黏在相鄰單字上
"""

import regex

# 非字母、非十進位數字的連續字元
IGNORE_PATTERN = regex.compile(r"[^\p{L}\p{Nd}]+")


def preprocess_phrase(phrase: str) -> str:
    """
    前處理概念或句子

    Examples:
        >>> preprocess_phrase("two Words")
        ' two words '
        >>> preprocess_phrase("double-barrelled 'with' punctuation.")
        ' double barrelled with punctuation '
    """
    return IGNORE_PATTERN.sub(" ", f" {phrase} ").lower()


def is_blank_phrase(normalized: str) -> bool:
    """前處理後不含任何字母或數字"""
    return not normalized.strip()

"""
概念搜尋層

前處理 (normalizer) 與概念搜尋器 (ConceptSearch)。
"""

from .concept_search import ConceptSearch
from .normalizer import is_blank_phrase, preprocess_phrase

__all__ = [
    "ConceptSearch",
    "preprocess_phrase",
    "is_blank_phrase",
]

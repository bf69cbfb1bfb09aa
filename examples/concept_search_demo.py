"""
概念搜尋範例 - 展示多詞概念偵測與命中事件

這個範例展示如何建立 ConceptSearch，
並透過 on_event 回呼取得每個命中在前處理後句子中的位置。
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from conceptsearch import ConceptSearch

concepts = [
    "Indian", "Thai", "Sushi", "Caribbean", "Italian", "West Indian",
    "Pub", "East Asian", "BBQ", "Chinese", "Portuguese", "Spanish",
    "French", "East European",
]

sentences = [
    "I would like some thai food",
    "Where can I find good sushi",
    "Find me a place that does tapas",
    "Which restaurants do East Asian food",
    "Which restaurants do West Indian food",
    "What is the weather like today",
]


def print_event(event):
    span = event["normalized"][event["start"]:event["end"]]
    print(f"    [{event['start']:>3}, {event['end']:>3}) {span!r} -> {event['concept']}")


def demo_concept_search():
    """展示概念搜尋"""

    print("=" * 60)
    print("概念搜尋展示")
    print("=" * 60)
    print()

    search = ConceptSearch(concepts, on_event=print_event)

    for sentence in sentences:
        print(f"📍 {sentence}")
        found = search.concepts_in(sentence)
        print(f"    Concepts: {', '.join(sorted(found)) or '(none)'}")
        print()


if __name__ == "__main__":
    demo_concept_search()

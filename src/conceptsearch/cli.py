"""
命令列工具

讀取概念檔與句子檔 (每行一筆)，輸出每個句子中找到的概念：

    conceptsearch concepts.txt sentences.txt
    python -m conceptsearch concepts.txt sentences.txt -v
"""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, List, Optional, TextIO

from conceptsearch.search.concept_search import ConceptSearch
from conceptsearch.utils.logger import get_logger

logger = get_logger("cli")


def read_lines(path: str) -> List[str]:
    with open(path, "r", encoding="utf-8") as f:
        return f.read().splitlines()


def format_concepts(concepts: Iterable[str]) -> str:
    return ", ".join(sorted(concepts))


def run(search: ConceptSearch, sentences: Iterable[str], out: TextIO) -> None:
    for line in sentences:
        print(line, file=out)
        print(f"Concepts: {format_concepts(search.concepts_in(line))}", file=out)
        print(file=out)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="conceptsearch",
        description="Find the concepts occurring in every line of a sentences file.",
    )
    parser.add_argument("concepts_file", metavar="CONCEPTS_FILE", help="One concept per line")
    parser.add_argument("sentences_file", metavar="SENTENCES_FILE", help="One sentence per line")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        concepts = [line for line in read_lines(args.concepts_file) if line.strip()]
        search = ConceptSearch(concepts, verbose=args.verbose)
        sentences = read_lines(args.sentences_file)
    except (OSError, UnicodeDecodeError) as e:
        print(f"conceptsearch: {e}", file=sys.stderr)
        return 1

    logger.info(f"Loaded {len(search.concepts)} concepts from {args.concepts_file}")
    run(search, sentences, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())

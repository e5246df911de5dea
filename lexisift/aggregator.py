import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Tuple

from lexisift.tokenizer import Category, Token, normalize, tokenize_all

logger = logging.getLogger(__name__)


def rank_with_counts(frequencies: Dict[str, int]) -> List[Tuple[str, int]]:
    """Order the entries of a frequency table by descending count.

    The sort is stable over the table's insertion order, so keys with the
    same count stay in the order they were first seen in the input.
    """
    return sorted(frequencies.items(), key=lambda item: -item[1])


def rank(frequencies: Dict[str, int]) -> List[str]:
    return [key for key, _ in rank_with_counts(frequencies)]


class CategoryAccumulator:
    def __init__(self, category: Category):
        self.category = category
        self.frequencies = defaultdict(int)
        self.duplicated = []

    def add(self, token: Token):
        """Count a token under its key and keep its raw text in order."""
        self.frequencies[normalize(token.text, self.category)] += 1
        self.duplicated.append(token.text)

    def deduplicated(self) -> List[str]:
        return rank(self.frequencies)

    def deduplicated_with_counts(self) -> List[Tuple[str, int]]:
        return rank_with_counts(self.frequencies)

    def __len__(self):
        return len(self.duplicated)


class Aggregator:
    """Per-run accumulation state for all four categories."""

    def __init__(self):
        self.categories = {
            category: CategoryAccumulator(category) for category in Category
        }
        self.lines = 0

    def __getitem__(self, category: Category) -> CategoryAccumulator:
        return self.categories[category]

    def feed_line(self, line: str):
        self.lines += 1
        for category, token in tokenize_all(line):
            self.categories[category].add(token)

    def feed(self, lines: Iterable[str]) -> "Aggregator":
        for line in lines:
            self.feed_line(line)
        logger.debug(
            "Scanned %d lines: %s",
            self.lines,
            ", ".join(f"{c.value}={len(acc)}" for c, acc in self.categories.items()),
        )
        return self

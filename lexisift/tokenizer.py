from enum import Enum
from typing import Iterator, NamedTuple, Tuple

import regex


class Category(Enum):
    CHINESE_CHARACTER = "chinese-character"
    CHINESE_WORD = "chinese-word"
    ENGLISH_WORD = "english-word"
    ENGLISH_PHRASE = "english-phrase"


class Token(NamedTuple):
    text: str
    category: Category


# English rules use ASCII \b and \w so Han characters count as
# non-word characters at boundaries. Phrase whitespace excludes \v.
PATTERNS = {
    Category.CHINESE_CHARACTER: regex.compile(r"\p{Han}"),
    Category.CHINESE_WORD: regex.compile(r"\p{Han}+"),
    Category.ENGLISH_WORD: regex.compile(
        r"\b[a-zA-Z0-9']+(?:-[a-zA-Z0-9']+)?\b", regex.ASCII
    ),
    Category.ENGLISH_PHRASE: regex.compile(
        r"\b[a-zA-Z0-9][\w\t\n\f\r '-]*[a-zA-Z0-9]\b", regex.ASCII
    ),
}


def tokenize(line: str, category: Category) -> Iterator[Token]:
    """Yield the non-overlapping matches of a category's rule, left to right."""
    for match in PATTERNS[category].finditer(line):
        yield Token(match.group(), category)


def tokenize_all(line: str) -> Iterator[Tuple[Category, Token]]:
    """Run every category's rule over the same line.

    Each rule scans independently, so an English phrase will usually
    cover text that is also yielded as English words.
    """
    for category in Category:
        for token in tokenize(line, category):
            yield category, token


def normalize(text: str, category: Category) -> str:
    """Return the aggregation key for a raw token."""
    if category is Category.ENGLISH_WORD:
        return text.lower()
    elif category is Category.ENGLISH_PHRASE:
        return text.strip().lower()
    return text

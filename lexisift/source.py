import logging
from typing import Iterator, Optional, Sequence, TextIO

from lexisift.errors import ReadFailureError, SourceUnavailableError

logger = logging.getLogger(__name__)


def select_source(argv: Sequence[str]) -> Optional[str]:
    """Pick the input file from the command line, or ask for one.

    Returns None when no file was given.
    """
    if len(argv) > 1:
        return argv[1]
    try:
        path = input("Select the input file: ")
    except EOFError:
        return None
    return path.strip() or None


def read_lines(path: Optional[str], encoding: str = "utf-8") -> Iterator[str]:
    """Open path and return a lazy iterator over its lines.

    Line terminators are removed and undecodable bytes become U+FFFD,
    which no pattern matches. Opening failures raise
    SourceUnavailableError right away; I/O failures while reading raise
    ReadFailureError from the iterator.
    """
    if not path:
        raise SourceUnavailableError("No input file selected.")
    try:
        f = open(path, "r", encoding=encoding, errors="replace")
    except (OSError, LookupError) as e:
        raise SourceUnavailableError(f"Error opening input file: {e}") from e
    logger.info(f"Selected input file: {path}")
    return _iter_lines(f, path)


def _iter_lines(f: TextIO, path: str) -> Iterator[str]:
    with f:
        try:
            for line in f:
                yield line.rstrip("\n")
        except OSError as e:
            raise ReadFailureError(f"Error reading input file {path}: {e}") from e

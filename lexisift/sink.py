import logging
from typing import Iterable, List, Mapping

from lexisift.errors import SinkUnavailableError

logger = logging.getLogger(__name__)


def write_lines(destination: str, lines: Iterable[str]) -> int:
    """Write each string as one line to destination, replacing its content.

    Returns the number of records written.
    """
    count = 0
    try:
        with open(destination, "w", encoding="utf-8", newline="\n") as f:
            for line in lines:
                f.write(line + "\n")
                count += 1
    except OSError as e:
        raise SinkUnavailableError(destination, e.strerror or e) from e
    return count


def write_outputs(outputs: Mapping[str, Iterable[str]]) -> List[SinkUnavailableError]:
    """Write every output independently.

    A destination that cannot be written is logged and skipped; the
    returned list holds one error per skipped destination.
    """
    failures = []
    for destination, lines in outputs.items():
        try:
            count = write_lines(destination, lines)
        except SinkUnavailableError as e:
            logger.error(str(e))
            failures.append(e)
        else:
            logger.info(f"Wrote {count} lines to {destination}")
    return failures

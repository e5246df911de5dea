#!/usr/bin/env python3
import logging
import sys
import time
from typing import Dict, List, Optional, Sequence

from lexisift.aggregator import Aggregator, CategoryAccumulator
from lexisift.config import Config
from lexisift.errors import ConfigError, LexiSiftRuntimeError
from lexisift.sink import write_outputs
from lexisift.source import read_lines, select_source
from lexisift.tokenizer import Category

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_DEGRADED = 2

# Output key -> (category, whether the output is deduplicated)
OUTPUT_SOURCES = {
    "deduplicated_chinese": (Category.CHINESE_CHARACTER, True),
    "duplicated_chinese": (Category.CHINESE_CHARACTER, False),
    "deduplicated_english": (Category.ENGLISH_WORD, True),
    "duplicated_english": (Category.ENGLISH_WORD, False),
    "deduplicated_chinese_words": (Category.CHINESE_WORD, True),
    "duplicated_chinese_words": (Category.CHINESE_WORD, False),
    "deduplicated_english_phrases": (Category.ENGLISH_PHRASE, True),
    "duplicated_english_phrases": (Category.ENGLISH_PHRASE, False),
}


def output_lines(
    accumulator: CategoryAccumulator, deduplicated: bool, with_counts: bool
) -> List[str]:
    if not deduplicated:
        return accumulator.duplicated
    if with_counts:
        return [
            f"{key}\t{freq}" for key, freq in accumulator.deduplicated_with_counts()
        ]
    return accumulator.deduplicated()


def build_outputs(aggregator: Aggregator, config: Config) -> Dict[str, List[str]]:
    """Map each enabled output file to the lines it should hold."""
    outputs = {}
    for key in config.enabled_outputs():
        category, deduplicated = OUTPUT_SOURCES[key]
        outputs[config.outputs[key]] = output_lines(
            aggregator[category], deduplicated, config.with_counts
        )
    return outputs


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Sift the selected file and write the output lists.

    Usage: lexisift [input_file] [config_file]
    """
    if argv is None:
        argv = sys.argv

    try:
        config = Config(argv[2] if len(argv) > 2 else None)
    except ConfigError as e:
        print(e, file=sys.stderr)
        return EXIT_FATAL

    path = select_source(argv)
    st = time.time()
    try:
        aggregator = Aggregator().feed(read_lines(path, config.encoding))
    except LexiSiftRuntimeError as e:
        logger.error(str(e))
        return EXIT_FATAL

    st2 = time.time()
    logger.info("Analyzed %d lines using %.3f seconds", aggregator.lines, st2 - st)

    failures = write_outputs(build_outputs(aggregator, config))
    if failures:
        logger.warning(
            "%d of %d output files could not be written.",
            len(failures),
            len(config.enabled_outputs()),
        )
        return EXIT_DEGRADED

    logger.info("All output files written successfully.")
    return EXIT_OK

"""Script for counting word frequencies in a text file, optionally with a capped vocabulary.

Once the vocabulary cap is reached, words that have not been seen before are dropped, while words
already in the vocabulary keep being counted.

Example invocation:
    python ./linkbag/cli/count.py \
        input_file=[TEXT_FILE_PATH] \
        max_distinct_words=1000 \
        num_top_words=20 \
        output_file=counts.yml
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from omegaconf import MISSING, OmegaConf
from tqdm import tqdm

from linkbag.interface.bag import natural_compare
from linkbag.interface.exceptions import BagFull
from linkbag.linked_bag import LinkedBag
from linkbag.utils.config import get_config, get_error_message_for_invalid_value

logger = logging.getLogger(__file__)

WORD_PATTERN = re.compile(r"\w+")


@dataclass
class CountConfig:
    input_file: str = MISSING  # Text file to count words in
    output_file: Optional[str] = None  # Where to save the report (as yaml); not saved if `None`

    max_distinct_words: Optional[int] = None  # Vocabulary cap; no cap if `None`
    ignore_case: bool = True  # Treat words differing only in case as one (first spelling is kept)
    num_top_words: int = 10  # Number of most frequent words to report

    show_progress: bool = True  # Whether to show a progress bar over input lines


def compare_ignoring_case(a: str, b: str) -> int:
    return natural_compare(a.casefold(), b.casefold())


def top_words(words: LinkedBag[str], num_words: int) -> List[Dict[str, Any]]:
    """Return the `num_words` most frequent words; ties are broken by first appearance."""
    ranked = sorted(words.items(), key=lambda item: -item[1])
    return [{"word": word, "count": count} for word, count in ranked[:num_words]]


def run_from_config(config: CountConfig) -> Dict[str, Any]:
    print("Counting words with the following config:")
    print(OmegaConf.to_yaml(config))

    if config.num_top_words < 1:
        raise ValueError(
            get_error_message_for_invalid_value(
                "num_top_words", config.num_top_words, "a positive integer"
            )
        )

    input_path = Path(config.input_file)
    if not input_path.exists():
        raise ValueError(f"Input file {input_path} does not exist")

    words: LinkedBag[str] = LinkedBag(
        max_size=config.max_distinct_words,
        compare=compare_ignoring_case if config.ignore_case else None,
    )

    num_tokens = 0
    num_dropped_tokens = 0
    with open(input_path, "rt") as f_input:
        for line in tqdm(f_input, disable=not config.show_progress):
            for word in WORD_PATTERN.findall(line):
                num_tokens += 1
                try:
                    words.add(word)
                except BagFull:
                    num_dropped_tokens += 1

    if num_dropped_tokens > 0:
        logger.warning(
            f"Vocabulary cap of {config.max_distinct_words} reached; "
            f"dropped {num_dropped_tokens} out of {num_tokens} tokens"
        )

    report = {
        "num_tokens": num_tokens,
        "num_distinct_words": words.size(),
        "num_dropped_tokens": num_dropped_tokens,
        "top_words": top_words(words, config.num_top_words),
    }

    if config.output_file is not None:
        with open(config.output_file, "wt") as f_output:
            yaml.safe_dump(report, f_output, sort_keys=False)
        logger.info(f"Report saved to {config.output_file}")

    return report


def main(argv: Optional[List[str]] = None) -> Dict[str, Any]:
    config: CountConfig = get_config(argv=argv, config_cls=CountConfig)
    return run_from_config(config)


if __name__ == "__main__":
    main()

"""Script computing order statistics over a sliding window of numbers.

The input file holds one number per line (blank lines are ignored). For every full window of
`window_size` consecutive numbers, one tab-separated line with the requested statistics is
written, in the order given in `statistics`.

Example invocation:
    python ./ordered_multiset/cli/sliding_window.py \
        input_file=[INPUT_FILE_PATH] \
        window_size=5 \
        statistics=[median,max]
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, Iterable, Iterator, List, Optional, TextIO, Union

from omegaconf import MISSING
from tqdm import tqdm

from ordered_multiset.analysis.order_statistics import SlidingWindowExtrema, SlidingWindowMedian
from ordered_multiset.utils.config import get_config as cli_get_config

logger = logging.getLogger(__name__)

Number = Union[int, float]

SUPPORTED_STATISTICS = ["min", "max", "median"]


@dataclass
class SlidingWindowConfig:
    input_file: str = MISSING  # One number per line
    output_file: Optional[str] = None  # Where to write results (stdout if not set)

    window_size: int = 3
    statistics: List[str] = field(default_factory=lambda: list(SUPPORTED_STATISTICS))

    show_progress: bool = True  # Whether to display a progress bar


def parse_number(text: str) -> Number:
    try:
        return int(text)
    except ValueError:
        return float(text)


def read_numbers(path: Union[str, Path]) -> List[Number]:
    numbers: List[Number] = []
    with open(path, "rt") as f_input:
        for line_idx, line in enumerate(f_input, start=1):
            line = line.strip()
            if not line:
                continue

            try:
                numbers.append(parse_number(line))
            except ValueError as e:
                raise ValueError(f"Line {line_idx} of {path} is not a number: {line!r}") from e
    return numbers


def iter_window_statistics(
    values: Iterable[Number], window_size: int, statistics: Sequence[str]
) -> Iterator[List[Number]]:
    """
    Yields the requested statistics for every full window, in the order given.

    The values are walked once, and only the trackers needed for `statistics` are kept up to
    date (a single multiset for min/max, two for the median).
    """
    extrema = SlidingWindowExtrema(window_size) if {"min", "max"} & set(statistics) else None
    medians = SlidingWindowMedian(window_size) if "median" in statistics else None

    getters: Dict[str, Callable[[], Optional[Number]]] = {}
    if extrema is not None:
        getters["min"] = extrema.min
        getters["max"] = extrema.max
    if medians is not None:
        getters["median"] = medians.median
    row_getters = [getters[name] for name in statistics]

    num_seen = 0
    for value in values:
        if extrema is not None:
            extrema.push(value)
        if medians is not None:
            medians.push(value)

        num_seen += 1
        if num_seen >= window_size:
            yield [get() for get in row_getters]  # type: ignore[misc]


def _write_rows(
    f_output: TextIO, rows: Iterator[List[Number]], num_rows: int, show_progress: bool
) -> int:
    num_written = 0
    for row in tqdm(rows, total=num_rows, disable=not show_progress):
        f_output.write("\t".join(str(value) for value in row) + "\n")
        num_written += 1
    return num_written


def run_from_config(config: SlidingWindowConfig) -> int:
    """Runs the computation described by `config` and returns the number of windows written."""
    if config.window_size < 1:
        raise ValueError(f"window_size should be positive, got {config.window_size}")

    statistics = list(config.statistics)
    supported = ", ".join(SUPPORTED_STATISTICS)
    if not statistics:
        raise ValueError(f"statistics should list at least one of: {supported}")

    unsupported = [name for name in statistics if name not in SUPPORTED_STATISTICS]
    if unsupported:
        raise ValueError(f"Statistics {unsupported} not supported; choose from: {supported}")

    values = read_numbers(config.input_file)
    logger.info(f"Read {len(values)} numbers from {config.input_file}")

    num_windows = max(0, len(values) - config.window_size + 1)
    if num_windows == 0:
        logger.warning(
            f"Input has fewer numbers than window_size={config.window_size}; nothing to output"
        )

    rows = iter_window_statistics(values, config.window_size, statistics)
    if config.output_file is None:
        num_written = _write_rows(sys.stdout, rows, num_windows, config.show_progress)
    else:
        with open(config.output_file, "wt") as f_output:
            num_written = _write_rows(f_output, rows, num_windows, config.show_progress)
        logger.info(f"Results saved to {config.output_file}")

    logger.info(f"Wrote statistics for {num_written} windows")
    return num_written


def main(argv: Optional[List[str]] = None) -> None:
    config: SlidingWindowConfig = cli_get_config(argv=argv, config_cls=SlidingWindowConfig)
    run_from_config(config)


if __name__ == "__main__":
    main()

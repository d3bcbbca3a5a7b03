"""Command that runs cache test scripts described by a JSON configuration."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Mapping, Optional

from .cache_manager import CacheManager
from .nodes import Record
from .reporting import Reporter

CONFIG_FILE = "milestone5_config.json"

Report = Callable[[str], None]


@dataclass(frozen=True)
class Config:
    """Settings read from the configuration file."""

    input_file: str
    output_file: str
    error_log_file: str
    hash_table_size: int
    fifo_list_size: int


def load_config(path: str) -> Config:
    """Read the configuration file at ``path``."""
    with open(path, encoding="utf-8") as handle:
        data = json.load(handle)
    section = data["Milestone5"][0]
    files = section["files"][0]
    variables = section["defaultVariables"][0]
    return Config(
        input_file=files["inputFile"],
        output_file=files["outputFile"],
        error_log_file=files["errorLogFile"],
        hash_table_size=int(variables["hashTableSize"]),
        fifo_list_size=int(variables["FIFOListSize"]),
    )


def process_test_case(
    cache: CacheManager,
    name: str,
    actions: Iterable[Mapping[str, Any]],
    report: Report,
) -> None:
    """Apply each action of a test case to ``cache``, reporting the results."""
    report(f"\nProcessing {name}:\n\n")
    for entry in actions:
        for action, details in entry.items():
            if action == "isEmpty":
                report(f"isEmpty: {int(cache.is_empty())}")
            elif action == "contains":
                key = int(details["key"])
                report(f"contains({key}): {int(key in cache)}")
            elif action == "getSize":
                report(f"getSize: {len(cache)}")
            elif action == "add":
                key = int(details["key"])
                record = Record(
                    key,
                    details["fullName"],
                    details["address"],
                    details["city"],
                    details["state"],
                    details["zip"],
                )
                cache.add(key, record)
                report(f"add key to cacheManager: {key}")
            elif action == "remove":
                key = int(details["key"])
                cache.remove(key)
                report(f"remove key: {key} from cacheManager")
            elif action == "clear":
                cache.clear()
                report("clear cacheManager: ")
            elif action == "printInOrder":
                ascending = details["ascending"] == "true"
                report("sort ascending cacheManager" if ascending else "sort descending cacheManager")
                cache.sort(ascending)
            elif action == "printRange":
                low = int(details["low"])
                high = int(details["high"])
                report(f"printRange with low: {low} and high: {high}")
                cache.print_range(low, high)


def run(config_path: str = CONFIG_FILE) -> int:
    """Run every test case named by the configuration; return an exit status."""
    try:
        config = load_config(config_path)
    except OSError:
        print("Error opening config file!", file=sys.stderr)
        return 1

    reporter = Reporter()
    cache = CacheManager(config.fifo_list_size, config.hash_table_size, reporter.log)

    try:
        with open(config.input_file, encoding="utf-8") as handle:
            data = json.load(handle)
    except OSError:
        print(f"Failed to open the file: {config.input_file}.", file=sys.stderr)
        return 1

    try:
        reporter.open(config.output_file)
    except OSError:
        print(f"Failed to open file: {config.output_file}", file=sys.stderr)

    with reporter:
        for test_case in data.get("cacheManager", []):
            for name, actions in test_case.items():
                process_test_case(cache, name, actions, reporter.log)
                cache.print_cache()
                cache.sort(True)
                cache.sort(False)
                cache.clear()

    reporter.log("\n\nEnd of unit tests")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="Run cache test scripts.")
    parser.add_argument("config", nargs="?", default=CONFIG_FILE, help="configuration file")
    args = parser.parse_args(argv)
    return run(args.config)


if __name__ == "__main__":
    raise SystemExit(main())
from __future__ import annotations

import argparse
import logging
import traceback
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Tuple

import numpy as np
import pandas as pd

from ch06.collections import Group
from ch06.geometry import Vector2D

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


SECTIONS = ("group", "vector")

Check = Tuple[str, Callable[[], Any], Any]


@dataclass(frozen=True)
class DemoConfig:
    """Which demonstration sections to evaluate."""

    sections: Tuple[str, ...] = SECTIONS

    def __post_init__(self) -> None:
        if not self.sections:
            raise ValueError("At least one section is required.")
        unknown = [s for s in self.sections if s not in SECTIONS]
        if unknown:
            raise ValueError(f"Unknown section(s): {unknown!r}. Choose from {SECTIONS!r}.")


def _matches(actual: Any, expected: Any) -> bool:
    if isinstance(expected, float):
        return isinstance(actual, (int, float)) and bool(np.isclose(actual, expected))
    return type(actual) is type(expected) and actual == expected


def _evaluate(section: str, checks: List[Check]) -> List[Dict]:
    rows: List[Dict] = []
    for expression, thunk, expected in checks:
        try:
            actual = thunk()
        except Exception as exc:
            logger.error(f"  ✗ {expression} raised {exc!r}")
            logger.error(traceback.format_exc())
            actual = None
            ok = False
        else:
            ok = _matches(actual, expected)
        rows.append(
            {
                "section": section,
                "expression": expression,
                "expected": repr(expected),
                "actual": repr(actual),
                "ok": ok,
            }
        )
    return rows


def run_group_demo() -> List[Dict]:
    """Evaluate the Group demonstrations."""
    group = Group.from_iterable([10, 20])

    def add_then_delete() -> Group:
        group.add(10)
        group.delete(10)
        return group

    checks: List[Check] = [
        ("Group.from_iterable([10, 20]).has(10)", lambda: group.has(10), True),
        ("Group.from_iterable([10, 20]).has(30)", lambda: group.has(30), False),
        ("group.add(10); group.delete(10); group.has(10)", lambda: add_then_delete().has(10), False),
        ("group.has(20)", lambda: group.has(20), True),
    ]
    return _evaluate("group", checks)


def run_vector_demo() -> List[Dict]:
    """Evaluate the Vector2D demonstrations."""
    checks: List[Check] = [
        ("Vector2D(1, 2).plus(Vector2D(2, 3))", lambda: Vector2D(1, 2).plus(Vector2D(2, 3)), Vector2D(3, 5)),
        ("Vector2D(1, 2).minus(Vector2D(2, 3))", lambda: Vector2D(1, 2).minus(Vector2D(2, 3)), Vector2D(-1, -1)),
        ("Vector2D(3, 4).length()", lambda: Vector2D(3, 4).length(), 5.0),
    ]
    return _evaluate("vector", checks)


_RUNNERS: Dict[str, Callable[[], List[Dict]]] = {
    "group": run_group_demo,
    "vector": run_vector_demo,
}


def run_demos(
    config: DemoConfig | None = None,
    output: Path | None = None,
    verbose: bool = False,
) -> pd.DataFrame:
    """Run the demonstration sections and collect their results.

    Args:
        config: Sections to run (defaults to all)
        output: Optional CSV path for the result table
        verbose: If True, enable DEBUG logging

    Returns:
        DataFrame with one row per evaluated expression
    """
    if config is None:
        config = DemoConfig()
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    rows: List[Dict] = []
    for section in config.sections:
        logger.info(f"Running {section} demo")
        section_rows = _RUNNERS[section]()
        for row in section_rows:
            mark = "✓" if row["ok"] else "✗"
            logger.info(f"  {mark} {row['expression']} -> {row['actual']}")
            logger.debug(f"    expected {row['expected']}")
        rows.extend(section_rows)

    df = pd.DataFrame(rows, columns=["section", "expression", "expected", "actual", "ok"])

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(output, index=False)
        logger.info(f"Saved {len(df)} results to {output}")

    failed = int((~df["ok"]).sum())
    logger.info("=" * 60)
    logger.info(f"Demo summary: {len(df) - failed} passed, {failed} failed")
    logger.info("=" * 60)
    return df


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the chapter 6 demonstrations.")
    parser.add_argument(
        "--section",
        action="append",
        choices=SECTIONS,
        help="Section to run (repeatable). Defaults to all sections.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Optional CSV file where the result table will be written.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (DEBUG) logging.",
    )

    args = parser.parse_args(argv)
    config = DemoConfig(sections=tuple(args.section)) if args.section else DemoConfig()
    df = run_demos(config, output=args.output, verbose=args.verbose)
    return 0 if bool(df["ok"].all()) else 1


if __name__ == "__main__":
    raise SystemExit(main())

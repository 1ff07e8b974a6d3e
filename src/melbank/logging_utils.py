"""Logging setup and JSONL records of filter edges."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Mapping

from .spectral.planner import FilterEdges, triangle_heights


def configure_logging(level: str) -> None:
    """Configure logging format and level for CLI commands."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(message)s",
    )


class JsonlLogger:
    """Append JSON-serializable records to a JSON Lines file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def write(self, record: Mapping[str, Any]) -> None:
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(dict(record), ensure_ascii=False) + "\n")


def edge_records(edges: FilterEdges) -> list[dict[str, float | int]]:
    """One dictionary per filter with its edges and peak height."""
    heights = triangle_heights(edges)
    return [
        {
            "filter": idx,
            "lower_hz": float(edges.lower[idx]),
            "center_hz": float(edges.center[idx]),
            "upper_hz": float(edges.upper[idx]),
            "height": float(heights[idx]),
        }
        for idx in range(len(edges))
    ]


def log_records_jsonl(path: str | Path, records: Iterable[Mapping[str, Any]]) -> int:
    """Append ``records`` to a JSONL file and return how many were written."""
    logger = JsonlLogger(path)
    count = 0
    for record in records:
        logger.write(record)
        count += 1
    return count

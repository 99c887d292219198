"""Data loading and parsing utilities."""

import json
import logging
from pathlib import Path
from typing import Dict, List, Any, Optional

from tabu_routing.models import Load, Point

logger = logging.getLogger("vrp.utils")

HEADER_PREFIX = "loadNumber"


def save_json(data: Dict[str, Any], filepath: str | Path) -> None:
    """Save data to a JSON file, creating parent directories."""
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def parse_coordinates(text: str) -> Point:
    """
    Parse a ``(x,y)`` coordinate pair.

    Raises:
        ValueError: If the text is not two comma separated numbers
    """
    parts = text.strip().strip("()").split(",")
    if len(parts) != 2:
        raise ValueError(f"Invalid coordinates: {text!r}")
    return float(parts[0]), float(parts[1])


def parse_load_line(line: str, line_number: Optional[int] = None) -> Load:
    """
    Parse one ``id (x,y) (x,y)`` record.

    Raises:
        ValueError: If the record is malformed
    """
    where = f" on line {line_number}" if line_number is not None else ""
    parts = line.split()
    if len(parts) != 3:
        raise ValueError(f"Expected 'id pickup dropoff'{where}, got {line.strip()!r}")

    try:
        return Load(
            load_id=int(parts[0]),
            pickup=parse_coordinates(parts[1]),
            dropoff=parse_coordinates(parts[2]),
        )
    except ValueError as e:
        raise ValueError(f"Invalid load record{where}: {e}") from e


def load_loads(filepath: str | Path) -> List[Load]:
    """
    Read loads from a whitespace separated text file.

    A header line starting with ``loadNumber`` and blank lines are skipped.

    Args:
        filepath: Path to the load file

    Returns:
        Loads in file order

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If a record is malformed
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"File not found: {filepath}")

    loads = []
    with open(filepath, "r", encoding="utf-8") as f:
        for line_number, line in enumerate(f, start=1):
            if not line.strip() or line.startswith(HEADER_PREFIX):
                continue
            loads.append(parse_load_line(line, line_number))

    logger.debug(f"Parsed {len(loads)} loads from {filepath}")
    return loads

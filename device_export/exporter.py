"""
Write filtered records to a two-column delimited file.

Values are written verbatim: a name or price holding a comma or a newline is
not quoted and will break the row.
"""

import json
from typing import Any, Iterable, Sequence

import structlog

from .errors import WriteFailed
from .records import MISSING, Record

logger = structlog.get_logger(__name__)

DEFAULT_HEADER = ("Name", "Price")
NOT_AVAILABLE = "N/A"


def format_value(value: Any) -> str:
    """Render an attribute value as cell text."""
    if value is MISSING or value is None:
        return NOT_AVAILABLE
    # bool before int, bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, str):
        return value
    if isinstance(value, (list, dict)):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return str(value)


def export_csv(records: Iterable[Record], destination: str, header: Sequence[str] = DEFAULT_HEADER) -> int:
    """Create or truncate ``destination`` and write the header plus one line per record.

    Returns:
        Number of data rows written.

    Raises:
        WriteFailed: the file could not be opened or written.
    """
    rows = 0
    try:
        with open(destination, "w", encoding="utf-8") as f:
            f.write(",".join(header) + "\n")
            for record in records:
                f.write(f"{record.name or ''},{format_value(record.price)}\n")
                rows += 1
    except OSError as e:
        logger.error("export_failed", destination=str(destination), error=str(e))
        raise WriteFailed(str(destination), e.strerror or str(e)) from e

    logger.info("export_completed", destination=str(destination), rows=rows)
    return rows

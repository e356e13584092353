from typing import Iterable, List

import structlog

from .records import Record

logger = structlog.get_logger(__name__)


def filter_by_name(records: Iterable[Record], substring: str) -> List[Record]:
    """Keep records whose name contains ``substring`` (case-sensitive), in input order.

    Records without a name never match.
    """
    matched = [record for record in records if record.name is not None and substring in record.name]
    logger.info("records_filtered", substring=substring, matched=len(matched))
    return matched

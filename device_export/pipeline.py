"""
Fetch -> parse -> filter -> export, run strictly in sequence.
"""

import time
from dataclasses import dataclass

import structlog

from .config import PipelineConfig
from .exporter import export_csv
from .fetcher import HTTPFetcher
from .filters import filter_by_name
from .records import parse_records

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    fetched: int
    matched: int
    destination: str
    elapsed: float


class ExportPipeline:
    """Runs one export. Any stage failure propagates and stops the run."""

    def __init__(self, config: PipelineConfig, fetcher: HTTPFetcher = None):
        self.config = config
        self.fetcher = fetcher or HTTPFetcher(timeout=config.timeout, user_agent=config.user_agent)

    async def run(self) -> PipelineResult:
        start_time = time.time()
        logger.info(
            "pipeline_started",
            api_url=self.config.api_url,
            brand=self.config.brand,
            output_file=self.config.output_file,
        )

        response = await self.fetcher.fetch(self.config.api_url)
        records = parse_records(response.text)
        matched = filter_by_name(records, self.config.brand)
        export_csv(matched, self.config.output_file, header=self.config.header)

        result = PipelineResult(
            fetched=len(records),
            matched=len(matched),
            destination=self.config.output_file,
            elapsed=time.time() - start_time,
        )
        logger.info(
            "pipeline_completed",
            fetched=result.fetched,
            matched=result.matched,
            destination=result.destination,
            elapsed=round(result.elapsed, 3),
        )
        return result

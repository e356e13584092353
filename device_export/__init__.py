"""
Fetch product records from an HTTP API, keep one brand, export them as CSV.
"""

from .errors import ExportError, FetchFailed, ParseFailed, WriteFailed, ConfigError
from .records import Record, parse_records
from .filters import filter_by_name
from .exporter import export_csv, format_value
from .fetcher import HTTPFetcher, FetchResult
from .config import Config, PipelineConfig
from .pipeline import ExportPipeline, PipelineResult

__all__ = [
    "ExportError",
    "FetchFailed",
    "ParseFailed",
    "WriteFailed",
    "ConfigError",
    "Record",
    "parse_records",
    "filter_by_name",
    "export_csv",
    "format_value",
    "HTTPFetcher",
    "FetchResult",
    "Config",
    "PipelineConfig",
    "ExportPipeline",
    "PipelineResult",
]

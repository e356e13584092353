"""
Entrypoint: load .env and config.yaml, set up logging, run one export.
"""

import argparse
import asyncio
import sys

import structlog
from dotenv import find_dotenv, load_dotenv

from .config import Config
from .errors import ExportError
from .logs import configure_logging
from .pipeline import ExportPipeline

logger = structlog.get_logger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="device-export",
        description="Export the products of one brand from an HTTP API to a CSV file.",
    )
    parser.add_argument("--config", help="Path to a YAML configuration file")
    parser.add_argument("--url", help="API endpoint returning a JSON array of products")
    parser.add_argument("--output", help="Destination CSV file (overwritten)")
    parser.add_argument("--brand", help="Case-sensitive substring a product name must contain")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Run the export and return the process exit status."""
    args = parse_args(argv)
    load_dotenv(find_dotenv(usecwd=True))

    try:
        settings = Config(args.config).to_pipeline_config(
            api_url=args.url,
            output_file=args.output,
            brand=args.brand,
        )
    except ExportError as e:
        configure_logging()
        logger.error("config_error", error=str(e))
        return 1

    configure_logging(settings.log_level)

    try:
        asyncio.run(ExportPipeline(settings).run())
    except ExportError as e:
        logger.error("export_aborted", error=str(e), error_type=type(e).__name__)
        return 1
    except KeyboardInterrupt:
        logger.info("export_interrupted")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

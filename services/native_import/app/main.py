"""Command-line entry point for importing native XML authors."""

import argparse
import asyncio
import json
import sys
from pathlib import Path

from services.native_import.app.config import Settings, get_settings
from services.native_import.app.core.errors import NativeImportError
from services.native_import.app.runner import import_authors
from shared.utils.db import close_db, init_db
from shared.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the author import command."""
    parser = argparse.ArgumentParser(
        description="Import <author> elements from a native XML file into a submission.",
    )
    parser.add_argument("xml_file", type=Path, help="Native XML file with <authors> or <author>")
    parser.add_argument("submission_id", type=int, help="Submission receiving the authors")
    parser.add_argument("--import-id", default=None, help="Correlation ID for the import logs")
    return parser


async def run(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    """Run one import and print the result as JSON.

    Returns:
        Process exit code: 0 on success (even with recorded errors), 1 on failure
    """
    args = build_parser().parse_args(argv)
    settings = settings or get_settings()

    configure_logging(
        service_name=settings.service_name,
        log_level=settings.log_level,
        json_format=settings.log_json,
    )
    init_db(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        echo=settings.db_echo,
    )

    try:
        result = await import_authors(
            args.xml_file.read_bytes(),
            args.submission_id,
            settings=settings,
            import_id=args.import_id,
        )
    except NativeImportError as e:
        logger.error("author_import_failed", error=str(e), xml_file=str(args.xml_file))
        return 1
    finally:
        await close_db()

    print(
        json.dumps(
            {
                "import_id": result.import_id,
                "authors": [author.model_dump() for author in result.authors],
                "errors": [issue.model_dump(mode="json") for issue in result.errors],
            },
            ensure_ascii=False,
            indent=2,
        )
    )
    return 0


def main() -> None:
    """Console script entry point."""
    sys.exit(asyncio.run(run()))


if __name__ == "__main__":
    main()

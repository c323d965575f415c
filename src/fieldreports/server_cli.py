"""CLI entry point for the field reports API server."""

import argparse
import os


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="fieldreports-server",
        description="Field reports API server: submission, archive export and live updates",
    )
    parser.add_argument("--host", help="Bind host (default: FIELDREPORTS_HOST or 0.0.0.0)")
    parser.add_argument("--port", type=int, help="Bind port (default: FIELDREPORTS_PORT or 3000)")
    parser.add_argument(
        "--database-url",
        help="SQLAlchemy async URL (default: sqlite+aiosqlite:///reports.db)",
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Console log output instead of JSON",
    )
    args = parser.parse_args(argv)

    # Must be set before fieldreports.config is first imported
    if args.database_url:
        os.environ["FIELDREPORTS_DATABASE_URL"] = args.database_url
    if args.dev:
        os.environ["FIELDREPORTS_JSON_LOGS"] = "0"

    import uvicorn

    from fieldreports.config import settings

    uvicorn.run(
        "fieldreports.main:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()

"""
CLI entry point.

Usage:
    # Serve the application
    python -m faultbridge serve --port 8000

    # List severity codes and labels
    python -m faultbridge levels
"""

import argparse
import logging
from typing import Optional, Sequence

from faultbridge.domain.reporting.entities import SEVERITY_LABELS

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the FastAPI application under uvicorn."""
    import uvicorn

    logger.info("Starting application at http://%s:%d", args.host, args.port)
    uvicorn.run("faultbridge.main:app", host=args.host, port=args.port, reload=False)


def cmd_levels(_args: argparse.Namespace) -> None:
    """Print every severity code with its label."""
    for code, label in SEVERITY_LABELS.items():
        print(f"{int(code):>6}  {label}")


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="faultbridge error reporting service")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Serve the API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)
    serve_parser.set_defaults(func=cmd_serve)

    levels_parser = subparsers.add_parser("levels", help="List severity levels")
    levels_parser.set_defaults(func=cmd_levels)

    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()

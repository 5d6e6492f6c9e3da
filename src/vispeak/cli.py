"""CLI entrypoint for vispeak."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from vispeak.config import load_config
from vispeak.core import build_pipeline, run_normalization
from vispeak.io import to_chunk_lines, to_json, write_chunks, write_json
from vispeak.logging_setup import configure_logging
from vispeak.models import NormalizeRequest


def build_parser() -> argparse.ArgumentParser:
    """Create the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="vispeak",
        description="Vietnamese text normalization and chunking for speech synthesis.",
    )
    subparsers = parser.add_subparsers(dest="command")

    normalize = subparsers.add_parser("normalize", help="Normalize and chunk text")
    normalize.add_argument(
        "text",
        help="Input text, a path to a UTF-8 text file, or '-' to read stdin",
    )
    normalize.add_argument(
        "--no-transliteration",
        action="store_true",
        help="Skip rule-based transliteration of foreign words",
    )
    normalize.add_argument(
        "--debug",
        action="store_true",
        help="Include per-stage before/after traces in the output",
    )
    normalize.add_argument(
        "--chunks-only",
        action="store_true",
        help="Print one chunk per line instead of JSON",
    )
    normalize.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output path (JSON, or chunk lines with --chunks-only). If omitted, prints to stdout.",
    )

    serve = subparsers.add_parser("serve", help="Run the vispeak HTTP API")
    serve.add_argument("--host", default=None, help="Override API host")
    serve.add_argument("--port", type=int, default=None, help="Override API port")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    config = load_config()
    configure_logging(config.log_level, config.log_format)

    if args.command == "normalize":
        request = NormalizeRequest(
            text=_read_text_argument(args.text),
            enable_transliteration=False if args.no_transliteration else None,
            debug=True if args.debug else None,
        )
        response = run_normalization(request, build_pipeline(config))
        if args.chunks_only:
            if args.output:
                path = write_chunks(response, args.output)
                print(f"Wrote {len(response.chunks)} chunks to {path}")
            else:
                sys.stdout.write(to_chunk_lines(response))
            return 0
        if args.output:
            path = write_json(response, args.output)
            print(f"Wrote normalization JSON to {path}")
            return 0
        print(to_json(response))
        return 0

    if args.command == "serve":
        try:
            import uvicorn
        except ModuleNotFoundError:
            print(
                "`vispeak serve` requires uvicorn. Install project dependencies first.",
                file=sys.stderr,
            )
            return 1

        host = args.host or config.api_host
        port = args.port or config.api_port
        uvicorn.run(
            "vispeak.api:app",
            host=host,
            port=port,
            workers=config.workers,
            reload=False,
        )
        return 0

    parser.error(f"Unknown command: {args.command}")
    return 2


def _read_text_argument(value: str) -> str:
    if value == "-":
        return sys.stdin.read()
    path = Path(value)
    try:
        if path.is_file():
            return path.read_text(encoding="utf-8")
    except OSError:
        # Arguments too long to be a path are plain text.
        return value
    return value


if __name__ == "__main__":
    raise SystemExit(main())

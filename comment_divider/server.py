"""Comment divider HTTP server.

Run:
  python -m comment_divider.server --port 18181
"""

from __future__ import annotations

import argparse
import sys

import uvicorn


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="comment_divider.server", add_help=True)
    parser.add_argument("--host", default="127.0.0.1", help="Bind host (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=18181, help="Bind port (default: 18181)")
    parser.add_argument("--log-level", default="info", help="uvicorn log level (default: info)")

    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    uvicorn.run("comment_divider.api:app", host=args.host, port=args.port, log_level=args.log_level)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

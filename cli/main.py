#!/usr/bin/env python3
"""
Todo Lists CLI

Commands:

1) serve
   - Run the web server (uvicorn) for runtime.api.server:app.

2) show-config
   - Print the effective configuration (the session secret is masked).

Equivalent to starting the server by hand with:

    uvicorn runtime.api.server:app --reload
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Ensure project root is on sys.path when running as a script
ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from configs.settings import DEFAULT_SESSION_SECRET, settings


APP_PATH = "runtime.api.server:app"


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s:%(name)s: %(message)s",
    )


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start uvicorn against the FastAPI app."""
    import uvicorn

    _configure_logging(log_level)
    print(f"[TODO] Serving {APP_PATH} on http://{host}:{port}")
    uvicorn.run(APP_PATH, host=host, port=port, reload=reload, log_level=log_level.lower())


def cmd_show_config() -> None:
    secret = "<default>" if settings.session_secret == DEFAULT_SESSION_SECRET else "<set>"
    print(f"[TODO] session_secret:  {secret}")
    print(f"[TODO] session_cookie:  {settings.session_cookie}")
    print(f"[TODO] session_max_age: {settings.session_max_age}")
    print(f"[TODO] templates_dir:   {settings.templates_dir}")
    print(f"[TODO] host:            {settings.host}")
    print(f"[TODO] port:            {settings.port}")
    print(f"[TODO] log_level:       {settings.log_level}")


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Todo Lists CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # serve
    p_serve = subparsers.add_parser("serve", help="Run the web server")
    p_serve.add_argument(
        "--host",
        default=settings.host,
        help="Interface to bind (default: TODO_HOST or 127.0.0.1)",
    )
    p_serve.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help="Port to bind (default: TODO_PORT or 8000)",
    )
    p_serve.add_argument(
        "--reload",
        action="store_true",
        help="Restart the server when source files change",
    )
    p_serve.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Logging level (default: TODO_LOG_LEVEL or INFO)",
    )

    # show-config
    subparsers.add_parser("show-config", help="Print the effective configuration")

    return parser


def main(argv=None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    command: str = args.command

    if command == "serve":
        cmd_serve(
            host=args.host,
            port=args.port,
            reload=args.reload,
            log_level=args.log_level.upper(),
        )
    elif command == "show-config":
        cmd_show_config()
    else:
        parser.error(f"Unknown command: {command}")


if __name__ == "__main__":
    main()

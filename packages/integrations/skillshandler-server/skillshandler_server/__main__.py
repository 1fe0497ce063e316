"""Run a skills server from a config file.

Usage::

    python -m skillshandler_server --config server.yaml
    python -m skillshandler_server --config server.json --host 0.0.0.0 --port 8080

The config file is a JSON or YAML document conforming to
:class:`~skillshandler_server.config.ServerConfig`.

Example ``server.yaml``::

    cors: "*"
    providers:
      - type: fs
        options:
          root: ./skills
      - type: http
        options:
          base_url: https://cdn.example.com/.well-known/skills
          headers:
            Authorization: Bearer ${API_TOKEN}

String values may contain ``${VAR}`` placeholders that are resolved
from environment variables at load time.  This lets you keep secrets
out of the config file.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import uvicorn


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments, load config, and start the server."""
    parser = argparse.ArgumentParser(
        prog="skillshandler_server",
        description="Serve Agent Skills over well-known URIs from a config file.",
    )
    parser.add_argument(
        "--config",
        required=True,
        type=Path,
        help="Path to a JSON or YAML configuration file.",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Bind address (default: 127.0.0.1).")
    parser.add_argument("--port", default=8000, type=int, help="Bind port (default: 8000).")
    parser.add_argument(
        "--log-level",
        default="info",
        choices=["debug", "info", "warning", "error"],
        help="Logging level (default: info).",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # ------------------------------------------------------------------
    # Load config file
    # ------------------------------------------------------------------
    config_path: Path = args.config
    if not config_path.exists():
        print(f"Error: config file not found: {config_path}", file=sys.stderr)
        sys.exit(1)

    from skillshandler_server.config import load_config
    from skillshandler_server.server import create_app

    config = load_config(config_path)

    # ------------------------------------------------------------------
    # Build and run
    # ------------------------------------------------------------------
    app = create_app(config)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level)


if __name__ == "__main__":
    main()

"""Run the HTTP service with uvicorn.

Usage:
    python -m fourbar.cli.serve --port 3000

Host and port default to the configuration (FOURBAR_CONFIG, PORT).
"""

from __future__ import annotations

import argparse
import sys


def main(argv: list[str] | None = None) -> int:
    """Start the service.

    Args:
        argv: Command-line arguments (uses sys.argv if None).

    Returns:
        Exit code (0 = clean shutdown).
    """
    parser = argparse.ArgumentParser(description="Serve the four-bar linkage API")
    parser.add_argument("--host", type=str, default=None, help="Bind address")
    parser.add_argument("--port", type=int, default=None, help="Bind port")
    parser.add_argument("--config", type=str, default=None, help="YAML config file")
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARN", "ERROR"],
        help="Structured log level",
    )

    args = parser.parse_args(argv)

    import uvicorn

    from ..core.config import config_from_env, load_config, merge_config
    from ..core.logging import get_logger
    from ..service.app import create_app

    config = load_config(args.config) if args.config else config_from_env()

    overrides: dict = {}
    if args.host is not None:
        overrides.setdefault("service", {})["host"] = args.host
    if args.port is not None:
        overrides.setdefault("service", {})["port"] = args.port
    if args.log_level is not None:
        overrides["logging"] = {"level": args.log_level}
    if overrides:
        config = merge_config(config, overrides)

    app = create_app(config)
    get_logger(__name__).info(
        "Server starting", host=config.service.host, port=config.service.port
    )
    uvicorn.run(app, host=config.service.host, port=config.service.port)

    return 0


if __name__ == "__main__":
    sys.exit(main())

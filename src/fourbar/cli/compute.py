"""Single linkage computation CLI.

Usage:
    python -m fourbar.cli.compute --a 1 --b 2 --c 2 --d 2 --theta2 90

Outputs the same JSON the HTTP service returns to stdout.
"""

from __future__ import annotations

import argparse
import json
import sys


def main(argv: list[str] | None = None) -> int:
    """Run a single linkage computation.

    Args:
        argv: Command-line arguments (uses sys.argv if None).

    Returns:
        Exit code (0 = success, 2 = invalid or degenerate linkage).
    """
    parser = argparse.ArgumentParser(description="Solve a four-bar linkage at one input angle")
    parser.add_argument("--a", type=float, required=True, help="Input link length")
    parser.add_argument("--b", type=float, required=True, help="Coupler length")
    parser.add_argument("--c", type=float, required=True, help="Output link length")
    parser.add_argument("--d", type=float, required=True, help="Ground link length")
    parser.add_argument("--theta2", type=float, required=True, help="Input angle (deg)")
    parser.add_argument("--debug", action="store_true", help="Include closure diagnostics")
    parser.add_argument("--config", type=str, default=None, help="YAML config file")

    args = parser.parse_args(argv)

    from ..core.config import default_config, load_config
    from ..core.errors import FourBarError
    from ..core.evaluator import compute_linkage
    from ..core.logging import set_log_level

    config = load_config(args.config) if args.config else default_config()
    set_log_level(config.logging.level)

    try:
        result = compute_linkage(args.a, args.b, args.c, args.d, args.theta2, config=config)
    except FourBarError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    output = result.to_response(include_diagnostics=args.debug)
    if args.debug:
        output["timings"] = result.diag.get("timings", {})

    print(json.dumps(output, indent=2))

    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Command-Line Interface
======================
Runs the legend tools demo from a terminal.

Usage:
    $ python -m legtools demo --output legend.png
    $ python -m legtools demo --show --log-level DEBUG
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

import matplotlib

from legtools.config import APP_VERSION
from legtools.logging_config import setup_logging

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="legtools")
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    sub = parser.add_subparsers(dest="command", required=True)

    demo = sub.add_parser("demo", help="Edit a cos/sin legend with every legend tool.")
    demo.add_argument("--output", type=Path, default=Path("legtools_demo.png"))
    demo.add_argument("--show", action="store_true", help="Open an interactive window instead of saving.")
    demo.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default="INFO")
    demo.add_argument("--log-file", type=Path, default=None)
    args = parser.parse_args(argv)

    setup_logging(
        level=args.log_level,
        log_file=str(args.log_file) if args.log_file else None
    )

    if args.command == "demo":
        if not args.show:
            matplotlib.use("Agg")

        import matplotlib.pyplot as plt
        from legtools.demo import build_demo

        fig, _ = build_demo()
        if args.show:
            plt.show()
        else:
            fig.savefig(args.output)
            logger.info(f"Demo figure saved to: {args.output}")
        plt.close(fig)

    return 0

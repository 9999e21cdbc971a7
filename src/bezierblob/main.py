"""
Application Initialization
==========================
This module parses the command line, builds the session and starts the Qt
Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Sets up logging.
2. Validates the configuration and instantiates the Session (Model).
3. Instantiates the Main Window (View), passing the session in.
4. Prevents circular import errors by being the orchestrator.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from bezierblob.config import (
    BlobConfig,
    InvalidConfigurationError,
    DEFAULT_BASE_RADIUS,
    DEFAULT_MAX_SWEEP,
    DEFAULT_POINT_COUNT,
    VISIBLE_APP_NAME,
)
from bezierblob.logging_config import parse_level, setup_logging
from bezierblob.model.math_utils import degrees_to_radians, radians_to_degrees

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="bezierblob",
        description="Interactive blob made of cubic Bezier curves. "
                    "Keys: Space = points/handles, A = animate, F = fill, R = rotate.",
    )
    ap.add_argument("--points", type=int, default=DEFAULT_POINT_COUNT, help="Number of anchor points (>= 3)")
    ap.add_argument("--radius", type=float, default=DEFAULT_BASE_RADIUS, help="Base radius in pixels")
    ap.add_argument(
        "--max-sweep",
        type=float,
        default=radians_to_degrees(DEFAULT_MAX_SWEEP),
        help="Maximum control point sweep in degrees",
    )
    ap.add_argument("--seed", type=int, default=None, help="Random seed for reproducible motion")
    ap.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, ...)")
    ap.add_argument("--log-file", default=None, help="Optional log file path")
    return ap


def config_from_args(args: argparse.Namespace) -> BlobConfig:
    """Build and validate the configuration from parsed arguments."""
    return BlobConfig(
        point_count=args.points,
        base_radius=args.radius,
        max_sweep=degrees_to_radians(args.max_sweep),
        seed=args.seed,
    ).validate()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    try:
        level = parse_level(args.log_level)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    setup_logging(level=level, log_file=args.log_file)

    # 2. Validate configuration before any window exists
    try:
        config = config_from_args(args)
    except InvalidConfigurationError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    # Qt is imported late so --help and config errors work without a display
    from PySide6.QtWidgets import QApplication

    from bezierblob.model.state import BlobSession
    from bezierblob.view.main_window import MainWindow

    # 3. Create the Qt Application
    app = QApplication.instance() or QApplication(sys.argv[:1])
    app.setApplicationName(VISIBLE_APP_NAME)

    # 4. Initialize the Session
    session = BlobSession.create(config)

    # 5. Initialize the Main Window, passing the session
    window = MainWindow(session)
    window.show()

    # 6. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())

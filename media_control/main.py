"""Entry: run one media command against the active MPRIS player."""
import argparse
import logging
import sys
from typing import Optional, Sequence

from media_control.config import LOG_LEVEL
from media_control.core.notifier import DesktopNotifier
from media_control.core.player_registry import MprisRegistry
from media_control.core.selection_store import SelectionStore
from media_control.core.session import ControlSession
from media_control.errors import MediaControlError
from media_control.models.command import COMMAND_NAMES, parse_command

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="media-control",
        description="Control the active media player and confirm with a desktop notification.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        metavar="COMMAND",
        help="one of: " + ", ".join(COMMAND_NAMES),
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s: %(name)s: %(message)s")
    args = build_parser().parse_args(argv)
    try:
        command = parse_command(args.command)
        session = ControlSession(MprisRegistry(), DesktopNotifier(), SelectionStore())
        session.run(command)
    except MediaControlError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

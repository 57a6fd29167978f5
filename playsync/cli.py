"""Command line entry point.

Usage:
    playsync            # verify/restore archives pinned in the lockfile
    playsync upgrade    # pin the latest libraries and rewrite the lockfile
"""

import argparse
import asyncio
import sys
from typing import List, Optional

from playsync.core.config import Settings, settings as default_settings
from playsync.core.exceptions import PlaySyncException
from playsync.core.logging import logger
from playsync.sync.factory import SyncFactory


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="playsync", description="Sync vendored Play Services archives"
    )
    parser.add_argument(
        "mode",
        nargs="?",
        default="ci",
        help="'upgrade' to pin the latest libraries; anything else replays the lockfile",
    )
    return parser


async def run(mode: str, config: Optional[Settings] = None):
    """Run one sync in the given mode with a fresh HTTP client."""
    config = config or default_settings
    async with SyncFactory.create_http_client(config) as client:
        orchestrator = SyncFactory.create_orchestrator(client, config)
        return await orchestrator.run(mode)


def main(argv: Optional[List[str]] = None) -> int:
    """CLI main. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    try:
        asyncio.run(run(args.mode))
    except (PlaySyncException, OSError) as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

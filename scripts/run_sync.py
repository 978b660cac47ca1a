"""Run tokensync ingestion commands.

Usage:
    PYTHONPATH=src python scripts/run_sync.py init-cursor 600000
    PYTHONPATH=src python scripts/run_sync.py sync [--to-block N]
    PYTHONPATH=src python scripts/run_sync.py reset
"""

import argparse
import asyncio
import json
import logging

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)-5s %(name)s - %(message)s")
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


async def main(args: argparse.Namespace) -> dict:
    from tokensync.container import Container
    from tokensync.workers.sync import run_init_cursor, run_reset, run_sync, shutdown

    container = Container()
    try:
        if args.command == "init-cursor":
            return await run_init_cursor(container, args.block)
        if args.command == "reset":
            return await run_reset(container)
        return await run_sync(container, to_block=args.to_block)
    finally:
        await shutdown(container)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    sub = parser.add_subparsers(dest="command", required=True)

    sync = sub.add_parser("sync", help="ingest blocks after the sync cursor")
    sync.add_argument("--to-block", type=int, default=None, help="last block to ingest (default: chain tip)")

    init = sub.add_parser("init-cursor", help="seed the cursor; ingestion starts at BLOCK + 1")
    init.add_argument("block", type=int)

    sub.add_parser("reset", help="delete all indexed state and clear the cursor")
    return parser.parse_args()


if __name__ == "__main__":
    result = asyncio.run(main(parse_args()))
    print(json.dumps(result))

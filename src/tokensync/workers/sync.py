"""Entry points that run one ingestion command against a wired container."""

import logging

from tokensync.container import Container
from tokensync.exceptions import TokenSyncError
from tokensync.sync.indexer import initialize_cursor, reset_state

logger = logging.getLogger(__name__)


async def run_sync(container: Container, to_block: int | None = None) -> dict:
    """Ingest blocks after the cursor. Errors are reported, never retried here.

    A failed run leaves the cursor on the last committed block; running again
    resumes from there.
    """
    indexer = container.indexer()
    try:
        count = await indexer.sync(to_block=to_block)
    except TokenSyncError as e:
        logger.error("Sync stopped: %s", e)
        return {"status": "error", "message": str(e)}

    return {"status": "ok", "blocks": count, "last_synced_block": await indexer.last_synced_block()}


async def run_init_cursor(container: Container, block_number: int) -> dict:
    await initialize_cursor(container.session_factory(), block_number)
    return {"status": "ok", "last_synced_block": block_number}


async def run_reset(container: Container) -> dict:
    await reset_state(container.session_factory())
    return {"status": "ok"}


async def shutdown(container: Container) -> None:
    await container.http_client().close()
    await container.engine().dispose()

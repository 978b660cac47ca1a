from sqlalchemy.ext.asyncio import AsyncSession

from tokensync.db.repos.sync_state_repo import SyncStateRepo
from tokensync.exceptions import SyncNotInitializedError


class SyncCursor:
    """Last fully ingested block, written in the same session as the block's state.

    `advance` does not enforce monotonicity; the indexer always passes the next block.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._repo = SyncStateRepo(session)

    async def read(self) -> int:
        block_number = await self._repo.read_last_synced_block()
        if block_number is None:
            raise SyncNotInitializedError()
        return block_number

    async def advance(self, block_number: int) -> None:
        await self._repo.write_last_synced_block(block_number)

    async def initialize(self, block_number: int) -> None:
        """Seed the cursor so ingestion starts at `block_number + 1`."""
        await self._repo.write_last_synced_block(block_number)

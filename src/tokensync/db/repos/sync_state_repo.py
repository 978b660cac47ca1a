from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from tokensync.db.models.sync_state import SYNC_STATE_ID, SyncState


class SyncStateRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def read_last_synced_block(self) -> Optional[int]:
        row = await self._session.get(SyncState, SYNC_STATE_ID)
        return row.last_synced_block if row is not None else None

    async def write_last_synced_block(self, block_number: int) -> None:
        row = await self._session.get(SyncState, SYNC_STATE_ID)
        if row is None:
            self._session.add(SyncState(id=SYNC_STATE_ID, last_synced_block=block_number))
        else:
            row.last_synced_block = block_number
        await self._session.flush()

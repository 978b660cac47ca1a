from typing import Optional

from sqlalchemy import BigInteger, Integer
from sqlalchemy.orm import Mapped, mapped_column

from tokensync.db.session import Base

SYNC_STATE_ID = 1


class SyncState(Base):
    """Single-row table holding the ingestion cursor."""

    __tablename__ = "sync_data"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, default=SYNC_STATE_ID)
    last_synced_block: Mapped[Optional[int]] = mapped_column(BigInteger, default=None)

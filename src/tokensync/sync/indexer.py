"""BlockIndexer — decode → reconcile → checkpoint, one unit of work per block."""

import logging

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from tokensync.db.repos.metadata_repo import MetadataRepo
from tokensync.events.contract_classifier import ContractClassifier
from tokensync.events.decoder import decode_transfer
from tokensync.events.signatures import classify_event
from tokensync.events.types import LedgerBlock
from tokensync.exceptions import PersistenceError, SyncError
from tokensync.infra.blockchain.base import LedgerClient
from tokensync.sync.cursor import SyncCursor
from tokensync.sync.reconciler import StateReconciler

logger = logging.getLogger(__name__)


class BlockSummary(BaseModel):
    block_number: int
    applied: int = 0
    skipped: int = 0


class BlockIndexer:
    """Single-writer ingestion loop.

    Each block's state mutations and cursor advance share one transaction, so
    after a crash the cursor always names the last block whose state is persisted.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        ledger: LedgerClient,
        verify_previous_owner: bool = False,
        classifier: ContractClassifier | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._ledger = ledger
        self.verify_previous_owner = verify_previous_owner
        self.classifier = classifier or ContractClassifier(ledger)

    async def last_synced_block(self) -> int:
        async with self._session_factory() as session:
            return await SyncCursor(session).read()

    async def sync(self, to_block: int | None = None) -> int:
        """Ingest every block after the cursor up to `to_block` (default: chain tip).

        Stops at the first failing block, leaving the cursor on the block before it.
        Returns the number of blocks committed.
        """
        start = await self.last_synced_block() + 1
        tip = to_block if to_block is not None else await self._ledger.get_block_number()
        if start > tip:
            logger.info("Already synced to block %d (target %d)", start - 1, tip)
            return 0

        for block_number in range(start, tip + 1):
            block = await self._ledger.get_block(block_number)
            if block.block_number != block_number:
                raise SyncError(f"Ledger returned block {block.block_number} when asked for {block_number}")
            await self.process_block(block)

        logger.info("Synced blocks %d..%d", start, tip)
        return tip - start + 1

    async def process_block(self, block: LedgerBlock) -> BlockSummary:
        try:
            async with self._session_factory.begin() as session:
                summary = await self._apply_block(session, block)
        except SQLAlchemyError as e:
            logger.exception("Block %d aborted: persistence failure", block.block_number)
            raise PersistenceError(f"Unit of work for block {block.block_number} failed: {e}") from e
        except Exception:
            logger.exception("Block %d aborted, rolled back", block.block_number)
            raise

        logger.info(
            "Committed block %d: %d transfers applied, %d events skipped",
            summary.block_number, summary.applied, summary.skipped,
        )
        return summary

    async def _apply_block(self, session: AsyncSession, block: LedgerBlock) -> BlockSummary:
        reconciler = StateReconciler(session, verify_previous_owner=self.verify_previous_owner)
        summary = BlockSummary(block_number=block.block_number)

        for event in block.iter_events():
            kind = classify_event(event.keys)
            if kind is None:
                summary.skipped += 1
                continue
            if not await self.classifier.is_match(kind, event.from_address, block.block_number):
                logger.debug("Skipping %s from non-conforming contract %s", kind.value, event.from_address)
                summary.skipped += 1
                continue

            record = decode_transfer(event, kind)
            await reconciler.apply(record)
            summary.applied += 1

        await SyncCursor(session).advance(block.block_number)
        return summary


async def initialize_cursor(session_factory: async_sessionmaker[AsyncSession], block_number: int) -> None:
    async with session_factory.begin() as session:
        await SyncCursor(session).initialize(block_number)
    logger.info("Sync cursor seeded at block %d", block_number)


async def reset_state(session_factory: async_sessionmaker[AsyncSession]) -> None:
    """Delete all ownership, balance and metadata rows and clear the cursor."""
    async with session_factory.begin() as session:
        await MetadataRepo(session).delete_all_domain_rows()
    logger.info("Deleted all indexed state")

from unittest.mock import AsyncMock

import pytest
from dependency_injector import providers
from tenacity import wait_none

from tokensync.config import Settings
from tokensync.container import Container
from tokensync.events.signatures import TRANSFER_SINGLE_KEY
from tokensync.events.types import LedgerBlock, RawEvent, Receipt
from tokensync.exceptions import ExternalServiceError
from tokensync.infra.blockchain.base import LedgerClient
from tokensync.infra.blockchain.starknet.rpc_client import StarknetRPCClient
from tokensync.sync.cursor import SyncCursor
from tokensync.workers.sync import run_init_cursor, run_reset, run_sync


def _mint(block: int, to_addr: int, amount: int) -> LedgerBlock:
    event = RawEvent(
        from_address="0x1155", block_number=block, keys=[TRANSFER_SINGLE_KEY],
        data=[0, to_addr, 1, 0, amount, 0],
    )
    return LedgerBlock(block_number=block, receipts=[Receipt(transaction_hash="0xt", events=[event])])


@pytest.fixture()
def ledger():
    mock = AsyncMock(spec=LedgerClient)
    mock.get_block_number.return_value = 11
    mock.get_block.side_effect = lambda n: _mint(n, 0xA, 1)
    return mock


@pytest.fixture()
def container(session_factory, ledger):
    c = Container()
    c.session_factory.override(providers.Object(session_factory))
    c.ledger.override(providers.Object(ledger))
    yield c
    c.reset_override()


class TestWorkers:
    async def test_init_then_sync(self, container, session_factory):
        assert await run_init_cursor(container, 9) == {"status": "ok", "last_synced_block": 9}

        result = await run_sync(container)

        assert result == {"status": "ok", "blocks": 2, "last_synced_block": 11}

    async def test_sync_without_cursor_reports_error(self, container):
        result = await run_sync(container)

        assert result["status"] == "error"
        assert "not initialized" in result["message"]

    async def test_sync_failure_reports_error_and_keeps_cursor(self, container, ledger, session_factory):
        await run_init_cursor(container, 9)
        ledger.get_block.side_effect = lambda n: LedgerBlock(
            block_number=n,
            receipts=[Receipt(transaction_hash="0xt", events=[RawEvent(
                from_address="0x1155", block_number=n, keys=[TRANSFER_SINGLE_KEY], data=[0xB, 0xA, 1, 0, 5, 0],
            )])],
        )

        result = await run_sync(container)

        assert result["status"] == "error"
        async with session_factory() as session:
            assert await SyncCursor(session).read() == 9

    async def test_reset(self, container):
        await run_init_cursor(container, 9)
        await run_sync(container, to_block=10)

        assert await run_reset(container) == {"status": "ok"}
        result = await run_sync(container)
        assert result["status"] == "error"

    async def test_strict_ownership_setting_reaches_indexer(self, container):
        container.settings.override(providers.Object(Settings(strict_ownership=True)))
        indexer = container.indexer()
        assert indexer.verify_previous_owner is True

    async def test_exhausted_rpc_retries_report_error(self, container, monkeypatch):
        monkeypatch.setattr(StarknetRPCClient._call.retry, "wait", wait_none())
        http = AsyncMock()
        http.post.side_effect = ExternalServiceError("HTTP 503")
        container.ledger.override(providers.Object(StarknetRPCClient(rpc_url="https://rpc.example", http_client=http)))
        await run_init_cursor(container, 9)

        result = await run_sync(container)

        assert result == {"status": "error", "message": "HTTP 503"}
        assert http.post.await_count == 5

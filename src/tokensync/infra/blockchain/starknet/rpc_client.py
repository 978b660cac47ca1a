"""Starknet JSON-RPC client — blocks with receipts and contract classes."""

import json
import logging
from typing import Any

from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from tokensync.events.types import LedgerBlock, RawEvent, Receipt
from tokensync.exceptions import ExternalServiceError, LedgerRPCError
from tokensync.infra.blockchain.base import LedgerClient
from tokensync.infra.http.rate_limited_client import RateLimitedClient

logger = logging.getLogger(__name__)


class StarknetRPCClient(LedgerClient):
    """Minimal Starknet JSON-RPC client (RPC v0.7+) for block ingestion."""

    def __init__(self, rpc_url: str, http_client: RateLimitedClient) -> None:
        self._rpc_url = rpc_url
        self._http = http_client
        self._request_id = 0

    @retry(
        retry=retry_if_exception_type(ExternalServiceError),
        stop=stop_after_attempt(5),
        wait=wait_exponential(multiplier=2, min=3, max=30),
        reraise=True,
    )
    async def _call(self, method: str, params: dict | list) -> Any:
        """Execute a JSON-RPC call and return the result field."""
        self._request_id += 1
        payload = {
            "jsonrpc": "2.0",
            "id": self._request_id,
            "method": method,
            "params": params,
        }
        resp = await self._http.post(self._rpc_url, json=payload)
        try:
            data = resp.json()
        except ValueError as e:
            raise ExternalServiceError(f"Starknet RPC returned non-JSON body ({method})") from e

        if "error" in data:
            error = data["error"]
            raise LedgerRPCError(method, error.get("code"), error.get("message", str(error)))

        return data.get("result")

    async def get_block_number(self) -> int:
        result = await self._call("starknet_blockNumber", [])
        return int(result)

    async def get_block(self, block_number: int) -> LedgerBlock:
        result = await self._call(
            "starknet_getBlockWithReceipts",
            {"block_id": {"block_number": block_number}},
        )
        block = parse_block(result, block_number)
        logger.debug("Fetched block %d with %d receipts", block.block_number, len(block.receipts))
        return block

    async def get_contract_interface(self, address: str, block_number: int) -> list[dict]:
        """Fetch the contract class and return its ABI.

        Legacy (Cairo 0) classes carry the ABI as a list; Sierra classes as a JSON string.
        """
        result = await self._call(
            "starknet_getClassAt",
            {"block_id": {"block_number": block_number}, "contract_address": address},
        )
        abi = (result or {}).get("abi") or []
        if isinstance(abi, str):
            abi = json.loads(abi)
        return abi


def parse_block(result: dict, block_number: int) -> LedgerBlock:
    """Build a LedgerBlock from a `starknet_getBlockWithReceipts` result."""
    number = result.get("block_number", block_number)
    receipts: list[Receipt] = []
    for item in result.get("transactions", []):
        receipt = item.get("receipt", {})
        tx_hash = receipt.get("transaction_hash") or item.get("transaction", {}).get("transaction_hash", "")
        events = [
            RawEvent(
                from_address=ev["from_address"],
                block_number=number,
                keys=ev.get("keys", []),
                data=ev.get("data", []),
                transaction_hash=tx_hash,
            )
            for ev in receipt.get("events", [])
        ]
        receipts.append(Receipt(
            transaction_hash=tx_hash,
            execution_status=receipt.get("execution_status", "SUCCEEDED"),
            events=events,
        ))
    return LedgerBlock(block_number=number, block_hash=result.get("block_hash"), receipts=receipts)

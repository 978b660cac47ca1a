"""Decode raw event data words into typed transfer records."""

from typing import assert_never

from tokensync.domain.enums import TransferKind
from tokensync.events.types import (
    BalanceTransfer,
    BatchBalanceTransfer,
    OwnershipTransfer,
    RawEvent,
    TransferRecord,
    to_hex,
)
from tokensync.events.uint256 import Uint256, assemble_uint256
from tokensync.exceptions import DecodeError

ERC721_TRANSFER_WIDTH = 4  # from, to, id_low, id_high
ERC1155_SINGLE_WIDTH = 6  # from, to, id_low, id_high, amount_low, amount_high
BATCH_HEADER_WIDTH = 4  # operator, from, to, ids_len


def decode_transfer(event: RawEvent, kind: TransferKind) -> TransferRecord:
    if kind is TransferKind.ERC721_TRANSFER:
        return decode_erc721_transfer(event)
    if kind is TransferKind.ERC1155_TRANSFER_SINGLE:
        return decode_erc1155_single(event)
    if kind is TransferKind.ERC1155_TRANSFER_BATCH:
        return decode_erc1155_batch(event)
    assert_never(kind)


def decode_erc721_transfer(event: RawEvent) -> OwnershipTransfer:
    data = event.data
    _expect_width(event, ERC721_TRANSFER_WIDTH)
    return OwnershipTransfer(
        contract=event.from_address,
        token_id=assemble_uint256(data[2], data[3]),
        from_address=to_hex(data[0]),
        to_address=to_hex(data[1]),
        block_number=event.block_number,
    )


def decode_erc1155_single(event: RawEvent) -> BalanceTransfer:
    data = event.data
    _expect_width(event, ERC1155_SINGLE_WIDTH)
    return BalanceTransfer(
        contract=event.from_address,
        token_id=assemble_uint256(data[2], data[3]),
        from_address=to_hex(data[0]),
        to_address=to_hex(data[1]),
        amount=assemble_uint256(data[4], data[5]),
        block_number=event.block_number,
    )


def decode_erc1155_batch(event: RawEvent) -> BatchBalanceTransfer:
    """Decode `TransferBatch`, whose data carries two length-prefixed u256 arrays.

    Layout::

        [0]                 operator (ignored)
        [1]                 from
        [2]                 to
        [3]                 ids_len = L
        [4 .. 4+2L)         L x (id_low, id_high)
        [4+2L]              values_len, must equal L
        [4+2L+1 .. 4+4L+1)  L x (amount_low, amount_high)

    The i-th id is paired with the i-th amount.
    """
    data = event.data
    if len(data) < BATCH_HEADER_WIDTH:
        raise DecodeError(
            f"TransferBatch from {event.from_address} has {len(data)} data words, "
            f"need at least {BATCH_HEADER_WIDTH}"
        )

    ids_len = data[3]
    values_len_index = BATCH_HEADER_WIDTH + 2 * ids_len
    expected = values_len_index + 1 + 2 * ids_len
    if len(data) != expected:
        raise DecodeError(
            f"TransferBatch from {event.from_address} has {len(data)} data words, "
            f"expected {expected} for {ids_len} ids"
        )

    values_len = data[values_len_index]
    if values_len != ids_len:
        raise DecodeError(
            f"TransferBatch from {event.from_address} has {ids_len} ids but {values_len} values"
        )

    ids = _read_u256_array(data, BATCH_HEADER_WIDTH, ids_len)
    amounts = _read_u256_array(data, values_len_index + 1, ids_len)

    return BatchBalanceTransfer(
        contract=event.from_address,
        from_address=to_hex(data[1]),
        to_address=to_hex(data[2]),
        transfers=list(zip(ids, amounts)),
        block_number=event.block_number,
    )


def _read_u256_array(data: tuple[int, ...], offset: int, length: int) -> list[Uint256]:
    return [assemble_uint256(data[offset + 2 * i], data[offset + 2 * i + 1]) for i in range(length)]


def _expect_width(event: RawEvent, width: int) -> None:
    if len(event.data) != width:
        raise DecodeError(
            f"Event from {event.from_address} in block {event.block_number} has "
            f"{len(event.data)} data words, expected {width}"
        )

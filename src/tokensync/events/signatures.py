"""Event signature keys (starknet_keccak of the event name) and classification."""

from typing import Sequence

from tokensync.domain.enums import TransferKind

# Shared by ERC20 and ERC721; see ContractClassifier for disambiguation.
TRANSFER_KEY = 0x99CD8BDE557814842A3121E8DDFD433A539B8C9F14BF31EBF108D12E6196E9
TRANSFER_SINGLE_KEY = 0x182D859C0807BA9DB63BAF8B9D9FDBFEB885D820BE6E206B9DAB626D995C433
TRANSFER_BATCH_KEY = 0x2563683C757F3ABE19C4B7237E2285D8993417DDFFE0B54A19EB212EA574B08

EVENT_KINDS: dict[int, TransferKind] = {
    TRANSFER_KEY: TransferKind.ERC721_TRANSFER,
    TRANSFER_SINGLE_KEY: TransferKind.ERC1155_TRANSFER_SINGLE,
    TRANSFER_BATCH_KEY: TransferKind.ERC1155_TRANSFER_BATCH,
}


def classify_event(keys: Sequence[int]) -> TransferKind | None:
    """Match the first key against the known signatures. None = unrecognized."""
    if not keys:
        return None
    return EVENT_KINDS.get(keys[0])

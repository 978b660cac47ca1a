from tokensync.domain.enums.transfer_kind import TokenStandard, TransferKind

__all__ = [
    "TokenStandard",
    "TransferKind",
]

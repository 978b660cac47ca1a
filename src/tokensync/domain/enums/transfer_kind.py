from enum import Enum


class TransferKind(str, Enum):
    """Recognized transfer events, one per signature key."""

    ERC721_TRANSFER = "erc721_transfer"
    ERC1155_TRANSFER_SINGLE = "erc1155_transfer_single"
    ERC1155_TRANSFER_BATCH = "erc1155_transfer_batch"

    @property
    def standard(self) -> "TokenStandard":
        if self is TransferKind.ERC721_TRANSFER:
            return TokenStandard.ERC721
        return TokenStandard.ERC1155


class TokenStandard(str, Enum):
    """Token standard family a contract belongs to."""

    ERC721 = "ERC721"
    ERC1155 = "ERC1155"

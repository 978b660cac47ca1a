from tokensync.db.models.balance import Erc1155Balance
from tokensync.db.models.contract import ContractMetadata, TokenMetadata
from tokensync.db.models.ownership import Erc721Owner
from tokensync.db.models.sync_state import SyncState

__all__ = [
    "ContractMetadata",
    "Erc1155Balance",
    "Erc721Owner",
    "SyncState",
    "TokenMetadata",
]

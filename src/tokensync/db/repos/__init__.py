from tokensync.db.repos.balance_repo import BalanceRepo
from tokensync.db.repos.metadata_repo import MetadataRepo
from tokensync.db.repos.ownership_repo import OwnershipRepo
from tokensync.db.repos.sync_state_repo import SyncStateRepo

__all__ = ["BalanceRepo", "MetadataRepo", "OwnershipRepo", "SyncStateRepo"]

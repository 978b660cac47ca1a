"""Exception hierarchy for the ingestion pipeline."""


class TokenSyncError(Exception):
    """Base class for all tokensync errors."""


class DecodeError(TokenSyncError):
    """Event data words do not match the layout expected for the event kind."""


class StateError(TokenSyncError):
    """A decoded transfer cannot be applied to the persisted state."""


class NegativeBalanceError(StateError):
    def __init__(self, contract: str, token_id: int, owner: str, balance: int, amount: int) -> None:
        self.contract = contract
        self.token_id = token_id
        self.owner = owner
        self.balance = balance
        self.amount = amount
        super().__init__(
            f"Balance of {owner} for token {token_id} on {contract} would go negative "
            f"(balance={balance}, debit={amount})"
        )


class OwnershipMismatchError(StateError):
    def __init__(self, contract: str, token_id: int, expected: str, recorded: str) -> None:
        self.contract = contract
        self.token_id = token_id
        self.expected = expected
        self.recorded = recorded
        super().__init__(
            f"Token {token_id} on {contract} is owned by {recorded}, transfer claims {expected}"
        )


class SyncError(TokenSyncError):
    """Sync cursor is unusable."""


class SyncNotInitializedError(SyncError):
    def __init__(self) -> None:
        super().__init__("last_synced_block is not initialized; seed the cursor first")


class PersistenceError(TokenSyncError):
    """Commit or rollback of a unit of work failed in the underlying store."""


class ExternalServiceError(TokenSyncError):
    """Transport-level failure talking to an external service. Retriable."""


class LedgerRPCError(TokenSyncError):
    """The ledger node answered with a JSON-RPC error object. Not retried."""

    def __init__(self, method: str, code: int | None, message: str) -> None:
        self.method = method
        self.code = code
        super().__init__(f"Starknet RPC error ({method}): [{code}] {message}")

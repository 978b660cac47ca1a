from sqlalchemy import BigInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from tokensync.db.session import Base, TimestampMixin
from tokensync.db.types import Uint256Type


class ContractMetadata(TimestampMixin, Base):
    """A token contract seen emitting a recognized transfer."""

    __tablename__ = "contract_metadata"

    address: Mapped[str] = mapped_column(String(66), primary_key=True)
    standard: Mapped[str] = mapped_column(String(10))
    first_seen_block: Mapped[int] = mapped_column(BigInteger)


class TokenMetadata(TimestampMixin, Base):
    """A token id seen on a contract."""

    __tablename__ = "token_metadata"

    contract_address: Mapped[str] = mapped_column(String(66), primary_key=True)
    token_id: Mapped[int] = mapped_column(Uint256Type, primary_key=True)
    first_seen_block: Mapped[int] = mapped_column(BigInteger)

from sqlalchemy import BigInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from tokensync.db.session import Base, TimestampMixin
from tokensync.db.types import Uint256Type


class Erc721Owner(TimestampMixin, Base):
    """Current owner of an ERC721 token. One row per (contract, token_id)."""

    __tablename__ = "erc721_owners"

    contract_address: Mapped[str] = mapped_column(String(66), primary_key=True)
    token_id: Mapped[int] = mapped_column(Uint256Type, primary_key=True)
    owner: Mapped[str] = mapped_column(String(66), index=True)
    last_transfer_block: Mapped[int] = mapped_column(BigInteger)

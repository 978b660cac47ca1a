from sqlalchemy import BigInteger, CheckConstraint, String
from sqlalchemy.orm import Mapped, mapped_column

from tokensync.db.session import Base, TimestampMixin
from tokensync.db.types import Uint256Type


class Erc1155Balance(TimestampMixin, Base):
    """ERC1155 holding. A missing row is a zero balance; amount never goes negative."""

    __tablename__ = "erc1155_balances"
    __table_args__ = (CheckConstraint("amount >= 0", name="amount_non_negative"),)

    contract_address: Mapped[str] = mapped_column(String(66), primary_key=True)
    token_id: Mapped[int] = mapped_column(Uint256Type, primary_key=True)
    owner: Mapped[str] = mapped_column(String(66), primary_key=True)
    amount: Mapped[int] = mapped_column(Uint256Type, default=0)
    last_transfer_block: Mapped[int] = mapped_column(BigInteger)

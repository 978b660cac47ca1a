from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tokensync.db.models.balance import Erc1155Balance


class BalanceRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, contract: str, token_id: int, owner: str) -> Optional[Erc1155Balance]:
        result = await self._session.execute(
            select(Erc1155Balance).where(
                Erc1155Balance.contract_address == contract,
                Erc1155Balance.token_id == token_id,
                Erc1155Balance.owner == owner,
            )
        )
        return result.scalar_one_or_none()

    async def get_amount(self, contract: str, token_id: int, owner: str) -> int:
        row = await self.get(contract, token_id, owner)
        return row.amount if row is not None else 0

    async def set_amount(self, contract: str, token_id: int, owner: str, amount: int, block_number: int) -> None:
        row = await self.get(contract, token_id, owner)
        if row is None:
            self._session.add(Erc1155Balance(
                contract_address=contract,
                token_id=token_id,
                owner=owner,
                amount=amount,
                last_transfer_block=block_number,
            ))
        else:
            row.amount = amount
            row.last_transfer_block = block_number
        await self._session.flush()

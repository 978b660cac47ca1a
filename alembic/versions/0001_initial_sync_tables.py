"""initial sync tables

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "0001_initial"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        "contract_metadata",
        sa.Column("address", sa.String(66), nullable=False),
        sa.Column("standard", sa.String(10), nullable=False),
        sa.Column("first_seen_block", sa.BigInteger(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("address", name=op.f("pk_contract_metadata")),
    )

    op.create_table(
        "token_metadata",
        sa.Column("contract_address", sa.String(66), nullable=False),
        sa.Column("token_id", sa.Numeric(78, 0), nullable=False),
        sa.Column("first_seen_block", sa.BigInteger(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("contract_address", "token_id", name=op.f("pk_token_metadata")),
    )

    op.create_table(
        "erc721_owners",
        sa.Column("contract_address", sa.String(66), nullable=False),
        sa.Column("token_id", sa.Numeric(78, 0), nullable=False),
        sa.Column("owner", sa.String(66), nullable=False),
        sa.Column("last_transfer_block", sa.BigInteger(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("contract_address", "token_id", name=op.f("pk_erc721_owners")),
    )
    op.create_index(op.f("ix_erc721_owners_owner"), "erc721_owners", ["owner"])

    op.create_table(
        "erc1155_balances",
        sa.Column("contract_address", sa.String(66), nullable=False),
        sa.Column("token_id", sa.Numeric(78, 0), nullable=False),
        sa.Column("owner", sa.String(66), nullable=False),
        sa.Column("amount", sa.Numeric(78, 0), nullable=False),
        sa.Column("last_transfer_block", sa.BigInteger(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint("amount >= 0", name=op.f("ck_erc1155_balances_amount_non_negative")),
        sa.PrimaryKeyConstraint("contract_address", "token_id", "owner", name=op.f("pk_erc1155_balances")),
    )

    op.create_table(
        "sync_data",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("last_synced_block", sa.BigInteger(), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_sync_data")),
    )
    # Cursor row exists but stays NULL until seeded.
    op.execute("INSERT INTO sync_data (id, last_synced_block) VALUES (1, NULL)")


def downgrade() -> None:
    op.drop_table("sync_data")
    op.drop_table("erc1155_balances")
    op.drop_index(op.f("ix_erc721_owners_owner"), table_name="erc721_owners")
    op.drop_table("erc721_owners")
    op.drop_table("token_metadata")
    op.drop_table("contract_metadata")

"""create Suppliers table

Revision ID: 0001
Revises:
Create Date: 2026-10-19 00:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "Suppliers",
        sa.Column("Id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("Name", sa.String(200), nullable=False),
        sa.Column("Address", sa.String(500), nullable=True),
        sa.Column("TradeName", sa.String(200), nullable=True),
        sa.Column("TaxId", sa.String(50), nullable=True),
        sa.Column("PhoneNumber", sa.String(50), nullable=True),
        sa.Column("Email", sa.String(200), nullable=True),
        sa.Column("Website", sa.String(200), nullable=True),
        sa.Column("Country", sa.String(100), nullable=True),
        sa.Column("AnnualBillingUSD", sa.Numeric(18, 2), nullable=True),
        sa.Column("LastEdited", sa.DateTime(timezone=True), nullable=True),
        sa.Column("CreatedAt", sa.DateTime(timezone=True), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("Suppliers")

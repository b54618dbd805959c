"""Create stocks table

Revision ID: 0001
Revises:
Create Date: 2024-03-18 00:00:00.000000

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Create stocks table; ids are UUID text generated by the application
    op.create_table(
        "stocks",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("symbol", sa.String(), nullable=False),
        sa.Column("company_name", sa.String(), nullable=False),
        sa.Column("price", sa.Float(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_stocks_symbol", "stocks", ["symbol"])


def downgrade() -> None:
    op.drop_index("ix_stocks_symbol", table_name="stocks")
    op.drop_table("stocks")

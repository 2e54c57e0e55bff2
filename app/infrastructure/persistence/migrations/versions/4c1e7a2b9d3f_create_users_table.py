"""create_users_table

Revision ID: 4c1e7a2b9d3f
Revises:
Create Date: 2026-10-17 10:12:41.118204

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4c1e7a2b9d3f"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "Users",
        sa.Column("Id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("FirstName", sa.Unicode(), nullable=False),
        sa.Column("LastName", sa.Unicode(), nullable=False),
        sa.PrimaryKeyConstraint("Id", name="PK_Users"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("Users")

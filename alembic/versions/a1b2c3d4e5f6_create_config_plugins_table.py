"""Create config_plugins table

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""

from collections.abc import Sequence
from typing import Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "a1b2c3d4e5f6"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "config_plugins",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("plugin", sa.String(length=100), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("value", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("plugin", "name", name="uq_config_plugins_plugin_name"),
    )
    op.create_index(op.f("ix_config_plugins_id"), "config_plugins", ["id"], unique=False)
    op.create_index("idx_config_plugins_name", "config_plugins", ["name"], unique=False)


def downgrade() -> None:
    op.drop_index("idx_config_plugins_name", table_name="config_plugins")
    op.drop_index(op.f("ix_config_plugins_id"), table_name="config_plugins")
    op.drop_table("config_plugins")

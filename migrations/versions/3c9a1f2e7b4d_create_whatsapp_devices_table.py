"""create whatsapp devices table

Revision ID: 3c9a1f2e7b4d
Revises:
Create Date: 2026-10-17 00:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c9a1f2e7b4d"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "whatsapp_devices",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("jid", sa.String(length=128), nullable=True),
        sa.Column("push_name", sa.String(length=160), nullable=True),
        sa.Column("credentials", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_whatsapp_devices_jid", "whatsapp_devices", ["jid"], unique=True)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_whatsapp_devices_jid", table_name="whatsapp_devices")
    op.drop_table("whatsapp_devices")

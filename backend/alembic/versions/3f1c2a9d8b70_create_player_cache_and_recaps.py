"""create_player_cache_and_recaps

Revision ID: 3f1c2a9d8b70
Revises:
Create Date: 2026-10-18 21:40:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d8b70'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'player_cache',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('sport', sa.String(length=20), nullable=False),
        sa.Column('blob', sa.JSON(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_player_cache_sport', 'player_cache', ['sport'], unique=True)

    op.create_table(
        'recaps',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('league_id', sa.String(length=64), nullable=False),
        sa.Column('week', sa.Integer(), nullable=False),
        sa.Column('style', sa.Text(), nullable=False),
        sa.Column('text', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('league_id', 'week', name='uq_recap_league_week'),
    )
    op.create_index('ix_recaps_league_id', 'recaps', ['league_id'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_recaps_league_id', table_name='recaps')
    op.drop_table('recaps')
    op.drop_index('ix_player_cache_sport', table_name='player_cache')
    op.drop_table('player_cache')

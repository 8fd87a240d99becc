"""create_dictionary_items_table

Revision ID: 3f9a1c2b7d10
Revises:
Create Date: 2025-10-24 09:12:31.418204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9a1c2b7d10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Create dictionary_items table
    op.create_table('dictionary_items',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('vocabulary_id', sa.Integer(), nullable=False),
        sa.Column('language', sa.String(3), nullable=False),
        sa.Column('translation', sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint('id', name='dictionary_items_pkey'),
    )

    # Create indexes
    op.create_index('ix_dictionary_items_vocabulary_id', 'dictionary_items', ['vocabulary_id'])


def downgrade() -> None:
    """Downgrade schema."""
    # Drop indexes
    op.drop_index('ix_dictionary_items_vocabulary_id', table_name='dictionary_items')

    # Drop table
    op.drop_table('dictionary_items')

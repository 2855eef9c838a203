"""create dictionary and translation_cache tables

Revision ID: 20261019_initial
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20261019_initial'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table('dictionary',
    sa.Column('id', sa.String(length=64), nullable=False),
    sa.Column('term_ja', sa.Text(), nullable=False),
    sa.Column('reading', sa.Text(), nullable=True),
    sa.Column('term_en', sa.Text(), nullable=True),
    sa.Column('term_zh', sa.Text(), nullable=True),
    sa.Column('category', sa.String(length=50), nullable=True),
    sa.Column('subcategory', sa.String(length=50), nullable=True),
    sa.Column('priority', sa.Integer(), nullable=False, server_default='5'),
    sa.Column('type', sa.String(length=50), nullable=True),
    sa.Column('notes', sa.Text(), nullable=True),
    sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
    sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
    sa.PrimaryKeyConstraint('id', name=op.f('dictionary_pkey'))
    )
    op.create_index('ix_dictionary_priority', 'dictionary', ['priority'], unique=False)
    op.create_index('ix_dictionary_term_ja', 'dictionary', ['term_ja'], unique=False)

    op.create_table('translation_cache',
    sa.Column('key', sa.String(length=64), nullable=False),
    sa.Column('source_text', sa.Text(), nullable=False),
    sa.Column('source_lang', sa.String(length=8), nullable=False, server_default='ja'),
    sa.Column('target_lang', sa.String(length=8), nullable=False),
    sa.Column('translated_text', sa.Text(), nullable=False),
    sa.Column('method', sa.String(length=32), nullable=False),
    sa.Column('hit_count', sa.Integer(), nullable=False, server_default='0'),
    sa.Column('expires_at', sa.DateTime(timezone=True), nullable=False),
    sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    sa.Column('last_accessed_at', sa.DateTime(timezone=True), nullable=False),
    sa.PrimaryKeyConstraint('key', name=op.f('translation_cache_pkey'))
    )
    op.create_index('ix_translation_cache_expires_at', 'translation_cache', ['expires_at'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_translation_cache_expires_at', table_name='translation_cache')
    op.drop_table('translation_cache')
    op.drop_index('ix_dictionary_term_ja', table_name='dictionary')
    op.drop_index('ix_dictionary_priority', table_name='dictionary')
    op.drop_table('dictionary')

"""movies and movie_collections

Revision ID: 4c1e9a7d2b10
Revises:
Create Date: 2025-10-12 14:03:27.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '4c1e9a7d2b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'movies',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('movie_url', sa.Text(), nullable=False),
        sa.Column('image_url', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), server_default=sa.text("''"), nullable=False),
        sa.Column('rating', sa.Float(), server_default=sa.text('0'), nullable=False),
        sa.Column('genres', sa.Text(), server_default=sa.text("''"), nullable=False),
        sa.Column('director', sa.Text(), server_default=sa.text("''"), nullable=False),
        sa.Column('actors', sa.Text(), server_default=sa.text("''"), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_movies')),
    )
    op.create_index('ix_movies_created_at', 'movies', ['created_at'], unique=False)

    op.create_table(
        'movie_collections',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('url', sa.Text(), nullable=False),
        sa.Column('is_default', sa.Boolean(), server_default=sa.text('false'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_movie_collections')),
    )
    op.create_index('ix_movie_collections_default_created', 'movie_collections',
                    ['is_default', 'created_at'], unique=False)


def downgrade() -> None:
    op.drop_index('ix_movie_collections_default_created', table_name='movie_collections')
    op.drop_table('movie_collections')
    op.drop_index('ix_movies_created_at', table_name='movies')
    op.drop_table('movies')

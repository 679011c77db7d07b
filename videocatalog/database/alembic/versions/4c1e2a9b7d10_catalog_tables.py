"""catalog tables

Revision ID: 4c1e2a9b7d10
Revises:
Create Date: 2026-10-19 10:12:41.208311

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '4c1e2a9b7d10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SCHEMA = 'catalog'


def _service_object_columns():
    return [
        sa.Column('id', sa.UUID(), server_default=sa.text('gen_random_uuid()'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('clock_timestamp()'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('clock_timestamp()'), nullable=True),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    op.execute("CREATE EXTENSION IF NOT EXISTS pgcrypto;")

    op.create_table(
        'category',
        *_service_object_columns(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.String(length=255), nullable=True),
        sa.Column('is_active', sa.Boolean(), server_default=sa.text('true'), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_category')),
        schema=SCHEMA
    )
    op.create_index('uq_category_name_live', 'category', ['name'], unique=True, schema=SCHEMA,
                    postgresql_where=sa.text('deleted_at IS NULL'))

    op.create_table(
        'genre',
        *_service_object_columns(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('is_active', sa.Boolean(), server_default=sa.text('true'), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_genre')),
        schema=SCHEMA
    )
    op.create_index('uq_genre_name_live', 'genre', ['name'], unique=True, schema=SCHEMA,
                    postgresql_where=sa.text('deleted_at IS NULL'))

    op.create_table(
        'cast_member',
        *_service_object_columns(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('type', sa.SmallInteger(), nullable=False),
        sa.CheckConstraint('type IN (1, 2)', name=op.f('ck_cast_member_type_director_or_actor')),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_cast_member')),
        schema=SCHEMA
    )
    op.create_index('uq_cast_member_name_live', 'cast_member', ['name'], unique=True, schema=SCHEMA,
                    postgresql_where=sa.text('deleted_at IS NULL'))

    op.create_table(
        'video',
        *_service_object_columns(),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('year_launched', sa.Integer(), nullable=False),
        sa.Column('opened', sa.Boolean(), server_default=sa.text('false'), nullable=False),
        sa.Column('rating', sa.String(length=2), nullable=False),
        sa.Column('duration', sa.Integer(), nullable=False),
        sa.CheckConstraint("rating IN ('L', '10', '12', '14', '16', '18')", name=op.f('ck_video_rating_valid')),
        sa.CheckConstraint('duration > 0', name=op.f('ck_video_duration_positive')),
        sa.CheckConstraint('year_launched >= 1895', name=op.f('ck_video_year_launched_min')),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_video')),
        schema=SCHEMA
    )
    op.create_index('ix_video_title', 'video', ['title'], unique=False, schema=SCHEMA)


def downgrade() -> None:
    op.drop_index('ix_video_title', table_name='video', schema=SCHEMA)
    op.drop_table('video', schema=SCHEMA)
    op.drop_index('uq_cast_member_name_live', table_name='cast_member', schema=SCHEMA)
    op.drop_table('cast_member', schema=SCHEMA)
    op.drop_index('uq_genre_name_live', table_name='genre', schema=SCHEMA)
    op.drop_table('genre', schema=SCHEMA)
    op.drop_index('uq_category_name_live', table_name='category', schema=SCHEMA)
    op.drop_table('category', schema=SCHEMA)

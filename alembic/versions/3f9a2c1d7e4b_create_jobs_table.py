"""create_jobs_table

Creates the jobs table. clerk_id is the owner identity and is filtered on by
every query, so it gets an index.

Revision ID: 3f9a2c1d7e4b
Revises:
Create Date: 2026-01-04 10:12:41.118203

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9a2c1d7e4b'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create jobs table."""
    op.create_table(
        'jobs',
        sa.Column('id', sa.String(), primary_key=True, nullable=False),
        sa.Column('clerk_id', sa.String(), nullable=False),
        sa.Column('position', sa.String(), nullable=False),
        sa.Column('company', sa.String(), nullable=False),
        sa.Column('location', sa.String(), nullable=True),
        sa.Column('status', sa.String(), nullable=False, server_default='applied'),
        sa.Column('mode', sa.String(), nullable=False),
        sa.Column('applied_date', sa.Date(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index(op.f('ix_jobs_clerk_id'), 'jobs', ['clerk_id'], unique=False)
    op.create_index(op.f('ix_jobs_status'), 'jobs', ['status'], unique=False)


def downgrade() -> None:
    """Drop jobs table."""
    op.drop_index(op.f('ix_jobs_status'), table_name='jobs')
    op.drop_index(op.f('ix_jobs_clerk_id'), table_name='jobs')
    op.drop_table('jobs')

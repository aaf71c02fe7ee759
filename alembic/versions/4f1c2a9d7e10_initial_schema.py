"""initial_schema

Revision ID: 4f1c2a9d7e10
Revises:
Create Date: 2026-10-19 10:12:41.118305

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '4f1c2a9d7e10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', sa.String(255), primary_key=True),
        sa.Column('email', sa.String(255), nullable=True),
        sa.Column('first_name', sa.String(255), nullable=True),
        sa.Column('last_name', sa.String(255), nullable=True),
        sa.Column('profile_image_url', sa.String(1024), nullable=True),
        sa.Column('username', sa.String(30), nullable=True),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint('email', name='uq_users_email'),
        # NULL no choca con NULL: varios usuarios pueden no tener username
        sa.UniqueConstraint('username', name='uq_users_username'),
    )

    op.create_table(
        'projects',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.String(255), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('hackathon_name', sa.String(255), nullable=False),
        sa.Column('project_title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('achievement', sa.String(255), nullable=True),
        sa.Column('team_size', sa.Integer(), nullable=True),
        sa.Column('role', sa.String(255), nullable=True),
        sa.Column('demo_url', sa.String(1024), nullable=True),
        sa.Column('github_url', sa.String(1024), nullable=True),
        sa.Column('devpost_url', sa.String(1024), nullable=True),
        sa.Column('image_url', sa.String(1024), nullable=True),
        sa.Column(
            'technologies',
            sa.JSON().with_variant(postgresql.ARRAY(sa.Text()), 'postgresql'),
            nullable=False,
        ),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_projects_id', 'projects', ['id'])
    op.create_index('ix_projects_user_id', 'projects', ['user_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_projects_user_id', table_name='projects')
    op.drop_index('ix_projects_id', table_name='projects')
    op.drop_table('projects')
    op.drop_table('users')

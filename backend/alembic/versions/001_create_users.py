"""create users

Revision ID: 001_create_users
Create Date: 2025-11-02 09:00:00.000000
"""
import sqlalchemy as sa
from alembic import op

revision = '001_create_users'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('openId', sa.String(64), nullable=False, unique=True),
        sa.Column('name', sa.Text()),
        sa.Column('email', sa.String(320)),
        sa.Column('loginMethod', sa.String(64)),
        sa.Column('role', sa.Enum('user', 'admin', name='user_role'), nullable=False, server_default='user'),
        sa.Column('createdAt', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updatedAt', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('lastSignedIn', sa.DateTime(), nullable=False, server_default=sa.func.now())
    )


def downgrade() -> None:
    op.drop_table('users')
    sa.Enum(name='user_role').drop(op.get_bind(), checkfirst=True)

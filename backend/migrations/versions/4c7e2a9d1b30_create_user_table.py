"""create user table

Revision ID: 4c7e2a9d1b30
Revises:
Create Date: 2026-10-17 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '4c7e2a9d1b30'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)

    # Databases bootstrapped with `flask init-db` already have the table
    if 'user' in set(insp.get_table_names()):
        return

    op.create_table(
        'user',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('has_attempted', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('accumulated_reward', sa.Integer(), nullable=False, server_default='0'),
    )
    op.create_index('ix_user_name', 'user', ['name'], unique=True)


def downgrade():
    op.drop_index('ix_user_name', table_name='user')
    op.drop_table('user')

"""create expense tracker tables

Revision ID: 3f1d2a7c9b10
Revises:
Create Date: 2026-10-19 10:45:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1d2a7c9b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
    )

    op.create_table(
        'currencies',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('symbol', sa.String(), nullable=False),
        sa.UniqueConstraint('symbol', name='uq_currency_symbol'),
    )

    op.create_table(
        'pots',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('owner_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('default_currency_id', sa.Integer(), sa.ForeignKey('currencies.id'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('archived', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('archived_at', sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        'pots_to_users',
        sa.Column('pot_id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Uuid(), primary_key=True),
        sa.ForeignKeyConstraint(['pot_id'], ['pots.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
    )

    op.create_table(
        'expenses',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('pot_id', sa.Integer(), nullable=False),
        sa.Column('owner_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('description', sa.String(), nullable=False),
        sa.Column('currency_id', sa.Integer(), sa.ForeignKey('currencies.id'), nullable=False),
        sa.ForeignKeyConstraint(['pot_id'], ['pots.id'], ondelete='CASCADE'),
    )

    op.create_table(
        'expense_splits',
        sa.Column('expense_id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('users.id'), primary_key=True),
        sa.Column('amount', sa.Float(), nullable=False),
        sa.Column('is_paid', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.ForeignKeyConstraint(['expense_id'], ['expenses.id'], ondelete='CASCADE'),
    )

    op.create_table(
        'pot_templates',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('owner_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('default_currency_id', sa.Integer(), sa.ForeignKey('currencies.id'), nullable=False),
        sa.Column('occurrence', sa.String(length=7), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    op.create_table(
        'pot_template_users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('pot_template_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['pot_template_id'], ['pot_templates.id'], ondelete='CASCADE'),
    )

def downgrade() -> None:
    op.drop_table('pot_template_users')
    op.drop_table('pot_templates')
    op.drop_table('expense_splits')
    op.drop_table('expenses')
    op.drop_table('pots_to_users')
    op.drop_table('pots')
    op.drop_table('currencies')
    op.drop_table('users')

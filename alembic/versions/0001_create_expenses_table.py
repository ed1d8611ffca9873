"""Create expenses table

Revision ID: 0001_create_expenses_table
Revises: 
Create Date: 2026-10-19 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_create_expenses_table'
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table('expenses',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('payee', sa.String(), nullable=False),
        sa.Column('amount', sa.Float(), nullable=False),
        sa.Column('date', sa.String(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_expenses_date', 'expenses', ['date'])

def downgrade():
    op.drop_index('ix_expenses_date', table_name='expenses')
    op.drop_table('expenses')

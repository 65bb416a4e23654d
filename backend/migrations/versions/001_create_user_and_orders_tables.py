"""Create user and orders tables

Revision ID: 001
Revises:
Create Date: 2026-01-05 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'user',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=150), nullable=False),
        sa.Column('password_hash', sa.Text(), nullable=False),
        sa.Column('credit_limit', sa.Float(), nullable=False),
        sa.Column('country', sa.String(length=100), nullable=False),
        sa.Column('aadhaar_number', sa.String(length=12), nullable=True),
        sa.Column('blocked', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('role', sa.String(length=20), server_default='USER', nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email', name='uq_user_email'),
        sa.CheckConstraint("role IN ('ADMIN', 'USER')", name='ck_user_role'),
    )
    op.create_index('ix_user_email', 'user', ['email'])

    op.create_table(
        'orders',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('product_name', sa.String(length=255), nullable=False),
        sa.Column('amount', sa.Float(), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('payment_type', sa.String(length=20), nullable=False),
        sa.Column('card_number', sa.String(length=16), nullable=True),
        sa.Column('upi_id', sa.String(length=100), nullable=True),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['user_id'], ['user.id'], ondelete='CASCADE'),
        sa.CheckConstraint("status IN ('CREATED', 'SHIPPED', 'CANCELLED')", name='ck_orders_status'),
        sa.CheckConstraint("payment_type IN ('CREDIT_CARD', 'UPI', 'CASH')", name='ck_orders_payment_type'),
        sa.CheckConstraint("payment_type <> 'CREDIT_CARD' OR card_number IS NOT NULL", name='ck_orders_card_number'),
    )
    op.create_index('idx_order_user', 'orders', ['user_id'])


def downgrade():
    op.drop_index('idx_order_user', table_name='orders')
    op.drop_table('orders')
    op.drop_index('ix_user_email', table_name='user')
    op.drop_table('user')

"""initial real-estate schema

Revision ID: 3a9d1c5e7b20
Revises:
Create Date: 2026-10-19 09:12:41.204518

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3a9d1c5e7b20'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _base_columns():
    return [
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('created_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('modified_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('is_deleted', sa.Boolean(), nullable=False, server_default=sa.false()),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'customers',
        *_base_columns(),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('last_name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('identity_number', sa.String(length=20), nullable=False),
        sa.Column('balance', sa.Numeric(18, 2), nullable=False),
        sa.Column('phone_number', sa.String(length=20), nullable=False),
    )
    op.create_index(
        'uq_customers_email_active',
        'customers',
        ['email'],
        unique=True,
        postgresql_where=sa.text('is_deleted = false'),
        sqlite_where=sa.text('is_deleted = 0'),
    )

    op.create_table(
        'categories',
        *_base_columns(),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.String(length=500), nullable=False),
    )

    op.create_table(
        'locations',
        *_base_columns(),
        sa.Column('city_name', sa.String(length=100), nullable=False),
        sa.Column('plate_code', sa.String(length=10), nullable=False),
    )

    op.create_table(
        'properties',
        *_base_columns(),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('block_number', sa.String(length=50), nullable=False),
        sa.Column('parcel_number', sa.String(length=50), nullable=False),
        sa.Column('square_meters', sa.Numeric(18, 2), nullable=False),
        sa.Column('price', sa.Numeric(18, 2), nullable=False),
        sa.Column('is_available', sa.Boolean(), nullable=False),
        sa.Column('category_id', sa.Integer(), sa.ForeignKey('categories.id', ondelete='RESTRICT'), nullable=False),
        sa.Column('location_id', sa.Integer(), sa.ForeignKey('locations.id', ondelete='RESTRICT'), nullable=False),
    )
    op.create_index('idx_properties_category_id', 'properties', ['category_id'], unique=False)
    op.create_index('idx_properties_location_id', 'properties', ['location_id'], unique=False)

    op.create_table(
        'invoices',
        *_base_columns(),
        sa.Column('serial_number', sa.String(length=50), nullable=False),
        sa.Column('total_amount', sa.Numeric(18, 2), nullable=False),
        sa.Column('invoice_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('status', sa.String(length=50), nullable=False),
        sa.Column('customer_id', sa.Integer(), sa.ForeignKey('customers.id', ondelete='RESTRICT'), nullable=False),
    )
    op.create_index('idx_invoices_customer_id', 'invoices', ['customer_id'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('idx_invoices_customer_id', table_name='invoices')
    op.drop_table('invoices')
    op.drop_index('idx_properties_location_id', table_name='properties')
    op.drop_index('idx_properties_category_id', table_name='properties')
    op.drop_table('properties')
    op.drop_table('locations')
    op.drop_table('categories')
    op.drop_index('uq_customers_email_active', table_name='customers')
    op.drop_table('customers')

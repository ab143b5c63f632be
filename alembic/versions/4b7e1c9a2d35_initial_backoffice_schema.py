"""initial backoffice schema

Revision ID: 4b7e1c9a2d35
Revises:
Create Date: 2026-10-19 10:12:41.208113

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b7e1c9a2d35'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _audit_columns() -> list:
    return [
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('created_by', sa.String(length=255), server_default=sa.text("'system@local'"), nullable=False),
        sa.Column('last_changed_by', sa.String(length=255), server_default=sa.text("'system@local'"), nullable=False),
        sa.Column('is_active', sa.Boolean(), server_default=sa.true(), nullable=False),
    ]


def _enum(name: str, *values: str) -> sa.Enum:
    return sa.Enum(*values, name=name, native_enum=False, length=32)


def upgrade() -> None:
    op.create_table(
        'sys_number_ranges',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('doc_category', sa.String(length=40), nullable=False),
        sa.Column('prefix', sa.String(length=10), nullable=False),
        sa.Column('current_value', sa.BigInteger(), server_default='0', nullable=False),
        sa.Column('padding', sa.Integer(), server_default='4', nullable=False),
        sa.Column('include_year', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('is_active', sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('doc_category', name='uix_number_range_category'),
    )

    op.create_table(
        'currency',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('code', sa.String(length=10), nullable=True),
        sa.Column('symbol', sa.String(length=10), nullable=False),
        sa.Column('exchange_rate', sa.Numeric(18, 6), server_default='1', nullable=False),
        sa.Column('is_base_currency', sa.Boolean(), server_default=sa.false(), nullable=False),
        *_audit_columns(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
    )
    op.create_index('ix_currency_code', 'currency', ['code'])
    op.create_index('ix_currency_is_active', 'currency', ['is_active'])

    op.create_table(
        'supplier',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('contact_person', sa.String(length=255), nullable=True),
        sa.Column('phone_number', sa.String(length=50), nullable=True),
        sa.Column('address', sa.Text(), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_supplier_name', 'supplier', ['name'])
    op.create_index('ix_supplier_is_active', 'supplier', ['is_active'])

    op.create_table(
        'product',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('sku', sa.String(length=60), nullable=True),
        sa.Column('category', sa.String(length=100), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_product_name', 'product', ['name'])
    op.create_index('ix_product_sku', 'product', ['sku'])
    op.create_index('ix_product_is_active', 'product', ['is_active'])

    op.create_table(
        'warehouse',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('location', sa.String(length=255), nullable=True),
        sa.Column('capacity', sa.Integer(), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_warehouse_name', 'warehouse', ['name'])
    op.create_index('ix_warehouse_is_active', 'warehouse', ['is_active'])

    for table in ('owner', 'partnership_account', 'property_account'):
        op.create_table(
            table,
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('name', sa.String(length=255), nullable=False),
            sa.Column('mobile_no', sa.String(length=50), nullable=True),
            sa.Column('code', sa.String(length=50), nullable=True),
            sa.Column('description', sa.Text(), nullable=True),
            sa.Column('refer_code', sa.String(length=30), nullable=False),
            *_audit_columns(),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('refer_code'),
        )
        op.create_index(f'ix_{table}_name', table, ['name'])
        op.create_index(f'ix_{table}_code', table, ['code'])
        op.create_index(f'ix_{table}_is_active', table, ['is_active'])

    op.create_table(
        'liability',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('date', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('amount', sa.Numeric(15, 2), nullable=False),
        sa.Column(
            'liability_type',
            _enum('liability_type_enum', 'loan', 'payable', 'tax', 'other'),
            server_default='other',
            nullable=False,
        ),
        sa.Column('refer_code', sa.String(length=30), nullable=False),
        *_audit_columns(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('refer_code'),
    )
    op.create_index('ix_liability_date', 'liability', ['date'])
    op.create_index('ix_liability_liability_type', 'liability', ['liability_type'])
    op.create_index('ix_liability_is_active', 'liability', ['is_active'])

    op.create_table(
        'transporter',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('contact_person', sa.String(length=255), nullable=False),
        sa.Column('phone_number', sa.String(length=50), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('address', sa.Text(), nullable=False),
        sa.Column('city', sa.String(length=100), nullable=True),
        sa.Column('country', sa.String(length=100), nullable=True),
        sa.Column('vehicle_types', sa.JSON(), nullable=False),
        sa.Column('routes', sa.JSON(), nullable=False),
        sa.Column('commission_rate', sa.Numeric(5, 2), server_default='0', nullable=False),
        sa.Column(
            'payment_terms',
            _enum('payment_terms_enum', 'advance', 'on_delivery', 'credit_30', 'credit_60'),
            server_default='on_delivery',
            nullable=False,
        ),
        sa.Column('rating', sa.Integer(), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_transporter_name', 'transporter', ['name'])
    op.create_index('ix_transporter_is_active', 'transporter', ['is_active'])

    op.create_table(
        'shipment',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('shipment_number', sa.String(length=30), nullable=False),
        sa.Column('batch_no', sa.String(length=30), nullable=False),
        sa.Column('tracking_number', sa.String(length=30), nullable=True),
        sa.Column('supplier_id', sa.Integer(), nullable=False),
        sa.Column('transporter_id', sa.Integer(), nullable=True),
        sa.Column('currency_id', sa.Integer(), nullable=False),
        sa.Column('origin_country', sa.String(length=100), nullable=False),
        sa.Column('origin_city', sa.String(length=100), nullable=False),
        sa.Column('origin_address', sa.String(length=255), nullable=True),
        sa.Column('destination_country', sa.String(length=100), nullable=False),
        sa.Column('destination_city', sa.String(length=100), nullable=False),
        sa.Column('destination_warehouse_id', sa.Integer(), nullable=True),
        sa.Column(
            'status',
            _enum(
                'shipment_status_enum',
                'pending', 'shipped', 'in_transit', 'customs_clearance', 'delivered', 'cancelled',
            ),
            server_default='pending',
            nullable=False,
        ),
        sa.Column('shipment_date', sa.DateTime(), nullable=True),
        sa.Column('estimated_arrival', sa.DateTime(), nullable=True),
        sa.Column('actual_arrival', sa.DateTime(), nullable=True),
        sa.Column('total_weight', sa.Numeric(15, 3), nullable=True),
        sa.Column('total_value', sa.Numeric(18, 2), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        *_audit_columns(),
        sa.ForeignKeyConstraint(['supplier_id'], ['supplier.id'], ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['transporter_id'], ['transporter.id'], ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['currency_id'], ['currency.id'], ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['destination_warehouse_id'], ['warehouse.id'], ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_shipment_shipment_number', 'shipment', ['shipment_number'], unique=True)
    op.create_index('ix_shipment_batch_no', 'shipment', ['batch_no'])
    op.create_index('ix_shipment_tracking_number', 'shipment', ['tracking_number'])
    op.create_index('ix_shipment_status', 'shipment', ['status'])
    op.create_index('ix_shipment_shipment_date', 'shipment', ['shipment_date'])
    op.create_index('ix_shipment_is_active', 'shipment', ['is_active'])

    op.create_table(
        'shipment_product',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('shipment_id', sa.Integer(), nullable=False),
        sa.Column('line_no', sa.Integer(), nullable=False),
        sa.Column('product_id', sa.Integer(), nullable=False),
        sa.Column('quantity', sa.Numeric(15, 3), nullable=False),
        sa.Column('unit_price', sa.Numeric(15, 2), nullable=False),
        sa.ForeignKeyConstraint(['shipment_id'], ['shipment.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['product_id'], ['product.id'], ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_shipment_product_shipment_id', 'shipment_product', ['shipment_id'])

    op.create_table(
        'shipment_document',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('shipment_id', sa.Integer(), nullable=False),
        sa.Column(
            'document_type',
            _enum(
                'shipment_document_type_enum',
                'invoice', 'packing_list', 'bill_of_lading', 'customs_declaration', 'insurance',
            ),
            nullable=False,
        ),
        sa.Column('file_name', sa.String(length=255), nullable=True),
        sa.Column('file_url', sa.String(length=1000), nullable=True),
        sa.Column('upload_date', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.ForeignKeyConstraint(['shipment_id'], ['shipment.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_shipment_document_shipment_id', 'shipment_document', ['shipment_id'])

    op.create_table(
        'logistics_expense',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('transporter_id', sa.Integer(), nullable=False),
        sa.Column('route', sa.String(length=255), nullable=False),
        sa.Column('vehicle_container_no', sa.String(length=50), nullable=True),
        sa.Column('freight_cost', sa.Numeric(15, 2), nullable=False),
        sa.Column('border_crossing_charges', sa.Numeric(15, 2), server_default='0', nullable=False),
        sa.Column('transporter_commission', sa.Numeric(15, 2), server_default='0', nullable=False),
        sa.Column('service_fee', sa.Numeric(15, 2), server_default='0', nullable=False),
        sa.Column('transit_warehouse_charges', sa.Numeric(15, 2), server_default='0', nullable=False),
        sa.Column('local_transport_charges', sa.Numeric(15, 2), server_default='0', nullable=False),
        sa.Column('total_cost', sa.Numeric(18, 2), nullable=True),
        sa.Column('amount_in_pkr', sa.Numeric(20, 4), nullable=True),
        sa.Column('currency_id', sa.Integer(), nullable=False),
        sa.Column('exchange_rate', sa.Numeric(18, 6), nullable=False),
        sa.Column('linked_shipment_id', sa.Integer(), nullable=True),
        sa.Column('linked_warehouse_id', sa.Integer(), nullable=True),
        sa.Column(
            'payment_method',
            _enum('payment_method_enum', 'cash', 'bank', 'credit', 'mixed'),
            nullable=False,
        ),
        sa.Column('supporting_document', sa.JSON(), nullable=True),
        sa.Column(
            'transport_status',
            _enum('transport_status_enum', 'pending', 'in_transit', 'delivered', 'cancelled'),
            server_default='pending',
            nullable=False,
        ),
        sa.Column('departure_date', sa.DateTime(), nullable=True),
        sa.Column('arrival_date', sa.DateTime(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        *_audit_columns(),
        sa.ForeignKeyConstraint(['transporter_id'], ['transporter.id'], ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['currency_id'], ['currency.id'], ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['linked_shipment_id'], ['shipment.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['linked_warehouse_id'], ['warehouse.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_logistics_expense_transporter_id', 'logistics_expense', ['transporter_id'])
    op.create_index('ix_logistics_expense_route', 'logistics_expense', ['route'])
    op.create_index('ix_logistics_expense_transport_status', 'logistics_expense', ['transport_status'])
    op.create_index('ix_logistics_expense_is_active', 'logistics_expense', ['is_active'])


def downgrade() -> None:
    op.drop_table('logistics_expense')
    op.drop_table('shipment_document')
    op.drop_table('shipment_product')
    op.drop_table('shipment')
    op.drop_table('transporter')
    op.drop_table('liability')
    for table in ('property_account', 'partnership_account', 'owner'):
        op.drop_table(table)
    op.drop_table('warehouse')
    op.drop_table('product')
    op.drop_table('supplier')
    op.drop_table('currency')
    op.drop_table('sys_number_ranges')

"""initial_schema

Revision ID: d1e2f3a4b5c6
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = 'd1e2f3a4b5c6'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('uid', sa.String(length=128), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('role', sa.Enum('hr', 'employee', name='role'), nullable=False),
        sa.Column('photo_url', sa.String(length=500), nullable=True),
        sa.Column('date_of_birth', sa.String(length=32), nullable=True),
        sa.Column('company_name', sa.String(length=255), nullable=True),
        sa.Column('company_logo', sa.String(length=500), nullable=True),
        sa.Column('subscription', sa.String(length=64), nullable=True),
        sa.Column('package_limit', sa.Integer(), nullable=False),
        sa.Column('current_employees', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_users_id'), 'users', ['id'], unique=False)
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    op.create_table(
        'assets',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('hr_email', sa.String(length=255), nullable=False),
        sa.Column('company_name', sa.String(length=255), nullable=True),
        sa.Column('product_name', sa.String(length=255), nullable=False),
        sa.Column('product_image', sa.String(length=500), nullable=True),
        sa.Column(
            'product_type',
            sa.Enum('Returnable', 'Non-returnable', name='assettype'),
            nullable=False,
        ),
        sa.Column('product_quantity', sa.Integer(), nullable=False),
        sa.Column('available_quantity', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint(
            'available_quantity >= 0 AND available_quantity <= product_quantity',
            name='ck_asset_available_range',
        ),
        sa.ForeignKeyConstraint(['hr_email'], ['users.email']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_assets_id'), 'assets', ['id'], unique=False)
    op.create_index(op.f('ix_assets_hr_email'), 'assets', ['hr_email'], unique=False)

    op.create_table(
        'requests',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('asset_id', sa.Integer(), nullable=False),
        sa.Column('asset_name', sa.String(length=255), nullable=True),
        sa.Column('asset_type', sa.String(length=32), nullable=True),
        sa.Column('requester_email', sa.String(length=255), nullable=False),
        sa.Column('requester_name', sa.String(length=255), nullable=True),
        sa.Column('hr_email', sa.String(length=255), nullable=False),
        sa.Column('company_name', sa.String(length=255), nullable=True),
        sa.Column(
            'status',
            sa.Enum('pending', 'approved', 'rejected', name='requeststatus'),
            nullable=False,
        ),
        sa.Column('note', sa.String(length=1000), nullable=True),
        sa.Column('processed_by', sa.String(length=255), nullable=True),
        sa.Column('requested_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('resolved_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_requests_id'), 'requests', ['id'], unique=False)
    op.create_index(op.f('ix_requests_asset_id'), 'requests', ['asset_id'], unique=False)
    op.create_index(op.f('ix_requests_requester_email'), 'requests', ['requester_email'], unique=False)
    op.create_index(op.f('ix_requests_hr_email'), 'requests', ['hr_email'], unique=False)
    op.create_index(op.f('ix_requests_status'), 'requests', ['status'], unique=False)

    op.create_table(
        'assigned_assets',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('asset_id', sa.Integer(), nullable=False),
        sa.Column('request_id', sa.Integer(), nullable=False),
        sa.Column('asset_name', sa.String(length=255), nullable=False),
        sa.Column('asset_image', sa.String(length=500), nullable=True),
        sa.Column('asset_type', sa.String(length=32), nullable=False),
        sa.Column('employee_email', sa.String(length=255), nullable=False),
        sa.Column('employee_name', sa.String(length=255), nullable=True),
        sa.Column('hr_email', sa.String(length=255), nullable=False),
        sa.Column('company_name', sa.String(length=255), nullable=True),
        sa.Column(
            'status',
            sa.Enum('assigned', 'returned', name='assignmentstatus'),
            nullable=False,
        ),
        sa.Column('assigned_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('returned_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['request_id'], ['requests.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('request_id'),
    )
    op.create_index(op.f('ix_assigned_assets_id'), 'assigned_assets', ['id'], unique=False)
    op.create_index(op.f('ix_assigned_assets_asset_id'), 'assigned_assets', ['asset_id'], unique=False)
    op.create_index(op.f('ix_assigned_assets_employee_email'), 'assigned_assets', ['employee_email'], unique=False)
    op.create_index(op.f('ix_assigned_assets_hr_email'), 'assigned_assets', ['hr_email'], unique=False)
    op.create_index(op.f('ix_assigned_assets_status'), 'assigned_assets', ['status'], unique=False)

    op.create_table(
        'employee_affiliations',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('employee_email', sa.String(length=255), nullable=False),
        sa.Column('employee_name', sa.String(length=255), nullable=True),
        sa.Column('hr_email', sa.String(length=255), nullable=False),
        sa.Column('company_name', sa.String(length=255), nullable=True),
        sa.Column('company_logo', sa.String(length=500), nullable=True),
        sa.Column(
            'status',
            sa.Enum('active', 'inactive', name='affiliationstatus'),
            nullable=False,
        ),
        sa.Column('affiliated_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('removed_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('employee_email', 'hr_email', name='uq_affiliation_employee_company'),
    )
    op.create_index(op.f('ix_employee_affiliations_id'), 'employee_affiliations', ['id'], unique=False)
    op.create_index(op.f('ix_employee_affiliations_employee_email'), 'employee_affiliations', ['employee_email'], unique=False)
    op.create_index(op.f('ix_employee_affiliations_hr_email'), 'employee_affiliations', ['hr_email'], unique=False)

    op.create_table(
        'packages',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=64), nullable=False),
        sa.Column('employee_limit', sa.Integer(), nullable=False),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('features', sa.JSON(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
    )
    op.create_index(op.f('ix_packages_id'), 'packages', ['id'], unique=False)

    op.create_table(
        'payments',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('hr_email', sa.String(length=255), nullable=False),
        sa.Column('package_name', sa.String(length=64), nullable=False),
        sa.Column('employee_limit', sa.Integer(), nullable=False),
        sa.Column('amount', sa.Numeric(10, 2), nullable=False),
        sa.Column('transaction_id', sa.String(length=255), nullable=False),
        sa.Column('status', sa.String(length=16), nullable=False),
        sa.Column('paid_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['hr_email'], ['users.email']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('transaction_id'),
    )
    op.create_index(op.f('ix_payments_id'), 'payments', ['id'], unique=False)
    op.create_index(op.f('ix_payments_hr_email'), 'payments', ['hr_email'], unique=False)


def downgrade() -> None:
    op.drop_table('payments')
    op.drop_table('packages')
    op.drop_table('employee_affiliations')
    op.drop_table('assigned_assets')
    op.drop_table('requests')
    op.drop_table('assets')
    op.drop_table('users')
    # Drop the enum types (needed for PostgreSQL, no-op for SQLite)
    for name in ('affiliationstatus', 'assignmentstatus', 'requeststatus', 'assettype', 'role'):
        sa.Enum(name=name).drop(op.get_bind(), checkfirst=True)

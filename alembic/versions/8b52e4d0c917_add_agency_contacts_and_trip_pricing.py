"""add_agency_contacts_and_trip_pricing

Revision ID: 8b52e4d0c917
Revises: 3f1c9a7b2d40
Create Date: 2026-10-19 15:40:02.771430

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '8b52e4d0c917'
down_revision: Union[str, Sequence[str], None] = '3f1c9a7b2d40'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def _agency_table(name: str, *columns: sa.Column, unique: tuple[str, ...] | None = None) -> None:
    constraints = [
        sa.ForeignKeyConstraint(['agency_id'], ['agencies.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    ]
    if unique:
        constraints.append(sa.UniqueConstraint('agency_id', *unique[1:], name=unique[0]))
    op.create_table(
        name,
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('agency_id', sa.Integer(), nullable=False),
        *columns,
        *_timestamps(),
        *constraints,
    )
    op.create_index(op.f(f'ix_{name}_agency_id'), name, ['agency_id'])


def upgrade() -> None:
    """
    Add agency contacts, catalogue lookups and trip pricing.

    Creates:
    - agency_emails, agency_addresses, agency_socials
    - categories, boarding_locations, cancellation_policies (+ rules)
    - trip_age_price_groups, trip_general_info_items
    Adds trips.category_id and trips.cancellation_policy_id.
    """
    _agency_table(
        'agency_emails',
        sa.Column('email', sa.String(length=100), nullable=False, unique=True),
    )
    _agency_table(
        'agency_addresses',
        sa.Column('type', sa.String(length=9), nullable=False),
        sa.Column('address', sa.String(length=100), nullable=False),
        sa.Column('number', sa.String(length=10), nullable=False),
        sa.Column('complement', sa.String(length=50), nullable=True),
        sa.Column('neighborhood', sa.String(length=50), nullable=False),
        sa.Column('city', sa.String(length=50), nullable=False),
        sa.Column('state', sa.String(length=2), nullable=False),
        sa.Column('zip_code', sa.String(length=9), nullable=False),
    )
    _agency_table(
        'agency_socials',
        sa.Column('type', sa.String(length=9), nullable=False),
        sa.Column('url', sa.String(length=200), nullable=False),
        unique=('uq_agency_social_type', 'type'),
    )
    _agency_table(
        'categories',
        sa.Column('name', sa.String(length=100), nullable=False),
        unique=('uq_category_agency_name', 'name'),
    )
    _agency_table(
        'boarding_locations',
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.String(length=200), nullable=True),
        sa.Column('city', sa.String(length=100), nullable=False),
    )
    _agency_table(
        'cancellation_policies',
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.String(length=500), nullable=True),
        sa.Column('is_default', sa.Boolean(), nullable=False),
        unique=('uq_cancellation_policy_agency_name', 'name'),
    )

    op.create_table(
        'cancellation_policy_rules',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('policy_id', sa.Integer(), nullable=False),
        sa.Column('days_before_trip', sa.Integer(), nullable=False),
        sa.Column('refund_percentage', sa.Numeric(precision=5, scale=2), nullable=False),
        sa.Column('display_order', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['policy_id'], ['cancellation_policies.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_cancellation_policy_rules_policy_id'), 'cancellation_policy_rules', ['policy_id'])

    op.create_table(
        'trip_age_price_groups',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('trip_id', sa.Integer(), nullable=False),
        sa.Column('age_range_id', sa.Integer(), nullable=False),
        sa.Column('final_price', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('original_price', sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column('display_order', sa.Integer(), nullable=False),
        sa.Column('description', sa.String(length=500), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['trip_id'], ['trips.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['age_range_id'], ['age_ranges.id'], ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_trip_age_price_groups_trip_id'), 'trip_age_price_groups', ['trip_id'])
    op.create_index(op.f('ix_trip_age_price_groups_age_range_id'), 'trip_age_price_groups', ['age_range_id'])

    op.create_table(
        'trip_general_info_items',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('trip_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('display_order', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['trip_id'], ['trips.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_trip_general_info_items_trip_id'), 'trip_general_info_items', ['trip_id'])

    with op.batch_alter_table('trips', schema=None) as batch_op:
        batch_op.add_column(sa.Column('category_id', sa.Integer(), nullable=True))
        batch_op.add_column(sa.Column('cancellation_policy_id', sa.Integer(), nullable=True))
        batch_op.create_foreign_key(
            'fk_trips_category_id', 'categories', ['category_id'], ['id'], ondelete='RESTRICT'
        )
        batch_op.create_foreign_key(
            'fk_trips_cancellation_policy_id',
            'cancellation_policies',
            ['cancellation_policy_id'],
            ['id'],
            ondelete='SET NULL',
        )
    op.create_index(op.f('ix_trips_category_id'), 'trips', ['category_id'])


def downgrade() -> None:
    """Drop the trip links first, then the new tables (children first)."""
    op.drop_index(op.f('ix_trips_category_id'), table_name='trips')
    with op.batch_alter_table('trips', schema=None) as batch_op:
        batch_op.drop_constraint('fk_trips_cancellation_policy_id', type_='foreignkey')
        batch_op.drop_constraint('fk_trips_category_id', type_='foreignkey')
        batch_op.drop_column('cancellation_policy_id')
        batch_op.drop_column('category_id')

    op.drop_index(op.f('ix_trip_general_info_items_trip_id'), table_name='trip_general_info_items')
    op.drop_table('trip_general_info_items')
    op.drop_index(op.f('ix_trip_age_price_groups_age_range_id'), table_name='trip_age_price_groups')
    op.drop_index(op.f('ix_trip_age_price_groups_trip_id'), table_name='trip_age_price_groups')
    op.drop_table('trip_age_price_groups')
    op.drop_index(op.f('ix_cancellation_policy_rules_policy_id'), table_name='cancellation_policy_rules')
    op.drop_table('cancellation_policy_rules')

    for name in (
        'cancellation_policies',
        'boarding_locations',
        'categories',
        'agency_socials',
        'agency_addresses',
        'agency_emails',
    ):
        op.drop_index(op.f(f'ix_{name}_agency_id'), table_name=name)
        op.drop_table(name)

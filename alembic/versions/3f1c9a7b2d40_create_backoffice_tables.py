"""create_backoffice_tables

Revision ID: 3f1c9a7b2d40
Revises:
Create Date: 2026-10-19 10:12:44.518203

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a7b2d40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """
    Create the back-office schema.

    Creates:
    - tenants
    - agencies (tenant scoped, unique cadastur / cnpj)
    - age_ranges, agency_phones, trips (agency scoped)
    - trip_images, trip_items (trip scoped)
    """
    op.create_table(
        'tenants',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('slug', sa.String(length=100), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('plan', sa.String(length=50), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_tenants_slug'), 'tenants', ['slug'], unique=True)

    op.create_table(
        'agencies',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('tenant_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('cadastur', sa.String(length=50), nullable=False),
        sa.Column('cnpj', sa.String(length=18), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['tenant_id'], ['tenants.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('cadastur'),
        sa.UniqueConstraint('cnpj'),
    )
    op.create_index(op.f('ix_agencies_tenant_id'), 'agencies', ['tenant_id'])

    op.create_table(
        'age_ranges',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('agency_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('min_age', sa.Integer(), nullable=False),
        sa.Column('max_age', sa.Integer(), nullable=False),
        sa.Column('occupies_seat', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['agency_id'], ['agencies.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('agency_id', 'name', name='uq_age_range_agency_name'),
    )
    op.create_index(op.f('ix_age_ranges_agency_id'), 'age_ranges', ['agency_id'])

    op.create_table(
        'agency_phones',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('agency_id', sa.Integer(), nullable=False),
        sa.Column('type', sa.String(length=8), nullable=False),
        sa.Column('number', sa.String(length=20), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['agency_id'], ['agencies.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_agency_phones_agency_id'), 'agency_phones', ['agency_id'])
    op.create_index(op.f('ix_agency_phones_number'), 'agency_phones', ['number'])

    op.create_table(
        'trips',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('agency_id', sa.Integer(), nullable=False),
        sa.Column('slug', sa.String(length=200), nullable=False),
        sa.Column('destination', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('video_url', sa.String(length=500), nullable=True),
        sa.Column('departure_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('return_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('total_seats', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(length=9), nullable=False),
        sa.Column('main_image_url', sa.Text(), nullable=True),
        sa.Column('main_image_thumbnail_url', sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['agency_id'], ['agencies.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('agency_id', 'slug', name='uq_trip_agency_slug'),
    )
    op.create_index(op.f('ix_trips_agency_id'), 'trips', ['agency_id'])

    op.create_table(
        'trip_images',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('trip_id', sa.Integer(), nullable=False),
        sa.Column('image_url', sa.Text(), nullable=False),
        sa.Column('thumbnail_url', sa.Text(), nullable=False),
        sa.Column('is_main', sa.Boolean(), nullable=False),
        sa.Column('display_order', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['trip_id'], ['trips.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_trip_images_trip_id'), 'trip_images', ['trip_id'])

    op.create_table(
        'trip_items',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('trip_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('is_included', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['trip_id'], ['trips.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_trip_items_trip_id'), 'trip_items', ['trip_id'])


def downgrade() -> None:
    """Drop all back-office tables (children first)."""
    op.drop_index(op.f('ix_trip_items_trip_id'), table_name='trip_items')
    op.drop_table('trip_items')
    op.drop_index(op.f('ix_trip_images_trip_id'), table_name='trip_images')
    op.drop_table('trip_images')
    op.drop_index(op.f('ix_trips_agency_id'), table_name='trips')
    op.drop_table('trips')
    op.drop_index(op.f('ix_agency_phones_number'), table_name='agency_phones')
    op.drop_index(op.f('ix_agency_phones_agency_id'), table_name='agency_phones')
    op.drop_table('agency_phones')
    op.drop_index(op.f('ix_age_ranges_agency_id'), table_name='age_ranges')
    op.drop_table('age_ranges')
    op.drop_index(op.f('ix_agencies_tenant_id'), table_name='agencies')
    op.drop_table('agencies')
    op.drop_index(op.f('ix_tenants_slug'), table_name='tenants')
    op.drop_table('tenants')

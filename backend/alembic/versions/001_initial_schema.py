"""Initial record store: property, room, measurement

Revision ID: 001
Create Date: 2026-10-01 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001_initial_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Property table
    op.create_table(
        'property',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('address', sa.String(255), nullable=True),
        sa.Column('city', sa.String(100), nullable=True),
        sa.Column('state', sa.String(50), nullable=True),
        sa.Column('zip', sa.String(20), nullable=True),
        sa.Column('sqft', sa.Integer(), nullable=True),
        sa.Column('year_built', sa.Integer(), nullable=True),
        sa.Column('primary_contact_email', sa.String(255), nullable=True),
        sa.Column('occupants_adults', sa.Integer(), nullable=True),
        sa.Column('occupants_children', sa.Integer(), nullable=True),
        sa.Column('occupants_animals', sa.Integer(), nullable=True),
        sa.Column('occupants_allergies', sa.Boolean(), nullable=True),
        sa.Column('occupants_asthma', sa.Boolean(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )

    # Room table
    op.create_table(
        'room',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('property_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('order_index', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.ForeignKeyConstraint(['property_id'], ['property.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_room_property_id', 'room', ['property_id'])

    # Measurement table (one row per technician reading)
    op.create_table(
        'measurement',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('property_id', sa.Uuid(), nullable=False),
        sa.Column('room_id', sa.Uuid(), nullable=True),
        sa.Column('metric', sa.String(50), nullable=False),
        sa.Column('value', sa.Float(), nullable=False),
        sa.Column('unit', sa.String(20), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('taken_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.ForeignKeyConstraint(['property_id'], ['property.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['room_id'], ['room.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_measurement_property_id', 'measurement', ['property_id'])
    op.create_index('ix_measurement_room_id', 'measurement', ['room_id'])


def downgrade() -> None:
    op.drop_index('ix_measurement_room_id', table_name='measurement')
    op.drop_index('ix_measurement_property_id', table_name='measurement')
    op.drop_table('measurement')
    op.drop_index('ix_room_property_id', table_name='room')
    op.drop_table('room')
    op.drop_table('property')

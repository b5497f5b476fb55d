"""Initial schema - members, themes, reservation times, reservations and waitings.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create initial database tables."""
    op.create_table(
        'members',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=50), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=20), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_members')),
        sa.UniqueConstraint('email', name=op.f('uq_members_email')),
    )
    op.create_index(op.f('ix_members_created_at'), 'members', ['created_at'], unique=False)

    op.create_table(
        'themes',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.String(length=500), nullable=False),
        sa.Column('thumbnail', sa.String(length=500), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_themes')),
        sa.UniqueConstraint('name', name=op.f('uq_themes_name')),
    )
    op.create_index(op.f('ix_themes_created_at'), 'themes', ['created_at'], unique=False)

    op.create_table(
        'reservation_times',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('start_at', sa.Time(), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_reservation_times')),
        sa.UniqueConstraint('start_at', name=op.f('uq_reservation_times_start_at')),
    )

    op.create_table(
        'reservations',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('member_id', sa.Integer(), nullable=False),
        sa.Column('theme_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('time_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(['member_id'], ['members.id'], name=op.f('fk_reservations_member_id_members')),
        sa.ForeignKeyConstraint(['theme_id'], ['themes.id'], name=op.f('fk_reservations_theme_id_themes')),
        sa.ForeignKeyConstraint(
            ['time_id'], ['reservation_times.id'], name=op.f('fk_reservations_time_id_reservation_times')
        ),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_reservations')),
        sa.UniqueConstraint('theme_id', 'date', 'time_id', name='uq_reservations_slot'),
    )
    op.create_index(op.f('ix_reservations_member_id'), 'reservations', ['member_id'], unique=False)
    op.create_index(op.f('ix_reservations_date'), 'reservations', ['date'], unique=False)
    op.create_index(op.f('ix_reservations_created_at'), 'reservations', ['created_at'], unique=False)
    op.create_index('ix_reservations_theme_date', 'reservations', ['theme_id', 'date'], unique=False)

    op.create_table(
        'reservation_waitings',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('reservation_id', sa.Integer(), nullable=False),
        sa.Column('waiting_member_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(
            ['reservation_id'], ['reservations.id'],
            name=op.f('fk_reservation_waitings_reservation_id_reservations'),
        ),
        sa.ForeignKeyConstraint(
            ['waiting_member_id'], ['members.id'],
            name=op.f('fk_reservation_waitings_waiting_member_id_members'),
        ),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_reservation_waitings')),
        sa.UniqueConstraint('reservation_id', 'waiting_member_id', name='uq_reservation_waitings_member'),
    )
    op.create_index(
        op.f('ix_reservation_waitings_reservation_id'), 'reservation_waitings', ['reservation_id'], unique=False
    )
    op.create_index(
        op.f('ix_reservation_waitings_waiting_member_id'), 'reservation_waitings', ['waiting_member_id'], unique=False
    )


def downgrade() -> None:
    """Drop all tables."""
    op.drop_table('reservation_waitings')
    op.drop_table('reservations')
    op.drop_table('reservation_times')
    op.drop_table('themes')
    op.drop_table('members')

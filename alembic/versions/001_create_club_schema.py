"""Create members, arvantis_fests and events tables

Revision ID: 001
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema - Create member directory, fest and event tables."""
    # Members table
    op.create_table('members',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('fullname', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('designation', sa.JSON(), nullable=False, comment='Ordered titles, first is primary'),
        sa.Column('department', sa.JSON(), nullable=False, comment='Ordered departments, first is primary'),
        sa.Column('skills', sa.JSON(), nullable=False),
        sa.Column('social_links', sa.JSON(), nullable=False, comment='List of {platform, url}'),
        sa.Column('bio', sa.String(), nullable=True),
        sa.Column('is_leader', sa.Boolean(), nullable=True),
        sa.Column('primary_department', sa.String(length=255), nullable=True),
        sa.Column('primary_role', sa.String(length=255), nullable=True),
        sa.Column('profile_image_url', sa.String(length=500), nullable=True),
        sa.Column('status', sa.Enum('ACTIVE', 'BANNED', name='memberstatus'), nullable=False),
        sa.Column('ban_reason', sa.String(length=500), nullable=True),
        sa.Column('member_order', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_index(op.f('ix_members_fullname'), 'members', ['fullname'], unique=False)
    op.create_index(op.f('ix_members_email'), 'members', ['email'], unique=False)
    op.create_index(op.f('ix_members_status'), 'members', ['status'], unique=False)
    op.create_index(op.f('ix_members_member_order'), 'members', ['member_order'], unique=False)
    op.create_index(op.f('ix_members_deleted_at'), 'members', ['deleted_at'], unique=False)

    # Arvantis fests table
    op.create_table('arvantis_fests',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('year', sa.Integer(), nullable=False),
        sa.Column('slug', sa.String(length=300), nullable=False),
        sa.Column('description', sa.String(), nullable=False),
        sa.Column('start_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('status', sa.Enum('UPCOMING', 'ONGOING', 'COMPLETED', 'CANCELLED', 'POSTPONED', name='feststatus'), nullable=False),
        sa.Column('location', sa.String(length=255), nullable=True),
        sa.Column('events', sa.JSON(), nullable=False),
        sa.Column('partners', sa.JSON(), nullable=False),
        sa.Column('guidelines', sa.JSON(), nullable=False),
        sa.Column('prizes', sa.JSON(), nullable=False),
        sa.Column('guests', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_index(op.f('ix_arvantis_fests_year'), 'arvantis_fests', ['year'], unique=True)
    op.create_index(op.f('ix_arvantis_fests_slug'), 'arvantis_fests', ['slug'], unique=True)
    op.create_index(op.f('ix_arvantis_fests_status'), 'arvantis_fests', ['status'], unique=False)
    op.create_index(op.f('ix_arvantis_fests_deleted_at'), 'arvantis_fests', ['deleted_at'], unique=False)

    # Events table
    op.create_table('events',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.String(), nullable=False),
        sa.Column('event_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('venue', sa.String(length=255), nullable=False),
        sa.Column('organizer', sa.String(length=255), nullable=False),
        sa.Column('category', sa.String(length=100), nullable=False),
        sa.Column('tags', sa.JSON(), nullable=False),
        sa.Column('total_spots', sa.Integer(), nullable=False, comment='0 means unlimited'),
        sa.Column('ticket_price', sa.Float(), nullable=False),
        sa.Column('status', sa.Enum('UPCOMING', 'ONGOING', 'COMPLETED', 'CANCELLED', 'POSTPONED', name='eventstatus'), nullable=False),
        sa.Column('registration_open_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('registration_close_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_index(op.f('ix_events_title'), 'events', ['title'], unique=False)
    op.create_index(op.f('ix_events_event_date'), 'events', ['event_date'], unique=False)
    op.create_index(op.f('ix_events_category'), 'events', ['category'], unique=False)
    op.create_index(op.f('ix_events_status'), 'events', ['status'], unique=False)
    op.create_index(op.f('ix_events_deleted_at'), 'events', ['deleted_at'], unique=False)


def downgrade() -> None:
    """Downgrade schema - Drop member directory, fest and event tables."""
    op.drop_index(op.f('ix_events_deleted_at'), table_name='events')
    op.drop_index(op.f('ix_events_status'), table_name='events')
    op.drop_index(op.f('ix_events_category'), table_name='events')
    op.drop_index(op.f('ix_events_event_date'), table_name='events')
    op.drop_index(op.f('ix_events_title'), table_name='events')
    op.drop_table('events')

    op.drop_index(op.f('ix_arvantis_fests_deleted_at'), table_name='arvantis_fests')
    op.drop_index(op.f('ix_arvantis_fests_status'), table_name='arvantis_fests')
    op.drop_index(op.f('ix_arvantis_fests_slug'), table_name='arvantis_fests')
    op.drop_index(op.f('ix_arvantis_fests_year'), table_name='arvantis_fests')
    op.drop_table('arvantis_fests')

    op.drop_index(op.f('ix_members_deleted_at'), table_name='members')
    op.drop_index(op.f('ix_members_member_order'), table_name='members')
    op.drop_index(op.f('ix_members_status'), table_name='members')
    op.drop_index(op.f('ix_members_email'), table_name='members')
    op.drop_index(op.f('ix_members_fullname'), table_name='members')
    op.drop_table('members')

    sa.Enum(name='eventstatus').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='feststatus').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='memberstatus').drop(op.get_bind(), checkfirst=True)

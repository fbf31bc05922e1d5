"""initial_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19

Creates all tables for the wellness booking service:
users, event_types, events, event_proposed_dates.
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

role_enum = sa.Enum("requester", "provider", name="role")
status_enum = sa.Enum("pending", "approved", "rejected", name="eventstatus")


def upgrade() -> None:
    # --- users ---
    op.create_table(
        "users",
        sa.Column("user_id", sa.String(36), primary_key=True),
        sa.Column("username", sa.String(100), nullable=False, unique=True),
        sa.Column("role", role_enum, nullable=False),
        sa.Column("company_name", sa.String(200), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # --- event_types ---
    op.create_table(
        "event_types",
        sa.Column("event_type_id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.String(1000), nullable=False, server_default=""),
        sa.Column("provider_id", sa.String(36), sa.ForeignKey("users.user_id"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # --- events ---
    op.create_table(
        "events",
        sa.Column("event_id", sa.String(36), primary_key=True),
        sa.Column("event_type_id", sa.String(36), sa.ForeignKey("event_types.event_type_id"), nullable=False),
        sa.Column("requester_company_name", sa.String(200), nullable=False),
        sa.Column("postal_code", sa.String(20), nullable=False),
        sa.Column("street_name", sa.String(200), nullable=False, server_default=""),
        sa.Column("status", status_enum, nullable=False, server_default="pending"),
        sa.Column("remarks", sa.String(1000), nullable=False, server_default=""),
        sa.Column("confirmed_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("requester_id", sa.String(36), sa.ForeignKey("users.user_id"), nullable=False),
        sa.Column("provider_id", sa.String(36), sa.ForeignKey("users.user_id"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_events_requester_id", "events", ["requester_id"])
    op.create_index("ix_events_provider_id", "events", ["provider_id"])
    op.create_index("ix_events_created_at", "events", ["created_at"])

    # --- event_proposed_dates ---
    op.create_table(
        "event_proposed_dates",
        sa.Column("proposed_date_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "event_id", sa.String(36),
            sa.ForeignKey("events.event_id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("position", sa.Integer, nullable=False),
        sa.Column("proposed_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("event_id", "position", name="uq_proposed_date_position"),
        sa.UniqueConstraint("event_id", "proposed_at", name="uq_proposed_date_instant"),
    )


def downgrade() -> None:
    op.drop_table("event_proposed_dates")
    op.drop_index("ix_events_created_at", table_name="events")
    op.drop_index("ix_events_provider_id", table_name="events")
    op.drop_index("ix_events_requester_id", table_name="events")
    op.drop_table("events")
    op.drop_table("event_types")
    op.drop_table("users")
    status_enum.drop(op.get_bind(), checkfirst=True)
    role_enum.drop(op.get_bind(), checkfirst=True)

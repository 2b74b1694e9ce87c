"""create relief tables

Revision ID: 4b9e2c7d1a30
Revises:
Create Date: 2026-10-19 09:12:44.120518

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4b9e2c7d1a30"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "inventory",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("item_name", sa.String(length=255), nullable=False),
        sa.Column("category", sa.String(length=50), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("unit", sa.String(length=50), nullable=False),
        sa.Column("low_stock_threshold", sa.Integer(), nullable=False),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        sa.CheckConstraint("quantity >= 0", name="ck_inventory_quantity_non_negative"),
        sa.CheckConstraint("low_stock_threshold >= 0", name="ck_inventory_threshold_non_negative"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_inventory_id"), "inventory", ["id"], unique=False)

    op.create_table(
        "households",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("household_number", sa.String(length=50), nullable=False),
        sa.Column("head_of_family", sa.String(length=255), nullable=False),
        sa.Column("purok", sa.String(length=20), nullable=False),
        sa.Column("address", sa.String(length=500), nullable=False),
        sa.Column("contact_number", sa.String(length=50), nullable=True),
        sa.Column("family_members", sa.Integer(), nullable=False),
        sa.Column(
            "registered_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        sa.CheckConstraint("family_members >= 1", name="ck_households_family_members_positive"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_households_id"), "households", ["id"], unique=False)
    op.create_index(
        op.f("ix_households_household_number"), "households", ["household_number"], unique=True
    )
    op.create_index(op.f("ix_households_purok"), "households", ["purok"], unique=False)

    op.create_table(
        "distributions",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("household_id", sa.Integer(), nullable=False),
        sa.Column("inventory_id", sa.Integer(), nullable=False),
        sa.Column("quantity_distributed", sa.Integer(), nullable=False),
        sa.Column("distributed_by", sa.String(length=255), nullable=False),
        sa.Column(
            "distributed_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("notes", sa.String(), nullable=True),
        sa.CheckConstraint("quantity_distributed >= 1", name="ck_distributions_quantity_positive"),
        sa.ForeignKeyConstraint(["household_id"], ["households.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["inventory_id"], ["inventory.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_distributions_id"), "distributions", ["id"], unique=False)
    op.create_index(
        op.f("ix_distributions_household_id"), "distributions", ["household_id"], unique=False
    )
    op.create_index(
        op.f("ix_distributions_inventory_id"), "distributions", ["inventory_id"], unique=False
    )

    op.create_table(
        "activity_logs",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("action_type", sa.String(length=20), nullable=False),
        sa.Column("entity_type", sa.String(length=20), nullable=False),
        sa.Column("entity_id", sa.Integer(), nullable=True),
        sa.Column("entity_name", sa.String(length=500), nullable=False),
        sa.Column("performed_by", sa.String(length=255), nullable=False),
        sa.Column("details", sa.JSON(), nullable=True),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_activity_logs_id"), "activity_logs", ["id"], unique=False)
    op.create_index(
        op.f("ix_activity_logs_action_type"), "activity_logs", ["action_type"], unique=False
    )
    op.create_index(
        op.f("ix_activity_logs_entity_type"), "activity_logs", ["entity_type"], unique=False
    )
    op.create_index(
        op.f("ix_activity_logs_created_at"), "activity_logs", ["created_at"], unique=False
    )


def downgrade() -> None:
    op.drop_table("activity_logs")
    op.drop_table("distributions")
    op.drop_table("households")
    op.drop_table("inventory")

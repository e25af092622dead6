"""Initial schema - attribute catalog, typed values, listings, saved searches, hierarchy.

Revision ID: 001
Revises:
Create Date: 2025-06-02

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

VALUE_SLOTS = ("text_value", "number_value", "boolean_value", "multi_select_value", "date_value")


def upgrade() -> None:
    op.create_table(
        "app_user",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("username", sa.String(100), nullable=False),
        sa.Column("role", sa.String(20), nullable=False),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.CheckConstraint(
            "role IN ('ADMIN', 'BROKER', 'AGENT', 'ASSISTANT')", name="ck_app_user_role"
        ),
    )
    op.create_index("ix_app_user_username", "app_user", ["username"], unique=True)

    op.create_table(
        "listing",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("owner_id", sa.UUID(), sa.ForeignKey("app_user.id"), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("price", sa.Numeric(15, 2), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_listing_status_owner", "listing", ["status", "owner_id"])

    op.create_table(
        "attribute",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("data_type", sa.String(20), nullable=False),
        sa.Column("category", sa.String(20), nullable=False),
        sa.Column("display_order", sa.Integer(), nullable=False),
        sa.Column("is_required", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_searchable", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("name", name="uq_attribute_name"),
        # Deferrable so a reorder can swap positions inside one transaction.
        sa.UniqueConstraint(
            "category",
            "display_order",
            name="uq_attribute_category_order",
            deferrable=True,
            initially="IMMEDIATE",
        ),
        sa.CheckConstraint("display_order >= 1", name="ck_attribute_display_order"),
    )

    op.create_table(
        "attribute_option",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column(
            "attribute_id",
            sa.UUID(),
            sa.ForeignKey("attribute.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("option_value", sa.String(255), nullable=False),
        sa.Column("display_order", sa.Integer(), nullable=False),
    )
    op.create_index(
        "ix_attribute_option_value_ci",
        "attribute_option",
        ["attribute_id", sa.text("lower(option_value)")],
        unique=True,
    )

    op.create_table(
        "attribute_value",
        sa.Column("id", sa.BigInteger(), sa.Identity(), primary_key=True),
        sa.Column(
            "entity_id",
            sa.UUID(),
            sa.ForeignKey("listing.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("attribute_id", sa.UUID(), sa.ForeignKey("attribute.id"), nullable=False),
        sa.Column("text_value", sa.Text(), nullable=True),
        sa.Column("number_value", sa.Numeric(15, 2), nullable=True),
        sa.Column("boolean_value", sa.Boolean(), nullable=True),
        sa.Column("multi_select_value", sa.Text(), nullable=True),
        sa.Column("date_value", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("entity_id", "attribute_id", name="uq_attribute_value_entity_attribute"),
        sa.CheckConstraint(
            f"num_nonnulls({', '.join(VALUE_SLOTS)}) = 1",
            name="ck_attribute_value_one_slot",
        ),
    )
    op.create_index("ix_attribute_value_attribute", "attribute_value", ["attribute_id"])

    op.create_table(
        "saved_search",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column(
            "owner_id",
            sa.UUID(),
            sa.ForeignKey("app_user.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.String(500), nullable=True),
        sa.Column("filters", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_saved_search_owner", "saved_search", ["owner_id", "created_at"])

    op.create_table(
        "hierarchy_edge",
        sa.Column(
            "supervisor_id",
            sa.UUID(),
            sa.ForeignKey("app_user.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "subordinate_id",
            sa.UUID(),
            sa.ForeignKey("app_user.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("supervisor_id <> subordinate_id", name="ck_hierarchy_edge_no_self"),
    )
    op.create_index("ix_hierarchy_edge_subordinate", "hierarchy_edge", ["subordinate_id"])


def downgrade() -> None:
    op.drop_table("hierarchy_edge")
    op.drop_table("saved_search")
    op.drop_table("attribute_value")
    op.drop_table("attribute_option")
    op.drop_table("attribute")
    op.drop_table("listing")
    op.drop_table("app_user")

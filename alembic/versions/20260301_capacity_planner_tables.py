"""Create scenarios, roadmap_items, settings and activity_log tables

Revision ID: 20260301_capacity_tables
Revises:
Create Date: 2026-03-01
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


revision = "20260301_capacity_tables"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "scenarios",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("quarter", sa.String(length=10), nullable=False),
        sa.Column("year", sa.Integer(), nullable=True),
        sa.Column("committed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("ux_designers", sa.Float(), nullable=False, server_default="0"),
        sa.Column("content_designers", sa.Float(), nullable=False, server_default="0"),
        sa.Column("weeks_per_period", sa.Integer(), nullable=False, server_default="13"),
        sa.Column("sprint_length_weeks", sa.Integer(), nullable=False, server_default="2"),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.text("now()")),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.text("now()")),
    )
    op.create_index("ix_scenarios_quarter", "scenarios", ["quarter"])
    op.create_index("ix_scenarios_committed", "scenarios", ["committed"])

    op.create_table(
        "roadmap_items",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("scenario_id", sa.String(length=36), sa.ForeignKey("scenarios.id"), nullable=False),
        sa.Column("key", sa.String(length=50), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("initiative", sa.String(length=255), nullable=True),
        sa.Column("priority", sa.Integer(), nullable=True),
        sa.Column("status", sa.String(length=30), nullable=False, server_default="draft"),
        sa.Column("pm_intake", sa.JSON(), nullable=True),
        sa.Column("ux_factors", sa.JSON(), nullable=True),
        sa.Column("content_factors", sa.JSON(), nullable=True),
        sa.Column("ux_score", sa.Float(), nullable=True),
        sa.Column("content_score", sa.Float(), nullable=True),
        sa.Column("ux_size", sa.String(length=5), nullable=True),
        sa.Column("content_size", sa.String(length=5), nullable=True),
        sa.Column("ux_focus_weeks", sa.Float(), nullable=True),
        sa.Column("content_focus_weeks", sa.Float(), nullable=True),
        sa.Column("ux_work_weeks", sa.Float(), nullable=True),
        sa.Column("content_work_weeks", sa.Float(), nullable=True),
        sa.Column("start_date", sa.String(length=50), nullable=True),
        sa.Column("end_date", sa.String(length=50), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.text("now()")),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.text("now()")),
    )
    op.create_index("ix_roadmap_items_scenario_id", "roadmap_items", ["scenario_id"])

    op.create_table(
        "settings",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("effort_model", sa.JSON(), nullable=False),
        sa.Column("time_model", sa.JSON(), nullable=False),
        sa.Column("size_bands", sa.JSON(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.text("now()")),
    )

    op.create_table(
        "activity_log",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("timestamp", sa.DateTime(), nullable=False, server_default=sa.text("now()")),
        sa.Column("type", sa.String(length=50), nullable=False),
        sa.Column("scenario_id", sa.String(length=36), nullable=True),
        sa.Column("scenario_name", sa.String(length=255), nullable=True),
        sa.Column("description", sa.Text(), nullable=False),
    )
    op.create_index("ix_activity_log_timestamp", "activity_log", ["timestamp"])
    op.create_index("ix_activity_log_type", "activity_log", ["type"])
    op.create_index("ix_activity_log_scenario_id", "activity_log", ["scenario_id"])


def downgrade() -> None:
    op.drop_index("ix_activity_log_scenario_id", table_name="activity_log")
    op.drop_index("ix_activity_log_type", table_name="activity_log")
    op.drop_index("ix_activity_log_timestamp", table_name="activity_log")
    op.drop_table("activity_log")
    op.drop_table("settings")
    op.drop_index("ix_roadmap_items_scenario_id", table_name="roadmap_items")
    op.drop_table("roadmap_items")
    op.drop_index("ix_scenarios_committed", table_name="scenarios")
    op.drop_index("ix_scenarios_quarter", table_name="scenarios")
    op.drop_table("scenarios")

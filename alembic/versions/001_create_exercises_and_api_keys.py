"""Create exercises and api_keys tables.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create exercises and api_keys tables."""
    op.create_table(
        "exercises",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("category", sa.String(50), nullable=False),
        sa.Column("name_en", sa.Text(), nullable=False),
        sa.Column("name_zh", sa.Text(), nullable=False),
        sa.Column("description_en", sa.Text(), nullable=False),
        sa.Column("description_zh", sa.Text(), nullable=False),
        sa.Column("difficulty", sa.String(20), nullable=True),
        sa.Column("audience", sa.String(20), nullable=True),
        sa.Column("related_ids", sa.JSON(), nullable=True),
        sa.Column("scenario_en", sa.Text(), nullable=True),
        sa.Column("scenario_zh", sa.Text(), nullable=True),
        sa.Column("example_en", sa.Text(), nullable=True),
        sa.Column("example_zh", sa.Text(), nullable=True),
        sa.Column("alternative_en", sa.Text(), nullable=True),
        sa.Column("alternative_zh", sa.Text(), nullable=True),
        sa.Column("request_template_en", sa.Text(), nullable=True),
        sa.Column("request_template_zh", sa.Text(), nullable=True),
        sa.Column("gratitude_expression_en", sa.Text(), nullable=True),
        sa.Column("gratitude_expression_zh", sa.Text(), nullable=True),
        sa.Column("steps_en", sa.JSON(), nullable=True),
        sa.Column("steps_zh", sa.JSON(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_exercises_category"), "exercises", ["category"], unique=False)
    op.create_index(
        "ix_exercises_difficulty_audience", "exercises", ["difficulty", "audience"], unique=False
    )

    op.create_table(
        "api_keys",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("key_hash", sa.String(64), nullable=False),
        sa.Column("label", sa.String(255), nullable=False),
        sa.Column("status", sa.String(16), nullable=False),
        sa.Column(
            "issued_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.Column("last_used_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_api_keys_key_hash"), "api_keys", ["key_hash"], unique=True)


def downgrade() -> None:
    """Drop exercises and api_keys tables."""
    op.drop_index(op.f("ix_api_keys_key_hash"), table_name="api_keys")
    op.drop_table("api_keys")
    op.drop_index("ix_exercises_difficulty_audience", table_name="exercises")
    op.drop_index(op.f("ix_exercises_category"), table_name="exercises")
    op.drop_table("exercises")

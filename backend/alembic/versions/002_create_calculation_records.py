"""Create BMI and TDEE record tables

Revision ID: 002_create_calculation_records
Revises: 001_create_users

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "002_create_calculation_records"
down_revision: Union[str, None] = "001_create_users"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at():
    return sa.Column(
        "created_at",
        sa.DateTime(timezone=True),
        server_default=sa.text("now()"),
        nullable=False,
    )


def _owner():
    return sa.Column(
        "user_id",
        postgresql.UUID(as_uuid=True),
        sa.ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False,
    )


def upgrade() -> None:
    op.create_table(
        "bmi_records",
        sa.Column("record_id", postgresql.UUID(as_uuid=True), nullable=False),
        _owner(),
        sa.Column("height", sa.Float(), nullable=False),
        sa.Column("weight", sa.Float(), nullable=False),
        sa.Column("age", sa.Integer(), nullable=True),
        sa.Column("gender", sa.String(), nullable=True),
        sa.Column(
            "use_asian_standard",
            sa.Boolean(),
            server_default=sa.false(),
            nullable=False,
        ),
        sa.Column("bmi", sa.Float(), nullable=False),
        sa.Column("category", sa.String(), nullable=False),
        sa.Column("category_code", sa.String(), nullable=False),
        sa.Column("is_healthy", sa.Boolean(), nullable=False),
        sa.Column("who_standard", sa.String(), nullable=False),
        sa.Column("health_risks", postgresql.JSONB(), nullable=False),
        sa.Column("recommendations", postgresql.JSONB(), nullable=False),
        sa.Column("severity", sa.String(), nullable=False),
        sa.Column("color_code", sa.String(), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint("record_id"),
    )
    op.create_index(
        "ix_bmi_records_user_created",
        "bmi_records",
        ["user_id", "created_at"],
        unique=False,
    )

    op.create_table(
        "tdee_records",
        sa.Column("record_id", postgresql.UUID(as_uuid=True), nullable=False),
        _owner(),
        sa.Column("height", sa.Float(), nullable=False),
        sa.Column("weight", sa.Float(), nullable=False),
        sa.Column("age", sa.Integer(), nullable=False),
        sa.Column("gender", sa.String(), nullable=False),
        sa.Column("activity_level", sa.String(), nullable=False),
        sa.Column(
            "formula",
            sa.String(),
            server_default="mifflin_st_jeor",
            nullable=False,
        ),
        sa.Column("body_fat_percentage", sa.Float(), nullable=True),
        sa.Column("bmr", sa.Float(), nullable=False),
        sa.Column("tdee", sa.Float(), nullable=False),
        sa.Column("activity_multiplier", sa.Float(), nullable=False),
        sa.Column("macronutrients", postgresql.JSONB(), nullable=False),
        sa.Column("calorie_goals", postgresql.JSONB(), nullable=False),
        sa.Column("nutrition_advice", postgresql.JSONB(), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint("record_id"),
    )
    op.create_index(
        "ix_tdee_records_user_created",
        "tdee_records",
        ["user_id", "created_at"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("ix_tdee_records_user_created", table_name="tdee_records")
    op.drop_table("tdee_records")
    op.drop_index("ix_bmi_records_user_created", table_name="bmi_records")
    op.drop_table("bmi_records")

"""Create lessons, flashcards and quiz_session_records tables.

Revision ID: 001
Revises:
Create Date: 2026-10-19

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
    """Create the learning tables."""
    op.create_table(
        "lessons",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("owner_id", sa.String(128), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("visibility", sa.String(16), nullable=False, server_default="private"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_lessons_id"), "lessons", ["id"], unique=False)
    op.create_index(op.f("ix_lessons_owner_id"), "lessons", ["owner_id"], unique=False)
    op.create_index(op.f("ix_lessons_visibility"), "lessons", ["visibility"], unique=False)

    op.create_table(
        "flashcards",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("owner_id", sa.String(128), nullable=False),
        sa.Column("lesson_id", sa.Integer(), nullable=False),
        sa.Column("front", sa.Text(), nullable=False),
        sa.Column("back", sa.Text(), nullable=False),
        sa.Column("visibility", sa.String(16), nullable=False, server_default="private"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["lesson_id"], ["lessons.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_flashcards_id"), "flashcards", ["id"], unique=False)
    op.create_index(op.f("ix_flashcards_owner_id"), "flashcards", ["owner_id"], unique=False)
    op.create_index(op.f("ix_flashcards_lesson_id"), "flashcards", ["lesson_id"], unique=False)
    op.create_index(
        op.f("ix_flashcards_visibility"), "flashcards", ["visibility"], unique=False
    )

    op.create_table(
        "quiz_session_records",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("owner_id", sa.String(128), nullable=False),
        sa.Column("direction", sa.String(32), nullable=False),
        sa.Column("lesson_ids", sa.JSON(), nullable=True),
        sa.Column("score", sa.Integer(), nullable=False),
        sa.Column("total", sa.Integer(), nullable=False),
        sa.Column("aborted", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("answers", sa.JSON(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_quiz_session_records_id"), "quiz_session_records", ["id"], unique=False
    )
    op.create_index(
        op.f("ix_quiz_session_records_owner_id"),
        "quiz_session_records",
        ["owner_id"],
        unique=False,
    )
    op.create_index(
        op.f("ix_quiz_session_records_created_at"),
        "quiz_session_records",
        ["created_at"],
        unique=False,
    )


def downgrade() -> None:
    """Drop the learning tables."""
    op.drop_index(op.f("ix_quiz_session_records_created_at"), table_name="quiz_session_records")
    op.drop_index(op.f("ix_quiz_session_records_owner_id"), table_name="quiz_session_records")
    op.drop_index(op.f("ix_quiz_session_records_id"), table_name="quiz_session_records")
    op.drop_table("quiz_session_records")
    op.drop_index(op.f("ix_flashcards_visibility"), table_name="flashcards")
    op.drop_index(op.f("ix_flashcards_lesson_id"), table_name="flashcards")
    op.drop_index(op.f("ix_flashcards_owner_id"), table_name="flashcards")
    op.drop_index(op.f("ix_flashcards_id"), table_name="flashcards")
    op.drop_table("flashcards")
    op.drop_index(op.f("ix_lessons_visibility"), table_name="lessons")
    op.drop_index(op.f("ix_lessons_owner_id"), table_name="lessons")
    op.drop_index(op.f("ix_lessons_id"), table_name="lessons")
    op.drop_table("lessons")

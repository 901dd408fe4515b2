"""SQLAlchemy table definitions for StackIt.

Tables are used with SQLAlchemy Core; rows are mapped to the immutable
domain models by hand in ``stackit.persistence.mappers``. The schema itself
is created and migrated outside this service.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()


def _timestamps() -> tuple[Column, Column]:
    """Server-defaulted ``created_at``/``updated_at`` pair."""
    return (
        Column(
            "created_at",
            TIMESTAMP(timezone=True),
            nullable=False,
            server_default="NOW()",
        ),
        Column(
            "updated_at",
            TIMESTAMP(timezone=True),
            nullable=False,
            server_default="NOW()",
        ),
    )


# users
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(50), nullable=False, unique=True),
    Column("email", String(255), nullable=False, unique=True),  # Lower-cased
    Column("password_hash", String(255), nullable=False),  # bcrypt
    Column("avatar_url", Text, nullable=True),
    Column("bio", Text, nullable=True),
    Column("location", String(100), nullable=True),
    Column("website", Text, nullable=True),
    Column(
        "role",
        Enum("user", "admin", name="user_role", create_type=False),
        nullable=False,
        server_default="user",
    ),
    *_timestamps(),
    Column("last_login_at", TIMESTAMP(timezone=True), nullable=True),
)

# questions
questions_table = Table(
    "questions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(300), nullable=False),
    Column("description", Text, nullable=False),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("vote_count", Integer, nullable=False, server_default="0"),  # Ledger cache
    # No FK: answers reference questions, and the accepted answer is always
    # one of this question's answers
    Column("accepted_answer_id", UUID, nullable=True),
    *_timestamps(),
)

Index("idx_questions_created_at", questions_table.c.created_at.desc())
Index("idx_questions_vote_count", questions_table.c.vote_count.desc())
Index("idx_questions_author_id", questions_table.c.author_id)

# tags
tags_table = Table(
    "tags",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(50), nullable=False, unique=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# question <-> tag junction, ordered by position
question_tags_table = Table(
    "question_tags",
    metadata,
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "tag_id", UUID, ForeignKey("tags.id", ondelete="RESTRICT"), primary_key=True
    ),
    Column("position", Integer, nullable=False),  # Order the tags were given in
)

Index("idx_question_tags_tag_id", question_tags_table.c.tag_id)

# answers
answers_table = Table(
    "answers",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content", Text, nullable=False),
    Column("vote_count", Integer, nullable=False, server_default="0"),  # Ledger cache
    Column("is_accepted", Boolean, nullable=False, server_default="false"),
    *_timestamps(),
)

Index("idx_answers_question_id", answers_table.c.question_id)
Index("idx_answers_author_id", answers_table.c.author_id)

# At most one accepted answer per question
Index(
    "idx_answers_one_accepted_per_question",
    answers_table.c.question_id,
    unique=True,
    postgresql_where=answers_table.c.is_accepted.is_(True),
)

# vote ledger
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "target_type",
        Enum("question", "answer", name="vote_target_type", create_type=False),
        nullable=False,
    ),
    Column("target_id", UUID, nullable=False),  # Polymorphic: question or answer
    Column(
        "vote_type",
        Enum("up", "down", name="vote_type", create_type=False),
        nullable=False,
    ),
    *_timestamps(),
    UniqueConstraint("user_id", "target_type", "target_id", name="unique_vote"),
    CheckConstraint("vote_type IN ('up', 'down')", name="vote_type_valid"),
)

Index("idx_votes_target", votes_table.c.target_type, votes_table.c.target_id)

"""Create journals and organisation unit tables

Revision ID: 001
Revises: None
Create Date: 2026-10-17 00:00:00.000000+00:00

What:  Creates `faculties`, `institutes`, `divisions` and `journals`.
How:   Parents first so the NOT NULL foreign keys can reference them.

Rollback: downgrade() drops all four tables (destructive).
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "faculties",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "institutes",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("faculty_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["faculty_id"], ["faculties.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_institutes_faculty_id", "institutes", ["faculty_id"])

    op.create_table(
        "divisions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("institute_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["institute_id"], ["institutes.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_divisions_institute_id", "divisions", ["institute_id"])

    op.create_table(
        "journals",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(300), nullable=False, comment="Full journal title"),
        sa.Column("issn", sa.String(20), nullable=False, comment="Print ISSN"),
        sa.Column("eissn", sa.String(20), nullable=True, comment="Electronic ISSN"),
        sa.PrimaryKeyConstraint("id"),
    )
    # Lookup indexes for /ISSN/{issn} and /eISSN/{eissn}; not unique
    op.create_index("ix_journals_issn", "journals", ["issn"])
    op.create_index("ix_journals_eissn", "journals", ["eissn"])


def downgrade() -> None:
    op.drop_index("ix_journals_eissn", table_name="journals")
    op.drop_index("ix_journals_issn", table_name="journals")
    op.drop_table("journals")
    op.drop_index("ix_divisions_institute_id", table_name="divisions")
    op.drop_table("divisions")
    op.drop_index("ix_institutes_faculty_id", table_name="institutes")
    op.drop_table("institutes")
    op.drop_table("faculties")

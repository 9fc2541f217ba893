"""SQLAlchemy table definitions for Local Hunt.

They match the schema created by the Alembic migrations. Constraint names
are shared with the domain layer, which uses them to tell integrity
errors apart.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKeyConstraint,
    Index,
    MetaData,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

from hunt.domain.repository.constraints import (
    FK_COMMENTS_AUTHOR,
    FK_COMMENTS_PRODUCT,
    FK_PRODUCTS_AUTHOR,
    FK_VOTES_PRODUCT,
    FK_VOTES_USER,
    UQ_USERS_EMAIL,
    UQ_VOTES_USER_PRODUCT,
)

metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", Text, nullable=False),
    Column("email", Text, nullable=False),
    Column("avatar_url", Text, nullable=True),
    Column("location", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("email", name=UQ_USERS_EMAIL),
)

# ============================================================================
# PRODUCTS TABLE
# ============================================================================
products_table = Table(
    "products",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("author_id", UUID(as_uuid=True), nullable=False),
    Column("title", Text, nullable=False),
    Column("description", Text, nullable=False),
    Column("url", Text, nullable=False),
    Column("tags", ARRAY(Text), nullable=False, server_default="{}"),
    Column("location", Text, nullable=True),
    Column("is_made_in_my", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    ForeignKeyConstraint(["author_id"], ["users.id"], name=FK_PRODUCTS_AUTHOR),
)

Index("idx_products_created_at", products_table.c.created_at.desc())
Index("idx_products_author_id", products_table.c.author_id)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("user_id", UUID(as_uuid=True), nullable=False),
    Column("product_id", UUID(as_uuid=True), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    ForeignKeyConstraint(["user_id"], ["users.id"], name=FK_VOTES_USER),
    ForeignKeyConstraint(["product_id"], ["products.id"], name=FK_VOTES_PRODUCT),
    UniqueConstraint("user_id", "product_id", name=UQ_VOTES_USER_PRODUCT),
)

Index("idx_votes_product_id", votes_table.c.product_id)
Index("idx_votes_created_at", votes_table.c.created_at)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("content", Text, nullable=False),
    Column("author_id", UUID(as_uuid=True), nullable=False),
    Column("product_id", UUID(as_uuid=True), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    ForeignKeyConstraint(["author_id"], ["users.id"], name=FK_COMMENTS_AUTHOR),
    ForeignKeyConstraint(["product_id"], ["products.id"], name=FK_COMMENTS_PRODUCT),
)

Index("idx_comments_product_id", comments_table.c.product_id)

"""
SQLAlchemy mirror of the Supabase catalog schema.

The hosted database is created by supabase/migrations; these models restate
the same tables, defaults and constraints so that the constraint behavior can
be exercised against any SQLAlchemy engine (SQLite in the test suite).
Keep both in sync: tests/test_schema.py compares them column by column.
"""

import uuid

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    Text,
    UniqueConstraint,
    Uuid,
    event,
    func,
)
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base

from catalog.utils.constants import (
    CART_TABLE,
    DEFAULT_USER_STATUS,
    PARTS_TABLE,
    USER_STATUSES,
    USERS_TABLE,
    VERIFICATION_CODES_TABLE,
)

Base = declarative_base()

_status_values = ", ".join(f"'{status}'" for status in USER_STATUSES)


class CatalogUser(Base):
    __tablename__ = USERS_TABLE
    __table_args__ = (
        CheckConstraint(f"status IN ({_status_values})", name="catalog_users_status_check"),
        Index("idx_catalog_users_email", "email"),
        Index("idx_catalog_users_status", "status"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    email = Column(Text, unique=True, nullable=False)
    password_hash = Column(Text, nullable=False)
    name = Column(Text, nullable=False)
    company_name = Column(Text, nullable=False, default="")
    address = Column(Text, nullable=False, default="")
    phone_number = Column(Text, nullable=False, default="")
    status = Column(Text, nullable=False, default=DEFAULT_USER_STATUS)
    is_admin = Column(Boolean, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now())


class CatalogPart(Base):
    __tablename__ = PARTS_TABLE
    __table_args__ = (
        Index("idx_catalog_parts_category", "category"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    part_number = Column(Text, nullable=False)
    name_en = Column(Text, nullable=False)
    name_ru = Column(Text, nullable=False)
    category = Column(Text, nullable=False)
    price = Column(Numeric, nullable=False)
    qty = Column(Integer, default=0)
    image_url = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now())


class CartItem(Base):
    __tablename__ = CART_TABLE
    __table_args__ = (
        UniqueConstraint("user_id", "part_id", name="cart_user_id_part_id_key"),
        CheckConstraint("quantity > 0", name="cart_quantity_check"),
        Index("idx_cart_user_id", "user_id"),
        Index("idx_cart_part_id", "part_id"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey(f"{USERS_TABLE}.id", ondelete="CASCADE"))
    part_id = Column(Uuid, ForeignKey(f"{PARTS_TABLE}.id", ondelete="CASCADE"))
    quantity = Column(Integer, default=1)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class VerificationCode(Base):
    __tablename__ = VERIFICATION_CODES_TABLE
    __table_args__ = (
        Index("idx_verification_codes_email", "email"),
        Index("idx_verification_codes_code", "code"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    email = Column(Text, nullable=False)
    code = Column(Text, nullable=False)
    expires_at = Column(DateTime(timezone=True), nullable=False)
    used = Column(Boolean, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on
    module = type(dbapi_connection).__module__
    if module.startswith("sqlite3"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

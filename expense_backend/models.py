# expense_backend/models.py
# Database models: users, accounts, memberships and expenses

import logging

from sqlalchemy import (
    create_engine, event, Column, Integer, String, Date, Numeric, Text,
    ForeignKey, PrimaryKeyConstraint
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker

logger = logging.getLogger(__name__)

Base = declarative_base()

ADMIN_ROLE = "admin"

# ===== ENGINE & SESSIONS =====

def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()

def build_engine(url, **kwargs):
    """Create an engine; SQLite connections get foreign key enforcement."""
    engine = create_engine(url, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine

def engine_from_settings(settings):
    url = settings.sqlalchemy_url()
    connect_args = {}
    if str(url).startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return build_engine(url, connect_args=connect_args, pool_pre_ping=True)

def build_session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)

# ===== CORE USER MODEL =====

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False)
    # bcrypt hash, never the plaintext
    password = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)

    administered_accounts = relationship("Account", back_populates="admin")
    memberships = relationship("UserAccount", back_populates="user")

    def __repr__(self):
        return f"<User id={self.id} email={self.email!r}>"

# ===== ACCOUNTS & MEMBERSHIP =====

class Account(Base):
    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    admin_id = Column(Integer, ForeignKey("users.id"), nullable=False)

    admin = relationship("User", back_populates="administered_accounts")
    members = relationship("UserAccount", back_populates="account")
    expenses = relationship("Expense", back_populates="account")

class UserAccount(Base):
    """A user's role within an account; one role per (user, account)."""
    __tablename__ = "user_account"
    __table_args__ = (
        PrimaryKeyConstraint("user_id", "account_id"),
    )

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False)
    role = Column(String(50), nullable=False)

    user = relationship("User", back_populates="memberships")
    account = relationship("Account", back_populates="members")

# ===== EXPENSES =====

class Expense(Base):
    __tablename__ = "expenses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    date = Column(Date, nullable=False)
    created_by = Column(Integer, ForeignKey("users.id"), nullable=False)
    type = Column(String(50), nullable=False)
    image_path = Column(Text, nullable=True)
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False)

    account = relationship("Account", back_populates="expenses")
    creator = relationship("User")

# ===== CREATE TABLES =====

def create_tables(engine):
    """Create any missing tables, parents before children."""
    try:
        for table in Base.metadata.sorted_tables:
            table.create(bind=engine, checkfirst=True)
            logger.info(f"{table.name} table created or already exists")
    except Exception as e:
        logger.error(f"Error creating tables: {e}")
        raise

def drop_tables(engine):
    """Drop every table known to the models."""
    Base.metadata.drop_all(bind=engine)
    logger.info("All tables dropped")

#!/usr/bin/env python3
"""
Development tools for the expense backend.
Database reset, demo data and statistics.
"""

import argparse
import random
from datetime import date, timedelta
from decimal import Decimal

from expense_backend import models
from expense_backend.auth import AuthManager
from expense_backend.config import get_settings
from expense_backend.exceptions import Conflict
from expense_backend.services import AccountService, CredentialService, ExpenseService

DEMO_EMAIL = "demo@example.com"
DEMO_PASSWORD = "demo123"

SAMPLE_EXPENSES = [
    {"name": "Grocery Store", "amount": Decimal("45.67"), "type": "Food & Dining"},
    {"name": "Gas Station", "amount": Decimal("52.30"), "type": "Transportation"},
    {"name": "Coffee Shop", "amount": Decimal("4.50"), "type": "Food & Dining"},
    {"name": "Online Store", "amount": Decimal("89.99"), "type": "Shopping"},
    {"name": "Electric Bill", "amount": Decimal("125.45"), "type": "Bills & Utilities"},
    {"name": "Internet Bill", "amount": Decimal("49.99"), "type": "Bills & Utilities"},
    {"name": "Restaurant", "amount": Decimal("67.80"), "type": "Food & Dining"},
    {"name": "Movie Theater", "amount": Decimal("25.50"), "type": "Entertainment"},
    {"name": "Pharmacy", "amount": Decimal("18.75"), "type": "Healthcare"},
]

def reset_database(engine):
    """Reset the database by dropping and recreating all tables."""
    print("⚠️  Resetting database...")
    models.drop_tables(engine)
    models.create_tables(engine)
    print("✅ Database reset complete!")

def create_demo_user(session_factory, auth_manager):
    """Sign up the demo user; returns (user_id, account_id)."""
    db = session_factory()
    try:
        credentials = CredentialService(db, auth_manager)
        try:
            user_id = credentials.register(DEMO_EMAIL, DEMO_PASSWORD, "Demo User")
            print(f"👤 Created demo user: {DEMO_EMAIL} / {DEMO_PASSWORD}")
        except Conflict:
            user_id = db.query(models.User).filter(models.User.email == DEMO_EMAIL).one().id
            print("👤 Demo user already exists")

        account = AccountService(db).get_admin_accounts(user_id)[0]
        return user_id, account.id
    finally:
        db.close()

def create_sample_expenses(session_factory, user_id: int, account_id: int, count: int = 50):
    """Insert random expenses from the last 90 days."""
    db = session_factory()
    try:
        expenses = ExpenseService(db)
        for i in range(count):
            sample = random.choice(SAMPLE_EXPENSES)
            jitter = Decimal(random.randint(-500, 500)) / 100
            expenses.add_expense(
                name=f"{sample['name']} {i + 1}",
                amount=max(sample["amount"] + jitter, Decimal("0.01")),
                date=date.today() - timedelta(days=random.randint(0, 90)),
                created_by=user_id,
                type=sample["type"],
                image_path=None,
                account_id=account_id,
            )
        print(f"💰 Created {count} sample expenses in account {account_id}")
    finally:
        db.close()

def show_stats(session_factory):
    """Show database statistics."""
    db = session_factory()
    try:
        print("📊 Database Statistics:")
        print(f"   Users: {db.query(models.User).count()}")
        print(f"   Accounts: {db.query(models.Account).count()}")
        print(f"   Memberships: {db.query(models.UserAccount).count()}")
        print(f"   Expenses: {db.query(models.Expense).count()}")
    finally:
        db.close()

def main(argv=None):
    """Main CLI interface."""
    parser = argparse.ArgumentParser(description="Expense backend development tools")
    parser.add_argument("command", choices=["reset", "demo", "stats"],
                        help="Command to execute")
    parser.add_argument("--expenses", type=int, default=50,
                        help="Number of sample expenses to create")
    args = parser.parse_args(argv)

    settings = get_settings()
    engine = models.engine_from_settings(settings)
    session_factory = models.build_session_factory(engine)

    try:
        if args.command == "reset":
            reset_database(engine)

        elif args.command == "demo":
            reset_database(engine)
            user_id, account_id = create_demo_user(session_factory, AuthManager.from_settings(settings))
            create_sample_expenses(session_factory, user_id, account_id, args.expenses)
            show_stats(session_factory)
            print("\n🎉 Demo setup complete!")
            print(f"   Login with: {DEMO_EMAIL} / {DEMO_PASSWORD}")

        elif args.command == "stats":
            models.create_tables(engine)
            show_stats(session_factory)
    finally:
        engine.dispose()

if __name__ == "__main__":
    main()

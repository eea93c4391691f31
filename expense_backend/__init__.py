# expense_backend/__init__.py
"""Expense tracking backend: users, personal accounts and expenses over REST."""

__version__ = "1.0.0"

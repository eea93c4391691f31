# expense_backend/routers/__init__.py
# Router package initialization

"""
API Routers for the expense backend.

- auth: signup and login
- users: user lookup
- accounts: admin accounts and their expenses
- expenses: expense creation
"""

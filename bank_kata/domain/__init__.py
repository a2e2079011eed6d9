"""Domain model: transactions and accounts."""
from bank_kata.domain.account import Account
from bank_kata.domain.statement_filter import StatementFilter
from bank_kata.domain.transaction import Transaction, balance_of

__all__ = [
    "Account",
    "StatementFilter",
    "Transaction",
    "balance_of",
]

"""Ledger deletes guarded against orphaning accounts and transactions."""
from __future__ import annotations

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.errors import ConflictError
from ..models import Account, AccountType, Transaction, TransactionType
from ..repositories import base as repo


async def delete_account_type(account_type_id: int, session: AsyncSession) -> None:
    async with session.begin():
        account_type = await repo.get_or_404(session, AccountType, account_type_id)
        in_use = await repo.count(session, Account, Account.account_type_id == account_type_id)
        if in_use:
            raise ConflictError(f"Account type {account_type_id} is used by {in_use} account(s)")
        await session.delete(account_type)


async def delete_account(account_id: int, session: AsyncSession) -> None:
    async with session.begin():
        account = await repo.get_or_404(session, Account, account_id)
        in_use = await repo.count(session, Transaction, Transaction.account_id == account_id)
        if in_use:
            raise ConflictError(f"Account {account_id} has {in_use} transaction(s)")
        await session.delete(account)


async def delete_transaction_type(transaction_type_id: int, session: AsyncSession) -> None:
    """Delete a transaction type; its transactions become untyped."""

    async with session.begin():
        transaction_type = await repo.get_or_404(session, TransactionType, transaction_type_id)
        await session.execute(
            update(Transaction)
            .where(Transaction.transaction_type_id == transaction_type_id)
            .values(transaction_type_id=None)
        )
        await session.delete(transaction_type)

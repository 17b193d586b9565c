"""Minimal ledger: account types, accounts, transaction types and transactions."""
from __future__ import annotations

import datetime as dt
from typing import TYPE_CHECKING

from sqlalchemy import Date, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .property import Property


class AccountType(TimestampMixin, Base):
    __tablename__ = "account_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, nullable=False, unique=True)

    accounts: Mapped[list["Account"]] = relationship(
        "Account", back_populates="account_type", order_by="Account.id"
    )


class Account(TimestampMixin, Base):
    """Ledger account such as rent income or maintenance expense."""

    __tablename__ = "accounts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    account_type_id: Mapped[int] = mapped_column(ForeignKey("account_types.id"), nullable=False, index=True)

    account_type: Mapped["AccountType"] = relationship("AccountType", back_populates="accounts")
    transactions: Mapped[list["Transaction"]] = relationship(
        "Transaction", back_populates="account", order_by="Transaction.id"
    )


class TransactionType(TimestampMixin, Base):
    __tablename__ = "transaction_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, nullable=False, unique=True)

    transactions: Mapped[list["Transaction"]] = relationship(
        "Transaction", back_populates="transaction_type", passive_deletes=True
    )


class Transaction(TimestampMixin, Base):
    """Ledger entry against an account, optionally tied to a property."""

    __tablename__ = "transactions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    account_id: Mapped[int] = mapped_column(ForeignKey("accounts.id"), nullable=False, index=True)
    transaction_type_id: Mapped[int | None] = mapped_column(
        ForeignKey("transaction_types.id", ondelete="SET NULL"), index=True
    )
    property_id: Mapped[int | None] = mapped_column(ForeignKey("properties.id", ondelete="SET NULL"), index=True)
    amount: Mapped[float] = mapped_column(Float, nullable=False)
    date: Mapped[dt.date | None] = mapped_column(Date)
    description: Mapped[str | None] = mapped_column(String)

    account: Mapped["Account"] = relationship("Account", back_populates="transactions")
    transaction_type: Mapped["TransactionType | None"] = relationship(
        "TransactionType", back_populates="transactions"
    )
    property: Mapped["Property | None"] = relationship("Property", back_populates="transactions")

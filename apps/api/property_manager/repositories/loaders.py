"""Eager-load options matching the nested shape of each read schema.

Async sessions cannot lazy-load, so every relation a response serialises must
be listed here.
"""
from __future__ import annotations

from sqlalchemy.orm import selectinload

from ..models import (
    Account,
    Association,
    BoardMember,
    MaintenanceTicket,
    Owner,
    Payment,
    Portfolio,
    Property,
    PropertyAddress,
    Subscription,
    Tenant,
    Transaction,
    Unit,
)

PROPERTY = (
    selectinload(Property.owner),
    selectinload(Property.addresses).selectinload(PropertyAddress.units),
    selectinload(Property.photos),
    selectinload(Property.associations),
    selectinload(Property.transactions),
    selectinload(Property.portfolios),
)

ADDRESS = (selectinload(PropertyAddress.units),)

UNIT = (
    selectinload(Unit.property),
    selectinload(Unit.address),
    selectinload(Unit.tenants),
    selectinload(Unit.photos),
    selectinload(Unit.maintenance_tickets),
)

TENANT = (
    selectinload(Tenant.unit),
    selectinload(Tenant.payments),
)

OWNER = (selectinload(Owner.properties),)

ASSOCIATION = (
    selectinload(Association.property),
    selectinload(Association.board_members),
)

BOARD_MEMBER = (selectinload(BoardMember.association),)

ACCOUNT = (
    selectinload(Account.account_type),
    selectinload(Account.transactions),
)

TRANSACTION = (
    selectinload(Transaction.account),
    selectinload(Transaction.transaction_type),
    selectinload(Transaction.property),
)

PAYMENT = (selectinload(Payment.tenant),)

TICKET = (selectinload(MaintenanceTicket.unit),)

SUBSCRIPTION = (selectinload(Subscription.plan),)

PORTFOLIO = (selectinload(Portfolio.properties),)

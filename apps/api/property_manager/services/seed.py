"""Sample data inserted at boot.

Seeding is per group and only touches empty tables, so running it against a
populated database is a no-op.
"""
from __future__ import annotations

import logging
from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from ..models import (
    Account,
    AccountType,
    Association,
    BoardMember,
    MaintenanceTicket,
    Owner,
    Payment,
    Photo,
    Portfolio,
    PortfolioProperty,
    Property,
    PropertyAddress,
    SubscriptionPlan,
    Tenant,
    TicketPriority,
    Transaction,
    TransactionType,
    Unit,
)
from ..repositories import base as repo

logger = logging.getLogger(__name__)

ACCOUNT_TYPES = ["Asset", "Liability", "Income", "Expense"]
TRANSACTION_TYPES = ["Income", "Expense", "Transfer"]

PLANS = [
    {"name": "Starter", "price": 0.0, "interval": "month", "features": ["1 property", "Tenant records"]},
    {
        "name": "Professional",
        "price": 29.0,
        "interval": "month",
        "features": ["25 properties", "Ledger", "Maintenance tickets"],
    },
    {
        "name": "Enterprise",
        "price": 99.0,
        "interval": "month",
        "features": ["Unlimited properties", "Portfolios", "Priority support"],
    },
]

PROPERTIES = [
    {
        "name": "Main St Property",
        "type": "multi_family",
        "value": 500_000.0,
        "address": {"street": "123 Main St", "city": "Portland", "state": "OR", "zip": "97201"},
        "photo": "https://picsum.photos/seed/mainst/800/600",
        "units": [{"unit_number": "101", "rent_amount": 1200.0, "status": "occupied"}],
    },
    {
        "name": "Oak Ave Property",
        "type": "multi_family",
        "value": 600_000.0,
        "address": {"street": "456 Oak Ave", "city": "Seattle", "state": "WA", "zip": "98101"},
        "photo": "https://picsum.photos/seed/oakave/800/600",
        "units": [{"unit_number": "201", "rent_amount": 1500.0, "status": "vacant"}],
    },
]


async def seed_database(session: AsyncSession) -> list[str]:
    """Insert every sample group whose tables are still empty.

    Returns the names of the groups that were inserted.
    """

    seeded: list[str] = []
    async with session.begin():
        if await _seed_names(session, AccountType, ACCOUNT_TYPES):
            seeded.append("account_types")
        if await _seed_names(session, TransactionType, TRANSACTION_TYPES):
            seeded.append("transaction_types")
        if await _seed_plans(session):
            seeded.append("subscription_plans")
        if await _seed_properties(session):
            seeded.append("properties")

    if seeded:
        logger.info("Seeded sample data: %s", ", ".join(seeded))
    else:
        logger.info("Sample data already present; nothing seeded")
    return seeded


async def _seed_names(session: AsyncSession, model: type[AccountType] | type[TransactionType], names: list[str]) -> bool:
    if await repo.count(session, model):
        return False
    session.add_all(model(name=name) for name in names)
    await session.flush()
    return True


async def _seed_plans(session: AsyncSession) -> bool:
    if await repo.count(session, SubscriptionPlan):
        return False
    session.add_all(SubscriptionPlan(**plan) for plan in PLANS)
    await session.flush()
    return True


async def _seed_properties(session: AsyncSession) -> bool:
    """Insert the sample property graph when no property exists yet."""

    if await repo.count(session, Property):
        return False

    owner = Owner(name="John Doe", email="john@example.com", phone="555-0101")
    session.add(owner)
    await session.flush()

    properties: list[Property] = []
    units: list[Unit] = []
    for sample in PROPERTIES:
        prop = Property(name=sample["name"], type=sample["type"], status="active", value=sample["value"], owner_id=owner.id)
        session.add(prop)
        await session.flush()
        address = PropertyAddress(property_id=prop.id, is_primary=True, **sample["address"])
        session.add(address)
        session.add(Photo(property_id=prop.id, url=sample["photo"], name=sample["name"], is_primary=True))
        await session.flush()
        for unit_data in sample["units"]:
            unit = Unit(property_id=prop.id, address_id=address.id, **unit_data)
            session.add(unit)
            units.append(unit)
        properties.append(prop)
    await session.flush()

    main_st, oak_ave = properties
    occupied_unit, vacant_unit = units

    tenant = Tenant(
        unit_id=occupied_unit.id,
        name="Jane Smith",
        email="jane@example.com",
        phone="555-0102",
        lease_start_date=date(2025, 1, 1),
        lease_end_date=date(2026, 1, 1),
        rent=1200.0,
    )
    association = Association(
        property_id=main_st.id,
        name="Main St HOA",
        contact_info="hoa@mainst.com",
        fee=100.0,
        due_date=date(2025, 2, 1),
    )
    session.add_all([tenant, association])
    await session.flush()

    session.add(Payment(tenant_id=tenant.id, amount=1200.0, date=date(2025, 1, 1), status="paid"))
    session.add(BoardMember(association_id=association.id, name="Alice Brown", email="alice@example.com", phone="555-0103"))
    session.add(
        MaintenanceTicket(
            unit_id=vacant_unit.id,
            title="Repaint before move-in",
            description="Walls and trim in living room",
            priority=TicketPriority.LOW,
        )
    )

    income_type = await _named(session, AccountType, "Income")
    expense_type = await _named(session, AccountType, "Expense")
    rent_income = Account(name="Rent Income", account_type_id=income_type.id)
    maintenance_expense = Account(name="Maintenance Expense", account_type_id=expense_type.id)
    session.add_all([rent_income, maintenance_expense])
    await session.flush()

    income_tx_type = await _named(session, TransactionType, "Income")
    expense_tx_type = await _named(session, TransactionType, "Expense")
    session.add_all(
        [
            Transaction(
                account_id=rent_income.id,
                transaction_type_id=income_tx_type.id,
                property_id=main_st.id,
                amount=1200.0,
                date=date(2025, 1, 1),
                description="Rent Payment",
            ),
            Transaction(
                account_id=maintenance_expense.id,
                transaction_type_id=expense_tx_type.id,
                property_id=oak_ave.id,
                amount=500.0,
                date=date(2025, 1, 15),
                description="Maintenance",
            ),
        ]
    )

    portfolio = Portfolio(user_id="demo-user", name="Pacific Northwest", description="Sample portfolio")
    session.add(portfolio)
    await session.flush()
    session.add_all(PortfolioProperty(portfolio_id=portfolio.id, property_id=prop.id) for prop in properties)
    await session.flush()
    return True


async def _named(session: AsyncSession, model, name: str):
    """Return the reference row called ``name``, creating it if an operator removed it."""

    rows = await repo.list_all(session, model, where=[model.name == name])
    if rows:
        return rows[0]
    row = model(name=name)
    session.add(row)
    await session.flush()
    return row

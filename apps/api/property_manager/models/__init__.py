"""Expose ORM models."""
from .association import Association, BoardMember
from .base import Base
from .ledger import Account, AccountType, Transaction, TransactionType
from .maintenance import MaintenanceTicket, TicketPriority, TicketStatus
from .owner import Owner
from .photo import Photo
from .portfolio import Portfolio, PortfolioProperty
from .property import Property, PropertyAddress
from .subscription import Subscription, SubscriptionPlan, SubscriptionStatus
from .tenant import Payment, Tenant
from .unit import Unit

__all__ = [
    "Account",
    "AccountType",
    "Association",
    "Base",
    "BoardMember",
    "MaintenanceTicket",
    "Owner",
    "Payment",
    "Photo",
    "Portfolio",
    "PortfolioProperty",
    "Property",
    "PropertyAddress",
    "Subscription",
    "SubscriptionPlan",
    "SubscriptionStatus",
    "Tenant",
    "TicketPriority",
    "TicketStatus",
    "Transaction",
    "TransactionType",
    "Unit",
]

"""
Database models.
Import all models here to ensure they're registered with Base.
"""

from app.models.client import Client, ClientStage
from app.models.vendor import Vendor, VendorStatus
from app.models.budget import Budget, BudgetPeriod
from app.models.payment import Payment, PaymentMethod, PaymentStatus
from app.models.expense import Expense, ExpenseStatus
from app.models.client_financial_summary import ClientFinancialSummary
from app.models.task import Task, TaskStatus, TaskPriority
from app.models.calendar_event import CalendarEvent, EventType
from app.models.journal_entry import JournalEntry

__all__ = [
    "Client",
    "ClientStage",
    "Vendor",
    "VendorStatus",
    "Budget",
    "BudgetPeriod",
    "Payment",
    "PaymentMethod",
    "PaymentStatus",
    "Expense",
    "ExpenseStatus",
    "ClientFinancialSummary",
    "Task",
    "TaskStatus",
    "TaskPriority",
    "CalendarEvent",
    "EventType",
    "JournalEntry",
]

"""
Services package - Filtering, batch sending and the accounting integration.
"""

from .accounting import AccountingGateway, HttpAccountingGateway
from .filtering import InvoiceFilter
from .sender import LowValueInvoiceSender

__all__ = [
    "AccountingGateway",
    "HttpAccountingGateway",
    "InvoiceFilter",
    "LowValueInvoiceSender",
]

"""
invoicesync - Forward low-value invoices to an external accounting system.

Invoices are read from a record store, filtered by value, and sent one by
one to the accounting endpoint. Delivery failures are collected per invoice
instead of aborting the batch.
"""

__version__ = "0.1.0"

"""
Infrastructure package - Database and invoice storage.
"""

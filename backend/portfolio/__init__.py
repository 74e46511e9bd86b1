"""
Portfolio site data model: tables, insertable/persisted shapes and validators
"""

__version__ = "0.1.0"

"""Constants for domain model field names"""

from .account_fields import AccountFields

__all__ = [
    "AccountFields",
]

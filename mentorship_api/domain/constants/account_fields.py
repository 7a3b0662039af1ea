"""Constants for Account document field names"""


class AccountFields:
    """Field name constants for Account documents"""
    ID = "id"
    NAME = "name"
    EMAIL = "email"
    PASSWORD = "password"  # holds the bcrypt hash, never plaintext

    # MongoDB specific
    MONGO_ID = "_id"

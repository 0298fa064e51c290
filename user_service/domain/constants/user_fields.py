"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    EMAIL = "email"
    NAME = "name"

    # Relational storage
    TABLE = "users"

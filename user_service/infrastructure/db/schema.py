"""SQLAlchemy Core table definitions for the user store.

The ``Integer`` primary key renders as ``SERIAL`` on PostgreSQL.
"""

# External package imports
from sqlalchemy import Column, Integer, MetaData, Table, Text

# Local application imports
from ...domain.constants import UserFields


metadata = MetaData()

users = Table(
    UserFields.TABLE,
    metadata,
    Column(UserFields.ID, Integer, primary_key=True, autoincrement=True),
    Column(UserFields.EMAIL, Text, nullable=False, unique=True),
    Column(UserFields.NAME, Text, nullable=False),
)

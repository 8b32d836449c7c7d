"""
Declarative base shared by all ORM models of the worldfeel service.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass

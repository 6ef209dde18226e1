"""SQLAlchemy model for the pets table."""
from __future__ import annotations

from sqlalchemy import Column, Integer, Text

from petcatalog.domain.contract import Gender, TABLE_NAME

from .session import Base


class Pet(Base):
    __tablename__ = TABLE_NAME

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    breed = Column(Text, nullable=False)
    gender = Column(Integer, nullable=False, default=int(Gender.UNKNOWN))
    weight = Column(Integer, nullable=False, default=0, server_default="0")

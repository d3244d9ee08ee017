"""SQLAlchemy ORM models."""

from sqlalchemy import BigInteger, Column, Integer, Numeric

from cashcard.infrastructure.database.base import Base

# SQLite only autoincrements an "INTEGER PRIMARY KEY" column.
IdType = BigInteger().with_variant(Integer, "sqlite")


class CashCard(Base):
    __tablename__ = "cash_card"

    id = Column(IdType, primary_key=True, autoincrement=True)
    amount = Column(Numeric(12, 2, asdecimal=True), nullable=False)

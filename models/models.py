from sqlalchemy import Column, String, Float, Integer
from connect_db import Base

class Expense(Base):
    __tablename__ = "expenses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    payee = Column(String, nullable=False)
    amount = Column(Float, nullable=False)
    date = Column(String, nullable=False, index=True)  # YYYY-MM-DD, compared as an opaque key

    def to_record(self) -> dict:
        """Serialize the row into the JSON shape returned by the API."""
        return {
            "expense_id": self.id,
            "payee": self.payee,
            "amount": self.amount,
            "date": self.date,
        }

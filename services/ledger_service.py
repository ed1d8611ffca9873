from abc import ABC, abstractmethod
from dataclasses import dataclass
import math
from numbers import Real
from typing import Any, Dict, List, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from models.models import Expense
from utils.logger import logger


@dataclass(frozen=True)
class RecordSuccess:
    """The ledger accepted the expense and stored it under `expense_id`."""
    expense_id: int

    @property
    def success(self) -> bool:
        return True


@dataclass(frozen=True)
class RecordFailure:
    """The ledger rejected the expense; `error_message` says why."""
    error_message: str

    @property
    def success(self) -> bool:
        return False


RecordResult = Union[RecordSuccess, RecordFailure]


class Ledger(ABC):
    """
    Persistence contract consumed by the expenses API.
    One instance is created by the hosting process and shared by all requests.
    """

    @abstractmethod
    def record(self, expense: Dict[str, Any]) -> RecordResult:
        """Validate and persist an expense."""

    @abstractmethod
    def expenses_on(self, date: str) -> List[Any]:
        """Return everything recorded under the given date key."""


class DatabaseLedger(Ledger):
    """Ledger backed by the `expenses` table through SQLAlchemy."""

    REQUIRED_FIELDS = ("payee", "amount", "date")

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def record(self, expense: Dict[str, Any]) -> RecordResult:
        error_message = self._validate(expense)
        if error_message:
            return RecordFailure(error_message)

        with self.session_factory() as session:
            try:
                row = Expense(
                    payee=expense["payee"],
                    amount=float(expense["amount"]),
                    date=expense["date"],
                )
                session.add(row)
                session.commit()
                session.refresh(row)
            except SQLAlchemyError as e:
                session.rollback()
                logger.error(f"Record expense error: {e}")
                raise

            logger.info(f"Recorded expense: {row.id} on {row.date}")
            return RecordSuccess(expense_id=row.id)

    def expenses_on(self, date: str) -> List[Dict[str, Any]]:
        with self.session_factory() as session:
            rows = (
                session.query(Expense)
                .filter(Expense.date == date)
                .order_by(Expense.id)
                .all()
            )
            return [row.to_record() for row in rows]

    def _validate(self, expense: Dict[str, Any]) -> str:
        """Return an error message for the first problem found, or an empty string."""
        for field_name in self.REQUIRED_FIELDS:
            if field_name not in expense:
                return f"Invalid expense: `{field_name}` is required"

        if not isinstance(expense["payee"], str):
            return "Invalid expense: `payee` must be a string"
        if not self._is_valid_amount(expense["amount"]):
            return "Invalid expense: `amount` must be a number"
        if not isinstance(expense["date"], str):
            return "Invalid expense: `date` must be a string"

        return ""

    @staticmethod
    def _is_valid_amount(amount: Any) -> bool:
        # bool is a Real subclass but never a valid amount
        if isinstance(amount, bool) or not isinstance(amount, Real):
            return False
        # inf and nan cannot be stored or sent back as JSON
        try:
            return math.isfinite(float(amount))
        except OverflowError:
            return False

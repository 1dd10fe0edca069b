"""Credit card application record."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CreditCardApplication(BaseModel):
    """
    Applicant details submitted for a credit card.

    Missing values default to zero or an empty string and are treated as
    valid low-end inputs by the evaluator. The record is frozen once built.
    """

    gross_annual_income: Decimal = Field(default=Decimal("0"))
    age: int = 0
    frequent_flyer_number: Optional[str] = ""
    last_name: Optional[str] = ""

    model_config = ConfigDict(frozen=True)

    def __repr__(self) -> str:
        return (
            f"<CreditCardApplication(income={self.gross_annual_income}, "
            f"age={self.age}, last_name={self.last_name!r})>"
        )

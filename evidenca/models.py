import math
from datetime import datetime
from typing import Optional, Union

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator
from pytz import UTC

# BSON hrani cela števila kot 64-bitna
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class ExpenseIn(BaseModel):
    """Strošek kot ga pošlje odjemalec: {name, amount}."""

    model_config = ConfigDict(extra="ignore")

    name: StrictStr = Field(min_length=1)
    amount: Union[int, float]

    @field_validator("amount", mode="before")
    @classmethod
    def _amount_is_number(cls, value):
        # bool je v Pythonu podrazred int, zato ga izločimo posebej
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("amount must be a number")
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError("amount must be finite")
        if isinstance(value, int) and not INT64_MIN <= value <= INT64_MAX:
            try:
                value = float(value)
            except OverflowError:
                raise ValueError("amount out of range") from None
        return value


class EmployeeIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    ime: StrictStr = Field(min_length=1)
    priimek: StrictStr = Field(min_length=1)
    email: StrictStr = Field(min_length=1)
    polozaj: StrictStr = Field(min_length=1)


class FinancialReportIn(BaseModel):
    """
    Finančno poročilo. Avtor je samo referenca (ObjectId) na dokument
    v kolekciji zaposleni, poročilo ga ne vsebuje.
    """

    model_config = ConfigDict(extra="ignore")

    naslov: StrictStr = Field(min_length=1)
    vsebina: StrictStr = Field(min_length=1)
    datum: datetime = Field(default_factory=lambda: datetime.now(UTC))
    avtor: Optional[str] = None

    @field_validator("avtor", mode="before")
    @classmethod
    def _avtor_is_object_id(cls, value):
        if value is None:
            return None
        if isinstance(value, ObjectId):
            return str(value)
        if not isinstance(value, str) or not ObjectId.is_valid(value):
            raise ValueError("avtor must be an ObjectId")
        return value

    def to_document(self) -> dict:
        doc = self.model_dump()
        if self.avtor is not None:
            doc["avtor"] = ObjectId(self.avtor)
        return doc

"""
Pydantic schemas for parser results and request/response validation.
"""
from datetime import date, datetime, timezone
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_NOTE = "Quick expense"

TransactionType = Literal["INCOME", "EXPENSE"]
DetectedType = Literal["INCOME", "EXPENSE", "UNKNOWN"]


def normalize_type(v):
    """Accept lower/mixed case type labels from clients."""
    if isinstance(v, str):
        v = v.strip().upper()
        return v or None
    return v


class ExtractedAmount(BaseModel):
    """Amount and residual note pulled out of quick input text."""
    model_config = ConfigDict(frozen=True)

    amount: float = Field(..., ge=0)
    note: str = Field(..., min_length=1)


class ParsedInput(BaseModel):
    """
    Structured result of parsing one quick input phrase.
    Immutable; built once per call.
    """
    model_config = ConfigDict(frozen=True)

    amount: float = Field(..., ge=0, description="Amount with magnitude suffix applied")
    note: str = Field(..., min_length=1, description="Input text with the amount removed")
    type: DetectedType = Field(..., description="Explicit type or keyword guess")


class QuickInputRequest(BaseModel):
    """Body of the quick input endpoints."""
    input: Optional[str] = None
    type: Optional[TransactionType] = None

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, v):
        return normalize_type(v)


class TransactionCreate(BaseModel):
    """Transaction creation request handed to the store."""
    amount: float = Field(..., ge=0, allow_inf_nan=False)
    note: Optional[str] = None
    type: TransactionType
    category_id: Optional[str] = None
    transaction_date: date = Field(default_factory=date.today)


class Transaction(TransactionCreate):
    """Stored transaction record."""
    id: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ApiError(BaseModel):
    code: str
    message: str


def success_response(data: Any) -> Dict[str, Any]:
    """Wrap payload in the success envelope."""
    return {"success": True, "data": data}


def error_response(code: str, message: str) -> Dict[str, Any]:
    """Wrap an error code and message in the failure envelope."""
    return {"success": False, "error": ApiError(code=code, message=message).model_dump()}

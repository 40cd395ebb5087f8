"""
FastAPI routes for quick transaction input.
Thin API layer over TransactionService; all responses use the
{"success": ..., "data"/"error": ...} envelope.
"""
from typing import Literal, Optional

from fastapi import FastAPI, Query
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from core.config import get_settings
from core.exceptions import ParsingError, ValidationError
from core.logger import setup_logger
from core.schema import QuickInputRequest, error_response, success_response
from services.transaction_service import TransactionService

logger = setup_logger(__name__)
settings = get_settings()

app = FastAPI(
    title="Family Finance Quick Input",
    description="Turn free-text phrases like 'coffee 50k' into transactions",
    version="1.0.0"
)

# Service instance
transaction_service = TransactionService()


def envelope(status_code: int, payload: dict) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=jsonable_encoder(payload))


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "quick_input",
        "version": "1.0.0"
    }


@app.post("/api/transactions/quick")
async def create_quick_transaction(request: QuickInputRequest):
    """
    Create a transaction from a free-text phrase.

    Args:
        request: Quick input text and optional explicit type

    Returns:
        201 with the created transaction, 400 if the input is missing
        or contains no amount
    """
    try:
        transaction = transaction_service.create_quick_transaction(request.input, request.type)
        return envelope(201, success_response(transaction))

    except (ValidationError, ParsingError) as e:
        return envelope(400, error_response(e.code, e.message))

    except Exception as e:
        logger.error(f"Failed to create quick transaction: {e}", exc_info=True)
        return envelope(500, error_response("CREATE_ERROR", "Failed to create transaction"))


@app.post("/api/transactions/quick/preview")
async def preview_quick_input(request: QuickInputRequest):
    """
    Parse a phrase without storing it, for as-you-type previews.

    Returns:
        Parsed amount, note and detected type (may be UNKNOWN)
    """
    try:
        parsed = transaction_service.preview(request.input, request.type)
        return envelope(200, success_response(parsed))

    except (ValidationError, ParsingError) as e:
        return envelope(400, error_response(e.code, e.message))

    except Exception as e:
        logger.error(f"Failed to preview quick input: {e}", exc_info=True)
        return envelope(500, error_response("PREVIEW_ERROR", "Failed to parse input"))


@app.get("/api/transactions")
async def list_transactions(
    type: Optional[Literal["INCOME", "EXPENSE"]] = None,
    limit: Optional[int] = Query(default=None, ge=1)
):
    """List stored transactions, newest first."""
    transactions = transaction_service.list_transactions(type, limit)
    return envelope(200, success_response(transactions))


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)

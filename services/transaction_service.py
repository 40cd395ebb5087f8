"""
Transaction service.
Turns quick input text into stored transactions.
"""
import math
import uuid
from typing import Dict, List, Optional

from core.config import get_settings
from core.exceptions import ParsingError, ValidationError
from core.logger import setup_logger
from core.matching import UNKNOWN
from core.quick_input import parse_quick_input
from core.schema import ParsedInput, Transaction, TransactionCreate

logger = setup_logger(__name__)

PARSE_ERROR_MESSAGE = 'Could not parse input. Try: "breakfast 50k" or "50000 lunch"'


class TransactionService:
    """Service for the quick input flow and the in-memory transaction store."""

    def __init__(self):
        """Initialize transaction service."""
        self.settings = get_settings()
        # In-memory store (replaced by the hosted database in production)
        self._transactions: Dict[str, Transaction] = {}

    def validate_input(self, input_text: Optional[str]) -> str:
        """
        Validate raw quick input.

        Args:
            input_text: Text from the request body

        Returns:
            The input text unchanged

        Raises:
            ValidationError: If input is missing, blank or too long
        """
        if not input_text or not isinstance(input_text, str) or not input_text.strip():
            raise ValidationError("Input is required")

        if len(input_text) > self.settings.max_input_length:
            raise ValidationError(
                f"Input must be at most {self.settings.max_input_length} characters",
                details={"length": len(input_text)}
            )

        return input_text

    def preview(self, input_text: Optional[str], explicit_type: Optional[str] = None) -> ParsedInput:
        """
        Parse quick input without storing anything.

        Args:
            input_text: Raw user input
            explicit_type: Optional "INCOME"/"EXPENSE" override

        Returns:
            ParsedInput (type may be UNKNOWN)

        Raises:
            ValidationError: If input is missing or too long
            ParsingError: If no amount can be found or it is too large to represent
        """
        text = self.validate_input(input_text)

        parsed = parse_quick_input(text, explicit_type)
        if parsed is None:
            logger.warning(f"Could not parse quick input: '{text}'")
            raise ParsingError(PARSE_ERROR_MESSAGE, details={"input": text})

        if not math.isfinite(parsed.amount):
            logger.warning(f"Quick input amount out of range: '{text}'")
            raise ParsingError(PARSE_ERROR_MESSAGE, details={"input": text, "reason": "amount out of range"})

        return parsed

    def resolve_type(self, parsed: ParsedInput) -> str:
        """Map UNKNOWN to the configured default type."""
        if parsed.type == UNKNOWN:
            return self.settings.default_transaction_type
        return parsed.type

    def create_transaction(self, data: TransactionCreate) -> Transaction:
        """
        Store a new transaction.

        Args:
            data: Validated creation request

        Returns:
            Stored transaction record
        """
        transaction = Transaction(id=str(uuid.uuid4()), **data.model_dump())
        self._transactions[transaction.id] = transaction
        logger.info(
            f"Created transaction {transaction.id}: {transaction.type} "
            f"{transaction.amount:,.0f} '{transaction.note}'"
        )
        return transaction

    def create_quick_transaction(
        self,
        input_text: Optional[str],
        explicit_type: Optional[str] = None
    ) -> Transaction:
        """
        Parse quick input and store the resulting transaction.

        Args:
            input_text: Raw user input
            explicit_type: Optional "INCOME"/"EXPENSE" override

        Returns:
            Stored transaction record

        Raises:
            ValidationError: If input is missing or too long
            ParsingError: If no amount can be found
        """
        parsed = self.preview(input_text, explicit_type)

        return self.create_transaction(TransactionCreate(
            amount=parsed.amount,
            note=parsed.note,
            type=self.resolve_type(parsed),
        ))

    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        return self._transactions.get(transaction_id)

    def list_transactions(
        self,
        transaction_type: Optional[str] = None,
        limit: Optional[int] = None
    ) -> List[Transaction]:
        """
        List stored transactions, newest first.

        Args:
            transaction_type: Only return INCOME or EXPENSE records
            limit: Maximum number of records

        Returns:
            List of transactions
        """
        transactions = list(reversed(list(self._transactions.values())))
        if transaction_type:
            transactions = [t for t in transactions if t.type == transaction_type]
        if limit is not None:
            transactions = transactions[:limit]
        return transactions

# =============================================================================
# core/services/request_validator.py - Request Normalization
# =============================================================================
# Turns decoded request bodies and query parameters into typed commands:
# - parse_log(): POST /log body -> LogCreate
# - parse_retrieval(): GET /giveme query -> RetrievalCommand
# =============================================================================

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from app.exceptions import ValidationError
from core.models.log_entry import LogCreate, RetrievalCommand

logger = logging.getLogger(__name__)

# Query values accepted as "true" for the `all` flag (compared lowercased)
TRUTHY_VALUES = frozenset({"true", "1", "yes", "on", "t", "y"})


class RequestValidator:
    """
    Validates decoded requests before they reach the store.

    All methods are static; the validator holds no state.
    """

    @staticmethod
    def parse_log(body: Any) -> LogCreate:
        """
        Validate a POST /log body.

        Args:
            body: Decoded JSON body (any JSON value)

        Returns:
            LogCreate with a non-empty name and an object payload

        Raises:
            ValidationError: If the body is not an object, or `name` / `data`
                is missing or of the wrong shape
        """
        if not isinstance(body, dict):
            raise ValidationError("Invalid body: expected a JSON object")

        try:
            return LogCreate.model_validate(body)
        except PydanticValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"])
            message = f"Invalid field '{field}': {first['msg']}"
            logger.debug(f"Rejected log body: {message}")
            raise ValidationError(message)

    @staticmethod
    def parse_retrieval(key: str | None, all_flag: str | None) -> RetrievalCommand:
        """
        Build a RetrievalCommand from raw GET /giveme query values.

        An absent or unrecognized `all` value means a bounded read.
        """
        unbounded = all_flag is not None and all_flag.strip().lower() in TRUTHY_VALUES
        return RetrievalCommand(key=key, unbounded=unbounded)

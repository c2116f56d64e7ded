# =============================================================================
# core/services/auth_guard.py - Shared Secret Check
# =============================================================================
# Gates GET /giveme. POST /log is intentionally not gated.
# =============================================================================

import hmac


class AuthGuard:
    """
    Compares a caller-supplied key against the configured shared secret.

    The secret is fixed when the guard is built at startup; rotating it
    requires a restart. The comparison is constant-time.
    """

    def __init__(self, secret: str):
        self._secret = secret.encode("utf-8")

    def authorize(self, supplied_key: str | None) -> bool:
        """Return True only when `supplied_key` matches the secret exactly."""
        if supplied_key is None:
            return False
        return hmac.compare_digest(supplied_key.encode("utf-8"), self._secret)

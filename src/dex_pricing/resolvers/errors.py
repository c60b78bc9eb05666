"""
Error types and retry classification for pair resolution.
"""

from typing import Optional
import logging

logger = logging.getLogger(__name__)


class ResolverError(Exception):
    """Base exception for pair resolution."""
    pass


class RateLimitError(ResolverError):
    """Raised when the RPC provider rate limits the resolver."""

    def __init__(self, message: str, retry_after: Optional[float] = None):
        super().__init__(message)
        self.retry_after = retry_after


class NetworkError(ResolverError):
    """Raised when network-related errors persist after retries."""
    pass


class ContractError(ResolverError):
    """Raised when the factory call reverts or returns garbage."""
    pass


class ErrorHandler:
    """
    Classification and retry policy for resolver RPC failures.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def classify_error(self, error: Exception) -> str:
        """
        Classify an error into a category for appropriate handling.

        Args:
            error: Exception to classify

        Returns:
            Error category string
        """
        if isinstance(error, RateLimitError):
            return 'rate_limit'
        if isinstance(error, ContractError):
            return 'contract'

        error_str = str(error).lower()

        if any(keyword in error_str for keyword in ['rate limit', 'too many requests', '429']):
            return 'rate_limit'

        if any(keyword in error_str for keyword in ['connection', 'timeout', 'timed out', 'network', 'dns']):
            return 'network'

        if any(keyword in error_str for keyword in ['revert', 'execution reverted', 'out of gas']):
            return 'contract'

        if any(keyword in error_str for keyword in ['invalid', 'bad request', '400']):
            return 'validation'

        return 'unknown'

    def should_retry(self, error: Exception, attempt: int, max_retries: int) -> bool:
        """
        Determine if an error should trigger a retry.

        Args:
            error: Exception that occurred
            attempt: Current attempt number (0-based)
            max_retries: Maximum number of attempts allowed

        Returns:
            True if the call should be retried
        """
        if attempt + 1 >= max_retries:
            return False

        # Contract and validation errors are deterministic
        return self.classify_error(error) in ('network', 'rate_limit', 'unknown')

    def get_retry_delay(self, error: Exception, attempt: int) -> float:
        """
        Calculate retry delay based on error type and attempt.

        Args:
            error: Exception that occurred
            attempt: Current attempt number (0-based)

        Returns:
            Delay in seconds before retry
        """
        if isinstance(error, RateLimitError) and error.retry_after is not None:
            return error.retry_after

        base_delay = min(2 ** attempt, 60)  # Cap at 60 seconds

        if self.classify_error(error) == 'rate_limit':
            return base_delay * 2

        return base_delay

    def log_error(self, error: Exception, context: Optional[dict] = None):
        """Log an error with its category and call context."""
        category = self.classify_error(error)
        context_str = f" | Context: {context}" if context else ""
        self.logger.warning(f"[{category}] {type(error).__name__}: {error}{context_str}")

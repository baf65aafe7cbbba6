"""Retry logic with exponential backoff"""

import time
from typing import Callable, Any, Tuple, Type
from rewards.utils.logging import get_logger
from rewards.utils.errors import TransactionFetchError, TransactionSourceError

logger = get_logger(__name__)


def retry_with_exponential_backoff(
    func: Callable,
    *args,
    max_retries: int = 3,
    base_delay: float = 0.5,
    max_delay: float = 4.0,
    retry_on: Tuple[Type[Exception], ...] = (TransactionFetchError,),
    give_up_on: Tuple[Type[Exception], ...] = (TransactionSourceError,),
    **kwargs
) -> Any:
    """
    Retry function with exponential backoff

    Args:
        func: Function to retry
        *args, **kwargs: Arguments to pass to func
        max_retries: Maximum attempts (including the first)
        base_delay: Delay before the second attempt, doubled each time
        max_delay: Delay cap
        retry_on: Exception types that trigger another attempt
        give_up_on: Subtypes of retry_on that are raised on the first failure

    Returns:
        Function result

    Raises:
        The last exception once all attempts are exhausted
    """
    attempts = max(1, max_retries)
    for attempt in range(attempts):
        try:
            return func(*args, **kwargs)

        except retry_on as e:
            if isinstance(e, give_up_on):
                logger.error("Permanent failure, not retrying", error=str(e))
                raise

            if attempt == attempts - 1:
                logger.error(f"All {attempts} retry attempts exhausted", error=str(e))
                raise

            delay = min(base_delay * (2 ** attempt), max_delay)
            logger.warning(f"Attempt {attempt + 1} failed, retrying in {delay}s: {e}")
            time.sleep(delay)

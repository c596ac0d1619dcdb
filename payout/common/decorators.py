import asyncio
import logging

import aiohttp
from gql.transport.exceptions import TransportProtocolError, TransportServerError
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    stop_after_delay,
    wait_exponential,
)

from payout.config.settings import DEFAULT_RETRY_TIME, ELECTION_RETRY_ATTEMPTS

logger = logging.getLogger(__name__)


def retry_graph_errors(attempts: int = ELECTION_RETRY_ATTEMPTS, delay: int = DEFAULT_RETRY_TIME):
    return retry(
        # TransportQueryError is not retried
        retry=retry_if_exception_type(
            (
                TransportServerError,
                TransportProtocolError,
                aiohttp.ClientError,
                asyncio.TimeoutError,
            )
        ),
        wait=wait_exponential(multiplier=1, min=1, max=delay // 2),
        stop=stop_after_attempt(attempts) | stop_after_delay(delay),
        before_sleep=before_sleep_log(logger, logging.INFO),
        reraise=True,
    )

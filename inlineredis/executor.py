import logging

from .errors import RedisTimeoutError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 3.0
DEFAULT_RETRIES = 3


class Executor:
    """
    Runs one write-then-read exchange under a deadline, re-sending it after a
    timeout up to ``retries`` more times.

    A retry sends the request again blindly. That is only safe when running the
    command twice has the same effect as running it once, so exchanges marked
    ``idempotent=False`` are never retried and their first timeout propagates.

    A timed-out attempt leaves the stream out of step: its reply may still
    arrive and would then be read as the reply to the next command. After a
    ``RedisTimeoutError`` reaches the caller, call ``reconnect()`` before
    sending anything else on that connection.
    """

    def __init__(self, timeout=DEFAULT_TIMEOUT, retries=DEFAULT_RETRIES):
        if retries < 0:
            raise ValueError("retries must be >= 0")
        self.timeout = timeout
        self.retries = retries

    def run(self, connection, exchange, idempotent=True, label="exchange"):
        retries_left = self.retries if idempotent else 0
        while True:
            try:
                with connection.deadline(self.timeout):
                    return exchange()
            except RedisTimeoutError:
                if retries_left <= 0:
                    raise
                retries_left -= 1
                logger.warning("%s timed out after %ss, retrying (%d retries left)",
                               label, self.timeout, retries_left)

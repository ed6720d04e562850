"""Caller-driven polling of long-running operations."""

import time
from typing import Callable, FrozenSet, Optional, Union

from mgmtops.domain.base.exceptions import OperationTimeoutError
from mgmtops.domain.base.value_objects import OperationHandle
from mgmtops.domain.operation.models import StatusModel
from mgmtops.domain.operation.value_objects import AsyncOperationStatus, OperationStatus
from mgmtops.infrastructure.logging.logger import get_logger

TERMINAL_STATUSES: FrozenSet[str] = frozenset(
    [status.value for status in OperationStatus if status.is_terminal]
    + [status.value for status in AsyncOperationStatus if status.is_terminal]
)


class OperationPoller:
    """
    Repeatedly queries an operation's status until it is terminal.

    The adapters never wait on their own; this loop belongs to the caller,
    which chooses the interval and timeout.

    Args:
        get_status: Adapter status query, e.g. ImportExportDatabaseAdapter.get_status
        interval: Seconds between queries
        timeout: Seconds before giving up
        sleep: Sleep function
        clock: Monotonic clock
    """

    def __init__(
        self,
        get_status: Callable[[OperationHandle], StatusModel],
        interval: float = 10.0,
        timeout: float = 3600.0,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
        logger=None,
    ):
        if interval < 0:
            raise ValueError("Polling interval must not be negative")
        if timeout <= 0:
            raise ValueError("Polling timeout must be positive")
        self._get_status = get_status
        self._interval = interval
        self._timeout = timeout
        self._sleep = sleep
        self._clock = clock
        self._logger = logger or get_logger(__name__)

    def wait(
        self,
        handle: Union[OperationHandle, str],
        on_status: Optional[Callable[[StatusModel], None]] = None,
    ) -> StatusModel:
        """
        Poll until the operation reaches a terminal status.

        Args:
            handle: Operation handle or status link
            on_status: Called with every status observed, terminal included

        Returns:
            The terminal status

        Raises:
            OperationTimeoutError: If the timeout elapses first
        """
        if isinstance(handle, str):
            handle = OperationHandle(link=handle)
        deadline = self._clock() + self._timeout
        last_status: Optional[str] = None

        while True:
            status = self._get_status(handle)
            last_status = status.status
            if on_status is not None:
                on_status(status)
            if status.status in TERMINAL_STATUSES:
                self._logger.info("Operation reached %s", status.status)
                return status

            remaining = deadline - self._clock()
            if remaining <= 0:
                raise OperationTimeoutError(handle.link, self._timeout, last_status)
            self._logger.debug("Operation is %s; next query in %ss", status.status, self._interval)
            self._sleep(min(self._interval, remaining))

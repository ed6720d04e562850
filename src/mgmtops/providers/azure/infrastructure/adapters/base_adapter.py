"""Shared invocation path for management adapters."""

from typing import Callable, TypeVar

from mgmtops.infrastructure.exceptions import TransportError
from mgmtops.infrastructure.logging.logger import get_logger
from mgmtops.providers.azure.infrastructure.error_envelope import (
    decode_error_envelope,
    to_operation_error,
)

T = TypeVar("T")


class BaseManagementAdapter:
    """Base class for adapters: decodes service error envelopes, never retries."""

    def __init__(self, logger=None):
        self._logger = logger or get_logger(self.__class__.__module__)

    def _invoke(self, operation_name: str, call: Callable[..., T], *args, **kwargs) -> T:
        """
        Run one communicator call.

        Raises:
            OperationError: When the fault body carries a recognized error envelope
            TransportError: Unchanged, when it does not
        """
        try:
            return call(*args, **kwargs)
        except TransportError as e:
            error = to_operation_error(decode_error_envelope(e.body), e.status_code)
            if error is None:
                self._logger.warning(
                    "%s failed with status %s and no recognized error body",
                    operation_name,
                    e.status_code,
                )
                raise
            self._logger.warning("%s failed: %s (%s)", operation_name, error.code, error.message)
            raise error from e

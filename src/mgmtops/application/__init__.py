"""Caller-side orchestration over the adapters."""

from mgmtops.application.operation_poller import TERMINAL_STATUSES, OperationPoller

__all__ = ["OperationPoller", "TERMINAL_STATUSES"]

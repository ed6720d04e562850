"""Tests for the caller-side operation poller."""

from unittest.mock import Mock

import pytest

from mgmtops.application.operation_poller import OperationPoller
from mgmtops.domain.base.exceptions import OperationTimeoutError
from mgmtops.domain.base.value_objects import OperationHandle
from mgmtops.domain.operation.models import StatusModel

LINK = "https://async/op"


def _status(value: str) -> StatusModel:
    return StatusModel(status=value, operation_status_link=LINK)


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.now += seconds


@pytest.mark.unit
class TestOperationPoller:
    def setup_method(self):
        self.clock = FakeClock()
        self.get_status = Mock()

    def _poller(self, interval=5.0, timeout=60.0):
        return OperationPoller(
            self.get_status, interval=interval, timeout=timeout, sleep=self.clock.sleep, clock=self.clock
        )

    def test_returns_terminal_status(self):
        self.get_status.side_effect = [_status("Pending"), _status("InProgress"), _status("Succeeded")]

        result = self._poller().wait(LINK)

        assert result.status == "Succeeded"
        assert self.get_status.call_count == 3
        assert self.clock.now == 10.0
        self.get_status.assert_called_with(OperationHandle(link=LINK))

    @pytest.mark.parametrize("terminal", ["Failed", "Canceled"])
    def test_failed_and_canceled_are_terminal(self, terminal):
        self.get_status.return_value = _status(terminal)

        assert self._poller().wait(LINK).status == terminal
        assert self.get_status.call_count == 1

    def test_unknown_status_keeps_polling(self):
        self.get_status.side_effect = [_status("Cancelling"), _status("Failed")]

        result = self._poller().wait(LINK)

        assert result.status == "Failed"
        assert self.get_status.call_count == 2

    def test_reports_every_status(self):
        self.get_status.side_effect = [_status("InProgress"), _status("Succeeded")]
        seen = []

        self._poller().wait(OperationHandle(link=LINK), on_status=lambda s: seen.append(s.status))

        assert seen == ["InProgress", "Succeeded"]

    def test_times_out(self):
        self.get_status.return_value = _status("InProgress")

        with pytest.raises(OperationTimeoutError) as exc_info:
            self._poller(interval=10.0, timeout=25.0).wait(LINK)

        assert exc_info.value.last_status == "InProgress"
        assert exc_info.value.operation_status_link == LINK
        assert self.clock.now == 25.0

    def test_rejects_invalid_timeout(self):
        with pytest.raises(ValueError):
            OperationPoller(self.get_status, timeout=0)

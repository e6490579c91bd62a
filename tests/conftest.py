""" Defines pytest fixtures to be used for testing """
from unittest import mock

import pytest

from lvlog.logger import exit as exit_module
from lvlog.logger import registry


class FailingSink:
    """ A sink whose writes and closes always fail """

    def __init__(self, exc=OSError("sink is broken")):
        self.exc = exc
        self.write_calls = 0
        self.close_calls = 0

    def write(self, data: bytes) -> int:
        self.write_calls += 1
        raise self.exc

    def close(self):
        self.close_calls += 1
        raise self.exc


@pytest.fixture(autouse=True)
def restore_logging():
    """ Restores the active logger, default logger and exit handler after each test """
    active, default = registry._active, registry._default
    handler = exit_module.exit_handler()
    yield
    registry._active, registry._default = active, default
    exit_module.set_exit_handler(handler)


@pytest.fixture
def exit_mock():
    """ Installs a mock as the exit handler so fatal records do not end the test run """
    handler = mock.Mock()
    exit_module.set_exit_handler(handler)
    return handler


@pytest.fixture
def failing_sink():
    return FailingSink()

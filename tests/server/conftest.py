"""Pytest fixtures for server module testing."""

import queue
from collections.abc import Iterator
from unittest.mock import patch

import pytest

from nmea0183 import Sentence


class ControlledNMEAReader:
    def __init__(self) -> None:
        self.message_queue: queue.Queue[Sentence | None] = queue.Queue()

    def __enter__(self) -> "ControlledNMEAReader":
        return self

    def __exit__(self, *_: object) -> None:
        pass

    def cancel(self) -> None:
        self.message_queue.put(None)

    def __iter__(self) -> Iterator[Sentence]:
        while True:
            item = self.message_queue.get()
            if item is None:
                break
            yield item


@pytest.fixture(autouse=True)
def nmea_controller() -> Iterator[ControlledNMEAReader]:
    controller = ControlledNMEAReader()
    with patch("server.main.NMEAReader", return_value=controller):
        yield controller
    controller.message_queue.put(None)

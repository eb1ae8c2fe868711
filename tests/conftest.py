import logging

import pytest

from disposal.resource.inner import InnerComponent


class RecordingCloser:
    """Stands in for the platform release primitive."""

    def __init__(self, events: list[str], succeed: bool = True):
        self.events = events
        self.succeed = succeed
        self.calls: list[int] = []

    def __call__(self, handle: int) -> bool:
        self.calls.append(handle)
        self.events.append(f'close {handle}')
        return self.succeed


@pytest.fixture
def events() -> list[str]:
    return []


@pytest.fixture
def closer(events) -> RecordingCloser:
    return RecordingCloser(events)


@pytest.fixture
def failing_closer(events) -> RecordingCloser:
    return RecordingCloser(events, succeed=False)


@pytest.fixture
def inner_releases(monkeypatch, events) -> list[InnerComponent]:
    released: list[InnerComponent] = []
    original = InnerComponent.release

    def recording_release(self):
        released.append(self)
        events.append('inner released')
        original(self)

    monkeypatch.setattr(InnerComponent, 'release', recording_release)
    return released


@pytest.fixture
def debug_logs(caplog):
    for name in ('disposal.resource.wrapper', 'disposal.resource.inner', 'disposal.scripts.demo'):
        caplog.set_level(logging.DEBUG, logger=name)
    return caplog

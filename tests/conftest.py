import os

# Keep Kivy quiet and away from sys.argv before anything imports it
os.environ.setdefault("KIVY_NO_ARGS", "1")
os.environ.setdefault("KIVY_NO_CONSOLELOG", "1")
os.environ.setdefault("KIVY_NO_FILELOG", "1")
os.environ.setdefault("KIVY_NO_CONFIG", "1")

import pytest  # noqa: E402

from tests.fakes import FakeScheduler  # noqa: E402


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def session(scheduler):
    from receiver.core.session import ReceiverSession

    return ReceiverSession(scheduler)

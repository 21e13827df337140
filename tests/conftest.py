from types import SimpleNamespace

import pytest


class FakeModels:
    """Stands in for client.aio.models; records calls and replays queued outcomes."""

    def __init__(self):
        self.content_outcomes = []
        self.image_outcomes = []
        self.content_calls = []
        self.image_calls = []

    @staticmethod
    def _next(outcomes):
        outcome = outcomes.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    async def generate_content(self, **kwargs):
        self.content_calls.append(kwargs)
        return self._next(self.content_outcomes)

    async def generate_images(self, **kwargs):
        self.image_calls.append(kwargs)
        return self._next(self.image_outcomes)


@pytest.fixture
def fake_models():
    return FakeModels()


@pytest.fixture
def fake_client(fake_models):
    closed = []

    async def aclose():
        closed.append(True)

    client = SimpleNamespace(aio=SimpleNamespace(models=fake_models, aclose=aclose))
    client.closed = closed
    return client


@pytest.fixture
def recorded_sleep():
    delays = []

    async def sleep(delay):
        delays.append(delay)

    sleep.delays = delays
    return sleep



from types import SimpleNamespace

import pytest

from food_analyzer import services


class FakeReplicate:
    def __init__(self, output=None, error=None):
        self.output = output
        self.error = error
        self.calls = []

    def run(self, ref, input):
        self.calls.append((ref, input))
        if self.error:
            raise self.error
        return self.output


class FakeOpenAI:
    def __init__(self, content=None, error=None, no_choices=False):
        self.content = content
        self.error = error
        self.no_choices = no_choices
        self.calls = []
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

    def _create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        if self.no_choices:
            return SimpleNamespace(choices=[])
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def fake_replicate(monkeypatch):
    def install(output=None, error=None):
        fake = FakeReplicate(output=output, error=error)
        monkeypatch.setattr(services, "_replicate_client", lambda: fake)
        return fake

    return install


@pytest.fixture
def fake_openai(monkeypatch):
    def install(content=None, error=None, no_choices=False):
        fake = FakeOpenAI(content=content, error=error, no_choices=no_choices)
        monkeypatch.setattr(services, "_openai_client", lambda: fake)
        return fake

    return install

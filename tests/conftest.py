import json

import pytest

from ghost_hosting.store import ConfigStore


class ScriptedInput:
    """Answers questions from a fixed list, in order, and records what was asked."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.questions = []

    def ask(self, question, default=None, secret=False):
        self.questions.append((question, secret))
        if not self.answers:
            raise AssertionError(f"Unexpected question: {question}")
        answer = self.answers.pop(0)
        if answer == "" and default is not None:
            return default
        return answer


@pytest.fixture
def scripted():
    return ScriptedInput


@pytest.fixture
def store(tmp_path):
    return ConfigStore(str(tmp_path / "config.json"))


@pytest.fixture
def logs():
    lines = []
    return lines


@pytest.fixture
def saved_config():
    return {
        "aws": {"accessKeyId": "AKIA", "secretAccessKey": "secret", "region": "us-east-1"},
        "ghostHostingUrl": "https://blog.example.com/foo",
        "hostStaticWebsite": True,
        "staticWebsiteUrl": "https://static.example.com/foo",
        "vpc": {"useExistingVpc": False},
        "alb": {"useExistingAlb": False},
        "rds": {"useExistingRds": False},
        "uniqueIdentifier": "1700000000",
    }


@pytest.fixture
def write_config(store):
    def _write(data):
        with open(store.path, "w") as f:
            f.write(json.dumps(data, indent=4))
        return store.path

    return _write

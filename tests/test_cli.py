import json
import os

import pytest

from ghost_hosting import cli


@pytest.fixture
def config_path(tmp_path):
    return str(tmp_path / "config.json")


@pytest.fixture
def answers(monkeypatch, scripted):
    def _answers(values):
        input_source = scripted(values)
        monkeypatch.setattr(cli, "TerminalInput", lambda: input_source)
        return input_source

    return _answers


class FakeOrchestrator:
    runs = []
    result = True

    def __init__(self, store, input_source, logger=None):
        self.store = store

    def run(self, action):
        FakeOrchestrator.runs.append(action)
        return FakeOrchestrator.result


@pytest.fixture
def orchestrator(monkeypatch):
    FakeOrchestrator.runs = []
    FakeOrchestrator.result = True
    monkeypatch.setattr(cli, "DeploymentOrchestrator", FakeOrchestrator)
    return FakeOrchestrator


def test_invalid_action_exits_1(answers, capsys, config_path):
    input_source = answers([])
    with pytest.raises(SystemExit) as exc:
        cli.main(["launch", "--config-file", config_path])
    assert exc.value.code == 1
    assert "launch" in capsys.readouterr().err
    assert input_source.questions == []


def test_missing_action_is_usage_error(answers):
    answers([])
    with pytest.raises(SystemExit) as exc:
        cli.main([])
    assert exc.value.code != 0


def test_destroy_runs_orchestrator_without_prompts(answers, orchestrator, config_path):
    input_source = answers([])
    cli.main(["destroy", "--config-file", config_path])
    assert orchestrator.runs == ["destroy"]
    assert input_source.questions == []
    assert not os.path.exists(config_path)


def test_no_apply_writes_config_and_exits_0(answers, orchestrator, config_path):
    answers(["n", "https://blog.example.com", "n", "y", "n"])
    with pytest.raises(SystemExit) as exc:
        cli.main(
            [
                "deploy",
                "--aws-access-key-id", "AKIA",
                "--aws-secret-access-key", "secret",
                "--aws-region", "us-east-1",
                "--config-file", config_path,
                "--no-apply",
            ]
        )
    assert exc.value.code == 0
    assert orchestrator.runs == []
    with open(config_path) as f:
        assert json.load(f)["aws"]["region"] == "us-east-1"


def test_unknown_options_are_ignored(answers, orchestrator, config_path):
    answers(["n", "https://blog.example.com", "n", "y", "n"])
    cli.main(
        [
            "deploy",
            "--aws-access-key-id", "AKIA",
            "--aws-secret-access-key", "secret",
            "--aws-region", "us-east-1",
            "--config-file", config_path,
            "--verbose",
        ]
    )
    assert orchestrator.runs == ["deploy"]


def test_route53_guidance_exits_0(answers, orchestrator, config_path, capsys):
    answers(["AKIA", "secret", "us-east-1", "n", "https://blog.example.com", "n", "n"])
    with pytest.raises(SystemExit) as exc:
        cli.main(["deploy", "--config-file", config_path])
    assert exc.value.code == 0
    assert "Cannot proceed further!" in capsys.readouterr().out
    assert not os.path.exists(config_path)
    assert orchestrator.runs == []


def test_validation_error_exits_1(answers, orchestrator, config_path, capsys):
    answers(["AKIA", "secret", "us-east-1", "n", "http://blog.example.com", "n", "y", "n"])
    with pytest.raises(SystemExit) as exc:
        cli.main(["deploy", "--config-file", config_path])
    assert exc.value.code == 1
    assert "https" in capsys.readouterr().err
    assert not os.path.exists(config_path)


def test_declined_deploy_exits_1(answers, orchestrator, config_path):
    orchestrator.result = False
    answers(["n", "https://blog.example.com", "n", "y", "n"])
    with pytest.raises(SystemExit) as exc:
        cli.main(
            [
                "deploy",
                "--aws-access-key-id", "AKIA",
                "--aws-secret-access-key", "secret",
                "--aws-region", "us-east-1",
                "--config-file", config_path,
            ]
        )
    assert exc.value.code == 1

"""Tests for the multi-prompt command line demo."""

import json

import pytest

from multi_prompt.cli import build_specs, run_cli
from multi_prompt.fields import MISSING


@pytest.fixture(autouse=True)
def plain_env(monkeypatch):
    monkeypatch.setenv("MULTI_PROMPT_CLEAR_SCREEN", "false")
    monkeypatch.delenv("MULTI_PROMPT_LOG_LEVEL", raising=False)


@pytest.fixture
def typed(monkeypatch):
    def feed(*answers):
        queue = list(answers)

        def fake_input(*args, **kwargs):
            answer = queue.pop(0)
            if isinstance(answer, BaseException):
                raise answer
            return answer

        monkeypatch.setattr("builtins.input", fake_input)

    return feed


class TestBuildSpecs:
    def test_defaults_split_on_first_equals(self):
        specs = build_specs([("text", "Formula=a=b"), ("text", "Name")])
        assert specs[0].prompt == "Formula"
        assert specs[0].default == "a=b"
        assert specs[1].default is MISSING

    def test_integer_defaults(self):
        (spec,) = build_specs([("int", "Age=37")])
        assert spec.default == 37

    def test_bad_integer_default(self):
        with pytest.raises(SystemExit):
            build_specs([("int", "Age=old")])


class TestRunCli:
    def test_requires_a_field(self):
        with pytest.raises(SystemExit):
            run_cli([])

    def test_prints_confirmed_answers(self, typed, capsys):
        typed("Ada", "")
        run_cli(["--field", "Name", "--int-field", "Age=37"])
        out = capsys.readouterr().out
        assert "Name: Ada" in out
        assert "Age: 37" in out

    def test_json_output_after_revision(self, typed, capsys):
        typed("Ada", "38", "1", "Grace", "y")
        run_cli(["--json", "--field", "Name", "--int-field", "Age"])
        out = capsys.readouterr().out
        assert json.dumps(["Grace", 38]) in out

    def test_cancel_exits_with_status_one(self, typed, capsys):
        typed("Ada", "n")
        with pytest.raises(SystemExit) as excinfo:
            run_cli(["--field", "Name"])
        assert excinfo.value.code == 1
        assert "Cancelled." in capsys.readouterr().out

    def test_abort_exits_with_status_130(self, typed, capsys):
        typed(KeyboardInterrupt())
        with pytest.raises(SystemExit) as excinfo:
            run_cli(["--field", "Name"])
        assert excinfo.value.code == 130
        assert "Aborted." in capsys.readouterr().out

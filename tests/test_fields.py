"""Tests for field specs, field states and the MISSING marker."""

import pickle

import pytest

from multi_prompt.fields import MISSING, FieldSpec, FieldState


def _read(prompt, current):
    return "value"


class TestMissing:
    def test_is_falsy_singleton(self):
        assert not MISSING
        assert type(MISSING)() is MISSING
        assert repr(MISSING) == "MISSING"

    def test_survives_pickling(self):
        assert pickle.loads(pickle.dumps(MISSING)) is MISSING


class TestFieldSpec:
    def test_default_absent_unless_given(self):
        spec = FieldSpec(prompt="Name", read=_read)
        assert spec.default is MISSING
        assert not spec.has_default

    def test_falsy_default_still_counts(self):
        assert FieldSpec(prompt="Count", read=_read, default=0).has_default
        assert FieldSpec(prompt="Note", read=_read, default="").has_default

    def test_from_mapping_accepts_camel_case_keys(self):
        spec = FieldSpec.from_mapping(
            {"prompt": "Age", "readFn": _read, "stringifyFn": str}
        )
        assert spec.prompt == "Age"
        assert spec.read is _read
        assert spec.stringify is str
        assert spec.default is MISSING

    def test_from_mapping_keeps_explicit_none_default(self):
        spec = FieldSpec.from_mapping(
            {"prompt": "Age", "read": _read, "default": None}
        )
        assert spec.has_default
        assert spec.default is None

    def test_from_mapping_requires_prompt(self):
        with pytest.raises(ValueError, match="prompt"):
            FieldSpec.from_mapping({"readFn": _read})

    def test_from_mapping_requires_read(self):
        with pytest.raises(ValueError, match="readFn"):
            FieldSpec.from_mapping({"prompt": "Name"})

    def test_from_mapping_rejects_non_callable_read(self):
        with pytest.raises(TypeError):
            FieldSpec.from_mapping({"prompt": "Name", "readFn": "nope"})


class TestFieldState:
    def test_from_spec_seeds_default(self):
        state = FieldState.from_spec(
            FieldSpec(prompt="City", read=_read, default="Oslo")
        )
        assert state.response == "Oslo"
        assert state.answered
        assert not state.is_current

    def test_updates_return_copies(self):
        state = FieldState(prompt="City", read=_read)
        current = state.with_current(True)
        answered = current.with_response("Rome")

        assert current is not state
        assert not state.is_current
        assert current.is_current
        assert state.response is MISSING
        assert answered.response == "Rome"
        assert answered.is_current

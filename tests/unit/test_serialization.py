"""Unit tests for state and action serialization."""

from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

from django_result_store.results.actions import DeleteResult, OtherAction, StoreResult
from django_result_store.results.base import Result, StoreState
from django_result_store.results.serialization import (
    ActionDecodeError,
    action_from_dict,
    decode_identifier,
    encode_identifier,
    state_from_dict,
    state_to_dict,
)

STAMP = datetime(2024, 5, 1, 12, 30, 15, 123000, tzinfo=timezone.utc)


class TestIdentifiers:
    """Tests for identifier encoding."""

    def test_datetime_encodes_as_isoformat(self) -> None:
        """Test that timestamp ids become ISO-8601 strings."""
        assert encode_identifier(STAMP) == "2024-05-01T12:30:15.123000+00:00"

    def test_datetime_decodes_equal(self) -> None:
        """Test that an encoded timestamp decodes to an equal datetime."""
        assert decode_identifier(encode_identifier(STAMP)) == STAMP

    def test_int_and_str_pass_through(self) -> None:
        """Test that int and plain string ids are left alone."""
        assert decode_identifier(5) == 5
        assert decode_identifier("9f1c2a7e0b2d4a0e8c4f2b1d0e9a8b7c") == (
            "9f1c2a7e0b2d4a0e8c4f2b1d0e9a8b7c"
        )

    def test_string_that_looks_like_a_date_but_is_not(self) -> None:
        """Test that unparseable date-like strings stay strings."""
        assert decode_identifier("not-a:date") == "not-a:date"

    @pytest.mark.parametrize("value", [None, 1.5, True, [1]])
    def test_unsupported_types(self, value) -> None:
        """Test that other types are rejected."""
        with pytest.raises(TypeError):
            decode_identifier(value)


class TestState:
    """Tests for state encoding."""

    def test_state_to_dict_is_json_serializable(self) -> None:
        """Test that an encoded state can be dumped as JSON."""
        state = StoreState(
            results=(Result(id=STAMP, value={"score": 0.9}), Result(id=2, value=None))
        )
        data = state_to_dict(state)

        assert json.loads(json.dumps(data)) == {
            "results": [
                {"id": "2024-05-01T12:30:15.123000+00:00", "value": {"score": 0.9}},
                {"id": 2, "value": None},
            ]
        }

    def test_state_from_dict(self) -> None:
        """Test that a state is rebuilt with decoded ids."""
        state = state_from_dict(
            {"results": [{"id": "2024-05-01T12:30:15.123000+00:00", "value": "a"}]}
        )
        assert state == StoreState(results=(Result(id=STAMP, value="a"),))

    def test_state_from_empty_dict(self) -> None:
        """Test that a missing results key gives the empty state."""
        assert state_from_dict({}) == StoreState(results=())


class TestActionFromDict:
    """Tests for decoding actions."""

    def test_store_result(self) -> None:
        """Test decoding a STORE_RESULT action."""
        assert action_from_dict({"type": "STORE_RESULT", "result": 10}) == StoreResult(result=10)

    def test_store_result_without_payload(self) -> None:
        """Test that a missing result decodes as None."""
        assert action_from_dict({"type": "STORE_RESULT"}) == StoreResult(result=None)

    def test_delete_result(self) -> None:
        """Test decoding a DELETE_RESULT action."""
        action = action_from_dict({"type": "DELETE_RESULT", "resultElId": 3})
        assert action == DeleteResult(result_el_id=3)

    def test_delete_result_with_timestamp(self) -> None:
        """Test that a timestamp id decodes to a datetime."""
        action = action_from_dict(
            {"type": "DELETE_RESULT", "resultElId": "2024-05-01T12:30:15.123000+00:00"}
        )
        assert action == DeleteResult(result_el_id=STAMP)

    def test_other_action(self) -> None:
        """Test that unknown types become OtherAction with their payload."""
        action = action_from_dict({"type": "INCREMENT", "value": 1})
        assert action == OtherAction(type="INCREMENT", payload={"value": 1})

    @pytest.mark.parametrize(
        "data",
        [
            {},
            {"type": ""},
            {"type": 5},
            {"type": "DELETE_RESULT"},
            {"type": "DELETE_RESULT", "resultElId": None},
            ["STORE_RESULT"],
        ],
    )
    def test_malformed(self, data) -> None:
        """Test that malformed actions raise ActionDecodeError."""
        with pytest.raises(ActionDecodeError):
            action_from_dict(data)

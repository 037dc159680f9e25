"""Tests for shiptivity.validation."""

from unittest.mock import MagicMock

import pytest

from shiptivity.protocols import InvalidIdError, InvalidIdReason, InvalidLaneError
from shiptivity.types import Lane
from shiptivity.validation import parse_id, validate_id, validate_lane


class TestParseId:
    @pytest.mark.parametrize("raw, expected", [(7, 7), ("7", 7), (" 42 ", 42), ("-3", -3)])
    def test_integers_accepted(self, raw, expected):
        assert parse_id(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "1.5", "", "12abc", None, 2.0, True, [1]])
    def test_non_integers_rejected(self, raw):
        with pytest.raises(InvalidIdError) as exc_info:
            parse_id(raw)
        assert exc_info.value.reason is InvalidIdReason.NOT_A_NUMBER
        assert exc_info.value.status_code == 400
        assert exc_info.value.long_message == "Id can only be integer."


class TestValidateId:
    def test_existing_client(self, store, board):
        assert validate_id(str(board["A"].id), store) == board["A"].id

    def test_unknown_client(self, store, board):
        with pytest.raises(InvalidIdError) as exc_info:
            validate_id(9999, store)
        err = exc_info.value
        assert err.reason is InvalidIdReason.NOT_FOUND
        assert err.status_code == 404
        assert err.to_dict() == {
            "message": "Invalid id provided.",
            "long_message": "Cannot find client with that id.",
        }

    @pytest.mark.parametrize("raw", ["99999999999999999999999", "-99999999999999999999999"])
    def test_oversized_id_is_not_found(self, store, board, raw):
        with pytest.raises(InvalidIdError) as exc_info:
            validate_id(raw, store)
        assert exc_info.value.reason is InvalidIdReason.NOT_FOUND
        assert exc_info.value.status_code == 404

    def test_malformed_id_skips_lookup(self):
        fake_store = MagicMock()
        with pytest.raises(InvalidIdError):
            validate_id("nope", fake_store)
        fake_store.get_client.assert_not_called()

    def test_one_point_lookup(self, board):
        fake_store = MagicMock()
        fake_store.get_client.return_value = board["A"]
        validate_id(board["A"].id, fake_store)
        fake_store.get_client.assert_called_once_with(board["A"].id)


class TestValidateLane:
    @pytest.mark.parametrize("raw", [None, ""])
    def test_absent_means_no_change(self, raw):
        assert validate_lane(raw) is None

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("backlog", Lane.BACKLOG),
            ("in-progress", Lane.IN_PROGRESS),
            ("complete", Lane.COMPLETE),
            (Lane.COMPLETE, Lane.COMPLETE),
        ],
    )
    def test_recognized_lanes(self, raw, expected):
        assert validate_lane(raw) is expected

    @pytest.mark.parametrize("raw", ["Backlog", "in_progress", "done", " complete", 1])
    def test_unrecognized_lanes_rejected(self, raw):
        with pytest.raises(InvalidLaneError) as exc_info:
            validate_lane(raw)
        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Invalid status provided."

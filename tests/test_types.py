# Area: Message Tests
"""Tests for message and response models."""

import pytest
from pydantic import ValidationError
from rps_contract.types import (
    ContractResponse,
    ExecuteMsg,
    GetOwner,
    InstantiateMsg,
    MoveResponse,
    QueryMsg,
    StartGame,
    SubmitMove,
)
from rps_contract._resolver.enums import GameResult, Move


class TestExecuteMsg:
    """Tests for ExecuteMsg parsing."""

    def test_parse_start_game(self):
        msg = ExecuteMsg.model_validate(
            {"start_game": {"opponent": "bob", "host_move": "rock"}}
        )
        assert msg.variant_name == "start_game"
        assert msg.variant == StartGame(opponent="bob", host_move=Move.ROCK)

    def test_parse_submit_move_from_json(self):
        msg = ExecuteMsg.model_validate_json('{"submit_move": {"move": "paper"}}')
        assert msg.variant_name == "submit_move"
        assert msg.variant == SubmitMove(move=Move.PAPER)
        assert msg.variant.host is None

    def test_unknown_move_rejected(self):
        with pytest.raises(ValidationError):
            ExecuteMsg.model_validate({"submit_move": {"move": "lizard"}})

    def test_unknown_variant_rejected(self):
        with pytest.raises(ValidationError):
            ExecuteMsg.model_validate({"forfeit": {}})

    def test_empty_message_rejected(self):
        with pytest.raises(ValidationError, match="exactly one"):
            ExecuteMsg.model_validate({})

    def test_two_variants_rejected(self):
        with pytest.raises(ValidationError, match="exactly one"):
            ExecuteMsg.model_validate({
                "start_game": {"opponent": "bob", "host_move": "rock"},
                "submit_move": {"move": "rock"},
            })

    def test_missing_field_rejected(self):
        with pytest.raises(ValidationError):
            ExecuteMsg.model_validate({"start_game": {"opponent": "bob"}})

    def test_to_wire_is_externally_tagged(self):
        msg = ExecuteMsg(start_game=StartGame(opponent="bob", host_move=Move.SCISSORS))
        assert msg.to_wire() == {
            "start_game": {"opponent": "bob", "host_move": "scissors"}
        }


class TestQueryMsg:
    """Tests for QueryMsg parsing."""

    @pytest.mark.parametrize(
        "variant", ["get_move", "get_opponent", "get_owner", "get_result", "get_game"]
    )
    def test_empty_payload_variants(self, variant):
        msg = QueryMsg.model_validate({variant: {}})
        assert msg.variant_name == variant

    def test_host_key_is_optional(self):
        msg = QueryMsg.model_validate({"get_move": {"host": "alice"}})
        assert msg.variant.host == "alice"

    def test_get_owner_takes_no_host(self):
        with pytest.raises(ValidationError):
            QueryMsg.model_validate({"get_owner": {"host": "alice"}})

    def test_to_wire(self):
        assert QueryMsg(get_owner=GetOwner()).to_wire() == {"get_owner": {}}


class TestResponses:
    """Tests for response models."""

    def test_instantiate_msg_has_no_fields(self):
        InstantiateMsg.model_validate({})
        with pytest.raises(ValidationError):
            InstantiateMsg.model_validate({"move_type": 1})

    def test_move_response_serializes_value(self):
        assert MoveResponse(move_type=Move.ROCK).model_dump(mode="json") == {
            "move_type": "rock"
        }

    def test_contract_response_attributes(self):
        response = (
            ContractResponse()
            .add_attribute("method", "submit_move")
            .add_attribute("result", GameResult.TIE)
        )
        assert response.attribute("method") == "submit_move"
        assert response.attribute("result") == "tie"
        assert response.attribute("missing") is None
        assert response.as_dict() == {"method": "submit_move", "result": "tie"}

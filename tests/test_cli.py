# Area: CLI Tests
"""Tests for the command-line runtime."""

import json

import pytest
from rps_contract._config import ENV_MAPPINGS
from rps_contract.cli import (
    ERROR_EXIT_CODES,
    EXIT_CONFIG_ERROR,
    EXIT_INVALID_MESSAGE,
    EXIT_OK,
    main,
)
from rps_contract.errors import ErrorKind


@pytest.fixture
def run(tmp_path, monkeypatch, capsys):
    """Run the CLI against a temp registry and return (exit_code, stdout)."""
    for env_key in ENV_MAPPINGS:
        monkeypatch.delenv(env_key, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("RPS_LOG_FILE", str(tmp_path / "rps.log"))
    db = str(tmp_path / "rps.db")

    def _run(*argv):
        code = main(["--db", db, *argv])
        return code, capsys.readouterr().out

    return _run


def output_json(out):
    return json.loads(out)


class TestCliFlow:
    """Tests for a full match driven through the CLI."""

    def test_full_match(self, run):
        code, out = run("instantiate", "--sender", "alice")
        assert code == EXIT_OK
        assert output_json(out)["attributes"] == [
            {"key": "method", "value": "instantiate"},
            {"key": "owner", "value": "alice"},
        ]

        code, _ = run("start-game", "--sender", "alice", "--opponent", "bob", "--move", "rock")
        assert code == EXIT_OK

        code, out = run("submit-move", "--sender", "bob", "--move", "paper")
        assert code == EXIT_OK
        assert {"key": "result", "value": "opponent_wins"} in output_json(out)["attributes"]

        code, out = run("query", "result", "--sender", "alice")
        assert code == EXIT_OK
        assert output_json(out) == {"game_result": "opponent_wins"}

    def test_query_with_host_key(self, run):
        run("instantiate", "--sender", "alice")
        run("start-game", "--sender", "alice", "--opponent", "bob", "--move", "scissors")

        code, out = run("query", "move", "--sender", "bob", "--host", "alice")
        assert code == EXIT_OK
        assert output_json(out) == {"move_type": "scissors"}

    def test_raw_execute_message(self, run):
        run("instantiate", "--sender", "alice")
        msg = json.dumps({"start_game": {"opponent": "bob", "host_move": "paper"}})

        code, _ = run("execute", "--sender", "alice", "--msg", msg)
        assert code == EXIT_OK

        code, out = run("query", "game", "--sender", "alice")
        assert output_json(out)["phase"] == "awaiting_opponent_move"


class TestCliExitCodes:
    """Tests for exit codes on failure."""

    def test_unauthorized(self, run):
        run("instantiate", "--sender", "alice")
        code, out = run("start-game", "--sender", "mallory", "--opponent", "bob", "--move", "rock")
        assert code == ERROR_EXIT_CODES[ErrorKind.UNAUTHORIZED]
        assert out == ""

    def test_not_found(self, run):
        code, _ = run("query", "owner", "--sender", "alice")
        assert code == ERROR_EXIT_CODES[ErrorKind.NOT_FOUND]

    def test_invalid_address(self, run):
        run("instantiate", "--sender", "alice")
        code, _ = run("start-game", "--sender", "alice", "--opponent", "b o b", "--move", "rock")
        assert code == ERROR_EXIT_CODES[ErrorKind.INVALID_ADDRESS]

    def test_game_already_resolved(self, run):
        run("instantiate", "--sender", "alice")
        run("start-game", "--sender", "alice", "--opponent", "bob", "--move", "rock")
        run("submit-move", "--sender", "bob", "--move", "rock")

        code, _ = run("submit-move", "--sender", "bob", "--move", "paper")
        assert code == ERROR_EXIT_CODES[ErrorKind.GAME_ALREADY_RESOLVED]

    def test_second_instantiate_is_storage_failure(self, run):
        run("instantiate", "--sender", "alice")
        code, _ = run("instantiate", "--sender", "mallory")
        assert code == ERROR_EXIT_CODES[ErrorKind.STORAGE_FAILURE]

    def test_malformed_raw_message(self, run):
        run("instantiate", "--sender", "alice")
        code, _ = run("execute", "--sender", "alice", "--msg", '{"start_game": {}}')
        assert code == EXIT_INVALID_MESSAGE

    def test_missing_config_file(self, run, tmp_path):
        code, _ = run("--config", str(tmp_path / "missing.json"), "query", "owner", "--sender", "a")
        assert code == EXIT_CONFIG_ERROR

    def test_unreadable_config_file(self, run, tmp_path):
        config_dir = tmp_path / "config.d"
        config_dir.mkdir()
        code, _ = run("--config", str(config_dir), "query", "owner", "--sender", "alice")
        assert code == EXIT_CONFIG_ERROR

    def test_bad_log_level(self, run):
        code, _ = run("--log-level", "loud", "query", "owner", "--sender", "alice")
        assert code == EXIT_CONFIG_ERROR

    def test_unknown_move_rejected_by_parser(self, run):
        with pytest.raises(SystemExit):
            run("submit-move", "--sender", "bob", "--move", "lizard")


class TestCliSchema:
    """Tests for the schema subcommand."""

    def test_schema_export(self, run, tmp_path):
        out_dir = tmp_path / "schema"
        code, out = run("schema", "--out-dir", str(out_dir))

        assert code == EXIT_OK
        assert (out_dir / "execute_msg.json").exists()
        assert str(out_dir / "query_msg.json") in out

    def test_unwritable_out_dir(self, run, tmp_path):
        blocker = tmp_path / "schema"
        blocker.write_text("not a directory")

        code, out = run("schema", "--out-dir", str(blocker))

        assert code == EXIT_CONFIG_ERROR
        assert out == ""

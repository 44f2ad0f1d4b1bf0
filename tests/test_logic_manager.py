# tests/test_logic_manager.py

import json

import pytest

from core.response import ErrorCode
from logic.commands.command import CommandResult
from logic.commands.list_command import ListCommand
from logic.logic_manager import LogicManager
from logic.messages import MESSAGE_UNKNOWN_COMMAND
from models.model import Model
from models.roster import Roster


@pytest.fixture
def logic(sample_model):
    return LogicManager(sample_model)


def test_successful_command(logic):
    response = logic.execute("filter c/math-1000")

    assert response.success
    assert response.detail == "2 students listed!"
    assert isinstance(response.data["result"], CommandResult)
    assert len(logic.filtered_persons) == 2


def test_unknown_command_is_invalid_input(logic, expected_model):
    response = logic.execute("unknown 1")

    assert not response.success
    assert response.error is ErrorCode.INVALID_INPUT
    assert response.detail == MESSAGE_UNKNOWN_COMMAND
    assert logic.model == expected_model


def test_parse_error_leaves_model_unchanged(logic, expected_model):
    response = logic.execute("add n/Amy* p/1234 l/JC1")

    assert not response.success
    assert response.error is ErrorCode.INVALID_INPUT
    assert logic.model == expected_model


def test_command_error_is_validation_failure(logic, expected_model):
    response = logic.execute("delete 9")

    assert not response.success
    assert response.error is ErrorCode.VALIDATION_FAILED
    assert logic.model == expected_model


def test_failed_mark_leaves_model_unchanged(logic, expected_model):
    response = logic.execute("mark 1,2 a/Quiz2")

    assert not response.success
    assert response.error is ErrorCode.VALIDATION_FAILED
    assert logic.model == expected_model


def test_unexpected_error_is_internal_error(logic, monkeypatch):
    def explode(self, model):
        raise RuntimeError("boom")

    monkeypatch.setattr(ListCommand, "execute", explode)

    response = logic.execute("list")

    assert not response.success
    assert response.error is ErrorCode.INTERNAL_ERROR
    assert "boom" in response.detail


def test_mutating_command_saves_roster(tmp_path, sample_model):
    data_file = tmp_path / "roster.json"
    logic = LogicManager(sample_model, str(data_file))

    response = logic.execute("addassign 3 a/MathHomework")

    assert response.success
    saved = json.loads(data_file.read_text(encoding="utf-8"))
    carl = next(p for p in saved["persons"] if p["name"] == "Carl Kurz")
    assert [a["name"] for a in carl["assignments"]] == ["MathHomework"]


def test_read_only_command_does_not_save(tmp_path, sample_model):
    data_file = tmp_path / "roster.json"
    logic = LogicManager(sample_model, str(data_file))

    logic.execute("list")

    assert not data_file.exists()


def test_saved_roster_loads_back(tmp_path):
    data_file = tmp_path / "roster.json"
    logic = LogicManager(Model(), str(data_file))

    logic.execute("add n/Amy Bee p/11111111 l/JC1 c/math-1000 a/Quiz2")
    logic.execute("mark 1 a/Quiz2")
    logic.execute("remark 1 r/Needs help w/ algebra")

    loaded = Roster.load(str(data_file)).data["roster"]
    person = loaded.persons[0]

    assert person == logic.model.filtered_persons[0]
    assert person.get_assignment("Quiz2").is_marked
    assert person.remark.value == "Needs help w/ algebra"


def test_failed_save_is_reported_with_result(tmp_path, sample_model):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    logic = LogicManager(sample_model, str(blocker / "roster.json"))

    response = logic.execute("delete 1")

    assert not response.success
    assert response.error is ErrorCode.INTERNAL_ERROR
    assert response.detail.startswith("Deleted Student: Alice Pauline")
    assert response.data["result"].mutated
    assert len(logic.model.roster) == 3

import json
import pytest
from unittest.mock import MagicMock, patch
from coach.main import turn_for_input, get_profile, run_cli
from coach.config import WORK_FROM_HOME, NEXT_INTENT, STOP_INTENT
from coach.errors import UnknownSkillError

def test_turn_for_input_maps_phrases():
    assert turn_for_input("More Information", WORK_FROM_HOME).intent == NEXT_INTENT
    assert turn_for_input("stop", WORK_FROM_HOME).intent == STOP_INTENT
    turn = turn_for_input("interruptions", WORK_FROM_HOME)
    assert turn.intent == "GetWFHStrategy"
    assert turn.slots == {"Problem": "interruptions"}

def test_get_profile_unknown():
    with pytest.raises(UnknownSkillError):
        get_profile("gardening")

def test_run_cli_missing_knowledge_base(tmp_path):
    with patch("coach.main.CoachUI") as ui_cls:
        assert run_cli(["--kb", str(tmp_path / "nope.json")]) == 1
    ui_cls.return_value.print_error.assert_called_once()

def test_run_cli_conversation(tmp_path):
    kb_path = tmp_path / "kb.json"
    kb_path.write_text(json.dumps([["expired eggs", "Float test."], ["expired milk", "Sniff it."]]), encoding="utf-8")

    with patch("coach.main.CoachUI") as ui_cls:
        ui = ui_cls.return_value
        ui.console.input.side_effect = ["expired", "", "more information", "stop"]
        assert run_cli(["--kb", str(kb_path), "--explain"]) == 0

    statuses = [call.args[0].status for call in ui.display_reply.call_args_list]
    assert statuses == ["launch", "found", "follow_up", "goodbye"]
    ui.display_candidates.assert_called_once()

import pytest

from rigcontrol.domain.commands import (
    ACTION_LABELS,
    ACTION_TABLE,
    Action,
    Command,
    command_for,
    flash_color_command,
    move_command,
    zero_command,
)


@pytest.mark.parametrize(
    "action, topic, payload",
    [
        (Action.STOP, "stop", ""),
        (Action.AUTOMATE_ON, "naos/set/automate", "on"),
        (Action.AUTOMATE_OFF, "naos/set/automate", "off"),
        (Action.TURN_UP, "turn", "up"),
        (Action.TURN_DOWN, "turn", "down"),
        (Action.RESET, "reset", "100"),
        (Action.FLASH, "flash", "500"),
        (Action.DISCO, "disco", ""),
    ],
)
def test_action_table(action, topic, payload):
    assert command_for(action) == Command(topic, payload)


def test_dismiss_has_no_command():
    assert command_for(Action.DISMISS) is None
    assert Action.DISMISS not in ACTION_TABLE


def test_command_for_accepts_action_value():
    assert command_for("flash") == Command("flash", "500")


def test_unknown_action_is_rejected():
    with pytest.raises(ValueError):
        command_for("explode")


def test_every_action_has_a_label():
    assert set(ACTION_LABELS) == set(Action)


def test_move_command_formats_height():
    assert move_command(120) == Command("move", "120")
    assert move_command(87.5) == Command("move", "87.5")


def test_zero_command():
    assert zero_command() == Command("zero", "")


def test_flash_color_payload():
    assert flash_color_command(1023, 0, 512, 0, 250) == Command("flash-color", "1023 0 512 0 250")


@pytest.mark.parametrize("r, g, b, w, t", [(1024, 0, 0, 0, 10), (0, -1, 0, 0, 10), (0, 0, 0, 0, -5)])
def test_flash_color_rejects_out_of_range(r, g, b, w, t):
    with pytest.raises(ValueError):
        flash_color_command(r, g, b, w, t)

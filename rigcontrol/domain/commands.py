from __future__ import annotations
from enum import Enum
from typing import Dict, NamedTuple, Optional, Protocol


class MessageSender(Protocol):
    """Anything that can deliver a command message to a rig."""

    def send(self, id: int, topic: str, payload: str) -> None: ...


class Command(NamedTuple):
    topic: str
    payload: str


class Action(str, Enum):
    STOP = "stop"
    AUTOMATE_ON = "automate_on"
    AUTOMATE_OFF = "automate_off"
    TURN_UP = "turn_up"
    TURN_DOWN = "turn_down"
    RESET = "reset"
    FLASH = "flash"
    DISCO = "disco"
    DISMISS = "dismiss"


# Dismiss has no entry: it only closes the view
ACTION_TABLE: Dict[Action, Command] = {
    Action.STOP: Command("stop", ""),
    Action.AUTOMATE_ON: Command("naos/set/automate", "on"),
    Action.AUTOMATE_OFF: Command("naos/set/automate", "off"),
    Action.TURN_UP: Command("turn", "up"),
    Action.TURN_DOWN: Command("turn", "down"),
    Action.RESET: Command("reset", "100"),
    Action.FLASH: Command("flash", "500"),
    Action.DISCO: Command("disco", ""),
}

# Button captions, in display order
ACTION_LABELS: Dict[Action, str] = {
    Action.STOP: "Stop",
    Action.AUTOMATE_ON: "Automate On",
    Action.AUTOMATE_OFF: "Automate Off",
    Action.TURN_UP: "Up",
    Action.TURN_DOWN: "Down",
    Action.RESET: "Reset",
    Action.FLASH: "Flash",
    Action.DISCO: "Disco",
    Action.DISMISS: "Back",
}

LED_CHANNEL_MAX = 1023


def command_for(action: Action) -> Optional[Command]:
    """Return the command sent for an action, or None for Action.DISMISS."""
    return ACTION_TABLE.get(Action(action))


def move_command(height: float) -> Command:
    return Command("move", f"{float(height):g}")


def zero_command() -> Command:
    return Command("zero", "")


def flash_color_command(r: int, g: int, b: int, w: int, time_ms: int) -> Command:
    """Build a colored flash; channels are 0..1023, time in milliseconds."""
    channels = {"r": r, "g": g, "b": b, "w": w}
    for name, value in channels.items():
        if not 0 <= int(value) <= LED_CHANNEL_MAX:
            raise ValueError(f"Channel {name}={value} outside 0..{LED_CHANNEL_MAX}")
    if int(time_ms) < 0:
        raise ValueError(f"Flash time must be non-negative, got {time_ms}")
    return Command("flash-color", f"{int(r)} {int(g)} {int(b)} {int(w)} {int(time_ms)}")

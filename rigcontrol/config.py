import os
from dataclasses import dataclass
from typing import List, Tuple


def parse_rig_ids(text: str) -> List[int]:
    """Parse a comma separated list of rig ids ("1, 2,3") into ints."""
    ids: List[int] = []
    for part in (text or "").split(","):
        part = part.strip()
        if not part:
            continue
        try:
            ids.append(int(part))
        except ValueError as exc:
            raise ValueError(f"Invalid rig id {part!r} in {text!r}") from exc
    return ids


# Connection defaults
SOCKET_HOST: str = os.environ.get("SOCKET_HOST", "http://localhost")
SOCKET_PORT: int = int(os.environ.get("SOCKET_PORT", "3000"))
AUTO_CONNECT: bool = bool(int(os.environ.get("AUTO_CONNECT", "1")))
# Socket.IO event carrying {"id", "topic", "payload"} in both directions
MESSAGE_EVENT: str = os.environ.get("MESSAGE_EVENT", "message")

# Reconnect backoff (seconds)
RECONNECT_BACKOFF_S: float = 0.5
RECONNECT_BACKOFF_MAX_S: float = 5.0

LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()

# Rigs listed in the main window before any status message arrives
RIG_IDS: List[int] = parse_rig_ids(os.environ.get("RIG_IDS", "1,2,3"))


@dataclass(frozen=True)
class LayoutConstants:
    """Fixed schematic dimensions in view points."""
    light_width: float = 10.0
    light_length: float = 200.0
    object_width: float = 100.0
    floor_width: float = 300.0
    floor_height: float = 3.0
    bottom_padding: float = 50.0


LAYOUT = LayoutConstants()

# Default rig state shown before the rig reports anything
DEFAULT_POSITION: float = 100.0
DEFAULT_DISTANCE: float = 100.0

# Detail view sizing
DETAIL_MIN_W_PX: int = 360
DETAIL_MIN_H_PX: int = 560

# Colors as RGB tuples
COLOR_BG: Tuple[int, int, int] = (18, 18, 20)
COLOR_ROPE: Tuple[int, int, int] = (255, 255, 255)
COLOR_LIGHT: Tuple[int, int, int] = (255, 255, 255)
COLOR_LIGHT_MOTION: Tuple[int, int, int] = (255, 210, 90)
COLOR_FLOOR: Tuple[int, int, int] = (255, 255, 255)
COLOR_OBJECT: Tuple[int, int, int] = (0, 0, 0)
COLOR_TEXT: Tuple[int, int, int] = (220, 220, 230)

# Border widths (px) for outlined elements
ROPE_BORDER_PX: int = 1
FLOOR_BORDER_PX: int = 3

# Detail view extra commands
MOVE_MAX_CM: float = 300.0
FLASH_COLOR_MS: int = int(os.environ.get("FLASH_COLOR_MS", "500"))

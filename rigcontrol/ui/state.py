from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class ViewState:
    connection_text: str = "Disconnected"
    selected_rig_id: Optional[int] = None

from __future__ import annotations
import logging
import math
from typing import Dict, Iterable, List, Optional

from ..domain.models import RigState

logger = logging.getLogger(__name__)

_TRUE = {"1", "true", "on", "yes"}
_FALSE = {"0", "false", "off", "no", ""}


class StatusParseError(ValueError):
    """Raised when a status payload cannot be interpreted."""

    def __init__(self, rig_id: int, topic: str, payload: str) -> None:
        super().__init__(f"Rig {rig_id}: cannot parse {topic!r} payload {payload!r}")
        self.rig_id = rig_id
        self.topic = topic
        self.payload = payload


class RigRegistry:
    """
    Keeps the last known state of every rig, fed by status messages the rigs
    publish ("position", "distance", "motion", "state").
    """

    STATUS_TOPICS = ("position", "distance", "motion", "state")

    def __init__(self, rig_ids: Iterable[int] = ()) -> None:
        self._rigs: Dict[int, RigState] = {}
        for rid in rig_ids:
            self.ensure(rid)

    def ensure(self, rig_id: int) -> RigState:
        rig = self._rigs.get(int(rig_id))
        if rig is None:
            rig = RigState(id=int(rig_id))
            self._rigs[rig.id] = rig
            logger.debug(f"Registered rig {rig.id:02d}")
        return rig

    def get(self, rig_id: int) -> Optional[RigState]:
        return self._rigs.get(int(rig_id))

    def all(self) -> List[RigState]:
        return [self._rigs[k] for k in sorted(self._rigs)]

    def __len__(self) -> int:
        return len(self._rigs)

    def apply(self, rig_id: int, topic: str, payload: str) -> Optional[RigState]:
        """
        Update a rig from one status message.

        Returns the updated state, or None when the topic is not a status
        topic. Raises StatusParseError for payloads that do not parse; the
        rig is left untouched in that case.
        """
        topic = (topic or "").strip()
        if topic not in self.STATUS_TOPICS:
            return None
        text = (payload or "").strip()

        if topic in ("position", "distance"):
            try:
                value = float(text)
            except ValueError:
                raise StatusParseError(rig_id, topic, payload) from None
            if not math.isfinite(value):
                raise StatusParseError(rig_id, topic, payload)
            rig = self.ensure(rig_id)
            setattr(rig, topic, value)
        elif topic == "motion":
            low = text.lower()
            if low in _TRUE:
                value_b = True
            elif low in _FALSE:
                value_b = False
            else:
                raise StatusParseError(rig_id, topic, payload)
            rig = self.ensure(rig_id)
            rig.motion = value_b
        else:
            if not text:
                raise StatusParseError(rig_id, topic, payload)
            rig = self.ensure(rig_id)
            rig.state = text.upper()
        return rig

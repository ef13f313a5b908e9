from __future__ import annotations

from .. import config
from ..domain.models import Rect, RigLayout


class GeometryService:
    """
    Pure logic for placing the rig schematic inside a container.
    Decouples layout math from Qt widgets so it can be tested headless.
    """

    @staticmethod
    def recalculate(container_width: float, container_height: float, position: float, distance: float,
                    constants: config.LayoutConstants = config.LAYOUT) -> RigLayout:
        """
        Compute the rope, light, floor and object rectangles.

        The vertical space above the floor is split into rope, light, the
        measured distance and the object. Nothing is clamped: an object taller
        than the available space yields a negative rope length.
        """
        fw = float(container_width)
        fh = float(container_height)
        c = constants

        object_height = float(position) - float(distance)
        rope_length = fh - c.bottom_padding - object_height - float(distance) - c.light_length
        floor_y = fh - c.bottom_padding

        return RigLayout(
            rope=Rect(fw / 2, 0.0, 1.0, rope_length),
            light=Rect(fw / 2 - c.light_width / 2, rope_length, c.light_width, c.light_length),
            floor=Rect(fw / 2 - c.floor_width / 2, floor_y, c.floor_width, c.floor_height),
            object=Rect(fw / 2 - c.object_width / 2, floor_y - object_height, c.object_width, object_height),
        )

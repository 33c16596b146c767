"""Axis-aligned rectangles and collision resolution."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from platformecs.vector import Vector2


@dataclass
class Rect:
    """A rectangle given by its top-left corner and size, relative to a position."""

    left: float = 0
    top: float = 0
    width: float = 0
    height: float = 0

    def is_colliding(self, pos: Vector2, rect: Rect, rect_pos: Vector2) -> bool:
        """Tell whether this rect placed at ``pos`` overlaps ``rect`` placed at ``rect_pos``."""
        pos_x = pos.x + self.left
        pos_y = pos.y + self.top
        other_x = rect_pos.x + rect.left
        other_y = rect_pos.y + rect.top
        return (
            pos_x < other_x + rect.width
            and pos_x + self.width > other_x
            and pos_y < other_y + rect.height
            and pos_y + self.height > other_y
        )

    def handle_collision_from_rect(self, pos: Vector2, rect: Rect, rect_pos: Vector2) -> None:
        """Push ``pos`` out of ``rect`` along the axis of least relative penetration."""
        if not self.is_colliding(pos, rect, rect_pos):
            return
        center = Vector2(pos.x + self.width / 2, pos.y + self.height / 2)
        rect_center = Vector2(rect_pos.x + rect.width / 2, rect_pos.y + rect.height / 2)
        diff_x = center.x - rect_center.x
        diff_y = center.y - rect_center.y
        if abs(diff_x / self.width) < abs(diff_y / self.height):
            if diff_x < 0:
                pos.x = rect_pos.x - self.width
            else:
                pos.x = rect_pos.x + rect.width
        else:
            if diff_y < 0:
                pos.y = rect_pos.y - self.height
            else:
                pos.y = rect_pos.y + rect.height


class Side(IntEnum):
    """Axis along which ``replace_on_top`` resolved a collision."""

    NONE = -1
    HORIZONTAL = 0
    VERTICAL = 1


def replace_on_top(pos1: Vector2, rect1: Rect, pos2: Vector2, rect2: Rect) -> Side:
    """Move ``pos1`` so that ``rect1`` no longer overlaps ``rect2``.

    The axis with the smaller overlap is the one corrected. ``pos1`` is changed
    in place; the returned value tells which axis moved.
    """
    if not rect1.is_colliding(pos1, rect2, pos2):
        return Side.NONE
    pos1_x = pos1.x + rect1.left
    pos1_y = pos1.y + rect1.top
    pos2_x = pos2.x + rect2.left
    pos2_y = pos2.y + rect2.top
    x1 = max(pos1_x, pos2_x)
    y1 = max(pos1_y, pos2_y)
    x2 = min(pos1_x + rect1.width, pos2_x + rect2.width)
    y2 = min(pos1_y + rect1.height, pos2_y + rect2.height)
    diff_x = (pos1_x + rect1.width / 2) - (pos2_x + rect2.width / 2)
    diff_y = (pos1_y + rect1.height / 2) - (pos2_y + rect2.height / 2)
    if x2 - x1 > y2 - y1:
        if diff_y < 0:
            pos1.y = pos2_y - rect1.height - rect1.top
        else:
            pos1.y = pos2_y + rect2.height - rect1.top
        return Side.VERTICAL
    if diff_x < 0:
        pos1.x = pos2_x - rect1.width - rect1.left
    else:
        pos1.x = pos2_x + rect2.width - rect1.left
    return Side.HORIZONTAL
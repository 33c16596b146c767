"""Component types attached to entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Callable, Dict, List, Optional

from platformecs.keyboard import InputType, Key
from platformecs.rect import Rect
from platformecs.vector import Vector2


@dataclass
class View:
    """A camera view: the world rectangle shown and the viewport it is drawn to.

    The viewport is expressed as fractions of the window, covering it fully by default.
    """

    rect: Rect = field(default_factory=Rect)
    viewport: Rect = field(default_factory=lambda: Rect(0, 0, 1, 1))

    def set_viewport(self, starting_point: Vector2, width: float, height: float) -> None:
        """Set the viewport from its top-left corner and size."""
        self.viewport = Rect(starting_point.x, starting_point.y, width, height)


@dataclass
class CameraComponent:
    view: View = field(default_factory=View)
    target: Optional[int] = None
    follow_x: bool = False
    follow_y: bool = False
    is_active: bool = True


@dataclass
class CollisionComponent:
    collider: Rect = field(default_factory=Rect)
    actions: List[Callable[[int], Any]] = field(default_factory=list)
    layer: int = 0
    is_active: bool = True

    def add_action(self, registry: Any, function: Callable[..., Any], *args: type) -> None:
        """Add a collision action called with the entity id and the arrays of the given types.

        The arrays are fetched from the registry each time the action runs.
        """
        component_types = args

        def action(entity_id: int) -> None:
            function(entity_id, *(registry.get_component(kind) for kind in component_types))

        self.actions.append(action)

    def run_actions(self, entity_id: int) -> None:
        """Run every action for the given entity, in the order they were added."""
        for action in list(self.actions):
            action(entity_id)


@dataclass
class ControllableComponent:
    key_up: Key = Key.NO_KEY
    key_left: Key = Key.NO_KEY
    key_down: Key = Key.NO_KEY
    key_right: Key = Key.NO_KEY
    speed: float = 1.0


@dataclass
class DamageComponent:
    damage: int = 0
    list_damage: List[int] = field(default_factory=list)


@dataclass
class GravityComponent:
    gravity_force: Vector2 = field(default_factory=Vector2)
    cumulated_g_velocity: Vector2 = field(default_factory=Vector2)
    is_active: bool = False


@dataclass
class HealthComponent:
    health: int = 0


@dataclass
class InputComponent:
    inputs: Dict[InputType, Key] = field(default_factory=dict)

    def add_input(self, input_type: InputType, key: Key) -> None:
        """Bind a key to an input type; an existing binding is kept."""
        self.inputs.setdefault(input_type, key)


@dataclass
class NetworkIdComponent:
    id: int = 0


class PressableState(IntEnum):
    DEFAULT = 0
    HOVERED = 1
    PRESSED = 2


@dataclass
class PressableComponent:
    hitbox: Rect = field(default_factory=Rect)
    texture_default: Rect = field(default_factory=Rect)
    texture_hovered: Rect = field(default_factory=Rect)
    texture_pressed: Rect = field(default_factory=Rect)
    state: PressableState = PressableState.DEFAULT
    action: Optional[Callable[[], Any]] = None


@dataclass
class ScoreComponent:
    score: int = 0


@dataclass
class TextComponent:
    text: str = ""
    font_path: str = ""
    size: int = 0
    is_rendered: bool = True
    render_layer: int = 0


@dataclass
class TextureComponent:
    path: str = ""
    animated: bool = False
    texture_size: Rect = field(default_factory=Rect)
    texture_rects: List[Rect] = field(default_factory=list)
    animation_speed: float = 0.0
    is_rendered: bool = True
    last_update: float = 0.0
    anime_id: int = 0
    render_layer: int = 0


@dataclass
class TransformComponent:
    position: Vector2 = field(default_factory=Vector2)
    velocity: Vector2 = field(default_factory=Vector2)
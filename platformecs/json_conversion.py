"""Building components from decoded JSON prefab data.

Required keys that are missing raise KeyError; optional keys fall back to defaults.
"""

from __future__ import annotations

from typing import Any, Mapping

from platformecs.components import (
    CameraComponent,
    CollisionComponent,
    ControllableComponent,
    DamageComponent,
    GravityComponent,
    HealthComponent,
    TextComponent,
    TextureComponent,
    TransformComponent,
    View,
)
from platformecs.keyboard import key_from_name
from platformecs.rect import Rect
from platformecs.vector import Vector2

DEFAULT_HEALTH = 5


def rect_from_json(data: Mapping[str, Any]) -> Rect:
    return Rect(data["left"], data["top"], data["width"], data["height"])


def vector_from_json(data: Mapping[str, Any]) -> Vector2:
    return Vector2(data["x"], data["y"])


def transform_from_json(data: Mapping[str, Any]) -> TransformComponent:
    return TransformComponent(
        position=vector_from_json(data["position"]),
        velocity=vector_from_json(data["velocity"]),
    )


def health_from_json(data: Mapping[str, Any]) -> HealthComponent:
    return HealthComponent(health=int(data.get("health", DEFAULT_HEALTH)))


def damage_from_json(data: Mapping[str, Any]) -> DamageComponent:
    return DamageComponent(damage=data["damage"])


def controllable_from_json(data: Mapping[str, Any]) -> ControllableComponent:
    return ControllableComponent(
        key_up=key_from_name(data["key_up"]),
        key_left=key_from_name(data["key_left"]),
        key_down=key_from_name(data["key_down"]),
        key_right=key_from_name(data["key_right"]),
        speed=data["speed"],
    )


def texture_from_json(data: Mapping[str, Any]) -> TextureComponent:
    return TextureComponent(
        path=data["texturePath"],
        texture_size=rect_from_json(data["textureSize"]),
        animated=data.get("animated", False),
        texture_rects=[rect_from_json(item) for item in data["textureRects"]],
        animation_speed=data.get("animationSpeed", 0.0),
        is_rendered=data.get("isRendered", True),
        last_update=data.get("lastUpdate", 0.0),
        anime_id=0,
        render_layer=data["renderLayer"],
    )


def collision_from_json(data: Mapping[str, Any]) -> CollisionComponent:
    return CollisionComponent(
        collider=rect_from_json(data["collider"]),
        layer=data["layer"],
        is_active=data.get("isActive", True),
    )


def gravity_from_json(data: Mapping[str, Any]) -> GravityComponent:
    return GravityComponent(
        gravity_force=vector_from_json(data["gravityForce"]),
        is_active=data["isActive"],
    )


def camera_from_json(data: Mapping[str, Any]) -> CameraComponent:
    camera = CameraComponent(view=View(rect_from_json(data["cameraView"])))
    if "cameraViewport" in data:
        viewport = rect_from_json(data["cameraViewport"])
        camera.view.set_viewport(Vector2(viewport.left, viewport.top), viewport.width, viewport.height)
    camera.follow_x = data.get("follow_x", camera.follow_x)
    camera.follow_y = data.get("follow_y", camera.follow_y)
    camera.is_active = data.get("isActive", camera.is_active)
    return camera


def text_from_json(data: Mapping[str, Any]) -> TextComponent:
    return TextComponent(
        text=data["str"],
        size=data["size"],
        font_path=data["fontPath"],
        is_rendered=data.get("isRendered", True),
        render_layer=data["renderLayer"],
    )
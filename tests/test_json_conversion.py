import json

import pytest

from platformecs.components import View
from platformecs.json_conversion import (
    camera_from_json,
    collision_from_json,
    controllable_from_json,
    damage_from_json,
    gravity_from_json,
    health_from_json,
    rect_from_json,
    text_from_json,
    texture_from_json,
    transform_from_json,
    vector_from_json,
)
from platformecs.keyboard import Key
from platformecs.rect import Rect
from platformecs.vector import Vector2


def test_rect_and_vector():
    assert rect_from_json({"left": 1, "top": 2, "width": 30, "height": 40}) == Rect(1, 2, 30, 40)
    assert vector_from_json({"x": 1.5, "y": -2}) == Vector2(1.5, -2)


def test_rect_missing_key():
    with pytest.raises(KeyError):
        rect_from_json({"left": 1, "top": 2, "width": 3})


def test_transform_from_decoded_text():
    data = json.loads('{"position": {"x": 10, "y": 20}, "velocity": {"x": -1, "y": 0}}')
    transform = transform_from_json(data)
    assert transform.position == Vector2(10, 20)
    assert transform.velocity == Vector2(-1, 0)


def test_health_default_and_value():
    assert health_from_json({}).health == 5
    assert health_from_json({"health": 3}).health == 3


def test_damage():
    assert damage_from_json({"damage": 7}).damage == 7
    with pytest.raises(KeyError):
        damage_from_json({})


def test_controllable():
    data = {"key_up": "Z", "key_down": "S", "key_left": "Q", "key_right": "D", "speed": 2.5}
    control = controllable_from_json(data)
    assert (control.key_up, control.key_down, control.key_left, control.key_right) == (
        Key.Z,
        Key.S,
        Key.Q,
        Key.D,
    )
    assert control.speed == 2.5


def test_controllable_unknown_key():
    data = {"key_up": "Nope", "key_down": "S", "key_left": "Q", "key_right": "D", "speed": 1}
    with pytest.raises(KeyError):
        controllable_from_json(data)


def test_texture_with_defaults():
    data = {
        "texturePath": "assets/player.png",
        "textureSize": {"left": 0, "top": 0, "width": 32, "height": 48},
        "textureRects": [
            {"left": 0, "top": 0, "width": 16, "height": 16},
            {"left": 16, "top": 0, "width": 16, "height": 16},
        ],
        "renderLayer": 2,
    }
    texture = texture_from_json(data)
    assert texture.path == "assets/player.png"
    assert texture.texture_size == Rect(0, 0, 32, 48)
    assert texture.texture_rects == [Rect(0, 0, 16, 16), Rect(16, 0, 16, 16)]
    assert texture.animated is False
    assert texture.is_rendered is True
    assert texture.anime_id == 0
    assert texture.render_layer == 2


def test_texture_requires_render_layer():
    data = {
        "texturePath": "a.png",
        "textureSize": {"left": 0, "top": 0, "width": 1, "height": 1},
        "textureRects": [],
    }
    with pytest.raises(KeyError):
        texture_from_json(data)


def test_collision():
    data = {"collider": {"left": 7, "top": 0, "width": 20, "height": 30}, "layer": 30}
    collision = collision_from_json(data)
    assert collision.collider == Rect(7, 0, 20, 30)
    assert collision.layer == 30
    assert collision.is_active is True
    assert collision_from_json({**data, "isActive": False}).is_active is False


def test_gravity():
    gravity = gravity_from_json({"gravityForce": {"x": 0, "y": 9.8}, "isActive": True})
    assert gravity.gravity_force == Vector2(0, 9.8)
    assert gravity.is_active is True
    assert gravity.cumulated_g_velocity == Vector2(0, 0)
    with pytest.raises(KeyError):
        gravity_from_json({"gravityForce": {"x": 0, "y": 1}})


def test_camera_without_viewport():
    camera = camera_from_json({"cameraView": {"left": 0, "top": 0, "width": 1920, "height": 1080}})
    assert camera.view == View(Rect(0, 0, 1920, 1080))
    assert camera.is_active is True


def test_camera_with_viewport_and_flags():
    data = {
        "cameraView": {"left": 0, "top": 0, "width": 800, "height": 600},
        "cameraViewport": {"left": 0.75, "top": 0, "width": 0.25, "height": 0.25},
        "follow_x": True,
        "isActive": False,
    }
    camera = camera_from_json(data)
    assert camera.view.viewport == Rect(0.75, 0, 0.25, 0.25)
    assert camera.follow_x is True
    assert camera.follow_y is False
    assert camera.is_active is False


def test_text():
    data = {"str": "Pause", "size": 80, "fontPath": "fonts/title.ttf", "renderLayer": 50}
    text = text_from_json(data)
    assert text.text == "Pause"
    assert text.size == 80
    assert text.font_path == "fonts/title.ttf"
    assert text.is_rendered is True
    assert text.render_layer == 50
    assert text_from_json({**data, "isRendered": False}).is_rendered is False
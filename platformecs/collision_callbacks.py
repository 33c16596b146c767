"""Collision actions that stand entities on the ground."""

from __future__ import annotations

from platformecs.components import (
    CollisionComponent,
    GravityComponent,
    TextureComponent,
    TransformComponent,
)
from platformecs.rect import Side, replace_on_top
from platformecs.sparse_array import SparseArray
from platformecs.vector import Vector2

GROUND_LAYER = 30
FACING_RIGHT_ROW = 0
FACING_LEFT_ROW = 48


def _settle(gravity: GravityComponent, landed: bool) -> None:
    if landed:
        gravity.cumulated_g_velocity = Vector2(0, 0)
        gravity.is_active = False
    else:
        gravity.is_active = True


def _ground_contacts(entity_id, collisions, transforms, own_collision, own_transform):
    """Yield the side of each resolved contact with an active ground collider."""
    for index in range(len(collisions)):
        if index == entity_id:
            continue
        collision = collisions[index]
        transform = transforms[index]
        if (
            collision is None
            or transform is None
            or not collision.is_active
            or collision.layer != GROUND_LAYER
        ):
            continue
        yield replace_on_top(
            own_transform.position, own_collision.collider, transform.position, collision.collider
        )


def standard_gravity_collision_callback(
    entity_id: int,
    collisions: SparseArray[CollisionComponent],
    transforms: SparseArray[TransformComponent],
    gravity: SparseArray[GravityComponent],
) -> None:
    """Push the entity out of the ground and stop its fall when standing on it."""
    own_collision = collisions[entity_id]
    own_transform = transforms[entity_id]
    own_gravity = gravity[entity_id]
    if own_collision is None or own_transform is None or own_gravity is None:
        return
    landed = False
    for side in _ground_contacts(entity_id, collisions, transforms, own_collision, own_transform):
        if side == Side.VERTICAL:
            landed = True
    _settle(own_gravity, landed)


def change_dir_gravity_collision_callback(
    entity_id: int,
    collisions: SparseArray[CollisionComponent],
    transforms: SparseArray[TransformComponent],
    gravity: SparseArray[GravityComponent],
    textures: SparseArray[TextureComponent],
) -> None:
    """Like the standard callback, and turn the entity around when it hits a wall."""
    own_collision = collisions[entity_id]
    own_transform = transforms[entity_id]
    own_gravity = gravity[entity_id]
    own_texture = textures[entity_id]
    if own_collision is None or own_transform is None or own_gravity is None or own_texture is None:
        return
    landed = False
    for side in _ground_contacts(entity_id, collisions, transforms, own_collision, own_transform):
        if side == Side.VERTICAL:
            landed = True
        elif side == Side.HORIZONTAL:
            own_transform.velocity.x = -own_transform.velocity.x
            row = FACING_RIGHT_ROW if own_transform.velocity.x > 0 else FACING_LEFT_ROW
            for texture_rect in own_texture.texture_rects:
                texture_rect.top = row
    _settle(own_gravity, landed)
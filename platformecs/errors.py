"""Exceptions raised by the engine."""


class EngineError(Exception):
    """Base class for engine errors."""

    default_message = "Engine error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class ComponentNotRegisterError(EngineError):
    """A component type was used before being registered."""

    default_message = "Component is not registered"


class ComponentNotInsertedError(EngineError):
    """A component was looked up in an array that does not hold it."""

    default_message = "Component is not inserted in the array"


class TooMuchEntitiesError(EngineError):
    """The maximum number of entities was exceeded."""

    default_message = "Too many entities"


class InvalidEntityIdError(EngineError):
    """An entity id is out of range or not alive."""

    default_message = "Invalid entity id"


class InvalidSceneNameError(EngineError):
    """A scene name is invalid or already used."""

    default_message = "Invalid scene name"


class SceneNotRegisterError(EngineError):
    """A scene was used before being registered."""

    default_message = "Scene is not registered"


class InvalidPrefabFileError(EngineError):
    """A prefab file is missing or malformed."""

    default_message = "Invalid prefab file"


class PrefabNameAlreadyUsedError(EngineError):
    """A prefab with the same name already exists."""

    default_message = "Prefab name already used"
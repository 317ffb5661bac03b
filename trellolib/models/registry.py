"""Registry of entity classes by name.

Association declarations may name their target by class name so that
mutually dependent entities (a card's list, a list's cards) can be declared
before both classes exist.
"""

from typing import Union

_entity_classes: dict[str, type] = {}


def register_entity_class(cls: type) -> type:
    _entity_classes[cls.__name__] = cls
    return cls


def resolve_entity_class(target: Union[str, type]) -> type:
    """Return the entity class for a class or a registered class name."""
    if isinstance(target, str):
        try:
            return _entity_classes[target]
        except KeyError:
            raise LookupError(f"Unknown entity type: {target}") from None
    return target

"""Attribute-backed entity base class.

Subclasses declare their schema with ``Attribute`` descriptors and their
relations with ``has_one`` / ``has_many``::

    class Card(BasicData):
        path_name = "cards"

        name = Attribute()
        list_id = Attribute("idList")
        board = has_one("Board", via="board_id")

Every instance keeps the current values and the baseline they were loaded
with; the fields that differ are sent on the next ``save``.
"""

import copy
from typing import Any, ClassVar, Iterable, Optional

from trellolib.errors import NotSavedError, TrelloError
from trellolib.logging import get_module_logger
from trellolib.models.association import Association, CacheSlot
from trellolib.models.attributes import Attribute
from trellolib.models.registry import register_entity_class

logger = get_module_logger()


class BasicData:
    """Base for every Trello entity.

    Class Attributes:
        path_name: Resource collection segment, e.g. "boards"
        read_only: Entities that can never be created, updated or deleted
    """

    path_name: ClassVar[str] = ""
    read_only: ClassVar[bool] = False

    _schema: ClassVar[dict[str, Attribute]] = {}
    _associations: ClassVar[dict[str, Association]] = {}
    _remote_keys: ClassVar[dict[str, str]] = {}

    id = Attribute(readonly=True)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        schema: dict[str, Attribute] = {}
        associations: dict[str, Association] = {}
        for klass in reversed(cls.__mro__):
            for name, value in vars(klass).items():
                if isinstance(value, Attribute):
                    schema[name] = value
                elif isinstance(value, Association):
                    associations[name] = value
        cls._schema = schema
        cls._associations = associations
        cls._remote_keys = {attr.remote_key: name for name, attr in schema.items()}
        register_entity_class(cls)

    def __init__(
        self,
        fields: Optional[dict[str, Any]] = None,
        *,
        client: Optional[Any] = None,
        **attributes: Any,
    ) -> None:
        self._client = client
        self._attributes: dict[str, Any] = {}
        self._baseline: dict[str, Any] = {}
        self._extra: dict[str, Any] = {}
        self._slots: dict[str, CacheSlot] = {}

        if fields is not None:
            self.load(fields)

        for name, value in attributes.items():
            attribute = self._schema.get(name)
            if attribute is None:
                raise TypeError(
                    f"{type(self).__name__} has no attribute named {name!r}"
                )
            if attribute.readonly:
                self._attributes[name] = value
                self._baseline[name] = copy.deepcopy(value)
            else:
                setattr(self, name, value)

    @property
    def client(self):
        """Client bound to this entity, or the package default client."""
        if self._client is None:
            from trellolib import defaults

            return defaults.get_client()
        return self._client

    @property
    def resource_path(self) -> str:
        return f"/{self.path_name}/{self._require_id()}"

    def _require_id(self) -> str:
        if not self.id:
            raise NotSavedError(
                f"{type(self).__name__} has no id; save it before using it remotely"
            )
        return self.id

    # Loading and dirty tracking

    def load(self, fields: dict[str, Any]) -> "BasicData":
        """Replace every attribute from a JSON object and reset the baseline.

        Raises:
            ValueError: If the payload's id differs from the entity's id
        """
        incoming_id = fields.get("id")
        if self.id and incoming_id and incoming_id != self.id:
            raise ValueError(
                f"Cannot load {type(self).__name__} {incoming_id} into {self.id}"
            )

        attributes: dict[str, Any] = {}
        extra: dict[str, Any] = {}
        for key, raw in fields.items():
            name = self._remote_keys.get(key)
            if name is None:
                name = key if key in self._schema else None
            if name is None:
                extra[key] = raw
            else:
                attributes[name] = self._schema[name].parse(raw)

        if self.id and "id" not in attributes:
            attributes["id"] = self.id

        self._attributes = attributes
        self._baseline = copy.deepcopy(attributes)
        self._extra = extra
        return self

    @property
    def changed_attributes(self) -> list[str]:
        """Names of the attributes written since the last load or save."""
        return [
            name
            for name in self._schema
            if self._attributes.get(name) != self._baseline.get(name)
        ]

    @property
    def is_dirty(self) -> bool:
        return bool(self.changed_attributes)

    @property
    def attributes(self) -> dict[str, Any]:
        return dict(self._attributes)

    def update_fields(self, **fields: Any) -> "BasicData":
        """Write several attributes through their setters."""
        for name, value in fields.items():
            if name not in self._schema:
                raise TypeError(
                    f"{type(self).__name__} has no attribute named {name!r}"
                )
            setattr(self, name, value)
        return self

    def _mark_clean(self) -> None:
        self._baseline = copy.deepcopy(self._attributes)

    # Payloads

    def _payload(self, names: Iterable[str]) -> dict[str, Any]:
        return {
            self._schema[name].remote_key: self._schema[name].serialize(
                self._attributes.get(name)
            )
            for name in names
        }

    def create_payload(self) -> dict[str, Any]:
        """Every set attribute that may be sent when creating."""
        return self._payload(
            name
            for name, attribute in self._schema.items()
            if attribute.sent_on_create and self._attributes.get(name) is not None
        )

    def update_payload(self) -> dict[str, Any]:
        """Only the dirty attributes that may be sent on update."""
        return self._payload(
            name
            for name in self.changed_attributes
            if self._schema[name].sent_on_update
        )

    # Persistence

    def _ensure_writable(self) -> None:
        if self.read_only:
            raise TrelloError(f"{type(self).__name__} entities are read-only")

    def save(self) -> "BasicData":
        """Create the entity when it has no id, else send its dirty fields."""
        self._ensure_writable()
        log = logger.bind(entity=type(self).__name__)

        if not self.id:
            data = self.client.post(f"/{self.path_name}", self.create_payload())
            if isinstance(data, dict):
                self.load(data)
            else:
                self._mark_clean()
            log.info("entity_created", entity_id=self.id)
            return self

        payload = self.update_payload()
        if not payload:
            log.debug("entity_unchanged", entity_id=self.id)
            return self

        data = self.client.put(self.resource_path, payload)
        if isinstance(data, dict):
            self.load(data)
        else:
            self._mark_clean()
        log.info("entity_updated", entity_id=self.id, fields=sorted(payload))
        return self

    def delete(self) -> "BasicData":
        """Delete the entity remotely; local attributes are left as they are."""
        self._ensure_writable()
        self.client.delete(self.resource_path)
        logger.info("entity_deleted", entity=type(self).__name__, entity_id=self.id)
        return self

    def refresh(self, params: Optional[dict[str, Any]] = None) -> "BasicData":
        data = self.client.get(self.resource_path, params)
        self.load(data or {})
        return self

    # Construction

    @classmethod
    def from_response(cls, data: dict[str, Any], client: Optional[Any] = None):
        return cls(data, client=client)

    @classmethod
    def from_response_list(
        cls, data: Iterable[dict[str, Any]], client: Optional[Any] = None
    ) -> list:
        return [cls.from_response(item, client=client) for item in data or []]

    @classmethod
    def find(
        cls,
        entity_id: str,
        params: Optional[dict[str, Any]] = None,
        client: Optional[Any] = None,
    ):
        """Fetch one entity by id, e.g. ``Board.find("b1")``."""
        if client is None:
            from trellolib import defaults

            client = defaults.get_client()
        return client.find(cls, entity_id, params)

    @classmethod
    def create(cls, client: Optional[Any] = None, **attributes: Any):
        """Build an entity from attributes and save it."""
        return cls(client=client, **attributes).save()

    # Associations

    def _association_slot(self, name: str) -> CacheSlot:
        if name not in self._associations:
            raise ValueError(f"{type(self).__name__} has no association {name!r}")
        slot = self._slots.get(name)
        if slot is None:
            slot = self._slots.setdefault(name, CacheSlot())
        return slot

    def reset_association(self, name: str) -> None:
        self._association_slot(name).reset()

    def reload_association(self, name: str) -> Any:
        """Drop the cached value and resolve the association again."""
        self.reset_association(name)
        return self._associations[name].resolve(self)

    # Mapping style access

    def _lookup_name(self, key: str) -> Optional[str]:
        if key in self._schema:
            return key
        return self._remote_keys.get(key)

    def __getitem__(self, key: str) -> Any:
        name = self._lookup_name(key)
        if name is not None:
            return self._attributes.get(name)
        if key in self._extra:
            return self._extra[key]
        raise KeyError(key)

    def get(self, key: str, default: Any = None) -> Any:
        try:
            value = self[key]
        except KeyError:
            return default
        return default if value is None else value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BasicData):
            return NotImplemented
        if self.id is None or other.id is None:
            return self is other
        return type(self) is type(other) and self.id == other.id

    def __hash__(self) -> int:
        """Hash by type and id, or by identity while the entity has no id.

        Saving a new entity assigns its id and so changes its hash. Add an
        unsaved entity to a set or dict only after it has been saved.
        """
        if self.id is None:
            return id(self)
        return hash((type(self), self.id))

    def __repr__(self) -> str:
        name = self._attributes.get("name")
        label = f" {name!r}" if name else ""
        return f"<{type(self).__name__} {self.id}{label}>"

"""Declarative associations between entities.

Associations are declared once per entity class and resolved lazily per
instance::

    class Board(BasicData):
        cards = has_many("Card")
        organization = has_one("Organization", via="organization_id", optional=True)

``board.organization`` fetches the organization on first access and caches
it on ``board``. ``board.cards`` returns an ``AssociationProxy``; the cards
are fetched the first time the proxy is iterated, indexed or measured, and
cached on ``board`` as a ``MultiAssociation``. ``board.cards.filter(...)``
always issues a fresh call and leaves the cache alone.

Per instance and association, a ``CacheSlot`` moves through
UNRESOLVED -> RESOLVING -> RESOLVED, or -> FAILED when the API call fails.
A failed slot re-raises its error until it is reloaded.
"""

import threading
from collections.abc import Sequence
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Optional, Union

import structlog

from trellolib.errors import ApiError, TransportError
from trellolib.models.fetchers import HasManyFetcher, HasOneFetcher
from trellolib.models.registry import resolve_entity_class

if TYPE_CHECKING:
    from trellolib.models.base import BasicData

logger = structlog.get_logger(__name__)


class SlotState(Enum):
    UNRESOLVED = "unresolved"
    RESOLVING = "resolving"
    RESOLVED = "resolved"
    FAILED = "failed"


class CacheSlot:
    """Per-instance holder memoizing one association's resolved value.

    Only errors from the API round trip are cached. Local precondition
    failures (no id yet, no credentials) leave the slot unresolved.
    """

    CACHED_ERRORS = (ApiError, TransportError)

    def __init__(self) -> None:
        self.state = SlotState.UNRESOLVED
        self.value: Any = None
        self.error: Optional[Exception] = None
        self._lock = threading.RLock()

    @property
    def resolved(self) -> bool:
        return self.state is SlotState.RESOLVED

    def get(self, loader: Callable[[], Any]) -> Any:
        """Return the cached value, calling ``loader`` on first use only."""
        with self._lock:
            if self.state is SlotState.RESOLVED:
                return self.value
            if self.state is SlotState.FAILED:
                raise self.error
            if self.state is SlotState.RESOLVING:
                raise RuntimeError("Association accessed while it is being resolved")

            self.state = SlotState.RESOLVING
            try:
                value = loader()
            except self.CACHED_ERRORS as e:
                self.state = SlotState.FAILED
                self.error = e
                raise
            except BaseException:
                self.state = SlotState.UNRESOLVED
                raise

            self.value = value
            self.state = SlotState.RESOLVED
            return value

    def reset(self) -> None:
        with self._lock:
            self.state = SlotState.UNRESOLVED
            self.value = None
            self.error = None


class Association:
    """Base association declaration, installed as a descriptor.

    Args:
        target: Entity class, or registered class name
        path: Sub-path under the owner's resource path
        params: Fixed query parameters sent on every fetch
    """

    fetcher_class: type

    def __init__(
        self,
        target: Union[str, type],
        *,
        path: Optional[str] = None,
        params: Optional[dict[str, Any]] = None,
    ) -> None:
        self._target = target
        self.path = path
        self.params = dict(params or {})
        self.name: Optional[str] = None
        self.owner: Optional[type] = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self.owner = owner

    @property
    def target(self) -> type:
        return resolve_entity_class(self._target)

    def __set__(self, instance: Any, value: Any) -> None:
        raise AttributeError(
            f"{type(instance).__name__}.{self.name} is an association and cannot be assigned"
        )

    def fetch(self, owner: "BasicData", params: Optional[dict[str, Any]] = None) -> Any:
        """Fetch the association without touching the cache."""
        return self.fetcher_class(self).fetch(owner, params or {})

    def resolve(self, owner: "BasicData") -> Any:
        """Fetch through the owner's cache slot."""
        return owner._association_slot(self.name).get(lambda: self.fetch(owner))

    def __repr__(self) -> str:
        owner = self.owner.__name__ if self.owner else "?"
        return f"<{type(self).__name__} {owner}.{self.name}>"


class HasOne(Association):
    """Single related entity.

    Args:
        target: Entity class, or registered class name
        via: Attribute on the owner holding the related entity's id; the
            entity is then fetched from the target's own resource path
        path: Sub-path under the owner's resource path, used when ``via`` is
            not given (defaults to the association name)
        params: Fixed query parameters
        optional: Map a missing relation to None instead of NotFoundError
    """

    fetcher_class = HasOneFetcher

    def __init__(
        self,
        target: Union[str, type],
        *,
        via: Optional[str] = None,
        path: Optional[str] = None,
        params: Optional[dict[str, Any]] = None,
        optional: bool = False,
    ) -> None:
        super().__init__(target, path=path, params=params)
        self.via = via
        self.optional = optional

    def __set_name__(self, owner: type, name: str) -> None:
        super().__set_name__(owner, name)
        if self.via is None and self.path is None:
            self.path = name

    def __get__(self, instance: Any, owner: type) -> Any:
        if instance is None:
            return self
        return self.resolve(instance)


class HasMany(Association):
    """Ordered collection of related entities.

    Args:
        target: Entity class, or registered class name
        path: Sub-path under the owner's resource path (defaults to the
            association name)
        params: Fixed query parameters
    """

    fetcher_class = HasManyFetcher

    def __set_name__(self, owner: type, name: str) -> None:
        super().__set_name__(owner, name)
        if self.path is None:
            self.path = name

    def __get__(self, instance: Any, owner: type) -> Any:
        if instance is None:
            return self
        return AssociationProxy(instance, self)

    def fetch(
        self, owner: "BasicData", params: Optional[dict[str, Any]] = None
    ) -> "MultiAssociation":
        return MultiAssociation(owner, self, super().fetch(owner, params))


class MultiAssociation(list):
    """Resolved collection of a has-many association, in server order."""

    def __init__(
        self, owner: "BasicData", association: HasMany, items: Sequence = ()
    ) -> None:
        super().__init__(items)
        self.owner = owner
        self.association = association


class AssociationProxy(Sequence):
    """Lazy view of one owner's has-many association.

    Reading elements resolves the association through the owner's cache
    slot. ``filter`` and ``fetch`` bypass the cache entirely.
    """

    def __init__(self, owner: "BasicData", association: HasMany) -> None:
        self._owner = owner
        self._association = association

    @property
    def resolved(self) -> bool:
        return self._owner._association_slot(self._association.name).resolved

    def all(self) -> MultiAssociation:
        return self._association.resolve(self._owner)

    def fetch(self, **params: Any) -> MultiAssociation:
        """Issue a fresh, uncached call with extra query parameters."""
        return self._association.fetch(self._owner, params)

    def filter(self, filter: Optional[str] = None, **params: Any) -> MultiAssociation:
        """Fetch a filtered collection, e.g. ``board.cards.filter("closed")``.

        Never served from, and never stored in, the unfiltered cache.
        """
        if filter is not None:
            params["filter"] = filter
        return self.fetch(**params)

    def reload(self) -> MultiAssociation:
        return self._owner.reload_association(self._association.name)

    def __getitem__(self, index):
        return self.all()[index]

    def __len__(self) -> int:
        return len(self.all())

    def __iter__(self):
        return iter(self.all())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (AssociationProxy, list, tuple)):
            return list(self) == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        name = f"{type(self._owner).__name__}.{self._association.name}"
        if not self.resolved:
            return f"<AssociationProxy {name} (unresolved)>"
        return f"<AssociationProxy {name} {list(self.all())!r}>"


def has_one(target: Union[str, type], **options: Any) -> HasOne:
    """Declare a single-entity association on an entity class."""
    return HasOne(target, **options)


def has_many(target: Union[str, type], **options: Any) -> HasMany:
    """Declare a collection association on an entity class."""
    return HasMany(target, **options)

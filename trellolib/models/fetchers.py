"""Fetchers performing the client call behind an association."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional

import structlog

from trellolib.errors import ApiError, NotFoundError

if TYPE_CHECKING:
    from trellolib.models.association import Association
    from trellolib.models.base import BasicData

logger = structlog.get_logger(__name__)


class AssociationFetcher(ABC):
    """Builds the request for one association and maps the JSON response."""

    def __init__(self, association: "Association") -> None:
        self.association = association

    def query(self, params: dict[str, Any]) -> Optional[dict[str, Any]]:
        merged = {**self.association.params, **params}
        return merged or None

    @abstractmethod
    def fetch(self, owner: "BasicData", params: dict[str, Any]) -> Any:
        """Return the mapped entity or entities for ``owner``."""


class HasOneFetcher(AssociationFetcher):
    """Fetches one entity, either by foreign key or under the owner's path."""

    def fetch(self, owner: "BasicData", params: dict[str, Any]) -> Any:
        association = self.association
        target = association.target

        if association.via:
            related_id = getattr(owner, association.via)
            if not related_id:
                return self._missing(owner)
            path = f"/{target.path_name}/{related_id}"
        else:
            path = f"{owner.resource_path}/{association.path}"

        logger.debug(
            "association_fetch",
            association=association.name,
            owner=type(owner).__name__,
            path=path,
        )
        data = owner.client.get(path, self.query(params))
        if not data:
            return self._missing(owner)
        return target.from_response(data, client=owner.client)

    def _missing(self, owner: "BasicData") -> None:
        if self.association.optional:
            return None
        raise NotFoundError(
            f"{type(owner).__name__} {owner.id} has no {self.association.name}"
        )


class HasManyFetcher(AssociationFetcher):
    """Fetches a JSON array under the owner's path, preserving its order."""

    def fetch(self, owner: "BasicData", params: dict[str, Any]) -> list:
        association = self.association
        path = f"{owner.resource_path}/{association.path}"

        logger.debug(
            "association_fetch",
            association=association.name,
            owner=type(owner).__name__,
            path=path,
        )
        data = owner.client.get(path, self.query(params))
        if data is None:
            return []
        if not isinstance(data, list):
            raise ApiError(
                f"Expected a list for {type(owner).__name__}.{association.name}, "
                f"got {type(data).__name__}"
            )
        return association.target.from_response_list(data, client=owner.client)

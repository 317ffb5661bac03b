"""Attribute descriptors making up an entity's schema.

Each ``Attribute`` maps a python attribute name to the camelCase key Trello
uses in JSON payloads. Values live in the owning entity's attribute mapping;
writing one makes it dirty until the next load or save.
"""

from datetime import datetime
from typing import Any, Optional

from trellolib.utils.case import convert_string_to_camel_case


class Attribute:
    """Schema entry for one field of an entity.

    Args:
        remote_key: JSON key; camelCase of the attribute name when omitted
        readonly: Set only from server payloads, never sent back
        create_only: Sent when creating, never on updates
        update_only: Sent on updates, never when creating
    """

    def __init__(
        self,
        remote_key: Optional[str] = None,
        *,
        readonly: bool = False,
        create_only: bool = False,
        update_only: bool = False,
    ) -> None:
        self.remote_key = remote_key
        self.readonly = readonly
        self.create_only = create_only
        self.update_only = update_only
        self.name: Optional[str] = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        if self.remote_key is None:
            self.remote_key = convert_string_to_camel_case(name)

    def __get__(self, instance: Any, owner: type) -> Any:
        if instance is None:
            return self
        return instance._attributes.get(self.name)

    def __set__(self, instance: Any, value: Any) -> None:
        if self.readonly:
            raise AttributeError(
                f"{type(instance).__name__}.{self.name} is read-only"
            )
        instance._attributes[self.name] = value

    def parse(self, raw: Any) -> Any:
        """Convert a JSON value into the python value."""
        return raw

    def serialize(self, value: Any) -> Any:
        """Convert a python value into the JSON value."""
        return value

    @property
    def sent_on_create(self) -> bool:
        return not (self.readonly or self.update_only)

    @property
    def sent_on_update(self) -> bool:
        return not (self.readonly or self.create_only)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name} ({self.remote_key})>"


class DateTimeAttribute(Attribute):
    """ISO 8601 timestamps, parsed into aware datetimes."""

    def parse(self, raw: Any) -> Any:
        if isinstance(raw, str) and raw:
            return datetime.fromisoformat(raw.replace("Z", "+00:00"))
        return raw

    def serialize(self, value: Any) -> Any:
        if isinstance(value, datetime):
            return value.isoformat()
        return value

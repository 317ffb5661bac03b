"""Trello members."""

from typing import Any, Optional

from trellolib.models.association import has_many
from trellolib.models.attributes import Attribute
from trellolib.models.base import BasicData


class Member(BasicData):
    path_name = "members"

    username = Attribute(readonly=True)
    full_name = Attribute()
    initials = Attribute()
    bio = Attribute()
    email = Attribute(readonly=True)
    url = Attribute(readonly=True)
    avatar_url = Attribute(readonly=True)
    board_ids = Attribute("idBoards", readonly=True)
    organization_ids = Attribute("idOrganizations", readonly=True)

    boards = has_many("Board")
    cards = has_many("Card")
    organizations = has_many("Organization")
    notifications = has_many("Notification")
    tokens = has_many("Token")

    @classmethod
    def me(cls, client: Optional[Any] = None) -> "Member":
        """Member owning the credentials in use."""
        return cls.find("me", client=client)

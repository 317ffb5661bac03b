"""Trello boards."""

from trellolib.models.association import has_many, has_one
from trellolib.models.attributes import Attribute, DateTimeAttribute
from trellolib.models.base import BasicData


class Board(BasicData):
    path_name = "boards"

    name = Attribute()
    description = Attribute("desc")
    closed = Attribute(update_only=True)
    starred = Attribute(readonly=True)
    pinned = Attribute(readonly=True)
    url = Attribute(readonly=True)
    short_url = Attribute(readonly=True)
    organization_id = Attribute("idOrganization")
    prefs = Attribute(readonly=True)
    label_names = Attribute(readonly=True)
    last_activity_at = DateTimeAttribute("dateLastActivity", readonly=True)
    source_board_id = Attribute("idBoardSource", create_only=True)

    cards = has_many("Card")
    lists = has_many("List")
    members = has_many("Member")
    labels = has_many("Label")
    checklists = has_many("Checklist")
    actions = has_many("Action")
    custom_fields = has_many("CustomField", path="customFields")
    organization = has_one("Organization", via="organization_id", optional=True)

    @property
    def is_closed(self) -> bool:
        return bool(self.closed)

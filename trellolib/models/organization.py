"""Trello organizations (workspaces)."""

from trellolib.models.association import has_many
from trellolib.models.attributes import Attribute
from trellolib.models.base import BasicData


class Organization(BasicData):
    path_name = "organizations"

    name = Attribute()
    display_name = Attribute()
    description = Attribute("desc")
    website = Attribute()
    url = Attribute(readonly=True)
    logo_hash = Attribute(readonly=True)

    boards = has_many("Board")
    members = has_many("Member")

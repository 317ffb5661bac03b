"""Trello labels."""

from trellolib.models.association import has_one
from trellolib.models.attributes import Attribute
from trellolib.models.base import BasicData


class Label(BasicData):
    path_name = "labels"

    name = Attribute()
    color = Attribute()
    uses = Attribute(readonly=True)
    board_id = Attribute("idBoard", create_only=True)

    board = has_one("Board", via="board_id")

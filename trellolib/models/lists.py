"""Trello lists, the columns of a board."""

from trellolib.models.association import has_many, has_one
from trellolib.models.attributes import Attribute
from trellolib.models.base import BasicData


class List(BasicData):
    path_name = "lists"

    name = Attribute()
    closed = Attribute(update_only=True)
    position = Attribute("pos")
    subscribed = Attribute(update_only=True)
    board_id = Attribute("idBoard")
    source_list_id = Attribute("idListSource", create_only=True)

    board = has_one("Board", via="board_id")
    cards = has_many("Card")

    def archive_all_cards(self) -> None:
        """Archive every card in the list."""
        self.client.post(f"{self.resource_path}/archiveAllCards")
        self.reset_association("cards")

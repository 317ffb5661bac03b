"""Trello checklists."""

from typing import Any

from trellolib.models.association import has_one
from trellolib.models.attributes import Attribute
from trellolib.models.base import BasicData


class Checklist(BasicData):
    path_name = "checklists"

    name = Attribute()
    position = Attribute("pos")
    check_items = Attribute(readonly=True)
    board_id = Attribute("idBoard", readonly=True)
    card_id = Attribute("idCard", create_only=True)

    board = has_one("Board", via="board_id")
    card = has_one("Card", via="card_id")

    @property
    def items(self) -> list[dict[str, Any]]:
        return list(self.check_items or [])

    def add_item(self, name: str, checked: bool = False) -> dict[str, Any]:
        """Append an item and return it as sent back by the server."""
        item = self.client.post(
            f"{self.resource_path}/checkItems",
            {"name": name, "checked": checked},
        )
        items = self.items + [item]
        self._attributes["check_items"] = items
        self._baseline["check_items"] = list(items)
        return item

"""Trello custom field definitions."""

from trellolib.models.association import has_one
from trellolib.models.attributes import Attribute
from trellolib.models.base import BasicData


class CustomField(BasicData):
    path_name = "customFields"

    name = Attribute()
    type = Attribute(create_only=True)
    model_id = Attribute("idModel", create_only=True)
    model_type = Attribute("modelType", create_only=True)
    position = Attribute("pos")
    options = Attribute(readonly=True)
    display = Attribute(readonly=True)

    board = has_one("Board", via="model_id")

"""Trello card attachments."""

from trellolib.models.association import has_one
from trellolib.models.attributes import Attribute, DateTimeAttribute
from trellolib.models.base import BasicData


class Attachment(BasicData):
    """File or link attached to a card.

    Attachments only exist under a card; add and remove them through
    ``Card.add_attachment`` and ``Card.remove_attachment``.
    """

    path_name = "attachments"
    read_only = True

    name = Attribute(readonly=True)
    url = Attribute(readonly=True)
    mime_type = Attribute("mimeType", readonly=True)
    bytes = Attribute(readonly=True)
    date = DateTimeAttribute(readonly=True)
    is_upload = Attribute("isUpload", readonly=True)
    member_id = Attribute("idMember", readonly=True)

    member = has_one("Member", via="member_id", optional=True)

"""Trello notifications."""

from trellolib.models.association import has_one
from trellolib.models.attributes import Attribute, DateTimeAttribute
from trellolib.models.base import BasicData


class Notification(BasicData):
    path_name = "notifications"

    type = Attribute(readonly=True)
    data = Attribute(readonly=True)
    date = DateTimeAttribute(readonly=True)
    unread = Attribute(update_only=True)
    member_creator_id = Attribute("idMemberCreator", readonly=True)

    member_creator = has_one("Member", via="member_creator_id", optional=True)

    def mark_read(self) -> "Notification":
        self.unread = False
        return self.save()

"""Trello actions, the activity log entries of boards, lists and cards."""

from trellolib.models.association import has_one
from trellolib.models.attributes import Attribute, DateTimeAttribute
from trellolib.models.base import BasicData


class Action(BasicData):
    path_name = "actions"
    read_only = True

    type = Attribute(readonly=True)
    data = Attribute(readonly=True)
    date = DateTimeAttribute(readonly=True)
    member_creator_id = Attribute("idMemberCreator", readonly=True)

    member_creator = has_one("Member", via="member_creator_id")

    @property
    def text(self):
        """Comment text for ``commentCard`` actions."""
        return (self.data or {}).get("text")

"""Trello cards."""

from typing import Any, Optional, Union

from trellolib.logging import get_module_logger
from trellolib.models.association import has_many, has_one
from trellolib.models.attachment import Attachment
from trellolib.models.attributes import Attribute, DateTimeAttribute
from trellolib.models.base import BasicData

logger = get_module_logger()


class Card(BasicData):
    path_name = "cards"

    name = Attribute()
    description = Attribute("desc")
    closed = Attribute(update_only=True)
    due = DateTimeAttribute()
    due_complete = Attribute()
    position = Attribute("pos")
    url = Attribute(readonly=True)
    short_url = Attribute(readonly=True)
    short_id = Attribute(readonly=True)
    board_id = Attribute("idBoard")
    list_id = Attribute("idList")
    member_ids = Attribute("idMembers")
    label_ids = Attribute("idLabels")
    last_activity_at = DateTimeAttribute("dateLastActivity", readonly=True)
    source_card_id = Attribute("idCardSource", create_only=True)

    board = has_one("Board", via="board_id")
    list = has_one("List", via="list_id")
    members = has_many("Member")
    checklists = has_many("Checklist")
    actions = has_many("Action")
    attachments = has_many("Attachment")

    def add_comment(self, text: str) -> Any:
        """Post a comment on the card and return the created action JSON."""
        path = f"{self.resource_path}/actions/comments"
        result = self.client.post(path, {"text": text})
        self.reset_association("actions")
        logger.info("card_comment_added", card_id=self.id)
        return result

    def move_to_list(self, target_list: Union[BasicData, str]) -> "Card":
        """Move the card to another list, given the list or its id."""
        list_id = target_list.id if isinstance(target_list, BasicData) else target_list
        if list_id == self.list_id:
            return self
        self.list_id = list_id
        self.save()
        self.reset_association("list")
        return self

    def close(self) -> "Card":
        """Archive the card."""
        self.closed = True
        return self.save()

    def add_attachment(self, url: str, name: Optional[str] = None) -> Attachment:
        """Attach a link to the card and return the created attachment."""
        body = {"url": url}
        if name is not None:
            body["name"] = name
        data = self.client.post(f"{self.resource_path}/attachments", body)
        self.reset_association("attachments")
        logger.info("card_attachment_added", card_id=self.id)
        return Attachment.from_response(data or {}, client=self.client)

    def remove_attachment(self, attachment: Union[BasicData, str]) -> "Card":
        """Remove an attachment, given the attachment or its id."""
        attachment_id = (
            attachment._require_id()
            if isinstance(attachment, BasicData)
            else attachment
        )
        self.client.delete(f"{self.resource_path}/attachments/{attachment_id}")
        self.reset_association("attachments")
        return self

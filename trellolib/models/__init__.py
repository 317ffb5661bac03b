"""Trello entities and the attribute and association machinery behind them."""

from trellolib.models.action import Action
from trellolib.models.association import (
    AssociationProxy,
    HasMany,
    HasOne,
    MultiAssociation,
    has_many,
    has_one,
)
from trellolib.models.attachment import Attachment
from trellolib.models.attributes import Attribute, DateTimeAttribute
from trellolib.models.base import BasicData
from trellolib.models.board import Board
from trellolib.models.card import Card
from trellolib.models.checklist import Checklist
from trellolib.models.custom_field import CustomField
from trellolib.models.label import Label
from trellolib.models.lists import List
from trellolib.models.member import Member
from trellolib.models.notification import Notification
from trellolib.models.organization import Organization
from trellolib.models.token import Token
from trellolib.models.webhook import Webhook

__all__ = [
    "Action",
    "AssociationProxy",
    "Attachment",
    "Attribute",
    "BasicData",
    "Board",
    "Card",
    "Checklist",
    "CustomField",
    "DateTimeAttribute",
    "HasMany",
    "HasOne",
    "Label",
    "List",
    "Member",
    "MultiAssociation",
    "Notification",
    "Organization",
    "Token",
    "Webhook",
    "has_many",
    "has_one",
]

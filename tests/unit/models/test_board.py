"""Unit tests for trellolib.models.board, including end-to-end scenarios."""

import pytest

import trellolib
from trellolib.client import Client
from trellolib.errors import ConfigurationError
from trellolib.models import Board, Card, Organization


@pytest.mark.unit
class TestBoardEndToEnd:
    """Scenarios running from configuration to cached associations."""

    def test_oauth_board_and_cards(self, oauth_settings, transport):
        client = Client(oauth_settings, transport=transport)
        transport.queue({"id": "b1", "name": "Demo"})

        board = Board.find("b1", client=client)

        assert board.name == "Demo"
        assert transport.last_request.headers["Authorization"].startswith("OAuth ")

        transport.queue([{"id": "c1", "name": "Task"}])
        cards = list(board.cards)

        assert len(cards) == 1
        assert isinstance(cards[0], Card)
        assert cards[0].id == "c1"
        assert transport.last_request.url == "https://api.trello.com/1/boards/b1/cards"

        calls = len(transport.requests)
        list(board.cards)
        assert len(transport.requests) == calls

    def test_default_client_configuration(self, transport):
        client = trellolib.configure(
            Client(
                trellolib.TrelloSettings(
                    _env_file=None,
                    consumer_key="ck",
                    consumer_secret="cs",
                    oauth_token="ot",
                    oauth_token_secret="os",
                ),
                transport=transport,
            )
        )
        transport.queue({"id": "b1", "name": "Demo"})

        board = trellolib.Board.find("b1")

        assert board.client is client
        assert board.name == "Demo"

    def test_unauthenticated_write_fails_before_sending(self, settings_factory, transport):
        client = Client(
            settings_factory(developer_public_key=None, member_token=None),
            transport=transport,
        )
        board = Board(client=client, name="Roadmap")

        with pytest.raises(ConfigurationError):
            board.save()

        assert transport.requests == []
        assert board.id is None


@pytest.mark.unit
class TestBoard:
    """Test suite for Board attributes and associations."""

    def test_attributes(self):
        board = Board(
            {
                "id": "b1",
                "name": "Demo",
                "desc": "A board",
                "closed": False,
                "idOrganization": "o1",
                "url": "https://trello.com/b/b1/demo",
                "dateLastActivity": "2024-01-02T03:04:05.000Z",
            }
        )

        assert board.description == "A board"
        assert board.organization_id == "o1"
        assert board.is_closed is False
        assert board.last_activity_at.year == 2024

    def test_organization_via_foreign_key(self, client, transport):
        board = Board({"id": "b1", "idOrganization": "o1"}, client=client)
        transport.queue({"id": "o1", "displayName": "Acme"})

        organization = board.organization

        assert isinstance(organization, Organization)
        assert organization.display_name == "Acme"
        assert transport.last_request.url.endswith("/organizations/o1")

    @pytest.mark.parametrize(
        "association, path",
        [
            ("lists", "lists"),
            ("members", "members"),
            ("labels", "labels"),
            ("checklists", "checklists"),
            ("actions", "actions"),
        ],
    )
    def test_collections_paths(self, client, transport, association, path):
        board = Board({"id": "b1"}, client=client)
        transport.queue([])

        list(getattr(board, association))

        assert transport.last_request.url == f"https://api.trello.com/1/boards/b1/{path}"

    def test_close_via_update(self, client, transport):
        board = Board({"id": "b1", "closed": False}, client=client)
        board.closed = True
        transport.queue({"id": "b1", "closed": True})

        board.save()

        assert transport.last_request.body == {"closed": True}

"""Unit tests for trellolib.models.association and fetchers.

Tests cover:
- HasOne caching, reload and optional relations
- HasMany ordering, filters and reload
- Error caching in cache slots
"""

import threading

import pytest

from trellolib.errors import ApiError, NotFoundError, NotSavedError
from trellolib.models import Board, Card, List, Member
from trellolib.models.association import (
    AssociationProxy,
    CacheSlot,
    HasMany,
    HasOne,
    MultiAssociation,
    SlotState,
    has_one,
)
from trellolib.models.attributes import Attribute
from trellolib.models.base import BasicData
from trellolib.models.fetchers import AssociationFetcher


class Release(BasicData):
    path_name = "releases"

    name = Attribute()
    lead = has_one("Member", optional=True)
    board = has_one("Board", path="board")


@pytest.mark.unit
class TestDeclarations:
    """Test suite for association registration on entity classes."""

    def test_associations_are_registered_per_class(self):
        assert isinstance(Board._associations["cards"], HasMany)
        assert isinstance(Card._associations["board"], HasOne)
        assert "cards" not in Card._associations

    def test_targets_resolve_by_name(self):
        assert Board.cards.target is Card
        assert Card.list.target is List

    def test_associations_cannot_be_assigned(self):
        card = Card({"id": "c1", "idBoard": "b1"})

        with pytest.raises(AttributeError):
            card.board = Board({"id": "b2"})

    def test_unknown_association_name(self):
        with pytest.raises(ValueError):
            Card({"id": "c1"}).reload_association("nope")


@pytest.mark.unit
class TestHasOne:
    """Test suite for single entity associations."""

    def test_fetches_by_foreign_key(self, client, transport):
        card = Card({"id": "c1", "idBoard": "b1"}, client=client)
        transport.queue({"id": "b1", "name": "Demo"})

        board = card.board

        assert isinstance(board, Board)
        assert board.name == "Demo"
        assert transport.last_request.url == "https://api.trello.com/1/boards/b1"

    def test_second_access_is_cached(self, client, transport):
        card = Card({"id": "c1", "idBoard": "b1"}, client=client)
        transport.queue({"id": "b1", "name": "Demo"})

        first = card.board
        second = card.board

        assert first is second
        assert len(transport.requests) == 1

    def test_reload_forces_exactly_one_call(self, client, transport):
        card = Card({"id": "c1", "idBoard": "b1"}, client=client)
        transport.queue({"id": "b1", "name": "Demo"})
        card.board
        transport.queue({"id": "b1", "name": "Renamed"})

        reloaded = card.reload_association("board")

        assert reloaded.name == "Renamed"
        assert card.board is reloaded
        assert len(transport.requests) == 2

    def test_reset_then_access_issues_one_call(self, client, transport):
        card = Card({"id": "c1", "idBoard": "b1"}, client=client)
        transport.queue({"id": "b1"})
        card.board

        card.reset_association("board")
        transport.queue({"id": "b1", "name": "Fresh"})

        assert card.board.name == "Fresh"
        assert card.board.name == "Fresh"
        assert len(transport.requests) == 2

    def test_optional_missing_foreign_key_is_none(self, client, transport):
        board = Board({"id": "b1", "idOrganization": None}, client=client)

        assert board.organization is None
        assert transport.requests == []

    def test_required_missing_foreign_key_raises(self, client, transport):
        card = Card({"id": "c1"}, client=client)

        with pytest.raises(NotFoundError):
            card.board

        assert transport.requests == []

    def test_empty_response_raises_not_found(self, client, transport):
        card = Card({"id": "c1", "idBoard": "b1"}, client=client)
        transport.queue("")

        with pytest.raises(NotFoundError):
            card.board

    def test_failure_is_cached_until_reload(self, client, transport):
        card = Card({"id": "c1", "idBoard": "b1"}, client=client)
        transport.queue("server error", code=500)

        with pytest.raises(ApiError):
            card.board
        with pytest.raises(ApiError):
            card.board

        assert len(transport.requests) == 1

        transport.queue({"id": "b1", "name": "Back"})
        assert card.reload_association("board").name == "Back"


@pytest.mark.unit
class TestHasOneByPath:
    """Test suite for single entity associations fetched under the owner's path."""

    def test_path_defaults_to_association_name(self):
        assert Release.lead.path == "lead"
        assert Release.lead.via is None

    def test_fetches_under_owner_path(self, client, transport):
        release = Release({"id": "r1"}, client=client)
        transport.queue({"id": "b1", "name": "Demo"})

        board = release.board

        assert isinstance(board, Board)
        assert board.client is client
        assert transport.last_request.url == "https://api.trello.com/1/releases/r1/board"

    def test_result_is_cached(self, client, transport):
        release = Release({"id": "r1"}, client=client)
        transport.queue({"id": "m1", "username": "alice"})

        first = release.lead
        second = release.lead

        assert isinstance(first, Member)
        assert first is second
        assert len(transport.requests) == 1

    def test_optional_empty_response_is_none_and_cached(self, client, transport):
        release = Release({"id": "r1"}, client=client)
        transport.queue("")

        assert release.lead is None
        assert release.lead is None

        assert len(transport.requests) == 1
        assert release._association_slot("lead").state is SlotState.RESOLVED

    def test_required_empty_response_raises_not_found(self, client, transport):
        release = Release({"id": "r1"}, client=client)
        transport.queue("")

        with pytest.raises(NotFoundError):
            release.board

    def test_unsaved_owner_raises_before_sending(self, client, transport):
        release = Release(client=client, name="Draft")

        with pytest.raises(NotSavedError):
            release.lead

        assert transport.requests == []


@pytest.mark.unit
class TestFetchers:
    """Test suite for association fetchers."""

    def test_base_fetcher_is_abstract(self):
        with pytest.raises(TypeError):
            AssociationFetcher(Board.cards)

    def test_subclass_must_implement_fetch(self):
        class Incomplete(AssociationFetcher):
            pass

        with pytest.raises(TypeError):
            Incomplete(Board.cards)

    def test_query_merges_fixed_params(self):
        fetcher = Board.cards.fetcher_class(Board.cards)

        assert fetcher.query({}) is None
        assert fetcher.query({"filter": "open"}) == {"filter": "open"}


@pytest.mark.unit
class TestHasMany:
    """Test suite for collection associations."""

    def test_returns_lazy_proxy(self, client, transport):
        board = Board({"id": "b1"}, client=client)

        cards = board.cards

        assert isinstance(cards, AssociationProxy)
        assert cards.resolved is False
        assert transport.requests == []

    def test_preserves_server_order(self, client, transport):
        board = Board({"id": "b1"}, client=client)
        transport.queue([{"id": "c3"}, {"id": "c1"}, {"id": "c2"}])

        assert [card.id for card in board.cards] == ["c3", "c1", "c2"]
        assert transport.last_request.url == "https://api.trello.com/1/boards/b1/cards"

    def test_resolved_collection_is_cached(self, client, transport):
        board = Board({"id": "b1"}, client=client)
        transport.queue([{"id": "c1"}, {"id": "c2"}])

        assert len(board.cards) == 2
        assert board.cards[0].id == "c1"
        assert list(board.cards) == board.cards.all()
        assert len(transport.requests) == 1

    def test_all_returns_multi_association(self, client, transport):
        board = Board({"id": "b1"}, client=client)
        transport.queue([{"id": "c1"}])

        cards = board.cards.all()

        assert isinstance(cards, MultiAssociation)
        assert cards.owner is board
        assert cards.association is Board.cards
        assert cards[0].client is client

    def test_filter_is_never_served_from_cache(self, client, transport):
        board = Board({"id": "b1"}, client=client)
        transport.queue([{"id": "c1"}, {"id": "c2"}])
        board.cards.all()
        transport.queue([{"id": "c9", "closed": True}])

        closed = board.cards.filter("closed")

        assert [card.id for card in closed] == ["c9"]
        assert transport.last_request.params["filter"] == "closed"
        assert len(transport.requests) == 2
        assert [card.id for card in board.cards] == ["c1", "c2"]
        assert len(transport.requests) == 2

    def test_filter_does_not_populate_cache(self, client, transport):
        board = Board({"id": "b1"}, client=client)
        transport.queue([{"id": "c9"}])
        board.cards.filter("closed")

        assert board.cards.resolved is False

        transport.queue([{"id": "c1"}])
        assert [card.id for card in board.cards] == ["c1"]
        assert "filter" not in transport.last_request.params

    def test_reload(self, client, transport):
        board = Board({"id": "b1"}, client=client)
        transport.queue([{"id": "c1"}])
        board.cards.all()
        transport.queue([{"id": "c1"}, {"id": "c2"}])

        reloaded = board.cards.reload()

        assert len(reloaded) == 2
        assert len(board.cards) == 2
        assert len(transport.requests) == 2

    def test_null_response_is_empty(self, client, transport):
        board = Board({"id": "b1"}, client=client)
        transport.queue("")

        assert list(board.cards) == []

    def test_non_list_response_raises(self, client, transport):
        board = Board({"id": "b1"}, client=client)
        transport.queue({"id": "c1"})

        with pytest.raises(ApiError):
            list(board.cards)

    def test_unsaved_owner_raises_and_is_not_cached(self, client, transport):
        board = Board(client=client, name="Draft")

        with pytest.raises(NotSavedError):
            list(board.cards)

        assert board._association_slot("cards").state is SlotState.UNRESOLVED

    def test_proxy_equality_and_repr(self, client, transport):
        board = Board({"id": "b1"}, client=client)

        assert "unresolved" in repr(board.cards)

        transport.queue([{"id": "c1"}])
        assert board.cards == [Card({"id": "c1"})]


@pytest.mark.unit
class TestCacheSlot:
    """Test suite for CacheSlot."""

    def test_loader_runs_once(self):
        slot = CacheSlot()
        calls = []

        def loader():
            calls.append(1)
            return "value"

        assert slot.get(loader) == "value"
        assert slot.get(loader) == "value"
        assert calls == [1]
        assert slot.state is SlotState.RESOLVED

    def test_concurrent_first_access_resolves_once(self):
        slot = CacheSlot()
        calls = []
        started = threading.Event()

        def loader():
            calls.append(1)
            started.wait(0.05)
            return object()

        results = []
        threads = [
            threading.Thread(target=lambda: results.append(slot.get(loader)))
            for _ in range(5)
        ]
        for thread in threads:
            thread.start()
        started.set()
        for thread in threads:
            thread.join()

        assert len(calls) == 1
        assert all(result is results[0] for result in results)

    def test_reentrant_access_raises(self):
        slot = CacheSlot()

        with pytest.raises(RuntimeError):
            slot.get(lambda: slot.get(lambda: None))

        assert slot.state is SlotState.UNRESOLVED

    def test_reset(self):
        slot = CacheSlot()
        slot.get(lambda: 1)

        slot.reset()

        assert slot.state is SlotState.UNRESOLVED
        assert slot.value is None

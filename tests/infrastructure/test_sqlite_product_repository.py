"""Integration tests for SqliteProductRepository against a real database file."""

from contextlib import closing

import pytest

from ims.application.delete_product import DeleteProductHandler
from ims.application.list_products import ListProductsHandler
from ims.application.outcome import OutcomeStatus
from ims.application.search_products import SearchProductsHandler
from ims.application.update_product import UpdateProductHandler
from ims.domain.exceptions import EntityNotFoundError, ErrorKind
from ims.domain.model.product import Product
from ims.infrastructure.persistence.sqlite_product_repository import like_pattern


def _add(repo, name, quantity, price):
    return repo.add(Product(name=name, quantity=quantity, price=price))


class TestAdd:

    def test_round_trip(self, repo):
        saved = _add(repo, "Widget", 5, 1.25)
        rows = [p for p in repo.list_all() if p.name == "Widget"]
        assert len(rows) == 1
        assert rows[0].id == saved.id
        assert saved.id > 0
        assert (rows[0].quantity, rows[0].price) == (5, 1.25)

    def test_ids_never_reused_after_delete(self, repo):
        _add(repo, "A", 1, 1.0)
        b = _add(repo, "B", 1, 1.0)
        repo.delete(b.id)
        c = _add(repo, "C", 1, 1.0)
        assert c.id > b.id

    def test_quotes_in_name_are_stored_verbatim(self, repo):
        saved = _add(repo, "Robert'); DROP TABLE products;--", 1, 1.0)
        assert repo.get_by_id(saved.id).name == "Robert'); DROP TABLE products;--"
        assert repo.aggregate().count == 1


class TestListAll:

    def test_is_lazy(self, repo):
        rows = repo.list_all()
        _add(repo, "Widget", 1, 1.0)
        assert [p.name for p in rows] == ["Widget"]

    def test_each_call_rescans(self, repo):
        _add(repo, "Widget", 1, 1.0)
        first = list(repo.list_all())
        _add(repo, "Gadget", 1, 1.0)
        second = list(repo.list_all())
        assert len(first) == 1
        assert len(second) == 2

    def test_empty(self, repo):
        assert list(repo.list_all()) == []


class TestUpdate:

    def test_replaces_fields(self, repo):
        saved = _add(repo, "Widget", 5, 1.0)
        repo.update(Product(id=saved.id, name="Gizmo", quantity=9, price=3.5))
        updated = repo.get_by_id(saved.id)
        assert (updated.name, updated.quantity, updated.price) == ("Gizmo", 9, 3.5)

    def test_same_values_succeed_and_keep_aggregate(self, repo):
        saved = _add(repo, "Widget", 5, 2.0)
        before = repo.aggregate()
        repo.update(Product(id=saved.id, name="Widget", quantity=5, price=2.0))
        assert repo.aggregate() == before

    def test_unknown_id_raises_not_found(self, repo):
        with pytest.raises(EntityNotFoundError, match="999999"):
            repo.update(Product(id=999999, name="Ghost", quantity=1, price=1.0))


class TestDelete:

    def test_removes_row(self, repo):
        saved = _add(repo, "Widget", 5, 1.0)
        repo.delete(saved.id)
        assert repo.get_by_id(saved.id) is None

    def test_unknown_id_raises_not_found(self, repo):
        with pytest.raises(EntityNotFoundError):
            repo.delete(999999)


class TestNotFoundThroughHandlers:

    def test_update_missing_is_not_found(self, repo):
        _add(repo, "Widget", 5, 1.0)
        outcome = UpdateProductHandler(repo).handle(999999, "Ghost", 1, 1.0)
        assert outcome.status == OutcomeStatus.NOT_FOUND

    def test_delete_missing_is_not_found(self, repo):
        outcome = DeleteProductHandler(repo).handle(999999)
        assert outcome.status == OutcomeStatus.NOT_FOUND
        assert outcome.error_kind is None


class TestSearchByName:

    def test_case_insensitive(self, repo):
        saved = _add(repo, "Widget", 5, 1.0)
        _add(repo, "Gadget", 1, 1.0)
        for term in ("widget", "WID"):
            assert [p.id for p in repo.search_by_name(term)] == [saved.id]

    def test_wildcards_match_literally(self, repo):
        _add(repo, "50% off bundle", 1, 1.0)
        _add(repo, "500 off bundle", 1, 1.0)
        _add(repo, "snake_case", 1, 1.0)
        _add(repo, "snakeXcase", 1, 1.0)
        assert [p.name for p in repo.search_by_name("50%")] == ["50% off bundle"]
        assert [p.name for p in repo.search_by_name("e_c")] == ["snake_case"]

    def test_no_match_is_empty_outcome(self, repo):
        _add(repo, "Widget", 5, 1.0)
        outcome = SearchProductsHandler(repo).handle("zzzz-nomatch")
        assert outcome.status == OutcomeStatus.EMPTY

    def test_missing_table_is_error_outcome(self, repo, store):
        _add(repo, "Widget", 5, 1.0)
        with store.statement("DROP TABLE products"):
            pass
        outcome = SearchProductsHandler(repo).handle("wid")
        assert outcome.status == OutcomeStatus.ERROR
        assert outcome.error_kind == ErrorKind.PREPARE_FAILED


class TestFilterByQuantity:

    def test_below_threshold_ascending(self, repo):
        for qty in (10, 2, 7):
            _add(repo, f"Item {qty}", qty, 1.0)
        assert [p.quantity for p in repo.filter_by_quantity(8)] == [2, 7]

    def test_ties_keep_store_order(self, repo):
        first = _add(repo, "First", 3, 1.0)
        second = _add(repo, "Second", 3, 1.0)
        assert [p.id for p in repo.filter_by_quantity(5)] == [first.id, second.id]

    def test_nothing_below_zero(self, repo):
        _add(repo, "Widget", 0, 1.0)
        assert list(repo.filter_by_quantity(0)) == []


class TestAggregate:

    def test_empty_table(self, repo):
        summary = repo.aggregate()
        assert summary.count == 0
        assert summary.total_value == 0.0
        assert isinstance(summary.total_value, float)

    def test_count_and_value(self, repo):
        items = [(3, 1.10), (7, 0.25), (12, 19.99), (0, 5.0)]
        for i, (qty, price) in enumerate(items):
            _add(repo, f"Item {i}", qty, price)
        summary = repo.aggregate()
        assert summary.count == len(items)
        assert summary.total_value == pytest.approx(sum(q * p for q, p in items))


class TestLikePattern:

    def test_wraps_term(self):
        assert like_pattern("wid") == "%wid%"

    def test_escapes_wildcards(self):
        assert like_pattern("50%_x\\") == "%50\\%\\_x\\\\%"


def _insert_raw(store, name, quantity, price):
    with store.statement(
        "INSERT INTO products (name, quantity, price) VALUES (?, ?, ?)",
        (name, quantity, price),
    ):
        pass


class TestRowsWrittenByOtherTools:

    def test_blank_name_row_is_listed(self, repo, store):
        _insert_raw(store, "   ", 1, 1.0)
        outcome = ListProductsHandler(repo).handle()
        assert outcome.status == OutcomeStatus.SUCCESS
        assert [p.name for p in outcome.value] == ["   "]

    def test_blank_name_row_is_searchable(self, repo, store):
        _insert_raw(store, "   ", 1, 1.0)
        outcome = SearchProductsHandler(repo).handle(" ")
        assert outcome.status == OutcomeStatus.SUCCESS
        assert len(outcome.value) == 1

    def test_blank_name_row_in_filter(self, repo, store):
        _insert_raw(store, "   ", 1, 1.0)
        assert [p.quantity for p in repo.filter_by_quantity(5)] == [1]


class TestStatementRelease:

    def test_closing_early_releases_the_statement(self, repo, store):
        _add(repo, "Widget", 1, 1.0)
        _add(repo, "Gadget", 2, 1.0)
        with closing(repo.list_all()) as rows:
            assert next(rows).name == "Widget"
        # An unfinished read on the table would block dropping it.
        with store.statement("DROP TABLE products"):
            pass

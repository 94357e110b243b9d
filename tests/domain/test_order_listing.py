"""Unit tests for order search, sort and pagination."""

import pytest

from bakery.domain.model.order import Order
from bakery.domain.service.order_listing import (
    DEFAULT_SORT,
    NO_MATCHES_MESSAGE,
    NO_ORDERS_MESSAGE,
    OrderListState,
    SortDirection,
    SortKey,
    SortSpec,
    build_order_list,
    filter_orders,
    paginate,
    sort_orders,
    toggle_sort,
    total_pages,
)


def _order(order_id: str, client: str, request_date: str = "2024-01-10") -> Order:
    return Order(id=order_id, client_name=client, request_date=request_date)


def _ids(orders) -> list[str]:
    return [o.id for o in orders]


class TestFilter:

    def test_case_insensitive_substring(self):
        orders = [_order("1", "Ana"), _order("2", "Beto"), _order("3", "Anderson")]
        assert [o.client_name for o in filter_orders(orders, "an")] == ["Ana", "Anderson"]

    def test_empty_term_matches_everything(self):
        orders = [_order("1", "Ana"), _order("2", "Beto")]
        assert _ids(filter_orders(orders, "")) == ["1", "2"]

    def test_no_match(self):
        assert filter_orders([_order("1", "Ana")], "zzz") == []


class TestSort:

    def test_default_is_most_recent_first(self):
        orders = [_order("1", "A", "2024-01-01"), _order("2", "B", "2024-03-01"), _order("3", "C", "2024-02-01")]
        assert DEFAULT_SORT == SortSpec(SortKey.REQUEST_DATE, SortDirection.DESCENDING)
        assert _ids(sort_orders(orders)) == ["2", "3", "1"]

    def test_by_client_ascending(self):
        orders = [_order("1", "Carla"), _order("2", "Ana"), _order("3", "Beto")]
        spec = SortSpec(SortKey.CLIENT_NAME, SortDirection.ASCENDING)
        assert _ids(sort_orders(orders, spec)) == ["2", "3", "1"]

    @pytest.mark.parametrize("direction", list(SortDirection))
    def test_ties_keep_input_order(self, direction):
        orders = [_order("1", "Ana"), _order("2", "Ana"), _order("3", "Ana")]
        spec = SortSpec(SortKey.CLIENT_NAME, direction)
        assert _ids(sort_orders(orders, spec)) == ["1", "2", "3"]


class TestToggleSort:

    def test_new_column_sorts_ascending(self):
        assert toggle_sort(DEFAULT_SORT, SortKey.CLIENT_NAME) == SortSpec(
            SortKey.CLIENT_NAME, SortDirection.ASCENDING
        )

    def test_same_column_ascending_flips_to_descending(self):
        spec = SortSpec(SortKey.CLIENT_NAME, SortDirection.ASCENDING)
        assert toggle_sort(spec, SortKey.CLIENT_NAME).direction == SortDirection.DESCENDING

    def test_same_column_descending_goes_back_to_ascending(self):
        assert toggle_sort(DEFAULT_SORT, SortKey.REQUEST_DATE).direction == SortDirection.ASCENDING


class TestPagination:

    @pytest.mark.parametrize("count, pages", [(0, 1), (1, 1), (20, 1), (21, 2), (45, 3)])
    def test_total_pages(self, count, pages):
        assert total_pages(count, 20) == pages

    def test_page_is_clamped(self):
        orders = [_order(str(i), "Ana") for i in range(25)]
        items, page, pages = paginate(orders, 9, 20)
        assert (page, pages, len(items)) == (2, 2, 5)
        items, page, _ = paginate(orders, -3, 20)
        assert page == 1
        assert len(items) == 20


class TestOrderListState:

    def test_search_change_resets_page(self):
        state = OrderListState(page=3).with_search("ana")
        assert state.page == 1
        assert state.search == "ana"

    def test_sort_change_resets_page(self):
        state = OrderListState(page=3).with_sort(SortKey.CLIENT_NAME)
        assert state.page == 1
        assert state.sort.key == SortKey.CLIENT_NAME

    def test_same_search_keeps_page(self):
        state = OrderListState(search="ana", page=2)
        assert state.with_search("ana").page == 2

    def test_sort_spec_change_resets_page(self):
        spec = SortSpec(SortKey.CLIENT_NAME, SortDirection.DESCENDING)
        state = OrderListState(page=4).with_sort_spec(spec)
        assert state.sort == spec
        assert state.page == 1

    def test_same_sort_spec_keeps_page(self):
        state = OrderListState(page=4)
        assert state.with_sort_spec(DEFAULT_SORT).page == 4


class TestBuildOrderList:

    def test_second_page(self):
        orders = [_order(str(i), f"Client {i:02d}", f"2024-01-{i + 1:02d}") for i in range(25)]
        page = build_order_list(orders, OrderListState(page=2), page_size=20)
        assert page.page == 2
        assert page.total_pages == 2
        assert page.total_count == 25
        # descending by date: the 5 oldest orders land on page two
        assert _ids(page.items) == ["4", "3", "2", "1", "0"]
        assert page.has_previous and not page.has_next
        assert page.empty_message is None

    def test_search_with_no_match_gives_empty_page(self):
        page = build_order_list([_order("1", "Ana")], OrderListState(search="zzz"))
        assert page.items == []
        assert page.total_pages == 1
        assert page.page == 1
        assert page.empty_message == NO_MATCHES_MESSAGE

    def test_no_orders_at_all(self):
        assert build_order_list([]).empty_message == NO_ORDERS_MESSAGE

    def test_junk_input(self):
        page = build_order_list([None, 3, {"clientName": "Ana", "requestDate": "2024-01-10"}])
        assert [o.client_name for o in page.items] == ["Ana"]

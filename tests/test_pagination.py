from __future__ import annotations

import pydantic
import pytest

from scalrx.models import AccountUserListOptions, UserListOptions, WorkspaceListOptions
from scalrx.pagination import ListOptions, Page, Pagination, iter_items, iter_pages


def test_unset_fields_are_left_out_of_query() -> None:
    assert ListOptions().to_params() == {}
    assert WorkspaceListOptions(environment="env-1").to_params() == {"filter[environment]": "env-1"}


def test_account_user_options_shape_query() -> None:
    options = AccountUserListOptions(account="acc-1", include=["user", "teams"], page_size=20)

    assert options.to_params() == {
        "filter[account]": "acc-1",
        "include": "user,teams",
        "page[size]": 20,
    }


def test_options_accept_wire_names() -> None:
    options = UserListOptions.model_validate({"filter[email]": "a@example.com", "page[number]": 2})

    assert options.email == "a@example.com"
    assert options.page_number == 2


def test_options_do_not_cross_validate_filters() -> None:
    # the service decides which filter combinations it accepts
    assert AccountUserListOptions().to_params() == {}
    assert AccountUserListOptions(account="acc-1", user="user-1").to_params() == {
        "filter[account]": "acc-1",
        "filter[user]": "user-1",
    }


@pytest.mark.parametrize("field", ["page_number", "page_size"])
def test_page_fields_must_be_positive(field: str) -> None:
    with pytest.raises(pydantic.ValidationError):
        ListOptions(**{field: 0})


def test_unknown_options_are_rejected() -> None:
    with pytest.raises(pydantic.ValidationError):
        UserListOptions(colour="blue")


def test_options_are_immutable() -> None:
    options = UserListOptions(page_size=5)

    with pytest.raises(pydantic.ValidationError):
        options.page_size = 10  # type: ignore[misc]
    assert options.with_page(3).page_number == 3
    assert options.page_number is None


def _paged(numbers: list[list[int]]):
    calls: list[int | None] = []

    def fetch(options: ListOptions) -> Page[int]:
        calls.append(options.page_number)
        index = (options.page_number or 1) - 1
        last = index == len(numbers) - 1
        pagination = Pagination(
            current_page=index + 1,
            next_page=None if last else index + 2,
            total_pages=len(numbers),
            total_count=sum(len(chunk) for chunk in numbers),
        )
        return Page(items=numbers[index], pagination=pagination)

    return fetch, calls


def test_iter_pages_follows_next_page() -> None:
    fetch, calls = _paged([[1, 2], [3, 4], [5]])

    pages = list(iter_pages(fetch, ListOptions(page_size=2)))

    assert [page.items for page in pages] == [[1, 2], [3, 4], [5]]
    assert {page.total_count for page in pages} == {5}
    assert calls == [None, 2, 3]


def test_iter_items_starts_at_requested_page() -> None:
    fetch, _ = _paged([[1, 2], [3, 4], [5]])

    assert list(iter_items(fetch, ListOptions(page_number=2))) == [3, 4, 5]


def test_iter_pages_stops_on_backwards_link() -> None:
    def fetch(options: ListOptions) -> Page[int]:
        return Page(items=[1], pagination=Pagination(current_page=2, next_page=1))

    assert len(list(iter_pages(fetch, ListOptions()))) == 1


def test_empty_page_is_a_valid_result() -> None:
    page: Page[int] = Page(items=[], pagination=Pagination(total_count=0))

    assert len(page) == 0
    assert page.total_count == 0
    assert list(page) == []

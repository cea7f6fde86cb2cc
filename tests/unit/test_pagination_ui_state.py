import pytest

from quantum_console.app.ui.pagination import (
    ELLIPSIS,
    ExternalPageController,
    InternalPageController,
    PaginationMode,
    clamp_page,
    make_page_controller,
    page_window,
    slice_page,
    total_pages,
    visible_range,
)


def test_total_pages_is_at_least_one() -> None:
    assert total_pages(0, 10) == 1
    assert total_pages(10, 10) == 1
    assert total_pages(25, 10) == 3
    with pytest.raises(ValueError):
        total_pages(5, 0)


def test_clamp_and_slice() -> None:
    rows = list(range(1, 26))

    assert clamp_page(0, 3) == 1
    assert clamp_page(7, 3) == 3
    assert clamp_page(4, 0) == 1
    assert slice_page(rows, 3, 10) == [21, 22, 23, 24, 25]
    assert slice_page(rows, 4, 10) == []
    assert visible_range(3, 10, 25) == (21, 25)


@pytest.mark.parametrize(
    ("current", "pages", "expected"),
    [
        (1, 1, [1]),
        (1, 3, [1, 2, 3]),
        (1, 10, [1, 2, 3, ELLIPSIS, 10]),
        (4, 10, [1, 2, 3, 4, 5, 6, ELLIPSIS, 10]),
        (5, 10, [1, ELLIPSIS, 3, 4, 5, 6, 7, ELLIPSIS, 10]),
        (10, 10, [1, ELLIPSIS, 8, 9, 10]),
    ],
)
def test_page_window(current: int, pages: int, expected: list) -> None:
    assert page_window(current, pages) == expected


def test_internal_controller_owns_page() -> None:
    controller = make_page_controller(PaginationMode.INTERNAL, current_page=2)

    assert isinstance(controller, InternalPageController)
    assert controller.request_page(3, 3) is True
    assert controller.current_page == 3
    assert controller.request_page(4, 3) is False
    controller.sync(1)
    assert controller.current_page == 3
    controller.clamp(2)
    assert controller.current_page == 2


def test_external_controller_only_reports_requests() -> None:
    requested: list[int] = []
    controller = make_page_controller(PaginationMode.EXTERNAL, current_page=1, on_page_change=requested.append)

    assert isinstance(controller, ExternalPageController)
    assert controller.request_page(2, 3) is True
    assert controller.current_page == 1
    assert controller.request_page(0, 3) is False
    assert requested == [2]

    controller.sync(2)
    assert controller.current_page == 2


def test_external_controller_requires_callback() -> None:
    with pytest.raises(ValueError):
        make_page_controller(PaginationMode.EXTERNAL, current_page=1)

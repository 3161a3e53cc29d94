"""Immutable page snapshots over paginated listings."""

from collections.abc import Coroutine, Iterator, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar, overload

from gd_client.errors import InvalidArgumentError
from gd_client.request import Request

if TYPE_CHECKING:
    from gd_client.pipeline import FetchPipeline

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """Decoded content of one page, with the listing metadata the server reports, if any."""

    items: tuple[T, ...]
    total: int | None = None
    offset: int | None = None
    page_size: int | None = None


class Paginator(Sequence[T]):
    """One page of results, able to fetch other pages.

    A paginator is a snapshot: moving to another page returns a new paginator and leaves this
    one untouched. The server answers ``-1`` both past the last page and on genuine failures,
    so ``next_page()`` beyond the end raises ``MissingAccessError`` like any other failure.
    """

    def __init__(self, page: Page[T], request: Request[Page[T]], pipeline: "FetchPipeline") -> None:
        """Initialize a paginator.

        Args:
            page: Decoded content of the page.
            request: The request that produced the page; other pages are derived from it.
            pipeline: Pipeline used to fetch other pages.

        """
        self._page = page
        self._request = request
        self._pipeline = pipeline

    @staticmethod
    async def fetch(pipeline: "FetchPipeline", request: Request[Page[T]]) -> "Paginator[T]":
        """Fetch the page a request targets and wrap it."""
        page = await pipeline.fetch(request)
        return Paginator(page, request, pipeline)

    @property
    def page_number(self) -> int:
        """Zero-based number of this page."""
        return self._request.page

    @property
    def total(self) -> int | None:
        """Total result count reported by the server, if any."""
        return self._page.total

    def current_page(self) -> tuple[T, ...]:
        """Elements of this page."""
        return self._page.items

    def has_next_page(self) -> bool:
        """Check if the server reports more results. Optimistic when it reports nothing."""
        page = self._page
        if page.total is None or page.offset is None or page.page_size is None:
            return True
        return page.offset + page.page_size < page.total

    def next_page(self) -> Coroutine[Any, Any, "Paginator[T]"]:
        """Fetch the following page."""
        return self.go_to_page(self.page_number + 1)

    def previous_page(self) -> Coroutine[Any, Any, "Paginator[T]"]:
        """Fetch the preceding page.

        Raises:
            InvalidArgumentError: This is the first page.

        """
        if self.page_number == 0:
            raise InvalidArgumentError("Already on the first page.")
        return self.go_to_page(self.page_number - 1)

    def go_to_page(self, page: int) -> Coroutine[Any, Any, "Paginator[T]"]:
        """Fetch an arbitrary page.

        Raises:
            InvalidArgumentError: Negative page number.

        """
        if page < 0:
            raise InvalidArgumentError(f"Page number must be non-negative, got {page}")
        return Paginator.fetch(self._pipeline, self._request.with_page(page))

    # --- Sequence protocol ---

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[T, ...]: ...

    def __getitem__(self, index: int | slice) -> T | tuple[T, ...]:
        return self._page.items[index]

    def __len__(self) -> int:
        return len(self._page.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._page.items)

    def __repr__(self) -> str:
        return f"Paginator(page={self.page_number}, items={list(self._page.items)!r})"

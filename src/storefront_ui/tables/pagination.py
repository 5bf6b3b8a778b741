"""Pagination descriptor for DataTable.

The table never paginates. The caller hands over a descriptor for the page
it already sliced, and the table renders the footer and forwards page and
page size changes.
"""

from dataclasses import dataclass

DEFAULT_PAGE_SIZE_OPTIONS = (10, 20, 50, 100)


@dataclass(frozen=True)
class Pagination:
    """Read-only description of the page being shown."""

    current_page: int
    page_size: int
    total_pages: int
    total_items: int
    page_size_options: tuple[int, ...] = DEFAULT_PAGE_SIZE_OPTIONS

    @classmethod
    def from_page(cls, page, page_size_options=None) -> "Pagination":
        """Describe a django.core.paginator.Page."""
        paginator = page.paginator
        return cls(
            current_page=page.number,
            page_size=paginator.per_page,
            total_pages=paginator.num_pages,
            total_items=paginator.count,
            page_size_options=tuple(page_size_options or DEFAULT_PAGE_SIZE_OPTIONS),
        )

    @property
    def first_item(self) -> int:
        """1-based position of the first item on this page."""
        return (self.current_page - 1) * self.page_size + 1

    @property
    def last_item(self) -> int:
        """1-based position of the last item on this page."""
        return min(self.current_page * self.page_size, self.total_items)

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    def contains_page(self, page: int) -> bool:
        return 1 <= page <= self.total_pages

    def page_items(self, sibling_count: int = 1, boundary_count: int = 1) -> list[int | None]:
        """Page numbers to show, with None where a run of pages is elided.

        Always shows the first and last boundary_count pages and
        sibling_count pages either side of the current one.

        Example:
            Pagination(5, 10, 10, 100).page_items()
            -> [1, None, 4, 5, 6, None, 10]
        """
        total = self.total_pages
        if sibling_count * 2 + boundary_count * 2 + 1 >= total:
            return list(range(1, total + 1))

        left_sibling = max(self.current_page - sibling_count, 1)
        right_sibling = min(self.current_page + sibling_count, total)

        items: list[int | None] = list(range(1, min(boundary_count, total) + 1))

        if left_sibling > boundary_count + 1:
            items.append(None)

        for number in range(left_sibling, right_sibling + 1):
            if boundary_count < number <= total - boundary_count:
                items.append(number)

        if right_sibling < total - boundary_count:
            items.append(None)

        items.extend(range(max(total - boundary_count + 1, boundary_count + 1), total + 1))
        return items

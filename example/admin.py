"""
Place your admin registrations here
"""

from __future__ import annotations

from datetime import date

from recordadmin import AdminAction, AdminSite, ModelAdmin
from recordadmin.core.exceptions import ActionFailed, RecordNotFound

from .models import Address, Author, Book, Chapter, Genre
from .store import DemoSearch, MemoryAccessor


def build_site() -> AdminSite:
    """Return an admin site with the demo authors and books registered."""

    site = AdminSite()
    authors = MemoryAccessor(
        Author,
        [
            Author(1, "Ada", "ada@example.com", True, Address("1 Main St", "London")),
            Author(2, "Grace", None, False, Address("2 Side St", "New York")),
        ],
    )
    books = MemoryAccessor(
        Book,
        [
            Book(1, "Notes", Genre.ESSAY, 9.5, date(1843, 10, 1), [Chapter("Intro", 12)]),
            Book(2, "Compilers", Genre.NOVEL, 25.0, None, []),
        ],
    )
    site.register(
        ModelAdmin(
            name="Author",
            accessor=authors,
            list_fields={"id": True, "name": True, "email": False},
            read_only_fields={"id"},
            field_notes={"email": "Used for notifications only."},
            searcher=DemoSearch(authors, "Search authors"),
        )
    )
    site.register(
        ModelAdmin(
            name="Book",
            accessor=books,
            list_fields={"id": True, "title": True, "price": True},
            read_only_fields={"id"},
            omit_fields={"chapters"},
        )
    )

    def deactivate(form) -> None:
        ids = form.get("ids", [])
        if not ids:
            raise ActionFailed("Select at least one author.")
        for pk in ids:
            try:
                authors.upsert(pk, {"active": ["false"]})
            except RecordNotFound as exc:
                raise ActionFailed(f"Author {pk} no longer exists.") from exc

    site.add_list_action(
        "author",
        AdminAction("deactivate", "Deactivate selected", deactivate, confirm=True),
    )
    return site


__all__ = ["build_site"]


# The End

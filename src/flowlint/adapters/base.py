"""Host contract: the page-builder data source the linter reads from."""

from __future__ import annotations

from typing import Any, Callable, Mapping, Protocol


class StyleHandle(Protocol):
    """One style (class) definition in the host.

    Hosts may additionally expose ``async is_combo_class() -> bool``; when
    absent the combo flag is derived from the class name.
    """

    id: str

    async def get_name(self) -> str: ...

    async def get_properties(self, options: Mapping[str, Any] | None = None) -> dict[str, Any]: ...


class ElementHandle(Protocol):
    id: str

    async def get_styles(self) -> list[StyleHandle]: ...

    async def get_tag_name(self) -> str | None: ...

    async def get_children(self) -> list[ElementHandle]: ...


SelectionCallback = Callable[["ElementHandle | None"], None]


class Host(Protocol):
    """Protocol for page-builder hosts."""

    async def get_all_elements(self) -> list[ElementHandle]:
        """Every element on the current page, in document order."""
        ...

    async def get_all_styles(self) -> list[StyleHandle]:
        """Every style defined site-wide."""
        ...

    def subscribe_selection(self, callback: SelectionCallback) -> Callable[[], None]:
        """Call ``callback`` on every selection change; returns an unsubscribe function."""
        ...

from __future__ import annotations

from dataclasses import dataclass

HOME_PATH = "/"


@dataclass(frozen=True)
class ViewportState:
    """Measured size of the presentation surface.

    A new instance replaces the old one on every resize; nothing holds
    on to a stale viewport.

    Attributes:
        width: Width in pixels.
        height: Height in pixels.
    """

    width: float
    height: float

    @property
    def is_degenerate(self) -> bool:
        """``True`` when either dimension is non-positive."""
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True)
class ScrollState:
    """Vertical scroll position of the page.

    Negative offsets (overscroll bounce, bad upstream state) are
    clamped to zero.

    Attributes:
        offset_y: Distance scrolled from the top, in pixels.
    """

    offset_y: float = 0.0

    def __post_init__(self) -> None:
        if self.offset_y < 0:
            object.__setattr__(self, "offset_y", 0.0)


@dataclass(frozen=True)
class RouteContext:
    """What the router tells us about the current page.

    Attributes:
        path: Current route path.
        is_home: Whether the hero suppression rule applies.
    """

    path: str = HOME_PATH
    is_home: bool = True

    @classmethod
    def from_path(
        cls, path: str | None, *, home_path: str = HOME_PATH,
    ) -> RouteContext:
        """Build a context from a router path.

        ``None`` is treated as *home_path*, since some routers report no
        path before the first navigation completes.
        """
        resolved = home_path if path is None else path
        return cls(path=resolved, is_home=resolved == home_path)

"""
Interaction Surfaces

A surface is anything an action can be addressed to: a whole page, a frame
inside a page, or a single element that was already resolved. Playwright gives
these three different APIs, so each is tagged once here and the action
primitives dispatch on the tag.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence, Union

from playwright.sync_api import FrameLocator, Locator, Page

from .errors import UnsupportedSurfaceError

Keys = Union[str, Sequence[str]]


class SurfaceKind(str, Enum):
    """Kinds of interaction surface."""

    PAGE = "page"
    FRAME = "frame"
    ELEMENT = "element"


@dataclass(frozen=True)
class Surface:
    """A Playwright object tagged with the kind of surface it is."""

    kind: SurfaceKind
    target: Any

    @classmethod
    def of(cls, obj: Any) -> "Surface":
        """Wrap a Page, FrameLocator or Locator."""
        if isinstance(obj, Surface):
            return obj
        if isinstance(obj, Page):
            return cls(SurfaceKind.PAGE, obj)
        if isinstance(obj, FrameLocator):
            return cls(SurfaceKind.FRAME, obj)
        if isinstance(obj, Locator):
            return cls(SurfaceKind.ELEMENT, obj)
        raise UnsupportedSurfaceError(obj)

    def resolve(self, locator: Optional[Union[str, Locator]] = None) -> Locator:
        """Turn a selector string into a Locator scoped to this surface.

        Already-resolved locators are returned untouched. An element surface
        with no selector resolves to the element itself.
        """
        if isinstance(locator, Locator):
            return locator
        if self.kind == SurfaceKind.ELEMENT and not locator:
            return self.target
        if not locator:
            raise ValueError(f"A locator is required for a {self.kind.value} surface")
        return self.target.locator(locator)

    def press(self, resolved: Locator, keys: Keys) -> None:
        """Send one key combination or a sequence of them.

        Pages use the global keyboard. Frames and elements have no keyboard of
        their own, so the keys go to the resolved element.
        """
        for key in [keys] if isinstance(keys, str) else keys:
            if self.kind == SurfaceKind.PAGE:
                self.target.keyboard.press(key)
            else:
                resolved.press(key)

    def describe(self, locator: Optional[Union[str, Locator]] = None) -> str:
        """Human-readable description used in error messages."""
        if locator is None:
            return f"<{self.kind.value}>"
        return str(locator)

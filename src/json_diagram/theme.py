"""Light and dark color palettes for diagram renderers.

``theme_settings(mode)`` is a total, side-effect-free mapping from a
``ThemeMode`` to a frozen ``ThemeSettings``.  ``ThemeService`` holds the
active mode for an application and notifies subscribers when it changes.
Nothing here touches the graph transform.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import asdict, dataclass
from enum import StrEnum, auto

__all__ = ["ThemeMode", "ThemeService", "ThemeSettings", "theme_settings"]

logger = logging.getLogger(__name__)


class ThemeMode(StrEnum):
    """The two supported palettes: ``"light"`` and ``"dark"``."""

    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True, slots=True)
class ThemeSettings:
    """Every color slot a renderer needs, as CSS color strings."""

    theme: ThemeMode
    node_fill_color: str
    node_stroke_color: str
    text_key_color: str
    text_value_color: str
    text_value_null_color: str
    connector_stroke_color: str
    expand_icon_color: str
    expand_icon_fill_color: str
    expand_icon_border: str
    background_color: str
    gridlines_color: str
    child_count_color: str
    boolean_color: str
    numeric_color: str
    popup_key_color: str
    popup_value_color: str
    popup_content_bg_color: str
    highlight_fill_color: str
    highlight_focus_color: str
    highlight_stroke_color: str

    def to_dict(self) -> dict[str, str]:
        """Return the palette keyed by camelCase slot names."""
        return {_camel(name): str(value) for name, value in asdict(self).items()}


def _camel(name: str) -> str:
    first, *rest = name.split("_")
    words = ["BG" if word == "bg" else word.capitalize() for word in rest]
    return first + "".join(words)


_PALETTES: dict[ThemeMode, ThemeSettings] = {
    ThemeMode.LIGHT: ThemeSettings(
        theme=ThemeMode.LIGHT,
        node_fill_color="rgb(255, 255, 255)",
        node_stroke_color="rgb(188, 190, 192)",
        text_key_color="#A020F0",
        text_value_color="rgb(83, 83, 83)",
        text_value_null_color="rgb(41, 41, 41)",
        connector_stroke_color="rgb(188, 190, 192)",
        expand_icon_color="rgb(46, 51, 56)",
        expand_icon_fill_color="#e0dede",
        expand_icon_border="rgb(188, 190, 192)",
        background_color="#F8F9FA",
        gridlines_color="#EBE8E8",
        child_count_color="rgb(41, 41, 41)",
        boolean_color="rgb(74, 145, 67)",
        numeric_color="rgb(182, 60, 30)",
        popup_key_color="#5C940D",
        popup_value_color="#1864AB",
        popup_content_bg_color="#F8F9FA",
        highlight_fill_color="rgba(27, 255, 0, 0.1)",
        highlight_focus_color="rgba(252, 255, 166, 0.57)",
        highlight_stroke_color="rgb(0, 135, 54)",
    ),
    ThemeMode.DARK: ThemeSettings(
        theme=ThemeMode.DARK,
        node_fill_color="rgb(41, 41, 41)",
        node_stroke_color="rgb(66, 66, 66)",
        text_key_color="#4dabf7",
        text_value_color="rgb(207, 227, 225)",
        text_value_null_color="rgb(151, 150, 149)",
        connector_stroke_color="rgb(66, 66, 66)",
        expand_icon_color="rgb(220, 221, 222)",
        expand_icon_fill_color="#1e1e1e",
        expand_icon_border="rgb(66, 66, 66)",
        background_color="#1e1e1e",
        gridlines_color="rgb(45, 45, 45)",
        child_count_color="rgb(255, 255, 255)",
        boolean_color="rgb(61, 226, 49)",
        numeric_color="rgb(232, 196, 121)",
        popup_key_color="#A5D8FF",
        popup_value_color="#40C057",
        popup_content_bg_color="#1A1A1A",
        highlight_fill_color="rgba(27, 255, 0, 0.1)",
        highlight_focus_color="rgba(82, 102, 0, 0.61)",
        highlight_stroke_color="rgb(0, 135, 54)",
    ),
}


def theme_settings(mode: ThemeMode | str) -> ThemeSettings:
    """Return the palette for ``mode``.

    Raises:
        ValueError: If ``mode`` is not ``"light"`` or ``"dark"``.
    """
    return _PALETTES[ThemeMode(mode)]


class ThemeService:
    """Holds the active theme and notifies subscribers when it changes.

    Mode and palette are stored as one tuple so readers never observe a
    mode paired with the other mode's palette.

    Example::

        service = ThemeService()
        unsubscribe = service.subscribe(lambda s: print(s.background_color))
        service.set_mode("dark")   # prints "#1e1e1e", returns True
        service.set_mode("dark")   # no-op, returns False
        unsubscribe()
    """

    def __init__(self, mode: ThemeMode | str = ThemeMode.LIGHT) -> None:
        mode = ThemeMode(mode)
        self._state: tuple[ThemeMode, ThemeSettings] = (mode, theme_settings(mode))
        self._subscribers: list[Callable[[ThemeSettings], None]] = []

    @property
    def mode(self) -> ThemeMode:
        return self._state[0]

    @property
    def settings(self) -> ThemeSettings:
        return self._state[1]

    def set_mode(self, mode: ThemeMode | str) -> bool:
        """Switch to ``mode``; return False without notifying if unchanged.

        Raises:
            ValueError: If ``mode`` is not a known theme.
        """
        mode = ThemeMode(mode)
        if mode == self._state[0]:
            return False
        self._state = (mode, theme_settings(mode))
        logger.debug("Theme switched to %s", mode)
        for callback in list(self._subscribers):
            callback(self._state[1])
        return True

    def subscribe(self, callback: Callable[[ThemeSettings], None]) -> Callable[[], None]:
        """Call ``callback(settings)`` after every mode change.

        Returns:
            A function that removes the subscription.  Calling it twice is
            harmless.
        """
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

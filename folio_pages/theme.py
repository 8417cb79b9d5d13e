"""Light/dark theme preference state.

:class:`ThemeController` models the two-state theme toggle used by every
page. The initial value comes from the persisted preference, then the
operating-system colour scheme, then ``light``. Every change is persisted and
pushed synchronously to subscribers. Exactly one subscriber, created with
:func:`mirror_theme`, reflects the value onto the page's ``dark`` class; the
controller itself never touches the style target.

The generated pages run the same rules in the browser through the inline
script in ``base.jinja``, which reads :data:`THEME_STORAGE_KEY` from
``localStorage`` and the ``prefers-color-scheme`` media query.

Example
-------
>>> from folio_pages.theme import InMemoryStorage, StyleTarget, ThemeController
>>> from folio_pages.theme import mirror_theme
>>> storage = InMemoryStorage()
>>> controller = ThemeController(storage)
>>> target = StyleTarget()
>>> _ = controller.subscribe(mirror_theme(target))
>>> controller.initialize().value
'light'
>>> controller.toggle().value, sorted(target.classes)
('dark', ['dark'])
>>> storage.get("theme")
'dark'
"""

from __future__ import annotations

import enum
import logging
import typing as typ

from ._constants import DARK_CLASS, THEME_STORAGE_KEY

logger = logging.getLogger(__name__)

Subscriber = typ.Callable[["Theme"], None]


class Theme(enum.StrEnum):
    """Supported colour themes."""

    LIGHT = "light"
    DARK = "dark"

    def toggled(self) -> Theme:
        """Return the opposite theme."""
        return Theme.DARK if self is Theme.LIGHT else Theme.LIGHT


class PreferenceStorage(typ.Protocol):
    """Client-side key/value storage such as ``localStorage``."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class ColorSchemeProbe(typ.Protocol):
    """Source of the operating-system colour scheme preference."""

    def prefers_dark(self) -> bool | None:
        """Return the OS preference, or ``None`` when it is unavailable."""
        ...


class InMemoryStorage:
    """Dictionary-backed :class:`PreferenceStorage`."""

    def __init__(self, initial: typ.Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class StaticColorScheme:
    """Probe returning a fixed OS preference."""

    def __init__(self, prefers_dark: bool | None) -> None:
        self._prefers_dark = prefers_dark

    def prefers_dark(self) -> bool | None:
        return self._prefers_dark


class StyleTarget:
    """Class list of the document root element."""

    def __init__(self) -> None:
        self.classes: set[str] = set()

    @property
    def is_dark(self) -> bool:
        return DARK_CLASS in self.classes


def mirror_theme(target: StyleTarget) -> Subscriber:
    """Return the subscriber that reflects the theme onto ``target``."""

    def _apply(theme: Theme) -> None:
        if theme is Theme.DARK:
            target.classes.add(DARK_CLASS)
        else:
            target.classes.discard(DARK_CLASS)

    return _apply


class ThemeController:
    """Resolve, toggle, persist, and broadcast the active theme."""

    def __init__(
        self,
        storage: PreferenceStorage | None = None,
        probe: ColorSchemeProbe | None = None,
        *,
        interactive: bool = True,
    ) -> None:
        """Initialize the controller.

        Parameters
        ----------
        storage : PreferenceStorage, optional
            Where the preference is persisted. ``None`` means storage is
            unavailable and nothing is read or written.
        probe : ColorSchemeProbe, optional
            OS colour-scheme signal consulted when nothing is persisted.
        interactive : bool, optional
            ``False`` for server-side rendering; the theme is then always
            ``light`` and browser-only signals are ignored.
        """
        self.storage = storage if interactive else None
        self.probe = probe if interactive else None
        self.interactive = interactive
        self._current = Theme.LIGHT
        self._subscribers: list[Subscriber] = []

    @property
    def current(self) -> Theme:
        return self._current

    def initial_theme(self) -> Theme:
        """Return the theme implied by storage, then the OS, then ``light``."""
        if self.storage is None:
            return Theme.LIGHT
        saved = self.storage.get(THEME_STORAGE_KEY)
        if saved in {Theme.LIGHT.value, Theme.DARK.value}:
            return Theme(saved)
        if saved is not None:
            logger.debug("Ignoring unknown stored theme %r", saved)
        if self.probe is not None and self.probe.prefers_dark():
            return Theme.DARK
        return Theme.LIGHT

    def initialize(self) -> Theme:
        """Resolve the initial theme, persist it, and notify subscribers."""
        self._set(self.initial_theme())
        return self._current

    def toggle(self) -> Theme:
        """Flip the theme, persist it, and notify subscribers."""
        self._set(self._current.toggled())
        return self._current

    def subscribe(self, callback: Subscriber) -> typ.Callable[[], None]:
        """Register ``callback`` and call it with the current theme.

        Returns
        -------
        callable
            Function that removes the subscription.
        """
        self._subscribers.append(callback)
        callback(self._current)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    def _set(self, theme: Theme) -> None:
        self._current = theme
        if self.storage is not None:
            self.storage.set(THEME_STORAGE_KEY, theme.value)
        for callback in list(self._subscribers):
            callback(theme)


__all__ = [
    "ColorSchemeProbe",
    "InMemoryStorage",
    "PreferenceStorage",
    "StaticColorScheme",
    "StyleTarget",
    "Theme",
    "ThemeController",
    "mirror_theme",
]

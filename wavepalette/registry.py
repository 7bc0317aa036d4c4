"""
Palette registry: one live instance of each palette variant plus the
currently active selection.

The registry is constructed and owned by the caller (typically the
application root) and passed to whoever needs it. Interested parties
subscribe to change notifications instead of polling.

Readers that render many samples should take ``registry.active_palette``
(or ``registry.snapshot()`` when they also need the selection) once per
frame and use that reference throughout. Writers swap the selection and the
active palette together in a single assignment, so a reader never sees a
mismatched pair.
"""
from __future__ import annotations
from typing import Callable, Dict, List, Optional, Tuple
import logging
import threading

from . import defaults
from .palettes import CosineOscillatorPalette, MultiColorPalette, Palette, TwoColorPalette
from .types.color_types import PaletteKind, as_palette_kind

logger = logging.getLogger(__name__)

Subscriber = Callable[["PaletteRegistry", PaletteKind], None]


def build_registry(*classes: type[Palette]) -> Dict[PaletteKind, type[Palette]]:
    return {cls.kind: cls for cls in classes}


class PaletteRegistry:
    slot_classes: Dict[PaletteKind, type[Palette]] = build_registry(
        CosineOscillatorPalette,
        TwoColorPalette,
        MultiColorPalette,
    )

    def __init__(
        self,
        cosine: Optional[CosineOscillatorPalette] = None,
        two_color: Optional[TwoColorPalette] = None,
        multi_color: Optional[MultiColorPalette] = None,
        selection: PaletteKind | str = defaults.DEFAULT_SELECTION,
    ) -> None:
        given = {
            PaletteKind.COSINE: cosine,
            PaletteKind.TWO_COLOR: two_color,
            PaletteKind.MULTI_COLOR: multi_color,
        }
        self._slots: Dict[PaletteKind, Palette] = {}
        for kind, palette in given.items():
            if palette is None:
                palette = self.slot_classes[kind]()
            elif not isinstance(palette, self.slot_classes[kind]):
                raise TypeError(
                    f"{kind.value} slot expects {self.slot_classes[kind].__name__}, "
                    f"got {type(palette).__name__}"
                )
            self._slots[kind] = palette

        self._lock = threading.RLock()
        self._subscribers: List[Subscriber] = []
        kind = as_palette_kind(selection)
        # (selection, active) is always swapped as one tuple
        self._state: Tuple[PaletteKind, Palette] = (kind, self._slots[kind])

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def selection(self) -> PaletteKind:
        return self._state[0]

    @property
    def active_palette(self) -> Palette:
        return self._state[1]

    def snapshot(self) -> Tuple[PaletteKind, Palette]:
        """Return ``(selection, active_palette)`` as one consistent pair."""
        return self._state

    @property
    def cosine(self) -> CosineOscillatorPalette:
        return self._slots[PaletteKind.COSINE]  # type: ignore[return-value]

    @property
    def two_color(self) -> TwoColorPalette:
        return self._slots[PaletteKind.TWO_COLOR]  # type: ignore[return-value]

    @property
    def multi_color(self) -> MultiColorPalette:
        return self._slots[PaletteKind.MULTI_COLOR]  # type: ignore[return-value]

    # ------------------ OPERATIONS ------------------
    def get_palette(self, kind: PaletteKind | str) -> Palette:
        """Return the owned instance for ``kind`` without changing the selection."""
        return self._slots[as_palette_kind(kind)]

    def select_variant(self, kind: PaletteKind | str) -> Palette:
        """
        Make ``kind`` the active palette.

        Args:
            kind: A ``PaletteKind`` or its string value

        Returns:
            The newly active palette
        """
        kind = as_palette_kind(kind)
        with self._lock:
            self._state = (kind, self._slots[kind])
            active = self._state[1]
        logger.debug("Selected %s palette: %r", kind.value, active)
        self._notify(kind)
        return active

    def replace_variant(self, palette: Palette) -> bool:
        """
        Replace the owned instance whose variant matches ``palette.kind``.

        An object that is not an instance of the slot class for its tag (for
        example a foreign ``Palette`` subclass declaring ``PaletteKind.COSINE``)
        is ignored. The active
        palette is not refreshed; call ``refresh`` or ``select_variant`` to
        pick up a replacement of the selected variant.

        Returns:
            True if a slot was replaced
        """
        kind = getattr(palette, "kind", None)
        if (
            not isinstance(palette, Palette)
            or not isinstance(kind, PaletteKind)
            or not isinstance(palette, self.slot_classes[kind])
        ):
            logger.debug("Ignoring replacement with unrecognized palette %r", palette)
            return False
        with self._lock:
            self._slots[kind] = palette
        logger.debug("Replaced %s palette with %r", kind.value, palette)
        self._notify(kind)
        return True

    def refresh(self) -> Palette:
        """Re-sync the active palette with the current selection."""
        with self._lock:
            kind = self._state[0]
            self._state = (kind, self._slots[kind])
            return self._state[1]

    # ------------------ NOTIFICATIONS ------------------
    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register ``callback(registry, kind)`` to run after every selection
        change and every successful replacement.

        Returns:
            A function that removes the subscription
        """
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self, kind: PaletteKind) -> None:
        with self._lock:
            subscribers = list(self._subscribers)
        for callback in subscribers:
            callback(self, kind)

    def __repr__(self) -> str:
        kind, active = self._state
        return f"PaletteRegistry(selection={kind.value}, active={active!r})"

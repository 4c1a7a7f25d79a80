"""Key dispatch from decoded key tokens to navigator operations.

Key tokens are what the terminal input layer produces: single printable
characters (``"j"``, ``"/"``) or upper-case names (``"UP"``, ``"PAGE_DOWN"``,
``"SHIFT_LEFT"``, ``"ESC"``, ``"ENTER"``, ``"BACKSPACE"``).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .navigation import InputMode, TreeNavigator


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a single action callback."""

    combos: tuple[str, ...]
    handler: Callable[[], bool]


class KeyComboRegistry:
    """Small key-dispatch table."""

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[], bool]] = {}

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Register one binding, overwriting existing handlers for same combos."""
        for combo in binding.combos:
            self._handlers[combo] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def __contains__(self, key: str) -> bool:
        return key in self._handlers

    def dispatch(self, key: str) -> bool | None:
        """Invoke bound handler for ``key``; ``None`` when nothing is bound."""
        handler = self._handlers.get(key)
        if handler is None:
            return None
        return handler()


def normal_key_registry(navigator: TreeNavigator) -> KeyComboRegistry:
    """Bindings active in normal mode."""

    def escape_action() -> bool:
        # Esc first drops an accepted search highlight, then quits.
        if navigator.search_active:
            return navigator.clear_search()
        return navigator.quit()

    return KeyComboRegistry().register_bindings(
        KeyComboBinding(("UP", "k"), navigator.move_up),
        KeyComboBinding(("DOWN", "j"), navigator.move_down),
        KeyComboBinding(("PAGE_UP",), navigator.page_up),
        KeyComboBinding(("PAGE_DOWN",), navigator.page_down),
        KeyComboBinding(("LEFT", "h"), navigator.collapse),
        KeyComboBinding(("RIGHT", "l"), navigator.expand),
        KeyComboBinding(("SHIFT_LEFT", "H"), navigator.collapse_all),
        KeyComboBinding(("SHIFT_RIGHT", "L"), navigator.expand_all),
        KeyComboBinding(("/",), navigator.enter_search),
        KeyComboBinding(("n",), navigator.next_match),
        KeyComboBinding(("N",), navigator.previous_match),
        KeyComboBinding(("q",), navigator.quit),
        KeyComboBinding(("ESC",), escape_action),
    )


def search_key_registry(navigator: TreeNavigator) -> KeyComboRegistry:
    """Bindings active while editing the search pattern."""
    return KeyComboRegistry().register_bindings(
        KeyComboBinding(("ESC",), navigator.cancel_search),
        KeyComboBinding(("ENTER",), navigator.accept_search),
        KeyComboBinding(("BACKSPACE",), navigator.search_backspace),
    )


def is_text_key(key: str) -> bool:
    return len(key) == 1 and key.isprintable()


def handle_key(navigator: TreeNavigator, key: str) -> bool:
    """Apply one key to ``navigator``; return whether the key was recognized.

    Recognized keys whose edit is rejected (an invalid search pattern) still
    count as handled; the navigator state is simply left unchanged.
    """
    if navigator.state.input_mode is InputMode.SEARCH_ENTRY:
        registry = search_key_registry(navigator)
        if key in registry:
            registry.dispatch(key)
            return True
        if is_text_key(key):
            navigator.search_input(key)
            return True
        return False

    registry = normal_key_registry(navigator)
    if key not in registry:
        return False
    registry.dispatch(key)
    return True

from __future__ import annotations

from typing import Optional, Union

from PySide6.QtCore import Qt

from bezierblob.model.state import Action

KEYMAP: dict[int, Action] = {
    Qt.Key.Key_Space.value: Action.TOGGLE_OVERLAYS,
    Qt.Key.Key_A.value: Action.TOGGLE_ANIMATION,
    Qt.Key.Key_F.value: Action.TOGGLE_FILL,
    Qt.Key.Key_R.value: Action.TOGGLE_ROTATION,
}

KEY_LABELS: dict[Action, str] = {
    Action.TOGGLE_OVERLAYS: "Space",
    Action.TOGGLE_ANIMATION: "A",
    Action.TOGGLE_FILL: "F",
    Action.TOGGLE_ROTATION: "R",
}


def action_for_key(key: Union[int, Qt.Key]) -> Optional[Action]:
    """Look up the toggle bound to a key code; unbound keys give None."""
    code = getattr(key, "value", key)
    return KEYMAP.get(code)

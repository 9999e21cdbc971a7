"""
Main Application Window
=======================
The primary GUI container that holds the Menu Bar, the Canvas and the Status Bar.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects menu actions to the session (the same toggles the
   keyboard triggers, plus Reset).
"""
from __future__ import annotations

import logging

from PySide6.QtGui import QAction
from PySide6.QtWidgets import QMainWindow

from bezierblob.config import VISIBLE_APP_NAME
from bezierblob.model.state import Action, BlobSession
from bezierblob.view.canvas import BlobCanvas
from bezierblob.view.keymap import KEY_LABELS

logger = logging.getLogger(__name__)

ACTION_TITLES: dict[Action, str] = {
    Action.TOGGLE_OVERLAYS: "Show Points && Handles",
    Action.TOGGLE_ANIMATION: "Animate",
    Action.TOGGLE_FILL: "Fill",
    Action.TOGGLE_ROTATION: "Rotate",
}


class MainWindow(QMainWindow):
    def __init__(self, session: BlobSession) -> None:
        super().__init__()
        self.session: BlobSession = session

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(900, 800)

        # --- CENTRAL CANVAS ---
        self.canvas = BlobCanvas(self.session, self)
        self.setCentralWidget(self.canvas)

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        # --- CONNECTIONS ---
        self.canvas.state_changed.connect(self.update_status)

        self.update_status()
        self.canvas.setFocus()

    def _create_actions(self) -> None:
        self.act_reset = QAction("Reset", self)
        self.act_reset.triggered.connect(self.on_reset)

        self.act_exit = QAction("Quit", self)
        self.act_exit.setShortcut("Ctrl+Q")
        self.act_exit.triggered.connect(self.close)

        # Toggle actions mirror the canvas keys. The key is shown in the
        # menu text only; the canvas handles the key press itself.
        self.toggle_actions: dict[Action, QAction] = {}
        for action, title in ACTION_TITLES.items():
            qaction = QAction(f"{title}\t{KEY_LABELS[action]}", self)
            qaction.setCheckable(True)
            qaction.triggered.connect(lambda _checked=False, a=action: self.on_toggle(a))
            self.toggle_actions[action] = qaction

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&Blob")
        file_menu.addAction(self.act_reset)
        file_menu.addSeparator()
        file_menu.addAction(self.act_exit)

        view_menu = menu_bar.addMenu("&View")
        for qaction in self.toggle_actions.values():
            view_menu.addAction(qaction)

    # --- SLOTS ---

    def on_toggle(self, action: Action) -> None:
        self.session.apply(action)
        self.canvas.update()
        self.update_status()

    def on_reset(self) -> None:
        self.session.reset()
        self.canvas.update()
        self.update_status()

    def update_status(self) -> None:
        """Sync the checkable menu entries and the status bar with the session."""
        s = self.session
        checked = {
            Action.TOGGLE_OVERLAYS: s.draw_markers,
            Action.TOGGLE_ANIMATION: s.animating,
            Action.TOGGLE_FILL: s.fill,
            Action.TOGGLE_ROTATION: s.rotating,
        }
        for action, qaction in self.toggle_actions.items():
            qaction.setChecked(checked[action])

        flags = ", ".join(name for name, on in s.toggles().items() if on) or "none"
        dragging = f" | dragging #{s.captured}" if s.captured is not None else ""
        self.statusBar().showMessage(
            f"{s.shape.point_count} points | area {s.shape.outline_area():.0f} | on: {flags}{dragging}"
        )

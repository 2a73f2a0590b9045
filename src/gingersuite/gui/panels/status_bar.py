"""
Status Bar Component.
Shows the loaded file with its container layers, and the last status message.
"""

import dearpygui.dearpygui as dpg

from ..events import EventBus, Events
from ..state import STATE
from ..theme import Colors, layer_color


class StatusBar:
    """Application status bar."""

    TAG = "status_bar"
    FILE_TAG = "status_file"
    LAYERS_TAG = "status_layers"
    TEXT_TAG = "status_text"

    def __init__(self, width: int = 1400, height: int = 30, y_pos: int = 865):
        self.width = width
        self.height = height
        self.y_pos = y_pos
        self._create_bar()
        EventBus.subscribe(Events.STATUS_UPDATE, self._on_status_update)
        EventBus.subscribe(Events.FILE_LOADED, self._on_file_loaded)
        EventBus.subscribe(Events.FILE_CLEARED, self._on_file_cleared)

    def _create_bar(self):
        with dpg.window(
            tag=self.TAG,
            no_title_bar=True,
            no_resize=True,
            no_move=True,
            no_close=True,
            no_collapse=True,
            no_scrollbar=True,
            pos=(0, self.y_pos),
            width=self.width,
            height=self.height
        ):
            with dpg.group(horizontal=True):
                dpg.add_text("no file", tag=self.FILE_TAG, color=Colors.TEXT_DIM)
                dpg.add_text("", tag=self.LAYERS_TAG)
                dpg.add_spacer(width=24)
                dpg.add_text("Ready", tag=self.TEXT_TAG, color=Colors.TEXT_DIM)

    def _on_file_loaded(self, data):
        container = STATE.current_container
        dpg.set_value(self.FILE_TAG, f"{data['file_path'].name} [{container.kind.value}]")
        dpg.configure_item(self.FILE_TAG, color=Colors.ACCENT)
        dpg.set_value(self.LAYERS_TAG, f"layers: {container.layers}")
        dpg.configure_item(self.LAYERS_TAG, color=layer_color(container.layers))

    def _on_file_cleared(self, data):
        dpg.set_value(self.FILE_TAG, "no file")
        dpg.configure_item(self.FILE_TAG, color=Colors.TEXT_DIM)
        dpg.set_value(self.LAYERS_TAG, "")

    def _on_status_update(self, message: str):
        color = Colors.ERROR if STATE.last_error and message == STATE.last_error else Colors.TEXT_DIM
        dpg.set_value(self.TEXT_TAG, message)
        dpg.configure_item(self.TEXT_TAG, color=color)

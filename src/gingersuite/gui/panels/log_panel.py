"""
Log Panel.
Shows the session log kept in AppState.
"""

import dearpygui.dearpygui as dpg

from ..events import EventBus, Events
from ..state import STATE
from ..theme import Colors


class LogPanel:
    """Log / diagnostics panel."""
    
    TAG = "log_panel"
    LOG_OUTPUT_TAG = "log_output"
    
    def __init__(self, width: int = 1350, height: int = 300, pos: tuple = (10, 545)):
        self.width = width
        self.height = height
        self.pos = pos
        self._create_panel()
        # Any status change may come with new log lines
        EventBus.subscribe(Events.STATUS_UPDATE, self._on_status_update)
    
    def _create_panel(self):
        with dpg.window(
            label="Log",
            tag=self.TAG,
            width=self.width,
            height=self.height,
            pos=self.pos
        ):
            with dpg.group(horizontal=True):
                dpg.add_text("Log Output", color=Colors.ACCENT)
                dpg.add_button(label="Clear", width=60, callback=self._on_clear)
            dpg.add_separator()
            dpg.add_input_text(
                tag=self.LOG_OUTPUT_TAG,
                multiline=True,
                readonly=True,
                width=-1,
                height=-1,
                default_value=""
            )
    
    def refresh(self):
        lines = [f"{e['time']} [{e['level']}] {e['message']}" for e in STATE.logs]
        dpg.set_value(self.LOG_OUTPUT_TAG, "\n".join(lines))
    
    def _on_status_update(self, message):
        self.refresh()
    
    def _on_clear(self):
        STATE.logs.clear()
        self.refresh()

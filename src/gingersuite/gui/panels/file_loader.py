"""
File Loader Panel - Entry Point

Browse for a .cgr file and show what kind of container it is.
"""

import dearpygui.dearpygui as dpg

from ...formats.cgr.constants import FILE_EXTENSION
from ..events import EventBus, Events
from ..session import load_session, clear_session
from ..state import STATE
from ..theme import Colors


class FileLoaderPanel:
    """File loader panel - browse and load channel group files."""
    
    TAG = "file_loader"
    DIALOG_TAG = "file_loader_dialog"
    RECENT_TAG = "file_loader_recent"
    MAX_RECENT = 10
    
    def __init__(self, width: int = 350, height: int = 330, pos: tuple = (10, 30)):
        self.width = width
        self.height = height
        self.pos = pos
        self.recent_files = []
        self._create_file_dialog()
        self._create_panel()
        self._subscribe_events()
    
    def _create_file_dialog(self):
        with dpg.file_dialog(
            directory_selector=False,
            show=False,
            callback=self._on_file_selected,
            tag=self.DIALOG_TAG,
            width=700,
            height=450,
            default_path=STATE.browse_path,
            modal=True
        ):
            dpg.add_file_extension(FILE_EXTENSION, color=Colors.ACCENT)
            dpg.add_file_extension(".*")
    
    def _create_panel(self):
        with dpg.window(
            label="File Loader",
            tag=self.TAG,
            width=self.width,
            height=self.height,
            pos=self.pos
        ):
            with dpg.group(horizontal=True):
                dpg.add_button(
                    label="Open .cgr",
                    width=150,
                    height=35,
                    callback=lambda: dpg.show_item(self.DIALOG_TAG)
                )
                dpg.add_button(
                    label="Clear",
                    width=150,
                    height=35,
                    callback=lambda: clear_session()
                )
            
            dpg.add_separator()
            dpg.add_text("Session", color=Colors.ACCENT)
            dpg.add_text("Current: [None]", tag="session_current")
            dpg.add_text("Container: -", tag="session_container", color=Colors.TEXT_DIM)
            dpg.add_text("Layers: -", tag="session_layers", color=Colors.TEXT_DIM)
            
            dpg.add_separator()
            dpg.add_text("Recent Files", color=Colors.ACCENT)
            dpg.add_listbox(
                items=["(No recent files)"],
                tag=self.RECENT_TAG,
                num_items=6,
                width=-1,
                callback=self._on_recent_selected
            )
    
    def _subscribe_events(self):
        EventBus.subscribe(Events.FILE_LOADED, self._on_file_loaded)
        EventBus.subscribe(Events.FILE_CLEARED, self._on_file_cleared)
    
    def _on_file_selected(self, sender, app_data):
        load_session(app_data["file_path_name"])
    
    def _on_recent_selected(self, sender, value):
        for path in self.recent_files:
            if path.name == value:
                load_session(path)
                return
    
    def _on_file_loaded(self, data):
        path = data["file_path"]
        if path in self.recent_files:
            self.recent_files.remove(path)
        self.recent_files.insert(0, path)
        self.recent_files = self.recent_files[:self.MAX_RECENT]
        dpg.configure_item(self.RECENT_TAG, items=[p.name for p in self.recent_files])
        
        container = STATE.current_container
        dpg.set_value("session_current", f"Current: {path.name}")
        dpg.set_value("session_container", f"Container: {container.kind.value} ({container.kind.label})")
        dpg.set_value("session_layers", f"Layers: {container.layers}")
    
    def _on_file_cleared(self, data):
        dpg.set_value("session_current", "Current: [None]")
        dpg.set_value("session_container", "Container: -")
        dpg.set_value("session_layers", "Layers: -")

"""
Ginger Suite Main Application Frame

DearPyGUI window setup, menu bar, and panel initialization.
"""

import logging

import dearpygui.dearpygui as dpg

from . import __version__
from .gui.panels.file_loader import FileLoaderPanel
from .gui.panels.tag_list import TagListPanel
from .gui.panels.tag_inspector import TagInspectorPanel
from .gui.panels.log_panel import LogPanel
from .gui.panels.status_bar import StatusBar
from .gui.session import clear_session
from .gui.state import STATE, StateLogHandler
from .gui.theme import setup_theme, Colors


class MainApp:
    """Main application frame and window manager."""
    
    def __init__(self, width: int = 1400, height: int = 900):
        self.width = width
        self.height = height
        self.panels = {}
        self._log_handler = StateLogHandler(STATE)
        logging.getLogger("gingersuite").addHandler(self._log_handler)
        
        dpg.create_context()
        setup_theme()
        dpg.create_viewport(
            title="Ginger Suite - Channel Group Inspector",
            width=width,
            height=height
        )
        
        self._create_menu_bar()
        self._init_panels()
    
    def _create_menu_bar(self):
        """Create the application menu bar."""
        with dpg.viewport_menu_bar():
            with dpg.menu(label="File"):
                dpg.add_menu_item(label="Open...", callback=lambda: dpg.show_item(FileLoaderPanel.DIALOG_TAG))
                dpg.add_menu_item(label="Close", callback=lambda: clear_session())
                dpg.add_separator()
                dpg.add_menu_item(label="Exit", callback=lambda: dpg.stop_dearpygui())
            
            with dpg.menu(label="View"):
                for name, label in (("file_loader", "File Loader"), ("tag_list", "Tags"),
                                    ("tag_inspector", "Inspector"), ("log", "Log")):
                    dpg.add_menu_item(label=label, callback=lambda s, a, u: self._show_panel(u), user_data=name)
            
            with dpg.menu(label="Help"):
                dpg.add_menu_item(label="About", callback=self._show_about)
    
    def _show_panel(self, panel_name: str):
        """Show a panel by name."""
        panel = self.panels.get(panel_name)
        if panel and dpg.does_item_exist(panel.TAG):
            dpg.configure_item(panel.TAG, show=True)
            dpg.focus_item(panel.TAG)
    
    def _show_about(self):
        with dpg.window(label="About Ginger Suite", modal=True, width=350, height=160) as about:
            dpg.add_text("Ginger Suite", color=Colors.ACCENT)
            dpg.add_text("Channel group (.cgr) reader and inspector")
            dpg.add_separator()
            dpg.add_text(f"Version {__version__}")
            dpg.add_button(label="Close", callback=lambda: dpg.delete_item(about))
    
    def _init_panels(self):
        """Initialize all UI panels."""
        self.panels["file_loader"] = FileLoaderPanel(width=350, height=500, pos=(10, 30))
        self.panels["tag_list"] = TagListPanel(width=420, height=500, pos=(370, 30))
        self.panels["tag_inspector"] = TagInspectorPanel(width=570, height=500, pos=(800, 30))
        self.panels["log"] = LogPanel(width=self.width - 30, height=self.height - 620, pos=(10, 540))
        self.panels["status_bar"] = StatusBar(width=self.width, height=30, y_pos=self.height - 65)
    
    def show(self):
        """Show the main window."""
        dpg.setup_dearpygui()
        dpg.show_viewport()
    
    def run(self):
        """Run the main event loop."""
        while dpg.is_dearpygui_running():
            dpg.render_dearpygui_frame()
    
    def shutdown(self):
        """Shutdown the application."""
        logging.getLogger("gingersuite").removeHandler(self._log_handler)
        dpg.destroy_context()

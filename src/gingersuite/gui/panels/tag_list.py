"""
Tag List Panel - logical tag browser

Lists the logical tags of the loaded file. Clicking a tag triggers
TAG_SELECTED.
"""

import dearpygui.dearpygui as dpg

from ...formats.cgr import tag_summary
from ..events import EventBus, Events
from ..state import STATE
from ..theme import Colors


class TagListPanel:
    """Logical tag stream browser."""
    
    TAG = "tag_list"
    LIST_TAG = "tag_list_items"
    COUNT_TAG = "tag_list_count"
    
    def __init__(self, width: int = 420, height: int = 500, pos: tuple = (370, 30)):
        self.width = width
        self.height = height
        self.pos = pos
        self.items = []
        self._create_panel()
        self._subscribe_events()
    
    def _create_panel(self):
        with dpg.window(
            label="Tags",
            tag=self.TAG,
            width=self.width,
            height=self.height,
            pos=self.pos
        ):
            dpg.add_text("No file loaded", tag=self.COUNT_TAG, color=Colors.ACCENT)
            dpg.add_separator()
            dpg.add_listbox(
                items=[],
                tag=self.LIST_TAG,
                width=-1,
                num_items=24,
                callback=self._on_tag_selected
            )
    
    def _subscribe_events(self):
        EventBus.subscribe(Events.FILE_LOADED, self._on_file_loaded)
        EventBus.subscribe(Events.FILE_CLEARED, self._on_file_cleared)
    
    def _on_file_loaded(self, data):
        tags = STATE.current_container.tags
        # Index prefix keeps duplicate names distinguishable
        self.items = [f"[{i:>4}] {tag_summary(t)}" for i, t in enumerate(tags)]
        dpg.configure_item(self.LIST_TAG, items=self.items)
        dpg.set_value(self.COUNT_TAG, f"{len(tags)} logical tags")
    
    def _on_file_cleared(self, data):
        self.items = []
        dpg.configure_item(self.LIST_TAG, items=[])
        dpg.set_value(self.COUNT_TAG, "No file loaded")
    
    def _on_tag_selected(self, sender, value):
        if value not in self.items:
            return
        index = self.items.index(value)
        tag = STATE.current_container.tags[index]
        STATE.set_tag(index, tag)
        EventBus.publish(Events.TAG_SELECTED, tag)

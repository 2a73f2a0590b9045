"""
Tag Inspector Panel.
Displays the group header and details of the selected tag.
"""

import dearpygui.dearpygui as dpg

from ...utils.binary import hex_dump
from ..events import EventBus, Events
from ..state import STATE
from ..theme import Colors


class TagInspectorPanel:
    """Header summary and tag detail panel."""
    
    TAG = "tag_inspector"
    HEADER_TAG = "tag_inspector_header"
    DETAILS_TAG = "tag_inspector_details"
    
    def __init__(self, width: int = 560, height: int = 500, pos: tuple = (800, 30)):
        self.width = width
        self.height = height
        self.pos = pos
        self._create_panel()
        self._subscribe_events()
    
    def _create_panel(self):
        with dpg.window(
            label="Inspector",
            tag=self.TAG,
            width=self.width,
            height=self.height,
            pos=self.pos
        ):
            with dpg.group(tag=self.HEADER_TAG):
                dpg.add_text("Open a file to inspect", color=Colors.TEXT_DIM)
            dpg.add_separator()
            with dpg.child_window(tag=self.DETAILS_TAG, border=False):
                dpg.add_text("Select a tag", color=Colors.TEXT_DIM)
    
    def _subscribe_events(self):
        EventBus.subscribe(Events.FILE_LOADED, self._on_file_loaded)
        EventBus.subscribe(Events.FILE_CLEARED, self._on_file_cleared)
        EventBus.subscribe(Events.TAG_SELECTED, self._on_tag_selected)
    
    def _on_file_loaded(self, data):
        dpg.delete_item(self.HEADER_TAG, children_only=True)
        dpg.delete_item(self.DETAILS_TAG, children_only=True)
        group = STATE.current_group
        with dpg.group(parent=self.HEADER_TAG):
            if group is None:
                dpg.add_text(STATE.last_error or "No header", color=Colors.ERROR)
                return
            dpg.add_text("Channel Group", color=Colors.ACCENT)
            dpg.add_text(f"  Engine version: {group.engine_version}")
            dpg.add_text(f"  GUID: {group.guid}")
            dpg.add_text(f"  Channels: {group.channel_count}")
    
    def _on_file_cleared(self, data):
        dpg.delete_item(self.HEADER_TAG, children_only=True)
        dpg.delete_item(self.DETAILS_TAG, children_only=True)
        dpg.add_text("Open a file to inspect", parent=self.HEADER_TAG, color=Colors.TEXT_DIM)
    
    def _on_tag_selected(self, tag):
        dpg.delete_item(self.DETAILS_TAG, children_only=True)
        with dpg.group(parent=self.DETAILS_TAG):
            dpg.add_text(f"{tag.name}  #{STATE.current_tag_index}", color=Colors.ACCENT)
            if tag.is_marker:
                dpg.add_text("Marker tag (no length field)", color=Colors.MARKER)
                return
            dpg.add_text(f"Payload: {tag.size} bytes")
            dpg.add_separator()
            dpg.add_input_text(
                default_value=hex_dump(tag.data),
                multiline=True,
                readonly=True,
                width=-1,
                height=-1
            )

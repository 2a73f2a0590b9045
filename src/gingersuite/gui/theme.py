"""
Theme and color definitions for the Ginger Suite GUI.
Warm dark palette; container layers get their own colors.
"""

import dearpygui.dearpygui as dpg


# =============================================================================
# APPLICATION COLORS (RGBA 0-255)
# =============================================================================
class Colors:
    """Global application color palette."""
    BG = (26, 23, 21, 255)
    BG_CHILD = (34, 30, 27, 255)
    FRAME_BG = (48, 41, 36, 255)
    BUTTON = (122, 72, 38, 255)
    BUTTON_HOVER = (158, 94, 48, 255)
    TEXT = (232, 222, 210, 255)
    TEXT_DIM = (150, 138, 126, 255)
    ACCENT = (232, 142, 64, 255)       # ginger
    MARKER = (214, 190, 96, 255)       # length-less tags
    ERROR = (222, 96, 86, 255)


# Per-layer colors, keyed by Container.layers
LAYER_COLORS = {
    "none": (128, 190, 120, 255),
    "zlib": (110, 160, 214, 255),
    "zlib + xor": (176, 128, 212, 255),
}


def layer_color(layers: str):
    return LAYER_COLORS.get(layers, Colors.TEXT_DIM)


def setup_theme():
    """Apply the global application theme."""
    with dpg.theme() as global_theme:
        with dpg.theme_component(dpg.mvAll):
            dpg.add_theme_color(dpg.mvThemeCol_WindowBg, Colors.BG)
            dpg.add_theme_color(dpg.mvThemeCol_PopupBg, Colors.BG)
            dpg.add_theme_color(dpg.mvThemeCol_ChildBg, Colors.BG_CHILD)
            dpg.add_theme_color(dpg.mvThemeCol_TitleBg, Colors.BG_CHILD)
            dpg.add_theme_color(dpg.mvThemeCol_TitleBgActive, Colors.BUTTON)

            dpg.add_theme_color(dpg.mvThemeCol_FrameBg, Colors.FRAME_BG)
            dpg.add_theme_color(dpg.mvThemeCol_Button, Colors.BUTTON)
            dpg.add_theme_color(dpg.mvThemeCol_ButtonHovered, Colors.BUTTON_HOVER)
            dpg.add_theme_color(dpg.mvThemeCol_ButtonActive, Colors.ACCENT)
            dpg.add_theme_color(dpg.mvThemeCol_Header, Colors.BUTTON)
            dpg.add_theme_color(dpg.mvThemeCol_HeaderHovered, Colors.BUTTON_HOVER)

            dpg.add_theme_color(dpg.mvThemeCol_Text, Colors.TEXT)
            dpg.add_theme_color(dpg.mvThemeCol_TextDisabled, Colors.TEXT_DIM)

            dpg.add_theme_style(dpg.mvStyleVar_FrameRounding, 2)
            dpg.add_theme_style(dpg.mvStyleVar_WindowRounding, 0)
            dpg.add_theme_style(dpg.mvStyleVar_FramePadding, 6, 3)

    dpg.bind_theme(global_theme)
    return global_theme

"""
Loading files into the GUI session.

Kept free of DearPyGui so it can run headless.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from ..formats.cgr import ChannelGroup, ParseError, open_container
from .events import EventBus, Events
from .state import STATE, AppState

logger = logging.getLogger(__name__)


def load_session(path: Union[str, Path], state: AppState = STATE) -> bool:
    """
    Decode a channel group file into the session state.

    The flat tags stay browsable even when the header cannot be read; the
    header error is kept in state.last_error.
    """
    file_path = Path(path)
    try:
        data = file_path.read_bytes()
    except OSError as e:
        return _fail(state, f"Cannot read {file_path.name}: {e.strerror or e}")

    try:
        container = open_container(data)
    except ParseError as e:
        return _fail(state, f"{file_path.name}: {e}")

    group: Optional[ChannelGroup] = None
    header_error = None
    try:
        group = ChannelGroup.from_container(container)
    except ParseError as e:
        header_error = f"Header unreadable: {e}"
        logger.warning("%s: %s", file_path.name, header_error)

    state.set_file(file_path, container, group)
    state.last_error = header_error
    state.log(f"Loaded {file_path.name}: {len(container.tags)} tags ({container.kind.value})")
    EventBus.publish(Events.FILE_LOADED, {"file_path": file_path})
    EventBus.publish(Events.STATUS_UPDATE, f"Loaded {file_path.name}")
    return True


def clear_session(state: AppState = STATE):
    """Forget the current file."""
    state.clear()
    EventBus.publish(Events.FILE_CLEARED)
    EventBus.publish(Events.STATUS_UPDATE, "Ready")


def _fail(state: AppState, message: str) -> bool:
    logger.error(message)
    state.last_error = message
    state.log(message, "ERROR")
    EventBus.publish(Events.FILE_FAILED, message)
    EventBus.publish(Events.STATUS_UPDATE, message)
    return False

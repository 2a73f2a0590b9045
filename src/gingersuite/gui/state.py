"""
Global application state.
Single source of truth for the UI.
"""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Any

MAX_LOG_ENTRIES = 1000


@dataclass
class AppState:
    """Global application state container."""
    
    # Loaded data
    current_file: Optional[Path] = None
    current_container: Optional[Any] = None   # formats.cgr.Container
    current_group: Optional[Any] = None       # formats.cgr.ChannelGroup
    current_tag: Optional[Any] = None
    current_tag_index: Optional[int] = None
    last_error: Optional[str] = None
    
    # Logs (append-only)
    logs: list = field(default_factory=list)
    
    # Paths
    browse_path: str = str(Path.home())
    
    def set_file(self, file_path: Path, container: Any, group: Any):
        """Set current file and its decoded forms."""
        self.current_file = file_path
        self.current_container = container
        self.current_group = group
        self.last_error = None
        # Clear downstream state
        self.current_tag = None
        self.current_tag_index = None
    
    def set_tag(self, index: int, tag: Any):
        """Set current tag selection."""
        self.current_tag_index = index
        self.current_tag = tag
    
    def log(self, message: str, level: str = "INFO"):
        """Add log entry (the Log panel reads this)."""
        self.logs.append({
            "time": time.strftime("%H:%M:%S"),
            "level": level,
            "message": message,
        })
        if len(self.logs) > MAX_LOG_ENTRIES:
            self.logs = self.logs[-MAX_LOG_ENTRIES:]
    
    def clear(self):
        """Clear all state."""
        self.current_file = None
        self.current_container = None
        self.current_group = None
        self.current_tag = None
        self.current_tag_index = None
        self.last_error = None


class StateLogHandler(logging.Handler):
    """Mirrors log records into an AppState log."""
    
    def __init__(self, state: AppState, level: int = logging.INFO):
        super().__init__(level)
        self.state = state
    
    def emit(self, record: logging.LogRecord):
        self.state.log(self.format(record), record.levelname)


# Singleton instance
STATE = AppState()

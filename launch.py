#!/usr/bin/env python3
"""
Ginger Suite - Channel Group Inspector

Standalone application for inspecting channel group (.cgr) files.

Usage:
    python launch.py [file.cgr]
"""

import sys
import logging
from pathlib import Path

# Setup paths (running from a checkout without installing)
root_dir = Path(__file__).parent
src_dir = root_dir / "src"
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))

APP_NAME = "Ginger Suite"


def show_splash(version: str):
    """Show splash screen info."""
    print(f"""
╔══════════════════════════════════════════════════╗
║   {APP_NAME:<47}║
║   Channel Group Inspector  v{version:<21}║
╚══════════════════════════════════════════════════╝
""")


def check_dependencies() -> bool:
    """Check that required dependencies are available."""
    try:
        import dearpygui  # noqa: F401
    except ImportError:
        print("\n⚠️  Missing dependency: dearpygui")
        print("\n   Install with: pip install -e .\n")
        return False
    return True


def main(argv=None) -> int:
    """Launch the application."""
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    from gingersuite import __version__
    show_splash(__version__)

    if not check_dependencies():
        return 1

    try:
        from gingersuite.main_app import MainApp
        from gingersuite.gui.session import load_session

        app = MainApp(width=1400, height=900)
        app.show()
        if argv:
            load_session(argv[0])
        app.run()
        app.shutdown()
        return 0
    except Exception:
        logging.getLogger("gingersuite").exception("Application error")
        return 1


if __name__ == "__main__":
    sys.exit(main())

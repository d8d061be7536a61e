"""formsemantics Command Line Interface.

Usage:
    python -m formsemantics form.json out/

Or via the installed entry point:
    formsemantics form.json out/
"""

from .main import main, run

__all__ = ["main", "run"]

"""
Message formatting for the log helper.

Pure functions only: nothing here touches files or shared state.
"""

from loghelper.formatting.export import export_pretty, export_value
from loghelper.formatting.modes import RenderMode
from loghelper.formatting.plain import dump_plain
from loghelper.formatting.render import render

__all__ = [
    "RenderMode",
    "render",
    "dump_plain",
    "export_value",
    "export_pretty",
]

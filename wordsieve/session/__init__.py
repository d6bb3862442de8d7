from .assistant import Assistant, RoundReport
from .console import run_console
from .render import format_possibilities, format_suggestion, MAX_SHOWN

__all__ = [
    "Assistant", "RoundReport", "run_console",
    "format_possibilities", "format_suggestion", "MAX_SHOWN",
]

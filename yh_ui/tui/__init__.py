"""
UI package providing Rich/prompt_toolkit-based and headless renderers.
"""

from yh_ui.tui.core.protocols import UI, Form, Picker, Presenter, Progress, TablePresenter
from yh_ui.tui.system.facade import TUI
from yh_ui.tui.system.headless import HeadlessUI

__all__ = [
    "UI",
    "TUI",
    "HeadlessUI",
    "Picker",
    "TablePresenter",
    "Presenter",
    "Form",
    "Progress",
]

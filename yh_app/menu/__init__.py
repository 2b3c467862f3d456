"""Menu node model and builders."""

from yh_app.menu.models import (
    Continuation,
    Deferred,
    DependencyKind,
    MenuNode,
    Option,
    OptionList,
    SubMenu,
    Terminal,
)

__all__ = [
    "Continuation",
    "Deferred",
    "DependencyKind",
    "MenuNode",
    "Option",
    "OptionList",
    "SubMenu",
    "Terminal",
]

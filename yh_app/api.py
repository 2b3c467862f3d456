"""Stable application-layer API surface."""

from yh_app.menu.builder import MenuBuilder, parse_dependency_input
from yh_app.menu.models import (
    Deferred,
    DependencyKind,
    MenuNode,
    Option,
    OptionList,
    SubMenu,
    Terminal,
)
from yh_app.services.command_service import CommandService, ResolvedCommand
from yh_app.services.executor import (
    BackgroundExecutor,
    DryRunExecutor,
    ExecutionResult,
    Executor,
    TerminalExecutor,
    select_executor,
)
from yh_app.services.help_scraper import scrape_flags
from yh_app.services.interfaces import Choice, Chooser, Prompter
from yh_app.services.manifest import ManifestCache, ManifestReader
from yh_app.services.normalizer import YARN_VERBS, collapse_script_shortcut, normalize
from yh_app.services.package_manager import PackageManagerClient
from yh_app.services.project import find_project_root, session_name
from yh_app.services.resolver import ChoiceResolver, Selection, breadcrumb_prompt, joined
from yh_app.services.settings import HelperSettings, SettingsRepository
from yh_app.services.version_context import (
    VersionContextResolver,
    is_version_installed,
    read_pinned_version,
)
from yh_app.services.version_manager import NvmClient

__all__ = [
    "BackgroundExecutor",
    "Choice",
    "ChoiceResolver",
    "Chooser",
    "CommandService",
    "Deferred",
    "DependencyKind",
    "DryRunExecutor",
    "ExecutionResult",
    "Executor",
    "HelperSettings",
    "ManifestCache",
    "ManifestReader",
    "MenuBuilder",
    "MenuNode",
    "NvmClient",
    "Option",
    "OptionList",
    "PackageManagerClient",
    "Prompter",
    "ResolvedCommand",
    "Selection",
    "SettingsRepository",
    "SubMenu",
    "Terminal",
    "TerminalExecutor",
    "VersionContextResolver",
    "YARN_VERBS",
    "breadcrumb_prompt",
    "collapse_script_shortcut",
    "find_project_root",
    "is_version_installed",
    "joined",
    "normalize",
    "parse_dependency_input",
    "read_pinned_version",
    "scrape_flags",
    "select_executor",
    "session_name",
]

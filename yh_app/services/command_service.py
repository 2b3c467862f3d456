"""End-to-end flow: project -> menu -> selection -> command -> executor."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from yh_app.menu.builder import MenuBuilder
from yh_app.services.executor import ExecutionResult, Executor, select_executor
from yh_app.services.interfaces import Chooser, Prompter
from yh_app.services.manifest import ManifestReader
from yh_app.services.normalizer import YARN_VERBS, collapse_script_shortcut, normalize
from yh_app.services.package_manager import PackageManagerClient
from yh_app.services.project import find_project_root
from yh_app.services.resolver import ChoiceResolver, breadcrumb_prompt
from yh_app.services.settings import HelperSettings
from yh_app.services.version_context import VersionContextResolver
from yh_app.services.version_manager import NvmClient
from yh_common.logging import log_context

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedCommand:
    project_root: Path
    tokens: tuple[str, ...]
    command: str
    activation: str | None = None


@dataclass
class CommandService:
    """Resolve one command interactively and hand it to an executor."""

    chooser: Chooser
    prompter: Prompter
    settings: HelperSettings = field(default_factory=HelperSettings)
    reader: ManifestReader = field(default_factory=ManifestReader)
    client: PackageManagerClient | None = None
    version_manager: NvmClient | None = None
    executor: Executor | None = None

    def __post_init__(self) -> None:
        if self.client is None:
            self.client = PackageManagerClient(self.settings.binary)
        if self.version_manager is None:
            self.version_manager = NvmClient(self.settings.nvm_dir)
        if self.executor is None:
            self.executor = select_executor(
                self.settings.executor, state_dir=self.settings.state_dir
            )

    def build(self, start_dir: Path) -> ResolvedCommand:
        project_root = find_project_root(start_dir)
        with log_context(project=str(project_root)):
            return self._build(project_root)

    def _build(self, project_root: Path) -> ResolvedCommand:
        manifest = self.reader.manifest_path(project_root)
        scripts = self.reader.scripts(manifest)
        dependencies = self.reader.dependencies(manifest)
        self.client.cwd = project_root

        menu = MenuBuilder(self.client, self.chooser, self.prompter).build(scripts, dependencies)
        resolver = ChoiceResolver(self.chooser, breadcrumb_prompt(self.settings.binary))
        tokens = collapse_script_shortcut(resolver.resolve(menu), scripts, YARN_VERBS)

        versions = VersionContextResolver(
            self.version_manager,
            confirm=lambda message: self.prompter.confirm(message, default=False),
            marker_name=self.settings.version_marker,
        )
        activation = versions.activation_prefix(project_root, self.settings.use_version_manager)
        command = normalize(
            tokens,
            YARN_VERBS,
            activation,
            binary=self.settings.binary,
            bootstrap_unknown_verbs=self.settings.bootstrap_unknown_verbs,
        )
        logger.info("Resolved command: %s", command)
        return ResolvedCommand(
            project_root=project_root,
            tokens=tuple(tokens),
            command=command,
            activation=activation,
        )

    def run(self, start_dir: Path) -> tuple[ResolvedCommand, ExecutionResult]:
        resolved = self.build(start_dir)
        result = self.executor.execute(resolved.project_root, resolved.command)
        return resolved, result

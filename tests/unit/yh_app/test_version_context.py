"""Tests for the nvm activation prefix."""

from __future__ import annotations

from pathlib import Path

import pytest

from yh_app.api import VersionContextResolver, is_version_installed, read_pinned_version
from yh_common.errors import VersionManagerError


pytestmark = pytest.mark.unit_app


class FakeManager:
    def __init__(
        self,
        *,
        installed=True,
        script="/opt/nvm/nvm.sh",
        versions=(),
        install_code=0,
        resolved=None,
    ):
        self._installed = installed
        self._script = Path(script) if script else None
        self.versions = list(versions)
        self.install_code = install_code
        # Answers of `nvm version <pin>`; None stands for an nvm without an answer.
        self.resolved = resolved
        self.installs: list[str] = []

    def is_installed(self):
        return self._installed

    def activation_script(self):
        return self._script

    def installed_versions(self):
        return self.versions

    def resolve_installed(self, version):
        if self.resolved is None:
            raise VersionManagerError("nvm version unavailable")
        return self.resolved.get(version)

    def install(self, version, *, cwd=None):
        self.installs.append(version)
        return self.install_code


class Confirm:
    def __init__(self, answer: bool):
        self.answer = answer
        self.asked: list[str] = []

    def __call__(self, message: str) -> bool:
        self.asked.append(message)
        return self.answer


@pytest.fixture
def project(tmp_path: Path) -> Path:
    (tmp_path / ".nvmrc").write_text("\n18\n")
    return tmp_path


def test_disabled_returns_none_even_with_marker_and_manager(project):
    resolver = VersionContextResolver(FakeManager(versions=["v18.1.0"]), Confirm(True))
    assert resolver.activation_prefix(project, use_version_manager=False) is None


def test_no_marker_returns_none(tmp_path):
    resolver = VersionContextResolver(FakeManager(), Confirm(True))
    assert resolver.activation_prefix(tmp_path, use_version_manager=True) is None


def test_manager_missing_returns_none(project):
    resolver = VersionContextResolver(FakeManager(installed=False), Confirm(True))
    assert resolver.activation_prefix(project, use_version_manager=True) is None


def test_installed_version_builds_prefix_without_asking(project):
    confirm = Confirm(True)
    manager = FakeManager(versions=["v16.20.0", "v18.17.1"])
    prefix = VersionContextResolver(manager, confirm).activation_prefix(project, True)

    assert prefix == "source /opt/nvm/nvm.sh && nvm use && "
    assert confirm.asked == []
    assert manager.installs == []


def test_missing_version_installs_on_confirmation(project):
    manager = FakeManager(versions=["v16.20.0"])
    confirm = Confirm(True)

    prefix = VersionContextResolver(manager, confirm).activation_prefix(project, True)

    assert manager.installs == ["18"]
    assert "18" in confirm.asked[0]
    assert prefix.endswith("nvm use && ")


def test_declined_install_still_returns_prefix(project):
    manager = FakeManager(versions=[])
    prefix = VersionContextResolver(manager, Confirm(False)).activation_prefix(project, True)

    assert manager.installs == []
    assert prefix is not None


def test_failed_install_is_not_an_error(project):
    manager = FakeManager(versions=[], install_code=3)
    prefix = VersionContextResolver(manager, Confirm(True)).activation_prefix(project, True)

    assert manager.installs == ["18"]
    assert prefix == "source /opt/nvm/nvm.sh && nvm use && "


def test_short_form_without_activation_script(project):
    manager = FakeManager(script=None, versions=["v18.0.0"])
    assert VersionContextResolver(manager, Confirm(True)).activation_prefix(project, True) == "nvm use && "


def test_custom_marker_name(tmp_path):
    (tmp_path / ".node-version").write_text("v20.1.0")
    assert read_pinned_version(tmp_path, ".node-version") == "v20.1.0"
    assert read_pinned_version(tmp_path) is None


@pytest.mark.parametrize(
    "pinned,installed,expected",
    [
        ("18", ["v18.17.1"], True),
        ("v18.17.1", ["v18.17.1"], True),
        ("18.17", ["v18.17.1"], True),
        ("1", ["v18.17.1"], False),
        ("20", ["v18.17.1"], False),
        ("lts/hydrogen", ["v18.17.1"], False),
        ("", ["v18.17.1"], False),
    ],
)
def test_is_version_installed(pinned, installed, expected):
    assert is_version_installed(pinned, installed) is expected


@pytest.mark.parametrize("pinned", ["lts/*", "lts/hydrogen", "node", "stable"])
def test_alias_pin_resolved_by_nvm_is_not_reinstalled(tmp_path, pinned):
    (tmp_path / ".nvmrc").write_text(f"{pinned}\n")
    manager = FakeManager(versions=["v18.17.1"], resolved={pinned: "v18.17.1"})
    confirm = Confirm(True)

    prefix = VersionContextResolver(manager, confirm).activation_prefix(tmp_path, True)

    assert confirm.asked == []
    assert manager.installs == []
    assert prefix == "source /opt/nvm/nvm.sh && nvm use && "


def test_unavailable_pin_is_offered_despite_alias_listing(tmp_path):
    (tmp_path / ".nvmrc").write_text("16\n")
    # `nvm ls` also names v16.20.2 through an lts alias that is not installed.
    manager = FakeManager(versions=["v18.17.1", "v16.20.2"], resolved={"16": None})
    confirm = Confirm(True)

    VersionContextResolver(manager, confirm).activation_prefix(tmp_path, True)

    assert confirm.asked == ["Node 16 is not installed. Install it with nvm?"]
    assert manager.installs == ["16"]


def test_prefix_match_used_when_nvm_cannot_resolve(project):
    manager = FakeManager(versions=["v18.17.1"], resolved=None)
    confirm = Confirm(True)

    VersionContextResolver(manager, confirm).activation_prefix(project, True)

    assert confirm.asked == []

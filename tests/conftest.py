"""Shared test fixtures for cs-commons."""

import subprocess
from pathlib import Path

import pytest


class FakeTools:
    """Stands in for subprocess.run inside cs_commons.process.

    Records every call. ``curl`` writes a small placeholder to its
    --output path. Commands whose first words match an entry in
    ``failures`` exit with the configured code and output.
    """

    def __init__(self):
        self.calls: list[list[str]] = []
        self.cwds: list = []
        self.failures: dict[tuple[str, ...], tuple[int, str]] = {}

    def fail(self, *prefix: str, returncode: int = 1, output: str = "boom"):
        self.failures[prefix] = (returncode, output)

    def commands(self, tool: str) -> list[list[str]]:
        return [c for c in self.calls if c[0] == tool]

    def __call__(self, args, cwd=None, capture_output=False, text=False, **kwargs):
        args = list(args)
        self.calls.append(args)
        self.cwds.append(cwd)
        for prefix, (code, output) in self.failures.items():
            if tuple(args[: len(prefix)]) == prefix:
                return subprocess.CompletedProcess(args, code, stdout=output, stderr="")
        if args[0] == "curl":
            dest = Path(args[args.index("--output") + 1])
            dest.write_text(f"template from {args[-1]}\n")
        return subprocess.CompletedProcess(args, 0, stdout="", stderr="")


@pytest.fixture
def fake_tools(monkeypatch):
    tools = FakeTools()
    monkeypatch.setattr("cs_commons.process.subprocess.run", tools)
    return tools


@pytest.fixture
def home(tmp_path, monkeypatch):
    """Point HOME at an empty directory so ~/.cs-commons is isolated."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    return home_dir


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


@pytest.fixture
def no_network(monkeypatch):
    """Fail loudly if a test reaches for the GitHub API unexpectedly."""
    def _refuse(*a, **kw):
        raise AssertionError("unexpected HTTP request")

    monkeypatch.setattr("cs_commons.hosting.requests.get", _refuse)

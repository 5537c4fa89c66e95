"""
Tests for path resolution against the working directory.
"""

import os
from pathlib import Path

import pytest

from bwd.core.errors import HostEnvironmentError, InvalidPathError
from bwd.core.resolver import (
    ResolutionRequest,
    collapse_leading_slashes,
    current_directory,
    resolve_target,
)

posix_only = pytest.mark.skipif(os.name == "nt", reason="POSIX path syntax")


class TestLexicalResolution:
    """Resolution without touching the filesystem."""

    @pytest.mark.parametrize("target", [None, ""])
    def test_empty_target_is_identity(self, target):
        cwd = Path("/home/alice/projects/demo")
        request = ResolutionRequest(target=target, current_directory=cwd)
        assert resolve_target(request) == cwd

    @posix_only
    @pytest.mark.parametrize("cwd", ["/", "/a/b", "/home/alice"])
    def test_absolute_target_overrides_cwd(self, cwd):
        request = ResolutionRequest(target="/etc/ssl", current_directory=Path(cwd))
        assert resolve_target(request) == Path("/etc/ssl")

    @posix_only
    @pytest.mark.parametrize(
        "cwd,target,expected",
        [
            ("/base", "a/b", "/base/a/b"),
            ("/base", "a/./b/", "/base/a/b"),
            ("/base", "./a//b", "/base/a/b"),
            ("/base/sub", "..", "/base"),
            ("/base/sub", "../other/./x", "/base/other/x"),
            ("/", "..", "/"),
            ("/base", "/abs//path/", "/abs/path"),
            ("/base", "//tmp", "/tmp"),
            ("/base", "///tmp//x", "/tmp/x"),
        ],
    )
    def test_relative_target_is_normalized_join(self, cwd, target, expected):
        request = ResolutionRequest(target=target, current_directory=Path(cwd))
        resolved = resolve_target(request)
        assert resolved == Path(expected)
        assert str(resolved) == expected

    @posix_only
    def test_missing_target_is_not_an_error(self):
        request = ResolutionRequest(target="does/not/exist", current_directory=Path("/nowhere"))
        assert resolve_target(request) == Path("/nowhere/does/not/exist")

    @posix_only
    def test_dash_prefixed_target_is_literal(self):
        request = ResolutionRequest(target="-c", current_directory=Path("/base"))
        assert resolve_target(request) == Path("/base/-c")


class TestExistingResolution:
    """Resolution with ``existing=True``."""

    def test_existing_target_is_canonicalized(self, tmp_path):
        real = tmp_path / "real"
        real.mkdir()
        link = tmp_path / "link"
        try:
            link.symlink_to(real, target_is_directory=True)
        except (OSError, NotImplementedError):
            pytest.skip("symlinks not supported here")

        request = ResolutionRequest(target="link", current_directory=tmp_path)
        assert resolve_target(request, existing=True) == real.resolve()

    def test_missing_target_raises_invalid_path(self, tmp_path):
        request = ResolutionRequest(target="nope", current_directory=tmp_path)
        with pytest.raises(InvalidPathError) as exc_info:
            resolve_target(request, existing=True)
        assert exc_info.value.target == "nope"
        assert "Invalid path: 'nope'" in str(exc_info.value)

    def test_empty_target_skips_existence_check(self, tmp_path):
        request = ResolutionRequest(target=None, current_directory=tmp_path)
        assert resolve_target(request, existing=True) == tmp_path


class TestCurrentDirectory:
    def test_returns_process_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert current_directory() == Path(os.getcwd())

    def test_unavailable_cwd_raises_host_environment_error(self, monkeypatch):
        def deleted_cwd():
            raise FileNotFoundError(2, "No such file or directory")

        monkeypatch.setattr("bwd.core.resolver.os.getcwd", deleted_cwd)
        with pytest.raises(HostEnvironmentError, match="current working directory"):
            current_directory()


@posix_only
@pytest.mark.parametrize(
    "path,expected",
    [("//tmp", "/tmp"), ("//", "/"), ("/tmp", "/tmp"), ("tmp//x", "tmp//x")],
)
def test_collapse_leading_slashes(path, expected):
    assert collapse_leading_slashes(path) == expected

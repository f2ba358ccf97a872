from pathlib import Path

import pytest

from hbackup.path import check_path, expand_home, expand_path


@pytest.fixture
def home(tmp_path, monkeypatch):
    home_dir = tmp_path / "home"
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: home_dir))
    return home_dir


def test_expand_home_tilde(home):
    assert expand_home("~/docs") == str(home) + "/docs"


def test_expand_home_bare_tilde(home):
    assert expand_home("~") == str(home)


def test_expand_home_env_form(home):
    assert expand_home("$HOME/data") == str(home) + "/data"


def test_expand_home_leaves_other_text(home):
    assert expand_home("a~b") == "a~b"
    assert expand_home("/x/$HOME") == "/x/$HOME"


def test_expand_path_tilde(home):
    assert expand_path("~/docs/./a/../b") == home / "docs" / "b"


def test_expand_path_relative(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cwd = Path.cwd()
    assert expand_path("a/./b/../c") == cwd / "a" / "c"
    assert expand_path(".") == cwd


def test_expand_path_absolute(tmp_path):
    raw = str(tmp_path / "x" / ".." / "y" / "." / "z")
    assert expand_path(raw) == tmp_path / "y" / "z"


def test_expand_path_is_absolute_and_idempotent(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = expand_path("one/../two/three")
    assert result.is_absolute()
    assert expand_path(str(result)) == result


def test_expand_path_parent_beyond_root():
    root = Path(Path.cwd().anchor)
    assert expand_path(str(root / ".." / ".." / "etc")) == root / "etc"


def test_check_path_existing(tmp_path):
    target = tmp_path / "f.txt"
    target.write_text("data")
    assert check_path(target) == target
    assert check_path(str(tmp_path)) == tmp_path


def test_check_path_missing(tmp_path):
    missing = tmp_path / "missing.txt"
    with pytest.raises(ValueError, match="is invalid"):
        check_path(missing)
from pathlib import Path
from unittest.mock import patch

from dockercompose import executable
from dockercompose.executable import resolve_executable, set_executable


def test_override_wins(monkeypatch):
    monkeypatch.setenv("DOCKER_COMPOSE_EXECUTABLE", "/from/env")
    set_executable(Path("/pinned/docker-compose"))
    assert resolve_executable() == "/pinned/docker-compose"


def test_env_var_used_without_override(monkeypatch):
    monkeypatch.setenv("DOCKER_COMPOSE_EXECUTABLE", "/from/env")
    assert resolve_executable() == "/from/env"


def test_windows_uses_exe_name():
    with patch("dockercompose.executable.os.name", "nt"), \
            patch("dockercompose.executable.shutil.which", return_value=None):
        assert resolve_executable() == "docker-compose.exe"


def test_bundled_binary_preferred(tmp_path):
    bundled = tmp_path / "docker-compose"
    bundled.write_text("")
    with patch("dockercompose.executable.os.name", "posix"), \
            patch.object(executable, "BUNDLED_EXECUTABLE", bundled):
        assert resolve_executable() == str(bundled)


def test_path_lookup_when_not_bundled(tmp_path):
    with patch("dockercompose.executable.os.name", "posix"), \
            patch.object(executable, "BUNDLED_EXECUTABLE", tmp_path / "missing"), \
            patch("dockercompose.executable.shutil.which", return_value="/usr/bin/docker-compose"):
        assert resolve_executable() == "/usr/bin/docker-compose"


def test_falls_back_to_bundled_path_when_nothing_found(tmp_path):
    missing = tmp_path / "missing"
    with patch("dockercompose.executable.os.name", "posix"), \
            patch.object(executable, "BUNDLED_EXECUTABLE", missing), \
            patch("dockercompose.executable.shutil.which", return_value=None):
        assert resolve_executable() == str(missing)

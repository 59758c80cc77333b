import os
import stat

import pytest

from dockercompose.executable import set_executable

FAKE_COMPOSE = """\
#!/bin/sh
echo "cwd=$(pwd)"
for arg in "$@"; do
  echo "arg=$arg"
done
echo "warning on stderr" >&2
exit ${FAKE_COMPOSE_EXIT:-0}
"""


@pytest.fixture(autouse=True)
def _reset_executable(monkeypatch):
    monkeypatch.delenv("DOCKER_COMPOSE_EXECUTABLE", raising=False)
    yield
    set_executable(None)


@pytest.fixture
def fake_compose(tmp_path):
    """A docker-compose stand-in that prints its cwd and arguments."""
    if os.name == "nt":
        pytest.skip("fake executable is a POSIX shell script")
    path = tmp_path / "bin" / "docker-compose"
    path.parent.mkdir()
    path.write_text(FAKE_COMPOSE)
    path.chmod(path.stat().st_mode | stat.S_IXUSR)
    set_executable(path)
    return path

from dockercompose.config import load_compose_config


def test_defaults_without_file(tmp_path, monkeypatch):
    for var in ("DOCKER_COMPOSE_PROJECT_NAME", "DOCKER_COMPOSE_FILE", "DOCKER_COMPOSE_ALWAYS_YES"):
        monkeypatch.delenv(var, raising=False)
    config = load_compose_config(tmp_path)
    assert config == {
        "executable": None,
        "project_name": None,
        "compose_path": None,
        "always_yes": False,
    }


def test_reads_compose_toml(tmp_path, monkeypatch):
    monkeypatch.delenv("DOCKER_COMPOSE_PROJECT_NAME", raising=False)
    monkeypatch.delenv("DOCKER_COMPOSE_FILE", raising=False)
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "compose.toml").write_text(
        '[compose]\nproject_name = "demo"\ncompose_path = "deploy/docker-compose.yml"\nalways_yes = true\n'
    )
    config = load_compose_config(tmp_path)
    assert config["project_name"] == "demo"
    assert config["compose_path"] == str(tmp_path / "deploy" / "docker-compose.yml")
    assert config["always_yes"] is True


def test_env_overrides_file(tmp_path, monkeypatch):
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "compose.toml").write_text('[compose]\nproject_name = "demo"\n')
    monkeypatch.setenv("DOCKER_COMPOSE_PROJECT_NAME", "override")
    monkeypatch.setenv("DOCKER_COMPOSE_EXECUTABLE", "/opt/docker-compose")
    config = load_compose_config(tmp_path)
    assert config["project_name"] == "override"
    assert config["executable"] == "/opt/docker-compose"


def test_invalid_toml_falls_back_to_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv("DOCKER_COMPOSE_PROJECT_NAME", raising=False)
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "compose.toml").write_text("[compose\nproject_name = ")
    config = load_compose_config(tmp_path)
    assert config["project_name"] is None

from pathlib import Path

from runfile.cache import resolve_cache_dirs
from runfile.config import DEFAULT_CARGO, DEFAULT_PYTHON, RunConfig


def test_home_locates_cache_base(tmp_path):
    config = RunConfig.from_env({"HOME": str(tmp_path)})
    assert config.cache_base == tmp_path
    assert config.python == DEFAULT_PYTHON == "python"
    assert config.cargo == DEFAULT_CARGO


def test_missing_home_falls_back_to_cwd(tmp_path):
    config = RunConfig.from_env({}, cwd=tmp_path)
    assert config.cache_base == tmp_path


def test_config_file_and_env_precedence(tmp_path):
    (tmp_path / ".runfile.toml").write_text('[runfile]\npython = "pypy3"\ncargo = "cargo-nightly"\n')
    config = RunConfig.from_env({"HOME": str(tmp_path), "RUNFILE_CARGO": "/opt/cargo"})
    assert config.python == "pypy3"
    assert config.cargo == "/opt/cargo"


def test_malformed_config_file_is_ignored(tmp_path, caplog):
    (tmp_path / ".runfile.toml").write_text("[runfile\n")
    config = RunConfig.from_env({"HOME": str(tmp_path)})
    assert config.cargo == DEFAULT_CARGO
    assert "Ignoring unreadable config" in caplog.text


def test_resolve_cache_dirs_creates_layout(tmp_path):
    dirs = resolve_cache_dirs(RunConfig(cache_base=tmp_path))
    assert dirs.registry == tmp_path / ".run_cache" / "registry"
    assert dirs.target == tmp_path / ".run_cache" / "target"
    assert dirs.registry.is_dir() and dirs.target.is_dir()


def test_resolve_cache_dirs_is_idempotent(tmp_path):
    config = RunConfig(cache_base=tmp_path)
    marker = resolve_cache_dirs(config).target / "keep"
    marker.write_text("artifact")
    resolve_cache_dirs(config)
    assert marker.read_text() == "artifact"


def test_cargo_env(tmp_path):
    env = resolve_cache_dirs(RunConfig(cache_base=tmp_path)).cargo_env()
    assert Path(env["CARGO_HOME"]).name == "registry"
    assert Path(env["CARGO_TARGET_DIR"]).name == "target"

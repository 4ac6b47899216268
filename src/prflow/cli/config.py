import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

CONFIG_FILENAME = "prflow.toml"
CONFIG_DIR_ENV_VAR = "PRFLOW_CONFIG_DIR"


@dataclass(frozen=True)
class LoadedConfig:
    """In-memory representation of `prflow.toml`.

    Example prflow.toml:
      [defaults]
      # Remote that holds pull request refs
      username = "upstream"
      # Default merge target
      target = "main"
      # Where `prflow sync` pushes
      push_remote = "origin"

      [remotes]
      # Added by `prflow setup` when missing
      upstream = "git@github.com:org/repo.git"
    """

    username: str = "origin"
    target: str = "main"
    push_remote: str = "origin"
    remotes: dict[str, str] = field(default_factory=dict)


def resolve_config_dir(cwd: Path) -> Path:
    """Directory holding prflow.toml: $PRFLOW_CONFIG_DIR if set, else cwd."""
    override = os.environ.get(CONFIG_DIR_ENV_VAR)
    if override:
        return Path(override)
    return cwd


def load_config(config_dir: Path) -> LoadedConfig:
    """Load prflow.toml from the given directory if present; otherwise return defaults.

    Raises:
        tomllib.TOMLDecodeError: If the file exists but is not valid TOML
    """
    cfg_path = config_dir / CONFIG_FILENAME
    if not cfg_path.exists():
        return LoadedConfig()

    data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    defaults = data.get("defaults", {})
    remotes = {str(k): str(v) for k, v in data.get("remotes", {}).items()}

    fallback = LoadedConfig()
    return LoadedConfig(
        username=str(defaults.get("username", fallback.username)),
        target=str(defaults.get("target", fallback.target)),
        push_remote=str(defaults.get("push_remote", fallback.push_remote)),
        remotes=remotes,
    )

from __future__ import annotations

from typing import Protocol

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml


class AppConfig(Protocol):
    def __getitem__(self, key: str) -> object: ...


_DEFAULTS: dict[str, object] = {
    "content": {
        "dir": "~/.config/parish/content",
    },
}


def create_config(
    yaml_path: str = "parish.yaml",
    env_prefix: str = "PARISH",
    defaults: dict[str, object] | None = None,
    *,
    content_dir: str | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): explicit overrides > env vars > YAML file > defaults dict.

    Args:
        yaml_path: Path to the YAML config file.
        env_prefix: Prefix for environment variables (``PARISH__CONTENT__DIR=...``).
        defaults: Default configuration values.
        content_dir: Override the CMS content directory.
    """
    if defaults is None:
        defaults = _DEFAULTS

    layers = [
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    ]
    if content_dir is not None:
        layers.insert(0, config_from_dict({"content": {"dir": content_dir}}))

    return ConfigurationSet(*layers)

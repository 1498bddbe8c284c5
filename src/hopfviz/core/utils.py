import datetime
import uuid
from pathlib import Path

import yaml

from hopfviz.core.errors import ConfigError


def load_config(config_file, cli_overrides=None):
    """
    Load a YAML config file and merge CLI overrides.
    Returns the config dict and the full config path used.
    """
    config_file = Path(config_file)
    if not config_file.exists():
        raise ConfigError(f"Config file not found: {config_file}")

    with open(config_file, "r") as f:
        try:
            config = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Could not parse {config_file}: {exc}") from exc

    if not isinstance(config, dict):
        raise ConfigError(f"Top level of {config_file} must be a mapping")

    apply_overrides(config, cli_overrides)
    return config, str(config_file)


def apply_overrides(config, cli_overrides):
    """
    Merge overrides in dot notation (key1.key2=value) into ``config`` in place.
    Values are parsed as YAML scalars, so ``count=8`` yields an int and
    ``points=[[0,0,1]]`` a nested list.
    """
    for override in cli_overrides or []:
        if "=" not in override:
            raise ConfigError(f"Override must look like key=value, got: {override}")
        key, val = override.split("=", 1)
        keys = key.strip().split(".")
        d = config
        for k in keys[:-1]:
            d = d.setdefault(k, {})
        try:
            d[keys[-1]] = yaml.safe_load(val)
        except yaml.YAMLError:
            d[keys[-1]] = val
    return config


def make_output_dir(script_name, base_output_dir=None):
    """
    Creates a timestamped output directory for the command run.
    Returns the path to the created output directory.
    """
    timestamp = datetime.datetime.now().strftime("%Y%m%d-%H%M%S")
    run_id = uuid.uuid4().hex[:6]
    out_base = Path(base_output_dir or "outputs") / script_name
    out_dir = out_base / f"{timestamp}-{run_id}"
    out_dir.mkdir(parents=True, exist_ok=False)
    return out_dir

"""Structured configs for the command line tools.

A config is a dataclass; its values can be overridden by yaml files passed with `--config`
and then by `key=value` arguments (in `OmegaConf` dotlist syntax), e.g.
    --config base.yml --config window.yml window_size=10 statistics=[median]
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Callable, List, Optional, Sequence, Tuple, TypeVar, Union, cast

from omegaconf import OmegaConf

ConfigT = TypeVar("ConfigT")


def parse_config_args(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Splits command line arguments into yaml config files and `key=value` overrides."""
    parser = argparse.ArgumentParser(allow_abbrev=False)
    parser.add_argument(
        "--config",
        dest="config_files",
        action="append",
        default=[],
        help="Yaml file with config values; may be repeated, later files take precedence.",
    )
    args, overrides = parser.parse_known_args(list(argv))

    for override in overrides:
        if "=" not in override:
            raise ValueError(f"Expected an override of the form key=value, got {override!r}")

    return args.config_files, overrides


def build_config(
    config_cls: Callable[..., ConfigT],
    config_files: Sequence[Union[str, Path]] = (),
    overrides: Sequence[str] = (),
) -> ConfigT:
    """
    Merges `config_cls` defaults, then each file in `config_files`, then `overrides`.

    The result is read-only and type-checked against the dataclass fields, so it can be used
    wherever an instance of `config_cls` is expected.
    """
    layers: List[Any] = [OmegaConf.structured(config_cls)]
    layers += [OmegaConf.load(path) for path in config_files]
    layers.append(OmegaConf.from_dotlist(list(overrides)))

    config = OmegaConf.merge(*layers)
    OmegaConf.set_readonly(config, True)
    return cast(ConfigT, config)


def get_config(argv: Optional[List[str]], config_cls: Callable[..., ConfigT]) -> ConfigT:
    """Builds the config for a command line tool from `argv` (default: `sys.argv[1:]`)."""
    if argv is None:
        argv = sys.argv[1:]

    config_files, overrides = parse_config_args(argv)
    return build_config(config_cls, config_files, overrides)

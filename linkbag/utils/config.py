import argparse
import sys
from typing import Any, Callable, Dict, List, Optional, Tuple, TypeVar, Union, cast

from omegaconf import DictConfig, ListConfig, OmegaConf

R = TypeVar("R")


def _split_argv(argv: List[str]) -> Tuple[List[str], List[str]]:
    """Separate `--config` paths from `key=value` overrides."""
    parser = argparse.ArgumentParser(allow_abbrev=False)  # prevent prefix matching issues
    parser.add_argument(
        "--config",
        type=str,
        action="append",
        default=list(),
        help="Path to a yaml config file. "
        "Argument can be repeated multiple times, with later configs overwriting previous ones.",
    )
    args, overrides = parser.parse_known_args(argv)
    return args.config, overrides


def get_config(
    argv: Optional[List[str]],
    config_cls: Callable[..., R],
    defaults: Optional[Dict[str, Any]] = None,
) -> R:
    """
    Build a read-only `OmegaConf` config for a command line tool.

    Args:
        argv: Command line arguments to parse (`sys.argv[1:]` if `None`). These can contain any
            number of `--config path.yml` options as well as `key=value` overrides.
        config_cls: Dataclass describing the config structure. It should be the class itself, not
            an instance of the class.
        defaults: Optional values applied on top of the dataclass defaults but below config files.

    Returns:
        Config object, which passes as an instance of `config_cls`. Values are taken (in order of
        increasing priority) from the dataclass, `defaults`, yaml files, and `key=value` overrides.
    """

    if argv is None:
        argv = sys.argv[1:]
    config_paths, overrides = _split_argv(argv)

    conf_layers: List[Union[DictConfig, ListConfig]] = []
    if defaults:
        conf_layers.append(OmegaConf.create(defaults))

    conf_layers += [OmegaConf.load(path) for path in config_paths]
    conf_layers.append(OmegaConf.from_cli(overrides))

    schema = OmegaConf.structured(config_cls)
    config = OmegaConf.merge(schema, *conf_layers)
    OmegaConf.set_readonly(config, True)  # should not be written to
    return cast(R, config)


def get_error_message_for_invalid_value(name: str, value: Any, expected: str) -> str:
    return f"{name} should be {expected}, got {value}"

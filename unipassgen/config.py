from collections.abc import Mapping
import logging
from pathlib import Path
import toml

from .options import Options, normalize

logger = logging.getLogger(__name__)

class ConfigException(Exception):
    pass

def read_toml(toml_fn, missing_ok: bool = False) -> dict:
    """
    Returns:
        Parsed content of toml_fn. With missing_ok, a missing file reads as
        an empty dict.

    Raises:
        ConfigException: The file does not exist (unless missing_ok) or is
            not valid TOML.
    """
    try:
        with open(toml_fn, "r") as f:
            return toml.load(f)
    except FileNotFoundError as e:
        if missing_ok:
            return {}
        raise ConfigException(f"Options file {toml_fn} does not exist.") from e
    except toml.TomlDecodeError as e:
        raise ConfigException(f"Options file {toml_fn} is not valid TOML: {e}") from e

def load_options(toml_fn, preset: str = None) -> Options:
    """
    Reads generator options from a TOML file.

    The file holds either top-level ``[[include]]`` / ``[[exclude]]`` tables
    or named presets below ``[presets.<name>]``::

        [[presets.pin.include]]
        chars = [["numeric"]]

    Args:
        toml_fn: Path of the TOML file.
        preset: Name of the preset to use, or None for top-level options.

    Returns:
        Normalized Options. Malformed entries are dropped, as for options
        passed in directly.
    """
    config_dict = read_toml(toml_fn)

    if preset is None:
        logger.debug("Loaded options from %s", toml_fn)
        return normalize(config_dict)

    presets = config_dict.get("presets", {})
    if not isinstance(presets, Mapping) or preset not in presets:
        raise ConfigException(f"Options file {toml_fn} has no preset \"{preset}\".")

    logger.debug("Loaded preset %s from %s", preset, toml_fn)
    return normalize(presets[preset])

def save_options(options, toml_fn, preset: str = None):
    """
    Writes options to a TOML file that load_options reads back. When preset
    is given, the options are stored as that preset, keeping other presets
    already in the file.
    """
    toml_fn = Path(toml_fn)
    toml_fn.parent.mkdir(parents=True, exist_ok=True)

    data = normalize(options).dict()
    if preset is not None:
        existing = read_toml(toml_fn, missing_ok=True)
        presets = existing.setdefault("presets", {})
        if not isinstance(presets, Mapping):
            raise ConfigException(f"Options file {toml_fn} has a presets entry that is not a table.")
        presets[preset] = data
        data = existing

    with open(toml_fn, "w") as f:
        toml.dump(data, f)

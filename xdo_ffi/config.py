"""Optional YAML configuration.

The file lives at $XDG_CONFIG_HOME/xdo_ffi/default.conf (~/.config by
default) and currently only chooses the X display:

    display: ":1"

A missing file means the defaults.
"""
import logging
import os

import yaml

logger = logging.getLogger(__name__)

DEFAULTS = {
    'display': None,
}

DEFAULT_CONFIG = """
# X display to connect to, e.g. ":0" or "localhost:10.0".
# Leave empty to use $DISPLAY.
display:
"""


def config_path():
    return os.path.expanduser(os.path.join(
            os.getenv('XDG_CONFIG_HOME', default='~/.config'), 'xdo_ffi/default.conf'))


def read_config(config_file=None):
    """Load the config file, falling back to DEFAULTS for anything unset."""
    if config_file is None:
        config_file = config_path()
    config = dict(DEFAULTS)
    if not os.path.isfile(config_file):
        logger.debug("no config file at %s, using defaults", config_file)
        return config

    with open(config_file, 'r') as f:
        loaded = yaml.load(f, yaml.SafeLoader)
    if loaded is None:
        return config
    if not isinstance(loaded, dict):
        raise ValueError("%s: expected a mapping at the top level" % (config_file,))

    for key, value in loaded.items():
        if key not in DEFAULTS:
            logger.warning("[WARN] unrecognized config key '%s' in %s", key, config_file)
            continue
        config[key] = value

    display = config['display']
    if display == '':
        config['display'] = None
    elif display is not None and not isinstance(display, str):
        raise ValueError("%s: display must be a string, got %r" % (config_file, display))
    return config


def create_default_config(config_file=None):
    if config_file is None:
        config_file = config_path()
    os.makedirs(os.path.dirname(config_file), exist_ok=True)
    with open(config_file, 'w') as config:
        config.write(DEFAULT_CONFIG)
    return config_file

# What it does: Manages all read/write operations for the `.grit/config` file
# What data structure it uses: Map / Hash Table / Dictionary (the INI file format is a map of sections to key-value pairs, managed by Python's `configparser`)

import configparser
import os

from .errors import GritError, RepositoryIOError
from .repository import git_dir


def get_config_path(repo_root):  # Returns the path to the config file within the repository
    return os.path.join(git_dir(repo_root), 'config')


def _split_key(key):
    try:
        section, option = key.split('.', 1)
    except ValueError:
        raise ValueError(f"invalid key '{key}', expected 'section.option'") from None
    if not section or not option:
        raise ValueError(f"invalid key '{key}', expected 'section.option'")
    return section, option


def read_config(repo_root): # Reads and returns the configuration as a ConfigParser object
    config = configparser.ConfigParser()
    config_path = get_config_path(repo_root)
    if os.path.exists(config_path):
        try:
            config.read(config_path)
        except configparser.Error as e:
            raise GritError(f"bad config file {config_path}: {e}") from e
    return config


def write_config(repo_root, key, value): # Sets a configuration key to a value and writes it to the config file
    section, option = _split_key(key)
    config = read_config(repo_root)
    if not config.has_section(section):
        config.add_section(section)
    config.set(section, option, value)

    config_path = get_config_path(repo_root)
    try:
        with open(config_path, 'w') as configfile:
            config.write(configfile)
    except OSError as e:
        raise RepositoryIOError(config_path, e.strerror or str(e)) from e


def get_config_value(repo_root, key, fallback=None):
    section, option = _split_key(key)
    return read_config(repo_root).get(section, option, fallback=fallback)


def get_log_level(repo_root): # Retrieves core.loglevel, or None if it is not set
    value = get_config_value(repo_root, 'core.loglevel')
    return value.strip().upper() if value else None

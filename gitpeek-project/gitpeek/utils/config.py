# What it does: Reads the remotes defined in the repository's .git/config file
# How it does: Git's config is close enough to INI for Python's `configparser`: a remote lives in a section named `remote "<name>"`
# with url, pushurl, fetch and push keys. Git lets these keys repeat, so every value is kept: MultiValueDict collects the repeats while
# configparser parses and they come back as one line each
# What data structure it uses: Map / Hash Table / Dictionary (the INI file format is a map of sections to key-value pairs, managed by Python's `configparser`)

import configparser
import logging
import os
import re

from .branches import Remote

logger = logging.getLogger(__name__)

REMOTE_SECTION_PATTERN = re.compile(r'remote\s+"(.+)"')


class MultiValueDict(dict): # dict_type for ConfigParser: a repeated option extends the value list instead of replacing it
    def __setitem__(self, key, value):
        if isinstance(value, list) and key in self and isinstance(self[key], list):
            self[key].extend(value)
        else:
            super().__setitem__(key, value)


def get_config_path(git_dir): # Returns the path to the config file within the .git directory
    return os.path.join(git_dir, 'config')


def read_config(git_dir): # Reads and returns the configuration as a ConfigParser object, empty if the file is missing or broken
    config = configparser.ConfigParser(dict_type=MultiValueDict, strict=False, interpolation=None, allow_no_value=True)
    config_path = get_config_path(git_dir)
    if not os.path.exists(config_path):
        return config
    try:
        config.read(config_path, encoding='utf-8')
    except (configparser.Error, UnicodeDecodeError) as e:
        logger.warning("Couldn't parse %s: %s", config_path, e)
        return configparser.ConfigParser(interpolation=None)
    return config


def read_remotes(git_dir): # Returns a Remote for every [remote "<name>"] section of the config
    config = read_config(git_dir)
    remotes = []
    for section in config.sections():
        match = REMOTE_SECTION_PATTERN.fullmatch(section.strip())
        if not match:
            continue
        remotes.append(Remote(
            name=match.group(1),
            urls=_values(config, section, 'url'),
            push_urls=_values(config, section, 'pushurl'),
            fetch_refspecs=_values(config, section, 'fetch'),
            push_refspecs=_values(config, section, 'push'),
        ))
    return remotes


def _values(config, section, option): # All non-empty values of a possibly repeated option, in file order
    value = config.get(section, option, fallback=None)
    if value is None:
        return ()
    return tuple(line.strip() for line in value.splitlines() if line.strip())

"""
This module provides some basic functions for locating mirrorfold files in
user space. Directories are created by the code that writes into them.
"""

import os


def __get_user_dir(xdg_env_var, fallback_dir_path):
    return os.environ.get(
        xdg_env_var, os.path.join(os.path.expanduser("~"), fallback_dir_path)
    )


def get_user_data_dir():
    return __get_user_dir("XDG_DATA_HOME", ".local/share")


def get_user_config_dir():
    return __get_user_dir("XDG_CONFIG_HOME", ".config")


mirrorfold = "mirrorfold"


def getUserDataPrefix():
    return os.path.join(get_user_data_dir(), mirrorfold)


def addUserDataPrefix(subpath):
    return os.path.join(getUserDataPrefix(), subpath)


def getUserConfigPrefix():
    return os.path.join(get_user_config_dir(), mirrorfold)


def addUserConfigPrefix(subpath):
    return os.path.join(getUserConfigPrefix(), subpath)

""" The task of this module is to provide easy saving/loading of configurations
    It also supports gconf like connection, so you get notices when a property
    has changed. """
import os
import locale
from configparser import RawConfigParser

from mirrorfold.System.Log import log
from mirrorfold.System.prefix import addUserConfigPrefix

section = "General"
configParser = RawConfigParser(default_section=section)

for sect in ("Mirrorfold",):
    if not configParser.has_section(sect):
        configParser.add_section(sect)

path = addUserConfigPrefix("config")
encoding = locale.getpreferredencoding()
if os.path.isfile(path):
    with open(path, encoding=encoding) as f:
        configParser.read_file(f)


def _save():
    directory = os.path.dirname(path)
    if not os.path.isdir(directory):
        os.makedirs(directory, mode=0o700)
    with open(path, "w", encoding=encoding) as f:
        configParser.write(f)


idkeyfuncs = {}
conid = 0


def notify_add(key, func, *args, section=section):
    """The signature for func must be self, client, *args, **kwargs"""
    assert isinstance(key, str)
    global conid
    idkeyfuncs[conid] = (key, func, args, section)
    conid += 1
    return conid - 1


def notify_remove(conid):
    del idkeyfuncs[conid]


DEFAULTS = {
    "General": {},
    "Mirrorfold": {
        "positionNumber": 1,
    },
}


def get(key, section=section):
    try:
        default = DEFAULTS[section][key]
    except KeyError:
        default = None

    try:
        return configParser.getint(section, key, fallback=default)
    except ValueError:
        pass

    try:
        return configParser.getboolean(section, key, fallback=default)
    except ValueError:
        pass

    try:
        return configParser.getfloat(section, key, fallback=default)
    except ValueError:
        pass

    return configParser.get(section, key, fallback=default)


def set(key, value, section=section):
    try:
        configParser.set(section, key, str(value))
        _save()
    except Exception as err:
        log.error(
            "Unable to save configuration '%s'='%s' because of error: %s %s" %
            (repr(key), repr(value), err.__class__.__name__, ", ".join(
                str(a) for a in err.args)))
    for key_, func, args, section_ in list(idkeyfuncs.values()):
        if key_ == key and section_ == section:
            func(None, *args)


def hasKey(key, section=section):
    return configParser.has_option(section, key)

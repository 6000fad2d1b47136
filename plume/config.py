# This library is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License as
# published by the Free Software Foundation; either version 3 of the
# License, or (at your option) any later version.
#
# This library is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this library; if not, see
# <http://www.gnu.org/licenses/>.


"""
plume.config

Settings for the plume command-line tools. A setting NAME is read
from the interpreter option `-X plume.NAME=VALUE` first, then from
the environment variable `PLUME_NAME`, and finally falls back to a
default.

license: LGPL v.3
"""


import sys

from os import environ
from os.path import join

from appdirs import AppDirs


__all__ = ("get_option", "APPDIRS", "DEFAULT_HISTFILE", "DEFAULT_LOGLEVEL", )


APPDIRS = AppDirs("plume")

DEFAULT_HISTFILE = join(APPDIRS.user_config_dir, "history")

DEFAULT_LOGLEVEL = "WARNING"


def get_option(name, default=None, xoptions=None, env=None):
    xoptions = sys._xoptions if xoptions is None else xoptions
    env = environ if env is None else env

    value = xoptions.get("plume." + name)
    if value is None or value is True:
        # a bare `-X plume.NAME` carries no value
        value = env.get("PLUME_" + name.upper())

    return default if value is None else value


#
# The end.

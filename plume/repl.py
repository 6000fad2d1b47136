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
Read-Lookup-Print-Loop for exploring a document with plume's `ref`

license: LGPL v.3
"""


import json
import logging
import re
import sys

from collections.abc import Mapping
from os import makedirs
from os.path import dirname, exists

from .access import ref


__all__ = (
    "repl", "parse_keys", "lookup", "format_result", "describe_error",
    "LOOKUP_ERRORS",
)


_log = logging.getLogger(__name__)

_position = re.compile(r"[0-9]+")

LOOKUP_ERRORS = (KeyError, IndexError, TypeError)


def parse_keys(words):
    """
    Converts a sequence of key strings into `ref` keys. Words made only
    of decimal digits become integer positions.
    """

    return [int(w) if _position.fullmatch(w) else w for w in words]


def lookup(document, words):
    """
    `ref` each word of a key path in turn. A digit word names a
    position, except within a mapping which holds it as a string key,
    since JSON object keys are always strings.
    """

    result = document
    for word, key in zip(words, parse_keys(words)):
        if isinstance(result, Mapping) and word in result:
            key = word
        result = ref(result, key)
    return result


def format_result(value):
    return json.dumps(value, indent=2, ensure_ascii=False, default=repr)


def describe_error(err):
    if isinstance(err, KeyError):
        return "no such key: %s" % err
    else:
        return str(err)


def _load_history(histfile):
    try:
        import readline
    except ImportError:
        _log.debug("readline unavailable, history disabled")
        return None

    if histfile and exists(histfile):
        readline.read_history_file(histfile)
        _log.debug("loaded history from %s", histfile)
    return readline


def _save_history(readline, histfile):
    if readline is None or not histfile:
        return

    folder = dirname(histfile)
    if folder:
        makedirs(folder, exist_ok=True)
    readline.write_history_file(histfile)
    _log.debug("saved history to %s", histfile)


def repl(document, histfile=None, reader=input,
         stdout=sys.stdout, stderr=sys.stderr):
    """
    enter into a read-lookup-print-loop. Each line read is split on
    whitespace into a key path which is looked up in document, and the
    result is printed as JSON. An empty line prints the whole
    document.

    returns the last successfully looked-up value when the loop ends.
    """

    rl = _load_history(histfile) if reader is input else None
    result = document

    try:
        while True:
            try:
                line = reader("plume > ")
                result = lookup(document, line.split())
                print(format_result(result), file=stdout)

            except KeyboardInterrupt:
                print(file=stderr)
                stderr.flush()
                break

            except EOFError:
                print(file=stderr)
                stderr.flush()
                break

            except LOOKUP_ERRORS as le:
                print("error:", describe_error(le), file=stderr)
                stderr.flush()

            stdout.flush()

    finally:
        _save_history(rl, histfile)

    return result


#
# The end.

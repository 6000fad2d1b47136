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
plume.cli

Command-line interface for looking up values inside a JSON document
with `ref`, either once or interactively

license: LGPL v.3
"""


import json
import logging
import sys

from argparse import ArgumentParser
from os.path import basename

from .config import DEFAULT_HISTFILE, DEFAULT_LOGLEVEL, get_option
from .repl import (
    LOOKUP_ERRORS, describe_error, format_result, lookup, repl,
)


_log = logging.getLogger(__name__)


class CLIException(Exception):
    pass


def load_document(filename, stdin):
    if not filename or filename == "-":
        _log.debug("reading document from stdin")
        return json.load(stdin)

    _log.debug("reading document from %s", filename)
    with open(filename, "rt", encoding="utf-8") as fd:
        return json.load(fd)


def cli(options, stdin=None, stdout=None):
    """
    Run as from the command line, with the given options
    """

    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout

    try:
        document = load_document(options.filename, stdin)
    except (OSError, ValueError) as err:
        raise CLIException("could not load %s: %s" %
                           (options.filename or "<stdin>", err)) from err

    if options.keys or not options.interactive:
        try:
            result = lookup(document, options.keys)
        except LOOKUP_ERRORS as le:
            raise CLIException(describe_error(le)) from le

        print(format_result(result), file=stdout)

    if options.interactive:
        repl(document, histfile=options.histfile, stdout=stdout)


def cli_option_parser(name):
    """
    Create an `ArgumentParser` instance with the options requested by
    the `cli` function
    """

    parser = ArgumentParser(prog=basename(name))

    parser.add_argument("filename", nargs="?", default=None,
                        help="JSON document to read, or - for stdin")

    parser.add_argument("keys", nargs="*", default=[],
                        help="Keys and positions to look up, in order")

    parser.add_argument("-i", "--interactive", dest="interactive",
                        action="store_true", default=False,
                        help="Enter interactive mode after any"
                        " initial lookup")

    parser.add_argument("--histfile", dest="histfile",
                        action="store",
                        default=get_option("histfile", DEFAULT_HISTFILE),
                        help="Interactive mode history file")

    parser.add_argument("--loglevel", dest="loglevel",
                        action="store",
                        default=get_option("loglevel", DEFAULT_LOGLEVEL),
                        help="Logging level (default %(default)s)")

    return parser


def main(args=sys.argv):
    """
    Entry point for the plume command
    """

    name, *args = args

    parser = cli_option_parser(name)
    options = parser.parse_args(args)

    level = logging.getLevelName(options.loglevel.upper())
    if not isinstance(level, int):
        parser.error("unknown log level %r" % options.loglevel)

    logging.basicConfig(level=level,
                        format="%(name)s: %(levelname)s: %(message)s",
                        stream=sys.stderr)

    try:
        cli(options)

    except CLIException as ce:
        print("%s: error: %s" % (parser.prog, ce), file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print(file=sys.stderr)
        return 130

    else:
        return 0


if __name__ == "__main__":
    sys.exit(main())


#
# The end.

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
plume.lib

Exceptions, sentinel values, and the always-failing placeholder
callables shared by the rest of plume.

license: LGPL v.3
"""


__all__ = (
    "PlumeException", "UnimplementedError",
    "Unreachable", "NotYetImplemented",
    "sentinel", "nil", "eof",
    "undefined", "NIY",
)


class PlumeException(Exception):
    """
    Base class for error-driven Exceptions raised by plume
    """
    pass


class UnimplementedError(PlumeException):
    """
    Raised when a placeholder callable is invoked. The positional and
    keyword arguments of the offending call are kept as `args` and
    `kwds`
    """

    def __init__(self, *args, **kwds):
        super().__init__(*args)
        self.kwds = kwds


    def __str__(self):
        parts = [repr(a) for a in self.args]
        parts.extend("%s=%r" % kv for kv in self.kwds.items())
        return "%s(%s)" % (self._label, ", ".join(parts))


    _label = "unimplemented"


class Unreachable(UnimplementedError):
    """
    Raised by `undefined`. Reaching one of these in production is a
    defect in itself.
    """

    _label = "undefined"


class NotYetImplemented(UnimplementedError):
    """
    Raised by `NIY`, as a placeholder for features that haven't been
    implemented yet.
    """

    _label = "NIY"


class sentinel():
    def __init__(self, words):
        self._r = "<{}>".format(words)

    def __repr__(self):
        return self._r


# the empty-list marker
nil = sentinel("nil")

# end-of-data marker
eof = sentinel("eof")


def undefined(*args, **kwds):
    """
    (undefined ARGS...)

    Marks a path that must never be reached. Always raises
    `Unreachable` carrying ARGS.
    """

    raise Unreachable(*args, **kwds)


def NIY(*args, **kwds):
    """
    (NIY ARGS...)

    Marks functionality that is not yet implemented. Always raises
    `NotYetImplemented` carrying ARGS.
    """

    raise NotYetImplemented(*args, **kwds)


#
# The end.

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
plume.values

Multiple return values. A function which wants to hand more (or
fewer) than one result to the next stage of a composition returns a
`values` instance. Any other return value counts as exactly one
result.

license: LGPL v.3
"""


__all__ = ("values", "is_values", "spread", "feed", )


class values(object):

    __slots__ = ("_args", "_kwds", )


    def __init__(self, *args, **kwds):
        self._args = args
        self._kwds = kwds


    def __iter__(self):
        return iter(self._args)


    def __len__(self):
        return len(self._args)


    def __getitem__(self, key):
        if isinstance(key, (slice, int)):
            return self._args[key]
        else:
            return self._kwds[key]


    def keys(self):
        return self._kwds.keys()


    def __eq__(self, other):
        if isinstance(other, values):
            return (self._args == other._args and
                    self._kwds == other._kwds)
        else:
            return NotImplemented


    def __hash__(self):
        return hash((self._args, tuple(sorted(self._kwds.items()))))


    def __repr__(self):
        parts = [repr(a) for a in self._args]
        parts.extend("%s=%r" % kv for kv in self._kwds.items())
        return "values(%s)" % ", ".join(parts)


    def __call__(self, function):
        """
        Invoke function with these values as its arguments
        """

        return function(*self._args, **self._kwds)


def is_values(obj):
    return isinstance(obj, values)


def spread(result):
    """
    Normalizes a single call's result into a `values`. A `values` is
    returned unchanged; anything else becomes a one-element `values`
    """

    return result if isinstance(result, values) else values(result)


def feed(function, result):
    # the hand-off between two stages: the whole of result becomes the
    # argument list of function
    return spread(result)(function)


#
# The end.

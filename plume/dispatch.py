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
closed variant dispatch utility class for plume

license: LGPL v.3
"""


class NoDispatchMethod(TypeError):
    """
    Raised when an object matches none of the variants a `Dispatch`
    knows about. The message names the object's type.
    """

    def __init__(self, klass, label="dispatch"):
        super().__init__("%s: unsupported kind %s" %
                         (label, klass.__qualname__))
        self.klass = klass


class Dispatch(object):
    """
    Dispatches over a fixed, ordered table of variants.

    `_variants` is a sequence of `(name, test)` pairs. `test` is either
    a type (or tuple of types) checked with `isinstance`, or a
    one-argument predicate. The first variant whose test accepts the
    object wins, and its `dispatch<name>` method is called. Subclasses
    must provide a method for every variant they list.
    """

    _dispatch_prefix = "dispatch"
    _dispatch_label = "dispatch"
    _variants = ()


    def variant(self, obj):
        """
        The name of the first variant accepting `obj`, or None
        """

        for name, test in self._variants:
            if isinstance(test, (type, tuple)):
                if isinstance(obj, test):
                    return name
            elif test(obj):
                return name
        return None


    def dispatch(self, obj, *args, **kwds):
        """
        Finds the `dispatch<Variant>` method for the first variant
        matching `obj` and calls it with `obj` and `*args`

        If no variant matches, the `default` method will be called.
        """

        name = self.variant(obj)
        if name is None:
            return self.default(obj, *args, **kwds)

        method = getattr(self, self._dispatch_prefix + name)
        return method(obj, *args, **kwds)


    def default(self, obj, *args, **kwds):
        """
        Raises a `NoDispatchMethod`
        """

        raise NoDispatchMethod(type(obj), self._dispatch_label)


#
# The end.

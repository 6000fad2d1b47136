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
plume.access

The generic accessor `ref`, and `ensure_function`, which coerces
loose configuration values (predicates, selectors, constants,
mappings) into callables.

license: LGPL v.3
"""


from collections.abc import Mapping, Sequence
from operator import index

from .dispatch import Dispatch
from .functional import constantly, curry, identity, rcurry
from .lib import eof, nil
from .values import values


__all__ = ("ref", "ensure_function", "is_slotted", )


def is_slotted(obj):
    """
    True for instances carrying named fields, via either an instance
    `__dict__` or `__slots__`. Types themselves do not count.
    """

    if isinstance(obj, type):
        return False
    return hasattr(obj, "__dict__") or hasattr(type(obj), "__slots__")


def _slot_names(klass):
    # every slot declared along the MRO, minus the bookkeeping ones
    for k in klass.__mro__:
        slots = vars(k).get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots, )
        for name in slots:
            if name not in ("__dict__", "__weakref__"):
                yield name


def _position(seq, key):
    # strictly zero-based, no counting back from the end
    pos = index(key)
    if pos < 0 or pos >= len(seq):
        raise IndexError("%s index out of range: %r" %
                         (type(seq).__name__, key))
    return pos


class Accessor(Dispatch):

    _dispatch_label = "ref"

    _variants = (
        ("Mapping", Mapping),
        ("Text", str),
        ("Bytes", (bytes, bytearray, memoryview)),
        ("Sequence", (Sequence, values)),
        ("Callable", callable),
        ("Slotted", is_slotted),
    )


    def dispatchMapping(self, mapping, key):
        # membership first, so that a __missing__ hook (as on
        # defaultdict) never gets the chance to insert anything
        if key in mapping:
            return mapping[key]
        raise KeyError(key)


    def dispatchText(self, text, key):
        return text[_position(text, key)]


    def dispatchBytes(self, data, key):
        return data[_position(data, key)]


    def dispatchSequence(self, seq, key):
        return seq[_position(seq, key)]


    def dispatchCallable(self, fun, key):
        return fun(key)


    def dispatchSlotted(self, obj, key):
        if not isinstance(key, str):
            raise TypeError("field name must be str, not %s" %
                            type(key).__name__)
        # instance fields only, never methods or class attributes
        fields = getattr(obj, "__dict__", None)
        if fields is not None and key in fields:
            return fields[key]

        if key in _slot_names(type(obj)):
            try:
                return getattr(obj, key)
            except AttributeError:
                # declared, but never assigned
                raise KeyError(key) from None

        raise KeyError(key)


_accessor = Accessor()


def ref(container, *keys):
    """
    (ref CONTAINER)
    (ref CONTAINER KEY)
    (ref CONTAINER KEY1 KEY2 ... KEYN)

    Looks up KEY in CONTAINER according to the container's kind:
    mappings by key, strings, bytes and other sequences by zero-based
    position, callables by calling them with KEY, and objects by field
    name. Multiple keys are applied left to right. With no keys,
    CONTAINER is returned unchanged.

    Missing keys and fields raise KeyError, bad positions raise
    IndexError, and an unsupported container raises TypeError.
    """

    dispatch = _accessor.dispatch
    for key in keys:
        container = dispatch(container, key)
    return container


def _is_nil(obj):
    return obj is None or obj is nil or (type(obj) is tuple and not obj)


def _is_pair(obj):
    return type(obj) is tuple and len(obj) > 0


class Coercion(Dispatch):

    _dispatch_label = "ensure_function"

    # bool ahead of int, since every bool is also an int
    _variants = (
        ("Callable", callable),
        ("Mapping", Mapping),
        ("Constant", bool),
        ("Position", int),
        ("Nil", _is_nil),
        ("Constant", (lambda obj: obj is eof)),
        ("Pair", _is_pair),
        ("Slotted", is_slotted),
    )


    def dispatchCallable(self, fun):
        return fun


    def dispatchMapping(self, mapping):
        return curry(ref, mapping)


    def dispatchConstant(self, value):
        return constantly(value)


    def dispatchPosition(self, pos):
        return rcurry(ref, pos)


    def dispatchNil(self, _nil):
        return identity


    def dispatchPair(self, pair):
        head, *args = pair
        return rcurry(self.dispatch(head), *args)


    def dispatchSlotted(self, obj):
        return curry(ref, obj)


_coercion = Coercion()


def ensure_function(value):
    """
    (ensure-function VALUE)

    Coerces VALUE into a callable:

    * callables are returned unchanged
    * a mapping becomes a lookup into that mapping
    * True, False and `eof` become functions always returning
      themselves
    * an integer N becomes a function returning position N of its
      argument
    * None, `nil` and the empty tuple become `identity`
    * a tuple `(HEAD, ARG...)` becomes HEAD coerced, with ARG...
      appended after the arguments it is later called with
    * any other object with named fields becomes a lookup of those
      fields by name
    """

    return _coercion.dispatch(value)


#
# The end.

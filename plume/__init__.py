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
plume, a functional prelude for Python

Composition with multiple return values, partial application, a
generic accessor, and coercion of loose values into callables.

license: LGPL v.3
"""


from .lib import (
    PlumeException, UnimplementedError, Unreachable, NotYetImplemented,
    sentinel, nil, eof, undefined, NIY,
)
from .values import values, is_values, spread
from .dispatch import Dispatch, NoDispatchMethod
from .functional import (
    identity, constantly, rcompose, compose, pipe, pipe_multi,
    curry, rcurry,
)
from .access import ref, ensure_function
from .option import (
    Present, Absent, is_present, is_absent, option, if_let, when_let,
)
from .places import rotate, shift


__all__ = (
    "PlumeException", "UnimplementedError",
    "Unreachable", "NotYetImplemented",
    "sentinel", "nil", "eof", "undefined", "NIY",

    "values", "is_values", "spread",

    "Dispatch", "NoDispatchMethod",

    "identity", "constantly",
    "rcompose", "compose", "pipe", "pipe_multi",
    "curry", "rcurry",

    "ref", "ensure_function",

    "Present", "Absent", "is_present", "is_absent", "option",
    "if_let", "when_let",

    "rotate", "shift",
)


#
# The end.

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
plume.option

An explicit Option type. `Present` wraps any value, including ones
that are false in a boolean context, so that "there is a value" and
"the value is false" are never confused. `Absent` is the single empty
Option.

license: LGPL v.3
"""


__all__ = (
    "Present", "Absent",
    "is_present", "is_absent", "option",
    "if_let", "when_let",
)


class Present(object):

    __slots__ = ("value", )


    def __init__(self, value):
        self.value = value


    def __eq__(self, other):
        if isinstance(other, Present):
            return self.value == other.value
        else:
            return NotImplemented


    def __hash__(self):
        return hash((Present, self.value))


    def __bool__(self):
        # presence, not the truth of the value
        return True


    def __repr__(self):
        return "Present(%r)" % (self.value, )


class AbsentType(object):

    __slots__ = ()

    _instance = None


    def __new__(cls):
        inst = cls._instance
        if inst is None:
            inst = super().__new__(cls)
            cls._instance = inst
        return inst


    def __bool__(self):
        return False


    def __repr__(self):
        return "Absent"


    def __reduce__(self):
        return (AbsentType, ())


Absent = AbsentType()


def is_present(opt):
    return isinstance(opt, Present)


def is_absent(opt):
    return opt is Absent


def option(value, missing=None):
    """
    Lifts a plain VALUE into an Option, with the MISSING marker
    becoming `Absent`
    """

    return Absent if value is missing else Present(value)


def if_let(options, then, otherwise=None):
    """
    (if-let OPTIONS THEN)
    (if-let OPTIONS THEN OTHERWISE)

    If every Option in OPTIONS is Present, calls THEN with their
    unwrapped values. Otherwise calls OTHERWISE with no arguments, or
    returns Absent when there is no OTHERWISE. Stops consuming OPTIONS
    at the first Absent.
    """

    found = []
    for opt in options:
        if not is_present(opt):
            if opt is not Absent:
                raise TypeError("expected an Option, got %s" %
                                type(opt).__name__)
            return Absent if otherwise is None else otherwise()
        found.append(opt.value)

    return then(*found)


def when_let(options, then):
    """
    (when-let OPTIONS THEN)

    `if-let` without the else branch
    """

    return if_let(options, then)


#
# The end.

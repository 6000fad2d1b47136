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
plume.places

Rotating and shifting values between the slots of a mutable,
indexable storage such as a list.

license: LGPL v.3
"""


__all__ = ("rotate", "shift", )


def _gather(storage, indexes):
    # read everything up front, so a bad index fails before any write
    return [storage[i] for i in indexes]


def rotate(storage, *indexes):
    """
    (rotate STORAGE I1 I2 ... IN)

    Moves the value at I2 into I1, I3 into I2, and so on, with the
    original value of I1 landing in IN.
    """

    found = _gather(storage, indexes)
    if len(found) < 2:
        return None

    found.append(found.pop(0))

    for i, val in zip(indexes, found):
        storage[i] = val
    return None


def shift(storage, *indexes_and_value):
    """
    (shift STORAGE I1 I2 ... IN VALUE)

    Moves the value at I2 into I1, I3 into I2, and so on, storing
    VALUE into IN. Returns the value previously held at I1.
    """

    if not indexes_and_value:
        raise TypeError("shift requires a value")

    *indexes, value = indexes_and_value
    if not indexes:
        return value

    found = _gather(storage, indexes)
    displaced = found.pop(0)
    found.append(value)

    for i, val in zip(indexes, found):
        storage[i] = val
    return displaced


#
# The end.

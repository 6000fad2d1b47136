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
unittest for plume.option

license: LGPL v.3
"""


import pickle

from unittest import TestCase

from plume.option import (
    Present, Absent, AbsentType,
    is_present, is_absent, option, if_let, when_let,
)

from . import collect


class OptionTest(TestCase):


    def test_present_false(self):
        for falsy in (False, None, 0, "", [], ()):
            opt = Present(falsy)
            self.assertTrue(is_present(opt))
            self.assertFalse(is_absent(opt))
            self.assertTrue(opt)
            self.assertEqual(opt.value, falsy)


    def test_absent(self):
        self.assertFalse(is_present(Absent))
        self.assertTrue(is_absent(Absent))
        self.assertFalse(Absent)
        self.assertIs(AbsentType(), Absent)
        self.assertEqual(repr(Absent), "Absent")


    def test_distinct(self):
        self.assertNotEqual(Present(False), Absent)
        self.assertNotEqual(Present(None), Absent)


    def test_equality(self):
        self.assertEqual(Present(1), Present(1))
        self.assertNotEqual(Present(1), Present(2))
        self.assertNotEqual(Present(1), 1)
        self.assertEqual(hash(Present("a")), hash(Present("a")))
        self.assertEqual(repr(Present(0)), "Present(0)")


    def test_pickle(self):
        self.assertIs(pickle.loads(pickle.dumps(Absent)), Absent)


    def test_option(self):
        self.assertEqual(option(5), Present(5))
        self.assertIs(option(None), Absent)
        self.assertEqual(option(None, missing=False), Present(None))
        self.assertIs(option(False, missing=False), Absent)


class IfLetTest(TestCase):


    def test_all_present(self):
        res = if_let([Present(1), Present(False)], collect)
        self.assertEqual(res, ((1, False), {}))


    def test_empty(self):
        self.assertEqual(if_let([], collect), ((), {}))


    def test_absent(self):
        res = if_let([Present(1), Absent], collect, lambda: "else")
        self.assertEqual(res, "else")

        res = if_let([Absent], collect)
        self.assertIs(res, Absent)


    def test_short_circuit(self):
        seen = []

        def options():
            seen.append(1)
            yield Present(1)
            seen.append(2)
            yield Absent
            seen.append(3)
            yield Present(3)

        res = if_let(options(), collect, lambda: "else")
        self.assertEqual(res, "else")
        self.assertEqual(seen, [1, 2])


    def test_not_an_option(self):
        with self.assertRaises(TypeError):
            if_let([Present(1), 2], collect)


    def test_when_let(self):
        self.assertEqual(when_let([Present(2)], lambda x: x * 2), 4)
        self.assertIs(when_let([Absent], lambda x: x * 2), Absent)


#
# The end.

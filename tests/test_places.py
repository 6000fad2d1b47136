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
unittest for plume.places

license: LGPL v.3
"""


from unittest import TestCase

from plume.places import rotate, shift


class RotateTest(TestCase):


    def test_swap(self):
        data = [1, 2, 3]
        self.assertIs(rotate(data, 0, 2), None)
        self.assertEqual(data, [3, 2, 1])


    def test_rotate(self):
        data = ["a", "b", "c", "d"]
        rotate(data, 0, 1, 2)
        self.assertEqual(data, ["b", "c", "a", "d"])


    def test_degenerate(self):
        data = [1, 2]
        rotate(data)
        rotate(data, 1)
        self.assertEqual(data, [1, 2])


    def test_bad_index(self):
        data = [1, 2, 3]
        with self.assertRaises(IndexError):
            rotate(data, 0, 1, 9)
        self.assertEqual(data, [1, 2, 3])


    def test_mapping_storage(self):
        data = {"x": 1, "y": 2}
        rotate(data, "x", "y")
        self.assertEqual(data, {"x": 2, "y": 1})


class ShiftTest(TestCase):


    def test_shift(self):
        data = [1, 2, 3]
        self.assertEqual(shift(data, 0, 1, 2, 9), 1)
        self.assertEqual(data, [2, 3, 9])


    def test_single(self):
        data = [1, 2, 3]
        self.assertEqual(shift(data, 1, "z"), 2)
        self.assertEqual(data, [1, "z", 3])


    def test_no_indexes(self):
        data = [1]
        self.assertEqual(shift(data, 5), 5)
        self.assertEqual(data, [1])


    def test_no_value(self):
        self.assertRaises(TypeError, shift, [1])


    def test_bad_index(self):
        data = [1, 2, 3]
        with self.assertRaises(IndexError):
            shift(data, 0, 7, "v")
        self.assertEqual(data, [1, 2, 3])


#
# The end.

"""
Tests for the dragon curve generator.
"""

import unittest

from parameterized import parameterized

from dragonsim.curve import (
    Color,
    CurveOrder,
    Segment,
    SegmentKind,
    generate_dragon,
    iter_dragon,
    segment_count,
)
from dragonsim.unit import Degree

OUTER_TURN = Degree(-90)
START = Color(0.0, 0.0, 0.0)
END = Color(240.0, 120.0, 60.0)


def dragon(order, outer_turn=OUTER_TURN, start=START, end=END, **kwargs):
    return generate_dragon(order, outer_turn, start, end, **kwargs)


class TestCurveOrder(unittest.TestCase):
    """Test the non-negative order type."""

    def test_valid_order(self):
        """Test a non-negative integer is accepted."""
        self.assertEqual(CurveOrder(3), 3)
        self.assertEqual(CurveOrder(3).lower(), 2)

    def test_negative_order(self):
        """Test a negative order cannot be constructed."""
        with self.assertRaises(ValueError):
            CurveOrder(-1)

    @parameterized.expand([
        ("float", 1.5),
        ("bool", True),
        ("string", "3"),
    ])
    def test_non_integer_order(self, name, value):
        """Test non-integer orders are rejected."""
        with self.assertRaises(TypeError):
            CurveOrder(value)

    def test_order_zero_has_no_lower(self):
        """Test order 0 cannot be subdivided."""
        with self.assertRaises(ValueError):
            CurveOrder(0).lower()


class TestColor(unittest.TestCase):
    """Test stroke colors."""

    def test_midpoint(self):
        """Test the midpoint is computed per channel."""
        self.assertEqual(START.midpoint(END), Color(120.0, 60.0, 30.0))

    def test_lerp_endpoints(self):
        """Test interpolation endpoints."""
        self.assertEqual(START.lerp(END, 0.0), START)
        self.assertEqual(START.lerp(END, 1.0), END)

    def test_channel_out_of_range(self):
        """Test channels outside [0, 255] are rejected."""
        with self.assertRaises(ValueError):
            Color(256.0, 0.0, 0.0)
        with self.assertRaises(ValueError):
            Color(0.0, -1.0, 0.0)

    def test_conversions(self):
        """Test integer, hex and unit-scaled forms."""
        color = Color(255.0, 127.6, 0.0)
        self.assertEqual(color.to_rgb255(), (255, 128, 0))
        self.assertEqual(color.to_hex(), "#ff8000")
        self.assertEqual(Color.gray(51.0).to_unit_rgb(), (0.2, 0.2, 0.2))


class TestDragonGenerator(unittest.TestCase):
    """Test the segment sequence of generated curves."""

    def test_order_zero(self):
        """Test order 0 is a single leaf segment with the outer turn."""
        segments = dragon(0)
        self.assertEqual(segments, [Segment(OUTER_TURN, 1.0, START, SegmentKind.LEAF)])

    def test_order_one(self):
        """Test order 1 is two leaves joined by a turn segment."""
        mid = START.midpoint(END)
        expected = [
            Segment(Degree(45), 1.0, START, SegmentKind.LEAF),
            Segment(OUTER_TURN, 0.0, mid, SegmentKind.TURN),
            Segment(Degree(-45), 1.0, mid, SegmentKind.LEAF),
        ]
        self.assertEqual(dragon(1), expected)

    @parameterized.expand([(order,) for order in range(9)])
    def test_segment_count(self, order):
        """Test 1 segment for order 0 and 2**(n+1) - 1 otherwise."""
        segments = dragon(order)
        expected = 1 if order == 0 else 2 ** (order + 1) - 1
        self.assertEqual(len(segments), expected)
        self.assertEqual(segment_count(order), expected)

    @parameterized.expand([(order,) for order in range(1, 8)])
    def test_leaf_and_turn_counts(self, order):
        """Test 2**n leaves interleaved with 2**n - 1 turns."""
        segments = dragon(order)
        kinds = [segment.kind for segment in segments]
        self.assertEqual(kinds.count(SegmentKind.LEAF), 2 ** order)
        self.assertEqual(kinds.count(SegmentKind.TURN), 2 ** order - 1)
        for index, kind in enumerate(kinds):
            expected = SegmentKind.LEAF if index % 2 == 0 else SegmentKind.TURN
            self.assertIs(kind, expected)

    @parameterized.expand([
        ("right angle", Degree(-90)),
        ("left angle", Degree(90)),
        ("odd angle", Degree(33.3)),
    ])
    def test_turn_segments_carry_outer_turn(self, name, outer_turn):
        """Test every joining segment carries the top-level outer turn."""
        segments = dragon(6, outer_turn=outer_turn)
        for segment in segments:
            if segment.is_turn:
                self.assertEqual(segment.turn_delta, outer_turn)
                self.assertEqual(segment.distance, 0.0)
            else:
                self.assertIn(segment.turn_delta, (Degree(45), Degree(-45)))
                self.assertEqual(segment.distance, 1.0)

    def test_leaf_colors_split_range(self):
        """Test leaf colors start each equal slice of the color range."""
        start, end = Color.gray(0.0), Color.gray(240.0)
        leaves = [s for s in dragon(2, start=start, end=end) if not s.is_turn]
        self.assertEqual([leaf.color.red for leaf in leaves], [0.0, 60.0, 120.0, 180.0])

    def test_colors_monotonic_increasing(self):
        """Test colors never decrease along an increasing range."""
        segments = dragon(8)
        for previous, current in zip(segments, segments[1:]):
            for before, after in zip(previous.color, current.color):
                self.assertLessEqual(before, after)

    def test_colors_monotonic_decreasing(self):
        """Test colors never increase along a decreasing range."""
        segments = dragon(8, start=END, end=START)
        for previous, current in zip(segments, segments[1:]):
            for before, after in zip(previous.color, current.color):
                self.assertGreaterEqual(before, after)

    def test_custom_distance(self):
        """Test the leaf distance is configurable."""
        segments = dragon(3, distance=2.5)
        self.assertEqual({s.distance for s in segments if not s.is_turn}, {2.5})

    def test_negative_order(self):
        """Test a negative order is rejected."""
        with self.assertRaises(ValueError):
            dragon(-1)


class TestIterDragon(unittest.TestCase):
    """Test the explicit-stack generator."""

    @parameterized.expand([(order,) for order in range(10)])
    def test_matches_recursive_generator(self, order):
        """Test both generators produce the same sequence."""
        self.assertEqual(list(iter_dragon(order, OUTER_TURN, START, END)), dragon(order))

    def test_is_lazy(self):
        """Test segments are produced on demand."""
        iterator = iter_dragon(16, OUTER_TURN, START, END)
        self.assertEqual(next(iterator), Segment(Degree(45), 1.0, START, SegmentKind.LEAF))

    def test_negative_order_raises_on_call(self):
        """Test validation happens before iteration starts."""
        with self.assertRaises(ValueError):
            iter_dragon(-2, OUTER_TURN, START, END)


if __name__ == "__main__":
    unittest.main()

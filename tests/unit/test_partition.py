import dataclasses
import math
import unittest

from integrator.engine import IntervalPartition, InvalidBoundsError, InvalidPartitionCountError, QuadratureError


class IntervalPartitionTestCase(unittest.TestCase):
    def test_create_accepts_valid_parameters(self) -> None:
        partition = IntervalPartition.create(0, 1, 4)

        self.assertEqual(partition.lower, 0.0)
        self.assertEqual(partition.upper, 1.0)
        self.assertEqual(partition.count, 4)
        self.assertIsInstance(partition.lower, float)

    def test_rejects_non_increasing_bounds(self) -> None:
        for lower, upper in [(1.0, 1.0), (2.0, 1.0), (-1.0, -3.0), (0.0, -0.0)]:
            with self.subTest(lower=lower, upper=upper):
                with self.assertRaises(InvalidBoundsError):
                    IntervalPartition.create(lower, upper, 2)

    def test_rejects_nan_bounds(self) -> None:
        with self.assertRaises(InvalidBoundsError):
            IntervalPartition.create(math.nan, 1.0, 2)
        with self.assertRaises(InvalidBoundsError):
            IntervalPartition.create(0.0, math.nan, 2)

    def test_rejects_non_numeric_bounds(self) -> None:
        with self.assertRaises(InvalidBoundsError):
            IntervalPartition.create("abc", 1.0, 2)

    def test_rejects_non_positive_count(self) -> None:
        for count in (0, -2, -1):
            with self.subTest(count=count):
                with self.assertRaises(InvalidPartitionCountError) as ctx:
                    IntervalPartition.create(0.0, 1.0, count)
                self.assertIn("positive", str(ctx.exception))

    def test_rejects_odd_count(self) -> None:
        for count in (1, 3, 999):
            with self.subTest(count=count):
                with self.assertRaises(InvalidPartitionCountError) as ctx:
                    IntervalPartition.create(0.0, 1.0, count)
                self.assertIn("even", str(ctx.exception))

    def test_rejects_non_integral_count(self) -> None:
        for count in (2.0, True, "4", None):
            with self.subTest(count=count):
                with self.assertRaises(InvalidPartitionCountError):
                    IntervalPartition.create(0.0, 1.0, count)

    def test_bounds_are_checked_before_count(self) -> None:
        with self.assertRaises(InvalidBoundsError):
            IntervalPartition.create(1.0, 0.0, 3)

    def test_errors_share_base_class(self) -> None:
        self.assertTrue(issubclass(InvalidBoundsError, QuadratureError))
        self.assertTrue(issubclass(InvalidPartitionCountError, QuadratureError))
        self.assertTrue(issubclass(QuadratureError, ValueError))

    def test_direct_construction_validates(self) -> None:
        with self.assertRaises(InvalidPartitionCountError):
            IntervalPartition(0.0, 1.0, 5)

    def test_partition_is_immutable(self) -> None:
        partition = IntervalPartition.create(0.0, 1.0, 2)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            partition.count = 4  # type: ignore[misc]

    def test_step_and_points(self) -> None:
        partition = IntervalPartition.create(0.0, 1.0, 4)

        self.assertEqual(partition.step, 0.25)
        self.assertEqual(list(partition.points()), [0.0, 0.25, 0.5, 0.75, 1.0])

    def test_last_point_is_exact_upper_bound(self) -> None:
        partition = IntervalPartition.create(0.1, 0.7, 6)
        points = list(partition.points())

        self.assertEqual(len(points), 7)
        self.assertEqual(points[0], 0.1)
        self.assertEqual(points[-1], 0.7)
        self.assertEqual(partition.abscissa(0), partition.lower)
        self.assertEqual(partition.abscissa(6), partition.upper)
        self.assertEqual(partition.abscissa(3), 0.1 + 3 * partition.step)


if __name__ == "__main__":
    unittest.main()

import unittest

from tapegrad.domain import (
    DeviceMismatchError,
    DeviceNotSupportedError,
    InvalidInputError,
    NoComputableGradientError,
    NoGradientError,
    NotScalarError,
    ShapeMismatchError,
    UngradableOperationError,
)


class TestErrorHierarchy(unittest.TestCase):
    def test_builtin_bases(self):
        self.assertTrue(issubclass(InvalidInputError, TypeError))
        self.assertTrue(issubclass(ShapeMismatchError, ValueError))
        for cls in (
            NotScalarError,
            NoGradientError,
            NoComputableGradientError,
            UngradableOperationError,
            DeviceNotSupportedError,
            DeviceMismatchError,
        ):
            with self.subTest(cls=cls.__name__):
                self.assertTrue(issubclass(cls, RuntimeError))


class TestErrorMessages(unittest.TestCase):
    def test_no_gradient(self):
        self.assertEqual(str(NoGradientError("w")), "No gradient found for `w`.")

    def test_no_computable_gradient(self):
        e = NoComputableGradientError("x")
        self.assertEqual(str(e), "The tensor `x` has no computable gradients.")

    def test_ungradable(self):
        e = UngradableOperationError("frobnicate")
        self.assertEqual(str(e), "Impossible to compute gradient of `frobnicate`.")
        self.assertEqual(e.op, "frobnicate")

    def test_not_scalar_keeps_shape(self):
        e = NotScalarError([2, 3])
        self.assertEqual(e.shape, (2, 3))
        self.assertIn("(2, 3)", str(e))

    def test_invalid_input_records_type(self):
        e = InvalidInputError(object(), op="add")
        self.assertIs(e.value_type, object)
        self.assertIn("'add'", str(e))
        self.assertIn("'object'", str(e))

    def test_shape_mismatch_prefix(self):
        e = ShapeMismatchError("matmul", "inner dimensions differ")
        self.assertEqual(str(e), "matmul: inner dimensions differ")
        self.assertEqual(e.op, "matmul")

    def test_device_errors(self):
        e = DeviceMismatchError("cpu", "cuda:0")
        self.assertEqual(str(e), "Device mismatch: 'cpu' vs 'cuda:0'.")
        e = DeviceNotSupportedError("array allocation", "cuda:0")
        self.assertEqual(e.device, "cuda:0")
        self.assertIn("array allocation", str(e))


if __name__ == "__main__":
    unittest.main()

import unittest

import numpy as np

from tapegrad import Operation, ShapeMismatchError, Tensor


class TestElementwiseForward(unittest.TestCase):
    def setUp(self) -> None:
        self.x_np = np.array([0.25, 0.5, 0.75])
        self.x = Tensor(self.x_np, name="x")

    def test_matches_numpy(self):
        cases = {
            "exp": np.exp, "exp2": np.exp2, "expm1": np.expm1,
            "log": np.log, "log1p": np.log1p, "log2": np.log2, "log10": np.log10,
            "sqrt": np.sqrt, "abs": np.abs,
            "sin": np.sin, "cos": np.cos, "tan": np.tan,
            "asin": np.arcsin, "acos": np.arccos, "atan": np.arctan,
            "radians": np.radians, "sinc": np.sinc,
            "sinh": np.sinh, "cosh": np.cosh, "tanh": np.tanh,
            "asinh": np.arcsinh, "atanh": np.arctanh,
            "trunc": np.trunc, "floor": np.floor, "ceil": np.ceil,
        }
        for op, ref in cases.items():
            with self.subTest(op=op):
                out = getattr(self.x, op)()
                np.testing.assert_allclose(out.to_numpy(), ref(self.x_np))
                self.assertIs(out.tape.operation, Operation(op))

    def test_rsqrt_and_acosh(self):
        np.testing.assert_allclose(self.x.rsqrt().to_numpy(), 1 / np.sqrt(self.x_np))
        np.testing.assert_allclose((self.x + 1).acosh().to_numpy(), np.arccosh(self.x_np + 1))

    def test_aliases_record_the_same_operation(self):
        self.assertEqual(self.x.arcsin().tape.name, "asin")
        self.assertEqual(self.x.arccos().tape.name, "acos")
        self.assertEqual(self.x.arctan().tape.name, "atan")
        self.assertEqual(self.x.arcsinh().tape.name, "asinh")
        self.assertEqual(self.x.arctanh().tape.name, "atanh")
        self.assertEqual((self.x + 1).arccosh().tape.name, "acosh")

    def test_arithmetic_operators(self):
        y = np.array([2.0, -1.0, 4.0])
        np.testing.assert_allclose((self.x + y).to_numpy(), self.x_np + y)
        np.testing.assert_allclose((self.x - y).to_numpy(), self.x_np - y)
        np.testing.assert_allclose((self.x * y).to_numpy(), self.x_np * y)
        np.testing.assert_allclose((self.x / y).to_numpy(), self.x_np / y)
        np.testing.assert_allclose((self.x**2).to_numpy(), self.x_np**2)
        np.testing.assert_allclose((abs(-self.x)).to_numpy(), self.x_np)

    def test_mod_follows_divisor_sign(self):
        out = Tensor([5.0, -5.0]) % 3
        np.testing.assert_allclose(out.to_numpy(), [2.0, 1.0])
        np.testing.assert_allclose((7 % Tensor([3.0])).to_numpy(), [1.0])

    def test_clip(self):
        out = Tensor([-2.0, 0.5, 3.0]).clip(-1, 1)
        np.testing.assert_allclose(out.to_numpy(), [-1.0, 0.5, 1.0])

    def test_arctan2(self):
        out = Tensor([1.0, -1.0]).arctan2([1.0, 1.0])
        np.testing.assert_allclose(out.to_numpy(), np.arctan2([1.0, -1.0], [1.0, 1.0]))

    def test_sigmoid(self):
        np.testing.assert_allclose(self.x.sigmoid().to_numpy(), 1 / (1 + np.exp(-self.x_np)))


class TestReductionsForward(unittest.TestCase):
    def setUp(self) -> None:
        self.a_np = np.arange(6.0).reshape(2, 3)
        self.a = Tensor(self.a_np)

    def test_sum(self):
        self.assertEqual(self.a.sum().shape, ())
        self.assertEqual(self.a.sum().item(), 15.0)
        self.assertEqual(self.a.sum(keepdim=True).shape, (1, 1))

    def test_sum_axis(self):
        np.testing.assert_allclose(self.a.sum_axis(0).to_numpy(), [3.0, 5.0, 7.0])
        self.assertEqual(self.a.sum_axis(1, keepdim=True).shape, (2, 1))
        self.assertEqual(self.a.sum_axis([0, 1]).shape, ())

    def test_mean(self):
        self.assertEqual(self.a.mean().item(), 2.5)

    def test_reshape(self):
        self.assertEqual(self.a.reshape((3, 2)).shape, (3, 2))
        self.assertEqual(self.a.reshape(-1).shape, (6,))


class TestLinearAlgebraForward(unittest.TestCase):
    def test_matmul(self):
        a = np.arange(6.0).reshape(2, 3)
        b = np.arange(12.0).reshape(3, 4)
        np.testing.assert_allclose((Tensor(a) @ b).to_numpy(), a @ b)
        np.testing.assert_allclose((a @ Tensor(b)).to_numpy(), a @ b)

    def test_matmul_shape_errors(self):
        with self.assertRaises(ShapeMismatchError):
            Tensor(np.ones((2, 3))) @ np.ones((2, 3))
        with self.assertRaises(ShapeMismatchError):
            Tensor(1.0).matmul(np.ones(2))
        with self.assertRaises(ShapeMismatchError):
            Tensor(np.ones((2, 2, 3))).matmul(np.ones((3, 3, 1)))

    def test_shape_error_creates_no_output(self):
        a = Tensor(np.ones((2, 3)), requires_grad=True)
        with self.assertRaises(ShapeMismatchError):
            a.matmul(np.ones((2, 3)))
        self.assertIsNone(a.tape)

    def test_dot_and_outer(self):
        self.assertEqual(Tensor([1.0, 2.0]).dot([3.0, 4.0]).item(), 11.0)
        np.testing.assert_allclose(
            Tensor([1.0, 2.0]).outer([3.0, 4.0, 5.0]).to_numpy(), np.outer([1, 2], [3, 4, 5])
        )
        with self.assertRaises(ShapeMismatchError):
            Tensor([1.0, 2.0]).dot([1.0, 2.0, 3.0])
        with self.assertRaises(ShapeMismatchError):
            Tensor(np.ones((2, 2))).dot(np.ones((2, 2)))
        with self.assertRaises(ShapeMismatchError):
            Tensor(np.ones((2, 2))).outer([1.0])

    def test_square_matrix_operations(self):
        m = np.array([[4.0, 7.0], [2.0, 6.0]])
        t = Tensor(m)
        self.assertAlmostEqual(t.det().item(), 10.0)
        np.testing.assert_allclose(t.inv().to_numpy(), np.linalg.inv(m))
        with self.assertRaises(ShapeMismatchError):
            Tensor(np.ones((2, 3))).det()
        with self.assertRaises(ShapeMismatchError):
            Tensor(np.ones(3)).inv()

    def test_singular_inverse_raises(self):
        with self.assertRaises(np.linalg.LinAlgError):
            Tensor(np.ones((2, 2))).inv()

    def test_spectral_operations(self):
        m = np.array([[3.0, 0.0], [0.0, 1.0]])
        np.testing.assert_allclose(Tensor(m).svd().to_numpy(), [3.0, 1.0])
        self.assertAlmostEqual(Tensor(m).cond().item(), 3.0)
        self.assertEqual(Tensor(m).matrix_rank().item(), 2.0)
        self.assertEqual(Tensor(np.ones((2, 2))).matrix_rank().item(), 1.0)
        with self.assertRaises(ShapeMismatchError):
            Tensor([1.0, 2.0]).svd()

    def test_norm(self):
        self.assertAlmostEqual(Tensor([[3.0, 4.0]]).norm().item(), 5.0)

    def test_transpose(self):
        a = np.arange(24.0).reshape(2, 3, 4)
        self.assertEqual(Tensor(a).transpose().shape, (4, 3, 2))
        self.assertEqual(Tensor(a).transpose((1, 0, 2)).shape, (3, 2, 4))
        self.assertEqual(Tensor(np.ones((2, 5))).T.shape, (5, 2))


if __name__ == "__main__":
    unittest.main()

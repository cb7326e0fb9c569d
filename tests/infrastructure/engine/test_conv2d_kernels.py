import unittest

import numpy as np

from tapegrad.domain import ShapeMismatchError
from tapegrad.infrastructure.ops.conv2d import (
    conv2d_backward,
    conv2d_forward,
    conv2d_output_shape,
)


def conv2d_reference(x, w, stride, padding):
    n, c_in, h, wd = x.shape
    c_out, _, kh, kw = w.shape
    xp = np.pad(x, ((0, 0), (0, 0), (padding, padding), (padding, padding)))
    h_out = (h + 2 * padding - kh) // stride + 1
    w_out = (wd + 2 * padding - kw) // stride + 1
    out = np.zeros((n, c_out, h_out, w_out))
    for b in range(n):
        for o in range(c_out):
            for i in range(h_out):
                for j in range(w_out):
                    patch = xp[b, :, i * stride : i * stride + kh, j * stride : j * stride + kw]
                    out[b, o, i, j] = np.sum(patch * w[o])
    return out


class TestConv2dKernels(unittest.TestCase):
    def setUp(self) -> None:
        self.rng = np.random.default_rng(0)

    def test_forward_matches_naive_loops(self):
        for stride, padding in ((1, 0), (1, 1), (2, 1), (2, 0)):
            with self.subTest(stride=stride, padding=padding):
                x = self.rng.standard_normal((2, 3, 6, 5))
                w = self.rng.standard_normal((4, 3, 3, 2))
                out = conv2d_forward(x, w, stride, padding)
                np.testing.assert_allclose(out, conv2d_reference(x, w, stride, padding), atol=1e-10)

    def test_output_shape(self):
        self.assertEqual(conv2d_output_shape((1, 2, 5, 5), (3, 2, 3, 3), 1, 0), (1, 3, 3, 3))
        self.assertEqual(conv2d_output_shape((1, 2, 5, 5), (3, 2, 3, 3), 2, 1), (1, 3, 3, 3))

    def test_backward_is_adjoint_of_forward(self):
        # <conv(x, w), g> is linear in x and in w
        x = self.rng.standard_normal((1, 2, 5, 5))
        w = self.rng.standard_normal((3, 2, 3, 3))
        g = self.rng.standard_normal(conv2d_output_shape(x.shape, w.shape, 2, 1))
        grad_x, grad_w = conv2d_backward(x, w, g, 2, 1)
        self.assertEqual(grad_x.shape, x.shape)
        self.assertEqual(grad_w.shape, w.shape)
        self.assertAlmostEqual(float(np.sum(grad_x * x)), float(np.sum(conv2d_forward(x, w, 2, 1) * g)))
        self.assertAlmostEqual(float(np.sum(grad_w * w)), float(np.sum(conv2d_forward(x, w, 2, 1) * g)))

    def test_invalid_shapes_raise(self):
        with self.assertRaises(ShapeMismatchError):
            conv2d_output_shape((2, 5, 5), (1, 2, 3, 3), 1, 0)
        with self.assertRaises(ShapeMismatchError):
            conv2d_output_shape((1, 2, 5, 5), (1, 3, 3, 3), 1, 0)
        with self.assertRaises(ShapeMismatchError):
            conv2d_output_shape((1, 2, 2, 2), (1, 2, 3, 3), 1, 0)


if __name__ == "__main__":
    unittest.main()

import unittest

import numpy as np

from tapegrad import ShapeMismatchError, Tensor, format_graph, nn


class TestConv2dFunctional(unittest.TestCase):
    def test_identity_kernel(self):
        x = np.arange(16.0).reshape(1, 1, 4, 4)
        w = np.zeros((1, 1, 3, 3))
        w[0, 0, 1, 1] = 1.0
        out = nn.conv2d(x, w, padding=1)
        self.assertEqual(out.shape, (1, 1, 4, 4))
        np.testing.assert_allclose(out.to_numpy(), x)

    def test_box_filter_with_stride(self):
        x = np.ones((1, 2, 4, 4))
        w = np.ones((3, 2, 2, 2))
        out = nn.conv2d(x, w, strides=2)
        self.assertEqual(out.shape, (1, 3, 2, 2))
        np.testing.assert_allclose(out.to_numpy(), np.full((1, 3, 2, 2), 8.0))

    def test_gradients_reach_input_and_filters(self):
        x = Tensor(np.ones((1, 1, 3, 3)), name="x", requires_grad=True)
        w = Tensor(np.ones((1, 1, 2, 2)), name="w", requires_grad=True)
        nn.conv2d(x, w).sum().backward()
        np.testing.assert_allclose(x.gradient[0, 0], [[1, 2, 1], [2, 4, 2], [1, 2, 1]])
        np.testing.assert_allclose(w.gradient, np.full((1, 1, 2, 2), 4.0))

    def test_graph_row(self):
        x = Tensor(np.ones((1, 1, 3, 3)), name="x")
        w = Tensor(np.ones((1, 1, 2, 2)), name="w")
        out = nn.conv2d(x, w, strides=1, padding=(0, 1), name="feature_map")
        self.assertEqual(
            format_graph(out).splitlines()[2].split(),
            ["feature_map", "conv2d", "[x,", "w,", "1,", "(0,", "1)]"],
        )

    def test_shape_errors(self):
        with self.assertRaises(ShapeMismatchError):
            nn.conv2d(np.ones((1, 3, 3)), np.ones((1, 1, 2, 2)))
        with self.assertRaises(ShapeMismatchError):
            nn.conv2d(np.ones((1, 2, 3, 3)), np.ones((1, 1, 2, 2)))


if __name__ == "__main__":
    unittest.main()

import unittest

import numpy as np

from tapegrad import Tensor, nn


def _sigmoid(x):
    return 1.0 / (1.0 + np.exp(-x))


class TestActivationValues(unittest.TestCase):
    def setUp(self) -> None:
        self.x_np = np.array([[-2.0, -0.5, 0.0], [0.5, 1.0, 3.0]])
        self.x = Tensor(self.x_np, name="x")

    def test_relu(self):
        out = nn.relu(self.x)
        np.testing.assert_allclose(out.to_numpy(), np.maximum(self.x_np, 0))
        self.assertEqual(out.name, "out_relu")
        self.assertEqual(out.tape.name, "relu")

    def test_selu(self):
        alpha, scale = 1.67326, 1.0507
        expected = scale * np.where(self.x_np > 0, self.x_np, alpha * (np.exp(self.x_np) - 1))
        np.testing.assert_allclose(nn.selu(self.x).to_numpy(), expected)

    def test_celu(self):
        alpha = 0.5
        expected = np.maximum(0, self.x_np) + np.minimum(0, alpha * (np.exp(self.x_np / alpha) - 1))
        np.testing.assert_allclose(nn.celu(self.x, alpha=alpha).to_numpy(), expected)

    def test_celu_rejects_zero_alpha(self):
        with self.assertRaises(ValueError):
            nn.celu(self.x, alpha=0)

    def test_sigmoid_and_silu(self):
        np.testing.assert_allclose(nn.sigmoid(self.x).to_numpy(), _sigmoid(self.x_np))
        np.testing.assert_allclose(
            nn.silu(self.x, beta=2.0).to_numpy(), self.x_np * _sigmoid(2.0 * self.x_np)
        )

    def test_softsign(self):
        np.testing.assert_allclose(
            nn.softsign(self.x).to_numpy(), self.x_np / (np.abs(self.x_np) + 1)
        )

    def test_softmax_rows_sum_to_one(self):
        out = nn.softmax(self.x).to_numpy()
        e = np.exp(self.x_np - self.x_np.max(axis=-1, keepdims=True))
        np.testing.assert_allclose(out, e / e.sum(axis=-1, keepdims=True))
        np.testing.assert_allclose(out.sum(axis=-1), [1.0, 1.0])

    def test_softmax_is_stable_for_large_inputs(self):
        out = nn.softmax(Tensor([1000.0, 1001.0])).to_numpy()
        self.assertTrue(np.all(np.isfinite(out)))
        np.testing.assert_allclose(out, _sigmoid(np.array([-1.0, 1.0])))

    def test_softplus_exponential_mish(self):
        softplus = np.log(np.exp(self.x_np) + 1)
        np.testing.assert_allclose(nn.softplus(self.x).to_numpy(), softplus)
        np.testing.assert_allclose(nn.exponential(self.x).to_numpy(), np.exp(self.x_np))
        np.testing.assert_allclose(nn.mish(self.x).to_numpy(), self.x_np * np.tanh(softplus))

    def test_linear_returns_input(self):
        self.assertIs(nn.linear(self.x), self.x)

    def test_accepts_raw_values(self):
        out = nn.relu([-1.0, 2.0])
        np.testing.assert_allclose(out.to_numpy(), [0.0, 2.0])

    def test_composite_names_fall_back_to_input(self):
        self.assertEqual(nn.softplus(self.x).name, "x")
        self.assertEqual(nn.softmax(self.x, name="probs").name, "probs")


class TestActivationGradients(unittest.TestCase):
    def _numeric(self, fn, x, eps=1e-6):
        grad = np.zeros_like(x)
        for i in range(x.size):
            plus, minus = x.copy(), x.copy()
            plus.flat[i] += eps
            minus.flat[i] -= eps
            grad.flat[i] = (fn(Tensor(plus)).to_numpy().sum() - fn(Tensor(minus)).to_numpy().sum()) / (
                2 * eps
            )
        return grad

    def test_composite_activation_gradients(self):
        x_np = np.array([-1.5, -0.2, 0.4, 1.3])
        weights = Tensor([0.3, -1.2, 0.8, 2.0])
        cases = {
            "sigmoid": nn.sigmoid,
            "silu": lambda t: nn.silu(t, beta=1.5),
            "softsign": nn.softsign,
            "softplus": nn.softplus,
            "mish": nn.mish,
            "softmax": nn.softmax,
        }
        for label, fn in cases.items():
            with self.subTest(activation=label):
                x = Tensor(x_np.copy(), requires_grad=True)
                (fn(x) * weights).sum().backward()
                np.testing.assert_allclose(
                    x.gradient,
                    self._numeric(lambda t: fn(t) * weights, x_np),
                    rtol=1e-5,
                    atol=1e-7,
                )

    def test_relu_gradient_masks_negatives(self):
        x = Tensor([-1.0, 2.0, 3.0], requires_grad=True)
        nn.relu(x).sum().backward()
        np.testing.assert_allclose(x.gradient, [0.0, 1.0, 1.0])


if __name__ == "__main__":
    unittest.main()

import unittest

import numpy as np

from tapegrad import Device, DeviceMismatchError, Tensor, nn


def _cuda_available() -> bool:
    try:
        import cupy

        return cupy.cuda.runtime.getDeviceCount() > 0
    except Exception:
        return False


class TestCudaParity(unittest.TestCase):
    def setUp(self) -> None:
        if not _cuda_available():
            self.skipTest("CUDA not available")
        self.rng = np.random.default_rng(7)

    def _pair(self, arr):
        cpu = Tensor(arr.copy(), requires_grad=True)
        gpu = Tensor(arr.copy(), requires_grad=True, device="cuda:0")
        return cpu, gpu

    def test_placement(self):
        t = Tensor([1.0, 2.0], device="cuda:0")
        self.assertTrue(t.is_on_accelerator())
        self.assertEqual(t.device, Device("cuda:0"))
        np.testing.assert_allclose(t.to_numpy(), [1.0, 2.0])
        self.assertFalse(t.to("cpu").is_on_accelerator())

    def test_elementwise_chain_gradients_match(self):
        x_cpu, x_gpu = self._pair(self.rng.uniform(0.5, 2.0, (3, 4)))
        for x in (x_cpu, x_gpu):
            (x.log() * x.sin() + x.sqrt()).sum().backward()
        np.testing.assert_allclose(x_gpu.gradient.get(), x_cpu.gradient, rtol=1e-10)

    def test_matmul_and_losses_match(self):
        a_cpu, a_gpu = self._pair(self.rng.standard_normal((3, 4)))
        w = self.rng.standard_normal((4, 2))
        target = self.rng.uniform(0.1, 0.9, (3, 2))
        for a, device in ((a_cpu, "cpu"), (a_gpu, "cuda:0")):
            probs = nn.sigmoid(a @ Tensor(w, device=device))
            nn.binary_cross_entropy(probs, Tensor(target, device=device)).backward()
        np.testing.assert_allclose(a_gpu.gradient.get(), a_cpu.gradient, rtol=1e-8)

    def test_conv2d_gradients_match(self):
        x_cpu, x_gpu = self._pair(self.rng.standard_normal((1, 2, 5, 5)))
        w = self.rng.standard_normal((3, 2, 3, 3))
        for x, device in ((x_cpu, "cpu"), (x_gpu, "cuda:0")):
            nn.conv2d(x, Tensor(w, device=device), strides=2, padding=1).sum().backward()
        np.testing.assert_allclose(x_gpu.gradient.get(), x_cpu.gradient, rtol=1e-8)

    def test_indexed_read_scatter(self):
        _, x = self._pair(np.arange(4.0))
        x[Tensor([0, 0, 3], device="cuda:0")].sum().backward()
        np.testing.assert_allclose(x.gradient.get(), [2.0, 0.0, 0.0, 1.0])

    def test_mixing_devices_raises(self):
        with self.assertRaises(DeviceMismatchError):
            Tensor([1.0]) + Tensor([1.0], device="cuda:0")


if __name__ == "__main__":
    unittest.main()

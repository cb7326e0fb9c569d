import unittest
from unittest import mock

import numpy as np

from tapegrad import Device, Tensor
from tapegrad.infrastructure import _config


class TestConfigDefaults(unittest.TestCase):
    def test_default_dtype_is_floating(self):
        self.assertEqual(_config.get_default_dtype().kind, "f")

    def test_dtype_override(self):
        with mock.patch.object(_config, "_DEFAULT_DTYPE", "float32"):
            self.assertEqual(_config.get_default_dtype(), np.float32)
            self.assertEqual(Tensor([1, 2]).dtype, np.float32)

    def test_non_floating_dtype_rejected(self):
        with mock.patch.object(_config, "_DEFAULT_DTYPE", "int32"):
            with self.assertRaises(ValueError):
                _config.get_default_dtype()

    def test_device_override(self):
        with mock.patch.object(_config, "_DEFAULT_DEVICE", "cuda:1"):
            self.assertEqual(_config.get_default_device(), Device("cuda:1"))

    def test_invalid_device_rejected(self):
        with mock.patch.object(_config, "_DEFAULT_DEVICE", "tpu"):
            with self.assertRaises(ValueError):
                _config.get_default_device()


if __name__ == "__main__":
    unittest.main()

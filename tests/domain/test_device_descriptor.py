import unittest

from tapegrad.domain.device import Device, DeviceType


class TestDevice(unittest.TestCase):
    def test_cpu(self):
        d = Device("cpu")
        self.assertTrue(d.is_cpu())
        self.assertFalse(d.is_cuda())
        self.assertEqual(d.type, DeviceType.CPU)
        self.assertIsNone(d.index)
        self.assertEqual(str(d), "cpu")

    def test_cuda_with_index(self):
        d = Device("cuda:1")
        self.assertTrue(d.is_cuda())
        self.assertEqual(d.index, 1)
        self.assertEqual(str(d), "cuda:1")

    def test_bare_cuda_means_index_zero(self):
        self.assertEqual(Device("cuda"), Device("cuda:0"))

    def test_invalid_strings_raise(self):
        for bad in ("gpu", "cuda:", "cuda:-1", "CPU", "cuda:x", ""):
            with self.subTest(device=bad):
                with self.assertRaises(ValueError):
                    Device(bad)

    def test_equality_and_hash(self):
        self.assertEqual(Device("cpu"), Device("cpu"))
        self.assertNotEqual(Device("cpu"), Device("cuda:0"))
        self.assertNotEqual(Device("cuda:0"), Device("cuda:1"))
        self.assertEqual(len({Device("cpu"), Device("cpu"), Device("cuda:0")}), 2)

    def test_coerce(self):
        d = Device("cuda:0")
        self.assertIs(Device.coerce(d), d)
        self.assertEqual(Device.coerce("cpu"), Device("cpu"))
        self.assertEqual(Device.coerce(None), Device("cpu"))
        self.assertEqual(Device.coerce(None, default="cuda:2"), Device("cuda:2"))

    def test_repr(self):
        self.assertEqual(repr(Device("cuda:3")), "Device('cuda:3')")


if __name__ == "__main__":
    unittest.main()

import unittest

from tapegrad.domain import Operation


class TestOperationCatalogue(unittest.TestCase):
    def test_values_are_unique(self):
        values = [op.value for op in Operation]
        self.assertEqual(len(values), len(set(values)))

    def test_str_is_value(self):
        self.assertEqual(str(Operation.OFFSET_GET), "offsetGet")
        self.assertEqual(str(Operation.SUM_AXIS), "sum_axis")
        self.assertEqual(f"{Operation.ADD}", "add")

    def test_lookup(self):
        self.assertIs(Operation.lookup("matmul"), Operation.MATMUL)
        self.assertIs(Operation.lookup(Operation.CCE), Operation.CCE)
        self.assertIsNone(Operation.lookup("my_custom_op"))

    def test_members_compare_equal_to_their_names(self):
        self.assertEqual(Operation.EXP, "exp")

    def test_catalogue_contents(self):
        expected = {
            "add", "subtract", "multiply", "divide", "power", "mod", "negative",
            "exp", "exp2", "expm1", "log", "log1p", "log2", "log10",
            "sqrt", "rsqrt", "abs",
            "sin", "cos", "tan", "asin", "acos", "atan", "radians", "sinc",
            "sinh", "cosh", "tanh", "asinh", "acosh", "atanh", "arctan2",
            "clip", "trunc", "floor", "ceil",
            "matmul", "dot", "outer", "det", "inv", "svd", "norm",
            "matrix_rank", "cond", "transpose",
            "sum", "sum_axis", "mean", "reshape", "offsetGet",
            "relu", "selu", "celu", "binary_cross_entropy", "cce", "conv2d",
        }
        self.assertEqual({op.value for op in Operation}, expected)


if __name__ == "__main__":
    unittest.main()

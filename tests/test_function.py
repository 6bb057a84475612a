"""
Unit tests for function module.

Tests binding, coercion, null propagation and evaluation of the
geohash(latitude, longitude) query function.
"""

import unittest
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

from returns.result import Failure, Success

from geohash_udf.api.config import FunctionConfig
from geohash_udf.api.core.enums import ArgumentType
from geohash_udf.api.core.exceptions import (
    ArgumentCountError,
    ArgumentError,
    ArgumentTypeError,
    CoordinateRangeError,
)
from geohash_udf.api.function import (
    GeohashFunction,
    MissingInput,
    NumberInput,
    StringInput,
    bind_argument,
    geohash,
)
from geohash_udf.api.geohash import encode


class TestInputVariants(unittest.TestCase):
    """Test suite for StringInput, NumberInput and MissingInput"""

    def test_string_input_parses_numbers(self):
        """Test parsing text to double"""
        binding = StringInput(0)
        self.assertEqual(binding.coerce("45.5"), Success(45.5))
        self.assertEqual(binding.coerce(" -74.006 "), Success(-74.006))
        self.assertEqual(binding.coerce(b"12"), Success(12.0))

    def test_string_input_missing_values(self):
        """Test null and missing sentinels"""
        binding = StringInput(0)
        self.assertEqual(binding.coerce(None), Success(None))
        self.assertEqual(binding.coerce(""), Success(None))
        self.assertEqual(binding.coerce("NA"), Success(None))
        self.assertEqual(binding.coerce("  NA "), Success(None))

    def test_string_input_unparseable(self):
        """Test that non-numeric text is a failure"""
        result = StringInput(1).coerce("north")
        self.assertIsInstance(result, Failure)
        self.assertIn("Argument 1", result.failure())

    def test_number_input(self):
        """Test numeric coercion"""
        binding = NumberInput(0)
        self.assertEqual(binding.coerce(3), Success(3.0))
        self.assertEqual(binding.coerce(2.5), Success(2.5))
        self.assertEqual(binding.coerce(Decimal("1.25")), Success(1.25))
        self.assertEqual(binding.coerce(None), Success(None))
        self.assertIsInstance(binding.coerce("1.0"), Failure)
        self.assertIsInstance(binding.coerce(True), Failure)

    def test_missing_input_always_null(self):
        """Test that void arguments are always null"""
        binding = MissingInput(0)
        self.assertEqual(binding.coerce(None), Success(None))
        self.assertEqual(binding.coerce(5.0), Success(None))


class TestBindArgument(unittest.TestCase):
    """Test suite for bind_argument"""

    def test_binds_string_types(self):
        """Test string-like types bind to StringInput"""
        for argument_type in ("string", "varchar", "char", "STRING", ArgumentType.STRING):
            self.assertIsInstance(bind_argument(0, argument_type), StringInput)

    def test_binds_floating_types(self):
        """Test floating-point types bind to NumberInput"""
        for argument_type in ("double", "float", ArgumentType.DOUBLE):
            self.assertIsInstance(bind_argument(0, argument_type), NumberInput)

    def test_binds_void(self):
        """Test the void type binds to MissingInput"""
        self.assertIsInstance(bind_argument(1, "void"), MissingInput)

    def test_passes_sentinels(self):
        """Test that custom sentinels reach the string variant"""
        binding = bind_argument(0, "string", ("NULL",))
        self.assertEqual(binding.missing_sentinels, ("NULL",))

    def test_rejects_other_types(self):
        """Test that unsupported types raise ArgumentTypeError"""
        for argument_type in ("int", "bigint", "boolean", "array", "struct"):
            with self.assertRaises(ArgumentTypeError) as context:
                bind_argument(1, argument_type)
            self.assertEqual(context.exception.index, 1)
            self.assertEqual(context.exception.type_name, argument_type)

    def test_rejects_unknown_type_name(self):
        """Test that unknown type names raise ArgumentTypeError"""
        with self.assertRaises(ArgumentTypeError) as context:
            bind_argument(0, "geometry")
        self.assertEqual(context.exception.type_name, "geometry")


class TestGeohashFunctionInitialize(unittest.TestCase):
    """Test suite for GeohashFunction.initialize"""

    def setUp(self):
        """Set up test fixtures"""
        self.function = GeohashFunction()

    def test_initialize_binds_arguments(self):
        """Test successful binding"""
        self.function.initialize(["string", "double"])
        self.assertTrue(self.function.is_initialized)
        latitude, longitude = self.function.bindings
        self.assertIsInstance(latitude, StringInput)
        self.assertIsInstance(longitude, NumberInput)

    def test_initialize_wrong_arity(self):
        """Test that anything but two arguments is rejected"""
        for argument_types in ([], ["string"], ["string", "string", "string"]):
            with self.assertRaises(ArgumentCountError) as context:
                self.function.initialize(argument_types)
            self.assertEqual(context.exception.given, len(argument_types))
        self.assertFalse(self.function.is_initialized)

    def test_initialize_wrong_type(self):
        """Test that unsupported types are rejected at bind time"""
        with self.assertRaises(ArgumentTypeError) as context:
            self.function.initialize(["string", "int"])
        self.assertEqual(context.exception.index, 1)

        with self.assertRaises(ArgumentTypeError) as context:
            self.function.initialize(["map", "double"])
        self.assertEqual(context.exception.index, 0)

    def test_evaluate_before_initialize(self):
        """Test that evaluating an unbound function fails"""
        with self.assertRaises(ArgumentError):
            self.function.evaluate(1.0, 2.0)

    def test_metadata(self):
        """Test name, determinism and display string"""
        self.assertEqual(self.function.name, "geohash")
        self.assertTrue(GeohashFunction.deterministic)
        self.assertEqual(self.function.display_string(["lat", "lng"]), "geohash(lat, lng)")
        self.assertIn("output_length=4", repr(self.function))


class TestGeohashFunctionEvaluate(unittest.TestCase):
    """Test suite for GeohashFunction.evaluate"""

    def setUp(self):
        """Set up string- and double-typed functions"""
        self.strings = GeohashFunction()
        self.strings.initialize(["string", "string"])
        self.doubles = GeohashFunction()
        self.doubles.initialize(["double", "double"])

    def test_default_length_is_four(self):
        """Test the default four-character output"""
        self.assertEqual(self.doubles.evaluate(45.0, 180.0), "zbpb")
        self.assertEqual(self.strings.evaluate("45.0", "180.0"), "zbpb")
        self.assertEqual(self.doubles.evaluate(0, 0), "s000")

    def test_string_and_double_agree(self):
        """Test that both input variants give the same geohash"""
        self.assertEqual(self.strings.evaluate("48.8566", "2.3522"), self.doubles.evaluate(48.8566, 2.3522))

    def test_result_matches_codec_prefix(self):
        """Test that output is the codec's geohash truncated to the length"""
        self.assertEqual(self.doubles.evaluate(-33.8688, 151.2093), encode(-33.8688, 151.2093, 12)[:4])

    def test_null_propagation(self):
        """Test that a null on either side gives None"""
        for function in (self.strings, self.doubles):
            self.assertIsNone(function.evaluate(None, 5.0 if function is self.doubles else "5.0"))
            self.assertIsNone(function.evaluate(5.0 if function is self.doubles else "5.0", None))
            self.assertIsNone(function.evaluate(None, None))

    def test_missing_sentinels(self):
        """Test that empty strings and NA give None"""
        self.assertIsNone(self.strings.evaluate("", "10.0"))
        self.assertIsNone(self.strings.evaluate("10.0", "NA"))

    def test_unparseable_string(self):
        """Test that non-numeric text gives None"""
        self.assertIsNone(self.strings.evaluate("north", "10.0"))

    def test_wrong_runtime_type(self):
        """Test that a non-number value for a double argument gives None"""
        self.assertIsNone(self.doubles.evaluate("10.0", 10.0))

    def test_void_argument(self):
        """Test that a void-typed argument always gives None"""
        function = GeohashFunction()
        function.initialize(["void", "double"])
        self.assertIsNone(function.evaluate(1.0, 2.0))

    def test_out_of_range_strict(self):
        """Test that out-of-range coordinates raise by default"""
        with self.assertRaises(CoordinateRangeError):
            self.doubles.evaluate(100.0, 0.0)
        with self.assertRaises(CoordinateRangeError):
            self.strings.evaluate("nan", "0")

    def test_out_of_range_lenient(self):
        """Test that lenient functions map range errors to None"""
        function = GeohashFunction(FunctionConfig(strict_range=False))
        function.initialize(["double", "double"])
        with self.assertLogs("geohash_udf.api.function", level="WARNING"):
            self.assertIsNone(function.evaluate(0.0, 200.0))

    def test_configurable_length(self):
        """Test output length from configuration"""
        function = GeohashFunction(FunctionConfig(output_length=7))
        function.initialize(["double", "double"])
        self.assertEqual(function.evaluate(48.8566, 2.3522), "u09tvw0")

        function = GeohashFunction(FunctionConfig(output_length=1))
        function.initialize(["double", "double"])
        self.assertEqual(function.evaluate(90.0, 0.0), "u")

    def test_custom_sentinels(self):
        """Test configured missing sentinels"""
        function = GeohashFunction(FunctionConfig(missing_sentinels=("-999",)))
        function.initialize(["string", "string"])
        self.assertIsNone(function.evaluate("-999", "0"))
        # "NA" is no longer a sentinel but still not a number
        self.assertIsNone(function.evaluate("NA", "0"))
        # Without the custom sentinel -999 is an out-of-range latitude
        with self.assertRaises(CoordinateRangeError):
            self.strings.evaluate("-999", "0")

    def test_evaluate_row(self):
        """Test row evaluation"""
        self.assertEqual(self.doubles.evaluate_row([45.0, 180.0]), "zbpb")
        self.assertEqual(self.doubles.evaluate_row((45.0, 180.0)), "zbpb")
        with self.assertRaises(ArgumentCountError):
            self.doubles.evaluate_row([45.0])

    def test_concurrent_evaluation(self):
        """Test that one bound function can serve many threads"""
        rows = [(lat / 10.0, lon / 10.0) for lat in range(-900, 901, 45) for lon in range(-1800, 1801, 90)]
        expected = [self.doubles.evaluate(lat, lon) for lat, lon in rows]

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(lambda row: self.doubles.evaluate(*row), rows))

        self.assertEqual(results, expected)


class TestGeohashConvenience(unittest.TestCase):
    """Test suite for the geohash convenience function"""

    def test_numbers(self):
        """Test numeric input"""
        self.assertEqual(geohash(0.0, 0.0), "s000")

    def test_strings_and_length(self):
        """Test string input with custom length"""
        self.assertEqual(geohash("48.8566", "2.3522", length=7), "u09tvw0")

    def test_nulls(self):
        """Test null propagation"""
        self.assertIsNone(geohash(None, 5.0))
        self.assertIsNone(geohash(5.0, None))
        self.assertIsNone(geohash(None, None))
        self.assertIsNone(geohash("NA", "1"))

    def test_unsupported_values(self):
        """Test that unsupported Python types are rejected"""
        with self.assertRaises(ArgumentTypeError):
            geohash([1.0], 2.0)
        with self.assertRaises(ArgumentTypeError):
            geohash(True, 2.0)


if __name__ == "__main__":
    unittest.main()

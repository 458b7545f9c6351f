"""
Test suite for TitanInt arithmetic

Addition, subtraction, multiplication, truncating division and modulus,
checked against known scenarios and against Python's native ints.
"""

import itertools

import pytest

from titanint import TitanInt, parse, ZERO, ONE, DivisionByZero, TitanIntError


SAMPLES = [
    "0", "1", "-1", "7", "-7", "10", "-10", "999", "-1000", "12345", "-67890",
    "9223372036854775807", "-9223372036854775808",
    "12345678901234567890", "-98765432109876543210",
]


def truncating_divmod(a: int, b: int):
    """Reference quotient/remainder rounded toward zero"""
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - b * quotient


class TestAddition:
    """Test the additive engine on sums"""

    def test_carry_scenario(self):
        assert (parse("999") + parse("1")).to_string() == "1000"

    def test_mixed_signs(self):
        a = TitanInt.from_int(12345)
        b = parse("-67890")
        assert (a + b).to_string() == "-55545"
        assert (b + a).to_string() == "-55545"
        assert (parse("-5") + parse("10")).to_string() == "5"

    def test_both_negative(self):
        assert (parse("-999") + parse("-1")).to_string() == "-1000"

    def test_zero_sum_is_non_negative(self):
        result = parse("-12345") + parse("12345")
        assert result.sign is False
        assert result.to_string() == "0"

    def test_large_addition(self):
        num1 = parse("12345678901234567890")
        num2 = parse("98765432109876543210")
        assert (num1 + num2).to_string() == "111111111011111111100"

    def test_additive_identity(self):
        for text in SAMPLES:
            value = parse(text)
            assert value + ZERO == value
            assert ZERO + value == value
            assert value - ZERO == value

    def test_additive_inverse(self):
        for text in SAMPLES:
            value = parse(text)
            result = value + (-value)
            assert result.magnitude == "0"
            assert result.sign is False

    def test_commutative(self):
        for x, y in itertools.product(SAMPLES, repeat=2):
            assert parse(x) + parse(y) == parse(y) + parse(x)


class TestSubtraction:
    """Test the additive engine on differences"""

    def test_negative_result_scenario(self):
        assert (parse("5") - parse("10")).to_string() == "-5"

    def test_mixed_signs(self):
        assert (TitanInt.from_int(12345) - parse("-67890")).to_string() == "80235"
        assert (parse("-67890") - parse("12345")).to_string() == "-80235"

    def test_both_negative(self):
        assert (parse("-5") - parse("-10")).to_string() == "5"
        assert (parse("-10") - parse("-5")).to_string() == "-5"

    def test_borrow_chain(self):
        assert (parse("100000000000000000000") - ONE).to_string() == "99999999999999999999"

    def test_equal_magnitudes_give_zero(self):
        assert (parse("-77") - parse("-77")) == ZERO
        assert (parse("77") - parse("77")).sign is False

    def test_zero_minus_value(self):
        assert (ZERO - parse("5")).to_string() == "-5"
        assert (ZERO - parse("-5")).to_string() == "5"


class TestMultiplication:
    """Test the multiplicative engine"""

    def test_large_scenario(self):
        result = parse("123456789") * parse("-987654321")
        assert result.to_string() == "-121932631112635269"

    def test_sign_rules(self):
        assert (TitanInt.from_int(-5) * TitanInt.from_int(3)).to_string() == "-15"
        assert (parse("-5") * parse("-3")).to_string() == "15"
        assert (TitanInt.from_int(12345) * parse("-67890")).to_string() == "-838102050"

    def test_multiplicative_zero(self):
        for text in SAMPLES:
            result = parse(text) * ZERO
            assert result.magnitude == "0"
            assert result.sign is False
            assert (ZERO * parse(text)).sign is False

    def test_very_large_multiplication(self):
        num1 = parse("12345678901234567890")
        num2 = parse("98765432109876543210")
        assert (num1 * num2).to_string() == "1219326311370217952237463801111263526900"

    def test_commutative(self):
        for x, y in itertools.product(SAMPLES, repeat=2):
            assert parse(x) * parse(y) == parse(y) * parse(x)


class TestDivision:
    """Test truncating division and modulus"""

    def test_negative_dividend_scenario(self):
        assert (parse("-10") / parse("3")).to_string() == "-3"
        assert (parse("-10") % parse("3")).to_string() == "-1"

    def test_sign_combinations(self):
        assert (parse("10") / parse("-3")).to_string() == "-3"
        assert (parse("10") % parse("-3")).to_string() == "1"
        assert (parse("-10") / parse("-3")).to_string() == "3"
        assert (parse("-10") % parse("-3")).to_string() == "-1"

    def test_demo_values(self):
        a = TitanInt.from_int(12345)
        b = parse("-67890")
        assert (b / a).to_string() == "-5"
        assert (b % a).to_string() == "-6165"
        assert (a % TitanInt.from_int(100)).to_string() == "45"

    def test_small_dividend(self):
        """|dividend| < |divisor| gives zero quotient and the dividend back"""
        assert parse("-5") / parse("10") == ZERO
        assert (parse("-5") / parse("10")).sign is False
        assert (parse("-5") % parse("10")).to_string() == "-5"

    def test_exact_division_remainder_is_non_negative(self):
        result = parse("-144") % parse("12")
        assert result == ZERO
        assert result.sign is False

    def test_large_division(self):
        dividend = parse("999999999999999999999")
        divisor = parse("12345678901")
        assert (dividend / divisor).to_string() == "81000000730"
        assert (dividend % divisor).to_string() == "6654402269"
        assert (-dividend / divisor).to_string() == "-81000000730"
        assert (-dividend % divisor).to_string() == "-6654402269"

    def test_divmod(self):
        quotient, remainder = divmod(parse("-10"), parse("3"))
        assert quotient.to_string() == "-3"
        assert remainder.to_string() == "-1"

    def test_division_identity(self):
        """a == b * (a / b) + (a % b) with the remainder taking a's sign"""
        for x, y in itertools.product(SAMPLES, repeat=2):
            a, b = parse(x), parse(y)
            if b.is_zero():
                continue
            quotient = a / b
            remainder = a % b
            assert b * quotient + remainder == a
            assert remainder.is_zero() or remainder.sign == a.sign
            assert abs(remainder) < abs(b)

    def test_matches_native_truncation(self):
        for x, y in itertools.product(SAMPLES, repeat=2):
            if int(y) == 0:
                continue
            quotient, remainder = truncating_divmod(int(x), int(y))
            assert int(parse(x) / parse(y)) == quotient
            assert int(parse(x) % parse(y)) == remainder

    def test_division_by_zero(self):
        with pytest.raises(DivisionByZero, match="Division by zero") as exc_info:
            TitanInt.from_int(1) / TitanInt.from_int(0)
        assert exc_info.value.operation == "division"

    def test_modulus_by_zero(self):
        with pytest.raises(DivisionByZero, match="Modulus by zero") as exc_info:
            parse("-10") % ZERO
        assert exc_info.value.operation == "modulus"

    def test_divmod_by_zero(self):
        with pytest.raises(DivisionByZero, match="Divmod by zero") as exc_info:
            divmod(parse("10"), ZERO)
        assert exc_info.value.operation == "divmod"
        with pytest.raises(DivisionByZero):
            divmod(10, ZERO)

    def test_division_by_zero_is_zero_division_error(self):
        """Callers catching the builtin or the package base class both work"""
        with pytest.raises(ZeroDivisionError):
            ONE / ZERO
        with pytest.raises(TitanIntError):
            ONE % 0

    def test_failed_division_leaves_operands_untouched(self):
        a = parse("42")
        with pytest.raises(DivisionByZero):
            a / ZERO
        assert a.to_string() == "42"


class TestNativeIntOperands:
    """Test mixing TitanInt with plain ints"""

    def test_right_operand(self):
        assert (parse("999") + 1).to_string() == "1000"
        assert (parse("5") - 10).to_string() == "-5"
        assert (parse("123456789") * -987654321).to_string() == "-121932631112635269"
        assert (parse("-10") / 3).to_string() == "-3"
        assert (parse("-10") % 3).to_string() == "-1"

    def test_left_operand(self):
        assert (1 + parse("999")).to_string() == "1000"
        assert (5 - parse("10")).to_string() == "-5"
        assert (-5 * parse("3")).to_string() == "-15"
        assert (-10 / parse("3")).to_string() == "-3"
        assert (-10 % parse("3")).to_string() == "-1"
        assert divmod(-10, parse("3")) == (parse("-3"), parse("-1"))

    def test_results_are_titanint(self):
        assert isinstance(3 + parse("1"), TitanInt)
        assert isinstance(parse("1") * 3, TitanInt)

    def test_unsupported_operands(self):
        with pytest.raises(TypeError):
            parse("1") + "1"
        with pytest.raises(TypeError):
            parse("1") * 1.5
        with pytest.raises(TypeError):
            parse("1") + True


class TestUnaryAndCompound:
    """Test unary operators, increment/decrement and compound assignment"""

    def test_negation(self):
        a = TitanInt.from_int(12345)
        assert (-a).to_string() == "-12345"
        assert (-(-a)) == a
        assert (-ZERO).sign is False

    def test_unary_plus_and_abs(self):
        value = parse("-42")
        assert +value == value
        assert abs(value).to_string() == "42"
        assert abs(ZERO) == ZERO

    def test_increment_decrement(self):
        a = TitanInt.from_int(12345)
        assert a.increment().to_string() == "12346"
        assert a.increment().decrement() == a
        assert a.to_string() == "12345"

    def test_increment_across_zero(self):
        assert parse("-1").increment() == ZERO
        assert ZERO.decrement().to_string() == "-1"
        assert parse("999").increment().to_string() == "1000"
        assert parse("-1000").increment().to_string() == "-999"

    def test_compound_assignment_rebinds(self):
        """Compound forms produce a new value and leave the original alone"""
        original = parse("100")
        value = original
        value += parse("5")
        assert value.to_string() == "105"
        assert original.to_string() == "100"

        value -= 10
        assert value.to_string() == "95"
        value *= parse("-2")
        assert value.to_string() == "-190"
        value /= 7
        assert value.to_string() == "-27"
        value %= 5
        assert value.to_string() == "-2"

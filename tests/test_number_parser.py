"""Unit tests for weight, rep and pair parsing."""
from workout_parser.number_parser import NumberParser


class TestRepsAndWeights:
    """Tests for single-token parsing."""

    def test_parse_reps(self):
        assert NumberParser.parse_reps("8") == 8
        assert NumberParser.parse_reps("0") is None
        assert NumberParser.parse_reps("eight") is None
        assert NumberParser.parse_reps("8.5") is None

    def test_parse_weight(self):
        assert NumberParser.parse_weight("80") == 80.0
        assert NumberParser.parse_weight("62.5") == 62.5
        assert NumberParser.parse_weight(None) is None
        assert NumberParser.parse_weight("heavy") is None

    def test_parse_weight_rejects_overflow(self):
        assert NumberParser.parse_weight("9" * 400) is None

    def test_parse_rep_list(self):
        parser = NumberParser()
        assert parser.parse_rep_list("8/8/6") == [8, 8, 6]
        assert parser.parse_rep_list("10,8") == [10, 8]
        assert parser.parse_rep_list("12") == [12]

    def test_parse_rep_list_rejects_zero_and_empty(self):
        parser = NumberParser()
        assert parser.parse_rep_list("8/0/6") is None
        assert parser.parse_rep_list("") is None


class TestWeightRepsPair:
    """Tests for NumberParser.parse_weight_reps_pair."""

    def test_weight_with_unit(self):
        parser = NumberParser()
        assert parser.parse_weight_reps_pair("80kg 8") == (80.0, 8)
        assert parser.parse_weight_reps_pair(" 34kg 12 ") == (34.0, 12)
        assert parser.parse_weight_reps_pair("135lbs 5") == (135.0, 5)
        assert parser.parse_weight_reps_pair("60KG8") == (60.0, 8)

    def test_weight_without_unit(self):
        assert NumberParser().parse_weight_reps_pair("80 8") == (80.0, 8)

    def test_reps_only(self):
        parser = NumberParser()
        assert parser.parse_weight_reps_pair("8") == (None, 8)
        # Two digits without a separator are one rep count
        assert parser.parse_weight_reps_pair("12") == (None, 12)

    def test_reps_times_weight(self):
        parser = NumberParser()
        assert parser.parse_weight_reps_pair("8x80kg") == (80.0, 8)
        assert parser.parse_weight_reps_pair("8 × 82.5") == (82.5, 8)

    def test_rejects_non_positive_reps(self):
        parser = NumberParser()
        assert parser.parse_weight_reps_pair("80kg 0") is None
        assert parser.parse_weight_reps_pair("0") is None

    def test_rejects_other_shapes(self):
        parser = NumberParser()
        assert parser.parse_weight_reps_pair("80kg") is None
        assert parser.parse_weight_reps_pair("abc") is None
        assert parser.parse_weight_reps_pair("") is None


class TestFindNumbers:
    """Tests for number scanning used by the fallback matcher."""

    def test_positions_and_values(self):
        assert NumberParser().find_numbers("curl 25 10") == [(25.0, 5), (10.0, 8)]

    def test_units_and_decimals(self):
        assert NumberParser().find_numbers("press 42.5kg 6") == [(42.5, 6), (6.0, 13)]

    def test_no_numbers(self):
        assert NumberParser().find_numbers("warm up") == []

    def test_overflowing_number_gives_nothing(self):
        assert NumberParser().find_numbers("plank " + "9" * 400 + " 10") == []

    def test_has_weight_unit(self):
        parser = NumberParser()
        assert parser.has_weight_unit("bench 80KG 5")
        assert parser.has_weight_unit("bench 185lbs 5")
        assert not parser.has_weight_unit("burpees 10 12")

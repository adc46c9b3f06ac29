import pytest

from fuzzycoco.fuzzy_set import FuzzySet
from fuzzycoco.fuzzy_variable import FuzzyVariable, build_default_set_names
from fuzzycoco.named_list import NamedList
from fuzzycoco.types import MISSING_DATA_DOUBLE

TEMPERATURE = '"Temperature":{ "Cold":17.0, "Warm":20.0, "Hot":29.0 }'


@pytest.fixture
def temperature():
    return FuzzyVariable.load(TEMPERATURE)


def test_build_default_set_names():
    assert build_default_set_names(3, "x") == ["x.1", "x.2", "x.3"]
    assert build_default_set_names(0, "x") == []


def test_with_set_count():
    var = FuzzyVariable.with_set_count("x", 3)
    assert len(var) == 3
    assert [s.name for s in var.sets] == build_default_set_names(3, "x")


def test_load(temperature):
    assert temperature.name == "Temperature"
    assert [s.name for s in temperature.sets] == ["Cold", "Warm", "Hot"]
    assert [s.position for s in temperature.sets] == [17.0, 20.0, 29.0]


def test_describe_round_trip(temperature):
    assert FuzzyVariable.load(temperature.describe()) == temperature
    assert FuzzyVariable.load(str(temperature)) == temperature


def test_set_index_by_name(temperature):
    assert temperature.set_index_by_name("Warm") == 1
    with pytest.raises(KeyError):
        temperature.set_index_by_name("Freezing")


def test_set_sets_positions_errors(temperature):
    with pytest.raises(ValueError):
        temperature.set_sets_positions('{ "a":1.0, "b":2.0 }')
    with pytest.raises(ValueError):
        temperature.set_sets_positions(NamedList("a", 1.0))


def test_set_sets_positions_accepts_ints():
    var = FuzzyVariable.with_set_names("v", ["Low", "High"])
    var.set_sets_positions('{ "Low":1, "High":10 }')
    assert var.sets == [FuzzySet("Low", 1.0), FuzzySet("High", 10.0)]


def test_fuzzify_at_positions(temperature):
    for idx, s in enumerate(temperature.sets):
        assert temperature.fuzzify(idx, s.position) == 1.0


@pytest.mark.parametrize("value", [17.5, 18.0, 19.9, 20.5, 25.0, 28.9])
def test_fuzzify_partition_of_unity(temperature, value):
    total = sum(temperature.fuzzify(i, value) for i in range(len(temperature)))
    assert total == pytest.approx(1.0)


def test_fuzzify_shoulders(temperature):
    assert temperature.fuzzify(0, 0.0) == 1.0
    assert temperature.fuzzify(2, 100.0) == 1.0
    assert temperature.fuzzify(1, 100.0) == 0.0


def test_fuzzify_missing_position():
    var = FuzzyVariable.with_set_count("v", 2)
    assert var.fuzzify(0, 1.0) == MISSING_DATA_DOUBLE


def test_fuzzify_bad_index(temperature):
    with pytest.raises(IndexError):
        temperature.fuzzify(3, 1.0)


def test_defuzz_one_hot_gives_position(temperature):
    for idx, s in enumerate(temperature.sets):
        evals = [0.0] * len(temperature)
        evals[idx] = 1.0
        assert temperature.defuzz(evals) == s.position


def test_defuzz_special_cases(temperature):
    assert temperature.defuzz([0.0, 0.0, 0.0]) == 0.0
    assert temperature.defuzz([MISSING_DATA_DOUBLE] * 3) == MISSING_DATA_DOUBLE
    assert temperature.defuzz([MISSING_DATA_DOUBLE, 1.0, 0.0]) == 20.0
    with pytest.raises(ValueError):
        temperature.defuzz([1.0])
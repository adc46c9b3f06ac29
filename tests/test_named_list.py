import pytest

from fuzzycoco.named_list import NamedList, format_scalar, parse_scalar
from fuzzycoco.types import MISSING_DATA_DOUBLE, MISSING_DATA_INT

FUZZY_SYSTEM_112 = """
  {
    "input":{
      "Temperature":{
        "Cold":17.0,
        "Warm":20.0,
        "Hot":29.0
      },
      "Sunshine":{
        "Cloudy":30.0,
        "PartSunny":50.0,
        "Sunny":100.0
      }
    },
    "output":{
      "Tourists":{
        "Low":0.0,
        "Medium":50.0,
        "High":100.0
      }
    }
  }
  """

PARAMS = """
{
  "global_params":{
    "nb_rules":3
    ,"nb_max_var_per_rule":3
  },
  "fitness_params":{
    "output_vars_defuzz_thresholds": 0.5,
    "metrics_weights":{
      "rmse":0.2
    }
  }
}
"""

POS = """
{
  "ind1":{ "Low":1, "High":10 },
  "ind2":{ "Low":1, "High":10 },
  "constant":{ "Low":0, "High":3 },
  "cause":{ "Low":1, "High":10 },
  "effect":{ "Low":0, "High":1 },
}
"""


def _sample():
    lst = NamedList()
    lst.add("i", 3)
    lst.add("d", 0.5)
    lst.add("s", "hello world")
    lst.add("q", 'say "hi"')
    lst.add("b", True)
    lst.add("f", False)
    lst.add("na_i", MISSING_DATA_INT)
    lst.add("na_d", MISSING_DATA_DOUBLE)
    lst.add("tiny", 1e-06)
    lst.add("vec", [1.5, 2.0])
    sub = NamedList()
    sub.add("x", -7)
    lst.add("sub", sub)
    lst.add("empty", NamedList())
    return lst


def test_parse_fuzzy_system_structure():
    lst = NamedList.parse(FUZZY_SYSTEM_112)
    assert lst.names() == ["input", "output"]
    inputs = lst.get_list("input")
    assert inputs.names() == ["Temperature", "Sunshine"]
    temperature = inputs["Temperature"]
    assert temperature.names() == ["Cold", "Warm", "Hot"]
    assert temperature.get_double("Hot") == 29.0
    assert lst["output"]["Tourists"].as_numeric_vector() == [0.0, 50.0, 100.0]


def test_parse_params_with_leading_commas():
    lst = NamedList.parse(PARAMS)
    glob = lst.get_list("global_params")
    assert glob.get_int("nb_rules") == 3
    assert glob.get_int("nb_max_var_per_rule") == 3
    fit = lst["fitness_params"]
    assert fit.get_double("output_vars_defuzz_thresholds") == 0.5
    assert fit["metrics_weights"].get_double("rmse") == 0.2


def test_parse_trailing_comma_and_ints():
    lst = NamedList.parse(POS)
    assert lst.names() == ["ind1", "ind2", "constant", "cause", "effect"]
    assert lst["constant"].get_int("High") == 3
    assert lst["effect"].as_string_numeric_map() == {"High": 1.0, "Low": 0.0}


def test_round_trip_through_text():
    lst = _sample()
    assert NamedList.parse(lst.to_string()) == lst
    assert NamedList.parse(str(lst)) == lst


def test_round_trip_keeps_types():
    parsed = NamedList.parse(_sample().to_string())
    assert parsed.get_int("i") == 3
    assert parsed.get_double("tiny") == 1e-06
    assert parsed.get_bool("b") is True
    assert parsed.get_string("q") == 'say "hi"'
    assert parsed.get_int("na_i") == MISSING_DATA_INT
    assert parsed.get_double("na_d") == MISSING_DATA_DOUBLE


def test_print_layout():
    assert str(NamedList()) == "{}\n"
    lst = NamedList()
    lst.add("a", 1)
    assert lst.to_string() == '{\n  "a":1\n}\n'


def test_parse_scalar_variants():
    assert parse_scalar("true") is True
    assert parse_scalar("false,") is False
    assert parse_scalar("12}") == 12
    value = parse_scalar("1.25")
    assert value == 1.25 and isinstance(value, float)
    assert parse_scalar('"NA"') == MISSING_DATA_INT
    assert parse_scalar('"NA."') == MISSING_DATA_DOUBLE
    assert parse_scalar('"text"') == "text"


@pytest.mark.parametrize("bad", ["tx", "fals", "maybe", ""])
def test_parse_scalar_errors(bad):
    with pytest.raises(ValueError):
        parse_scalar(bad)


@pytest.mark.parametrize("value", [0, -5, 2.5, 1e-06, "a b", True, False, MISSING_DATA_INT, MISSING_DATA_DOUBLE])
def test_format_scalar_round_trip(value):
    parsed = parse_scalar(format_scalar(value))
    assert parsed == value
    assert type(parsed) is type(value)


def test_format_null_scalar():
    assert format_scalar(None) == "-"


@pytest.mark.parametrize("bad", ["x", '{"a" 1}', '{"a":}'])
def test_parse_errors(bad):
    with pytest.raises(ValueError):
        NamedList.parse(bad)


def test_access_by_index_and_name():
    lst = _sample()
    assert lst[0].name == "i"
    assert lst["d"].value == 0.5
    assert lst.find_first_idx("s") == 2
    assert lst.find_first_idx("nope") == -1
    assert lst.has("b") and not lst.has("nope")
    with pytest.raises(IndexError):
        lst[99]
    with pytest.raises(KeyError):
        lst["nope"]


def test_typed_getters_and_defaults():
    lst = _sample()
    assert lst.get_int("missing", 7) == 7
    assert lst.get_double("missing", 0.25) == 0.25
    assert lst.get_string("missing", "dflt") == "dflt"
    assert lst.get_bool("missing", True) is True
    assert lst.get_int("i", 7) == 3
    with pytest.raises(TypeError):
        lst.get_double("i")
    with pytest.raises(TypeError):
        lst.get_int("d")
    with pytest.raises(KeyError):
        lst.get_int("missing")
    assert lst.get_numeric("i") == 3.0


def test_get_as_int():
    lst = NamedList()
    lst.add("whole", 4.0)
    lst.add("frac", 4.5)
    lst.add("int", 9)
    assert lst.get_as_int("whole") == 4
    assert lst.get_as_int("int") == 9
    assert lst.get_as_int("absent", 11) == 11
    with pytest.raises(ValueError):
        lst.get_as_int("frac")


def test_add_vector_and_map():
    lst = NamedList()
    lst.add("vec", [1.5, 2.0])
    lst.add("m", {"b": 2, "a": 1.5})
    assert lst["vec"].names() == ["1", "2"]
    assert lst["vec"].as_numeric_vector() == [1.5, 2.0]
    assert lst["m"].names() == sorted(["b", "a"])
    assert lst["m"].as_string_numeric_map() == {"a": 1.5, "b": 2.0}


def test_add_copies_sublist():
    sub = NamedList()
    sub.add("x", 1)
    lst = NamedList()
    lst.add("sub", sub)
    sub.add("y", 2)
    assert len(lst["sub"]) == 1
    assert len(sub) == 2


def test_add_to_scalar_fails():
    node = NamedList("s", 1)
    with pytest.raises(TypeError):
        node.add("x", 2)


def test_equality_distinguishes_int_and_double():
    assert NamedList("a", 1) != NamedList("a", 1.0)
    assert NamedList("a", 1) == NamedList("a", 1)
    assert NamedList("a", 1) != NamedList("b", 1)


def test_numeric_conversions_errors():
    assert NamedList("v", 3).as_numeric_vector() == [3.0]
    with pytest.raises(TypeError):
        NamedList("v", "text").as_numeric_vector()
    lst = NamedList()
    lst.add("s", "text")
    with pytest.raises(TypeError):
        lst.as_numeric_vector()
    with pytest.raises(TypeError):
        lst.as_string_numeric_map()
    with pytest.raises(TypeError):
        NamedList("v", 3).as_string_numeric_map()


def test_empty_and_scalar_flags():
    assert NamedList().empty()
    assert NamedList().is_list()
    scalar = NamedList("x", 2.0)
    assert scalar.is_scalar() and not scalar.empty()
    assert len(scalar) == 0
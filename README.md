# fuzzycoco

Building blocks for fuzzy rule-based systems whose rules and membership
functions are evolved with a genetic algorithm: fuzzy variables, quality
metrics, bit-string genome codecs and evolutionary operators. It has no
dependencies beyond the standard library.

## Modules

- `fuzzycoco.types`: the missing-data sentinels `MISSING_DATA_DOUBLE` and
  `MISSING_DATA_INT`, and `is_na(value)` to recognise them.
- `fuzzycoco.named_list`: `NamedList`, an ordered tree of named scalars and
  lists with a JSON-like text format (`NamedList.parse`,
  `NamedList.to_string`), typed getters with defaults (`get_double`,
  `get_as_int`, `get_list`, ...), plus `parse_scalar` and `format_scalar`.
  Missing values are written as `"NA"` (int) and `"NA."` (double).
- `fuzzycoco.random_generator`: `RandomGenerator`, a seedable generator with
  `random`, `random_ints`, `choice`, `random_real` and `random_reals`.
- `fuzzycoco.matrix`: `Matrix`, a list of rows with `zeros`, `nbrows`,
  `nbcols`, `redim` and `reset`.
- `fuzzycoco.discretizer`: `Discretizer`, which maps a real interval onto the
  integers encodable on a number of bits; `Discretizer.from_data` spans the
  non-missing values of a sequence.
- `fuzzycoco.fuzzy_operator`: `fuzzy_and`, the minimum that ignores a
  negative "don't care" operand.
- `fuzzycoco.fuzzy_set`, `fuzzycoco.fuzzy_variable`,
  `fuzzycoco.fuzzy_variables_db`: `FuzzySet`, `FuzzyVariable` (triangular and
  shoulder fuzzification with `fuzzify`, weighted-average `defuzz`) and
  `FuzzyVariablesDB` (input and output variables, loading from and describing
  to a `NamedList`, position matrices, `subset`).
- `fuzzycoco.fuzzy_system_metrics`: `FuzzySystemMetrics`, a dataclass of
  metrics (sensitivity, specificity, accuracy, ppv, rmse, rrse, rae, mse,
  distance to threshold, confusion counts, ...) that can also serve as
  weights.
- `fuzzycoco.fuzzy_system_metrics_computer`: `FuzzySystemMetricsComputer`
  and the metric helper functions (`sensitivity`, `specificity`, `accuracy`,
  `ppv`, `rrse`, `rae`, `mse`, `distance_to_threshold`, ...).
- `fuzzycoco.evolution_params`: `EvolutionParams` (population size, elite
  size, crossover and mutation probabilities).
- `fuzzycoco.genome_codec`: genomes as lists of bools; `encode_number`,
  `decode_number`, `BitCursor`, and the codecs `IntCodec`, `IntVectorCodec`,
  `IntPairCodec`, `ConditionIndexCodec`, `ConditionIndexesCodec`,
  `RuleCodec`, `RulesCodec` and `DiscretizedFuzzySystemSetPositionsCodec`.
- `fuzzycoco.mutation_method`: `TogglingMutationMethod`, which flips genome
  bits in place.
- `fuzzycoco.selection_method`: `RankBasedSelectionMethod` and
  `ElitismWithRandomMethod`, which return selected indexes from a list of
  fitnesses.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Loading variables and evaluating them:

```python
from fuzzycoco.fuzzy_variables_db import FuzzyVariablesDB
from fuzzycoco.named_list import NamedList

db = FuzzyVariablesDB.load(NamedList.parse("""
{
  "input": {
    "Temperature": {"Cold": 17.0, "Warm": 20.0, "Hot": 29.0}
  },
  "output": {
    "Tourists": {"Low": 0.0, "Medium": 50.0, "High": 100.0}
  }
}
"""))

temperature = db.input_vars[0]
print(temperature.fuzzify(1, 18.5))               # 0.5: membership of "Warm"
print(db.output_vars[0].defuzz([0.2, 0.8, 0.0]))  # 40.0
print(db.describe())
```

Discretizing a value range on 4 bits:

```python
from fuzzycoco.discretizer import Discretizer

ds = Discretizer(4, -7, 24)
ds.discretize(15)   # 11
ds.discretize(24)   # 15
```

Encoding rules into a genome and reading them back:

```python
from fuzzycoco.genome_codec import ConditionIndex, IntPairParams, RulesCodec

codec = RulesCodec(1, IntPairParams(2, 3, 2), IntPairParams(1, 1, 2))
genome = [False] * codec.size()
codec.encode(
    [[ConditionIndex(0, 1), ConditionIndex(2, 3)]],
    [[ConditionIndex(0, 2)]],
    [1],
    genome,
)
rules_in, rules_out, default_rules = codec.decode(genome)
```

Computing metrics for one output variable:

```python
from fuzzycoco.fuzzy_system_metrics_computer import FuzzySystemMetricsComputer

metrics = FuzzySystemMetricsComputer().compute([[0.2, 0.8]], [[0.0, 1.0]], [0.5])
print(metrics.sensitivity, metrics.specificity)  # 1.0 1.0
```

## What this package does not do

It provides the parts listed above and nothing more. It has no fuzzy rules,
no complete fuzzy system that infers outputs from data, no evolution or
coevolution engine driving populations over generations, no data-frame or
CSV loading, and no command-line program.
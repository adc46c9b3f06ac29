"""Encoding of fuzzy rules and set positions into genomes (lists of bits)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, MutableSequence, Sequence

from .matrix import Matrix

Genome = List[bool]
Genomes = List[Genome]


def _check_span(bits, start, nb_bits):
    if nb_bits < 0:
        raise ValueError(f"negative number of bits: {nb_bits}")
    if start < 0 or start + nb_bits > len(bits):
        raise IndexError(
            f"bit range [{start}, {start + nb_bits}) outside a genome of {len(bits)} bits"
        )


def encode_number(number, bits, start, nb_bits):
    """Write the low ``nb_bits`` bits of ``number`` into ``bits`` at ``start``, most significant first."""
    _check_span(bits, start, nb_bits)
    for offset in range(nb_bits):
        shift = nb_bits - 1 - offset
        bits[start + offset] = bool((number >> shift) & 1)


def decode_number(bits, start, nb_bits):
    """Read ``nb_bits`` bits from ``bits`` at ``start`` as an unsigned number, most significant first."""
    _check_span(bits, start, nb_bits)
    value = 0
    for bit in bits[start:start + nb_bits]:
        value = (value << 1) | (1 if bit else 0)
    return value


class BitCursor:
    """A position in a genome that advances as numbers are read or written."""

    def __init__(self, bits, position=0):
        self.bits = bits
        self.position = position

    def read(self, nb_bits):
        value = decode_number(self.bits, self.position, nb_bits)
        self.position += nb_bits
        return value

    def write(self, number, nb_bits):
        encode_number(number, self.bits, self.position, nb_bits)
        self.position += nb_bits


def _as_cursor(bits):
    return bits if isinstance(bits, BitCursor) else BitCursor(bits)


@dataclass
class ConditionIndex:
    """A rule condition: the index of a variable and of one of its sets."""

    var_idx: int = 0
    set_idx: int = 0


class IntCodec:
    """Codec for a single unsigned integer on a fixed number of bits."""

    def __init__(self, nb_bits):
        self.nb_bits = nb_bits

    def decode(self, cursor):
        return cursor.read(self.nb_bits)

    def encode(self, number, cursor):
        cursor.write(number, self.nb_bits)

    def size(self):
        return self.nb_bits


class IntVectorCodec:
    """Codec for a fixed number of integers, each on the same number of bits."""

    def __init__(self, nb, nb_bits):
        self._codec = IntCodec(nb_bits)
        self.nb = nb

    @property
    def nb_bits(self):
        return self._codec.nb_bits

    def decode(self, cursor):
        return [self._codec.decode(cursor) for _ in range(self.nb)]

    def encode(self, values, cursor):
        values = list(values)
        if len(values) != self.nb:
            raise ValueError(f"expected {self.nb} values, got {len(values)}")
        for value in values:
            self._codec.encode(value, cursor)

    def size(self):
        return self._codec.size() * self.nb


class IntPairCodec:
    """Codec for a pair of integers, each with its own number of bits."""

    def __init__(self, nb_bits1, nb_bits2):
        self._codec1 = IntCodec(nb_bits1)
        self._codec2 = IntCodec(nb_bits2)

    @property
    def nb_bits1(self):
        return self._codec1.nb_bits

    @property
    def nb_bits2(self):
        return self._codec2.nb_bits

    def decode(self, cursor):
        first = self._codec1.decode(cursor)
        second = self._codec2.decode(cursor)
        return first, second

    def encode(self, i1, i2, cursor):
        self._codec1.encode(i1, cursor)
        self._codec2.encode(i2, cursor)

    def size(self):
        return self._codec1.size() + self._codec2.size()


class ConditionIndexCodec:
    """Codec for one (variable index, set index) condition."""

    def __init__(self, var_idx_nb_bits, set_idx_nb_bits):
        self._codec = IntPairCodec(var_idx_nb_bits, set_idx_nb_bits)

    @property
    def var_idx_nb_bits(self):
        return self._codec.nb_bits1

    @property
    def set_idx_nb_bits(self):
        return self._codec.nb_bits2

    def decode(self, cursor):
        var_idx, set_idx = self._codec.decode(cursor)
        return ConditionIndex(var_idx, set_idx)

    def encode(self, condition, cursor):
        self._codec.encode(condition.var_idx, condition.set_idx, cursor)

    def size(self):
        return self._codec.size()


@dataclass
class IntPairParams:
    """Number of pairs and the bit width of each member of a pair."""

    nb: int
    nb_bits1: int
    nb_bits2: int


class ConditionIndexesCodec:
    """Codec for a fixed number of conditions."""

    def __init__(self, params):
        self._codec = ConditionIndexCodec(params.nb_bits1, params.nb_bits2)
        self.nb = params.nb

    def decode(self, cursor):
        return [self._codec.decode(cursor) for _ in range(self.nb)]

    def encode(self, conditions, cursor):
        conditions = list(conditions)
        if len(conditions) != self.nb:
            raise ValueError(f"expected {self.nb} conditions, got {len(conditions)}")
        for condition in conditions:
            self._codec.encode(condition, cursor)

    def size(self):
        return self.nb * self._codec.size()


class RuleCodec:
    """Codec for a rule: its input conditions followed by its output conditions."""

    def __init__(self, params_input, params_output):
        self._codec_in = ConditionIndexesCodec(params_input)
        self._codec_out = ConditionIndexesCodec(params_output)

    def decode(self, cursor):
        conditions_in = self._codec_in.decode(cursor)
        conditions_out = self._codec_out.decode(cursor)
        return conditions_in, conditions_out

    def encode(self, conditions_in, conditions_out, cursor):
        self._codec_in.encode(conditions_in, cursor)
        self._codec_out.encode(conditions_out, cursor)

    def size(self):
        return self._codec_in.size() + self._codec_out.size()

    def __str__(self):
        return f"nb_input_vars={self._codec_in.nb}, nb_output_vars={self._codec_out.nb}"


class RulesCodec:
    """Codec for a set of rules followed by the default rules (one set index per output)."""

    def __init__(self, nb_rules, params_input, params_output):
        self._codec = RuleCodec(params_input, params_output)
        self._codec_default_rules = IntVectorCodec(params_output.nb, params_output.nb_bits2)
        self.nb_rules = nb_rules

    def decode(self, bits):
        """Return ``(rules_in, rules_out, default_rules)`` read from a genome or a cursor."""
        cursor = _as_cursor(bits)
        rules_in = []
        rules_out = []
        for _ in range(self.nb_rules):
            conditions_in, conditions_out = self._codec.decode(cursor)
            rules_in.append(conditions_in)
            rules_out.append(conditions_out)
        default_rules = self._codec_default_rules.decode(cursor)
        return rules_in, rules_out, default_rules

    def encode(self, rules_in, rules_out, default_rules, bits):
        """Write the rules into a genome (in place) or at a cursor."""
        rules_in = list(rules_in)
        rules_out = list(rules_out)
        if len(rules_in) != self.nb_rules or len(rules_out) != self.nb_rules:
            raise ValueError(f"expected {self.nb_rules} rules")
        cursor = _as_cursor(bits)
        for conditions_in, conditions_out in zip(rules_in, rules_out):
            self._codec.encode(conditions_in, conditions_out, cursor)
        self._codec_default_rules.encode(default_rules, cursor)

    def size(self):
        return self._codec.size() * self.nb_rules + self._codec_default_rules.size()

    def __str__(self):
        return (
            f"RulesCodec: [nb_rules={self.nb_rules}, {self._codec}, "
            f"nb default rules={self._codec_default_rules.nb}]"
        )


@dataclass
class PosParams:
    """Number of variables, sets per variable and bits per set position."""

    nb_vars: int
    nb_sets: int
    nb_bits: int


class DiscretizedFuzzySystemSetPositionsCodec:
    """Codec for the set positions of all variables, each discretized by its variable's discretizer."""

    def __init__(self, input_params, output_params, disc_in, disc_out):
        self.input_params = input_params
        self.output_params = output_params
        self._codec_in = IntCodec(input_params.nb_bits)
        self._codec_out = IntCodec(output_params.nb_bits)
        self._disc_in = list(disc_in)
        self._disc_out = list(disc_out)

    @property
    def nb_input_vars(self):
        return self.input_params.nb_vars

    @property
    def nb_output_vars(self):
        return self.output_params.nb_vars

    @staticmethod
    def _decode_matrix(cursor, nb_vars, nb_sets, discs, codec):
        return Matrix(
            [discretizer.undiscretize(codec.decode(cursor)) for _ in range(nb_sets)]
            for discretizer, _ in zip(discs, range(nb_vars))
        )

    @staticmethod
    def _encode_matrix(pos, cursor, discs, codec):
        for row, discretizer in zip(pos, discs):
            for value in row:
                codec.encode(discretizer.discretize(value), cursor)

    @staticmethod
    def _check_shape(pos, nb_vars, nb_sets, what):
        if len(pos) != nb_vars or any(len(row) != nb_sets for row in pos):
            raise ValueError(f"{what} positions must be a {nb_vars}x{nb_sets} matrix")

    def decode(self, bits):
        """Return the ``(pos_in, pos_out)`` matrices read from a genome or a cursor."""
        cursor = _as_cursor(bits)
        pos_in = self._decode_matrix(
            cursor, self.nb_input_vars, self.input_params.nb_sets, self._disc_in, self._codec_in
        )
        pos_out = self._decode_matrix(
            cursor, self.nb_output_vars, self.output_params.nb_sets, self._disc_out, self._codec_out
        )
        return pos_in, pos_out

    def encode(self, pos_in, pos_out, bits):
        """Write the position matrices into a genome (in place) or at a cursor."""
        self._check_shape(pos_in, self.nb_input_vars, self.input_params.nb_sets, "input")
        self._check_shape(pos_out, self.nb_output_vars, self.output_params.nb_sets, "output")
        cursor = _as_cursor(bits)
        self._encode_matrix(pos_in, cursor, self._disc_in, self._codec_in)
        self._encode_matrix(pos_out, cursor, self._disc_out, self._codec_out)

    def size(self):
        return (
            self._codec_in.size() * self.nb_input_vars * self.input_params.nb_sets
            + self._codec_out.size() * self.nb_output_vars * self.output_params.nb_sets
        )

    def __str__(self):
        return (
            f"DiscretizedFuzzySystemSetPositionsCodec: [nb_input_vars={self.nb_input_vars}, "
            f"nb_output_vars={self.nb_output_vars}]"
        )
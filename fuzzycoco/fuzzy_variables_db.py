"""A database of input and output fuzzy variables shared across fuzzy rules."""

from __future__ import annotations

import copy

from .fuzzy_variable import FuzzyVariable
from .matrix import Matrix
from .named_list import NamedList


def build_default_var_names(nbvars, base_name):
    """Default variable names: ``base_name_1``, ``base_name_2``, ..."""
    return [f"{base_name}_{i}" for i in range(1, nbvars + 1)]


def build_var_names_to_index_mapper(variables):
    return {var.name: idx for idx, var in enumerate(variables)}


def build_set_names_to_index_mapper(variable):
    return {fuzzy_set.name: idx for idx, fuzzy_set in enumerate(variable.sets)}


def build_vars_set_names_to_index_mapper(variables):
    return [build_set_names_to_index_mapper(var) for var in variables]


def _positions_matrix(variables):
    if not variables:
        raise ValueError("no variables")
    nb_sets = len(variables[0])
    return Matrix([var.sets[j].position for j in range(nb_sets)] for var in variables)


def _fill_positions(matrix, variables):
    for row, var in zip(matrix, variables):
        for fuzzy_set, pos in zip(var.sets, sorted(row)):
            fuzzy_set.position = pos


def _check_shape(matrix, nbrows, nbcols, what):
    if len(matrix) != nbrows or any(len(row) != nbcols for row in matrix):
        raise ValueError(f"{what} positions must be a {nbrows}x{nbcols} matrix")


class FuzzyVariablesDB:
    """Input and output fuzzy variables."""

    __hash__ = None

    def __init__(self, input_vars=(), output_vars=()):
        self.input_vars = list(input_vars)
        self.output_vars = list(output_vars)

    @classmethod
    def from_counts(cls, nb_input_vars, nb_input_sets, nb_output_vars, nb_output_sets):
        return cls.from_names(
            build_default_var_names(nb_input_vars, "in"), nb_input_sets,
            build_default_var_names(nb_output_vars, "out"), nb_output_sets,
        )

    @classmethod
    def from_names(cls, input_names, nb_in_sets, output_names, nb_out_sets):
        input_names = list(input_names)
        output_names = list(output_names)
        if not input_names or not output_names:
            raise ValueError("at least one input and one output variable are required")
        if nb_in_sets <= 0 or nb_out_sets <= 0:
            raise ValueError("variables need at least one set")
        return cls(
            [FuzzyVariable.with_set_count(name, nb_in_sets) for name in input_names],
            [FuzzyVariable.with_set_count(name, nb_out_sets) for name in output_names],
        )

    @property
    def nb_input_vars(self):
        return len(self.input_vars)

    @property
    def nb_input_sets(self):
        return len(self.input_vars[0])

    @property
    def nb_output_vars(self):
        return len(self.output_vars)

    @property
    def nb_output_sets(self):
        return len(self.output_vars[0])

    def set_positions(self, desc):
        """Set the sets of the named variables from a description (or its text)."""
        if isinstance(desc, str):
            desc = NamedList.parse(desc)
        in_idx = build_var_names_to_index_mapper(self.input_vars)
        out_idx = build_var_names_to_index_mapper(self.output_vars)
        for var_name in desc.names():
            var_lst = desc.get_list(var_name)
            if var_name in in_idx:
                self.input_vars[in_idx[var_name]].set_sets_positions(var_lst)
            elif var_name in out_idx:
                self.output_vars[out_idx[var_name]].set_sets_positions(var_lst)
            else:
                raise ValueError(f"error, variable name unknown: {var_name}")

    def set_positions_from_matrices(self, input_positions, output_positions):
        """Set positions from one row per variable; each row is sorted first."""
        _check_shape(input_positions, self.nb_input_vars, self.nb_input_sets, "input")
        _check_shape(output_positions, self.nb_output_vars, self.nb_output_sets, "output")
        _fill_positions(input_positions, self.input_vars)
        _fill_positions(output_positions, self.output_vars)

    def fetch_input_positions(self):
        return _positions_matrix(self.input_vars)

    def fetch_output_positions(self):
        return _positions_matrix(self.output_vars)

    def subset(self, input_var_idx, output_var_idx):
        """A new database holding copies of the selected variables, in the given order."""
        def pick(variables, indexes):
            picked = []
            for idx in indexes:
                if not 0 <= idx < len(variables):
                    raise IndexError(f"variable index out of range: {idx}")
                picked.append(copy.deepcopy(variables[idx]))
            return picked

        return FuzzyVariablesDB(
            pick(self.input_vars, input_var_idx), pick(self.output_vars, output_var_idx)
        )

    @classmethod
    def load(cls, desc):
        """Build a database from a description with "input" and "output" lists."""
        if isinstance(desc, str):
            desc = NamedList.parse(desc)
        inputs = desc.get_list("input")
        outputs = desc.get_list("output")
        nb_input_sets = len(inputs[0]) if not inputs.empty() else 0
        nb_output_sets = len(outputs[0]) if not outputs.empty() else 0
        db = cls.from_names(inputs.names(), nb_input_sets, outputs.names(), nb_output_sets)
        db.set_positions(inputs)
        db.set_positions(outputs)
        return db

    def describe(self):
        desc = NamedList()
        inputs = NamedList()
        for var in self.input_vars:
            inputs.add(var.name, var.describe())
        desc.add("input", inputs)
        outputs = NamedList()
        for var in self.output_vars:
            outputs.add(var.name, var.describe())
        desc.add("output", outputs)
        return desc

    def __eq__(self, other):
        if not isinstance(other, FuzzyVariablesDB):
            return NotImplemented
        return self.input_vars == other.input_vars and self.output_vars == other.output_vars

    def __str__(self):
        lines = ["Fuzzy Variables Database:\n", "## input variables:\n"]
        lines.extend(f"{var}\n" for var in self.input_vars)
        lines.append("## output variables:\n")
        lines.extend(f"{var}\n" for var in self.output_vars)
        return "".join(lines)
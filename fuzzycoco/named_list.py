"""Ordered, named, nested lists of scalars with a JSON-like text format."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Iterator, Union

from .types import MISSING_DATA_DOUBLE, MISSING_DATA_INT

Scalar = Union[None, bool, int, float, str]

NA_INT_STRING = "NA"
NA_DOUBLE_STRING = "NA."

_INDENT = 2
_MISSING = object()
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"[+-]?\d+")


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _format_double(value: float) -> str:
    text = repr(value)
    if "e" in text and "." not in text:
        mantissa, exponent = text.split("e")
        text = f"{mantissa}.0e{exponent}"
    return text


def _check_scalar(value) -> None:
    if value is not None and not isinstance(value, (bool, int, float, str)):
        raise TypeError(f"unsupported scalar type: {type(value).__name__}")


def _same_scalar(a, b) -> bool:
    return type(a) is type(b) and a == b


def format_scalar(value: Scalar) -> str:
    """Render a scalar in the text format read back by :func:`parse_scalar`."""
    if value is None:
        return "-"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return _quote(NA_INT_STRING) if value == MISSING_DATA_INT else str(value)
    if isinstance(value, float):
        if value == MISSING_DATA_DOUBLE:
            return _quote(NA_DOUBLE_STRING)
        return _format_double(value)
    if isinstance(value, str):
        return _quote(value)
    raise TypeError(f"unsupported scalar type: {type(value).__name__}")


class _Reader:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def get(self) -> str:
        ch = self.peek()
        if ch:
            self.pos += 1
        return ch

    def peek_significant(self) -> str:
        while self.pos < len(self.text) and self.text[self.pos] <= " ":
            self.pos += 1
        return self.peek()

    def skip_comma(self) -> None:
        if self.peek() == ",":
            self.pos += 1

    def read_quoted(self) -> str:
        self.pos += 1  # opening quote
        chars = []
        while True:
            ch = self.get()
            if not ch:
                raise ValueError("unterminated quoted string")
            if ch == "\\":
                escaped = self.get()
                if not escaped:
                    raise ValueError("unterminated quoted string")
                chars.append(escaped)
            elif ch == '"':
                return "".join(chars)
            else:
                chars.append(ch)

    def read_token(self) -> str:
        start = self.pos
        text = self.text
        while self.pos < len(text) and text[self.pos] > " " and text[self.pos] not in ",}":
            self.pos += 1
        return text[start:self.pos]


def _scalar_from_token(item: str) -> Scalar:
    if not item:
        raise ValueError("unable to parse an empty item")
    if item[0] in "tf":
        if item.startswith("true"):
            return True
        if item.startswith("false"):
            return False
        raise ValueError(f"unable to parse item: {item}")
    if "." in item:
        match = _FLOAT_PREFIX.match(item)
        if not match:
            raise ValueError(f"unable to parse item as a double: {item}")
        return float(match.group())
    match = _INT_PREFIX.match(item)
    if not match:
        raise ValueError(f"unable to parse item as an int: {item}")
    number = int(match.group())
    if not _INT_MIN <= number <= _INT_MAX:
        raise ValueError(f"int out of range: {item}")
    return number


def _read_scalar(reader: _Reader) -> Scalar:
    ch = reader.peek_significant()
    if not ch:
        raise ValueError("unable to parse a scalar: no content")
    if ch == '"':
        text = reader.read_quoted()
        if text == NA_DOUBLE_STRING:
            return MISSING_DATA_DOUBLE
        if text == NA_INT_STRING:
            return MISSING_DATA_INT
        return text
    return _scalar_from_token(reader.read_token())


def parse_scalar(text: str) -> Scalar:
    """Parse the first scalar found in ``text``."""
    return _read_scalar(_Reader(text))


class NamedList:
    """A tree whose nodes are either named scalars or ordered lists of named nodes."""

    __hash__ = None

    def __init__(self, name: str = "", value: Scalar = None):
        _check_scalar(value)
        self.name = name
        self.value = value
        self._children: list[NamedList] = []

    # ---------- structure ----------
    def is_scalar(self) -> bool:
        return self.value is not None

    def is_list(self) -> bool:
        return not self.is_scalar()

    def empty(self) -> bool:
        return self.is_list() and not self._children

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator[NamedList]:
        return iter(self._children)

    def __getitem__(self, key):
        if isinstance(key, str):
            return self.fetch(key)
        if key < 0 or key >= len(self._children):
            raise IndexError(f"index out of range: {key}")
        return self._children[key]

    def __eq__(self, other):
        if not isinstance(other, NamedList):
            return NotImplemented
        if self.name != other.name or not _same_scalar(self.value, other.value):
            return False
        return len(self._children) == len(other._children) and all(
            a == b for a, b in zip(self._children, other._children)
        )

    def __repr__(self) -> str:
        if self.is_scalar():
            return f"NamedList({self.name!r}, {self.value!r})"
        return f"NamedList({self.name!r}, <{len(self)} items>)"

    def copy(self) -> NamedList:
        """Return a deep copy of this tree."""
        node = NamedList(self.name, self.value)
        node._children = [child.copy() for child in self._children]
        return node

    # ---------- lookup ----------
    def names(self) -> list[str]:
        return [child.name for child in self._children]

    def has(self, name: str) -> bool:
        return self.find_first_idx(name) >= 0

    def find_first_idx(self, name: str) -> int:
        """Index of the first child called ``name``, or -1."""
        if not self.is_list():
            return -1
        for idx, child in enumerate(self._children):
            if child.name == name:
                return idx
        return -1

    def fetch(self, name: str) -> NamedList:
        idx = self.find_first_idx(name)
        if idx < 0:
            raise KeyError(f"name not found in list: {name}")
        return self._children[idx]

    def _scalar_of(self, name) -> Scalar:
        if name is None:
            if not self.is_scalar():
                raise TypeError("not a scalar!")
            return self.value
        return self.fetch(name).value

    def get_list(self, name: str, default=_MISSING) -> NamedList:
        if default is not _MISSING and not self.has(name):
            return default
        return self.fetch(name)

    def get_string(self, name: str, default=_MISSING) -> str:
        if default is not _MISSING and not self.has(name):
            return default
        value = self._scalar_of(name)
        if not isinstance(value, str):
            raise TypeError(f"{name} is not a string")
        return value

    def get_bool(self, name: str, default=_MISSING) -> bool:
        if default is not _MISSING and not self.has(name):
            return default
        value = self._scalar_of(name)
        if not isinstance(value, bool):
            raise TypeError(f"{name} is not a bool")
        return value

    def get_int(self, name: str, default=_MISSING) -> int:
        if default is not _MISSING and not self.has(name):
            return default
        value = self._scalar_of(name)
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{name} is not an int")
        return value

    def get_double(self, name: str, default=_MISSING) -> float:
        if default is not _MISSING and not self.has(name):
            return default
        value = self._scalar_of(name)
        if not isinstance(value, float):
            raise TypeError(f"{name} is not a double")
        return value

    def get_numeric(self, name: str | None = None) -> float:
        """Numeric value of the child ``name``, or of this node when no name is given."""
        value = self._scalar_of(name)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"{name if name is not None else self.name} is not numeric")
        return float(value)

    def get_as_int(self, name: str, default=_MISSING) -> int:
        if default is not _MISSING and not self.has(name):
            return default
        value = self._scalar_of(name)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"{name} is not numeric")
        if isinstance(value, int):
            return value
        as_int = int(value)
        if as_int != value:
            raise ValueError(f"numeric value is not an integer: {value}")
        return as_int

    # ---------- building ----------
    def add(self, name: str, value) -> None:
        """Append a child: a scalar, a NamedList (copied), a sequence or a mapping of numbers."""
        if self.is_scalar():
            raise TypeError("cannot add an element to a scalar")
        if isinstance(value, NamedList):
            node = value.copy()
            node.name = name
        elif isinstance(value, Mapping):
            node = NamedList(name)
            node._children = [NamedList(key, float(value[key])) for key in sorted(value)]
        elif isinstance(value, (list, tuple)):
            node = NamedList(name)
            node._children = [NamedList(str(i), float(v)) for i, v in enumerate(value, 1)]
        elif value is None:
            raise TypeError("cannot add a null value")
        else:
            node = NamedList(name, value)
        self._children.append(node)

    # ---------- conversions ----------
    def as_numeric_vector(self) -> list[float]:
        if not self.is_list():
            if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
                raise TypeError("not numeric")
            return [float(self.value)]
        result = []
        for idx, child in enumerate(self._children):
            if not child.is_scalar():
                raise TypeError("item is not a scalar!")
            if isinstance(child.value, bool) or not isinstance(child.value, (int, float)):
                raise TypeError(f"item #{idx} is not numeric!")
            result.append(float(child.value))
        return result

    def as_string_numeric_map(self) -> dict[str, float]:
        if not self.is_list():
            raise TypeError("not a list!")
        mapping = {}
        for idx, child in enumerate(self._children):
            if not child.is_scalar():
                raise TypeError("item is not a scalar!")
            if isinstance(child.value, bool) or not isinstance(child.value, (int, float)):
                raise TypeError(f"item #{idx} is not numeric!")
            mapping[child.name] = float(child.value)
        return dict(sorted(mapping.items()))

    # ---------- text format ----------
    def _write(self, parts: list[str], indent: int, toplevel: bool) -> None:
        spacer = " " * indent
        parts.append(spacer)
        if self.name:
            parts.append(_quote(self.name) + ":")
        if self.is_list():
            parts.append("{")
            if self._children:
                parts.append("\n")
            last = len(self._children) - 1
            for idx, child in enumerate(self._children):
                child._write(parts, indent + _INDENT, False)
                if idx != last:
                    parts.append(",")
                parts.append("\n")
            if self._children:
                parts.append(spacer)
            parts.append("}")
        else:
            parts.append(format_scalar(self.value))
        if toplevel:
            parts.append("\n")

    def to_string(self) -> str:
        parts: list[str] = []
        self._write(parts, 0, True)
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_string()

    @classmethod
    def parse(cls, content) -> NamedList:
        """Parse a NamedList from text (or from an object with a ``read`` method)."""
        if not isinstance(content, str):
            content = content.read()
        return _parse_node(_Reader(content))


def _parse_node(reader: _Reader) -> NamedList:
    ch = reader.peek_significant()
    if ch == "}":
        reader.get()
        return NamedList()

    if ch == "{":
        node = NamedList()
        reader.get()
        while True:
            ch = reader.peek_significant()
            if not ch or ch == "}":
                break
            reader.skip_comma()
            node._children.append(_parse_node(reader))
            reader.skip_comma()
        reader.get()
        return node

    if ch == '"':
        name = reader.read_quoted()
        if reader.peek_significant() != ":":
            raise ValueError(f"expected ':' after name {name!r}")
        reader.get()
        if reader.peek_significant() == "{":
            sub = _parse_node(reader)
            reader.skip_comma()
            sub.name = name
            return sub
        value = _read_scalar(reader)
        reader.skip_comma()
        return NamedList(name, value)

    raise ValueError(f"parsing error, current character={ch}")
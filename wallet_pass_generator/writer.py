"""
Streaming JSON writer used as the serialization sink for pass.json.

The pass model never builds an intermediate dict: it pushes tokens (objects,
arrays, property names and scalar values) into a JsonWriter in the exact order
they must appear in the document.
"""

import io
import json
import math
from decimal import Decimal
from typing import List, Optional, TextIO

from .exceptions import InvalidFormatError


class _Frame:
    """One open container on the writer stack."""

    def __init__(self, kind: str):
        self.kind = kind
        self.count = 0


class JsonWriter:
    """Token-level JSON emitter.

    Args:
        stream: Text stream to write to. A StringIO is created when omitted.
        indent: Number of spaces per nesting level, or None for compact output.
    """

    def __init__(self, stream: Optional[TextIO] = None, indent: Optional[int] = None):
        self.stream = stream if stream is not None else io.StringIO()
        self.indent = indent
        self._stack: List[_Frame] = []
        self._pending_property = False
        self._done = False

    # Containers

    def write_start_object(self) -> None:
        self._before_value()
        self.stream.write("{")
        self._stack.append(_Frame("object"))

    def write_end_object(self) -> None:
        self._end("object", "}")

    def write_start_array(self) -> None:
        self._before_value()
        self.stream.write("[")
        self._stack.append(_Frame("array"))

    def write_end_array(self) -> None:
        self._end("array", "]")

    # Properties and values

    def write_property_name(self, name: str) -> None:
        if not self._stack or self._stack[-1].kind != "object":
            raise ValueError(f"Property '{name}' written outside of an object")
        if self._pending_property:
            raise ValueError(f"Property '{name}' written while a value is expected")
        self._separator()
        self.stream.write(json.dumps(name, ensure_ascii=False))
        self.stream.write(": " if self.indent is not None else ":")
        self._pending_property = True

    def write_value(self, value) -> None:
        """Write a scalar: str, bool, int, float, Decimal or None."""
        self._before_value()
        self.stream.write(self._encode_scalar(value))

    def write_json(self, value) -> None:
        """Write a nested value made of dicts, lists and scalars.

        Used for opaque blobs such as userInfo. Decimals keep their exact text
        and non-finite numbers are rejected like any other scalar.
        """
        if isinstance(value, dict):
            self.write_start_object()
            for key, item in value.items():
                self.write_property_name(str(key))
                self.write_json(item)
            self.write_end_object()
        elif isinstance(value, (list, tuple)):
            self.write_start_array()
            for item in value:
                self.write_json(item)
            self.write_end_array()
        else:
            self.write_value(value)

    def write_raw_value(self, fragment: str) -> None:
        """Write an already serialized JSON fragment verbatim."""
        self._before_value()
        self.stream.write(fragment)

    def getvalue(self) -> str:
        if not isinstance(self.stream, io.StringIO):
            raise TypeError("getvalue() is only available for StringIO streams")
        return self.stream.getvalue()

    # Internals

    @staticmethod
    def _encode_scalar(value) -> str:
        if value is None:
            return "null"
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, int):
            return str(value)
        if isinstance(value, Decimal):
            if not value.is_finite():
                raise InvalidFormatError(value, "decimal values must be finite")
            return str(value)
        if isinstance(value, float):
            if not math.isfinite(value):
                raise InvalidFormatError(value, "numbers must be finite")
            return json.dumps(value)
        if isinstance(value, str):
            return json.dumps(value, ensure_ascii=False)
        raise TypeError(f"Cannot write value of type {type(value).__name__}")

    def _before_value(self) -> None:
        if self._pending_property:
            self._pending_property = False
            return
        if not self._stack:
            if self._done:
                raise ValueError("A complete JSON document has already been written")
            return
        if self._stack[-1].kind == "object":
            raise ValueError("Value written inside an object without a property name")
        self._separator()

    def _separator(self) -> None:
        frame = self._stack[-1]
        if frame.count:
            self.stream.write(",")
        frame.count += 1
        self._newline(len(self._stack))

    def _newline(self, depth: int) -> None:
        if self.indent is not None:
            self.stream.write("\n" + " " * (self.indent * depth))

    def _end(self, kind: str, token: str) -> None:
        if not self._stack or self._stack[-1].kind != kind:
            raise ValueError(f"Unbalanced end of {kind}")
        if self._pending_property:
            raise ValueError(f"End of {kind} while a property value is expected")
        frame = self._stack.pop()
        if frame.count:
            self._newline(len(self._stack))
        self.stream.write(token)
        if not self._stack:
            self._done = True

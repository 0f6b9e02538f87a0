"""Reports describing built-in Python objects: lists, bytes, floats, strings and ints."""

from __future__ import annotations

import struct

_POINTER_SIZE = struct.calcsize("P")
_ULONG_LIMIT = 2**64
_BYTES_SHOWN = 10


def _allocated(obj: list) -> int:
    """Number of slots the list has reserved, derived from its memory footprint."""
    return (list.__sizeof__(obj) - list.__sizeof__([])) // _POINTER_SIZE


def python_bytes_info(obj: object) -> str:
    """Describe a bytes object: its size, its text and its first bytes.

    The byte dump includes the terminating NUL the object stores after its
    data, and is limited to ten bytes.
    """
    lines = ["[.] bytes object info\n"]
    if not isinstance(obj, bytes):
        lines.append("  [ERROR] Invalid Bytes Object\n")
        return "".join(lines)
    stored = bytes(obj) + b"\x00"
    text = stored.split(b"\x00", 1)[0].decode("utf-8", "replace")
    shown = stored[:_BYTES_SHOWN]
    lines.append(f"  size: {len(obj)}\n")
    lines.append(f"  trying string: {text}\n")
    lines.append(
        f"  first {len(shown)} bytes:" + "".join(f" {byte:02x}" for byte in shown) + "\n"
    )
    return "".join(lines)


def python_float_info(obj: object) -> str:
    """Describe a float object by its value, always showing a decimal point."""
    lines = ["[.] float object info\n"]
    if not isinstance(obj, float):
        lines.append("  [ERROR] Invalid Float Object\n")
        return "".join(lines)
    value = float(obj)
    text = "%.16g" % value
    if "." not in text:
        text = "%.1f" % value
    lines.append(f"  value: {text}\n")
    return "".join(lines)


def python_list_info(obj: object) -> str:
    """Describe a list: its size, its allocation and the type of each element.

    Bytes and float elements are described in detail after their type line.
    """
    lines = ["[*] Python list info\n"]
    if not isinstance(obj, list):
        lines.append("  [ERROR] Invalid List Object\n")
        return "".join(lines)
    lines.append(f"[*] Size of the Python List = {len(obj)}\n")
    lines.append(f"[*] Allocated = {_allocated(obj)}\n")
    for index, element in enumerate(obj):
        lines.append(f"Element {index}: {type(element).__name__}\n")
        if isinstance(element, bytes):
            lines.append(python_bytes_info(element))
        elif isinstance(element, float):
            lines.append(python_float_info(element))
    return "".join(lines)


def python_string_info(obj: object) -> str:
    """Describe a string: whether it is pure ASCII, its length and its value."""
    lines = ["[.] string object info\n"]
    if not isinstance(obj, str):
        lines.append("  [ERROR] Invalid String Object\n")
        return "".join(lines)
    kind = "compact ascii" if obj.isascii() else "compact unicode object"
    lines.append(f"  type: {kind}\n")
    lines.append(f"  length: {len(obj)}\n")
    lines.append(f"  value: {obj}\n")
    return "".join(lines)


def python_int_info(obj: object) -> str:
    """Print-ready value of an int as a C unsigned long with a sign.

    Magnitudes that do not fit in 64 bits are reported as an overflow.
    """
    if not isinstance(obj, int):
        return "Invalid Int Object\n"
    value = int(obj)
    magnitude = abs(value)
    if magnitude >= _ULONG_LIMIT:
        return "C unsigned long int overflow\n"
    sign = "-" if value < 0 else ""
    return f"{sign}{magnitude}\n"
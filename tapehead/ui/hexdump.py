"""Hexdump rendering: offset column, 2-byte hex groups and an ASCII side view.

       0: 4865 6c6c 6f2c 2077 6f72 6c64 210a 0001  Hello, world!...
      16: ff                                       .
"""

COLUMNS = 16  # Must be even so every full row splits into 2-byte groups.
GROUP_WIDTH = 5  # " " + 4 hex digits


def _ascii(row: bytes) -> str:
    return "".join(chr(b) if 0x20 <= b <= 0x7E else "." for b in row)


def _hex_groups(row: bytes) -> str:
    cells = "".join(f" {row[i : i + 2].hex()}" for i in range(0, len(row), 2))
    if len(row) % 2:
        # Fill the missing half of the last group.
        cells += "  "
    missing_groups = (COLUMNS - len(row)) // 2
    return cells + " " * (GROUP_WIDTH * missing_groups)


def render_row(offset: int, row: bytes, offset_width: int = 4) -> str:
    """Render one row of at most COLUMNS bytes, newline-terminated."""
    return f"{offset:>{offset_width}}:{_hex_groups(row)}  {_ascii(row)}\n"


def render_hexdump(data: bytes, start: int = 0) -> str:
    """Render data as a hexdump whose offsets begin at start.

    Args:
        data: Bytes to render.
        start: Absolute store offset of data[0].

    Returns:
        The rendered rows, or an empty string for empty data.
    """
    if not data:
        return ""

    last_row_offset = start + COLUMNS * ((len(data) - 1) // COLUMNS)
    offset_width = max(4, len(str(last_row_offset)))

    return "".join(
        render_row(start + index, data[index : index + COLUMNS], offset_width)
        for index in range(0, len(data), COLUMNS)
    )

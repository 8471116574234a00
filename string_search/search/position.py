from typing import Iterable, List, Tuple
from string_search.search.base import Text


def _is_newline(char) -> bool:
    return char == "\n" or char == 10


def _check_index(text: Text, index: int) -> None:
    if index < 0 or index > len(text):
        raise IndexError(f"Index {index} is outside text of length {len(text)}")


def to_row_col(text: Text, index: int) -> Tuple[int, int]:
    """
    Convert a flat offset into a 1-based (row, column) pair.

    Only newline characters strictly before ``index`` advance the row.
    """
    _check_index(text, index)
    row = 1
    col = 1
    for i in range(index):
        if _is_newline(text[i]):
            row += 1
            col = 1
        else:
            col += 1
    return row, col


def to_row_cols(text: Text, indices: Iterable[int]) -> List[Tuple[int, int]]:
    """
    Convert an ascending sequence of offsets in a single pass over ``text``.

    Raises:
        ValueError: If ``indices`` is not in ascending order.
        IndexError: If an index falls outside the text.
    """
    locations = []
    row = 1
    col = 1
    position = 0
    for index in indices:
        _check_index(text, index)
        if index < position:
            raise ValueError("Indices must be in ascending order")
        while position < index:
            if _is_newline(text[position]):
                row += 1
                col = 1
            else:
                col += 1
            position += 1
        locations.append((row, col))
    return locations

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Union

Text = Union[str, bytes]
MatchSet = List[int]


class UnknownAlgorithmError(ValueError):
    """Raised by strict dispatch when an algorithm identifier is not recognised."""
    pass


@dataclass
class SearchStats:
    """
    Per-call search statistics.

    A fresh instance is created for every search and filled in by the matcher
    that ran, so nothing is shared between calls.

    Attributes:
        algorithm (str): Identifier of the algorithm that produced the result.
        text_length (int): Length of the searched text.
        pattern_length (int): Length of the pattern.
        comparisons (int): Character comparisons performed during the scan.
        preprocessing_steps (int): Iterations spent building the failure table,
            bad-character table or initial hashes.
        shifts (int): Number of times the search window moved.
        hash_collisions (int): Hash matches rejected by direct comparison
            (Rabin-Karp only).
        matches (int): Number of occurrences found.
        search_time (float): Wall time of the call in seconds.
    """
    algorithm: str = ""
    text_length: int = 0
    pattern_length: int = 0
    comparisons: int = 0
    preprocessing_steps: int = 0
    shifts: int = 0
    hash_collisions: int = 0
    matches: int = 0
    search_time: float = 0.0

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


def read_text(file_path: str, binary: bool = False) -> Text:
    """
    Read a whole file into memory for searching.

    Text mode decodes UTF-8 with replacement characters and keeps line endings
    untouched so that match offsets line up with the file content.

    Args:
        file_path (str): Path to the file.
        binary (bool): Return raw bytes instead of decoded text.

    Returns:
        The file content as ``str`` or ``bytes``.

    Raises:
        FileNotFoundError: If the file does not exist.
        RuntimeError: If the file cannot be read.
    """
    try:
        if binary:
            with open(file_path, 'rb') as file:
                return file.read()
        with open(file_path, 'r', encoding='utf-8', errors='replace', newline='') as file:
            return file.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"File not found: {file_path}")
    except OSError as e:
        raise RuntimeError(f"Error reading file: {e}") from e

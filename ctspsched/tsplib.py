"""Reader for TSPLIB instance files, with the PTSP/CTSP keyword extensions."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Callable, Iterator

from ctspsched.distances import Coord, EdgeWeightType, distance_function

_log = logging.getLogger(__name__)

DIAGONAL_DISTANCE = 100000000.0

DISPLAY_DATA_TYPES = ("COORD_DISPLAY", "TWOD_DISPLAY", "NO_DISPLAY")

_INT_RE = re.compile(r"[+-]?\d+")
_REAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_WHITESPACE = " \t\n\r\v\f"


class TSPLIBError(ValueError):
    """Raised when a TSPLIB file cannot be read or is inconsistent."""


def clean_text(text: str) -> str:
    """Remove every ':' from each line; every line ends with a newline."""
    if not text:
        return ""
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return "".join(line.replace(":", "") + "\n" for line in lines)


class _Scanner:
    """Whitespace-separated reading over a text, in the manner of a stream."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _skip_whitespace(self) -> None:
        text = self._text
        while self._pos < len(text) and text[self._pos] in _WHITESPACE:
            self._pos += 1

    def token(self) -> str | None:
        """Next whitespace-delimited token, or None at the end of the text."""
        self._skip_whitespace()
        start = self._pos
        text = self._text
        while self._pos < len(text) and text[self._pos] not in _WHITESPACE:
            self._pos += 1
        return text[start:self._pos] or None

    def char(self) -> str | None:
        """Next non-whitespace character, or None at the end of the text."""
        self._skip_whitespace()
        if self._pos >= len(self._text):
            return None
        c = self._text[self._pos]
        self._pos += 1
        return c

    def _number(self, pattern: re.Pattern[str], what: str) -> str:
        self._skip_whitespace()
        match = pattern.match(self._text, self._pos)
        if match is None:
            found = self._text[self._pos:self._pos + 20].split()
            shown = found[0] if found else "end of file"
            raise TSPLIBError(f"expected {what}, found {shown!r}")
        self._pos = match.end()
        return match.group(0)

    def integer(self) -> int:
        return int(self._number(_INT_RE, "an integer"))

    def real(self) -> float:
        return float(self._number(_REAL_RE, "a number"))

    def rest_of_line(self) -> str:
        end = self._text.find("\n", self._pos)
        if end == -1:
            line, self._pos = self._text[self._pos:], len(self._text)
        else:
            line, self._pos = self._text[self._pos:end], end + 1
        return line


def _upper_pairs(n: int) -> Iterator[tuple[int, int]]:
    return ((i, j) for i in range(n) for j in range(i + 1, n))


def _lower_pairs(n: int) -> Iterator[tuple[int, int]]:
    return ((i, j) for i in range(n) for j in range(i))


def _diag_pairs(n: int) -> Iterator[tuple[int, int]]:
    return ((i, j) for i in range(n) for j in range(i + 1))


def _full_pairs(n: int) -> Iterator[tuple[int, int]]:
    return ((i, j) for i in range(n) for j in range(n))


# Order in which each format lists its entries, and whether it fills both halves.
_EDGE_WEIGHT_FORMATS: dict[str, tuple[Callable[[int], Iterator[tuple[int, int]]], bool]] = {
    "UPPER_ROW": (_upper_pairs, True),
    "LOWER_ROW": (_lower_pairs, True),
    "UPPER_DIAG_ROW": (_diag_pairs, True),
    "LOWER_DIAG_ROW": (_diag_pairs, True),
    "UPPER_COL": (_lower_pairs, True),
    "LOWER_COL": (_lower_pairs, True),
    "UPPER_DIAG_COL": (_diag_pairs, True),
    "LOWER_DIAG_COL": (_diag_pairs, True),
    "FULL_MATRIX": (_full_pairs, False),
}


class TSPLIBInstance:
    """Contents of a TSPLIB file: header values, coordinates, demands, distances."""

    def __init__(self) -> None:
        self.name = ""
        self.type = ""
        self.comment = ""
        self.dimension = -1
        self.edge_weight_type: EdgeWeightType | None = None
        self.edge_weight_format: str | None = None
        self.display_data_type: str | None = None
        self.num_days = -1
        self.max_distance = -1
        self.maximum_allowable_differential = -1
        self.depot = -1
        self.coord_ids: list[int] = []
        self.coords: list[Coord] = []
        self.display_ids: list[int] = []
        self.display: list[Coord] = []
        self.demands: list[list[int]] = []
        self.optimal_values: list[float] = []
        self._distances: list[list[float]] = []
        self._sections: dict[str, Callable[[_Scanner], None]] = {
            "NAME": self._read_name,
            "TYPE": self._read_type,
            "COMMENT": self._read_comment,
            "DIMENSION": self._read_dimension,
            "CAPACITY": self._skip_pairs("capacities"),
            "EDGE_WEIGHT_TYPE": self._read_edge_weight_type,
            "EDGE_WEIGHT_FORMAT": self._read_edge_weight_format,
            "DISPLAY_DATA_TYPE": self._read_display_data_type,
            "EDGE_WEIGHT_SECTION": self._read_edge_weight_section,
            "DISPLAY_DATA_SECTION": self._read_display_data_section,
            "NODE_COORD_SECTION": self._read_node_coord_section,
            "NODE_COORD_TYPE": self._read_node_coord_type,
            "DEPOT_SECTION": self._read_depot_section,
            "CAPACITY_VOL": self._skip_pairs("capacity volumes"),
            "DEMAND_SECTION": self._read_demand_section,
            "TIME_WINDOW_SECTION": self._read_time_window_section,
            "STANDTIME_SECTION": self._skip_pairs("standtimes"),
            "PICKUP_SECTION": self._skip_pairs("pickups"),
            "EOF": self._read_eof,
            "NUMBER_OF_TRUCKS": self._read_number_of_trucks,
            "NUM_DAYS": self._read_num_days,
            "DISTANCE": self._read_distance,
            "MAXIMUM_ALLOWABLE_DIFFERENTIAL": self._read_maximum_allowable_differential,
        }

    # -- public interface -------------------------------------------------

    def read(self, input_file: str | Path) -> "TSPLIBInstance":
        """Read an instance from a file."""
        try:
            text = Path(input_file).read_text()
        except OSError as exc:
            raise TSPLIBError(f"ERROR opening input file: {input_file}") from exc
        return self.parse(text)

    def parse(self, text: str) -> "TSPLIBInstance":
        """Read an instance from the text of a TSPLIB file."""
        scanner = _Scanner(clean_text(text))
        _log.info("--  Reading input file  --")
        while (token := scanner.token()) is not None:
            try:
                section = self._sections[token]
            except KeyError:
                raise TSPLIBError(f"unknown keyword: {token!r}") from None
            section(scanner)
        return self

    def get_distances(self) -> list[list[float]]:
        """Square distance matrix; the diagonal holds a large sentinel value."""
        if self.dimension < 0:
            raise TSPLIBError("Dimension not defined")
        return [
            [
                DIAGONAL_DISTANCE if i == j else self._distances[i][j]
                for j in range(self.dimension)
            ]
            for i in range(self.dimension)
        ]

    # -- header keywords ------------------------------------------------------

    def _read_name(self, scanner: _Scanner) -> None:
        self.name = scanner.token() or ""
        _log.info("File                          : %s", self.name)

    def _read_type(self, scanner: _Scanner) -> None:
        self.type = scanner.token() or ""
        _log.info("Type                          : %s", self.type)

    def _read_comment(self, scanner: _Scanner) -> None:
        first = scanner.real()
        c = None
        while c != ",":
            c = scanner.char()
            if c is None:
                break
        second = scanner.real()
        scanner.rest_of_line()
        self.optimal_values = [first, second]
        _log.info("Comment                       : Optimal value not allowing waiting: %5g", first)
        _log.info("                                Optimal value allowing waiting    : %5g", second)

    def _read_dimension(self, scanner: _Scanner) -> None:
        self.dimension = scanner.integer()
        size = max(self.dimension, 0)
        self._distances = [[0.0] * size for _ in range(size)]
        self.coord_ids = [0] * size
        self.coords = [(0.0, 0.0)] * size
        self.display_ids = [0] * size
        self.display = [(0.0, 0.0)] * size
        self.demands = [[] for _ in range(size)]
        _log.info("Dimension                     : %d", self.dimension)

    def _read_edge_weight_type(self, scanner: _Scanner) -> None:
        token = scanner.token() or ""
        _log.info("Edge Weigh Type               : %s", token)
        self.edge_weight_type = EdgeWeightType.__members__.get(token)

    def _read_edge_weight_format(self, scanner: _Scanner) -> None:
        token = scanner.token() or ""
        _log.info("Edge Weigh Format             : %s", token)
        self.edge_weight_format = token if token in _EDGE_WEIGHT_FORMATS else None

    def _read_display_data_type(self, scanner: _Scanner) -> None:
        token = scanner.token() or ""
        _log.info("Display Data Type             : %s", token)
        self.display_data_type = token if token in DISPLAY_DATA_TYPES else None

    def _read_node_coord_type(self, scanner: _Scanner) -> None:
        _log.info("Node Coord Type               : %s", scanner.token())

    def _read_number_of_trucks(self, scanner: _Scanner) -> None:
        _log.info("Number of trucks              : %d", scanner.integer())

    def _read_num_days(self, scanner: _Scanner) -> None:
        self.num_days = scanner.integer()
        _log.info("Number of days                : %d", self.num_days)

    def _read_distance(self, scanner: _Scanner) -> None:
        self.max_distance = scanner.integer()
        _log.info("Distance                      : %d", self.max_distance)

    def _read_maximum_allowable_differential(self, scanner: _Scanner) -> None:
        self.maximum_allowable_differential = scanner.integer()
        _log.info(
            "Maximum allowable differential: %d", self.maximum_allowable_differential
        )

    def _read_eof(self, scanner: _Scanner) -> None:
        _log.info("EOF                           : %s", scanner.token() or "")

    # -- data sections --------------------------------------------------------

    def _rows(self) -> range:
        return range(max(self.dimension, 0))

    def _node_index(self, num: int) -> int:
        if not 1 <= num <= self.dimension:
            raise TSPLIBError(f"node number {num} out of range 1..{self.dimension}")
        return num - 1

    def _skip_pairs(self, label: str) -> Callable[[_Scanner], None]:
        def read(scanner: _Scanner) -> None:
            for _ in self._rows():
                scanner.integer()
                scanner.integer()
            _log.info("Reading %-22s: %d", label, self.dimension)

        return read

    def _read_time_window_section(self, scanner: _Scanner) -> None:
        for _ in self._rows():
            scanner.integer()
            scanner.integer()
            scanner.integer()
        _log.info("Reading time windows          : %d", self.dimension)

    def _read_depot_section(self, scanner: _Scanner) -> None:
        self.depot = scanner.integer()
        _log.info("Depot                         : %d", self.depot)
        scanner.token()

    def _read_display_data_section(self, scanner: _Scanner) -> None:
        if self.display_data_type in (None, "NO_DISPLAY"):
            raise TSPLIBError("Display data type not defined")
        for _ in self._rows():
            num = scanner.integer()
            x = scanner.real()
            y = scanner.real()
            index = self._node_index(num)
            self.display_ids[index] = num
            self.display[index] = (x, y)
        _log.info("Reading coords                : %d", self.dimension)

    def _read_demand_section(self, scanner: _Scanner) -> None:
        if self.num_days == -1:
            raise TSPLIBError("Number of days not defined")
        days = max(self.num_days, 0)
        self.demands = [[0] * days for _ in self.demands]
        for _ in self._rows():
            index = self._node_index(scanner.integer())
            self.demands[index] = [scanner.integer() for _ in range(days)]
        _log.info("Reading demands               : %d", len(self.demands))

    def _read_node_coord_section(self, scanner: _Scanner) -> None:
        if self.edge_weight_type is None:
            raise TSPLIBError("Edge weight type not defined")
        if self.edge_weight_type is EdgeWeightType.EXPLICIT:
            raise TSPLIBError("Edge weight type is explicit")
        for i in self._rows():
            self.coord_ids[i] = scanner.integer()
            self.coords[i] = (scanner.real(), scanner.real())
        self._compute_implicit_distances()
        _log.info("Reading coords                : %d", self.dimension)

    def _compute_implicit_distances(self) -> None:
        try:
            distance = distance_function(self.edge_weight_type)
        except ValueError as exc:
            raise TSPLIBError(str(exc)) from None
        self._distances = [[distance(a, b) for b in self.coords] for a in self.coords]

    def _read_edge_weight_section(self, scanner: _Scanner) -> None:
        if self.edge_weight_type is None:
            raise TSPLIBError("Edge weight type not defined")
        if self.edge_weight_format is None:
            raise TSPLIBError("Edge weight format not defined")
        if self.edge_weight_type is not EdgeWeightType.EXPLICIT:
            raise TSPLIBError("Edge weight type is not explicit")
        pairs, symmetric = _EDGE_WEIGHT_FORMATS[self.edge_weight_format]
        for i, j in pairs(max(self.dimension, 0)):
            value = float(scanner.integer())
            self._distances[i][j] = value
            if symmetric:
                self._distances[j][i] = value
        _log.info("Reading distances             : %d", self.dimension)
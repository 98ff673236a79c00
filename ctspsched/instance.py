"""Periodic and consistent TSP instances built from TSPLIB files."""

from __future__ import annotations

import logging
from pathlib import Path

from ctspsched.tsplib import TSPLIBInstance

_log = logging.getLogger(__name__)

MAX_DISTANCE_DISABLED = 999999999.0
TRIANGLE_TOLERANCE = 1 + 1e-2
SYMMETRY_TOLERANCE = 1e-2


class PTSPInstance:
    """Multi-day TSP instance: one distance matrix, demands per customer and day."""

    def __init__(self) -> None:
        self.id = ""
        self.comment = ""
        self.type = ""
        self.n_customers = 0
        self.n_days = 0
        self.distances: list[list[float]] = []
        self.triangle_inequality = False
        self.symmetry = False
        self.demands: list[list[int]] = []

    def check_triangle_inequality(self) -> bool:
        """True if d(i,k) + d(k,j) >= d(i,j) - 1.01 for all distinct i, j, k."""
        d = self.distances
        nodes = range(len(d))
        return not any(
            d[i][k] + d[k][j] < d[i][j] - TRIANGLE_TOLERANCE
            for i in nodes
            for j in nodes
            for k in nodes
            if i != j and j != k and i != k
        )

    def check_symmetry(self) -> bool:
        """True if d(i,j) and d(j,i) differ by at most 0.01 for all i != j."""
        d = self.distances
        nodes = range(len(d))
        return all(
            abs(d[i][j] - d[j][i]) <= SYMMETRY_TOLERANCE
            for i in nodes
            for j in nodes
            if i != j
        )


class CTSPInstance(PTSPInstance):
    """Consistent TSP instance: adds time window widths and a route length limit."""

    def __init__(self, input_file: str | Path | None = None) -> None:
        super().__init__()
        self.T: list[float] = []
        self.max_distance = 0.0
        self.optimal_values: list[float] = []
        if input_file is not None:
            self.read(input_file)

    def read(self, input_file: str | Path) -> "CTSPInstance":
        """Load the instance from a TSPLIB file with the CTSP extensions."""
        return self.load_tsplib(TSPLIBInstance().read(input_file))

    def load_tsplib(self, tsplib: TSPLIBInstance) -> "CTSPInstance":
        """Fill the instance from an already parsed TSPLIB instance."""
        self.id = tsplib.name
        self.type = tsplib.type
        self.comment = tsplib.comment
        self.n_customers = tsplib.dimension - 1
        self.distances = tsplib.get_distances()
        self.demands = [list(row) for row in tsplib.demands]
        self.max_distance = float(tsplib.max_distance)
        self.n_days = tsplib.num_days
        self.T = [float(tsplib.maximum_allowable_differential)] * max(
            self.n_customers, 0
        )
        self.optimal_values = list(tsplib.optimal_values)

        self.triangle_inequality = self.check_triangle_inequality()
        if not self.triangle_inequality:
            _log.warning("Warning: Triangle inequality violated")

        self.symmetry = self.check_symmetry()
        if not self.symmetry:
            _log.warning("Warning: Distances are not symmetric")
        return self

    def disable_max_distance(self) -> None:
        """Lift the route length limit by setting it to a very large value."""
        self.max_distance = MAX_DISTANCE_DISABLED

    def n_customer_operations(self) -> int:
        """Number of (location, day) pairs with a positive demand."""
        days = max(self.n_days, 0)
        return sum(1 for row in self.demands for d in row[:days] if d > 0)

    def write_line(self) -> str:
        """One summary line: name, T, limit, days, customers, operations, optima."""
        if not self.T:
            raise ValueError("instance has no time window widths")
        if len(self.optimal_values) < 2:
            raise ValueError("instance has no optimal values")
        return (
            f"{self.id:<20}\t"
            f"{self.T[0]:>5g}\t"
            f"{self.max_distance:>5g}\t"
            f"{self.n_days:>5}\t"
            f"{self.n_customers:>5}\t"
            f"{self.n_customer_operations():>5}\t"
            f"{self.optimal_values[0]:>9.1f}\t"
            f"{self.optimal_values[1]:>9.1f}\t"
        )
# ctspsched

Tools for Consistent Travelling Salesman Problem (CTSP) instances. A CTSP
instance plans routes over several days. A customer may need visits on
several of those days, and all visits to the same customer must fall inside
a time window of fixed width.

The package provides:

- `ctspsched.distances`: the TSPLIB distance functions for `EUC_2D`,
  `MAX_2D`, `MAN_2D`, `CEIL_2D`, `GEO` and `ATT`, and the `EdgeWeightType`
  enumeration;
- `ctspsched.tsplib`: a TSPLIB reader that also understands the multi-day
  keywords `NUM_DAYS`, `DISTANCE`, `MAXIMUM_ALLOWABLE_DIFFERENTIAL` and
  `DEMAND_SECTION`;
- `ctspsched.instance`: periodic and consistent TSP instance models, with
  checks for symmetry and for the triangle inequality;
- `ctspsched.files`: argument parsing and output file names for a scheduler
  run.

It needs Python 3.10 or newer and has no runtime dependencies.

## Distances

```python
from ctspsched.distances import EdgeWeightType, distance_function, euc_2d_distance

euc_2d_distance((0.0, 0.0), (3.0, 4.0))        # 5.0
geo = distance_function(EdgeWeightType.GEO)
geo((38.24, 20.42), (39.57, 26.15))            # whole kilometres, TSPLIB style
```

Each function returns a float and rounds the way TSPLIB specifies. The
helpers `nint`, `dtrunc` and `radian_coords` are also public.
`distance_function` raises `ValueError` for `EXPLICIT` and for the 3D types,
because none of these is computed from 2D coordinates.

## Reading a TSPLIB file

```python
from ctspsched.tsplib import TSPLIBInstance, TSPLIBError

tsplib = TSPLIBInstance()
try:
    tsplib.read("input/bayg29.contsp")
except TSPLIBError as exc:
    print("cannot read instance:", exc)

matrix = tsplib.get_distances()   # list of rows; the diagonal holds 100000000.0
```

The reader applies `clean_text` first, which removes every `:` from the
input. As a result, `NAME: x` and `NAME x` are read the same way. To parse
text that is already in memory, use `TSPLIBInstance.parse`.

After a read, the instance exposes these attributes: `name`, `type`,
`dimension`, `num_days`, `max_distance`, `maximum_allowable_differential`,
`depot`, `coords`, `demands` and `optimal_values`. The two optimal values
come from a `COMMENT` line written as `<value>, <value>`.

Edge weights can be given explicitly in any of the nine TSPLIB matrix
formats, or computed from a `NODE_COORD_SECTION`. The reader raises
`TSPLIBError` in these cases:

- an unknown keyword;
- a malformed number;
- a node number out of range;
- a section that is missing what it depends on, such as a
  `DEMAND_SECTION` before `NUM_DAYS`.

Progress messages go to the standard `logging` module under the logger
`ctspsched.tsplib`.

## CTSP instances

```python
from ctspsched.instance import CTSPInstance

inst = CTSPInstance("input/bayg29.contsp")   # or CTSPInstance().read(path)

inst.n_customer_operations()   # number of (location, day) pairs with demand > 0
inst.check_symmetry()
inst.check_triangle_inequality()
print(inst.write_line())       # tab-separated summary line for a results table

inst.disable_max_distance()    # set the route-length limit to 999999999
```

`CTSPInstance.load_tsplib` fills an instance from a `TSPLIBInstance` that
has already been read. Each customer's time-window width is stored in
`inst.T` and is set to the file's `MAXIMUM_ALLOWABLE_DIFFERENTIAL`. If the
distances are not symmetric, or if they break the triangle inequality, a
warning is logged and the `symmetry` or `triangle_inequality` attribute is
set to `False`.

## Scheduler arguments and output files

`parse_arguments` takes the four arguments that follow the program name:
the problem type (`ctsp2`), the instance file, the solution file and the
output directory.

```python
from ctspsched.files import parse_arguments, usage, UsageError

try:
    problem_type, inputs, outputs = parse_arguments(
        ["ctsp2", "input/bayg29.contsp", "input/bayg29.sol", "output"]
    )
except UsageError as exc:
    print(exc)
    print(usage("scheduler"))
else:
    outputs.schedule_path()          # output/bayg29.sched.json
    outputs.infeasible_paths_path()  # output/bayg29.infeas_paths.txt
    outputs.graph_path()             # output/bayg29.graph.dot
```

`UsageError` is raised when the number of arguments is wrong or the problem
type is unknown. `instance_name_from_path` strips the directories and the
last extension from a path. Both `/` and `\` count as separators.

## What the package does not do

The package reads instances and works out file names. It does not read
solution files. It does not build or solve the synchronisation model that
turns routes into visit times. It does not write schedules, infeasible-path
lists or graphs; `ctspsched.files` only names the files that such a run
would produce. It installs no command-line program.
"""Command-line arguments and the input and output file names of the scheduler."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

REQUIRED_ARGUMENTS = 4


class ProblemType(Enum):
    """Problem variants the scheduler can handle."""

    CTSP2 = "ctsp2"


class UsageError(ValueError):
    """Raised when the command-line arguments are not usable."""


@dataclass
class InputFiles:
    """Paths of the instance file and the solution file."""

    ins_file: str = ""
    sol_file: str = ""


def instance_name_from_path(path: str) -> str:
    """Base name of a path without its directory and its last extension.

    Both '/' and '\\' count as directory separators. A dot that lies inside
    the directory part is not taken as an extension.
    """
    start = max(path.rfind("/"), path.rfind("\\")) + 1
    dot = path.rfind(".")
    end = dot if dot >= start else len(path)
    return path[start:end]


@dataclass
class OutputFiles:
    """Output directory and the instance name used to build output file names."""

    output_path: str = ""
    instance_name: str = ""

    @staticmethod
    def from_paths(output_path: str, ins_file: str) -> "OutputFiles":
        """Output files for a directory, named after an instance file."""
        return OutputFiles(output_path, instance_name_from_path(ins_file))

    def _file(self, suffix: str) -> str:
        return f"{self.output_path}/{self.instance_name}{suffix}"

    def schedule_path(self) -> str:
        """Path of the JSON schedule written for a feasible solution."""
        return self._file(".sched.json")

    def infeasible_paths_path(self) -> str:
        """Path of the list of infeasible paths written for an infeasible solution."""
        return self._file(".infeas_paths.txt")

    def graph_path(self) -> str:
        """Path of the primal-dual graph written for an infeasible solution."""
        return self._file(".graph.dot")


def usage(program_name: str) -> str:
    """Usage text of the scheduler command."""
    return (
        "\n"
        "CTSP Scheduler - Convert routing solutions to temporal schedules\n"
        "================================================================\n\n"
        "Usage:\n"
        f"  {program_name} <problem_type> <instance_file> <solution_file> <output_file>\n\n"
        "Arguments:\n"
        "  problem_type    Problem variant: 'ctsp2' (multi-depot) or 'ctsp1' (single-depot)\n"
        "  instance_file   Path to CTSP instance file (.contsp format)\n"
        "  solution_file   Path to feasible solution file (.sol format)\n"
        "  output_file     Path for output schedule file (.sched.json format)\n\n"
        "Example:\n"
        f"  {program_name} ctsp2 input/bayg29.contsp input/bayg29.sol output/schedule.json\n\n"
    )


def parse_arguments(argv: list[str]) -> tuple[ProblemType, InputFiles, OutputFiles]:
    """Interpret the arguments that follow the program name.

    Expects: problem type, instance file, solution file, output path.
    Raises UsageError on a wrong number of arguments or an unknown problem type.
    """
    args = list(argv)
    if len(args) != REQUIRED_ARGUMENTS:
        raise UsageError(
            "Invalid number of arguments.\n"
            f"Expected {REQUIRED_ARGUMENTS} arguments, got {len(args)}."
        )
    prob_type_s, ins_file, sol_file, sch_file = args

    try:
        prob_type = ProblemType(prob_type_s)
    except ValueError:
        raise UsageError("Incorrect problem type") from None

    return (
        prob_type,
        InputFiles(ins_file, sol_file),
        OutputFiles.from_paths(sch_file, ins_file),
    )
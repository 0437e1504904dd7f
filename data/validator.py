"""Schema validation for uploaded roster files."""

from dataclasses import dataclass, field
from typing import List
import pandas as pd

from engine.topology import DEFAULT_TOPOLOGY, SeatTopology
from models.seat import SeatFamily


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


ROSTER_REQUIRED_COLUMNS = ["Mentor", "Robot", "Game", "Fab", "Prime"]
COUNT_COLUMNS = ["Robot", "Game", "Fab", "Prime"]


def _check_required_columns(df: pd.DataFrame, required: List[str], file_label: str) -> ValidationResult:
    result = ValidationResult()
    missing = [col for col in required if col not in df.columns]
    if missing:
        result.is_valid = False
        result.errors.append(f"{file_label}: Missing required columns: {', '.join(missing)}")
    if df.empty:
        result.is_valid = False
        result.errors.append(f"{file_label}: File contains no data rows.")
    return result


def validate_roster(df: pd.DataFrame, topology: SeatTopology = DEFAULT_TOPOLOGY) -> ValidationResult:
    result = _check_required_columns(df, ROSTER_REQUIRED_COLUMNS, "Roster")
    if not result.is_valid:
        return result

    for col in COUNT_COLUMNS:
        values = pd.to_numeric(df[col], errors="coerce")
        if values.isna().any():
            result.is_valid = False
            result.errors.append(f"Roster: {col} must be a number in every row.")
            continue
        if (values < 0).any():
            result.is_valid = False
            result.errors.append(f"Roster: {col} cannot be negative.")
        if (values % 1 != 0).any():
            result.is_valid = False
            result.errors.append(f"Roster: {col} must be a whole number.")

    names = df["Mentor"].astype(str).str.strip()
    if (names == "").any() or df["Mentor"].isna().any():
        result.is_valid = False
        result.errors.append("Roster: Every row needs a Mentor name.")

    dupes = names.duplicated(keep=False)
    if dupes.any():
        result.is_valid = False
        result.errors.append(f"Roster: Duplicate mentor names: {names[dupes].unique().tolist()}")

    if not result.is_valid:
        return result

    # Capacity warnings; the allocator will still run and report errors per group
    focused_seats = len(topology.seats_in_family(SeatFamily.FOCUSED))
    shared_seats = len(topology.seats_in_family(SeatFamily.SHARED))
    robot_total = int(df["Robot"].sum())
    shared_total = int(df[["Game", "Fab", "Prime"]].to_numpy().sum())
    if robot_total > focused_seats:
        result.warnings.append(
            f"Roster: {robot_total} robot students exceed the {focused_seats} robot seats "
            f"(floor seats included). Some mentors will not be seated."
        )
    if shared_total > shared_seats:
        result.warnings.append(
            f"Roster: {shared_total} game/fab/prime students exceed the "
            f"{shared_seats} long-desk seats. Some mentors will not be seated."
        )
    return result

"""File upload parsing — CSV/XLSX roster into Group objects."""

import pandas as pd
from typing import List

from models.course import CourseCounts
from models.group import Group


def parse_groups(df: pd.DataFrame) -> List[Group]:
    """Convert a validated roster DataFrame into Group objects."""
    groups = []
    for i, (_, row) in enumerate(df.iterrows(), start=1):
        group_id = f"mentor-{i}"
        if "Mentor ID" in df.columns and pd.notna(row.get("Mentor ID")):
            group_id = str(row["Mentor ID"]).strip()
        groups.append(Group(
            group_id=group_id,
            label=str(row["Mentor"]).strip(),
            counts=CourseCounts(
                robot=int(row["Robot"]),
                game=int(row["Game"]),
                fab=int(row["Fab"]),
                prime=int(row["Prime"]),
            ),
        ))
    return groups


def groups_to_df(groups: List[Group]) -> pd.DataFrame:
    """Roster DataFrame for the given groups (inverse of parse_groups)."""
    return pd.DataFrame([{
        "Mentor ID": g.group_id,
        "Mentor": g.label,
        "Robot": g.counts.robot,
        "Game": g.counts.game,
        "Fab": g.counts.fab,
        "Prime": g.counts.prime,
    } for g in groups])


def load_file(uploaded_file) -> pd.DataFrame:
    """Load an uploaded file (CSV or XLSX) into a DataFrame."""
    name = uploaded_file.name.lower()
    if name.endswith(".csv"):
        return pd.read_csv(uploaded_file)
    elif name.endswith(".xlsx") or name.endswith(".xls"):
        return pd.read_excel(uploaded_file, engine="openpyxl")
    else:
        raise ValueError(f"Unsupported file format: {name}. Use CSV or XLSX.")

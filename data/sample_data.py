"""Generate a sample mentor roster for the Classroom Seating Planner."""

import os
import pandas as pd


def generate_roster_df() -> pd.DataFrame:
    """A typical evening: six mentors with mixed courses."""
    rows = [
        {"Mentor": "Mentor 1", "Robot": 0, "Game": 3, "Fab": 1, "Prime": 0},
        {"Mentor": "Mentor 2", "Robot": 3, "Game": 0, "Fab": 0, "Prime": 0},
        {"Mentor": "Mentor 3", "Robot": 2, "Game": 1, "Fab": 0, "Prime": 0},
        {"Mentor": "Mentor 4", "Robot": 0, "Game": 1, "Fab": 1, "Prime": 1},
        {"Mentor": "Mentor 5", "Robot": 3, "Game": 0, "Fab": 0, "Prime": 0},
        {"Mentor": "Mentor 6", "Robot": 0, "Game": 0, "Fab": 2, "Prime": 0},
    ]
    return pd.DataFrame(rows)


def generate_sample_csv(output_dir: str):
    os.makedirs(output_dir, exist_ok=True)
    generate_roster_df().to_csv(os.path.join(output_dir, "roster.csv"), index=False)


def generate_sample_excel(output_dir: str):
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, "roster.xlsx")
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        generate_roster_df().to_excel(writer, sheet_name="Roster", index=False)


if __name__ == "__main__":
    out = os.path.join(os.path.dirname(__file__), "..", "sample_files")
    generate_sample_csv(out)
    generate_sample_excel(out)
    print("Sample roster files generated in sample_files/")

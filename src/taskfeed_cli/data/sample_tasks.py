"""Built-in sample tasks shown when no feed is configured or loading fails."""

from __future__ import annotations

from datetime import date

from taskfeed_cli.models import Task

DESIGN = "Design"
ELECTRICAL = "Electrical"
PROGRAMMING = "Programming"
FABRICATION = "Fabrication"

SUB_TEAM_COLORS: dict[str, str] = {
    DESIGN: "#AECBFA",  # pastel blue
    ELECTRICAL: "#FDE68A",  # pastel yellow
    PROGRAMMING: "#A7F3D0",  # pastel green
    FABRICATION: "#FECACA",  # pastel red
}

# Bars for unknown sub-teams and blocked tasks.
FALLBACK_COLOR = "#9CA3AF"
BLOCKED_COLOR = "#374151"


def sub_team_color(sub_team: str) -> str:
    """Return the display color for a sub-team label."""
    return SUB_TEAM_COLORS.get(sub_team, FALLBACK_COLOR)


def sample_tasks() -> list[Task]:
    """Return a fresh copy of the sample task list."""
    return [
        Task(
            id="1",
            name="Chassis Design",
            overview="Design the main robot chassis in CAD",
            sub_team=DESIGN,
            required_for=["2", "3"],
            start_date=date(2025, 1, 10),
            deadline=date(2025, 1, 15),
            total_days=5,
            person_responsible="Alice",
            completed=True,
        ),
        Task(
            id="2",
            name="Frame Fabrication",
            overview="Cut and weld the chassis frame",
            sub_team=FABRICATION,
            pre_requisites=["Chassis Design"],
            required_for=["4"],
            start_date=date(2025, 1, 16),
            deadline=date(2025, 1, 22),
            total_days=6,
            person_responsible="Bob",
        ),
        Task(
            id="3",
            name="Wiring Harness",
            overview="Lay out and crimp the main power harness",
            sub_team=ELECTRICAL,
            pre_requisites=["1"],
            required_for=["4"],
            start_date=date(2025, 1, 16),
            deadline=date(2025, 1, 20),
            total_days=4,
            person_responsible="Carol",
            spots_needed=2,
        ),
        Task(
            id="4",
            name="Drive Code",
            overview="Write and tune the drivetrain control loop",
            sub_team=PROGRAMMING,
            pre_requisites=["2", "3"],
            start_date=date(2025, 1, 21),
            deadline=date(2025, 1, 28),
            total_days=7,
            person_responsible="Dave",
        ),
    ]

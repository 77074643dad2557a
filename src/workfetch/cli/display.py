"""Rendering of the work-time status: logo on the left, entries on the right."""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from workfetch.resolver import StartSource
from workfetch.schedule import format_duration
from workfetch.workday import WorkDayStatus

LOGO = [
    "##################",
    "###+=======+######",
    "###-          ####",
    "###-   *##=    ###",
    "###-   *##:    ###",
    "###-   +=-     ###",
    "###-          ####",
    "###-   :.     ####",
    "###-   *##=    ###",
    "###-   *##=    ###",
    "###-   ++=     ###",
    "###-          ####",
    "###========+######",
    "##################",
]

SEPARATOR = "-" * 35
LABEL_WIDTH = 18

SOURCE_LABELS = {
    StartSource.SYSTEM: "System Start",
    StartSource.RESTORED: "Restored Start",
}

# (label, value, style); label "---" marks a separator, "" a free-standing line
Entry = tuple[str, str, str]


def build_entries(status: WorkDayStatus) -> list[Entry]:
    schedule = status.schedule
    entries: list[Entry] = [
        (SOURCE_LABELS[status.source], schedule.effective_start.strftime("%H:%M:%S"), "blue"),
        ("Rounded Start", schedule.rounded_start.strftime("%H:%M"), "cyan"),
        ("---", SEPARATOR, "dim"),
        ("Target Work Time", format_duration(schedule.work_minutes), "green"),
        ("Break Time", format_duration(schedule.break_minutes), "green"),
        ("End of Day", schedule.end_of_day.strftime("%H:%M"), "magenta"),
        ("---", SEPARATOR, "dim"),
    ]
    if schedule.is_done:
        entries.append(("Remaining", "DONE! 🎉", "red"))
        entries.append(("", "You have reached your goal for today.", "bold"))
    else:
        entries.append(("Remaining", format_duration(schedule.remaining_minutes), "yellow"))
    return entries


def _entry_text(label: str, value: str, style: str) -> Text:
    if label == "---":
        return Text(value, style="dim")
    if not label:
        return Text(value, style="bold")
    text = Text()
    text.append(label.ljust(LABEL_WIDTH), style="bold")
    text.append(" : ")
    text.append(value, style=f"bold {style}")
    return text


def render(console: Console, status: WorkDayStatus) -> None:
    entries = build_entries(status)
    grid = Table.grid(padding=(0, 4))
    grid.add_column(no_wrap=True)
    grid.add_column(no_wrap=True)
    for i in range(max(len(LOGO), len(entries))):
        logo_part = Text(LOGO[i]) if i < len(LOGO) else Text("")
        entry_part = _entry_text(*entries[i]) if i < len(entries) else Text("")
        grid.add_row(logo_part, entry_part)

    console.print()
    console.print(grid)
    console.print()

"""
Command Line Interface for ganttgraph.
"""

import sys
import click
from .version import VERSION
from .errors import GanttError
from .io import load_plan


def _load_or_exit(plan_file):
    try:
        return load_plan(plan_file)
    except GanttError as e:
        click.echo(f"❌ Error loading plan: {e}")
        sys.exit(1)


@click.group()
@click.version_option(version=VERSION, prog_name="ganttgraph")
def main():
    """
    ganttgraph - task graphs and Gantt schedules.

    Plans are read from YAML files and never modified.
    """
    pass


@main.command()
@click.argument('plan_file', type=click.Path(dir_okay=False))
@click.option('--from', 'start_node', default=None, help='Only schedule tasks below this task')
def render(plan_file, start_node):
    """Print the schedule of a plan."""
    chart = _load_or_exit(plan_file)

    try:
        render_map = chart.render(start_node)
    except GanttError as e:
        click.echo(f"❌ Error rendering schedule: {e}")
        sys.exit(1)

    if not render_map:
        click.echo("📭 Nothing to schedule")
        return

    click.echo(f"📅 {chart.id} (starts {chart.get_start_date().isoformat()})")
    for element in render_map.values():
        click.echo(
            f"   {element.name}: {element.start.isoformat()} → {element.end.isoformat()}"
            f" ({element.duration}d)"
        )
        if element.overlapping_start is not None:
            click.echo(
                f"      ⚠️  requested start {element.overlapping_start.isoformat()}"
                f" is before its dependencies finish"
            )


@main.command()
@click.argument('plan_file', type=click.Path(dir_okay=False))
@click.argument('pattern')
def search(plan_file, pattern):
    """List tasks whose name contains PATTERN (case-insensitive)."""
    chart = _load_or_exit(plan_file)

    try:
        names = chart.find_tasks(pattern)
    except GanttError as e:
        click.echo(f"❌ Error searching tasks: {e}")
        sys.exit(1)

    if not names:
        click.echo(f"🔍 No tasks match '{pattern}'")
        return

    for name in names:
        click.echo(name)


@main.command()
@click.argument('plan_file', type=click.Path(dir_okay=False))
def status(plan_file):
    """Show chart information for a plan."""
    chart = _load_or_exit(plan_file)

    click.echo(f"📋 Chart: {chart.id}")
    click.echo(f"📅 Start date: {chart.get_start_date().isoformat()}")
    # The root is not a user task
    click.echo(f"🧩 Tasks: {chart.get_tasks_count() - 1}")
    click.echo(f"📦 Remaining capacity: {chart.get_remaining_capacity()}")


if __name__ == "__main__":
    main()

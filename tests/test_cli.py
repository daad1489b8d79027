"""Tests for plan file loading and the command line."""

from datetime import date

import pytest
from click.testing import CliRunner

from ganttgraph.cli import main
from ganttgraph.errors import ApiError, CorruptionError, FileOperationError
from ganttgraph.io import build_chart, load_plan, load_plan_file
from ganttgraph.version import VERSION

PLAN = """\
id: website
start_date: 2026-01-01
default_color: 2
tasks:
  - name: Design
    duration: 5
  - name: Build
    duration: 3
    parents: [Design]
  - name: Docs
    duration: 1
    parents: Design
    start: 2026-01-02
  - name: Launch
    start: 2026-01-12
    end: 2026-01-13
    parents: [Build, Docs]
    color: 9
"""


@pytest.fixture
def plan_file(tmp_path):
    path = tmp_path / "plan.yml"
    path.write_text(PLAN, encoding="utf-8")
    return path


@pytest.fixture
def runner():
    return CliRunner()


class TestLoadPlan:
    """Test reading plan files."""

    def test_load(self, plan_file):
        chart = load_plan(plan_file)

        assert chart.id == "website"
        assert chart.get_start_date() == date(2026, 1, 1)
        assert chart.get_tasks_count() == 5
        assert chart.get_task("Build").color.value == 2
        assert chart.get_task("Launch").duration == 2
        assert chart.get_task("Launch").parents == {"Build", "Docs"}

    def test_file_untouched(self, plan_file):
        load_plan(plan_file)
        assert plan_file.read_text(encoding="utf-8") == PLAN

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileOperationError):
            load_plan_file(tmp_path / "nope.yml")

    def test_bad_yaml(self, tmp_path):
        path = tmp_path / "bad.yml"
        path.write_text("id: [unclosed\n", encoding="utf-8")
        with pytest.raises(CorruptionError, match="YAML syntax error"):
            load_plan_file(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(CorruptionError):
            load_plan_file(path)

    def test_invalid_plan(self, tmp_path):
        path = tmp_path / "invalid.yml"
        path.write_text("tasks: []\n", encoding="utf-8")
        with pytest.raises(CorruptionError, match="Invalid plan"):
            load_plan_file(path)

    def test_child_before_parent(self, tmp_path):
        path = tmp_path / "order.yml"
        path.write_text("id: p\ntasks:\n  - name: B\n    parents: [A]\n  - name: A\n", encoding="utf-8")
        plan = load_plan_file(path)
        with pytest.raises(ApiError, match="cannot find parent task"):
            build_chart(plan)


class TestCli:
    """Test the ganttgraph command."""

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert VERSION in result.output

    def test_render(self, runner, plan_file):
        result = runner.invoke(main, ["render", str(plan_file)])

        assert result.exit_code == 0
        assert "website (starts 2026-01-01)" in result.output
        assert "Design: 2026-01-01 → 2026-01-06 (5d)" in result.output
        assert "Build: 2026-01-06 → 2026-01-09 (3d)" in result.output
        assert "Launch: 2026-01-12 → 2026-01-14 (2d)" in result.output
        assert "requested start 2026-01-02" in result.output

    def test_render_from(self, runner, plan_file):
        result = runner.invoke(main, ["render", str(plan_file), "--from", "Build"])

        assert result.exit_code == 0
        assert "Nothing to schedule" in result.output

    def test_search(self, runner, plan_file):
        result = runner.invoke(main, ["search", str(plan_file), "d"])

        assert result.exit_code == 0
        assert result.output.split() == ["Design", "Build", "Docs"]

    def test_search_no_match(self, runner, plan_file):
        result = runner.invoke(main, ["search", str(plan_file), "zzz"])
        assert result.exit_code == 0
        assert "No tasks match" in result.output

    def test_status(self, runner, plan_file):
        result = runner.invoke(main, ["status", str(plan_file)])

        assert result.exit_code == 0
        assert "Chart: website" in result.output
        assert "Tasks: 4" in result.output
        assert "Remaining capacity: 9995" in result.output

    def test_missing_plan(self, runner, tmp_path):
        result = runner.invoke(main, ["render", str(tmp_path / "nope.yml")])
        assert result.exit_code == 1
        assert "Error loading plan" in result.output

"""Unit tests for output renderers."""

import io
import json
import math

import pytest
from rich.console import Console

from diffconfig.core.diff import DiffEngine
from diffconfig.models.diff import ChangeRecord, DiffReport
from diffconfig.renderers import (
    JSONRenderer,
    OutputFormat,
    RenderContext,
    Renderer,
    TerminalRenderer,
    get_renderer,
)
from diffconfig.renderers.terminal import NUMBER_STYLE, SYMBOL_STYLE, TEXT_STYLE, summary_line, value_text


@pytest.fixture
def report(snapshot_v1, snapshot_v2) -> DiffReport:
    return DiffEngine().diff(snapshot_v1, snapshot_v2, source="v1.yaml", target="v2.yaml").report


def make_console() -> Console:
    return Console(
        file=io.StringIO(), width=200, force_terminal=True, color_system="standard", no_color=False
    )


class TestTerminalRenderer:
    """Tests for TerminalRenderer."""

    def test_report_plain(self, report: DiffReport):
        renderer = TerminalRenderer(make_console())

        text = renderer.render(report, RenderContext(color=False))

        assert text.splitlines() == [
            "v1.yaml -> v2.yaml",
            "",
            "changed    app_a.timeout: 30 -> 60",
            "added      app_b: {enabled: True}",
            "",
            "2 changes: 1 added, 0 removed, 1 changed",
        ]

    def test_no_differences(self, snapshot_v1):
        report = DiffEngine().diff(snapshot_v1, snapshot_v1).report

        text = TerminalRenderer(make_console()).render(report, RenderContext(color=False))

        assert text.splitlines() == ["before -> after", "", "No differences found."]

    def test_removed_shows_old_value(self):
        line = TerminalRenderer().change_line(
            ChangeRecord.removed(("app", "hosts", 2), "c"), color=False
        )

        assert line.plain == 'removed    app.hosts[2]: "c"'

    def test_color_styles(self):
        line = TerminalRenderer().change_line(
            ChangeRecord.changed(("app", "name"), "old", 5), color=True
        )

        styles = {line.plain[span.start:span.end]: str(span.style) for span in line.spans}
        assert styles["changed  "] == SYMBOL_STYLE
        assert styles["app.name"] == SYMBOL_STYLE
        assert styles['"old"'] == TEXT_STYLE
        assert styles["5"] == NUMBER_STYLE

    def test_no_color_has_no_spans(self):
        line = TerminalRenderer().change_line(
            ChangeRecord.changed(("app", "name"), "old", 5), color=False
        )

        assert line.spans == []

    def test_color_output_has_escape_codes(self, report: DiffReport):
        console = make_console()

        TerminalRenderer(console).render(report, RenderContext(color=True))

        assert "\x1b[" in console.file.getvalue()

    def test_snapshot_block(self):
        snapshot = {
            "my_app": {
                "url": {"host": "example.com", "port": 4000},
                "hosts": ["a", "b"],
                "pools": [{"size": 1}],
                "debug": False,
                "key": None,
                "dotted.key": 1.5,
                "empty": {},
            }
        }

        text = TerminalRenderer(make_console()).render(snapshot, RenderContext(color=False))

        assert text.splitlines() == [
            "my_app:",
            "  url:",
            '    host: "example.com"',
            "    port: 4000",
            '  hosts: ["a", "b"]',
            "  pools:",
            "    - {size: 1}",
            "  debug: False",
            "  key: None",
            '  "dotted.key": 1.5',
            "  empty: {}",
        ]

    def test_is_renderer(self):
        assert isinstance(TerminalRenderer(), Renderer)
        assert TerminalRenderer().format == OutputFormat.TERMINAL


class TestValueText:
    """Tests for inline value rendering."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("fast", '"fast"'),
            ('say "hi"\n', '"say \\"hi\\"\\n"'),
            ("設定", '"設定"'),
            (30, "30"),
            (0.5, "0.5"),
            (True, "True"),
            (None, "None"),
            ([1, "a"], '[1, "a"]'),
            ({"enabled": True, 1: "x", "a b": []}, '{enabled: True, 1: "x", "a b": []}'),
        ],
    )
    def test_inline(self, value, expected: str):
        assert value_text(value, color=False).plain == expected

    def test_summary_singular(self, snapshot_v1):
        report = DiffEngine().diff(snapshot_v1, {"app_a": {"timeout": 30}}).report

        assert summary_line(report) == "1 change: 0 added, 1 removed, 0 changed"


class TestJSONRenderer:
    """Tests for JSONRenderer."""

    def test_report(self, report: DiffReport):
        data = json.loads(JSONRenderer().render(report, RenderContext(format=OutputFormat.JSON)))

        assert data["source"] == "v1.yaml"
        assert data["total_changes"] == 2
        assert data["entries"][0] == {
            "kind": "changed",
            "path": ["app_a", "timeout"],
            "old_value": 30,
            "new_value": 60,
            "path_str": "app_a.timeout",
        }
        assert data["entries"][1]["new_value"] == {"enabled": True}

    def test_snapshot(self, snapshot_v1):
        data = json.loads(JSONRenderer().render(snapshot_v1, RenderContext(format=OutputFormat.JSON)))

        assert data == snapshot_v1

    def test_non_ascii(self):
        output = JSONRenderer().render({"a": {"s": "設定"}}, RenderContext(format=OutputFormat.JSON))

        assert "設定" in output

    def test_nan_values_kept(self):
        """Test that a NaN setting is not turned into null."""
        report = DiffEngine().diff({"a": {}}, {"a": {"ratio": math.nan}}).report

        output = JSONRenderer().render(report, RenderContext(format=OutputFormat.JSON))

        assert "NaN" in output
        assert math.isnan(json.loads(output)["entries"][0]["new_value"])


class TestGetRenderer:
    """Tests for get_renderer."""

    def test_by_enum(self):
        assert isinstance(get_renderer(OutputFormat.JSON), JSONRenderer)

    def test_by_string(self):
        assert isinstance(get_renderer("terminal"), TerminalRenderer)

    def test_unknown(self):
        with pytest.raises(ValueError):
            get_renderer("markdown")

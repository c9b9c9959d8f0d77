import json

from ci_preflight import __version__
from ci_preflight.checks.base import CheckResult, Status
from ci_preflight.report.generate import format_result, render, summary_line, write_outputs
from ci_preflight.runner.aggregate import ValidationRun


def make_run(results):
    run = ValidationRun()
    run.extend(results)
    return run


class TestFormatResult:
    def test_name_only(self):
        assert format_result(CheckResult("File: firebase.json", Status.PASS)) == [
            "✅ File: firebase.json"
        ]

    def test_version_and_message(self):
        result = CheckResult("Node.js", Status.FAIL, version="v18.19.0", message="Version 20+ required")

        assert format_result(result) == ["❌ Node.js (v18.19.0)", "   Version 20+ required"]

    def test_warn_and_info_glyphs(self):
        assert format_result(CheckResult("a", Status.WARN))[0].startswith("⚠️ ")
        assert format_result(CheckResult("b", Status.INFO))[0].startswith("ℹ️ ")


class TestRender:
    def test_one_line_per_result_in_order(self):
        results = [
            CheckResult("Node.js", Status.PASS, version="v20.1.0"),
            CheckResult("Firebase CLI", Status.WARN),
            CheckResult("File: firebase.json", Status.FAIL),
        ]

        text = render(make_run(results))

        status_lines = [l for l in text.splitlines() if l[:1] in ("✅", "⚠", "❌", "ℹ")]
        # summary line is the last glyph-prefixed line
        assert status_lines[:-1] == ["✅ Node.js (v20.1.0)", "⚠️ Firebase CLI", "❌ File: firebase.json"]
        assert "Running pre-flight checks..." in text

    def test_summary_pass(self):
        run = make_run([CheckResult("a", Status.PASS), CheckResult("b", Status.INFO)])

        assert summary_line(run) == "✅ All checks passed"
        assert render(run).splitlines()[-1] == "✅ All checks passed"

    def test_summary_pass_with_warnings(self):
        run = make_run([CheckResult("a", Status.WARN)])

        assert summary_line(run) == "✅ All checks passed (1 warning)"

    def test_summary_fail(self):
        run = make_run([CheckResult("a", Status.FAIL), CheckResult("b", Status.FAIL)])

        assert summary_line(run) == "❌ Pre-flight checks failed (2 failures)"


class TestWriteOutputs:
    def test_writes_json(self, tmp_path):
        run = make_run([CheckResult("Node.js", Status.PASS, version="v20.0.0")])
        target = tmp_path / "out" / "preflight.json"

        path = write_outputs(run, str(target))

        data = json.loads(target.read_text(encoding="utf-8"))
        assert path == str(target)
        assert data["version"] == __version__
        assert data["exit_code"] == 0
        assert data["results"][0]["name"] == "Node.js"
        assert data["results"][0]["status"] == "PASS"

import pytest
from ci_preflight.checks.base import Check, CheckResult, Status


class TestCheckResult:
    def test_defaults(self):
        result = CheckResult(name="Node.js", status=Status.PASS)

        assert result.version is None
        assert result.message is None
        assert result.is_failure is False

    def test_to_dict(self):
        result = CheckResult(
            name="Firebase CLI", status=Status.FAIL, version="12.0.0", message="Version 13+ required"
        )

        d = result.to_dict()
        assert d["status"] == "FAIL"
        assert d["name"] == "Firebase CLI"
        assert d["version"] == "12.0.0"
        assert d["message"] == "Version 13+ required"

    @pytest.mark.parametrize(
        "status,glyph",
        [(Status.PASS, "✅"), (Status.FAIL, "❌"), (Status.WARN, "⚠️"), (Status.INFO, "ℹ️")],
    )
    def test_glyphs(self, status, glyph):
        assert status.glyph == glyph


class TestCheck:
    def test_run_not_implemented(self):
        with pytest.raises(NotImplementedError):
            Check("base").run(None)

    def test_check_id_defaults_to_class_name(self):
        class Probe(Check):
            pass

        assert Probe().check_id == "Probe"

    def test_result_helpers(self):
        class Probe(Check):
            name = "Probe"

        check = Probe("probe", threshold=1)
        assert check.params == {"threshold": 1}
        assert check.passed().status == Status.PASS
        assert check.failed("bad").message == "bad"
        assert check.warned(version="1.0.0").version == "1.0.0"
        assert check.info(name="Other").name == "Other"
        assert check.passed().check_id == "probe"

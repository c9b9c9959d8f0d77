from ci_preflight.checks.base import Status
from ci_preflight.checks.build_tool import BuildToolCheck


class TestBuildToolCheck:
    def test_available_passes_with_version(self, make_ctx):
        [result] = BuildToolCheck().run(make_ctx())

        assert result.status == Status.PASS
        assert result.name == "npm (functions)"
        assert result.version == "10.2.4"

    def test_runs_inside_functions_directory(self, make_ctx, fake_runner, project_tree):
        BuildToolCheck().run(make_ctx())

        [(args, cwd)] = fake_runner.calls
        assert args == ["npm", "--version"]
        assert cwd == project_tree / "functions"

    def test_missing_tool_fails(self, make_ctx, runner_factory):
        ctx = make_ctx(runner=runner_factory(npm=None))

        [result] = BuildToolCheck().run(ctx)

        assert result.status == Status.FAIL
        assert result.message == "Not available in functions/"

    def test_missing_directory_fails(self, make_ctx, tmp_path):
        # real runner: the working directory does not exist
        from ci_preflight.process import run_command

        ctx = make_ctx(root=tmp_path / "empty", runner=run_command)

        [result] = BuildToolCheck().run(ctx)

        assert result.status == Status.FAIL
        assert result.message == "Not available in functions/"

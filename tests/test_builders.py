"""Tests for the single-file and split build pipelines."""

from datetime import timedelta

from webflow_build.build import SingleFileBuilder, SplitBuilder
from webflow_build.config import BuildSettings

from .conftest import BUILD_TIME, SAMPLE_HTML, SECRETS, write_env


def _kinds(result):
    return [warning.kind for warning in result.warnings]


class TestSingleFileBuilder:
    def test_writes_banner_and_substituted_page(self, project):
        result = SingleFileBuilder(BuildSettings()).build(BUILD_TIME)

        assert result.success
        output = (project / "index-production.html").read_text(encoding="utf-8")
        assert output.startswith("<!--\n  PRODUCTION BUILD\n  Generated: 2025-03-04T05:06:07.890Z\n")
        assert output.count("sk-ant-test-123") == 2
        assert "PLACEHOLDER" not in output.split("-->", 1)[1]
        assert result.artifacts[0].size == (project / "index-production.html").stat().st_size
        assert result.warnings == []

    def test_idempotent_with_same_time(self, project):
        SingleFileBuilder(BuildSettings()).build(BUILD_TIME)
        first = (project / "index-production.html").read_bytes()
        SingleFileBuilder(BuildSettings()).build(BUILD_TIME)
        second = (project / "index-production.html").read_bytes()

        assert first == second

    def test_only_timestamp_differs_between_runs(self, project):
        SingleFileBuilder(BuildSettings()).build(BUILD_TIME)
        first = (project / "index-production.html").read_text(encoding="utf-8").splitlines()
        SingleFileBuilder(BuildSettings()).build(BUILD_TIME + timedelta(hours=1))
        second = (project / "index-production.html").read_text(encoding="utf-8").splitlines()

        diff = [(a, b) for a, b in zip(first, second) if a != b]
        assert len(first) == len(second)
        assert len(diff) == 1
        assert diff[0][0].startswith("  Generated: ")

    def test_missing_and_residual_placeholders_warn(self, project):
        (project / "index.html").write_text(
            "<p>CLAUDE_API_KEY_PLACEHOLDER EXTRA_PLACEHOLDER</p>", encoding="utf-8"
        )

        result = SingleFileBuilder(BuildSettings()).build(BUILD_TIME)

        assert result.success
        assert _kinds(result) == ["PlaceholderNotFound"] * 3 + ["ResidualPlaceholderDetected"]
        assert result.warnings[-1].details == ["EXTRA_PLACEHOLDER"]
        assert (project / "index-production.html").exists()

    def test_denylisted_value_fails_before_any_io(self, project):
        write_env(project / ".env", dict(SECRETS, WEBFLOW_API_TOKEN="YOUR_TOKEN_HERE"))
        (project / "index.html").unlink()

        result = SingleFileBuilder(BuildSettings()).build(BUILD_TIME)

        assert not result.success
        assert result.error.kind == "PlaceholderValueInvalid"
        assert not (project / "index-production.html").exists()

    def test_missing_keys_write_nothing(self, project):
        write_env(project / ".env", {"CLAUDE_API_KEY": "x"})

        result = SingleFileBuilder(BuildSettings()).build(BUILD_TIME)

        assert result.error.kind == "RequiredKeyMissing"
        assert result.error.missing_keys == [
            "WEBFLOW_API_TOKEN",
            "WEBFLOW_SETTINGS_COLLECTION_ID",
            "WEBFLOW_CONTACTS_COLLECTION_ID",
        ]
        assert not (project / "index-production.html").exists()

    def test_missing_source(self, project):
        result = SingleFileBuilder(BuildSettings(source="missing.html")).build(BUILD_TIME)

        assert result.error.kind == "SourceFileMissing"

    def test_write_failure_surfaces_os_error(self, project):
        settings = BuildSettings(output=str(project / "no-such-dir" / "out.html"))

        result = SingleFileBuilder(settings).build(BUILD_TIME)

        assert not result.success
        assert result.error.kind == "FilesystemWriteError"
        assert str(result.error.error) in result.error.message

    def test_dry_run_writes_nothing(self, project):
        result = SingleFileBuilder(BuildSettings(dry_run=True)).build(BUILD_TIME)

        assert result.success
        assert result.dry_run
        assert not (project / "index-production.html").exists()
        assert result.artifacts[0].content.startswith("<!--")


class TestSplitBuilder:
    def test_writes_three_parts(self, project):
        result = SplitBuilder(BuildSettings()).build(BUILD_TIME)

        assert result.success
        deploy = project / "webflow-deploy"
        head = (deploy / "webflow-head.html").read_text(encoding="utf-8")
        html = (deploy / "webflow-html.html").read_text(encoding="utf-8")
        body = (deploy / "webflow-body.html").read_text(encoding="utf-8")

        assert "Part 1 of 3" in head and head.endswith("<style>\nbody { color: #333; }\n</style>")
        assert "Part 2 of 3" in html and html.endswith('-->\n\n<div id="app">Hello</div>')
        assert "Part 3 of 3" in body and body.endswith("</script>")
        assert 'const WEBFLOW_TOKEN = "wf-token-456";' in body
        assert result.created_dir == deploy.relative_to(project)
        assert result.limit_report.all_passed
        assert result.warnings == []

    def test_existing_output_dir_not_reported_as_created(self, project):
        (project / "webflow-deploy").mkdir()

        result = SplitBuilder(BuildSettings()).build(BUILD_TIME)

        assert result.success
        assert result.created_dir is None

    def test_missing_placeholders_are_silent(self, project):
        (project / "index.html").write_text(
            "<head><style>A</style></head><body>B<script>C</script></body>", encoding="utf-8"
        )

        result = SplitBuilder(BuildSettings()).build(BUILD_TIME)

        assert result.success
        assert result.warnings == []
        assert result.substitution.missing == list(result.substitution.counts)

    def test_placeholder_values_allowed(self, project):
        write_env(project / ".env", dict(SECRETS, CLAUDE_API_KEY="your_key_here"))

        assert SplitBuilder(BuildSettings()).build(BUILD_TIME).success

    def test_regions_not_found_warn_but_still_write(self, project):
        (project / "index.html").write_text("<p>no structure</p>", encoding="utf-8")

        result = SplitBuilder(BuildSettings()).build(BUILD_TIME)

        assert result.success
        assert _kinds(result) == ["RegionNotFound"] * 3
        head = (project / "webflow-deploy" / "webflow-head.html").read_text(encoding="utf-8")
        assert head.endswith("-->\n\n")

    def test_size_limit_is_advisory(self, project):
        result = SplitBuilder(BuildSettings(char_limit=300)).build(BUILD_TIME)

        assert result.success
        assert not result.limit_report.all_passed
        assert "SizeLimitExceeded" in _kinds(result)
        assert (project / "webflow-deploy" / "webflow-body.html").exists()

    def test_output_dir_blocked_by_file(self, project):
        (project / "webflow-deploy").write_text("", encoding="utf-8")

        result = SplitBuilder(BuildSettings()).build(BUILD_TIME)

        assert result.error.kind == "FilesystemWriteError"

    def test_missing_env_file(self, project):
        (project / ".env").unlink()

        result = SplitBuilder(BuildSettings()).build(BUILD_TIME)

        assert result.error.kind == "ConfigMissing"
        assert "webflow-build split" in result.error.remediation[-1]
        assert not (project / "webflow-deploy").exists()

    def test_idempotent_with_same_time(self, project):
        SplitBuilder(BuildSettings()).build(BUILD_TIME)
        first = [p.read_bytes() for p in sorted((project / "webflow-deploy").iterdir())]
        SplitBuilder(BuildSettings()).build(BUILD_TIME)
        second = [p.read_bytes() for p in sorted((project / "webflow-deploy").iterdir())]

        assert first == second

    def test_sizes_include_banner(self, project):
        result = SplitBuilder(BuildSettings()).build(BUILD_TIME)

        for artifact in result.artifacts:
            assert artifact.size == artifact.path.stat().st_size
        assert result.total_size == sum(a.size for a in result.artifacts)
        assert (project / "index.html").read_text(encoding="utf-8") == SAMPLE_HTML

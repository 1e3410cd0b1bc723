"""Tests for glue code discovery and scanning."""

import logging
from pathlib import Path

import pytest

from gherkin_builder.core.glue_source import (
    ErrorPolicy,
    find_glue_files,
    scan_directories,
    scan_file,
)
from gherkin_builder.core.step_parser import StepParser
from gherkin_builder.errors import GlueSourceError, MalformedPattern
from gherkin_builder.models import ParameterDescriptor

BROKEN_STEPS = """public class BrokenSteps {
    @Given("^first$")
    public void first() {
    }

    @When("missing anchors")
    public void broken() {
    }

    @Then("^last$")
    public void last(int n) {
    }
}
"""


class TestFindGlueFiles:
    def test_finds_java_files_sorted(self, glue_dir: Path) -> None:
        files = find_glue_files(glue_dir)
        assert files == [glue_dir / "LoginSteps.java", glue_dir / "pets" / "PetSteps.java"]

    def test_custom_suffixes(self, glue_dir: Path) -> None:
        assert find_glue_files(glue_dir, [".md"]) == [glue_dir / "README.md"]

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(GlueSourceError, match="not found"):
            find_glue_files(tmp_path / "nope")


class TestScanFile:
    def test_abort_stops_at_first_malformed_line(self, tmp_path: Path) -> None:
        path = tmp_path / "BrokenSteps.java"
        path.write_text(BROKEN_STEPS)
        parser = StepParser()

        report = scan_file(parser, path, policy=ErrorPolicy.ABORT)

        assert [s.phrase for s in parser.get_steps()] == ["first"]
        assert len(report.errors) == 1
        assert report.errors[0].line_number == 6
        assert report.lines == 6

    def test_skip_continues_after_malformed_line(self, tmp_path: Path) -> None:
        path = tmp_path / "BrokenSteps.java"
        path.write_text(BROKEN_STEPS)
        parser = StepParser()

        report = scan_file(parser, path, policy=ErrorPolicy.SKIP)

        steps = parser.get_steps()
        assert [s.phrase for s in steps] == ["first", "last"]
        assert steps[1].parameters == (ParameterDescriptor.number("n"),)
        assert len(report.errors) == 1
        assert report.lines == len(BROKEN_STEPS.splitlines())

    def test_strict_reraises(self, tmp_path: Path) -> None:
        path = tmp_path / "BrokenSteps.java"
        path.write_text(BROKEN_STEPS)
        with pytest.raises(MalformedPattern):
            scan_file(StepParser(), path, policy=ErrorPolicy.STRICT)

    def test_malformed_line_logged(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        path = tmp_path / "BrokenSteps.java"
        path.write_text(BROKEN_STEPS)
        with caplog.at_level(logging.WARNING):
            scan_file(StepParser(), path, policy=ErrorPolicy.SKIP)
        assert f"{path}:6" in caplog.text

    def test_dangling_step_discarded_at_end_of_file(self, tmp_path: Path) -> None:
        first = tmp_path / "A.java"
        first.write_text('@Given("^dangling$")')
        second = tmp_path / "B.java"
        second.write_text("public class B {\n")
        parser = StepParser()

        report = scan_file(parser, first)
        scan_file(parser, second)

        assert report.discarded == ["dangling"]
        assert parser.get_steps() == ()
        assert not parser.pending

    def test_unreadable_file(self, tmp_path: Path) -> None:
        with pytest.raises(GlueSourceError):
            scan_file(StepParser(), tmp_path / "Missing.java")


class TestScanDirectories:
    def test_scans_tree_in_file_order(self, glue_dir: Path) -> None:
        parser, report = scan_directories([glue_dir])

        phrases = [s.phrase for s in parser.get_steps()]
        assert phrases == [
            "I have a new registered user",
            "I XXXXlogin",
            'I see the login error message \\"XXXX\\"',
            "I own XXXX pets? of kinds? XXXX",
            "I feed them at XXXX as a <span class='any'>...</span>",
        ]
        assert len(report.files) == 2
        assert report.errors == []

    def test_parameters_classified(self, glue_dir: Path) -> None:
        parser, _ = scan_directories([glue_dir])
        steps = parser.get_steps()
        assert steps[0].parameters == ()
        assert steps[3].parameters == (
            ParameterDescriptor.number("count"),
            ParameterDescriptor.enum_ref("petsList", "Animal"),
        )
        assert steps[4].parameters == (
            ParameterDescriptor.date("when"),
            ParameterDescriptor.enum_ref("role", "Role"),
        )

    def test_registry_populated(self, glue_dir: Path) -> None:
        parser, _ = scan_directories([glue_dir])
        registry = parser.get_enum_registry()
        assert registry.base_directories == (glue_dir,)
        assert registry.enumerations == ("Animal", "Role")
        assert registry.qualified_name("Role") == "com.example.data.Role"
        assert "cucumber.api.java.en.Given" in registry.class_includes

    def test_multiple_directories_share_one_parser(self, glue_dir: Path, tmp_path: Path) -> None:
        other = tmp_path / "other"
        other.mkdir()
        (other / "More.java").write_text('@Then("^more$")\npublic void more() {\n')

        parser, report = scan_directories([glue_dir, other])

        assert parser.get_steps()[-1].phrase == "more"
        assert parser.get_enum_registry().base_directories == (glue_dir, other)
        assert len(report.files) == 3

    def test_nested_roots_read_each_file_once(self, tmp_path: Path) -> None:
        steps_dir = tmp_path / "src" / "steps"
        steps_dir.mkdir(parents=True)
        (steps_dir / "S.java").write_text('@Given("^a$")\npublic void a() {\n')

        parser, report = scan_directories([tmp_path / "src", steps_dir])

        assert [s.phrase for s in parser.get_steps()] == ["a"]
        assert report.files == [steps_dir / "S.java"]

    def test_repeated_root_read_once(self, glue_dir: Path) -> None:
        parser, report = scan_directories([glue_dir, glue_dir])

        assert len(parser.get_steps()) == 5
        assert len(report.files) == 2

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(GlueSourceError):
            scan_directories([tmp_path / "nope"])

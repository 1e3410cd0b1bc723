"""Shared test fixtures for gherkin-builder tests."""

import os
from collections.abc import Generator
from pathlib import Path

import pytest
from typer.testing import CliRunner

LOGIN_STEPS = """package com.example.steps;

import com.example.data.Animal;
import com.example.data.Role;
import cucumber.api.java.en.Given;

public class LoginSteps {

    @Given("^I have a new registered user$")
    public void newUser() {
        // ...
    }

    @When("^I (.*)login$")
    public void login(String how) {
    }

    @Then("^I see the login error message \\"([^\\"]*)\\"$")
    public void errorMessage(String message) {
    }
}
"""

PET_STEPS = """package com.example.steps;

import com.example.data.Animal;

public class PetSteps {

    @Given("^I own (\\\\d+) pets? of kinds? (.*)$")
    public void ownPets(int count, List<Animal> pets) {
    }

    @When("^I feed them at (.*) as a (?:guest|member)$")
    public void feed(Date when, Role role) {
    }
}
"""


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def glue_dir(tmp_path: Path) -> Path:
    """Create a glue code tree with two step classes.

    Files sort as LoginSteps.java before pets/PetSteps.java.
    """
    root = tmp_path / "glue"
    (root / "pets").mkdir(parents=True)
    (root / "LoginSteps.java").write_text(LOGIN_STEPS)
    (root / "pets" / "PetSteps.java").write_text(PET_STEPS)
    (root / "README.md").write_text("not glue code\n")
    return root


@pytest.fixture
def in_tmp_path(tmp_path: Path) -> Generator[Path, None, None]:
    """Change cwd to tmp_path for the duration of the test."""
    original_cwd = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_cwd)

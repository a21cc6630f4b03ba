"""Gherkin scenarios for the site header (features/header.feature)."""

from pytest_bdd import scenarios

from kainos_header.steps.header_steps import *  # noqa: F401,F403 - pytest-bdd step fixtures

scenarios("header.feature")

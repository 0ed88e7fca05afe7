"""Shared BDD fixtures for Identity."""

import pytest


@pytest.fixture()
def error():
    """Container for errors raised in When steps."""
    return {"exc": None}

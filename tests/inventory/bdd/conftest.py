"""Shared BDD fixtures for Inventory."""

import pytest


@pytest.fixture()
def error():
    """Container for errors raised in When steps."""
    return {"exc": None}


@pytest.fixture()
def world():
    return {}

import pytest


@pytest.fixture(autouse=True)
def _ctx():
    """Run each test inside a fresh marketplace domain context."""
    from marketplace.domain import marketplace

    with marketplace.domain_context():
        yield

import pytest


@pytest.fixture(autouse=True)
def _ctx():
    """Run each test inside a fresh marketplace domain context."""
    from marketplace.domain import marketplace

    with marketplace.domain_context():
        yield


@pytest.fixture()
def upload_dir(settings, tmp_path):
    """Point image storage at a per-test directory."""
    from marketplace.config import StorageSettings

    settings.storage = StorageSettings(upload_dir=str(tmp_path / "uploads"), public_prefix="/uploads")
    return tmp_path / "uploads"

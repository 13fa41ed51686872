import pytest

from onsclient.common import utils


@pytest.fixture(autouse=True)
def home(tmp_path, monkeypatch):
    """Resolve the home directory to an empty temporary one."""
    monkeypatch.setattr(utils, "home_directory", lambda: tmp_path)
    return tmp_path


@pytest.fixture
def write_credential(home):
    def write(content: str):
        file = home / "ons" / "credential"
        file.parent.mkdir(parents=True, exist_ok=True)
        file.write_text(content, encoding="utf-8")
        return file

    return write

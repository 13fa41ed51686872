import errno
import logging
from pathlib import Path

import pytest

from onsclient import FactoryProperty, ONSClientException
from onsclient.common import property_key_const as pkc, utils
from onsclient.factory import credential


@pytest.fixture
def caplog_ons(caplog):
    # the "ons" logger does not propagate, attach the capture handler directly
    logger = logging.getLogger("ons")
    logger.addHandler(caplog.handler)
    caplog.set_level(logging.DEBUG, logger="ons")
    yield caplog
    logger.removeHandler(caplog.handler)


def test_credential_file_location(home):
    assert credential.credential_file() == home / "ons" / "credential"


def test_credential_file_without_home(monkeypatch):
    monkeypatch.setattr(utils, "home_directory", lambda: None)
    assert credential.credential_file() is None
    assert FactoryProperty().get_max_msg_cache_size() == 1000


def test_missing_file_keeps_defaults(caplog_ons):
    prop = FactoryProperty()
    assert prop.get_access_key() == ""
    assert prop.get_group_id() == ""
    assert prop.get_max_msg_cache_size() == 1000
    assert "no default config file found" in caplog_ons.text


def test_directory_in_place_of_file_is_ignored(home):
    (home / "ons" / "credential").mkdir(parents=True)
    assert FactoryProperty().get_access_key() == ""


def test_partial_file(write_credential):
    write_credential('{"AccessKey":"ak1","GroupId":"g1"}')
    prop = FactoryProperty()

    assert prop.get_access_key() == "ak1"
    assert prop.get_group_id() == "g1"
    assert prop.get_producer_id() == "g1"
    assert pkc.SECRET_KEY not in prop


def test_full_file(write_credential):
    write_credential(
        """
        {
            "AccessKey": "ak",
            "SecretKey": "sk",
            "NAMESRV_ADDR": "10.0.0.1:9876",
            "GroupId": "GID_test",
            "InstanceId": "ignored"
        }
        """
    )
    prop = FactoryProperty()

    assert prop.get_access_key() == "ak"
    assert prop.get_secret_key() == "sk"
    assert prop.get_name_srv_addr() == "10.0.0.1:9876"
    assert prop.get_group_id() == "GID_test"
    assert prop.get_instance_id() == ""
    assert prop


def test_empty_access_key_aborts_construction(write_credential):
    write_credential('{"AccessKey":""}')
    with pytest.raises(ONSClientException) as exc_info:
        FactoryProperty()
    assert exc_info.value.key == pkc.ACCESS_KEY


def test_non_string_secret_key_reads_as_empty(write_credential):
    write_credential('{"SecretKey": 42}')
    with pytest.raises(ONSClientException):
        FactoryProperty()


@pytest.mark.parametrize("content", ["{not json", "", '["AccessKey"]', '"ak"', "null"])
def test_malformed_file_is_ignored(write_credential, caplog_ons, content):
    write_credential(content)
    prop = FactoryProperty()

    assert prop.get_access_key() == ""
    assert prop.get_message_model().code == "CLUSTERING"
    assert any(r.levelno == logging.WARNING for r in caplog_ons.records)


def test_unreadable_file_is_ignored(home, caplog_ons):
    file = home / "ons" / "credential"
    file.parent.mkdir(parents=True)
    file.write_bytes(b"\xff\xfe\xfa")

    assert FactoryProperty().get_access_key() == ""
    assert "failed to read config file" in caplog_ons.text


def test_read_credential_returns_object(write_credential):
    file = write_credential('{"GroupId": "g", "Extra": {"nested": true}}')
    assert credential.read_credential(file) == {"GroupId": "g", "Extra": {"nested": True}}
    assert FactoryProperty().get_consumer_id() == "g"


def test_read_credential_missing(home):
    assert credential.read_credential(home / "ons" / "credential") is None


def test_inaccessible_credential_path_is_ignored(home, monkeypatch):
    target = home / "ons" / "credential"
    stat = Path.stat

    def denied(self, *args, **kwargs):
        if self == target:
            raise PermissionError(errno.EACCES, "Permission denied", str(self))
        return stat(self, *args, **kwargs)

    monkeypatch.setattr(Path, "stat", denied)

    assert credential.read_credential(target) is None
    prop = FactoryProperty()
    assert prop.get_access_key() == ""
    assert prop.get_max_msg_cache_size() == 1000

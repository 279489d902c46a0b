"""Tests for CapabilityStore merge policies."""
import json

import pytest

from webdriver_capabilities.capabilities.store import CapabilityStore
from webdriver_capabilities.capabilities.views import SessionParameters
from webdriver_capabilities.core.exceptions import ConfigurationError, PathError


def test_new_store_has_empty_capabilities():
    params = CapabilityStore().get_session_parameters()
    assert params == {"capabilities": {"alwaysMatch": {}, "firstMatch": []}}


def test_always_match_first_write_wins():
    store = CapabilityStore()
    store.set_always_match_key("a.b", 1)
    store.set_always_match_key("a.b", 2)
    assert store.get_session_parameters()["capabilities"]["alwaysMatch"]["a"]["b"] == 1


def test_always_match_force_overwrites():
    store = CapabilityStore()
    store.set_always_match_key("a.b", 1)
    store.set_always_match_key("a.b", 2, force=True)
    assert store.get_always_match_key("a.b") == 2


def test_always_match_nested_keys_merge():
    store = CapabilityStore()
    store.set_always_match_key("timeouts.implicit", 10000)
    store.set_always_match_key("timeouts.pageLoad", 300000)
    assert store.get_always_match_key("timeouts") == {"implicit": 10000, "pageLoad": 300000}


def test_always_match_malformed_path():
    store = CapabilityStore()
    with pytest.raises(PathError):
        store.set_always_match_key("timeouts..implicit", 1)
    assert store.get_session_parameters()["capabilities"]["alwaysMatch"] == {}


def test_first_match_skips_duplicates():
    store = CapabilityStore()
    store.add_first_match("browserName", "chrome")
    store.add_first_match("browserName", "firefox")
    assert store.get_session_parameters()["capabilities"]["firstMatch"] == [{"browserName": "chrome"}]


def test_first_match_force_replaces_in_place():
    store = CapabilityStore()
    store.add_first_match("browserName", "chrome")
    store.add_first_match("platformName", "linux")
    store.add_first_match("browserName", "firefox", force=True)
    assert store.get_session_parameters()["capabilities"]["firstMatch"] == [
        {"browserName": "firefox"},
        {"platformName": "linux"},
    ]


def test_first_match_distinct_names_append_in_order():
    store = CapabilityStore()
    store.add_first_match("browserName", "chrome")
    store.add_first_match("platformName", "linux")
    assert store.has_first_match("platformName")
    assert not store.has_first_match("browserVersion")
    first_match = store.get_session_parameters()["capabilities"]["firstMatch"]
    assert [list(entry) for entry in first_match] == [["browserName"], ["platformName"]]


def test_root_key_overwrites_by_default():
    store = CapabilityStore()
    store.set_root_key("login", "x")
    store.set_root_key("login", "y")
    assert store.get_session_parameters()["login"] == "y"


def test_root_key_without_force_keeps_existing():
    store = CapabilityStore()
    store.set_root_key("login", "x")
    store.set_root_key("login", "y", force=False)
    assert store.get_root_key("login") == "x"


def test_root_key_cannot_descend_into_first_match():
    store = CapabilityStore()
    with pytest.raises(PathError):
        store.set_root_key("capabilities.firstMatch.extra", 1)


def test_specific_key_requires_specific_key():
    store = CapabilityStore()
    with pytest.raises(ConfigurationError):
        store.set_specific_key("args", ["--headless"])


def test_specific_key_writes_under_vendor_object():
    store = CapabilityStore("chromeOptions")
    store.set_specific_key("args", ["--headless"])
    store.set_specific_key("args", ["--disable-gpu"])
    always_match = store.get_session_parameters()["capabilities"]["alwaysMatch"]
    assert always_match == {"chromeOptions": {"args": ["--disable-gpu"]}}


def test_specific_key_without_force_checks_vendor_object():
    store = CapabilityStore("chromeOptions")
    store.set_specific_key("w3c", True, force=False)
    store.set_specific_key("w3c", False, force=False)
    assert store.get_specific_key("w3c") is True


def test_snapshot_is_detached():
    store = CapabilityStore()
    store.set_always_match_key("timeouts.implicit", 1)
    snapshot = store.get_session_parameters()
    snapshot["capabilities"]["alwaysMatch"]["timeouts"]["implicit"] = 99
    snapshot["capabilities"]["firstMatch"].append({"x": 1})
    assert store.get_always_match_key("timeouts.implicit") == 1
    assert store.get_session_parameters()["capabilities"]["firstMatch"] == []


def test_stored_values_are_copied():
    store = CapabilityStore()
    args = ["--headless"]
    store.set_always_match_key("args", args)
    args.append("--mutated")
    assert store.get_always_match_key("args") == ["--headless"]


def test_setters_chain():
    store = CapabilityStore("chromeOptions")
    result = (
        store.set_always_match_key("platformName", "linux")
        .add_first_match("browserName", "chrome")
        .set_root_key("login", "x")
        .set_specific_key("w3c", True)
    )
    assert result is store


def test_validate_and_to_json():
    store = CapabilityStore()
    store.set_root_key("login", "x")
    store.add_first_match("browserName", "chrome")
    view = store.validate()
    assert isinstance(view, SessionParameters)
    assert view.capabilities.first_match == [{"browserName": "chrome"}]
    assert json.loads(store.to_json()) == store.get_session_parameters()


def test_invalid_specific_key_rejected():
    with pytest.raises(PathError):
        CapabilityStore("chrome options")


def test_first_match_rejects_dotted_name():
    store = CapabilityStore()
    with pytest.raises(PathError):
        store.add_first_match("timeouts.implicit", 1)
    assert store.get_session_parameters()["capabilities"]["firstMatch"] == []


@pytest.mark.parametrize("path", ["capabilities", "capabilities.alwaysMatch", "capabilities.firstMatch"])
def test_root_key_cannot_replace_capabilities(path):
    store = CapabilityStore()
    with pytest.raises(PathError):
        store.set_root_key(path, 5)
    assert store.get_session_parameters() == {"capabilities": {"alwaysMatch": {}, "firstMatch": []}}
    store.set_always_match_key("platformName", "linux")
    assert store.get_always_match_key("platformName") == "linux"

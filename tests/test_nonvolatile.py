# SPDX-FileCopyrightText: Copyright (c) 2026 mattersensor contributors
#
# SPDX-License-Identifier: MIT

import json

import pytest

from mattersensor.nonvolatile import PersistentDictionary


def test_open_creates_state_file(tmp_path):
    state_file = tmp_path / "state.json"
    state = PersistentDictionary.open(state_file)
    assert state_file.exists()
    assert list(state.keys()) == []


def test_nothing_written_until_commit(tmp_path):
    state_file = tmp_path / "state.json"
    state = PersistentDictionary.open(state_file)
    state["profile"] = "contact"
    assert json.loads(state_file.read_text()) == {}

    state.commit()
    assert json.loads(state_file.read_text()) == {"profile": "contact"}
    assert not state.dirty


def test_nested_writes_dirty_the_root(tmp_path):
    state_file = tmp_path / "state.json"
    state = PersistentDictionary.open(state_file)
    device = state.setdefault("devices", {}).setdefault("sensor1", {})
    state.commit()

    device.setdefault("fields", {})["__profile_inferred"] = True
    assert state.dirty
    device.commit()

    assert json.loads(state_file.read_text()) == {
        "devices": {"sensor1": {"fields": {"__profile_inferred": True}}}
    }
    assert not (tmp_path / "state.json.tmp").exists()


def test_reload(tmp_path):
    state_file = tmp_path / "state.json"
    state_file.write_text('{"devices": {"sensor1": {"profile": "motion"}}}')
    state = PersistentDictionary(state_file)
    assert state["devices"]["sensor1"]["profile"] == "motion"
    assert "devices" in state
    assert state.get("missing") is None


def test_replacing_a_nested_dict(tmp_path):
    state = PersistentDictionary(state={"a": {"b": 1}})
    assert state["a"]["b"] == 1
    state["a"] = {"b": 2}
    assert state["a"]["b"] == 2
    del state["a"]
    assert "a" not in state


def test_requires_a_source():
    with pytest.raises(ValueError):
        PersistentDictionary()

# SPDX-FileCopyrightText: Copyright (c) 2026 mattersensor contributors
#
# SPDX-License-Identifier: MIT

import json

import pytest

from mattersensor import __main__ as cli
from mattersensor.device import Endpoint


@pytest.fixture
def device_file(tmp_path):
    path = tmp_path / "device.json"
    path.write_text(
        json.dumps(
            {
                "id": "hallway",
                "capabilities": ["contactSensor", "temperatureMeasurement"],
                "endpoints": [
                    {"id": 1, "clusters": {"0x0045": 0, "0x0402": 0}},
                    {"id": 2, "clusters": {"0x002f": 2, "0x0003": 0}},
                ],
            }
        )
    )
    return path


@pytest.fixture
def log_file(tmp_path):
    path = tmp_path / "log.jsonl"
    lines = [
        ["report", 1, 0x0045, 0x0000, True],
        ["report", 1, 0x0402, 0x0000, -550],
        ["report", 2, 0x002F, 0x000C, None],
        ["report", 2, 0x002F, 0x000C, 37],
        ["report", 1, 0x0402, 0x0001, -4000],
        ["report", 1, 0x0045, 0x0000, False, 0x86],
        ["info_changed", "contact-temperature-battery", "contact-temperature-battery"],
    ]
    path.write_text("\n".join(json.dumps(line) for line in lines) + "\n")
    return path


def test_endpoint_from_json():
    endpoint = Endpoint.from_json({"id": 2, "clusters": {"0x002f": 2, "6": 0}})
    assert set(endpoint.clusters) == {0x002F, 0x0006}
    assert endpoint.clusters[0x002F].feature_map == 2


def test_replay(tmp_path, device_file, log_file):
    record = tmp_path / "record.jsonl"
    with open(record, "w") as record_file:
        events = cli.run(device_file, log_file, tmp_path / "state.json", record_file)

    assert [str(event) for event in events] == [
        "EP1 contactSensor.contact = closed",
        "EP1 temperatureMeasurement.temperature = -5.5 C",
        "device battery.battery = 19 %",
    ]

    entries = [json.loads(line) for line in record.read_text().splitlines()]
    assert [entry[0] for entry in entries] == ["subscribe", "event", "event", "event"]
    assert entries[0][2] == "hallway"
    assert entries[0][3] == [[0x0402, 0x0000], [0x0045, 0x0000], [0x002F, 0x000C]]
    assert entries[3][3] == {"capability": "battery", "attribute": "battery", "value": 19, "unit": "%"}

    state = json.loads((tmp_path / "state.json").read_text())
    assert state["devices"]["hallway"]["profile"] == "contact-temperature-battery"


def test_main_usage(capsys):
    assert cli.main([]) == 2
    assert "Usage" in capsys.readouterr().err


def test_main(tmp_path, device_file, log_file, capsys):
    assert cli.main(["-v", str(device_file), str(log_file), str(tmp_path / "state.json")]) == 0
    assert "EP1 contactSensor.contact = closed" in capsys.readouterr().out

# SPDX-FileCopyrightText: Copyright (c) 2026 mattersensor contributors
#
# SPDX-License-Identifier: MIT

"""Replay a captured attribute log through the Matter sensor driver.

Usage: python -m mattersensor [-v] DEVICE_JSON LOG_JSONL [STATE_JSON] [RECORD_JSONL]
"""

import logging
import sys

import mattersensor as ms
from mattersensor.utility import recording, replay


def run(device_file, log_file, state_file="matter-sensor-state.json", record_file=None):
    if record_file is not None:
        event_sink = recording.RecordingEventSink(record_file)
        subscription_manager = recording.RecordingSubscriptionManager(record_file)
    else:
        event_sink = None
        subscription_manager = None

    matter = ms.MatterSensor(state_file, event_sink, subscription_manager)
    device = replay.load_device(matter, device_file)
    events = replay.replay(matter, device, replay.read_log(log_file))
    for event in events:
        print(event)
    return events


def main(argv):
    verbose = "-v" in argv or "--verbose" in argv
    args = [arg for arg in argv if arg not in ("-v", "--verbose")]
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if len(args) < 2:
        print(__doc__.strip().splitlines()[-1], file=sys.stderr)
        return 2
    device_file, log_file = args[:2]
    state_file = args[2] if len(args) > 2 else "matter-sensor-state.json"
    if len(args) > 3:
        with open(args[3], "w") as record_file:
            run(device_file, log_file, state_file, record_file)
    else:
        run(device_file, log_file, state_file)
    return 0


def cli():
    sys.exit(main(sys.argv[1:]))


if __name__ == "__main__":
    cli()

# SPDX-FileCopyrightText: Copyright (c) 2026 mattersensor contributors
#
# SPDX-License-Identifier: MIT

import json
import time


class RecordingEventSink:
    """Writes every emitted event to ``record_file`` as a JSON line."""

    def __init__(self, record_file):
        self.record_file = record_file

    def emit(self, device_id, event):
        entry = ("event", time.monotonic_ns(), device_id, event.to_json())
        json.dump(entry, self.record_file)
        self.record_file.write("\n")


class RecordingSubscriptionManager:
    def __init__(self, record_file):
        self.record_file = record_file

    def subscribe(self, device_id, subscription):
        entry = (
            "subscribe",
            time.monotonic_ns(),
            device_id,
            [[path.Cluster, path.Attribute] for path in subscription.paths],
        )
        json.dump(entry, self.record_file)
        self.record_file.write("\n")

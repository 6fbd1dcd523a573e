# SPDX-FileCopyrightText: Copyright (c) 2026 mattersensor contributors
#
# SPDX-License-Identifier: MIT

import json
import os
import pathlib


class PersistentDictionary:
    """This acts like a dictionary and is persisted when values change.

    Nested dictionaries are wrapped so that writes anywhere in the tree mark
    the root dirty. Nothing reaches the disk until the root is committed.
    """

    def __init__(self, filename=None, root=None, state=None):
        self.filename = filename
        self.root = root
        self.dirty = False
        self.persisted = {}
        self._state: dict
        if self.root is None and filename:
            with open(self.filename, "r") as state_file:
                self._state = json.load(state_file)
        elif state is not None:
            self._state = state
        else:
            raise ValueError("Provide filename or (root and state)")

    @classmethod
    def open(cls, filename):
        """Load ``filename``, starting from an empty state file if it doesn't exist."""
        state_file = pathlib.Path(filename)
        if not state_file.exists():
            state_file.write_text("{}")
        return cls(filename)

    def _mark_dirty(self):
        if self.root:
            self.root.dirty = True
        else:
            self.dirty = True

    def __setitem__(self, key, value):
        self._state[key] = value
        self.persisted.pop(key, None)
        self._mark_dirty()

    def __getitem__(self, key):
        value = self._state[key]
        if isinstance(value, dict):
            if key not in self.persisted:
                root = self.root if self.root else self
                self.persisted[key] = PersistentDictionary(root=root, state=value)
            return self.persisted[key]
        return value

    def __delitem__(self, key):
        del self._state[key]
        self.persisted.pop(key, None)
        self._mark_dirty()

    def __contains__(self, key):
        return key in self._state

    def get(self, key, default=None):
        if key not in self._state:
            return default
        return self[key]

    def setdefault(self, key, default):
        if key not in self._state:
            self[key] = default
        return self[key]

    def keys(self):
        return self._state.keys()

    def __iter__(self):
        return iter(self._state)

    def commit(self):
        if self.root:
            self.root.commit()
            return
        if not self.dirty:
            return
        if self.filename is None:
            # Memory only.
            self.dirty = False
            return
        # Write the whole state next to the target and swap it in so readers
        # never see a partial file.
        temporary = f"{self.filename}.tmp"
        with open(temporary, "w") as state_file:
            json.dump(self._state, state_file, indent=1)
        os.replace(temporary, self.filename)
        self.dirty = False

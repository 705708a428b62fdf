import inspect
import json
import time
from datetime import UTC, datetime
from enum import Enum
from functools import wraps

import numpy as np
import polars as pl


class HistoryMixin:
    """Append-only, in-memory log of graph mutations.

    Mutators listed in ``_MUTATORS`` are wrapped per instance by
    ``_install_history_hooks``; every call appends one event.
    """

    _MUTATORS = ()
    # event keys kept as native columns in history(as_df=True)
    _FRAME_NATIVE = {"version", "ts_utc", "mono_ns", "op", "v", "w", "label", "result"}

    def _init_history(self, enabled: bool = True):
        self._history_enabled = bool(enabled)
        self._history = []  # list[dict]
        self._history_clock0 = time.perf_counter_ns()
        self._install_history_hooks()

    def _utcnow_iso(self) -> str:
        return datetime.now(UTC).isoformat(timespec="microseconds").replace("+00:00", "Z")

    def _jsonify(self, x):
        # Make args/return JSON-safe & compact.
        if x is None or isinstance(x, (bool, int, float, str)):
            return x
        if isinstance(x, Enum):
            return x.name
        if isinstance(x, (set, frozenset)):
            return sorted(self._jsonify(v) for v in x)
        if isinstance(x, (list, tuple)):
            return [self._jsonify(v) for v in x]
        if isinstance(x, dict):
            return {str(k): self._jsonify(v) for k, v in x.items()}
        # NumPy scalars
        if isinstance(x, np.generic):
            return x.item()
        t = type(x).__name__
        return f"<<{t}>>"

    def _log_event(self, op: str, **fields):
        if not self._history_enabled:
            return
        evt = {
            "version": self._state.version,
            "ts_utc": self._utcnow_iso(),  # ISO-8601 with Z
            "mono_ns": time.perf_counter_ns() - self._history_clock0,
            "op": op,
        }
        for k, v in fields.items():
            evt[k] = self._jsonify(v)
        self._history.append(evt)

    def _log_mutation(self, name=None):
        def deco(fn):
            op = name or fn.__name__
            sig = inspect.signature(fn)

            @wraps(fn)
            def wrapper(*args, **kwargs):
                result = fn(*args, **kwargs)
                if self._history_enabled:
                    bound = sig.bind(*args, **kwargs)
                    payload = dict(bound.arguments)
                    payload["result"] = result
                    self._log_event(op, **payload)
                return result

            return wrapper

        return deco

    def _install_history_hooks(self):
        for name in self._MUTATORS:
            fn = getattr(self, name)
            # Avoid double-wrapping
            if getattr(fn, "__wrapped__", None) is None:
                setattr(self, name, self._log_mutation(name)(fn))

    def history(self, as_df: bool = False):
        """Return the append-only mutation history.

        Parameters
        ----------
        as_df : bool, default False
            If True, return a Polars DF [DataFrame]; otherwise return a list of dicts.

        Returns
        -------
        list[dict] or polars.DataFrame
            Each event includes: 'version' (graph version after the call),
            'ts_utc' (UTC ISO-8601), 'mono_ns' (monotonic nanoseconds since the
            graph was created), 'op', the call arguments and 'result'.

        Notes
        -----
        Events of different operations carry different argument columns; the
        DataFrame form fills the missing ones with nulls and stores edge labels
        as JSON text, since a label column may mix arbitrary types.

        """
        if not as_df:
            return list(self._history)
        if not self._history:
            return pl.DataFrame()
        rows = [
            {k: (v if k in self._FRAME_NATIVE else json.dumps(v)) for k, v in evt.items()}
            for evt in self._history
        ]
        return pl.from_dicts(rows, infer_schema_length=None)

    def enable_history(self, flag: bool = True):
        """Enable or disable in-memory mutation logging."""
        self._history_enabled = bool(flag)

    def clear_history(self):
        """Clear the in-memory mutation log."""
        self._history.clear()

    def mark(self, label: str):
        """Insert a manual marker into the mutation history.

        Logging must be enabled for the marker to be recorded.
        """
        self._log_event("mark", label=label)

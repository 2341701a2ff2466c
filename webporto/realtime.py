"""Fan-out of live view counts to connected subscribers."""

from __future__ import annotations

import json
import threading
from collections import deque
from dataclasses import dataclass
from typing import Any

from webporto.logger import get_logger

SEND_BUFFER = 256
GLOBAL_CHANNEL = "global"


@dataclass(frozen=True)
class ViewCountsUpdate:
    """Analytics totals pushed to subscribers."""

    total: int = 0
    today: int = 0
    week: int = 0
    month: int = 0
    unique: int = 0
    page: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping; ``page`` is left out when empty."""
        out: dict[str, Any] = {
            "total": self.total,
            "today": self.today,
            "week": self.week,
            "month": self.month,
            "unique": self.unique,
        }
        if self.page:
            out["page"] = self.page
        return out


def _json_default(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    if to_dict is None:
        raise TypeError(f"cannot encode {type(value).__name__}")
    return to_dict()


@dataclass(frozen=True)
class Message:
    """One message sent to subscribers."""

    type: str
    data: Any = None
    channel: str = ""

    def to_json(self) -> bytes:
        """Encode as compact JSON; ``channel`` is left out when empty."""
        out: dict[str, Any] = {"type": self.type, "data": self.data}
        if self.channel:
            out["channel"] = self.channel
        return json.dumps(out, separators=(",", ":"), default=_json_default).encode("utf-8")


class Client:
    """A subscriber with a bounded queue of outgoing messages."""

    def __init__(self, send_buffer: int = SEND_BUFFER):
        self._capacity = send_buffer
        self._buffer: deque[bytes] = deque()
        self._closed = False
        self._cond = threading.Condition()

    @property
    def closed(self) -> bool:
        return self._closed

    def _offer(self, data: bytes) -> bool:
        with self._cond:
            if self._closed or len(self._buffer) >= self._capacity:
                return False
            self._buffer.append(data)
            self._cond.notify()
            return True

    def _close(self) -> None:
        with self._cond:
            self._closed = True
            self._cond.notify_all()

    def receive(self, timeout: float | None = None) -> bytes | None:
        """Return the next message, or ``None`` once closed and drained.

        Raises TimeoutError if nothing arrives within ``timeout`` seconds.
        """
        with self._cond:
            if not self._cond.wait_for(lambda: self._buffer or self._closed, timeout):
                raise TimeoutError("no message received")
            if self._buffer:
                return self._buffer.popleft()
            return None


class Manager:
    """Keeps track of subscribers and the latest counts per channel."""

    def __init__(self) -> None:
        self._clients: set[Client] = set()
        self._latest_counts: dict[str, Any] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._clients)

    def __contains__(self, client: object) -> bool:
        with self._lock:
            return client in self._clients

    @property
    def latest_counts(self) -> dict[str, Any]:
        with self._lock:
            return dict(self._latest_counts)

    def register(self, client: Client) -> None:
        """Add a subscriber and send it the latest counts of every channel."""
        with self._lock:
            self._clients.add(client)
            latest = list(self._latest_counts.items())
        for channel, counts in latest:
            client._offer(Message(type="view_counts", data=counts, channel=channel).to_json())

    def unregister(self, client: Client) -> None:
        """Remove a subscriber and close its queue."""
        with self._lock:
            if client not in self._clients:
                return
            self._clients.discard(client)
        client._close()

    def broadcast(self, data: bytes) -> None:
        """Queue data for every subscriber, dropping those whose queue is full."""
        with self._lock:
            dropped = [c for c in self._clients if not c._offer(data)]
            for client in dropped:
                self._clients.discard(client)
        for client in dropped:
            client._close()

    def update_view_counts(self, counts: ViewCountsUpdate, page: str = "") -> None:
        """Remember the counts for their channel and broadcast them."""
        channel = f"page:{page}" if page else GLOBAL_CHANNEL
        with self._lock:
            self._latest_counts[channel] = counts
        try:
            data = Message(type="view_counts", data=counts, channel=channel).to_json()
        except (TypeError, ValueError) as exc:
            get_logger().error("Failed to marshal view counts update", {"error": str(exc)})
            return
        self.broadcast(data)
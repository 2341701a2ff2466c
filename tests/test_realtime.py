import json

import pytest

from webporto.realtime import Client, Manager, Message, ViewCountsUpdate


def test_view_counts_to_dict_omits_empty_page():
    counts = ViewCountsUpdate(total=5, today=1, week=2, month=3, unique=4)
    assert "page" not in counts.to_dict()
    assert counts.to_dict()["total"] == 5
    assert ViewCountsUpdate(page="/home").to_dict()["page"] == "/home"


def test_message_to_json_layout():
    msg = Message(type="view_counts", data={"a": 1})
    assert msg.to_json() == b'{"type":"view_counts","data":{"a":1}}'
    with_channel = json.loads(Message(type="x", data=None, channel="global").to_json())
    assert with_channel == {"type": "x", "data": None, "channel": "global"}


def test_message_encodes_view_counts():
    counts = ViewCountsUpdate(total=7, page="/a")
    decoded = json.loads(Message(type="view_counts", data=counts).to_json())
    assert decoded["data"] == counts.to_dict()


def test_update_view_counts_broadcasts_to_clients():
    manager = Manager()
    client = Client()
    manager.register(client)
    counts = ViewCountsUpdate(total=10, unique=3)
    manager.update_view_counts(counts, "")
    decoded = json.loads(client.receive(timeout=1))
    assert decoded["type"] == "view_counts"
    assert decoded["channel"] == "global"
    assert decoded["data"] == counts.to_dict()


def test_page_channel_and_latest_counts_sent_on_register():
    manager = Manager()
    counts = ViewCountsUpdate(total=2)
    manager.update_view_counts(counts, "/blog")
    assert manager.latest_counts == {"page:/blog": counts}
    late = Client()
    manager.register(late)
    decoded = json.loads(late.receive(timeout=1))
    assert decoded["channel"] == "page:/blog"
    assert decoded["data"]["total"] == 2


def test_unregister_closes_client():
    manager = Manager()
    client = Client()
    manager.register(client)
    assert client in manager
    manager.unregister(client)
    assert client not in manager
    assert client.closed
    assert client.receive(timeout=1) is None


def test_full_client_is_dropped_after_draining():
    manager = Manager()
    client = Client(send_buffer=1)
    manager.register(client)
    manager.broadcast(b"first")
    manager.broadcast(b"second")
    assert len(manager) == 0
    assert client.receive(timeout=1) == b"first"
    assert client.receive(timeout=1) is None


def test_receive_times_out():
    client = Client()
    with pytest.raises(TimeoutError):
        client.receive(timeout=0.01)


def test_broadcast_reaches_every_client():
    manager = Manager()
    clients = [Client() for _ in range(3)]
    for c in clients:
        manager.register(c)
    manager.broadcast(b"hello")
    assert [c.receive(timeout=1) for c in clients] == [b"hello"] * 3
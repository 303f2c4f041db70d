import pytest

from simple_kafka import consumer, producer


@pytest.mark.parametrize("argv", [[], ["t1"], ["t1", "g1", "extra"]])
def test_consumer_usage_error(argv, capsys, monkeypatch):
    monkeypatch.setattr(consumer, "SubscriptionLoop", lambda *a, **kw: pytest.fail("must not connect"))
    assert consumer.main(argv) != 0
    assert "Usage" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [[], ["t1", "t2"]])
def test_producer_usage_error(argv, capsys, monkeypatch):
    monkeypatch.setattr(producer, "get_producer", lambda *a, **kw: pytest.fail("must not connect"))
    assert producer.main(argv) != 0
    assert "Usage" in capsys.readouterr().err


def test_consumer_main_wires_loop_and_control(monkeypatch):
    seen = {}

    class FakeChannel:
        def __init__(self, loop):
            seen["loop"] = loop

        def run(self):
            seen["ran"] = True

    monkeypatch.setattr(consumer, "ControlChannel", FakeChannel)
    assert consumer.main(["t1", "g1"]) == 0
    assert seen["loop"].topic == "t1"
    assert seen["loop"].group_id == "g1"
    assert seen["ran"]

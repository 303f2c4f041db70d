import io

from confluent_kafka import KafkaException

from simple_kafka.producer import PROMPT, Publisher


class FakeProducer:
    def __init__(self, events, fail_on=None):
        self.events = events
        self.fail_on = fail_on
        self.produced = []

    def produce(self, topic, key=None, value=None):
        if value == self.fail_on:
            raise BufferError("Local: Queue full")
        self.produced.append((topic, key, value))

    def poll(self, timeout):
        return 0

    def flush(self, timeout=None):
        self.events.append("flush")
        return 0


class TrackedInput(io.StringIO):
    def __init__(self, text, events):
        super().__init__(text)
        self.events = events

    def close(self):
        self.events.append("stdin closed")
        super().close()


def test_publishes_each_line_until_exit():
    events = []
    producer = FakeProducer(events)
    out = io.StringIO()
    Publisher("t1", producer).run(TrackedInput("hello\nworld\nexit\nignored\n", events), out)

    assert out.getvalue() == PROMPT + "\n"
    assert producer.produced == [("t1", None, b"hello"), ("t1", None, b"world")]
    assert events == ["stdin closed", "flush"]


def test_end_of_input_releases_resources():
    events = []
    producer = FakeProducer(events)
    Publisher("t1", producer).run(TrackedInput("only line", events), io.StringIO())
    assert producer.produced == [("t1", None, b"only line")]
    assert events == ["stdin closed", "flush"]


def test_queue_full_is_logged_and_skipped(caplog):
    events = []
    producer = FakeProducer(events, fail_on=b"boom")
    Publisher("t1", producer).run(TrackedInput("a\nboom\nb\nexit\n", events), io.StringIO())
    assert [v for _, _, v in producer.produced] == [b"a", b"b"]
    assert "Queue full" in caplog.text


def test_kafka_exception_is_logged(caplog):
    class Broken(FakeProducer):
        def produce(self, topic, key=None, value=None):
            raise KafkaException("Unknown topic")

    publisher = Publisher("t1", Broken([]))
    publisher.publish("x")
    assert "Unknown topic" in caplog.text

import threading

import pytest

from lvhost.worker import MAX_PACKET_SIZE, Worker, WorkerError, WorkerInterface


class Recorder:
    def __init__(self, reply=b"ok"):
        self.reply = reply
        self.work_calls = []
        self.responses = []
        self.end_runs = []
        self.done = threading.Event()

    def work(self, handle, respond, data):
        self.work_calls.append((handle, data))
        respond(self.reply + data)
        self.done.set()
        return "worked"

    def work_response(self, handle, data):
        self.responses.append((handle, data))

    def end_run(self, handle):
        self.end_runs.append(handle)

    def iface(self, with_end_run=True):
        return WorkerInterface(
            work=self.work,
            work_response=self.work_response,
            end_run=self.end_run if with_end_run else None,
        )


def test_single_threaded_work_runs_immediately():
    rec = Recorder()
    worker = Worker()
    worker.attach(rec.iface(), "plugin")
    result = worker.schedule(b"abc")
    assert result == "worked"
    assert rec.work_calls == [("plugin", b"abc")]


def test_responses_are_emitted_in_order():
    rec = Recorder()
    worker = Worker()
    worker.attach(rec.iface(), "plugin")
    worker.schedule(b"1")
    worker.schedule(b"2")
    assert rec.responses == []
    worker.emit_responses("instance")
    assert rec.responses == [("instance", b"ok1"), ("instance", b"ok2")]
    worker.emit_responses("instance")
    assert len(rec.responses) == 2


def test_schedule_empty_data_raises():
    worker = Worker()
    worker.attach(Recorder().iface(), None)
    with pytest.raises(WorkerError):
        worker.schedule(b"")


def test_schedule_on_stopped_threaded_worker_raises():
    worker = Worker(threaded=True)
    worker.attach(Recorder().iface(), None)
    with pytest.raises(WorkerError):
        worker.schedule(b"x")


def test_schedule_unattached_single_threaded_raises():
    with pytest.raises(WorkerError):
        Worker().schedule(b"x")


def test_threaded_worker_does_work_in_thread():
    rec = Recorder()
    with Worker(threaded=True) as worker:
        worker.attach(rec.iface(), "plugin")
        worker.launch()
        assert worker.running
        worker.schedule(b"job")
        assert rec.done.wait(5.0)
        worker.emit_responses("instance")
        assert rec.responses == [("instance", b"okjob")]
    assert not worker.running


def test_exit_stops_thread_and_allows_relaunch():
    rec = Recorder()
    worker = Worker(threaded=True)
    worker.attach(rec.iface(), None)
    worker.launch()
    worker.exit()
    assert not worker.running
    with pytest.raises(WorkerError):
        worker.schedule(b"x")
    worker.launch()
    assert worker.running
    worker.close()
    assert not worker.running


def test_request_larger_than_ring_raises():
    worker = Worker(threaded=True)
    worker.attach(Recorder().iface(), None)
    worker.launch()
    try:
        with pytest.raises(WorkerError):
            worker.schedule(bytes(MAX_PACKET_SIZE))
    finally:
        worker.close()


def test_response_larger_than_ring_raises():
    rec = Recorder(reply=bytes(MAX_PACKET_SIZE))
    worker = Worker()
    worker.attach(rec.iface(), None)
    with pytest.raises(WorkerError):
        worker.schedule(b"x")


def test_end_run_calls_plugin_when_provided():
    rec = Recorder()
    worker = Worker()
    worker.attach(rec.iface(), "plugin")
    worker.end_run()
    assert rec.end_runs == ["plugin"]


def test_end_run_without_hook_does_nothing():
    rec = Recorder()
    worker = Worker()
    worker.attach(rec.iface(with_end_run=False), "plugin")
    worker.end_run()
    assert rec.end_runs == []


def test_shared_lock_is_held_during_work():
    lock = threading.Lock()
    held = []

    def work(handle, respond, data):
        held.append(lock.locked())

    worker = Worker(lock=lock)
    worker.attach(WorkerInterface(work=work, work_response=lambda h, d: None), None)
    worker.schedule(b"x")
    assert held == [True]
    assert not lock.locked()
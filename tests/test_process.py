import pytest

from ndprojects.sysmonitor.process import Process


class FakeParser:
    def __init__(self, ram="3", system_uptime=600, start=100, active=50):
        self._ram = ram
        self._system_uptime = system_uptime
        self._start = start
        self._active = active

    def command(self, pid):
        return "/usr/bin/app"

    def ram(self, pid):
        return self._ram

    def process_uptime(self, pid):
        return self._start

    def user(self, pid):
        return "alice"

    def uptime(self):
        return self._system_uptime

    def process_active_jiffies(self, pid):
        return self._active


def _process(pid, cpu):
    return Process(pid=pid, user="u", command="c", cpu_utilization=cpu, ram=1, uptime=1)


def test_load_fields():
    process = Process.load(FakeParser(), 42)
    assert process.pid == 42
    assert process.command == "/usr/bin/app"
    assert process.user == "alice"
    assert process.ram == 3
    assert process.uptime == 100


def test_load_cpu_utilization():
    process = Process.load(FakeParser(), 42)
    assert process.cpu_utilization == pytest.approx(0.1)


def test_load_zero_elapsed_time():
    process = Process.load(FakeParser(system_uptime=100, start=100), 42)
    assert process.cpu_utilization == 0.0


def test_load_without_ram_fails():
    with pytest.raises(ValueError):
        Process.load(FakeParser(ram=""), 42)


def test_ordering_by_cpu():
    low, high = _process(1, 0.2), _process(2, 0.5)
    assert low < high
    assert not high < low


def test_sort_descending():
    processes = [_process(1, 0.2), _process(2, 0.9), _process(3, 0.5)]
    assert [p.pid for p in sorted(processes, reverse=True)] == [2, 3, 1]


def test_compare_with_other_type():
    with pytest.raises(TypeError):
        _process(1, 0.2) < 1
import threading

from chaosutil.singleton import Singleton


class _Config(Singleton):
    def __init__(self):
        self.values = {}


class _Other(Singleton):
    pass


def test_same_instance_returned():
    Singleton.destroy_instance()
    first = Singleton.instance()
    first.marker = 5
    assert Singleton.instance().marker == 5
    assert id(Singleton.instance()) == id(first)


def test_state_is_shared():
    Singleton.destroy_instance()
    Singleton.instance().marker = 1
    assert Singleton.instance().marker == 1


def test_destroy_gives_fresh_instance():
    first = Singleton.instance()
    first.marker = 2
    Singleton.destroy_instance()
    second = Singleton.instance()
    assert first is not second
    assert not hasattr(second, "marker")


def test_subclass_state_starts_empty_after_destroy():
    Singleton.destroy_instance()
    Singleton.instance().marker = 7
    _Config.instance().values["a"] = 1
    assert _Config.instance().values == {"a": 1}
    _Config.destroy_instance()
    assert _Config.instance().values == {}
    assert Singleton.instance().marker == 7


def test_subclasses_are_separate():
    Singleton.destroy_instance()
    _Config.destroy_instance()
    _Other.destroy_instance()
    _Config.instance().values["k"] = 1
    _Other.instance().tag = "other"
    Singleton.instance().tag = "base"
    assert _Config.instance().values == {"k": 1}
    assert _Other.instance().tag == "other"
    assert Singleton.instance().tag == "base"
    assert type(_Other.instance()).__name__ == "_Other"
    assert type(_Config.instance()).__name__ == "_Config"
    assert type(Singleton.instance()).__name__ == "Singleton"


def test_threads_see_one_instance():
    Singleton.destroy_instance()
    seen = []
    threads = [threading.Thread(target=lambda: seen.append(Singleton.instance())) for _ in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len({id(obj) for obj in seen}) == 1
    assert seen[0] is Singleton.instance()
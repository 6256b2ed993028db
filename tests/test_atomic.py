import copy
import threading

from chaosutil.atomic import AtomicValue


def test_default_is_zero():
    assert AtomicValue().value() == 0


def test_increment_returns_new_value():
    a = AtomicValue(5)
    assert a.increment() == 6
    assert a.value() == 6


def test_post_increment_returns_old_value():
    a = AtomicValue(5)
    assert a.post_increment() == 5
    assert a.value() == 6


def test_decrement_and_post_decrement():
    a = AtomicValue(5)
    assert a.decrement() == 4
    assert a.post_decrement() == 4
    assert a.value() == 3


def test_add_and_subtract_return_previous():
    a = AtomicValue(1104)
    assert a.add(17) == 1104
    assert a.value() == 1121
    assert a.subtract(17) == 1121
    assert a.value() == 1104


def test_set_and_int():
    a = AtomicValue()
    assert a.set(1121) is a
    assert int(a) == 1121


def test_copy_is_independent():
    a = AtomicValue(3)
    b = copy.copy(a)
    b.increment()
    assert a.value() == 3
    assert b.value() == 4


def test_concurrent_increments():
    a = AtomicValue()
    per_thread = 2000
    threads = [
        threading.Thread(target=lambda: [a.increment() for _ in range(per_thread)])
        for _ in range(8)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert a.value() == 8 * per_thread


def test_concurrent_balanced_ops_leave_value_unchanged():
    a = AtomicValue(10)

    def work():
        for _ in range(1000):
            a.post_increment()
            a.post_decrement()

    threads = [threading.Thread(target=work) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert a.value() == 10
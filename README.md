# chaosutil

Small utilities for long-running processes on POSIX systems. The package has no runtime dependencies.

## Modules

- `chaosutil.arg_helper` matches single-dash options against a list of `ArgOption` entries. An option is written as `-name`, or as `-name value` when `has_val` is set.
  - `parse_args(options, argv)` takes the arguments without the program name. It returns a `ParseResult`. Its `pairs` field is a list of `ArgPair(index, value)` in command-line order. Its `unmatched` field lists arguments that matched no option, and `ok` is true when that list is empty.
  - Each option's `handler`, if one is set, is called as `handler(index, name, value)` when the option is matched.
  - An argument that is not of the form `-x...`, or an option that lacks its value, raises `ArgParseError`. The error's `pairs` attribute holds the pairs matched before the failure.
  - `format_args(options)` returns a listing of the options, and `show_args(options)` prints it.
- `chaosutil.shared_ptr` provides `SharedPtr`, a counted handle around an object.
  - An optional `release` callable runs on the object when the last handle lets go.
  - `copy.copy(handle)` and `assign(other)` share the object.
  - `reset()` lets go of it, and `ref_count()` reports the number of sharers.
  - `cast(cls)` shares the object only if it is an instance of `cls`. `unsafe_cast()` shares it without a check.
  - A handle also works as a context manager that resets on exit.
  - The module also has the counters `RefCounter` and `AtomicRefCounter`, and a `swap(p1, p2)` function.
- `chaosutil.atomic` provides `AtomicValue`, a lock-protected integer.
  - `value()` and `set(val)` read and write it.
  - `increment()` and `decrement()` return the new value.
  - `post_increment()`, `post_decrement()`, `add(n)` and `subtract(n)` return the previous value.
- `chaosutil.rand_gen` provides `RandGen`, a seeded combined-Tausworthe generator with `reset(seed)`, `rand_uint()` and `rand_double()`. The module also has functions that draw on a shared generator seeded from the clock:
  - `get_rand(start, end)` returns a number in `[start, end)`.
  - `rand_str(length)` returns a string of characters from `_`, digits and ASCII letters.
  - `calc_probability(rate)` returns True with a chance of `rate` percent.
- `chaosutil.time_util` works with timestamps.
  - `now()` returns the current timestamp.
  - `sharp_day`, `sharp_hour` and `sharp_minute` round a timestamp down to the start of its local day, hour or minute, shifted by `c` units.
  - `localtimes(t, tz_offset)` breaks a timestamp down into a `BrokenDownTime` for a zone `tz_offset` seconds west of UTC. Its `year` field counts from 1900 and `mon` counts from 0.
  - `get_now_tm()` and `get_tm_by_int(t)` use the default offset `TIMEZONE` (-28800, that is UTC+8).
  - `init()` reloads the time-zone settings.
- `chaosutil.signal_handler` provides `SignalHandler`.
  - `register_signal(signum, callback)` registers a callback for a signal. `register_quit_signal(signum)` registers a signal that has no callback.
  - `event_loop()` blocks the registered signals and waits for them, running their callbacks. It returns the number of the first quit signal that arrives.
  - Registering a signal twice raises `SignalRegistrationError`. Receiving an unregistered signal raises `UnexpectedSignalError`.
  - `block_all_signals()` blocks every signal for the calling thread.
- `chaosutil.process` provides `daemonize()`, which detaches from the terminal. It:
  - starts a new session,
  - sets the umask to 022,
  - closes all file descriptors,
  - reopens them on `/dev/null`.

  It does not fork. The caller must not already be a process-group leader, and a failed `setsid` exits with status 1.
- `chaosutil.singleton` provides a `Singleton` base class. `instance()` returns a lazily built single instance for each subclass, and `destroy_instance()` drops it.
- `chaosutil.itoa` provides `itoa(num, base)`, which converts a non-negative integer to a string in bases 2 to 10.
- `chaosutil.memory` provides `align_to_jesize(size)`, which rounds an allocation size up to the allocator's size class.
- `chaosutil.misc` has three parts:
  - `get_long_high_part`, `get_long_low_part` and `parse_to_long` split a 64-bit value and join it again.
  - Terminal colour code constants.
  - A `NonCopyable` base class whose instances refuse `copy.copy` and `copy.deepcopy`.

## Examples

```python
from chaosutil.arg_helper import ArgOption, parse_args

options = [
    ArgOption("d", "daemon process"),
    ArgOption("wt", "number of work threads", has_val=True),
]
result = parse_args(options, ["-wt", "4", "-d"])
for pair in result.pairs:
    print(pair.index, pair.value)   # 1 4, then 0 None
```

```python
import copy
from chaosutil.shared_ptr import SharedPtr

a = SharedPtr(object())
b = copy.copy(a)
assert a.ref_count() == 2
a.reset()
assert b.ref_count() == 1
```

## What it does not do

This is a library of building blocks only. It has no command-line program and no network services. It also has no task queues, thread pools or logging.

## Running the tests

```
pip install -e .[test]
pytest
```
# sysdemos

Small, self-contained demonstrations of classic programming topics:
sorting, linked structures, callbacks, threads, processes, signals,
timers, in-place terminal output and TCP sockets. Each demo is an
importable module with a `main()` function and a shell command.

The package has no dependencies beyond the standard library. The
process and signal demos need a POSIX system.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library overview

### Sorting and partitioning

- `sysdemos.sorting`: `bubble_sort`, `insertion_sort` and `selection_sort`
  take any iterable of integers and return a new sorted list.
  `format_array` renders integers each followed by a space
  (`format_array([1, 2])` gives `"1 2 "`).
- `sysdemos.partition`: `stable_partition(values, pivot)` returns the
  values below the pivot, then those equal to it, then those above it,
  each group in its original order.

```python
from sysdemos.sorting import bubble_sort, format_array
from sysdemos.partition import stable_partition

print(format_array(bubble_sort([53, 24, 67, 82, 9])))   # 9 24 53 67 82
print(stable_partition([3, 6, 7, 2, 1, 4, 9, 8], 4))   # [3, 2, 1, 4, 6, 7, 9, 8]
```

### Data structures and callbacks

- `sysdemos.linked_list.LinkedList`: singly linked list with `append`,
  `delete_last` (returns the removed value, raises `IndexError` when
  empty), `describe` (one `Value in the node is N` line per node, or
  `Linked list is empty`), iteration and `len()`.
- `sysdemos.stack.Stack`: `push`, `pop` (raises `IndexError` when empty)
  and `len()`.
- `sysdemos.fifo.Fifo`: `enqueue`, `dequeue` (raises `IndexError` when
  empty) and `len()`.
- `sysdemos.callbacks`: `add(a, b)` and the dataclass `Pair(num1, num2,
  combine=add)` whose `combined()` applies the stored function to both
  numbers.

### Threads

- `sysdemos.threads`:
  - `run_named_threads(names, stream)` starts one thread per name; each
    writes its name on its own line.
  - `count_unlocked(loops, workers=2)` lets workers increment a shared
    counter without a lock, so updates may be lost.
  - `count_with_lock(loops, workers=2)` does the same under a lock and
    returns `loops * workers`.
  - `message_length(message, stream)` writes the message from a worker
    thread and returns its length.
- `sysdemos.oddeven.alternate(limit=100, delay=0.0)` is a generator over
  the lines printed by two threads that take turns counting
  (`Thread Even 0`, `Thread Odd 1`, `Thread Even 2`, ...) until the
  count passes `limit`.

### Processes and signals

- `sysdemos.processes`:
  - `fork_hello()` forks a child that greets and exits; returns the
    child's pid without waiting for it.
  - `fork_and_wait()` forks, waits and returns `(child_pid, waited_pid)`.
  - `fork_copy_demo(delay=3.0)` shows that the child's changes to a
    global and a local value do not reach the parent; returns a
    `CopyReport` with `child_pid`, `child_values` and `parent_values`.
  - `fork_exec(command=("./hello",))` forks a child that replaces itself
    with `command` and returns its exit code (127 if it cannot be run).
  - `pipe_echo(message, chunk_size=10)` sends a message through a pipe to
    a child that echoes it to standard output; returns the child's exit
    code.
- `sysdemos.signals.SignalCounter`: `handle(signum, frame)` counts
  `SIGINT` and prints `Caught SIGINT count is N`; any other signal prints
  `Caught SIGQUIT terminating.....` and raises `SystemExit(0)`.
  `install()` sets it for `SIGINT` and `SIGQUIT` and returns the handlers
  it replaced.

### Timers and access point reports

- `sysdemos.timers.RepeatingTimer(interval, callback)`: `run(iterations=None)`
  waits `interval` seconds, calls `callback(timer)`, and repeats until
  `stop()` is called or `iterations` calls have been made; returns the
  number of calls.
- `parse_leading_int(text)` reads an optionally signed integer at the
  start of the text, returning 0 if there is none.
- `count_stations(ifname, runner=None)` and `tx_power_level(ifname,
  runner=None)` run an `iw` shell pipeline and read the first integer
  of its output; `runner` can replace the shell with any function from a
  command string to its output. Empty output raises `ValueError`.

### Terminal output and sockets

- `sysdemos.progress`: `render_bar(count)` returns the progress line for
  0–100 percent; `progress_bar(delay=0.5, stream=None)` draws it in place
  with a spinner; `countdown(start=100, delay=1.0, stream=None)` counts
  down on one line.
- `sysdemos.tcp`: `run_client(host="127.0.0.1", port=32678)` sends a
  greeting and returns the reply; `run_server(host="", port=32678,
  ready=None)` accepts one client, answers it and returns what the client
  sent. `ready` is called with the bound address once the server listens.

## Commands

```
sysdemos-sorting [--algorithm {bubble,insertion,selection,all}] [VALUES ...]
sysdemos-partition
sysdemos-linked-list
sysdemos-stack
sysdemos-fifo
sysdemos-callbacks
sysdemos-threads {names | shared [--loops N] | mutex LOOPS | sample}
sysdemos-oddeven [--limit N] [--delay SECONDS]
sysdemos-processes {fork | wait | copy [--delay SECONDS] | exec [COMMAND ...] | pipe MESSAGE}
sysdemos-signals
sysdemos-timers {timer [--interval S] | report [--interval S] [--ap-ifname NAME] [--tx-ifname NAME]}
sysdemos-progress {bar [--delay S] | countdown [--start N] [--delay S]}
sysdemos-tcp {client | server} [--host HOST] [--port PORT]
```

`sysdemos-signals` waits for signals until it receives `SIGQUIT`;
`sysdemos-timers` runs until interrupted.

## What it does not do

- `sysdemos-processes exec` runs `./hello` by default, but the package
  does not ship such a program; pass the command to run.
- `sysdemos-timers report` only reads what the `iw` tool prints; it does
  not talk to the wireless driver itself and reports an error when `iw`
  gives no output.
- The TCP server answers a single client and then exits; it is not a
  long-running service.
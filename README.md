# axiom

Building blocks for a small application framework, in plain Python with no
third-party dependencies.

## What is inside

- `axiom.algorithms`: comparison helpers (`less`, `equal`, `not_equal`,
  `greater`, `greater_equal`, `less_equal`) and in-place sequence routines:
  `bubble_sort`, `shell_sort`, `quick_sort(items, left=0, right=None)`,
  `reverse`, `fill`, and `binary_search`, which returns the index of a value
  in a sorted sequence or `None`.
- `axiom.bitset`: `Bitset(num_bits, value=0)`, a fixed-width bit set where
  bit `i` is the `i`-th least significant bit. It has `get`, `set`, `reset`,
  `clear`, `flip`, `all`, `any`, `count`, `to_string`, indexing, `len`,
  equality and the operators `&`, `|`, `^`, `~` (and their in-place forms).
  `Bitset.from_string(text, num_bits)` reads character `i` as bit `i`;
  `Bitset.repeat(word, num_bits)` fills every 64-bit word with `word`.
  `Bitset128`, `Bitset256`, `Bitset512`, `Bitset1024`, `Bitset2048` and
  `Bitset4096` are fixed sizes taking an integer or a bit string. Indexes out
  of range raise `IndexError`; combining bitsets of different sizes raises
  `ValueError`.
- `axiom.dynarray`: `Array`, a growable array that tracks a capacity (it grows
  to one and a half times the needed size), with `push_back`, `pop_back`,
  `insert`, `insert_many`, `erase`, `erase_unordered`, `resize`, `reserve`,
  `shrink_to_fit`, `swap` and more; and `FixedArray(size, value)`, whose
  length never changes.
- `axiom.memory`: `align` and `is_aligned`, and two allocators over a
  simulated address space where addresses are integers: `DefaultAllocator`
  (one region per allocation) and `BlockAllocator(block_size)`, which carves
  allocations out of fixed-size blocks and keeps freed ranges as fragments.
  Both offer `malloc`, `realloc`, `free`, `malloc_zeroed`, `read` and
  `write`; `BlockAllocator` also has `check_memory` and `number_of_blocks`.
- `axiom.archive`: `Archive`, whose `int32` and `uint32` pack a value and pass
  the bytes to `serialize`. The base `serialize` does nothing; subclasses
  override it to save or load.
- `axiom.logger`: `Logger(stream=None, show_file_name=True, colored=False)`
  with printf-style `log`, `warning` and `error` messages headed by the
  caller's file and line, and `file_log(path, message, severity)` which
  appends a timestamped line to a file. `Severity` gives the levels;
  `get_file_name` strips a path to its last component.
- `axiom.assets`: `AssetManager`, which records a project path.
- `axiom.semaphore`: a counting `Semaphore` with `wait(timeout=None)` and
  `signal(count=1)`.
- `axiom.parallel`: `ParallelFor(num_threads)`, which keeps worker threads
  alive between runs and applies a function to the items of a sequence;
  `ParallelFor.execute_once` spawns threads for a single run. The calling
  thread takes an equal share and the leftovers when it waits.
- `axiom.threadpool`: `ThreadPool(thread_count=None)` of 1 to 16 threads, each
  fed from a bounded `RingBuffer`; jobs are handed out round-robin and errors
  they raise are collected in `pool.errors`.
- `axiom.window`: `WindowMode`, `WindowType`, `CursorMode`, `WindowInitDesc`,
  a headless `NativeWindow` that keeps its state in memory, and `Platform`,
  which makes such windows and counts frames.
- `axiom.widget`, `axiom.ui_window`, `axiom.window_manager`: the `Widget`
  base class, `UIWindow` with its `WindowArguments`, and `WindowManager`,
  which gives each UI window a native window from a `Platform`.
- `axiom.application`: the `Application` base class and its frame loop,
  `DeltaTimer`, and `run_application`, which starts a fresh application each
  time one calls `restart` and returns 0 once one calls `shutdown`.

## What it does not do

Windows are headless: nothing is drawn on a screen and no input events come
from an operating system. There is no renderer and no command-line program;
the package is a library.

## Installing

```
pip install .
```

## Examples

```python
from axiom.bitset import Bitset

bits = Bitset.from_string("1011", 8)
bits.set(6)
print(bits.count(), bits.to_string())  # 4 10110010
```

```python
from axiom.threadpool import ThreadPool

results = []
with ThreadPool(4) as pool:
    for n in range(10):
        pool.push_job(lambda n=n: results.append(n * n))
print(sorted(results))
```

```python
from axiom.application import Application, run_application

class Hello(Application):
    def on_init(self):
        self.frames = 0

    def on_update(self, delta):
        self.frames += 1
        if self.frames == 3:
            self.shutdown()

run_application(lambda argv: Hello())
```

## Running the tests

```
pip install .[test]
pytest
```
# exercisekit

Classic data-structure and algorithm exercises, and a grader that runs a set of
exercise projects, scores them and writes a JSON report. The package has no
dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `exercisekit.linked_list` | `LinkedList` (singly linked, with the static `merge` of two ordered lists) and `DoublyLinkedList` (with in-place `reverse`); both have `add`, `get`, `len()`, iteration and `str()` |
| `exercisekit.sorting` | `sort(array)` — sorts a mutable sequence in place |
| `exercisekit.arithmetic` | `fib(n)` by matrix exponentiation (negative `n` raises `ValueError`), `get_sum(a, b)` |
| `exercisekit.bst` | `TreeNode`, `BinarySearchTree` with `insert`, `search` and `in`; duplicates are ignored |
| `exercisekit.brackets` | `Stack` (`push`, `pop`, `peek`, `is_empty`, `clear`, iterates top to bottom), `bracket_match(text)` |
| `exercisekit.queue_stack` | `Queue`, `QueueStack` (a stack kept in two queues), `EmptyError` (a subclass of `IndexError`) |
| `exercisekit.heap` | `Heap(comparator)`, `min_heap()`, `max_heap()` |
| `exercisekit.traversal` | `IndexGraph(n)` with `add_edge`, `bfs` and `dfs` |
| `exercisekit.weighted_graph` | `Graph`, `UndirectedGraph`, `NodeNotInGraph` |
| `exercisekit.strings` | `is_palindrome`, `are_anagrams`, `longest_substring_without_repeating_chars` |
| `exercisekit.arrays` | `find_missing_number`, `find_duplicates`, `rotate_matrix_90_degrees`, `intersection`, `merge_intervals` |
| `exercisekit.puzzles` | `count_distinct`, `convert_base`, `birthday_probability`, `min_coins`, `odd_fibonacci_sum` |
| `exercisekit.grader` | the exercise grader and its `main` |

## Examples

```python
from exercisekit.linked_list import LinkedList
from exercisekit.strings import is_palindrome
from exercisekit.puzzles import convert_base, min_coins

a = LinkedList([1, 3, 5, 7])
b = LinkedList([2, 4, 6, 8])
print(LinkedList.merge(a, b))                           # 1, 2, 3, 4, 5, 6, 7, 8

print(is_palindrome("A man, a plan, a canal, Panama"))  # True
print(convert_base("12(10)", 16))                       # c
print(min_coins(93))                                    # 5
```

`convert_base` takes a number written as `digits(base)` and returns it in the
target base, using the digits `0-9a-z`; malformed input or a target base
outside 2–36 raises `ValueError`.

### The heap

A `Heap` is its own iterator: `next()` walks the values in their stored heap
order from a cursor. When an added value moves into a position the cursor has
already passed, the cursor goes back to the start.

```python
from exercisekit.heap import min_heap

heap = min_heap()
for x in (4, 2, 9, 11):
    heap.add(x)
print(next(heap), next(heap))   # 2 4
```

### Empty containers

`Stack.pop` on an empty stack raises `IndexError`; `Queue.dequeue`,
`Queue.peek` and `QueueStack.pop` on an empty container raise `EmptyError`.

## The grader

Run it from a directory that holds `exercise_config.json` and an `exercises/`
directory:

```
exercisekit-grade all
exercisekit-grade watch
```

`all` evaluates every exercise in turn; `watch` asks after each one whether to
go on, and stops when you enter `q`. Without a mode, or when the configuration
cannot be read, the command exits with status 1.

The configuration is a JSON object with the lists `easy`, `normal` and `hard`,
evaluated in that order. Each entry has a `name`, a `path` relative to
`exercises/`, a `type` and an integer `score`:

```json
{
  "easy": [
    {"name": "algorithm1", "path": "easy/algorithm1.rs", "type": "single_file", "score": 2}
  ],
  "normal": [
    {"name": "solution1", "path": "normal/solution1", "type": "cargo_project", "score": 5}
  ],
  "hard": []
}
```

- `single_file`: the file is compiled with `rustc --test`, the test binary is
  run and then removed.
- `cargo_project`: the project must pass `cargo build`, `cargo test` and
  `cargo clippy`; its `target` directory is removed afterwards.
- Any other type counts as a failure.

A passing exercise earns its score, a failing one earns nothing. The totals are
printed, and the per-exercise results and statistics (counts, total score and
elapsed seconds) are written as indented JSON to `report.json`.

The same steps are available as functions in `exercisekit.grader`:
`load_exercise_config`, `evaluate_exercise`, `evaluate_exercises`,
`save_report` and the dataclasses `Exercise`, `ExerciseConfig`,
`ExerciseResult`, `Statistics` and `Report`.

## What it does not do

The grader brings no exercises of its own and no compiler: the exercise files
and projects, and `rustc` and `cargo` on `PATH`, must already be in place. An
exercise whose tool cannot be started is counted as failed.
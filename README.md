# tallerdatos

A set of small data-structure programs, each usable as a library module and
as a command-line tool. There are no third-party dependencies.

| Module | What it does | Command |
| --- | --- | --- |
| `tallerdatos.priority_queue` | Max-heap of distinct integers (`PriorityQueue`) driven by numbered commands (`run_commands`) | `tallerdatos-pq` |
| `tallerdatos.log_heap` | Max-heap of log lines ordered by zero-padded address (`LogHeap`, `top_lines`, `pad_address`, `strip_address`) | `tallerdatos-logheap` |
| `tallerdatos.adjacency` | Reads an adjacency matrix and shows it with its lettered adjacency list (`parse_matrix`, `adjacency_list`) | `tallerdatos-adjacency` |
| `tallerdatos.toposort` | Loads a lettered directed graph, checks `is_tree` and orders it with Kahn's algorithm (`topological_sort`) | `tallerdatos-toposort` |
| `tallerdatos.plate_table` | Open-addressing hash table of 97 slots keyed by vehicle plate (`PlateTable`) | `tallerdatos-plates` |
| `tallerdatos.network_graph` | Counts visits per network and per host in a log and reports the busiest (`NetworkLog`, `busiest`) | `tallerdatos-network` |
| `tallerdatos.domain_table` | Hash table grouping log entries by network with their distinct addresses (`DomainTable`, `DomainRecord`) | `tallerdatos-domains` |
| `tallerdatos.lexer` / `tallerdatos.lexer_cli` | Finite-automaton lexer for one-line arithmetic assignments (`scan_line`, `scan_lines`, `lex_file`) | `tallerdatos-lexer` |

## Installation

```
pip install .
```

## Command-line use

### Priority queue

Reads numbers from standard input. Commands: `1 <n>` push, `2` pop (prints
the removed value), `3` print the heap, `4` top (`-1` when empty), `5` empty
(`true`/`false`), `6` size, `0` quit.

```
printf '1 5 1 9 1 3 3 2 6 0\n' | tallerdatos-pq
```

### Plate table

Reads commands from standard input: `1 <plate> <make> <model> <year>`
insert, `2 <plate>` delete, `3` print every slot, `4 <plate>` search,
`0` quit. A full table or a repeated plate prints a message instead of
inserting.

```
printf '1 XXX000 Make Model 2020 4 XXX000 0\n' | tallerdatos-plates
```

### Adjacency list and topological sort

`tallerdatos-adjacency` reads a size `n` and `n * n` integers from standard
input, prints the matrix and then each node with its neighbours (`A - B - C`).
Nodes are labelled `A`..`Z`, then `AA`..`ZZ`.

`tallerdatos-toposort` reads the vertex count, the edge count and that many
letter pairs from standard input. It prints `true` when every vertex has at
least one incoming edge and `false` otherwise, then the vertices in
topological order; nothing is printed for the order when the graph has a
cycle.

```
printf '3 2\nA B\nA C\n' | tallerdatos-toposort
```

### Log tools

The log tools read a log file whose lines look like

```
Jun 1 10:00:00 10.0.1.2:4000 Failed password for user
```

- `tallerdatos-logheap [path] [-n COUNT]` prints the `COUNT` (default 5)
  entries with the highest addresses; the path defaults to `bitacora.txt`.
- `tallerdatos-network [path]` prints the most visited networks (first two
  octets), a blank line, then the most visited hosts. Counts are compared as
  decimal text, so 9 ranks above 10. The path defaults to `bitacora2.txt`.
- `tallerdatos-domains [path]` loads the log (default `bitacora2.txt`), then
  reads a count `n` and `n` networks from standard input and prints, for each
  one found, the network, its access count, its number of distinct hosts and
  the sorted addresses. Networks are only merged and found again when they
  are written in the padded `nnn.nnn` form in the log.

### Lexer

`tallerdatos-lexer [path]` tokenizes a file of assignments such as
`x = 3.5 * y // note`. When the path is left out, the file name is read from
standard input. One `error en su formación` line is printed per malformed
statement, followed by the token table.

```
echo program.txt | tallerdatos-lexer
```

## Library use

```python
from tallerdatos.priority_queue import PriorityQueue

queue = PriorityQueue()
for value in (5, 9, 3, 9):
    queue.push(value)
assert len(queue) == 3
assert queue.top() == 9
```

```python
from tallerdatos.toposort import is_tree, topological_sort

edges = [(0, 1), (0, 2)]
print(is_tree(3, edges), topological_sort(3, edges))  # False [0, 1, 2]
```

```python
from tallerdatos.lexer import scan_line

result = scan_line("a=b+3")
print(result.ok, result.rows)
```

Empty structures raise `IndexError` (`pop`, `top`), missing keys raise
`KeyError` (`PlateTable.search`, `PlateTable.delete`, `DomainTable.lookup`),
and malformed input raises `ValueError`.

## Tests

```
pip install .[test]
pytest
```
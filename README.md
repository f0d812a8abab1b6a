# dsworkbench

Classic data structures and graph algorithms in plain Python, with no
third-party dependencies. Each structure lives in its own module and can be
used on its own.

## Installation

```
pip install dsworkbench
```

Python 3.10 or later is required.

## Modules

| Module | Contents |
| --- | --- |
| `dsworkbench.graph_algorithms` | `build_graph`, `dfs_order`, `bfs_order`, `connected_components`, `is_bipartite`, `has_cycle`, `topological_order`, `dijkstra`, `bellman_ford`, `floyd_warshall`, `prim_mst`, `bridges`, `articulation_points`, `NegativeCycleError` |
| `dsworkbench.fixed_array` | `FixedArray`, a fixed-size integer array |
| `dsworkbench.avl_tree` | `AVLTree`, `AVLNode` |
| `dsworkbench.binary_search_tree` | `BinarySearchTree`, `BSTNode` |
| `dsworkbench.fenwick` | `BinaryIndexedTree` |
| `dsworkbench.b_tree` | `BTree`, `BTreeNode` |
| `dsworkbench.binomial_heap` | `BinomialHeap`, `BinomialNode` |
| `dsworkbench.bloom_filter` | `BloomFilter` |
| `dsworkbench.circular_linked_list` | `CircularLinkedList`, `CircularNode` |
| `dsworkbench.circular_queue` | `CircularQueue` |
| `dsworkbench.cuckoo_hash` | `CuckooHashTable` |
| `dsworkbench.bounded_deque` | `BoundedDeque` |
| `dsworkbench.doubly_linked_list` | `DoublyLinkedList`, `DoublyNode` |
| `dsworkbench.fibonacci_heap` | `FibonacciHeap`, `FibonacciNode` |
| `dsworkbench.state_graph` | `StateGraph`, `Vertex`, `Edge` |

## Graph algorithms

Vertices are the integers `0 .. n-1`. `build_graph(n, edges)` takes edges
as `(u, v)` or `(u, v, weight)` (a missing weight is 1) and returns an
undirected plain adjacency list and a weighted one of `(neighbour, weight)`
pairs.

```python
from dsworkbench.graph_algorithms import build_graph, bfs_order, dijkstra, prim_mst

adj, weighted = build_graph(4, [(0, 1, 5), (1, 2, 1), (2, 3, 2)])
print(bfs_order(adj))        # [0, 1, 2, 3]
print(dijkstra(weighted, 0)) # [0, 5, 6, 8]
print(prim_mst(weighted))    # [(0, 1, 5), (1, 2, 1), (2, 3, 2)]
```

- Unreachable distances are `math.inf`.
- `bellman_ford` raises `NegativeCycleError` (a `ValueError`) when a
  negative cycle is reachable from the source.
- `floyd_warshall` takes a square weight matrix with `math.inf` for missing
  edges and returns a new matrix; the input is left unchanged.
- `prim_mst` covers the component holding vertex 0 and returns
  `(parent, vertex, weight)` edges in the order they join the tree.
- `bridges` returns `(parent, child)` pairs; `articulation_points` returns
  vertices in ascending order.
- `topological_order` gives vertices in reverse depth-first finishing order.

## Trees

```python
from dsworkbench.avl_tree import AVLTree

tree = AVLTree()
for value in (10, 20, 30, 40):
    tree.insert(value)
print(tree.inorder(), tree.height(), 30 in tree)
print(tree.render())
```

`AVLTree` and `BinarySearchTree` hold distinct integers: `insert` returns
`False` for a value already present, `delete` raises `KeyError` for an
absent one, and `search` returns the node or `None`. Both offer `preorder`,
`inorder`, `postorder`, `level_order`, `height` (−1 when empty) and
`render`, which draws the tree sideways with the right subtree on top.

`BTree(degree)` needs a degree of at least 2 and may store equal keys more
than once. `remove` takes out one occurrence and raises `KeyError` if the
key is absent; `keys()` lists all keys in ascending order and `render()`
writes each node as `[k1, k2] ` in preorder.

`BinaryIndexedTree(size)` is addressed from 1 to `size`. `get` reads a
stored tree node, `update(index, value)` sets that node to `value` and
carries the difference to every node covering it, and `query(index)` sums
the nodes along the path ending at `index`. Out-of-range indices raise
`IndexError`.

## Heaps

```python
from dsworkbench.fibonacci_heap import FibonacciHeap

heap = FibonacciHeap()
for key in (7, 3, 9):
    heap.insert(key)
print(heap.extract_min())  # 3
```

`BinomialHeap` and `FibonacciHeap` both return the node from `insert`, and
`minimum` and `extract_min` raise `IndexError` when empty.
`BinomialHeap.decrease_key` raises `ValueError` if the new key is larger and
returns the node that ends up holding the new key;
`FibonacciHeap.decrease_key` ignores a larger key.

## Queues, lists and hashing

```python
from dsworkbench.circular_queue import CircularQueue

queue = CircularQueue(5)
queue.enqueue(1)
queue.enqueue(2)
print(queue.dequeue(), len(queue))  # 1 1
```

- `CircularQueue` (default capacity 5) and `BoundedDeque` raise
  `OverflowError` when full and `IndexError` when empty.
  `CircularQueue.slots()` returns the raw ring of slots.
- `CircularLinkedList` and `DoublyLinkedList` hold `(key, data)` entries with
  unique keys: adding an existing key raises `ValueError`, naming an absent
  one raises `KeyError`. Iteration yields `(key, data)` pairs;
  `DoublyLinkedList` can also be walked with `reversed()`.
- `FixedArray(size)` starts at zeros and rejects any index outside
  `0 .. size-1`, negative ones included, with `IndexError`.
- `BloomFilter(size=10000)` answers `item in bloom` with "probably present"
  or "definitely absent" for strings.
- `CuckooHashTable(size, max_displacements)` maps non-empty strings to
  integers. `insert` returns `False`, leaving the table as it was, when the
  displacement limit is reached; `lookup` raises `KeyError` for a missing
  key; `remove` returns whether the key was there.

## Named graphs

`StateGraph` keeps named vertices in insertion order, joined by undirected
weighted edges stored on both endpoints:

```python
from dsworkbench.state_graph import StateGraph

graph = StateGraph()
graph.add_vertex(1, "Alpha")
graph.add_vertex(2, "Beta")
graph.add_edge(1, 2, 7)
print(graph.has_edge(2, 1))  # True
print(graph.render())
```

Adding a vertex or edge that exists raises `ValueError`; naming one that
does not raises `KeyError`. `delete_vertex` also removes every edge leading
to the vertex.

## What the package does not do

This is a library only. It has no command-line program or interactive menu,
and it does not print anything: results are returned as values and strings
(the `render` methods), and failures are raised as exceptions.

## Running the tests

```
pip install "dsworkbench[test]"
pytest
```
# calgkit

A small collection of classic data structures, each with a plain, predictable
interface. Nothing beyond the standard library is needed.

- `calgkit.queue.Queue` is a double-ended queue. You can push and pop at either end.
- `calgkit.sortedarray.SortedArray` is an array that stays sorted by a
  comparison function you supply. Lookups use binary search.
- `calgkit.rb_tree.RBTree` is a red-black balanced binary search tree that maps
  keys to values. `calgkit.rb_tree.subtree_height` gives the height of any
  subtree.
- `calgkit.hashset.HashSet` is a hash set built on hash and equality functions,
  which you may supply. It supports union and intersection.
- `calgkit.slist.SList` is a singly-linked list. Its iterator can remove the
  current entry while it walks the list.

## Installation

```
pip install calgkit
```

## Comparison functions

Where a comparison function is taken, `compare(a, b)` returns a negative
number if `a` sorts before `b`, a positive number if it sorts after, and zero
if the two are equal:

```python
def compare(a, b):
    return (a > b) - (a < b)
```

## Queue

```python
from calgkit.queue import Queue

q = Queue([1, 2, 3])
q.push_head(0)
q.push_tail(4)
q.peek_head()         # 0
q.pop_tail()          # 4
list(q)               # [0, 1, 2, 3]
len(q), q.is_empty()  # (4, False)
```

If the queue is empty, `pop_head`, `pop_tail`, `peek_head` and `peek_tail`
raise `IndexError`.

## SortedArray

```python
from calgkit.sortedarray import SortedArray

arr = SortedArray(compare)
for n in (5, 1, 3):
    arr.insert(n)
list(arr)             # [1, 3, 5]
arr.index_of(3)       # 1
arr.index_of(4)       # -1
arr[0]                # 1
arr.get(10)           # None
arr.remove(0)
arr.remove_range(0, 10)   # a range past the end stops at the end
len(arr)              # 0
```

A comparison function is required. `remove` and `remove_range` raise
`IndexError` when the start index is out of range. The optional
`capacity` argument is only a sizing hint.

## RBTree

```python
from calgkit.rb_tree import RBTree, NodeSide, subtree_height

tree = RBTree(compare)        # without a function, keys compare with < and >
for key in (1, 2, 3):
    tree.insert(key, str(key))
tree.lookup(2)                # "2"
tree.lookup(9, "none")        # "none"
2 in tree                     # True
tree.to_array()               # [1, 2, 3]
root = tree.root_node()
root.key, root.child(NodeSide.LEFT).key   # (2, 1)
subtree_height(root)          # 2
tree.remove(2)                # True
tree.remove(2)                # False
len(tree)                     # 2
```

`insert` returns the new `RBTreeNode`. A node has `key`, `value`, `color`
(a `NodeColor`), `parent`, `child(side)` and `uncle()`. `remove_node(node)`
removes a node that `lookup_node` found. When you iterate over a tree, you
get its keys in order.

## HashSet

```python
from calgkit.hashset import HashSet

a = HashSet()                                 # built-in hash and ==
b = HashSet(hash, lambda x, y: x == y)
a.insert("x")                                 # True
a.insert("x")                                 # False, already present
b.insert("y")
sorted(a.union(b))                            # ["x", "y"]
len(a.intersection(b))                        # 0
"x" in a, a.query("z")                        # (True, False)
a.register_free_function(print)               # called with each removed value
a.remove("x")                                 # prints x, returns True
```

`to_array()` returns the values as a list in no particular order.

## SList

```python
from calgkit.slist import SList

lst = SList([3, 1, 2])
lst.prepend(0)
lst.append(4)
lst.sort(compare)
list(lst)                                     # [0, 1, 2, 3, 4]
lst.nth_data(1)                               # 1, IndexError if out of range
lst.nth_entry(10)                             # None
lst.remove_data(lambda d, v: d == v, 3)       # 1, the number removed
entry = lst.find_data(lambda d, v: d == v, 2)
lst.remove_entry(entry)                       # True

it = lst.iterate()
for value in it:
    if value % 2 == 0:
        it.remove()
list(lst)                                     # [1]
```

`head` and `entries()` give access to the `SListEntry` objects, each
with `data` and `next`.

## What the package does not do

It is a library only. It has no command-line tool, and it has no way to save
a structure to disk or load one from disk.

## Running the tests

```
pip install -e .[test]
pytest
```
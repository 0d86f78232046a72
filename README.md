# dsakit

A small collection of classic data structures, each usable as a library,
plus a few console programs that put them to work. No third-party
dependencies.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.avltree` | `AVLTree`, a self-balancing search tree of distinct integer keys (`insert`, `delete`, `inorder`, `display`, `in`, `len`, iteration); `AVLNode`; `DuplicateKeyError` |
| `dsakit.doubly_linked_list` | `DoublyLinkedList` with `add_to_empty`, `add_at_beginning`, `add_at_end`, `add_after`, `add_before`, `delete`, `reverse` and iteration both ways |
| `dsakit.priority_queue` | `PriorityQueue`, where a lower priority number is served first and equal priorities leave first-in first-out |
| `dsakit.order_queue` | `Order`, `OrderQueue` and `merge_orders` for first-in first-out order handling |
| `dsakit.parentheses` | `check_balanced` and `find_imbalance` for bracket matching |
| `dsakit.infix` | `infix_to_postfix`, `evaluate_postfix`, `priority` and `StackUnderflowError` |
| `dsakit.restaurant` | `Restaurant`, `MenuItem`, `OrderLine` and `format_lines` |
| `dsakit.quilt_orders` | `parse_order` and the quilt order desk program |
| `dsakit.restaurant_app` | `run`, the restaurant's text menus over any pair of text streams |

## Library examples

```python
from dsakit.avltree import AVLTree

tree = AVLTree([6, 5, 8, 9, 2, 4, 1, 0, 7])
tree.delete(6)
print(tree.inorder())   # [0, 1, 2, 4, 5, 7, 8, 9]
print(tree.display())   # sideways drawing, right subtree on top
```

Inserting a key that is already present raises `DuplicateKeyError`;
deleting a missing key raises `KeyError`.

```python
from dsakit.infix import infix_to_postfix, evaluate_postfix

postfix = infix_to_postfix("7 8 + 3 2 + /")   # "7832+/+"
print(evaluate_postfix(postfix))               # 8
```

Operands are single digits, division truncates toward zero, and an
expression that runs out of operands raises `StackUnderflowError`.

```python
from dsakit.parentheses import check_balanced, find_imbalance

check_balanced("(((5+7)*6)/2)")   # True
find_imbalance("{[(])}")          # "Mismatched parentheses are : ( and ]"
```

```python
from dsakit.doubly_linked_list import DoublyLinkedList

items = DoublyLinkedList([1, 2, 3])
items.add_before(0, 1)
items.reverse()
print(list(items))   # [3, 2, 1, 0]
```

```python
from dsakit.priority_queue import PriorityQueue

queue = PriorityQueue()
queue.enqueue(10, 2)
queue.enqueue(20, 1)
print(queue.dequeue())   # 20
```

```python
from dsakit.order_queue import OrderQueue, merge_orders
from dsakit.quilt_orders import parse_order

local = OrderQueue([parse_order("Ana 0000 ana@example.com king blue stars")])
remote = OrderQueue([parse_order("Ben 0001 ben@example.com twin red waves")])
merged = merge_orders(local, remote)
print(merged.display())
```

```python
from dsakit.restaurant import Restaurant

desk = Restaurant.with_default_menu()
desk.place_order(4, 2)
print(desk.bill_total())        # 360.0
lines, total = desk.checkout()  # moves the order into the sales totals
```

## Console programs

Each program reads from standard input and writes to standard output.

```
dsakit-parentheses        # check an expression for balanced brackets
dsakit-infix              # convert an infix expression to postfix and evaluate it
dsakit-priority-queue     # interactive priority queue
dsakit-quilt-orders       # local and out-of-state quilt order queues
dsakit-restaurant         # restaurant menu, ordering and billing desk
```

`dsakit-parentheses` and `dsakit-infix` take the expression as arguments,
or prompt for it when given none.

## What it does not do

- There is no heap or circular linked list module, and no interactive heap
  program.
- The restaurant desk keeps its menu, orders and sales in memory only;
  nothing is saved to or loaded from a file, so everything is lost when the
  program exits.
# bnmo

Small, bounded collection types and a word reader, meant as building blocks
for a console game hub and its mini-games.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `bnmo.words` | `CharMachine` and `WordMachine` read characters, blank-separated words and whole lines from a text stream; `open_data_file`, `is_numeric`, `word_to_int` |
| `bnmo.wordarray` | `WordArray`, a 1-based array of up to 100 words |
| `bnmo.scoremap` | `ScoreMap`, up to 100 word/score pairs kept in descending score order |
| `bnmo.linkedlist` | `Point` and `PointList`, an ordered list of integer points |
| `bnmo.stacks` | `Stack` of up to 150 integers and `HanoiStack`, a tower of up to 100 discs |
| `bnmo.matrix` | `Matrix`, a grid of at most 4x4 with the sliding and merging moves of 2048 |
| `bnmo.tree` | `TreeNode` with up to three children, `format_tree`, `get_parent` |
| `bnmo.wordqueue` | `WordQueue`, a first-in, first-out queue of up to 100 words |
| `bnmo.foodqueue` | `Food` and `FoodQueue`, up to 20 orders for a diner game |
| `bnmo.wordset` | `WordSet` and `CharSet`, insertion-ordered sets of up to 100 items |

The bounded types raise `OverflowError` when an item does not fit, and
`IndexError` (or `KeyError` for `ScoreMap.value`) when asked for something
that is not there.

## Examples

Reading words from a stream:

```python
import io
from bnmo.words import WordMachine

machine = WordMachine(io.StringIO("PLAY  GAME 3\n"))
print(list(machine.iter_words()))   # ['PLAY', 'GAME', '3']
```

`WordMachine.read_line()` reads a whole line, spaces included. Words longer
than 150 characters are split. `open_data_file(name, data_dir="../data")`
opens a file inside a data directory for reading.

A scoreboard ordered by score:

```python
from bnmo.scoremap import ScoreMap

board = ScoreMap()
board.insert("alice", 7)
board.insert("bob", 71)
print(list(board))            # [('bob', 71), ('alice', 7)]
print("carol" in board)       # False
board.value("carol")          # raises KeyError
```

A queue of games:

```python
from bnmo.wordqueue import WordQueue

queue = WordQueue()
queue.enqueue("HANGMAN")
queue.enqueue("TOWER OF HANOI")
print(queue.format())
# 1. HANGMAN
# 2. TOWER OF HANOI
print(queue.dequeue())        # HANGMAN
```

A 2048 board:

```python
from bnmo.matrix import Matrix

board = Matrix(4, 4)
board.set(0, 3, 2)
print(board.max_value())      # 2
score = board.shift_left(merge=False)
print(board.render())
```

A ternary tree:

```python
from bnmo.tree import TreeNode, format_tree, get_parent

root = TreeNode(1, TreeNode(2), TreeNode(3, TreeNode(4)))
print(format_tree(root, 2))
# 1
#   2
#   3
#     4
print(get_parent(root, 4).value)   # 3
```

## What this package does not do

It has no command and no interactive menu: there is nothing to start the game
hub, no way to create, queue, play or skip games, and none of the mini-games
themselves. It does not save or load game data either; `open_data_file` only
opens a file for reading. These are the pieces from which such a program can be
built.
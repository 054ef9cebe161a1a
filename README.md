# dungeoncrawl

A small text dungeon crawler for the terminal. It loads a catalogue of monsters from a CSV file. It builds a dungeon from a graph file and puts a randomly drawn monster in each room. You pick a start room and an end room. The game finds a path between them with a breadth-first search and describes each room along the way.

## Installing

```
pip install .
```

## Playing

```
dungeoncrawl [--monsters FILE] [--dungeon FILE] [--seed N]
```

- `--monsters` is the CSV catalogue of monsters. The default is `monsters.csv`.
- `--dungeon` is the graph file of the dungeon. The default is `dungeon.txt`.
- `--seed` seeds the random choices, so a run can be repeated. These choices are which monster goes in each room and which description is printed.

The game lists every room and the monster in it. It then asks where your adventure starts and where it ends. It asks again until both answers are whole numbers, both are valid room numbers and the two differ. It prints the path and then a description of each room on it in turn.

If no path joins the two rooms, the game says so and exits with status 0. The game prints a message and exits with status 1 in these cases:

- the catalogue cannot be loaded;
- the dungeon cannot be loaded;
- the catalogue is empty when rooms are being filled;
- input ends while it is asking for rooms.

### The monster catalogue

The first line is a header and is skipped. Blank lines are skipped. Every other line holds comma-separated fields in this order:

```
name,cr,type,size,ac,hp,align
Goblin,0.25,humanoid,Small,15,7,neutral evil
Ogre,2,giant,Large,11,59,chaotic evil
```

- `name`, `type`, `size` and `align` must not be empty.
- `cr` must be a decimal number.
- `ac` and `hp` must be whole numbers made of digits only.

Monsters are keyed by name. A later monster with a name already in the catalogue is ignored. An invalid field stops the load with `CatalogueError`. The rows read before that field stay loaded.

### The dungeon file

The first line is the word `Grafo`. The second line is the number of rooms, which must be at least 1. Each line after that belongs to one room, in order from room 0. It lists, separated by single spaces, the rooms that room leads to. A room with no exits has an empty line.

```
Grafo
4
1
2 3
3

```

The load fails with `GraphError`, and leaves the graph empty, in any of these cases:

- the header is wrong;
- the count is missing or not a positive whole number;
- an id is not a number or is out of range;
- an edge is listed twice;
- there are more edge lines than rooms.

## Using the pieces as a library

- `dungeoncrawl.bintree.BinaryTree`: a binary search tree of unique keys. It supports `insert`, `remove`, `in`, in-order iteration, `len`, `clear` and `display`. `random_key` picks a key uniformly at random using the random source given to the constructor.
- `dungeoncrawl.linkedlist.DoublyLinkedList`: a doubly linked list.
  - Insertion: `add_to_head`, `add_to_tail`, `add_in_order` and `add_at_position`. `add_at_position` takes a 1-based position.
  - Removal: `delete_head`, `delete_tail` and `delete_value`.
- `dungeoncrawl.graph.Graph`: a fixed-size directed graph of numbered vertices. Each vertex holds a piece of data and a list of edges.
  - It can `load` and `save` the file format above.
  - It can add and remove directed or undirected edges.
  - `depth_first_search` returns the visiting order.
  - `bfs_path` returns a path as a `DoublyLinkedList`, which is empty if the end cannot be reached.
- `dungeoncrawl.entity`:
  - `Entity` is a stat block: `name`, `cr`, `creature_type`, `size`, `ac`, `hp`, `alignment`.
  - `Monster` is an `Entity` compared by name.
  - `Player` keeps defeated monsters in name order.
  - `Room` holds one monster.
- `dungeoncrawl.catalogue.Catalogue`: loads monsters with `load_csv` and draws a copy of one with `random_monster`.
- `dungeoncrawl.dungeon.Dungeon`: rooms in a graph, plus a traced path. Use `trace_path` to find the path, `current_room` to get the room you stand in and `move_in_path` to step forward.
- `dungeoncrawl.cli.narrate(room, rng)`: returns one of ten room descriptions, chosen at random.

```python
import random
from dungeoncrawl.catalogue import Catalogue
from dungeoncrawl.dungeon import Dungeon

catalogue = Catalogue(random.Random())
catalogue.load_csv("monsters.csv")

dungeon = Dungeon()
dungeon.load("dungeon.txt")
for room_id in range(len(dungeon)):
    dungeon.add_room(room_id, catalogue.random_monster())

if dungeon.trace_path(0, 3):
    print(dungeon.current_room())
    while dungeon.move_in_path():
        print(dungeon.current_room())
```

## What it does not do

The game only walks the path and describes the rooms. There is no combat, no player character in play and no saved progress. `Player` and its list of defeated monsters exist in `dungeoncrawl.entity`, but the command does not use them.

## Running the tests

```
pip install ".[test]"
pytest
```
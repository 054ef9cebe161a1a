"""Command line game: walk a path through a dungeon filled with monsters."""

from __future__ import annotations

import argparse
import random
from typing import Any, Optional, Sequence

from dungeoncrawl.catalogue import Catalogue, CatalogueError
from dungeoncrawl.dungeon import Dungeon
from dungeoncrawl.entity import Room
from dungeoncrawl.graph import GraphError

_DESCRIPTIONS = (
    "You step into a shadowy room cloaked in layers of dust. The faint glow of "
    "moonlight reveals writing etched into the grime. In the room, there is a ",
    "Entering a dimly lit room, the air feels heavy with age, and a fine layer of "
    "dust coats every surface. Amid the gloom, faint writing glimmers faintly. "
    "In the room, there is a ",
    "As you step into the room, a cloud of dust rises, swirling in the dim, stale "
    "air. Shadows loom large, and faint inscriptions on the walls catch your eye. "
    "In the room, there is a",
    "The room is shrouded in an eerie stillness, dust clinging to every corner. "
    "Through the overwhelming darkness, faint markings emerge on the walls. "
    "In the room, there is a ",
    "You cross the threshold into a forsaken room, the weight of years past hanging "
    "in the dust-filled air. The oppressive dark swallows most of the space, but "
    "faint letters glimmer in the shadows. In the room, there is a ",
    "The air grows colder as you enter the room, the floor creaking beneath your "
    "weight. Dust motes dance in the faint light, revealing faded symbols on the "
    "walls. In the room, there is a ",
    "You push open a heavy door, and the smell of mildew fills your senses. The dim "
    "light barely reaches the far corners, where shadows seem to move. "
    "In the room, there is a ",
    "The room feels alive with a quiet tension, as if the walls themselves are "
    "watching. Layers of dust cover the floor, and broken furniture lies scattered. "
    "In the room, there is a ",
    "A low hum fills the air as you enter, the faint light casting distorted "
    "reflections on cracked mirrors along the walls. In the room, there is a ",
    "The room is cloaked in utter silence, broken only by the faint sound of "
    "dripping water. The darkness is oppressive, but you can just make out faint "
    "claw marks etched into the floor. In the room, there is a ",
)


def narrate(room: Room, rng: Any) -> str:
    """Return a randomly chosen description of entering ``room``."""
    return f"--> {_DESCRIPTIONS[rng.randrange(len(_DESCRIPTIONS))]}{room}"


def _read_int(prompt: str) -> int:
    while True:
        try:
            return int(input(prompt))
        except ValueError:
            continue


def _choose_rooms(size: int) -> tuple[int, int]:
    while True:
        start = _read_int("¿Where will your adventure start? ")
        end = _read_int("¿Where will it end? ")
        if 0 <= start < size and 0 <= end < size and start != end:
            return start, end


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="dungeoncrawl", description=__doc__)
    parser.add_argument("--monsters", default="monsters.csv", help="CSV catalogue of monsters")
    parser.add_argument("--dungeon", default="dungeon.txt", help="graph file of the dungeon")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random choices")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    rng = random.Random(args.seed)

    catalogue = Catalogue(rng)
    try:
        catalogue.load_csv(args.monsters)
    except CatalogueError:
        print("Error in the creation of the catalogue")
        return 1

    print("***Creating dungeon***")
    dungeon = Dungeon()
    try:
        dungeon.load(args.dungeon)
    except GraphError:
        print("Error in the creation of the dungeon")
        return 1

    for room_id in range(len(dungeon)):
        try:
            dungeon.add_room(room_id, catalogue.random_monster())
        except (CatalogueError, IndexError):
            print(
                "Something went terribly wrong when creating a room... "
                f"I suggest running {room_id + 1}"
            )
            return 1

    print("¿What hides in the rooms?")
    dungeon.display_rooms()

    print("\nThe time has come for you to choose a path...")
    try:
        start, end = _choose_rooms(len(dungeon))
    except EOFError:
        print()
        return 1

    if not dungeon.trace_path(start, end):
        print(f"There is no path that will take you from {start} to {end}")
        return 0

    dungeon.display_path()
    while True:
        print(narrate(dungeon.current_room(), rng))
        if not dungeon.move_in_path():
            break
    return 0
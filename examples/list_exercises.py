"""Example of the positional and structural operations of SinglyLinkedList."""

import logging

from linkedcontainers import PositionError, SinglyLinkedList


def main() -> None:
    """Walk through the list operations, printing the list after each step."""
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    lst = SinglyLinkedList[int]()
    for i in (1, 2, 3):
        lst.add_head(i)
    print(f"After add_head 1, 2, 3: {lst}")

    lst.invert()
    print(f"Inverted:               {lst}")

    lst.add_last(4)
    lst.insert(0, 0)
    lst.insert(3, 99)
    print(f"add_last/insert:        {lst}")

    print(f"get(3) = {lst.get(3)}, remove(3) = {lst.remove(3)}")
    print(f"remove_last = {lst.remove_last()}: {lst}")

    try:
        lst.get(lst.size())
    except PositionError as e:
        print(f"Out of range: {e}")

    second = lst.split()
    print(f"Split: {lst} | {second}")


if __name__ == "__main__":
    main()

"""Basic usage example for linkedcontainers."""

from linkedcontainers import Bag, EmptyContainerError, Queue, Stack


def main() -> None:
    """Demonstrate stack, queue and bag operations."""
    print("=== Stack (LIFO) ===\n")
    stack = Stack[object]()
    for item in (1, 2, "Hola", "Mundo"):
        stack.push(item)
    print(f"Stack: {stack} (size {stack.size()})")
    print(f"Top: {stack.peek()}")
    while not stack.is_empty():
        print(f"  Popped {stack.pop()!r}")
    print(f"Empty: {stack.is_empty()}\n")

    print("=== Queue (FIFO) ===\n")
    queue = Queue[object]([1, "Hola"])
    print(f"Queue: {queue} (size {queue.size()})")
    while True:
        try:
            print(f"  Dequeued {queue.dequeue()!r}")
        except EmptyContainerError:
            # No more items
            break
    print(f"Empty: {queue.is_empty()}\n")

    print("=== Bag ===\n")
    bag = Bag[str]()
    for word in "to be or not to be".split():
        bag.add(word)
    print(f"Bag: {bag} (size {bag.size()})")
    print(f"Contains 'not': {'not' in bag}")


if __name__ == "__main__":
    main()

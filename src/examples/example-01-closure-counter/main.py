"""
Example 01: A Counter Built From a Closure

Before reaching for generators, a plain function can remember where it
left off: the state lives in variables captured by an inner function.

Key concept: every call computes exactly one more value.
"""

from generator_steps import make_fibonacci_counter


if __name__ == "__main__":
    counter = make_fibonacci_counter()

    print("Calling the counter ten times:")
    for _ in range(10):
        print(f"  counter() = {counter()}")  # 1 1 2 3 5 8 13 21 34 55

    print("\nA fresh counter starts over:")
    print(f"  make_fibonacci_counter()() = {make_fibonacci_counter()()}")

    print("\n✅ Closures keep private state between calls!")

"""
Example 02: Building the Iterator Protocol by Hand

An object with __iter__() returning itself and a __next__() method can be
used anywhere Python expects an iterator, including for loops.
"""

from generator_steps import FibonacciIterator


if __name__ == "__main__":
    fib = FibonacciIterator()

    print("Calling next() by hand:")
    print(f"  next(fib) = {next(fib)}")  # 1
    print(f"  next(fib) = {next(fib)}")  # 1
    print(f"  next(fib) = {next(fib)}")  # 2

    print("\nUsing it in a for loop (it never stops, so we break):")
    for value in FibonacciIterator():
        if value > 80:
            break
        print(f"  {value}")

    print(f"\niter(fib) is fib = {iter(fib) is fib}")
    print("\n✅ Generators give you __iter__() and __next__() for free!")

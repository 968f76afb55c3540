"""
Example 03: Generator Cleanup With close()

The same sequence as a native generator. Wrapping the loop in try/finally
means close() runs the cleanup, even from inside the consuming loop.
"""

from generator_steps import fibonacci


if __name__ == "__main__":
    gen = fibonacci(on_cleanup=lambda: print("  Cleaning up"))

    print("Consuming until a value passes 50:")
    for value in gen:
        print(f"  {value}")
        if value > 50:
            gen.close()  # No break needed, the loop ends on its own

    print("\nClosing again does nothing:")
    gen.close()

    print("\n✅ close() runs the finally block exactly once!")

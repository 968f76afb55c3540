"""
Example 04: Delegation With yield from

A generator can hand control to another generator and receive its
return value once it finishes.
"""

from generator_steps import fibonacci_up_to, with_prelude


if __name__ == "__main__":
    print("Spreading a delegating generator into a list:")
    print(f"  {[*fibonacci_up_to(50)]}")

    print("\nPrepending values before delegating:")
    gen = with_prelude([0], fibonacci_up_to(20))
    values = []
    while True:
        try:
            values.append(next(gen))
        except StopIteration as stop:
            print(f"  values = {values}")
            print(f"  delegated generator returned {stop.value}")
            break

    print("\n✅ yield from passes values through and returns the result!")

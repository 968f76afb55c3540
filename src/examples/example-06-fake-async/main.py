"""
Example 06: async/await Emulated With Generators

The computation yields a Future and gets the result sent back once it
resolves, or has the error raised at the yield. This is how coroutines
worked before async/await.
"""

from generator_steps import FakeServer, fetch_subject, run_until_complete
from generator_steps.config import FetchConfig


if __name__ == "__main__":
    with FakeServer(FetchConfig(latency_seconds=1.0)) as server:
        print("Good response (waits one second):")
        data = run_until_complete(fetch_subject(server))
        print(f"  {data}")

        print("\nBad response, recovered inside the generator:")
        result = run_until_complete(fetch_subject(server, good=False))
        print(f"  result = {result}")

    print("\n✅ Generators can pause until data arrives!")

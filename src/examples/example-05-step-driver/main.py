"""
Example 05: Driving a Generator From the Outside

StepDriver wraps send(), throw() and close() in an explicit state machine:
start, resume with a value, inject a failure, or terminate early.
"""

from generator_steps import InvalidState, StepDriver, fibonacci


def add_after_suspend():
    """Suspend with 10, then finish with 10 plus whatever is sent back."""
    received = yield 10
    return 10 + received


def recover():
    """Catch an injected failure and keep going."""
    try:
        yield 0
    except ValueError as e:
        print(f"  Computation caught: {e}")
        yield -1


if __name__ == "__main__":
    print("Resuming with a value:")
    driver = StepDriver(add_after_suspend())
    print(f"  start()   = {driver.start()}")  # Pending(10)
    print(f"  resume(5) = {driver.resume(5)}")  # Complete(15)
    try:
        driver.resume(1)
    except InvalidState as e:
        print(f"  resume(1) raised InvalidState: {e}")

    print("\nTerminating early:")
    driver = StepDriver(fibonacci(on_cleanup=lambda: print("  Cleaning up")))
    driver.start()
    driver.terminate()
    driver.terminate()
    print(f"  state = {driver.state.value}, completion = {driver.completion}")

    print("\nInjecting a failure the computation recovers from:")
    driver = StepDriver(recover())
    driver.start()
    print(f"  fail(ValueError) = {driver.fail(ValueError('rejected'))}")  # Pending(-1)

    print("\n✅ The driver makes every transition explicit!")

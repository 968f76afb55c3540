"""Main entry point for the generator steps demonstration."""

import logging
import sys
import time
from itertools import islice
from typing import Generator

from .config import DemoConfig, get_demo_config, get_fetch_config
from .driver import StepDriver
from .fake_async import FakeServer, fetch_subject, run_until_complete
from .profiling import ProducerComparator
from .producers import FibonacciIterator, fibonacci, fibonacci_up_to, make_fibonacci_counter
from .trace import StepTrace

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging level.

    Args:
        verbose: Enable verbose logging
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(logging.INFO)


def add_after_suspend(first: int = 10) -> Generator[int, int, int]:
    """Suspend once with ``first``, then complete with ``first`` plus the resume value."""
    received = yield first
    return first + received


def recover_with_sentinel() -> Generator[int, int, None]:
    """Suspend; if a failure is injected, swallow it and suspend again with -1."""
    try:
        yield 0
    except Exception:
        yield -1


def show_producers(config: DemoConfig):
    """Log the output of every Fibonacci producer."""
    counter = make_fibonacci_counter()
    logger.info(f"Closure counter: {[counter() for _ in range(config.fibonacci_count)]}")

    logger.info(
        f"Hand-built iterator: {list(islice(FibonacciIterator(), config.fibonacci_count))}"
    )

    cleanups = []
    generator = fibonacci(on_cleanup=lambda: cleanups.append("cleanup"))
    values = []
    for value in generator:
        values.append(value)
        if value > config.fibonacci_limit:
            generator.close()
    logger.info(f"Generator until > {config.fibonacci_limit}: {values} (cleanups run: {len(cleanups)})")

    logger.info(f"Delegating generator: {list(fibonacci_up_to(config.fibonacci_limit))}")


def show_fake_async(config: DemoConfig):
    """Run the fetch computation through the async emulation."""
    good = not config.simulate_fetch_failure
    with FakeServer(get_fetch_config()) as server:
        data = run_until_complete(fetch_subject(server, good=good))
    if data is None:
        logger.info("Fetch computation recovered from the server error")
    else:
        logger.info(f"Fetch computation returned {data}")


def show_step_driver(trace: StepTrace):
    """Drive the resume, terminate and recovery scenarios."""
    driver = StepDriver(add_after_suspend(), name="resume", observer=trace)
    driver.start()
    driver.resume(5)
    logger.info(f"Resumed computation completed with {driver.completion}")

    cleanups = []
    driver = StepDriver(
        fibonacci(on_cleanup=lambda: cleanups.append("cleanup")), name="terminate", observer=trace
    )
    driver.start()
    driver.terminate()
    driver.terminate()
    logger.info(f"Terminated computation is {driver.state.value}, cleanups run: {len(cleanups)}")

    driver = StepDriver(recover_with_sentinel(), name="recover", observer=trace)
    driver.start()
    result = driver.fail(ValueError("injected"))
    logger.info(f"Computation recovered from injected failure with {result}")
    driver.terminate()


def print_summary(trace: StepTrace, elapsed: float):
    """Print summary of the driver operations.

    Args:
        trace: Recorded driver operations
        elapsed: Total execution time
    """
    print("\n" + "=" * 80)
    print("EXECUTION SUMMARY")
    print("=" * 80)

    print("\nDriver operations:")
    print(trace.to_dataframe().to_string(index=False))

    print("\nTotal Execution:")
    print(f"  Total time: {elapsed:.2f} seconds")

    print("\n" + "=" * 80)


def main():
    """Main execution function."""
    logger.info("Starting generator steps demonstration")
    logger.info("=" * 80)

    try:
        config = get_demo_config()
        setup_logging(config.verbose)

        logger.info(f"Fibonacci limit: {config.fibonacci_limit}")
        logger.info(f"Fibonacci count: {config.fibonacci_count}")
        logger.info(f"Simulate fetch failure: {config.simulate_fetch_failure}")

        start_time = time.time()

        logger.info("\n" + "-" * 80)
        logger.info("STEP 1: Value producers")
        logger.info("-" * 80)
        show_producers(config)

        logger.info("\n" + "-" * 80)
        logger.info("STEP 2: Async emulation with generators")
        logger.info("-" * 80)
        show_fake_async(config)

        logger.info("\n" + "-" * 80)
        logger.info("STEP 3: Step driver")
        logger.info("-" * 80)
        trace = StepTrace()
        show_step_driver(trace)

        logger.info("\n" + "-" * 80)
        logger.info("STEP 4: Producer memory comparison")
        logger.info("-" * 80)
        ProducerComparator().compare(config.fibonacci_count * 1000)

        print_summary(trace, time.time() - start_time)

        logger.info("\nExecution completed successfully!")
        return 0

    except KeyboardInterrupt:
        logger.warning("\nExecution interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"\nError during execution: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())

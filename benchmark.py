import argparse
import time
from concurrent.futures import ThreadPoolExecutor

import requests

from counter import STRATEGIES

# Number of concurrent requests to simulate
CONCURRENT_REQUESTS = 10
DEFAULT_URL = "http://localhost:5000/work"
LOCAL_SIZES = (1000, 5000, 10000, 20000)


def make_request(url, params=None):
    """Makes a single request and returns the status code."""
    try:
        response = requests.get(url, params=params, timeout=60)
        return response.status_code
    except requests.exceptions.RequestException:
        return -1


def run_concurrent_benchmark(url, params=None, concurrency=CONCURRENT_REQUESTS):
    """
    Runs a benchmark by sending multiple requests concurrently.
    Returns the total time in seconds, or -1 if any request failed.
    """
    start_time = time.perf_counter()

    with ThreadPoolExecutor(max_workers=concurrency) as executor:
        futures = [executor.submit(make_request, url, params) for _ in range(concurrency)]
        results = [future.result() for future in futures]

    end_time = time.perf_counter()

    if all(status == 200 for status in results):
        return end_time - start_time
    else:
        print(f"Error: Some requests failed. Statuses: {results}")
        return -1


def time_strategy(name, n, repeat=3):
    """Best-of-`repeat` wall time of one counting strategy, in seconds."""
    func = STRATEGIES[name]
    best = float("inf")
    for _ in range(repeat):
        start = time.perf_counter()
        func(n)
        best = min(best, time.perf_counter() - start)
    return best


def compare_strategies(sizes=LOCAL_SIZES, repeat=3):
    rows = []
    for n in sizes:
        row = {"n": n}
        for name in STRATEGIES:
            row[name] = time_strategy(name, n, repeat)
        row["speedup"] = row["scan"] / row["set"] if row["set"] > 0 else float("inf")
        rows.append(row)
    return rows


def print_comparison(rows):
    print(f"{'n':<10} {'set (s)':<12} {'scan (s)':<12} {'speedup':<10}")
    print("-" * 46)
    for row in rows:
        print(f"{row['n']:<10} {row['set']:<12.4f} {row['scan']:<12.4f} {row['speedup']:<10.1f}x")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Load probe for the /work endpoint.")
    parser.add_argument("--url", default=DEFAULT_URL)
    parser.add_argument("--n", type=int, default=None, help="value for the n query parameter")
    parser.add_argument("--concurrency", type=int, default=CONCURRENT_REQUESTS)
    parser.add_argument("--local", action="store_true",
                        help="time the counting strategies in-process instead of over HTTP")
    args = parser.parse_args(argv)

    if args.local:
        print_comparison(compare_strategies())
        return 0

    params = {"n": args.n} if args.n is not None else None
    print(f"Running benchmark with {args.concurrency} concurrent requests...")
    duration = run_concurrent_benchmark(args.url, params, args.concurrency)

    if duration == -1:
        return 1
    print(f"Total time for {args.concurrency} requests: {duration:.4f} seconds")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

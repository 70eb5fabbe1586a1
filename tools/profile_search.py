# tools/profile_search.py
"""
Small profiling harness for Trie.search.
Usage:
  python tools/profile_search.py --words 2000 --iters 300 --query "dk d wqk"

The search visits every trie node, so latency grows with dictionary size;
run with a few --words values to see the curve. Prints mean/median/stdev/p90.
"""
import argparse
import random
import statistics
import string
import time

from braille_autocorrect.core.patterns import DEFAULT_CODEC, keys_to_pattern
from braille_autocorrect.core.trie import Trie
from braille_autocorrect.dictionary import DEFAULT_WORDS


def synthetic_words(count, seed=7):
    """Sample words plus random lowercase words of length 3-10."""
    rng = random.Random(seed)
    words = list(DEFAULT_WORDS)
    while len(words) < count:
        words.append("".join(rng.choice(string.ascii_lowercase) for _ in range(rng.randint(3, 10))))
    return words[:count]


def benchmark(trie, queries, iterations=200, max_cost=None):
    times = []
    for _ in range(iterations):
        q = random.choice(queries)
        t0 = time.perf_counter()
        _ = trie.search(q, max_suggestions=5, max_cost=max_cost)
        t1 = time.perf_counter()
        times.append((t1 - t0) * 1000.0)  # ms
    return times


def summarize(times):
    times_sorted = sorted(times)
    return {
        "count": len(times_sorted),
        "mean_ms": statistics.mean(times_sorted),
        "median_ms": statistics.median(times_sorted),
        "stdev_ms": statistics.pstdev(times_sorted),
        "p90_ms": times_sorted[max(0, int(0.9 * len(times_sorted)) - 1)],
        "max_ms": times_sorted[-1],
    }


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--words", type=int, default=1000, help="dictionary size")
    parser.add_argument("--iters", type=int, default=200, help="measured iterations")
    parser.add_argument("--query", type=str, default=None, help="fixed chord query, e.g. 'dk d wqk'")
    parser.add_argument("--max-cost", type=int, default=None, help="optional cost bound")
    args = parser.parse_args()

    words = synthetic_words(args.words)
    t0 = time.perf_counter()
    trie = Trie.from_words(words)
    print(f"built {trie.size()} words / {trie.node_count()} nodes in {(time.perf_counter() - t0) * 1000:.1f} ms")

    if args.query:
        queries = [[keys_to_pattern(tok) for tok in args.query.split()]]
    else:
        # prefixes of real words: what a user mid-word would have typed
        queries = []
        for w in random.sample(words, min(20, len(words))):
            queries.append(DEFAULT_CODEC.encode_word(w[: max(1, len(w) // 2 + 1)]))

    s = summarize(benchmark(trie, queries, args.iters, args.max_cost))
    print("Stats (ms): mean=%.3f median=%.3f stdev=%.3f p90=%.3f max=%.3f" % (
        s["mean_ms"], s["median_ms"], s["stdev_ms"], s["p90_ms"], s["max_ms"],
    ))
    print("Sample output:", trie.search(queries[0], max_cost=args.max_cost))


if __name__ == "__main__":
    main()

# tools/profile_trie.py
"""
Small profiling harness for the Trie.
Usage:
  python tools/profile_trie.py --words 20000 --iters 500 --seed 7

Builds a synthetic dictionary, then prints mean/median/p90/max latency (ms)
for insert, search, auto_suggest and get_spelling_suggestions.
"""
import argparse
import random
import statistics
import string
import time

from trie_dictionary.core.trie import Trie


def make_words(n: int, rng: random.Random):
    letters = string.ascii_lowercase
    return ["".join(rng.choice(letters) for _ in range(rng.randint(3, 10))) for _ in range(n)]


def benchmark(fn, args, iterations):
    times = []
    for i in range(iterations):
        a = args[i % len(args)]
        t0 = time.perf_counter()
        fn(a)
        times.append((time.perf_counter() - t0) * 1000.0)  # ms
    return times


def summarize(times):
    times_sorted = sorted(times)
    return {
        "count": len(times_sorted),
        "mean_ms": statistics.mean(times_sorted),
        "median_ms": statistics.median(times_sorted),
        "p90_ms": times_sorted[max(0, int(0.9 * len(times_sorted)) - 1)],
        "max_ms": max(times_sorted),
    }


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--words", type=int, default=20000, help="dictionary size")
    parser.add_argument("--iters", type=int, default=500, help="measured iterations per operation")
    parser.add_argument("--seed", type=int, default=7)
    args = parser.parse_args()

    rng = random.Random(args.seed)
    words = make_words(args.words, rng)
    trie = Trie()

    print("Inserting %d words..." % len(words))
    insert_times = benchmark(trie.insert, words, len(words))
    queries = rng.sample(words, min(len(words), 200))
    prefixes = [w[:2] for w in queries]
    typos = [w[:-1] + "z" for w in queries]

    results = {
        "insert": summarize(insert_times),
        "search": summarize(benchmark(trie.search, queries, args.iters)),
        "auto_suggest": summarize(benchmark(trie.auto_suggest, prefixes, args.iters)),
        "spelling": summarize(benchmark(trie.get_spelling_suggestions, typos, args.iters)),
    }
    for op, s in results.items():
        print("%-13s mean=%.3f median=%.3f p90=%.3f max=%.3f (n=%d)" % (
            op, s["mean_ms"], s["median_ms"], s["p90_ms"], s["max_ms"], s["count"]))

    print("Sample auto_suggest(%r): %s" % (prefixes[0], trie.auto_suggest(prefixes[0])[:5]))


if __name__ == "__main__":
    main()

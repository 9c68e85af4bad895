"""Benchmark the trie engine's queries against their brute-force scans."""

import gc
import json
import random
import time
import tracemalloc
from pathlib import Path
from typing import Any, Callable

import matplotlib.pyplot as plt
import psutil

from src.lexicon.alphabet import DEFAULT_SYMBOLS
from src.lexicon.trie import Trie
from src.reference import brute_force

RESULTS_DIR = Path(__file__).parent / "results"
VOCABULARY_SIZES = [1_000, 10_000, 50_000, 100_000]
QUERIES_PER_KIND = 50
MIN_WORD_LENGTH = 3
MAX_WORD_LENGTH = 10
SEED = 2024


def generate_vocabulary(size: int, rng: random.Random) -> list[str]:
    """Generate `size` distinct random lowercase words.

    Args:
        size (int): The number of words to generate.
        rng (random.Random): The random source.

    Returns:
        list[str]: The generated words.

    """
    words: set[str] = set()
    while len(words) < size:
        length = rng.randint(MIN_WORD_LENGTH, MAX_WORD_LENGTH)
        words.add("".join(rng.choices(DEFAULT_SYMBOLS, k=length)))
    return list(words)


def generate_queries(
    vocabulary: list[str],
    rng: random.Random,
) -> dict[str, list[str]]:
    """Derive realistic queries of every kind from the vocabulary.

    Args:
        vocabulary (list[str]): The words the queries are built from.
        rng (random.Random): The random source.

    Returns:
        dict[str, list[str]]: The queries keyed by query kind.

    """
    samples = rng.sample(vocabulary, QUERIES_PER_KIND)

    prefixes = [word[: rng.randint(1, 3)] for word in samples]

    typos = []
    for word in samples:
        position = rng.randrange(len(word))
        replacement = rng.choice(DEFAULT_SYMBOLS)
        typos.append(word[:position] + replacement + word[position + 1 :])

    patterns = []
    for word in samples:
        symbols = list(word)
        for position in rng.sample(range(len(word)), k=len(word) // 2):
            symbols[position] = "*"
        patterns.append("".join(symbols))

    return {
        "contains": samples,
        "autocomplete": prefixes,
        "autocorrect": typos,
        "partial_match": patterns,
    }


def time_queries(func: Callable[[str], Any], queries: list[str]) -> float:
    """Run `func` on every query and return the mean time in milliseconds.

    Args:
        func (Callable): The query function.
        queries (list[str]): The inputs to feed it.

    Returns:
        float: The average execution time per query in milliseconds.

    """
    start_time = time.perf_counter()
    for query in queries:
        func(query)
    return (time.perf_counter() - start_time) * 1000 / len(queries)


def benchmark_size(size: int, rng: random.Random) -> dict[str, Any]:
    """Build a trie of `size` words and time every query kind on it.

    Args:
        size (int): The vocabulary size.
        rng (random.Random): The random source.

    Returns:
        dict[str, Any]: Build cost, memory and per-query timings.

    """
    vocabulary = generate_vocabulary(size, rng)
    queries = generate_queries(vocabulary, rng)
    process = psutil.Process()

    gc.collect()
    rss_before = process.memory_info().rss
    tracemalloc.start()
    start_time = time.perf_counter()
    trie = Trie.build(vocabulary)
    build_time_ms = (time.perf_counter() - start_time) * 1000
    _, traced_peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    rss_after = process.memory_info().rss

    algorithms: dict[str, dict[str, Callable[[str], Any]]] = {
        "contains": {
            "trie": trie.contains,
            "brute_force": lambda q: brute_force.linear_contains(
                vocabulary,
                q,
            ),
        },
        "autocomplete": {
            "trie": trie.autocomplete,
            "brute_force": lambda q: brute_force.linear_autocomplete(
                vocabulary,
                q,
            ),
        },
        "autocorrect": {
            "trie": trie.autocorrect,
            "brute_force": lambda q: brute_force.linear_autocorrect(
                vocabulary,
                q,
            ),
        },
        "partial_match": {
            "trie": trie.partial_match,
            "brute_force": lambda q: brute_force.linear_partial_match(
                vocabulary,
                q,
            ),
        },
    }

    timings: dict[str, dict[str, float]] = {}
    for kind, implementations in algorithms.items():
        timings[kind] = {}
        for name, func in implementations.items():
            timings[kind][name] = time_queries(func, queries[kind])
            print(
                f"[{size} words] {kind} ({name}): "
                f"{timings[kind][name]:.3f} ms per query",
            )

    return {
        "build_time_ms": build_time_ms,
        "node_count": trie.node_count,
        "traced_peak_bytes": traced_peak,
        "rss_delta_bytes": rss_after - rss_before,
        "timings": timings,
    }


def plot_results(results: dict[int, dict[str, Any]]) -> Path:
    """Draw one grouped bar chart per query kind.

    Args:
        results (dict): The per-size benchmark results.

    Returns:
        Path: The location of the saved chart.

    """
    kinds = ["contains", "autocomplete", "autocorrect", "partial_match"]
    sizes = sorted(results)
    x = range(len(sizes))
    width = 0.4

    figure, axes = plt.subplots(1, len(kinds), figsize=(18, 5))
    try:
        for axis, kind in zip(axes, kinds):
            trie_times = [results[s]["timings"][kind]["trie"] for s in sizes]
            scan_times = [
                results[s]["timings"][kind]["brute_force"] for s in sizes
            ]
            axis.bar(
                [i - width / 2 for i in x],
                trie_times,
                width,
                label="trie",
                color="steelblue",
            )
            axis.bar(
                [i + width / 2 for i in x],
                scan_times,
                width,
                label="brute force",
                color="darkorange",
            )
            axis.set_xticks(list(x))
            axis.set_xticklabels([str(s) for s in sizes])
            axis.set_yscale("log")
            axis.set_xlabel("Vocabulary size")
            axis.set_ylabel("Execution Time (ms)")
            axis.set_title(kind)
            axis.legend()

        figure.tight_layout()
        chart_path = RESULTS_DIR / "benchmark_queries.png"
        figure.savefig(chart_path)
        return chart_path

    finally:
        plt.close("all")


def main() -> None:
    """Main function."""
    RESULTS_DIR.mkdir(parents=True, exist_ok=True)
    rng = random.Random(SEED)

    results: dict[int, dict[str, Any]] = {}
    for size in VOCABULARY_SIZES:
        print(f"\n--- Benchmarking {size} words ---")
        results[size] = benchmark_size(size, rng)
        gc.collect()

    results_json_path = RESULTS_DIR / "results.json"
    with open(results_json_path, "w", encoding="utf-8") as f:
        json.dump(results, f, indent=4)

    chart_path = plot_results(results)
    print(f"\nResults written to {results_json_path} and {chart_path}")


if __name__ == "__main__":
    main()

import os
import sys
import argparse

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from benchmarks.benchmark import ALPHABETS, Benchmark


def main():
    parser = argparse.ArgumentParser(description="Run substring search benchmarks")
    parser.add_argument("--sizes", type=int, nargs="+", default=list(range(10_000, 200_001, 10_000)),
                        help="Text sizes to test, in characters")
    parser.add_argument("--alphabet", choices=sorted(ALPHABETS), default="letters",
                        help="Alphabet used to generate texts and patterns")
    parser.add_argument("--pattern-length", type=int, default=8,
                        help="Length of each generated pattern")
    parser.add_argument("--patterns", type=int, default=10,
                        help="Number of patterns per text size")
    parser.add_argument("--output-dir", default="benchmark_results",
                        help="Directory for benchmark results")
    args = parser.parse_args()

    benchmark = Benchmark(args.output_dir)

    print("Running benchmarks...")
    print("===================")
    print(f"Text sizes: {len(args.sizes)}")
    print(f"Alphabet: {args.alphabet}")
    print(f"Patterns per size: {args.patterns} (length {args.pattern_length})")
    print()

    benchmark.run_benchmark(
        text_sizes=args.sizes,
        alphabet=args.alphabet,
        pattern_length=args.pattern_length,
        pattern_count=args.patterns,
    )

    print("\nGenerating reports...")
    benchmark.generate_report()

    print(f"\nBenchmark results saved to {args.output_dir}")
    print("Files generated:")
    print(f"- {args.output_dir}/time-speed.png")
    print(f"- {args.output_dir}/comparisons.png")
    print(f"- {args.output_dir}/memory_usage.png")
    print(f"- {args.output_dir}/throughput.png")
    print(f"- {args.output_dir}/benchmark_results.csv")
    print(f"- {args.output_dir}/benchmark_report.txt")


if __name__ == "__main__":
    main()

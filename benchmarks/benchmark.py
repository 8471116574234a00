import os
import time
import random
import string
import platform
from typing import Dict, List, Optional
import pandas as pd
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import psutil
import tracemalloc

from string_search.search.dispatcher import Algorithm, search, search_with_stats

ALPHABETS = {
    "letters": string.ascii_letters + string.digits + ' ',
    "dna": "ACGT",
    "binary": "ab",
}


class Benchmark:
    def __init__(self, output_dir: str = "benchmark_results", seed: Optional[int] = 42):
        self.output_dir = output_dir
        self.algorithms = {
            "Naive": Algorithm.NAIVE,
            "KMP": Algorithm.KMP,
            "RabinKarp": Algorithm.RABIN_KARP,
            "Horspool": Algorithm.HORSPOOL,
        }
        self.results: Dict[str, List[Dict]] = {}
        self._rng = random.Random(seed)
        os.makedirs(output_dir, exist_ok=True)

    def generate_text(self, size: int, alphabet: str) -> str:
        return ''.join(self._rng.choices(alphabet, k=size))

    def generate_patterns(self, text: str, alphabet: str, count: int, length: int) -> List[str]:
        """Half the patterns are cut from the text, the rest are random."""
        patterns = []
        for i in range(count):
            if i % 2 == 0 and len(text) >= length:
                start = self._rng.randrange(len(text) - length + 1)
                patterns.append(text[start:start + length])
            else:
                patterns.append(''.join(self._rng.choices(alphabet, k=length)))
        return patterns

    def measure_memory(self, func, *args):
        tracemalloc.start()
        func(*args)
        current, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()
        return peak / 1024

    def measure_throughput(self, text: str, patterns: List[str], algorithm: Algorithm, n_runs: int = 3) -> float:
        start_time = time.perf_counter()
        for _ in range(n_runs):
            for pattern in patterns:
                search(text, pattern, algorithm)
        total_time = time.perf_counter() - start_time
        return (len(patterns) * n_runs) / (1000 * total_time) if total_time else 0.0

    def run_benchmark(self, text_sizes: List[int], alphabet: str = "letters",
                      pattern_length: int = 8, pattern_count: int = 10) -> None:
        self.results.clear()
        symbols = ALPHABETS[alphabet]
        total_steps = len(text_sizes) * len(self.algorithms)
        current_step = 0

        for size in text_sizes:
            text = self.generate_text(size, symbols)
            patterns = self.generate_patterns(text, symbols, pattern_count, pattern_length)
            for algo_name, algorithm in self.algorithms.items():
                current_step += 1
                print(f"Running benchmark: {current_step}/{total_steps} - Algorithm: {algo_name}, Text Size: {size} chars", end='\r')

                if algo_name not in self.results:
                    self.results[algo_name] = []
                total_search_time = 0.0
                total_memory_usage = 0.0
                total_comparisons = 0
                for pattern in patterns:
                    matches, stats = search_with_stats(text, pattern, algorithm)
                    total_search_time += stats.search_time
                    total_comparisons += stats.comparisons
                    total_memory_usage += self.measure_memory(search, text, pattern, algorithm)
                self.results[algo_name].append({
                    "text_size": size,
                    "alphabet": alphabet,
                    "avg_search_time": 1000 * total_search_time / len(patterns),
                    "memory_usage": total_memory_usage / len(patterns),
                    "avg_comparisons": total_comparisons / len(patterns),
                    "throughput": self.measure_throughput(text, patterns, algorithm),
                })

        print("\nBenchmark completed.")

    def plot_figure(self, data, x, y, xlabel, ylabel, filename, log_scale_x=False, log_scale_y=False):
        plt.figure(figsize=(15, 10))
        df = pd.DataFrame(data)
        for algo in df["algorithm"].unique():
            algo_data = df[df["algorithm"] == algo]
            plt.plot(algo_data[x], algo_data[y], marker='o', label=algo)
        if log_scale_x:
            plt.xscale('log')
        if log_scale_y:
            plt.yscale('log')
        plt.xlabel(xlabel + " [Log Scale]" if log_scale_x else xlabel)
        plt.ylabel(ylabel + " [Log Scale]" if log_scale_y else ylabel)
        plt.legend()
        plt.tight_layout()
        plt.savefig(filename)
        plt.close()

    def system_info(self) -> Dict[str, str]:
        mem = psutil.virtual_memory()
        return {
            "OS": f"{platform.system()} {platform.release()}",
            "Python": platform.python_version(),
            "CPU": f"{psutil.cpu_count(logical=True)} cores",
            "Memory": f"{mem.total // (1024**3)}GB total, {mem.available // (1024**3)}GB available",
        }

    def generate_report(self) -> pd.DataFrame:
        data = []
        for algo_name, results in self.results.items():
            for result in results:
                data.append(dict(result, algorithm=algo_name))
        df = pd.DataFrame(data)
        print(df.head())
        self.plot_figure(
            data=df,
            x="text_size",
            y="avg_search_time",
            xlabel="Text Size (characters)",
            ylabel="Average Search Time (ms)",
            filename=os.path.join(self.output_dir, "time-speed.png"),
            log_scale_y=True
        )
        self.plot_figure(
            data=df,
            x="text_size",
            y="avg_comparisons",
            xlabel="Text Size (characters)",
            ylabel="Character Comparisons",
            filename=os.path.join(self.output_dir, "comparisons.png"),
            log_scale_y=True
        )
        self.plot_figure(
            data=df,
            x="text_size",
            y="memory_usage",
            xlabel="Text Size (characters)",
            ylabel="Memory Usage (kB)",
            filename=os.path.join(self.output_dir, "memory_usage.png"),
            log_scale_y=True
        )
        self.plot_figure(
            data=df,
            x="text_size",
            y="throughput",
            xlabel="Text Size (characters)",
            ylabel="Throughput (searches/ms)",
            filename=os.path.join(self.output_dir, "throughput.png"),
            log_scale_y=True
        )

        df.to_csv(os.path.join(self.output_dir, "benchmark_results.csv"), index=False)

        with open(os.path.join(self.output_dir, "benchmark_report.txt"), 'w') as f:
            f.write("Benchmark Summary\n")
            f.write("==================\n\n")
            for key, value in self.system_info().items():
                f.write(f"{key + ':':<10}{value}\n")
            f.write("\n")
            f.write(f"{'Algorithm':<15}{'Avg Search Time (ms)':<25}{'Comparisons':<15}{'Memory Usage (kB)':<20}{'Throughput (searches/ms)':<25}\n")
            f.write("=" * 100 + "\n")
            for algo in df["algorithm"].unique():
                algo_data = df[df["algorithm"] == algo]
                f.write(
                    f"{algo:<15}{algo_data['avg_search_time'].mean():<25.4f}"
                    f"{algo_data['avg_comparisons'].mean():<15.1f}"
                    f"{algo_data['memory_usage'].mean():<20.2f}"
                    f"{algo_data['throughput'].mean():<25.4f}\n"
                )
        return df

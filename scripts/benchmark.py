#!/usr/bin/env python
"""Benchmark transcoding throughput for every encoding pair.

Timing uses ``time.perf_counter()`` only.  Can be run standalone for
human-readable output, or with ``--json-only`` for one JSON object per pair.
"""

from __future__ import annotations

import argparse
import itertools
import json
import statistics
import sys
import time

_DEFAULT_TEXT = (
    "Die Größe des Gebäudes überraschte die Besucher. "
    "これはテストです。这是中文测试文本。🍌⛵ "
)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Benchmark unicodec transcoding (timing only).",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=64 * 1024,
        help="Approximate input size in characters (default: 65536)",
    )
    parser.add_argument(
        "--repeat",
        type=int,
        default=5,
        help="Timed runs per encoding pair (default: 5)",
    )
    parser.add_argument(
        "--json-only",
        action="store_true",
        default=False,
        help="Print only JSON output (for consumption by other scripts)",
    )
    args = parser.parse_args()

    if args.size <= 0 or args.repeat <= 0:
        print("ERROR: --size and --repeat must be positive", file=sys.stderr)
        sys.exit(1)

    t0 = time.perf_counter()
    import unicodec
    from unicodec import Encoding

    import_time = time.perf_counter() - t0

    text = (_DEFAULT_TEXT * (args.size // len(_DEFAULT_TEXT) + 1))[: args.size]

    rows: list[tuple[str, str, int, float]] = []
    for in_enc, out_enc in itertools.product(Encoding, repeat=2):
        data = ("\ufeff" + text).encode(in_enc.codec_name)
        run_times: list[float] = []
        for _ in range(args.repeat):
            rt0 = time.perf_counter()
            unicodec.encode_as(out_enc, data)
            run_times.append(time.perf_counter() - rt0)
        median = statistics.median(run_times)
        rows.append((in_enc.name, out_enc.name, len(data), median))

        if args.json_only:
            print(
                json.dumps(
                    {
                        "input": in_enc.name,
                        "output": out_enc.name,
                        "bytes": len(data),
                        "median": median,
                        "runs": run_times,
                    }
                )
            )

    if args.json_only:
        print(json.dumps({"__import_time__": import_time}))
        return

    print(f"unicodec {unicodec.__version__}")
    print(f"  Characters:   {args.size}")
    print(f"  Import:       {import_time * 1000:.1f}ms")
    print()
    print(f"  {'Input':<8} {'Output':<8} {'Bytes':>9} {'Median':>10} {'MB/s':>8}")
    for in_name, out_name, size, median in rows:
        rate = size / median / 1e6 if median else 0.0
        print(
            f"  {in_name:<8} {out_name:<8} {size:>9} {median * 1000:>8.2f}ms {rate:>8.2f}"
        )


if __name__ == "__main__":
    main()

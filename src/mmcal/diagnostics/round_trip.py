from __future__ import annotations

import argparse
import random

import mmcal


def roundtrip_test(
    N: int,
    start: int,
    end: int,
    seed: int,
    *,
    max_failures: int,
) -> int:
    random.seed(seed)
    cache = mmcal.YearCache()
    failures = 0

    for _ in range(N):
        j0 = random.randint(start, end)

        d = mmcal.jdn_to_myanmar(j0, cache=cache)
        back = mmcal.myanmar_to_jdn(d.year, d.month, d.day, cache=cache)
        if back != j0:
            failures += 1
            print("\nFAIL (myanmar)")
            print("jdn:", j0)
            print("myanmar:", d)
            print("back:", back)
            print("year:", mmcal.year_info(d.year))
            if failures >= max_failures:
                return failures

        w = mmcal.jdn_to_civil(j0)
        back_civil = mmcal.civil_to_jdn(w.year, w.month, w.day)
        if back_civil != j0:
            failures += 1
            print("\nFAIL (civil)")
            print("jdn:", j0)
            print("civil:", w)
            print("back:", back_civil)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: jdn -> myanmar -> jdn and jdn -> civil -> jdn.")
    p.add_argument("--N", type=int, default=20000, help="Trials.")
    p.add_argument("--start-year", type=int, default=1700, help="First Gregorian year.")
    p.add_argument("--end-year", type=int, default=2300, help="Last Gregorian year.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    start = int(mmcal.civil_to_jdn(args.start_year, 1, 1))
    end = int(mmcal.civil_to_jdn(args.end_year, 12, 31))

    print(f"Testing JDN {start}..{end} ...")
    failures = roundtrip_test(args.N, start, end, args.seed, max_failures=args.max_failures)

    if failures == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {failures}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())

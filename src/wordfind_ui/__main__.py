from __future__ import annotations
import argparse, json, logging, sys
from wordfind import Engine, LoadError
from wordfind.config import DEFAULT_DICTIONARY, TOP_K

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_LOAD_FAILED = 1
EXIT_INTERRUPTED = 130


def _print_table(rows) -> None:
    if not rows:
        print("(no matches)"); return
    print("#   Score  Dist  Word")
    for i, r in enumerate(rows, 1):
        print(f"{i:<3} {r.score:<6.3f} {r.distance:<5} {r.word}")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="wordfind", description="Fuzzy word finder (type to rank dictionary words)")
    p.add_argument("--dict", dest="dict_path", default=None,
                   help=f"Word list, one word per line (default: $WORDFIND_DICT or {DEFAULT_DICTIONARY})")
    p.add_argument("--case-sensitive", action="store_true", help="Keep 'Apple' and 'apple' as separate entries")
    p.add_argument("--workers", type=int, default=None, help="Threads for sharded scans")
    p.add_argument("-k", "--limit", type=int, default=TOP_K, help="Rows for --q mode")
    p.add_argument("--q", default=None, help="Rank a single query, print and exit")
    p.add_argument("--json", action="store_true", help="Emit JSON rows (with --q)")
    p.add_argument("--web", action="store_true", help="Serve the Flask UI instead of the terminal picker")
    p.add_argument("--host", default="127.0.0.1")
    p.add_argument("--port", type=int, default=8000)
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    if args.limit < 0:
        p.error("--limit must be >= 0")

    if args.web:
        from .web import serve
        return serve(args.dict_path, host=args.host, port=args.port, workers=args.workers,
                     case_sensitive=args.case_sensitive, verbose=args.verbose)

    eng = Engine(workers=args.workers)
    try:
        try:
            eng.load(args.dict_path, case_sensitive=args.case_sensitive, verbose=args.verbose)
        except LoadError as e:
            print(f"error: {e}", file=sys.stderr)
            return EXIT_LOAD_FAILED

        if args.q is not None:
            rows = eng.rank(args.q, args.limit)
            if args.json:
                print(json.dumps([r.to_dict() for r in rows], ensure_ascii=False, indent=2))
            else:
                _print_table(rows)
            return EXIT_OK

        from .tui import run
        chosen = run(eng)
        if chosen is not None:
            print(chosen, flush=True)
        return EXIT_OK
    except KeyboardInterrupt:
        return EXIT_INTERRUPTED
    finally:
        eng.shutdown()


if __name__ == "__main__":
    raise SystemExit(main())

from __future__ import annotations

import argparse
import sys

from config import setup_logging


def parse_args() -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Two-player checkers")
    ap.add_argument("--self-test", action="store_true", help="Run the built-in rule checks and exit")
    ap.add_argument("--advanced", action="store_true", help="Start in advanced mode (forced captures, chains, kinging)")
    return ap.parse_args()


def run_self_test() -> int:
    from checkerboard.selftest import run_self_tests, summary

    results = run_self_tests()
    for r in results:
        print(f"{'PASS' if r.passed else 'FAIL'}  {r.name}")
    passed, total = summary(results)
    print(f"Tests: {passed}/{total} passed.")
    return 0 if passed == total else 1


def main() -> None:
    setup_logging()
    args = parse_args()
    if args.self_test:
        sys.exit(run_self_test())

    if args.advanced:
        from config import get_game_rules
        get_game_rules().advanced_mode = True

    from checkerboard.gui.checkers_ui import CheckersUI
    app = CheckersUI()
    app.mainloop()


if __name__ == "__main__":
    main()

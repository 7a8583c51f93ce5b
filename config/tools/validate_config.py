# config/tools/validate_config.py

import sys           # for exit codes
from pprint import pprint  # for structured printing

# make src discoverable if running as a script
from pathlib import Path
# __file__ is .../config/tools/validate_config.py
# parents[2] is the project root; append ROOT/src
PROJECT_ROOT = Path(__file__).resolve().parents[2]
sys.path.append(str(PROJECT_ROOT / "src"))

from env.loader import load_solver_profile  # import our loader


def main(argv: list[str] | None = None) -> int:
    """Load and print the resolved solver profile, failing fast on errors."""
    args = sys.argv[1:] if argv is None else argv
    name = args[0] if args else None
    try:
        profile = load_solver_profile(name)
    except (OSError, KeyError, ValueError) as e:
        print("Config validation FAILED:", file=sys.stderr)
        print(repr(e), file=sys.stderr)
        return 1                             # non-zero exit: CI will mark as failed

    print("Config validation OK.")
    print("\nActive profile:", profile.name)
    print("\nSymbols:")
    pprint(profile.symbols)
    print("\nmax_levels:", profile.max_levels)
    print("log_level:", profile.log_level)
    return 0


if __name__ == "__main__":
    sys.exit(main())  # run main() only when script is executed directly

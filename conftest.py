import sys
from pathlib import Path

# Fail fast if Python version is unsupported (structural pattern matching requires 3.10+)
if sys.version_info < (3, 10):
    print(
        f"ERROR: This project requires Python 3.10+ (found {sys.version.split()[0]}).",
        file=sys.stderr,
    )
    sys.exit(1)


# Make 'src' importable before test collection when the package is not installed.
ROOT_DIR = Path(__file__).parent.absolute()
src_dir = ROOT_DIR / "src"

if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))

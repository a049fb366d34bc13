# ensures the 'src' directory is on sys.path for imports like 'from latlon_convert import ...'
import sys
from pathlib import Path

root = Path(__file__).resolve().parents[1]
src = root / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

import sys
from pathlib import Path

# allow running the tests from a plain checkout, without installing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

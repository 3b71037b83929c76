import sys
from pathlib import Path

# Ensure project root itself is importable so the "pagesort" package can be found
repo_root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(repo_root))

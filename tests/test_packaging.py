import re
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent


def test_pyproject_readme_points_at_a_shipped_file():
    text = (ROOT / "pyproject.toml").read_text()
    match = re.search(r'^readme\s*=\s*"([^"]+)"', text, re.MULTILINE)
    if match:
        assert match.group(1) != "SPEC_FULL.md"
        assert (ROOT / match.group(1)).is_file()

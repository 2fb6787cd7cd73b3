# Allow `python -m sevendate` to behave exactly like the `7date` script.

from __future__ import annotations

from sevendate.cli import app

if __name__ == "__main__":
    app(prog_name="7date")

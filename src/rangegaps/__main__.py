"""Allow running as ``python -m rangegaps``."""

from rangegaps.cli import main

main()

"""Allow ``python -m gpx_trackview FILE`` as a shortcut for the summary tool."""

from .tools.summarize_gpx import main

if __name__ == "__main__":
    raise SystemExit(main())

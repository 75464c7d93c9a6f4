#!/usr/bin/env python
"""
Run the Streamlit checkout application on the configured UI port.

Usage:
    python scripts/run_app.py
"""
import subprocess
import sys
from pathlib import Path

import checkout_tool
from checkout_tool.config.settings import get_settings


def main():
    settings = get_settings()
    ui_path = Path(checkout_tool.__file__).resolve().parent / 'ui' / 'app_streamlit.py'

    if not ui_path.is_file():
        print(f"ERROR: checkout UI missing from the installed package ({ui_path})")
        sys.exit(1)

    cmd = [
        sys.executable, '-m', 'streamlit', 'run', str(ui_path),
        '--server.port', str(settings.ui_port),
    ]
    print(f"Checkout UI on http://localhost:{settings.ui_port}")

    try:
        subprocess.run(cmd, check=False)
    except KeyboardInterrupt:
        print("\nCheckout UI stopped.")


if __name__ == "__main__":
    main()

#!/usr/bin/env python
"""
Run the Checkout Tool API (FastAPI via uvicorn).

Usage:
    python scripts/run_api.py
"""
import subprocess
import sys
import os
from pathlib import Path

from checkout_tool.config.settings import get_settings


def main():
    project_root = Path(__file__).parent.parent
    settings = get_settings()

    # Ensure src is in python path
    env = os.environ.copy()
    src_path = str(project_root / "src")
    if "PYTHONPATH" in env:
        env["PYTHONPATH"] = f"{src_path}{os.pathsep}{env['PYTHONPATH']}"
    else:
        env["PYTHONPATH"] = src_path

    print("Starting Checkout Tool API (FastAPI)...")
    try:
        subprocess.run([
            sys.executable, "-m", "uvicorn",
            "checkout_tool.api.main:app",
            "--host", settings.api_host,
            "--port", str(settings.api_port),
            "--reload"
        ], env=env, cwd=str(project_root))
    except KeyboardInterrupt:
        print("\nAPI stopped.")


if __name__ == "__main__":
    main()

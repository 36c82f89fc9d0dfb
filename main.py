"""ArtSpark dev launcher. Starts the backend in watch mode."""

import argparse
import os
import subprocess
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent
load_dotenv(ROOT / ".env")

HOST = os.getenv("HOST", "0.0.0.0")
BACKEND_PORT = os.getenv("BACKEND_PORT", "13013")
LOG_LEVEL = os.getenv("LOG_LEVEL", "info").lower()


def main():
    parser = argparse.ArgumentParser(description="ArtSpark dev launcher")
    parser.add_argument("--demo", action="store_true",
                        help="Print sample idea and challenge prompts, then exit")
    parser.add_argument("--seed", type=int, default=None,
                        help="RNG seed for --demo output")
    args = parser.parse_args()

    if args.demo:
        from backend.demo import print_demo
        print_demo(args.seed)
        return

    if not (os.getenv("UNSPLASH_ACCESS_KEY") or os.getenv("UNSPLASH_API_KEY")):
        print("Warning: UNSPLASH_ACCESS_KEY is not set; prompts will come without photos.")

    print(f"Starting backend on http://localhost:{BACKEND_PORT} ...")
    try:
        subprocess.run(
            ["uv", "run", "uvicorn", "backend.app:app", "--reload",
             "--host", HOST, "--port", BACKEND_PORT, "--log-level", LOG_LEVEL],
            cwd=ROOT, env=os.environ.copy(),
        )
    except KeyboardInterrupt:
        print("\nShutting down...")


if __name__ == "__main__":
    main()

"""AidChaos dev launcher: hook server in watch mode, or the MCP tool server."""

import argparse
import os
import subprocess
import sys
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent
load_dotenv(ROOT / ".env")

HOST = os.getenv("HOST", "0.0.0.0")
BACKEND_PORT = os.getenv("BACKEND_PORT", "13013")


def _parse_args(argv=None):
    parser = argparse.ArgumentParser(description="AidChaos dev launcher")
    parser.add_argument("--data-dir", type=Path, default=None,
                        help="Session storage directory (default: ./data)")
    parser.add_argument("--demo", action="store_true",
                        help="Recreate the demo session (Dwarf Warrior) before starting")
    parser.add_argument("--debug", action="store_true",
                        help="Log pass routing and detection decisions")
    parser.add_argument("--mcp", action="store_true",
                        help="Run the MCP tool server on stdio instead of the HTTP host")
    return parser.parse_args(argv)


def _command(args) -> list[str]:
    if args.mcp:
        return ["uv", "run", "python", "-m", "aidchaos.mcp_server"]
    return ["uv", "run", "uvicorn", "aidchaos.app:app", "--reload", "--host", HOST, "--port", BACKEND_PORT]


def main(argv=None):
    args = _parse_args(argv)

    if args.demo:
        from aidchaos import storage
        from aidchaos.demo import create_demo_data
        storage.init_storage(args.data_dir or ROOT / "data")
        create_demo_data()
        print("Demo session 'demo' ready")

    # The server runs in a subprocess; hand it the same settings via env
    env = os.environ.copy()
    if args.data_dir:
        env["DATA_DIR"] = str(args.data_dir.resolve())
    if args.debug:
        env["AIDCHAOS_DEBUG"] = "1"

    if not args.mcp:
        print(f"Starting AidChaos on http://localhost:{BACKEND_PORT} ...")
    proc = subprocess.Popen(_command(args), cwd=ROOT, env=env)
    try:
        proc.wait()
    except KeyboardInterrupt:
        proc.terminate()
        proc.wait()
        sys.exit(0)


if __name__ == "__main__":
    main()

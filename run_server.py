#!/usr/bin/env python3
"""
Run the mock TikTok creative report server.

Usage:
    python run_server.py
    python run_server.py --port 8080
    python run_server.py --config config/mock_server.yaml --debug
"""

import sys


def main():
    try:
        from src.tiktok_mock.server import main as server_main
    except ImportError as e:
        print(f"Error: {e}")
        print("\nMake sure the dependencies are installed:")
        print("  pip install flask pyyaml structlog")
        sys.exit(1)

    server_main()


if __name__ == "__main__":
    main()

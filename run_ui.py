"""
Yup Schema Builder UI Entry Point.

Usage:
    python run_ui.py
    python run_ui.py --port 7861 --theme light
    # Then open http://localhost:7860
"""

import argparse
import sys
from pathlib import Path

# Add src to path for local development
sys.path.insert(0, str(Path(__file__).parent / "src"))

from yup_builder.config import get_config, update_config
from yup_builder.ui.app import launch


def main():
    """Main entry point."""
    config = get_config()

    parser = argparse.ArgumentParser(description="Yup Schema Builder UI")
    parser.add_argument(
        "--host",
        default=config.ui_host,
        help=f"Host to bind to (default: {config.ui_host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=config.ui_port,
        help=f"Port to listen on (default: {config.ui_port})",
    )
    parser.add_argument(
        "--theme",
        choices=["light", "dark", "system"],
        default=config.ui_theme,
        help=f"Initial color theme (default: {config.ui_theme})",
    )
    args = parser.parse_args()

    update_config(ui_theme=args.theme)
    launch(host=args.host, port=args.port)


if __name__ == "__main__":
    main()

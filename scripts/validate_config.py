#!/usr/bin/env python3
"""
Notion Relay Configuration Validator

Checks that NOTION_TOKEN and NOTION_DB_ID are set in .env and look sane
before deploying.

Usage:
    python scripts/validate_config.py

Exits with status 1 when any error is found; warnings alone exit 0.
"""

import os
import sys
from pathlib import Path

# Add parent directory to path so we can import from app
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from app.config_check import check_notion_config


def main() -> int:
    print("Validating Notion Relay configuration...")
    print()

    env_path = Path.cwd() / ".env"
    if not env_path.exists():
        print("ERROR: .env file not found!")
        print("  Create one with NOTION_TOKEN and NOTION_DB_ID set.")
        print()
        return 1

    load_dotenv(env_path)

    report = check_notion_config(
        os.getenv("NOTION_TOKEN", ""),
        os.getenv("NOTION_DB_ID", ""),
    )

    print("=" * 60)
    print("Validation Results")
    print("=" * 60)

    if report.errors:
        print()
        print("Errors (must fix):")
        for error in report.errors:
            print(f"  - {error}")

    if report.warnings:
        print()
        print("Warnings (should review):")
        for warning in report.warnings:
            print(f"  - {warning}")

    print()
    if report.ok and not report.warnings:
        print("Configuration looks good! Ready to deploy.")
    elif report.ok:
        print("Configuration is valid (with warnings above).")
    print()
    print("Notion setup: https://www.notion.so/my-integrations")

    return 0 if report.ok else 1


if __name__ == "__main__":
    sys.exit(main())

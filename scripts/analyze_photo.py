#!/usr/bin/env python3
"""
Run one style analysis from the command line.

Signs in, submits a photo through the same client session the app uses, waits
for the result to be saved and prints the style profile.

Usage:
    python scripts/analyze_photo.py --email me@example.com --password secret photo.jpg
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

import httpx

# Add the backend directory to the Python path
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

from priisme.client import (
    PhotoFile,
    StyleAnalysisSession,
    StyleApiClient,
    StyleApiError,
    build_style_results,
    render_text,
)


async def run(args: argparse.Namespace) -> int:
    api = StyleApiClient(base_url=args.api_url)
    try:
        try:
            auth = await api.login(args.email, args.password)
        except (StyleApiError, httpx.HTTPError) as e:
            print(f"✗ Sign-in failed: {e}")
            return 1

        session = StyleAnalysisSession(api, auth=auth)
        await session.load_history()

        if args.history:
            for item in session.history_preview:
                print(f"{item.date}  {item.label}")
            return 0

        photo = PhotoFile.from_path(args.photo)
        if not photo.is_image:
            print(f"✗ {photo.filename} is not an image ({photo.content_type})")
            return 1

        session.start_new_analysis()
        await session.intake.select_file(photo)
        await session.wait_for_pending_saves()

        if session.analysis is None:
            print("✗ Analysis failed, see the log above")
            return 1

        print(render_text(build_style_results(session.analysis)))
        return 0
    finally:
        await api.aclose()


def main() -> int:
    parser = argparse.ArgumentParser(description="Analyze a photo and print the style profile")
    parser.add_argument("photo", nargs="?", help="Path to a photo (jpg, png, webp, ...)")
    parser.add_argument("--email", required=True)
    parser.add_argument("--password", required=True)
    parser.add_argument("--api-url", default=None, help="Backend base URL (defaults to API_BASE_URL)")
    parser.add_argument("--history", action="store_true", help="List previous analyses instead")
    args = parser.parse_args()

    if not args.history and not args.photo:
        parser.error("a photo path is required unless --history is given")

    logging.basicConfig(level=logging.INFO)
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())

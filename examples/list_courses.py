#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
from dataclasses import replace

from lms.canvas import Canvas, CanvasConfig
from lms.canvas.models import Course


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List Canvas courses for the token's user")
    p.add_argument("--per-page", type=int, default=None)
    p.add_argument("--max-pages", type=int, default=None)
    p.add_argument("--user", type=int, default=None, help="List courses for this user id instead")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    config = CanvasConfig.from_env()
    if args.per_page is not None:
        config = replace(config, per_page=args.per_page)
    if args.max_pages is not None:
        config = replace(config, max_pages=args.max_pages)

    async with Canvas(config) as canvas:
        if args.user is not None:
            sequence = canvas.courses().list_for_user(args.user)
        else:
            sequence = canvas.stream_endpoint("courses", Course)

        print(f"{'ID':>8} | {'Code':16} | Name")
        print("-" * 60)
        async for result in sequence:
            if not result.ok:
                print(f"Stopped: {result.error}")
                break
            course = result.value
            print(f"{course.id:>8} | {course.course_code:16} | {course.name}")
        print(f"{sequence.pages_fetched} page(s) fetched")


if __name__ == "__main__":
    asyncio.run(main())

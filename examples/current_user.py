#!/usr/bin/env python3
from __future__ import annotations

import asyncio

from lms.canvas import Canvas
from lms.canvas.models import User


async def main() -> None:
    async with Canvas.from_env() as canvas:
        user = await canvas.get_endpoint("users/self", User)
        print(f"{user} <{user.email or 'no email'}>")


if __name__ == "__main__":
    asyncio.run(main())

"""Tracker 서비스 테이블 생성

사용법:
    python create_tables.py           # 없는 테이블만 생성
    python create_tables.py --drop    # 기존 테이블 삭제 후 재생성
"""
import argparse
import asyncio

from tracker.core.config import settings
from tracker.core.database import dispose_db, drop_db, init_db


async def main(drop: bool) -> None:
    print(f"Target database: {settings.DATABASE_URL.split('@')[-1]}")
    try:
        if drop:
            await drop_db()
        await init_db()
    finally:
        await dispose_db()
    print("Tracker tables created!")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create the projects/tasks tables")
    parser.add_argument("--drop", action="store_true", help="drop existing tables first")
    args = parser.parse_args()
    asyncio.run(main(args.drop))

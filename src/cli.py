import argparse
import asyncio

from loguru import logger

from src.config import get_settings
from src.db.database import init_db
from src.scheduler.families import FAMILIES

settings = get_settings()


async def run_crawl(family: str = None):
    """정기 크롤링 1회 실행"""
    from src.scheduler.jobs import run_notice_crawl

    await init_db()
    families = [family] if family else list(FAMILIES)
    for name in families:
        if not FAMILIES[name].sources(settings):
            logger.warning(f"[{name}] No categories configured, skipping")
            continue
        result = await run_notice_crawl(name, "수동 크롤링")
        logger.info(f"[{name}] Result: {result}")


async def run_purge(family: str = None):
    """오늘이 아닌 공지 삭제"""
    from src.scheduler.jobs import run_notice_purge

    await init_db()
    # 삭제는 계열과 무관하게 전체 저장소에 적용된다
    deleted = await run_notice_purge(family or next(iter(FAMILIES)))
    logger.info(f"Deleted {deleted} notices")


def main():
    parser = argparse.ArgumentParser(description="Notice Relay CLI")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # init command
    subparsers.add_parser("init", help="Initialize database")

    # crawl command
    crawl_parser = subparsers.add_parser("crawl", help="Run one crawl")
    crawl_parser.add_argument(
        "--family", "-f", choices=list(FAMILIES), help="Notice family (e.g., major)"
    )

    # purge command
    purge_parser = subparsers.add_parser("purge", help="Delete notices not dated today")
    purge_parser.add_argument("--family", "-f", choices=list(FAMILIES), help="Notice family")

    # serve command
    subparsers.add_parser("serve", help="Start API server with scheduler")

    args = parser.parse_args()

    if args.command == "init":
        asyncio.run(init_db())
    elif args.command == "crawl":
        asyncio.run(run_crawl(args.family))
    elif args.command == "purge":
        asyncio.run(run_purge(args.family))
    elif args.command == "serve":
        import uvicorn

        uvicorn.run(
            "src.main:app",
            host=settings.api_host,
            port=settings.api_port,
            reload=settings.debug,
        )
    else:
        parser.print_help()


if __name__ == "__main__":
    main()

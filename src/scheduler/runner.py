from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger
from loguru import logger

from src.config import get_settings
from src.notifications.fcm import FcmSender
from src.scheduler.families import FAMILIES
from src.scheduler.jobs import run_notice_crawl, run_notice_purge


def create_scheduler() -> AsyncIOScheduler:
    settings = get_settings()
    scheduler = AsyncIOScheduler(timezone=settings.timezone)

    # 같은 작업이 겹쳐 실행돼도 이전 실행을 취소하지 않음
    job_options = {"max_instances": settings.scheduler_max_instances, "coalesce": False}

    for family in FAMILIES.values():
        if not family.sources(settings):
            logger.warning(f"[{family.name}] No categories configured, skipping")
            continue

        for crawl in family.crawls:
            scheduler.add_job(
                run_notice_crawl,
                CronTrigger.from_crontab(crawl.crontab, timezone=settings.timezone),
                args=[family.name, crawl.task_name],
                id=crawl.job_id,
                name=crawl.task_name,
                **job_options,
            )

        scheduler.add_job(
            run_notice_purge,
            CronTrigger.from_crontab(family.purge, timezone=settings.timezone),
            args=[family.name],
            id=f"{family.name}_purge",
            name=f"{family.name} old notice purge",
            **job_options,
        )

    logger.info(f"Scheduler configured with {len(scheduler.get_jobs())} jobs")
    return scheduler


def start_scheduler() -> AsyncIOScheduler:
    """Must be called from inside a running event loop."""
    settings = get_settings()
    fcm_required = settings.is_production and settings.notification_enabled
    if fcm_required and not FcmSender.is_configured():
        logger.warning("FCM credentials are not configured, new notices will fail to push")

    scheduler = create_scheduler()
    scheduler.start()
    logger.info("Scheduler started")
    return scheduler

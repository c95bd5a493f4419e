"""
Backfill Default Tasks Script
Seeds the default checklist for profiles that have no tasks at all, e.g. profiles
created while SEED_DEFAULT_TASKS was disabled. Profiles with any task are skipped,
so the script can be re-run safely.

Run with: python -m wedding_planner.scripts.seed_default_tasks [--dry-run]
"""

import argparse
import sys
from wedding_planner.database.supabase_client import get_service_supabase
from wedding_planner.modules.profiles.service import ProfileService
from wedding_planner.modules.tasks.service import TaskService
from supabase import Client
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def backfill_default_tasks(supabase: Client, dry_run: bool = False) -> dict:
    """Seed every profile without tasks. Returns counts of seeded/skipped/failed profiles."""
    profile_service = ProfileService(supabase)
    task_service = TaskService(supabase)
    counts = {"seeded": 0, "skipped": 0, "failed": 0}

    for profile in profile_service.list_profiles():
        try:
            if task_service.has_tasks(profile.id):
                counts["skipped"] += 1
                logger.debug(f"Profile {profile.id} already has tasks")
                continue
            if dry_run:
                logger.info(f"Would seed default tasks for {profile.id} ({profile.couple_names})")
            else:
                task_service.seed_default_tasks(profile.id)
            counts["seeded"] += 1
        except Exception as e:
            counts["failed"] += 1
            logger.error(f"Error seeding profile {profile.id}: {e}")

    logger.info(
        f"Backfill finished: {counts['seeded']} seeded, {counts['skipped']} skipped, {counts['failed']} failed"
    )
    return counts


def main():
    """Main function to backfill default tasks"""
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("--dry-run", action="store_true", help="only report which profiles would be seeded")
    args = parser.parse_args()

    try:
        counts = backfill_default_tasks(get_service_supabase(), dry_run=args.dry_run)
    except Exception as e:
        logger.error(f"Error during backfill: {e}")
        sys.exit(1)
    if counts["failed"]:
        sys.exit(1)


if __name__ == "__main__":
    main()

from wedding_planner.config.settings import settings

__all__ = ["settings"]

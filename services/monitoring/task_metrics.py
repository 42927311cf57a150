"""
Task monitoring decorator for Celery tasks.

Logs start, duration and outcome of background jobs such as the
notification fan-out, so slow or failing runs show up in the logs.
"""

import time
from collections.abc import Callable
from functools import wraps
from typing import Any

from celery.exceptions import Retry

from services.core.logging import get_logger

logger = get_logger(__name__)


def monitor_task(func: Callable) -> Callable:
    """
    Decorator to monitor Celery task execution.

    Place it below ``@shared_task`` so Celery registers the wrapped function.
    Celery's own retry exception is logged as a retry, not a failure.

    Example:
        @shared_task(bind=True)
        @monitor_task
        def my_task(self, chirp_id):
            return "result"
    """

    @wraps(func)
    def wrapper(*args, **kwargs) -> Any:
        task_name = func.__name__
        start_time = time.perf_counter()

        try:
            logger.info(f"Task started: {task_name}")
            result = func(*args, **kwargs)
        except Retry:
            logger.info(
                f"Task retry scheduled: {task_name}",
                extra={
                    "task_name": task_name,
                    "duration": time.perf_counter() - start_time,
                    "status": "retry",
                },
            )
            raise
        except Exception as e:
            logger.error(
                f"Task failed: {task_name}",
                extra={
                    "task_name": task_name,
                    "duration": time.perf_counter() - start_time,
                    "status": "failure",
                    "error": str(e),
                    "error_type": type(e).__name__,
                },
                exc_info=True,
            )
            raise

        duration = time.perf_counter() - start_time
        logger.info(
            f"Task completed: {task_name} in {duration:.2f}s",
            extra={"task_name": task_name, "duration": duration, "status": "success"},
        )
        return result

    return wrapper

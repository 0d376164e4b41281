# catalog/celery_worker.py
from celery import Celery

from catalog.utils.settings import CELERY_BROKER_URL, CELERY_RESULT_BACKEND, CELERY_TASK_ALWAYS_EAGER

celery_app = Celery(
    "catalog",
    broker=CELERY_BROKER_URL,
    backend=CELERY_RESULT_BACKEND,
)

#explicit task imports so the worker registers them
celery_app.conf.imports = (
    "catalog.services.notification_service",
)

celery_app.conf.task_serializer = "json"
celery_app.conf.timezone = "UTC"

#local dev and tests: run tasks in-process, no broker needed
celery_app.conf.task_always_eager = CELERY_TASK_ALWAYS_EAGER

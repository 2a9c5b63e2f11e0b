import structlog
from django.apps import AppConfig
from django.conf import settings

logger = structlog.get_logger(__name__)


class CoreConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "modules.core"
    label = "core"

    def ready(self) -> None:
        logger.info(
            "app.ready",
            store=settings.STORE_NAME,
            environment=settings.ENVIRONMENT,
            port=settings.PORT,
        )

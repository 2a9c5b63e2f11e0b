from django.apps import AppConfig


class PaymentsConfig(AppConfig):
    name = "modules.payments"
    label = "payments"

    def ready(self) -> None:
        from modules.payments.events import PaymentCaptured, PaymentFailed
        from modules.payments.handlers import (
            payment_captured_handler,
            payment_failed_handler,
        )
        from shared.infrastructure.bus import event_bus

        event_bus.subscribe(PaymentCaptured, payment_captured_handler)
        event_bus.subscribe(PaymentFailed, payment_failed_handler)

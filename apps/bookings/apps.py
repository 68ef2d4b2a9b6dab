from django.apps import AppConfig  # type: ignore


class BookingsConfig(AppConfig):
    name = 'apps.bookings'
    label = 'bookings'
    default_auto_field = 'django.db.models.BigAutoField'

    def ready(self):
        from .bootstrap import bootstrap

        self.bus = bootstrap()

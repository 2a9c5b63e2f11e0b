from __future__ import annotations

from django.core.management.base import BaseCommand

from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService


class Command(BaseCommand):
    help = "Seed an empty catalog with the sample trading cards."

    def handle(self, *args, **options):
        self.stdout.write("Seeding sample catalog...")

        count = ProductService(repository=ProductDjangoRepository()).seed_sample_catalog()
        if count is None:
            self.stdout.write(self.style.WARNING("Database already initialized"))
            return

        self.stdout.write(self.style.SUCCESS(f"Seed completed: products={count}"))

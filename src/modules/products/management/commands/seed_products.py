from __future__ import annotations

from django.core.management.base import BaseCommand
from django.db import transaction

from modules.products.dtos import CreateProductDTO
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService

CATALOG = [
    ("air", 3000, 22, "ABC TECH"),
    ("iron", 1500, 10, "ABC TECH"),
    ("fax", 10000, 15, "ABC TECH"),
    ("phone", 2000, 0, "x brand"),
]


class Command(BaseCommand):
    help = "Seed the products table with a small demo catalog."

    def add_arguments(self, parser):
        parser.add_argument(
            "--reset",
            action="store_true",
            help="Delete every existing product before seeding.",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options["reset"]:
            deleted, _ = Product.objects.all().delete()
            self.stdout.write(f"Removed {deleted} existing products.")

        service = ProductService(repository=ProductDjangoRepository())
        existing = {(p.name, p.store) for p in service.get_all()}

        created = 0
        for name, price, discount, store in CATALOG:
            if (name, store) in existing:
                continue
            service.add(
                CreateProductDTO(name=name, price=price, discount=discount, store=store)
            )
            created += 1

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: products={created}, "
                f"skipped={len(CATALOG) - created}"
            )
        )

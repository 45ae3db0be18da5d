"""Integration tests for the ``seed_products`` management command."""

from io import StringIO

import pytest
from django.core.management import call_command

from modules.products.models import Product

pytestmark = pytest.mark.integration


class TestSeedProductsCommand:
    def test_seeds_catalog(self):
        out = StringIO()
        call_command("seed_products", stdout=out)

        assert Product.objects.count() == 4
        assert Product.objects.filter(store="ABC TECH").count() == 3
        assert "products=4" in out.getvalue()

    def test_is_idempotent(self):
        call_command("seed_products", stdout=StringIO())
        call_command("seed_products", stdout=StringIO())

        assert Product.objects.count() == 4

    def test_reset_replaces_existing_rows(self):
        Product.objects.create(name="old", price=1, discount=0, store="gone")

        call_command("seed_products", "--reset", stdout=StringIO())

        assert Product.objects.count() == 4
        assert not Product.objects.filter(store="gone").exists()

"""Product DRF serializers for API output.

The serializer operates at the Interface layer (API Views).  Request
parsing goes through ``CreateProductDTO`` in ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read-only response projection of a Product."""

    class Meta:
        model = Product
        fields = ["name", "price", "discount", "store"]
        read_only_fields = fields


class ErrorSerializer(serializers.Serializer):
    """Body returned with every non-2xx product response."""

    description = serializers.CharField()

"""Product URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.products.views import ProductDetailView, ProductListView

urlpatterns = [
    path("products", ProductListView.as_view(), name="product-list"),
    path("products/<str:pk>", ProductDetailView.as_view(), name="product-detail"),
]

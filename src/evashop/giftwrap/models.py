"""Models for the gift wrap app."""

from django.db import models


class Option(models.Model):
    """Flat key-value configuration record.

    Values are stored as text; typed access goes through
    ``options.SettingsStore`` which coerces and falls back to defaults.
    """

    key = models.CharField(max_length=191, unique=True)
    value = models.TextField(blank=True, default="")
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "option"
        verbose_name_plural = "options"
        ordering = ["key"]

    def __str__(self):
        return self.key


class OrderMeta(models.Model):
    """Durable metadata attached to an order owned by the host.

    The order is referenced by its model label and primary key so any host
    order model can carry metadata without a foreign key.
    """

    order_type = models.CharField(max_length=100)
    order_id = models.CharField(max_length=64)
    key = models.CharField(max_length=191)
    value = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = "order metadata"
        verbose_name_plural = "order metadata"
        constraints = [
            models.UniqueConstraint(
                fields=["order_type", "order_id", "key"],
                name="giftwrap_ordermeta_unique_key",
            ),
        ]
        indexes = [
            models.Index(fields=["order_type", "order_id"], name="giftwrap_ordermeta_order_idx"),
        ]

    def __str__(self):
        return f"{self.order_type}:{self.order_id} {self.key}={self.value}"

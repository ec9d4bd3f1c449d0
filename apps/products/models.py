from django.db import models


class Product(models.Model):
    """Catalog product, uniquely identified by its EAN barcode."""
    ean = models.CharField(max_length=50, unique=True)
    name = models.CharField(max_length=255, null=True, blank=True)
    original_name = models.CharField(max_length=255, null=True, blank=True)
    brand = models.CharField(max_length=100, null=True, blank=True)
    page = models.CharField(max_length=50, null=True, blank=True)
    url = models.TextField(null=True, blank=True)
    description = models.TextField(null=True, blank=True)
    category = models.CharField(max_length=100, null=True, blank=True)
    type = models.CharField(max_length=100, null=True, blank=True)
    variety = models.CharField(max_length=100, null=True, blank=True)
    image_filename = models.CharField(max_length=255, null=True, blank=True)
    available = models.BooleanField(default=True)
    comments = models.TextField(null=True, blank=True)

    class Meta:
        db_table = 'products'
        indexes = [
            models.Index(fields=['brand'], name='products_brand_idx'),
            models.Index(fields=['category'], name='products_category_idx'),
            models.Index(fields=['name'], name='products_name_idx'),
        ]

    def __str__(self):
        return f"{self.ean} - {self.name}"

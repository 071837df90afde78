from django.db import migrations, models


class Migration(migrations.Migration):
    """
    Add indexes on the columns the product listing filters by:
      - catalog_product.category
      - catalog_product.brand
      - catalog_product.availability_status
    """

    dependencies = [
        ('catalog', '0001_initial'),
    ]

    operations = [
        migrations.AddIndex(
            model_name='product',
            index=models.Index(fields=['category'], name='catalog_product_category_idx'),
        ),
        migrations.AddIndex(
            model_name='product',
            index=models.Index(fields=['brand'], name='catalog_product_brand_idx'),
        ),
        migrations.AddIndex(
            model_name='product',
            index=models.Index(fields=['availability_status'], name='catalog_product_status_idx'),
        ),
    ]

from django.db import migrations, models


class Migration(migrations.Migration):
    """
    Add indexes for order history reads:
      - orders_order.(user, created_at)  composite, covers "my orders, newest first"
      - orders_order.status              fulfillment filtering in the admin
    """

    dependencies = [
        ('orders', '0001_initial'),
    ]

    operations = [
        migrations.AddIndex(
            model_name='order',
            index=models.Index(fields=['user', 'created_at'], name='orders_order_user_created_idx'),
        ),
        migrations.AddIndex(
            model_name='order',
            index=models.Index(fields=['status'], name='orders_order_status_idx'),
        ),
    ]

from django.db import migrations


def seed_shop_items(apps, schema_editor):
    ShopItem = apps.get_model('shop', 'ShopItem')
    if ShopItem.objects.exists():
        return
    ShopItem.objects.create(
        name='1x Rest Day',
        description='Add one extra rest day to your current week',
        price=500,
        item_type='rest_day',
        enabled=True,
    )


class Migration(migrations.Migration):

    dependencies = [
        ('shop', '0001_initial'),
    ]

    operations = [
        migrations.RunPython(seed_shop_items, migrations.RunPython.noop),
    ]

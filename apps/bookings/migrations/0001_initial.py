from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='BookingDocument',
            fields=[
                ('id', models.UUIDField(editable=False, primary_key=True, serialize=False)),
                ('data', models.JSONField()),
                ('created_at', models.DateTimeField(db_index=True)),
            ],
            options={
                'verbose_name': 'Booking document',
                'verbose_name_plural': 'Booking documents',
                'db_table': 'hotel_booking_bookings',
                'ordering': ['-created_at', 'id'],
            },
        ),
    ]

from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("registrations", "0001_initial"),
    ]

    operations = [
        migrations.AlterField(
            model_name="registration", name="first_name", field=models.TextField()
        ),
        migrations.AlterField(
            model_name="registration", name="last_name", field=models.TextField()
        ),
        migrations.AlterField(model_name="registration", name="gender", field=models.TextField()),
        migrations.AlterField(model_name="registration", name="phone", field=models.TextField()),
        migrations.AlterField(model_name="registration", name="country", field=models.TextField()),
        migrations.AlterField(model_name="registration", name="state", field=models.TextField()),
        migrations.AlterField(model_name="registration", name="city", field=models.TextField()),
        migrations.AlterField(model_name="registration", name="address", field=models.TextField()),
        migrations.AlterField(
            model_name="registration",
            name="id_type",
            field=models.TextField(help_text="Kind of identity document uploaded"),
        ),
    ]

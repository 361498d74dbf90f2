from django.db import migrations, models
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Category",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=80, unique=True, verbose_name="Name")),
                ("slug", models.SlugField(max_length=80, unique=True, verbose_name="Slug")),
                ("order", models.PositiveIntegerField(db_index=True, default=0)),
            ],
            options={
                "verbose_name": "Category",
                "verbose_name_plural": "Categories",
                "ordering": ("order", "name"),
            },
        ),
        migrations.CreateModel(
            name="Tag",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=48, unique=True, verbose_name="Name")),
                ("slug", models.SlugField(max_length=64, unique=True, verbose_name="Slug")),
            ],
            options={
                "verbose_name": "Tag",
                "verbose_name_plural": "Tags",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="Post",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=180, verbose_name="Title")),
                ("slug", models.SlugField(blank=True, max_length=200, unique=True, verbose_name="Slug")),
                ("cover", models.ImageField(blank=True, upload_to="blog/covers/", verbose_name="Cover")),
                ("excerpt", models.TextField(blank=True, max_length=300, verbose_name="Excerpt")),
                ("body", models.TextField(blank=True, verbose_name="Body")),
                ("is_published", models.BooleanField(db_index=True, default=False, verbose_name="Published")),
                ("published_at", models.DateTimeField(db_index=True, default=django.utils.timezone.now, verbose_name="Publish date")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Created")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Updated")),
                ("categories", models.ManyToManyField(blank=True, related_name="posts", to="blog.category", verbose_name="Categories")),
                ("tags", models.ManyToManyField(blank=True, related_name="posts", to="blog.tag", verbose_name="Tags")),
            ],
            options={
                "verbose_name": "Post",
                "verbose_name_plural": "Posts",
                "ordering": ["-published_at", "-id"],
                "indexes": [models.Index(fields=["is_published", "published_at"], name="blog_post_published_idx")],
            },
        ),
    ]

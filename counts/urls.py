# FILE: counts/urls.py
from django.urls import path

from . import views

app_name = "counts"

urlpatterns = [
    path("block/", views.block, name="block"),
]

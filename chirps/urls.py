from django.urls import path

from . import views

app_name = "chirps"

urlpatterns = [
    path("", views.index, name="index"),
    path("<int:pk>/edit/", views.edit, name="edit"),
    path("<int:pk>/delete/", views.destroy, name="destroy"),
]

from django.urls import include, path

urlpatterns = [
    path("api/study-guides/", include("scheduler.api.urls")),
]

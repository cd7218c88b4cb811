from django.urls import include, path

app_name = "api"

urlpatterns = [
    path("campaigns/", include("api.urls.campaign_urls")),
    path("", include("api.urls.scene_urls")),
]

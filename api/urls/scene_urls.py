"""
URL configuration for map and token endpoints.
"""

from django.urls import path

from api.views.scene_views import create_token, move_token, update_token_layer

app_name = "tabletop"

urlpatterns = [
    path("maps/<int:map_id>/tokens/", create_token, name="create_token"),
    path(
        "tokens/<int:token_id>/position/",
        move_token,
        name="move_token",
    ),
    path("tokens/<int:token_id>/layer/", update_token_layer, name="token_layer"),
]

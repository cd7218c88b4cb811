"""
API views for scenes, maps and tokens.

Key Features:
- Owners and editors create scenes, maps and tokens
- Token moves are plain updates; the last write wins
- Scene activation keeps the campaign's active scene in sync
"""

from rest_framework import permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from api.errors import APIError, handle_tabletop_errors
from api.serializers import (
    ActiveSceneSerializer,
    MapCreateSerializer,
    MapSerializer,
    SceneCreateSerializer,
    SceneSerializer,
    TokenCreateSerializer,
    TokenLayerSerializer,
    TokenPositionSerializer,
    TokenSerializer,
)
from scenes.services import SceneService, TokenService

__all__ = [
    "create_scene",
    "set_active_scene",
    "create_map",
    "create_token",
    "move_token",
    "update_token_layer",
]


@api_view(["POST"])
@permission_classes([permissions.IsAuthenticated])
@handle_tabletop_errors
def create_scene(request, campaign_id):
    payload = SceneCreateSerializer(data=request.data)
    if not payload.is_valid():
        return APIError.validation_error(payload.errors)

    scene = SceneService().create_scene(
        campaign_id, request.user.id, **payload.validated_data
    )
    return Response(SceneSerializer(scene).data, status=status.HTTP_201_CREATED)


@api_view(["PUT"])
@permission_classes([permissions.IsAuthenticated])
@handle_tabletop_errors
def set_active_scene(request, campaign_id):
    """Make one of the campaign's scenes the one players see."""
    payload = ActiveSceneSerializer(data=request.data)
    if not payload.is_valid():
        return APIError.validation_error(payload.errors)

    scene = SceneService().set_active_scene(
        campaign_id, request.user.id, payload.validated_data["scene_id"]
    )
    return Response(SceneSerializer(scene).data)


@api_view(["POST"])
@permission_classes([permissions.IsAuthenticated])
@handle_tabletop_errors
def create_map(request, campaign_id):
    """Add a map to the campaign, creating a default scene if needed."""
    payload = MapCreateSerializer(data=request.data)
    if not payload.is_valid():
        return APIError.validation_error(payload.errors)

    game_map = SceneService().create_map(
        campaign_id, request.user.id, **payload.validated_data
    )
    return Response(MapSerializer(game_map).data, status=status.HTTP_201_CREATED)


@api_view(["POST"])
@permission_classes([permissions.IsAuthenticated])
@handle_tabletop_errors
def create_token(request, map_id):
    payload = TokenCreateSerializer(data=request.data)
    if not payload.is_valid():
        return APIError.validation_error(payload.errors)

    data = payload.validated_data
    token = TokenService().create_token(
        map_id,
        request.user.id,
        label=data["label"],
        character_id=data["character_id"],
        image_url=data["image_url"],
        size_squares=data["size_squares"],
        position_x=data["position_x"],
        position_y=data["position_y"],
        facing_deg=data["facing_deg"],
        audience=data["audience"],
        tags=data["tags"],
        layer=data["layer"] or None,
    )
    return Response(TokenSerializer(token).data, status=status.HTTP_201_CREATED)


@api_view(["PUT"])
@permission_classes([permissions.IsAuthenticated])
@handle_tabletop_errors
def move_token(request, token_id):
    payload = TokenPositionSerializer(data=request.data)
    if not payload.is_valid():
        return APIError.validation_error(payload.errors)

    token = TokenService().move_token(
        token_id,
        request.user.id,
        payload.validated_data["position_x"],
        payload.validated_data["position_y"],
    )
    return Response(TokenSerializer(token).data)


@api_view(["PUT"])
@permission_classes([permissions.IsAuthenticated])
@handle_tabletop_errors
def update_token_layer(request, token_id):
    payload = TokenLayerSerializer(data=request.data)
    if not payload.is_valid():
        return APIError.validation_error(payload.errors)

    token = TokenService().update_layer(
        token_id, request.user.id, payload.validated_data["layer"]
    )
    return Response(TokenSerializer(token).data)

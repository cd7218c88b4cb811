"""
Scene, map and token services plus the tabletop snapshot.

All write paths resolve the owning campaign first (token -> map -> scene ->
campaign) and pass the caller through the campaign permission gate before
touching anything.
"""

import logging
from typing import Any, Dict, List, Optional

from django.db import transaction
from django.db.models import Max

from campaigns.choices import MemberStatus, parse_choice
from campaigns.exceptions import InvalidState, NotFound, NotPermitted
from campaigns.models import Campaign, CampaignCharacter, CampaignHandout
from campaigns.permissions import Action, is_gm
from campaigns.services import MembershipStore, get_campaign, resolve_access
from characters.models import Character

from .models import GM_ONLY, Map, Scene, Token, TokenLayer

logger = logging.getLogger(__name__)

DEFAULT_SCENE_NAME = "Table"


class SceneService:
    """Create scenes and maps, and pick the scene shown to players."""

    def __init__(self, store: Optional[MembershipStore] = None):
        self.store = store or MembershipStore()

    def create_scene(
        self,
        campaign_id: Any,
        user_id: Any,
        name: str,
        description: str = "",
        activate: bool = False,
    ) -> Scene:
        """Append a scene to the campaign.

        The campaign's first scene, or any scene created with
        ``activate=True``, becomes the active scene.
        """
        if not name or not name.strip():
            raise InvalidState("Scene name is required.")
        campaign, _ = resolve_access(
            campaign_id, user_id, Action.MANAGE_CONTENT, self.store
        )

        with transaction.atomic():
            last = Scene.objects.filter(campaign=campaign).aggregate(
                last=Max("ordering")
            )["last"]
            scene = Scene.objects.create(
                campaign=campaign,
                name=name.strip(),
                description=description or "",
                ordering=0 if last is None else last + 1,
                created_by_id=user_id,
            )
            if activate or campaign.active_scene_id is None:
                self._activate(campaign, scene)

        logger.info(
            "Scene %s created in campaign %s by user %s",
            scene.id,
            campaign.id,
            user_id,
        )
        return scene

    def set_active_scene(self, campaign_id: Any, user_id: Any, scene_id: Any) -> Scene:
        campaign, _ = resolve_access(
            campaign_id, user_id, Action.MANAGE_CONTENT, self.store
        )
        try:
            scene = Scene.objects.get(id=scene_id, campaign=campaign)
        except (Scene.DoesNotExist, ValueError, TypeError):
            raise NotFound("Scene not found.")

        with transaction.atomic():
            self._activate(campaign, scene)
        logger.info(
            "Campaign %s active scene set to %s by user %s",
            campaign.id,
            scene.id,
            user_id,
        )
        return scene

    def create_map(
        self,
        campaign_id: Any,
        user_id: Any,
        name: str = "Map",
        base_image_url: str = "",
    ) -> Map:
        """Add a map to the campaign's first scene.

        A default active scene is created when the campaign has none yet.
        """
        campaign, _ = resolve_access(
            campaign_id, user_id, Action.MANAGE_CONTENT, self.store
        )
        with transaction.atomic():
            scene = self._ensure_default_scene(campaign, user_id)
            return Map.objects.create(
                scene=scene,
                name=(name or "").strip() or "Map",
                base_image_url=base_image_url or "",
                created_by_id=user_id,
            )

    def _ensure_default_scene(self, campaign: Campaign, user_id: Any) -> Scene:
        scene = Scene.objects.by_campaign(campaign.id).first()
        if scene is not None:
            return scene
        scene = Scene.objects.create(
            campaign=campaign,
            name=DEFAULT_SCENE_NAME,
            ordering=0,
            created_by_id=user_id,
        )
        self._activate(campaign, scene)
        logger.info("Default scene created for campaign %s", campaign.id)
        return scene

    def _activate(self, campaign: Campaign, scene: Scene) -> None:
        Scene.objects.filter(campaign=campaign).exclude(pk=scene.pk).update(
            is_active=False
        )
        scene.is_active = True
        scene.save(update_fields=["is_active", "updated_at"])
        campaign.active_scene = scene
        campaign.save(update_fields=["active_scene", "updated_at"])


class TokenService:
    """Place and move tokens on maps."""

    def __init__(self, store: Optional[MembershipStore] = None):
        self.store = store or MembershipStore()

    def create_token(
        self,
        map_id: Any,
        user_id: Any,
        label: str = "",
        character_id: Any = None,
        image_url: str = "",
        size_squares: int = 1,
        position_x: int = 0,
        position_y: int = 0,
        facing_deg: int = 0,
        audience: Optional[List[str]] = None,
        tags: Optional[List[str]] = None,
        layer: Optional[str] = None,
    ) -> Token:
        """Create a token on a map.

        Args:
            map_id: The map to place the token on
            user_id: The member placing it
            size_squares: Footprint in grid squares; values below 1 become 1
            audience: Who may see the token, ``["gm-only"]`` by default
            layer: ``map``, ``object``, ``token`` (default) or ``gm``

        Raises:
            NotFound: If the map or character does not exist
            InvalidState: If the layer is unknown
        """
        layer = parse_choice(TokenLayer, layer or TokenLayer.TOKEN, "layer")
        try:
            game_map = Map.objects.select_related("scene").get(id=map_id)
        except (Map.DoesNotExist, ValueError, TypeError):
            raise NotFound("Map not found.")
        resolve_access(
            game_map.scene.campaign_id, user_id, Action.MANAGE_CONTENT, self.store
        )

        if character_id is not None and not Character.objects.filter(
            id=character_id
        ).exists():
            raise NotFound("Character not found.")

        token = Token.objects.create(
            map=game_map,
            character_id=character_id,
            label=label or "",
            image_url=image_url or "",
            size_squares=size_squares if size_squares and size_squares > 0 else 1,
            position_x=position_x,
            position_y=position_y,
            facing_deg=facing_deg,
            audience=[GM_ONLY] if audience is None else list(audience),
            tags=list(tags or []),
            layer=layer,
            created_by_id=user_id,
        )
        logger.debug("Token %s created on map %s", token.id, game_map.id)
        return token

    def move_token(self, token_id: Any, user_id: Any, x: int, y: int) -> Token:
        """Move a token. Concurrent moves overwrite each other."""
        token = self._resolve(token_id, user_id)
        Token.objects.filter(pk=token.pk).update(position_x=x, position_y=y)
        return Token.objects.get(pk=token.pk)

    def update_layer(self, token_id: Any, user_id: Any, layer: str) -> Token:
        layer = parse_choice(TokenLayer, layer, "layer")
        token = self._resolve(token_id, user_id)
        Token.objects.filter(pk=token.pk).update(layer=layer)
        return Token.objects.get(pk=token.pk)

    def _resolve(self, token_id: Any, user_id: Any) -> Token:
        try:
            token = Token.objects.select_related("map__scene").get(id=token_id)
        except (Token.DoesNotExist, ValueError, TypeError):
            raise NotFound("Token not found.")
        resolve_access(
            token.map.scene.campaign_id, user_id, Action.MANAGE_CONTENT, self.store
        )
        return token


class TabletopService:
    """Build the role-filtered snapshot of a campaign's table."""

    def __init__(self, store: Optional[MembershipStore] = None):
        self.store = store or MembershipStore()

    def get_full(self, campaign_id: Any, user_id: Any) -> Dict[str, Any]:
        """Return everything the caller may see of the campaign.

        GMs get every scene and token. Other members get only the active
        scene, without GM-layer or ``gm-only`` tokens.

        Raises:
            NotFound: If the campaign does not exist
            NotCampaignMember: If the caller has no membership
            NotPermitted: If the membership is not accepted
        """
        campaign = get_campaign(campaign_id)
        membership = self.store.get(campaign.id, user_id)
        if membership.status != MemberStatus.ACCEPTED:
            raise NotPermitted()
        gm_view = is_gm(membership.role)

        scenes = Scene.objects.by_campaign(campaign.id)
        if gm_view:
            scenes = scenes.with_maps()
        else:
            scenes = scenes.filter(
                id=campaign.active_scene_id, is_active=True
            ).with_maps(Token.objects.off_gm_layer())

        scene_list = [
            {
                "scene": scene,
                "maps": [
                    {
                        "map": game_map,
                        "tokens": self._visible_tokens(game_map, gm_view),
                    }
                    for game_map in scene.maps.all()
                ],
            }
            for scene in scenes
        ]

        return {
            "campaign": campaign,
            "role": membership.role,
            "members": list(self.store.list_members(campaign.id)),
            "characters": [
                link.character
                for link in CampaignCharacter.objects.filter(campaign=campaign)
                .select_related("character__owner")
                .order_by("created_at", "id")
            ],
            "handouts": list(
                CampaignHandout.objects.filter(campaign=campaign).order_by(
                    "created_at", "id"
                )
            ),
            "scenes": scene_list,
        }

    def _visible_tokens(self, game_map: Map, gm_view: bool) -> List[Token]:
        tokens = list(game_map.tokens.all())
        if gm_view:
            return tokens
        return [token for token in tokens if not token.is_gm_only]

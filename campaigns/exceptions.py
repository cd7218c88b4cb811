"""
Error taxonomy for campaign and tabletop operations.

Services raise these typed errors at the point of the check; the API layer
maps each class to a single HTTP response (see ``api.errors``). "Not found"
and "not allowed" are always distinct classes so callers never lose the
difference between the two.
"""


class TabletopError(Exception):
    """Base class for every domain error raised by the services."""

    default_detail = "Request could not be completed."

    def __init__(self, detail: str = ""):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class NotFound(TabletopError):
    default_detail = "Resource not found."


class InviteNotFound(NotFound):
    default_detail = "Invite not found."


class NotCampaignMember(TabletopError):
    default_detail = "User is not a campaign member."


class NotPermitted(TabletopError):
    default_detail = "User is not permitted for this campaign."


class CharacterNotOwned(NotPermitted):
    default_detail = "Character not owned by user."


class InvalidState(TabletopError):
    default_detail = "Invalid value."


class AlreadyExists(TabletopError):
    default_detail = "Resource already exists."


class InviteExpired(TabletopError):
    default_detail = "Invite expired."


class InviteRedeemed(TabletopError):
    default_detail = "Invite already redeemed."


class AlreadyMember(TabletopError):
    default_detail = "User is already a member."


class CouldNotGenerateCode(TabletopError):
    """Invite-code generation exhausted its retry budget."""

    default_detail = "Could not generate a unique invite code."


class StoreError(TabletopError):
    """A write failed inside an atomic unit of work and was rolled back."""

    default_detail = "The operation could not be saved."

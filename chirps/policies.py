"""Authorization rules for Chirps."""

from django.core.exceptions import PermissionDenied


class ChirpPolicy:
    """Only the author of a Chirp may change it."""

    @staticmethod
    def update(user, chirp) -> bool:
        return bool(user and user.is_authenticated and chirp.user_id == user.pk)

    @staticmethod
    def delete(user, chirp) -> bool:
        return ChirpPolicy.update(user, chirp)


def authorize(user, ability: str, chirp) -> None:
    """Raise PermissionDenied unless ``user`` may perform ``ability`` on ``chirp``."""
    check = getattr(ChirpPolicy, ability, None)
    if check is None:
        raise ValueError(f"Unknown Chirp ability: {ability}")
    if not check(user, chirp):
        raise PermissionDenied(f"You may not {ability} this Chirp.")

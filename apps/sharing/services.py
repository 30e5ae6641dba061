import logging
import string

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.crypto import get_random_string

from apps.core.exceptions import ShareLinkNotFound, ShareLinkUnavailable

from .models import ShareLink
from .stores import ShareHashCollision, ShareLinkStore

logger = logging.getLogger(__name__)

HASH_ALPHABET = string.ascii_letters + string.digits


class ShareLinkManager:
    """
    Per-user share-link lifecycle:

    * no link + share   -> new random hash, created=True
    * link    + share   -> existing hash, created=False (never rotated)
    * link    + revoke  -> link deleted, True
    * no link + revoke  -> nothing to do, False

    Candidate hashes that are already taken are discarded and regenerated,
    up to `max_attempts` times, after which `ShareLinkUnavailable` is raised.
    """

    def __init__(self, store=None, hash_length=None, max_attempts=None):
        self.store = store if store is not None else ShareLinkStore()
        self.hash_length = hash_length or settings.SHARE_HASH_LENGTH
        self.max_attempts = max_attempts or settings.SHARE_HASH_MAX_ATTEMPTS

        max_length = ShareLink._meta.get_field('hash').max_length
        if not 1 <= self.hash_length <= max_length:
            raise ImproperlyConfigured(f"SHARE_HASH_LENGTH must be between 1 and {max_length}, got {self.hash_length}")

    def generate_hash(self):
        return get_random_string(self.hash_length, allowed_chars=HASH_ALPHABET)

    def share(self, owner_id):
        existing = self.store.get_hash_for_owner(owner_id)
        if existing:
            logger.info(f"Reusing share link for user {owner_id}")
            return existing, False

        for attempt in range(1, self.max_attempts + 1):
            candidate = self.generate_hash()
            if self.store.hash_exists(candidate):
                logger.warning(f"Share hash collision for user {owner_id} (attempt {attempt}/{self.max_attempts})")
                continue
            try:
                share_hash, created = self.store.create(owner_id, candidate)
            except ShareHashCollision:
                logger.warning(f"Share hash collision on insert for user {owner_id} (attempt {attempt}/{self.max_attempts})")
                continue
            if created:
                logger.info(f"Share link created for user {owner_id}")
            return share_hash, created

        logger.error(f"Could not allocate a share hash for user {owner_id} after {self.max_attempts} attempts")
        raise ShareLinkUnavailable()

    def revoke(self, owner_id):
        removed = self.store.delete_for_owner(owner_id)
        if removed:
            logger.info(f"Share link removed for user {owner_id}")
        return removed

    def set_sharing(self, owner_id, share):
        """share=True -> (hash, created); share=False -> revoke()."""
        if share:
            return self.share(owner_id)
        return self.revoke(owner_id)

    def resolve(self, share_hash):
        owner_id = self.store.get_owner_for_hash(share_hash)
        if owner_id is None:
            raise ShareLinkNotFound()
        return owner_id

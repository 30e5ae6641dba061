"""
Persistence for share links.

`ShareLinkManager` talks to a store through five calls. The ORM store is
used in production; `InMemoryShareLinkStore` keeps the same contract in a
dict so the manager's state machine can be exercised without a database.
"""
import logging

from django.db import IntegrityError, transaction

from .models import ShareLink

logger = logging.getLogger(__name__)


class ShareHashCollision(Exception):
    """The candidate hash is already held by another owner."""

    def __init__(self, share_hash):
        super().__init__(f"Share hash already in use: {share_hash}")
        self.share_hash = share_hash


class ShareLinkStore:
    """ORM-backed store. `owner` and `hash` are both unique columns."""

    def get_hash_for_owner(self, owner_id):
        return ShareLink.objects.filter(owner_id=owner_id).values_list('hash', flat=True).first()

    def get_owner_for_hash(self, share_hash):
        return ShareLink.objects.filter(hash=share_hash).values_list('owner_id', flat=True).first()

    def hash_exists(self, share_hash):
        return ShareLink.objects.filter(hash=share_hash).exists()

    def create(self, owner_id, share_hash):
        """
        Get-or-create the owner's link. Returns (hash, created); when another
        request won the race for this owner, its hash comes back with
        created=False.
        """
        try:
            with transaction.atomic():
                link, created = ShareLink.objects.get_or_create(
                    owner_id=owner_id, defaults={'hash': share_hash},
                )
        except IntegrityError:
            raise ShareHashCollision(share_hash)
        return link.hash, created

    def delete_for_owner(self, owner_id):
        deleted, _details = ShareLink.objects.filter(owner_id=owner_id).delete()
        return deleted > 0


class InMemoryShareLinkStore:
    """Dict-backed store with the same contract as `ShareLinkStore`."""

    def __init__(self):
        self._by_owner = {}

    def get_hash_for_owner(self, owner_id):
        return self._by_owner.get(owner_id)

    def get_owner_for_hash(self, share_hash):
        for owner_id, held in self._by_owner.items():
            if held == share_hash:
                return owner_id
        return None

    def hash_exists(self, share_hash):
        return share_hash in self._by_owner.values()

    def create(self, owner_id, share_hash):
        if owner_id in self._by_owner:
            return self._by_owner[owner_id], False
        if self.hash_exists(share_hash):
            raise ShareHashCollision(share_hash)
        self._by_owner[owner_id] = share_hash
        return share_hash, True

    def delete_for_owner(self, owner_id):
        return self._by_owner.pop(owner_id, None) is not None

    def __len__(self):
        return len(self._by_owner)

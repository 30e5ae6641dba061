import re
from unittest.mock import patch

from django.contrib.auth import get_user_model
from django.core.exceptions import ImproperlyConfigured
from django.test import SimpleTestCase, TestCase

from apps.core.exceptions import ShareLinkNotFound, ShareLinkUnavailable
from ..models import ShareLink
from ..services import ShareLinkManager
from ..stores import InMemoryShareLinkStore, ShareHashCollision, ShareLinkStore

User = get_user_model()


class RacingStore(InMemoryShareLinkStore):
    """Pre-check always says the hash is free; the insert then finds it taken."""

    def __init__(self, taken):
        super().__init__()
        self.taken = set(taken)

    def hash_exists(self, share_hash):
        return False

    def create(self, owner_id, share_hash):
        if share_hash in self.taken:
            raise ShareHashCollision(share_hash)
        return super().create(owner_id, share_hash)


class ShareLinkManagerTests(SimpleTestCase):

    def setUp(self):
        self.store = InMemoryShareLinkStore()
        self.manager = ShareLinkManager(store=self.store, hash_length=10, max_attempts=5)

    def test_generate_hash_is_ten_alphanumerics(self):
        for _ in range(20):
            self.assertRegex(self.manager.generate_hash(), r'^[A-Za-z0-9]{10}$')

    def test_share_creates_link(self):
        share_hash, created = self.manager.share(1)
        self.assertTrue(created)
        self.assertTrue(re.fullmatch(r'[A-Za-z0-9]{10}', share_hash))
        self.assertEqual(self.manager.resolve(share_hash), 1)

    def test_share_twice_returns_same_hash(self):
        first, created_first = self.manager.share(1)
        second, created_second = self.manager.share(1)
        self.assertEqual(first, second)
        self.assertTrue(created_first)
        self.assertFalse(created_second)
        self.assertEqual(len(self.store), 1)

    def test_reshare_after_revoke_rotates_hash(self):
        with patch.object(self.manager, 'generate_hash', side_effect=["FirstHash1", "SecondHash"]):
            old_hash, _ = self.manager.share(1)
            self.assertTrue(self.manager.revoke(1))
            new_hash, created = self.manager.share(1)

        self.assertTrue(created)
        self.assertNotEqual(old_hash, new_hash)
        self.assertEqual(self.manager.resolve(new_hash), 1)
        with self.assertRaises(ShareLinkNotFound):
            self.manager.resolve(old_hash)

    def test_revoke_without_link_is_noop(self):
        self.assertFalse(self.manager.revoke(1))
        self.assertEqual(len(self.store), 0)

    def test_set_sharing(self):
        share_hash, created = self.manager.set_sharing(7, True)
        self.assertTrue(created)
        self.assertTrue(self.manager.set_sharing(7, False))
        self.assertFalse(self.manager.set_sharing(7, False))
        with self.assertRaises(ShareLinkNotFound):
            self.manager.resolve(share_hash)

    def test_resolve_unknown_hash(self):
        with self.assertRaises(ShareLinkNotFound):
            self.manager.resolve("nope")

    def test_links_are_per_user(self):
        first, _ = self.manager.share(1)
        second, _ = self.manager.share(2)
        self.assertNotEqual(first, second)
        self.assertEqual(self.manager.resolve(first), 1)
        self.assertEqual(self.manager.resolve(second), 2)

    def test_collision_is_retried(self):
        self.store.create(2, "TakenHash1")
        with patch.object(self.manager, 'generate_hash', side_effect=["TakenHash1", "FreshHash1"]):
            with self.assertLogs('apps.sharing.services', level='WARNING'):
                share_hash, created = self.manager.share(1)
        self.assertEqual(share_hash, "FreshHash1")
        self.assertTrue(created)
        self.assertEqual(self.manager.resolve("TakenHash1"), 2)

    def test_collision_on_insert_is_retried(self):
        manager = ShareLinkManager(store=RacingStore(taken={"TakenHash1"}), hash_length=10, max_attempts=5)
        with patch.object(manager, 'generate_hash', side_effect=["TakenHash1", "FreshHash1"]):
            share_hash, _ = manager.share(1)
        self.assertEqual(share_hash, "FreshHash1")

    def test_attempts_exhausted(self):
        self.store.create(2, "TakenHash1")
        manager = ShareLinkManager(store=self.store, hash_length=10, max_attempts=3)
        with patch.object(manager, 'generate_hash', return_value="TakenHash1") as generate:
            with self.assertRaises(ShareLinkUnavailable):
                manager.share(1)
        self.assertEqual(generate.call_count, 3)
        self.assertIsNone(self.store.get_hash_for_owner(1))

    def test_hash_length_must_fit_column(self):
        with self.assertRaises(ImproperlyConfigured):
            ShareLinkManager(store=self.store, hash_length=33)
        with self.settings(SHARE_HASH_LENGTH=64):
            with self.assertRaises(ImproperlyConfigured):
                ShareLinkManager(store=self.store)
        self.assertEqual(ShareLinkManager(store=self.store, hash_length=32).hash_length, 32)

    def test_defaults_come_from_settings(self):
        with self.settings(SHARE_HASH_LENGTH=12, SHARE_HASH_MAX_ATTEMPTS=2):
            manager = ShareLinkManager(store=self.store)
        self.assertEqual(manager.hash_length, 12)
        self.assertEqual(manager.max_attempts, 2)
        self.assertEqual(len(manager.generate_hash()), 12)


class ShareLinkStoreTests(TestCase):

    def setUp(self):
        self.store = ShareLinkStore()
        self.alice = User.objects.create_user(username="alice", password="Passw0rd!")
        self.bob = User.objects.create_user(username="bob", password="Passw0rd!")

    def test_create_and_lookup(self):
        self.assertEqual(self.store.create(self.alice.pk, "AliceHash1"), ("AliceHash1", True))
        self.assertEqual(self.store.get_hash_for_owner(self.alice.pk), "AliceHash1")
        self.assertEqual(self.store.get_owner_for_hash("AliceHash1"), self.alice.pk)
        self.assertTrue(self.store.hash_exists("AliceHash1"))
        self.assertIsNone(self.store.get_owner_for_hash("missing"))

    def test_create_for_linked_owner_returns_existing(self):
        self.store.create(self.alice.pk, "AliceHash1")
        self.assertEqual(self.store.create(self.alice.pk, "OtherHash1"), ("AliceHash1", False))
        self.assertEqual(ShareLink.objects.filter(owner=self.alice).count(), 1)

    def test_hash_taken_by_another_owner(self):
        self.store.create(self.alice.pk, "SharedHash")
        with self.assertRaises(ShareHashCollision):
            self.store.create(self.bob.pk, "SharedHash")
        self.assertIsNone(self.store.get_hash_for_owner(self.bob.pk))

    def test_delete_for_owner(self):
        self.store.create(self.alice.pk, "AliceHash1")
        self.assertTrue(self.store.delete_for_owner(self.alice.pk))
        self.assertFalse(self.store.delete_for_owner(self.alice.pk))
        self.assertFalse(self.store.hash_exists("AliceHash1"))

    def test_manager_against_orm_store(self):
        manager = ShareLinkManager(store=self.store)
        first, created = manager.share(self.alice.pk)
        again, created_again = manager.share(self.alice.pk)
        self.assertTrue(created)
        self.assertFalse(created_again)
        self.assertEqual(first, again)
        self.assertEqual(ShareLink.objects.count(), 1)

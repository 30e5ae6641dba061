from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse

from ..models import Content, Tag

User = get_user_model()


class ContentAdminTests(TestCase):

    def setUp(self):
        self.admin = User.objects.create_superuser(username="admin", password="Adm1n!pass", email="admin@example.com")
        self.client.force_login(self.admin)
        self.content = Content.objects.create(owner=self.admin, title="Saved", type="other", description="note")

    def test_content_changelist(self):
        response = self.client.get(reverse('admin:content_content_changelist'))
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Saved")

    def test_content_change_form(self):
        response = self.client.get(reverse('admin:content_content_change', args=[self.content.pk]))
        self.assertEqual(response.status_code, 200)

    def test_tag_slug_generated(self):
        tag = Tag.objects.create(name="Machine Learning")
        self.assertEqual(tag.slug, "machine-learning")
        response = self.client.get(reverse('admin:content_tag_changelist'))
        self.assertEqual(response.status_code, 200)

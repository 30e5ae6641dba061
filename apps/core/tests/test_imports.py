import os
import subprocess
import sys

from django.conf import settings
from django.test import SimpleTestCase


class ImportOrderTests(SimpleTestCase):
    """
    The default authentication class is resolved while rest_framework.views is
    being imported, so neither import order may hit a partially initialized module.
    """

    def import_in_fresh_interpreter(self, *modules):
        statements = "; ".join(f"import {module}" for module in modules)
        env = dict(os.environ, DJANGO_SETTINGS_MODULE='brain_project.settings')
        return subprocess.run(
            [sys.executable, '-c', f"import django; django.setup(); {statements}"],
            cwd=settings.BASE_DIR, env=env, capture_output=True, text=True, timeout=60,
        )

    def test_authentication_first(self):
        result = self.import_in_fresh_interpreter('apps.users.authentication', 'rest_framework.views')
        self.assertEqual(result.returncode, 0, result.stderr)

    def test_views_first(self):
        result = self.import_in_fresh_interpreter('rest_framework.views', 'apps.core.exceptions')
        self.assertEqual(result.returncode, 0, result.stderr)

    def test_url_tree_loads(self):
        result = self.import_in_fresh_interpreter('brain_project.urls')
        self.assertEqual(result.returncode, 0, result.stderr)

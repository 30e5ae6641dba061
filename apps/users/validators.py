import re
from django.core.exceptions import ValidationError
from django.utils.translation import gettext as _


class PasswordComplexityValidator:
    """
    Require at least one lowercase letter, one uppercase letter, one digit
    and one special character. Plugged in through AUTH_PASSWORD_VALIDATORS.
    """
    pattern = re.compile(r'^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[\W_]).+$')

    def validate(self, password, user=None):
        if not self.pattern.match(password or ''):
            raise ValidationError(
                _("Password must include uppercase, lowercase, number, and special character"),
                code='password_too_simple',
            )

    def get_help_text(self):
        return _("Your password must include an uppercase letter, a lowercase letter, a number and a special character.")

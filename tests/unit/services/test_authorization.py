from uuid import uuid4

from src.app.services.authorization import require_admin
from src.domain.entities import AccountRole, Principal


def test_admin_is_allowed():
    assert require_admin(Principal(id=uuid4(), role=AccountRole.admin)).is_ok()


def test_user_is_forbidden():
    result = require_admin(Principal(id=uuid4(), role=AccountRole.user))
    assert result.is_err()
    assert result.error.code == "FORBIDDEN"


def test_missing_principal_is_forbidden():
    assert require_admin(None).is_err()

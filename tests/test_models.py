from __future__ import annotations

import dataclasses
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from redmium.models import UINT32_MAX, User, UserStatus


def _user(**overrides) -> User:
    fields = dict(
        id=7,
        first_name="Hen",
        last_name="SKELIS",
        mail="email@henskelis.fr",
        login="email@henskelis.fr",
        is_admin=False,
        status=UserStatus.REGISTERED,
        last_login_at=datetime(2023, 7, 20, 16, 23, 14),
        password_changed_at=datetime(2015, 11, 5, 17, 25, 2),
        created_at=datetime(2015, 10, 30, 12, 9, 31),
        updated_at=datetime(2015, 11, 5, 17, 25, 2),
    )
    fields.update(overrides)
    return User(**fields)


def test_status_codes_are_fixed() -> None:
    assert [(member.name, member.value) for member in UserStatus] == [
        ("ANONYMOUS", 0),
        ("ACTIVE", 1),
        ("REGISTERED", 2),
        ("LOCKED", 3),
    ]


@pytest.mark.parametrize("code, expected", [(0, UserStatus.ANONYMOUS), (3, UserStatus.LOCKED)])
def test_status_from_code(code: int, expected: UserStatus) -> None:
    assert UserStatus.from_code(code) is expected


@pytest.mark.parametrize("code", [-1, 4, 255, True, "1", 1.0, None])
def test_status_from_code_rejects_unknown_values(code: object) -> None:
    with pytest.raises(ValueError):
        UserStatus.from_code(code)


def test_user_is_immutable() -> None:
    user = _user()

    with pytest.raises(dataclasses.FrozenInstanceError):
        user.login = "someone-else"  # type: ignore[misc]

    updated = dataclasses.replace(user, status=None)
    assert updated.status is None
    assert user.status is UserStatus.REGISTERED


def test_user_accepts_boundary_ids() -> None:
    assert _user(id=0).id == 0
    assert _user(id=UINT32_MAX).id == UINT32_MAX


@pytest.mark.parametrize("value", [-1, UINT32_MAX + 1])
def test_user_rejects_ids_outside_uint32(value: int) -> None:
    with pytest.raises(ValueError):
        _user(id=value)


@pytest.mark.parametrize(
    "overrides",
    [
        {"id": True},
        {"id": "1"},
        {"login": None},
        {"is_admin": 1},
        {"status": 1},
        {"created_at": "2015-10-30T12:09:31Z"},
    ],
)
def test_user_rejects_wrong_types(overrides: dict) -> None:
    with pytest.raises(TypeError):
        _user(**overrides)


def test_user_rejects_aware_timestamps() -> None:
    with pytest.raises(ValueError):
        _user(created_at=datetime(2015, 10, 30, 12, 9, 31, tzinfo=timezone.utc))


def test_user_rejects_sub_second_timestamps() -> None:
    with pytest.raises(ValueError):
        _user(updated_at=datetime(2015, 10, 30, 12, 9, 31, 500))

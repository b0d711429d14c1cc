"""Tests for request/response schema validation."""
from datetime import UTC, datetime
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from schemas.auth import AuthRequest, TokenResponse
from schemas.bookmark import BookmarkCreate, BookmarkResponse, BookmarkUpdate
from schemas.user import UserResponse, UserUpdate


class TestAuthRequest:
    def test_normalizes_email(self) -> None:
        data = AuthRequest(email="  User@FromTest.COM ", password="pw")
        assert data.email == "user@fromtest.com"

    @pytest.mark.parametrize("email", ["", "plainaddress", "@missing-local.org", "a@"])
    def test_rejects_malformed_email(self, email: str) -> None:
        with pytest.raises(ValidationError):
            AuthRequest(email=email, password="pw")

    def test_rejects_empty_password(self) -> None:
        with pytest.raises(ValidationError):
            AuthRequest(email="user@fromtest.com", password="")

    def test_password_is_not_stripped(self) -> None:
        assert AuthRequest(email="a@b.com", password=" pw ").password == " pw "


def test_token_response_defaults_to_bearer() -> None:
    assert TokenResponse(access_token="abc").model_dump() == {
        "access_token": "abc",
        "token_type": "bearer",
    }


class TestUserUpdate:
    def test_accepts_camel_and_snake_case(self) -> None:
        assert UserUpdate.model_validate({"firstName": "A"}).first_name == "A"
        assert UserUpdate.model_validate({"first_name": "B"}).first_name == "B"

    def test_unset_fields_are_excluded(self) -> None:
        data = UserUpdate.model_validate({"lastName": "Smith"})
        assert data.model_dump(exclude_unset=True) == {"last_name": "Smith"}

    def test_rejects_null_email(self) -> None:
        with pytest.raises(ValidationError, match="Email cannot be null"):
            UserUpdate.model_validate({"email": None})

    def test_allows_clearing_names(self) -> None:
        data = UserUpdate.model_validate({"firstName": None})
        assert data.model_dump(exclude_unset=True) == {"first_name": None}


def test_user_response_serializes_camel_case() -> None:
    now = datetime.now(UTC)
    user = SimpleNamespace(
        id=1,
        email="a@b.com",
        hash="secret-hash",
        first_name="Ada",
        last_name=None,
        created_at=now,
        updated_at=now,
    )
    dumped = UserResponse.model_validate(user).model_dump(by_alias=True)
    assert dumped["firstName"] == "Ada"
    assert dumped["lastName"] is None
    assert "hash" not in dumped


class TestBookmarkCreate:
    def test_preserves_link_path_and_query(self) -> None:
        data = BookmarkCreate(title="t", link="https://www.youtube.com/watch?v=jfKfPfyJRdk")
        assert str(data.link) == "https://www.youtube.com/watch?v=jfKfPfyJRdk"

    def test_normalizes_root_domain(self) -> None:
        assert str(BookmarkCreate(title="t", link="https://example.com").link) == (
            "https://example.com/"
        )

    def test_description_is_optional(self) -> None:
        assert BookmarkCreate(title="t", link="https://example.com").description is None

    def test_strips_title(self) -> None:
        data = BookmarkCreate(title="  Rick Astley  ", link="https://example.com")
        assert data.title == "Rick Astley"

    def test_title_length_is_checked_after_stripping(self) -> None:
        data = BookmarkCreate(title=" " + "x" * 500 + " ", link="https://example.com")
        assert len(data.title) == 500

    @pytest.mark.parametrize(
        "payload",
        [
            {"link": "https://example.com"},
            {"title": "t"},
            {"title": "", "link": "https://example.com"},
            {"title": " \t ", "link": "https://example.com"},
            {"title": "t", "link": "example"},
            {"title": "t", "link": "mailto:user@example.com"},
        ],
    )
    def test_rejects_invalid(self, payload: dict) -> None:
        with pytest.raises(ValidationError):
            BookmarkCreate.model_validate(payload)


class TestBookmarkUpdate:
    def test_only_supplied_fields_are_set(self) -> None:
        data = BookmarkUpdate.model_validate({"description": "d"})
        assert data.model_dump(exclude_unset=True) == {"description": "d"}

    @pytest.mark.parametrize("field", ["title", "link"])
    def test_rejects_null_required_field(self, field: str) -> None:
        with pytest.raises(ValidationError, match="Field cannot be null"):
            BookmarkUpdate.model_validate({field: None})

    def test_strips_title(self) -> None:
        assert BookmarkUpdate.model_validate({"title": " New "}).title == "New"

    @pytest.mark.parametrize("title", ["", "   "])
    def test_rejects_blank_title(self, title: str) -> None:
        with pytest.raises(ValidationError):
            BookmarkUpdate.model_validate({"title": title})

    def test_allows_null_description(self) -> None:
        data = BookmarkUpdate.model_validate({"description": None})
        assert data.model_dump(exclude_unset=True) == {"description": None}


def test_bookmark_response_serializes_camel_case() -> None:
    now = datetime.now(UTC)
    bookmark = SimpleNamespace(
        id=3,
        title="t",
        description=None,
        link="https://example.com/",
        user_id=9,
        created_at=now,
        updated_at=now,
    )
    dumped = BookmarkResponse.model_validate(bookmark).model_dump(by_alias=True)
    assert dumped["userId"] == 9
    assert set(dumped) == {"id", "title", "description", "link", "userId", "createdAt", "updatedAt"}

from __future__ import annotations

import pytest

from photoshare.application.use_cases.photos.manage_photos import (
    CreatePhotoUseCase,
    DeletePhotoUseCase,
    GetPhotoUseCase,
    ListPhotosUseCase,
    UpdatePhotoUseCase,
)
from photoshare.domain.photos.exceptions import PhotoNotFoundError
from photoshare.domain.users.exceptions import NotAllowedError

PHOTO_URL = "https://cdn.example.com/cat.jpg"


def _create(photos, identity, title: str = "Cat"):
    return CreatePhotoUseCase(photos=photos).execute(
        identity, title=title, photo_url=PHOTO_URL, caption="meow"
    )


def test_create_photo_belongs_to_caller(photos, identity_factory) -> None:
    photo = _create(photos, identity_factory(1))

    assert photo.id == 1
    assert photo.user_id == 1
    assert photo.caption == "meow"
    assert photo.email == "user1@example.com"


def test_list_only_returns_own_photos(photos, identity_factory) -> None:
    alice, bob = identity_factory(1), identity_factory(2)
    _create(photos, alice, "first")
    _create(photos, bob, "bob's")
    _create(photos, alice, "second")

    listed = ListPhotosUseCase(photos=photos).execute(alice)

    assert [p.title for p in listed] == ["second", "first"]


def test_get_photo_of_other_user_is_not_found(photos, identity_factory) -> None:
    photo = _create(photos, identity_factory(1))
    use_case = GetPhotoUseCase(photos=photos)

    assert use_case.execute(identity_factory(1), photo.id) == photo
    with pytest.raises(PhotoNotFoundError) as exc_info:
        use_case.execute(identity_factory(2), photo.id)

    assert exc_info.value.status == 404


def test_update_photo(photos, identity_factory) -> None:
    original = _create(photos, identity_factory(1))

    updated = UpdatePhotoUseCase(photos=photos).execute(
        identity_factory(1),
        original.id,
        title="Dog",
        photo_url="https://cdn.example.com/dog.png",
    )

    assert updated.title == "Dog"
    assert updated.caption is None
    assert updated.created_at == original.created_at
    assert updated.updated_at >= original.updated_at


def test_update_photo_of_other_user_leaves_it_untouched(photos, identity_factory) -> None:
    original = _create(photos, identity_factory(1))

    with pytest.raises(PhotoNotFoundError):
        UpdatePhotoUseCase(photos=photos).execute(
            identity_factory(2), original.id, title="Mine now", photo_url=PHOTO_URL
        )

    assert photos.find_by_id(original.id).title == "Cat"


def test_delete_photo(photos, identity_factory) -> None:
    photo = _create(photos, identity_factory(1))

    DeletePhotoUseCase(photos=photos).execute(identity_factory(1), photo.id)

    assert len(photos) == 0


def test_delete_photo_of_other_user_is_not_allowed(photos, identity_factory) -> None:
    photo = _create(photos, identity_factory(1))

    with pytest.raises(NotAllowedError) as exc_info:
        DeletePhotoUseCase(photos=photos).execute(identity_factory(2), photo.id)

    assert exc_info.value.status == 401
    assert len(photos) == 1


def test_delete_missing_photo(photos, identity_factory) -> None:
    with pytest.raises(PhotoNotFoundError):
        DeletePhotoUseCase(photos=photos).execute(identity_factory(1), 42)

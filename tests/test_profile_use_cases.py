from __future__ import annotations

from datetime import timedelta

import pytest

from factories import BASE_TIME, make_driver_post, make_identity, make_join_request
from rideshare.application.dto.profile import UpdateProfileInput
from rideshare.application.use_cases.get_profile import GetProfileUseCase
from rideshare.application.use_cases.list_join_requests import ListJoinRequestsUseCase
from rideshare.application.use_cases.update_profile import UpdateProfileUseCase
from rideshare.domain.entities.identity import Avatar
from rideshare.domain.entities.join_request_view import AcceptedJoinRequestView, BasicJoinRequestView
from rideshare.domain.entities.ride import PassengerPost
from rideshare.domain.exceptions import DuplicateEmailError, IdentityNotFoundError, ValidationError
from rideshare.infrastructure.avatar.data_uri_renderer import DataUriAvatarRenderer


def _get_profile_use_case(identity_port, rides_port) -> GetProfileUseCase:
    return GetProfileUseCase(
        identity_port=identity_port,
        rides_port=rides_port,
        avatar_renderer=DataUriAvatarRenderer(),
        list_join_requests_use_case=ListJoinRequestsUseCase(rides_port=rides_port),
    )


def test_passenger_profile_combines_requests_and_posts(identity_port, rides_port):
    identity_port.add(make_identity(avatar=Avatar(data=b"\x89PNG", content_type="image/png")))
    rides_port.driver_posts["post-1"] = make_driver_post(post_id="post-1")
    rides_port.driver_posts["post-2"] = make_driver_post(post_id="post-2")
    rides_port.join_requests = [
        make_join_request(request_id="jr-1", driver_post_id="post-1", status="pending", minutes=1),
        make_join_request(request_id="jr-2", driver_post_id="post-2", status="accepted", minutes=2),
    ]
    rides_port.passenger_posts.append(
        PassengerPost(
            id="ppost-1",
            passenger_id="passenger-1",
            starting_location="Campus",
            ending_location="Mall",
            start_time=BASE_TIME + timedelta(days=2),
            number_of_seats=1,
            additional_notes=None,
            created_at=BASE_TIME,
        )
    )

    output = _get_profile_use_case(identity_port, rides_port).execute(kind="passenger", identity_id="passenger-1")

    assert output.user.email == "a@b.com"
    assert not hasattr(output.user, "password_hash")
    assert output.avatar == "data:image/png;base64,iVBORw=="
    assert len(output.rideshares) == 2
    assert isinstance(output.rideshares[0], BasicJoinRequestView)
    assert isinstance(output.rideshares[1], AcceptedJoinRequestView)
    assert [post.id for post in output.passenger_posts] == ["ppost-1"]
    assert output.driver_posts == []


def test_driver_profile_lists_own_posts(identity_port, rides_port):
    identity_port.add(make_identity(identity_id="driver-1", kind="driver", name="Dan", email="dan@b.com"))
    rides_port.driver_posts["post-1"] = make_driver_post(post_id="post-1", driver_id="driver-1")
    rides_port.driver_posts["post-2"] = make_driver_post(post_id="post-2", driver_id="driver-2")

    output = _get_profile_use_case(identity_port, rides_port).execute(kind="driver", identity_id="driver-1")

    assert output.avatar is None
    assert output.rideshares == []
    assert [post.id for post in output.driver_posts] == ["post-1"]


def test_profile_of_removed_identity_is_not_found(identity_port, rides_port):
    with pytest.raises(IdentityNotFoundError):
        _get_profile_use_case(identity_port, rides_port).execute(kind="passenger", identity_id="gone")


def test_update_profile_changes_name_phone_and_password(identity_port, password_hasher):
    identity_port.add(make_identity())
    use_case = UpdateProfileUseCase(identity_port=identity_port, password_hasher=password_hasher)

    output = use_case.execute(
        UpdateProfileInput(
            kind="passenger",
            identity_id="passenger-1",
            name=" Alicia ",
            phone_number="0987654321",
            new_password="newpassword",
        )
    )

    assert output.user.name == "Alicia"
    assert output.user.phone_number == "0987654321"
    stored = identity_port.get_identity(kind="passenger", identity_id="passenger-1")
    assert stored.password_hash == "hashed::newpassword"


def test_update_profile_email_collision_with_driver(identity_port, password_hasher):
    identity_port.add(make_identity())
    identity_port.add(make_identity(identity_id="driver-1", kind="driver", email="taken@b.com"))
    use_case = UpdateProfileUseCase(identity_port=identity_port, password_hasher=password_hasher)

    with pytest.raises(DuplicateEmailError):
        use_case.execute(UpdateProfileInput(kind="passenger", identity_id="passenger-1", email="Taken@b.com"))


def test_update_profile_keeping_own_email_is_allowed(identity_port, password_hasher):
    identity_port.add(make_identity())
    use_case = UpdateProfileUseCase(identity_port=identity_port, password_hasher=password_hasher)

    output = use_case.execute(UpdateProfileInput(kind="passenger", identity_id="passenger-1", email="A@B.com"))

    assert output.user.email == "a@b.com"


def test_update_profile_changes_email(identity_port, password_hasher):
    identity_port.add(make_identity())
    use_case = UpdateProfileUseCase(identity_port=identity_port, password_hasher=password_hasher)

    output = use_case.execute(UpdateProfileInput(kind="passenger", identity_id="passenger-1", email="new@b.com"))

    assert output.user.email == "new@b.com"
    assert identity_port.email_exists(email="a@b.com") is False


def test_update_profile_unknown_identity(identity_port, password_hasher):
    use_case = UpdateProfileUseCase(identity_port=identity_port, password_hasher=password_hasher)

    with pytest.raises(IdentityNotFoundError):
        use_case.execute(UpdateProfileInput(kind="driver", identity_id="missing", name="Dan"))


def test_update_profile_rejects_short_password(identity_port, password_hasher):
    identity_port.add(make_identity())
    use_case = UpdateProfileUseCase(identity_port=identity_port, password_hasher=password_hasher)

    with pytest.raises(ValidationError, match="Invalid password"):
        use_case.execute(UpdateProfileInput(kind="passenger", identity_id="passenger-1", new_password="short"))

from __future__ import annotations

import unittest
from datetime import datetime, timezone
from uuid import UUID

from rideshare.infrastructure.db.mappers.identity_mapper import map_row_to_identity
from rideshare.infrastructure.db.mappers.rides_mapper import map_row_to_join_request_with_post


NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


class IdentityMapperTests(unittest.TestCase):
    def test_maps_uuid_and_avatar(self):
        row = {
            "id": UUID("11111111-1111-1111-1111-111111111111"),
            "name": "Alice",
            "email": "a@b.com",
            "phone_number": "1234567890",
            "password_hash": "$argon2id$...",
            "auth_provider": "local",
            "avatar_data": memoryview(b"png-bytes"),
            "avatar_content_type": "image/png",
            "created_at": NOW,
            "updated_at": NOW,
        }

        identity = map_row_to_identity(row, kind="passenger")

        self.assertEqual(identity.id, "11111111-1111-1111-1111-111111111111")
        self.assertEqual(identity.kind, "passenger")
        self.assertEqual(identity.avatar.data, b"png-bytes")
        self.assertEqual(identity.avatar.content_type, "image/png")

    def test_federated_account_without_phone_or_avatar(self):
        row = {
            "id": "driver-1",
            "name": "Gina",
            "email": "gina@example.com",
            "phone_number": None,
            "password_hash": "$argon2id$...",
            "auth_provider": "google",
            "avatar_data": None,
            "avatar_content_type": None,
            "created_at": NOW,
            "updated_at": NOW,
        }

        identity = map_row_to_identity(row, kind="driver")

        self.assertEqual(identity.phone_number, "")
        self.assertIsNone(identity.avatar)
        self.assertEqual(identity.auth_provider, "google")


class JoinRequestMapperTests(unittest.TestCase):
    def _row(self, **overrides):
        row = {
            "id": "jr-1",
            "passenger_id": "passenger-1",
            "driver_post_id": "post-1",
            "status": "accepted",
            "created_at": NOW,
            "updated_at": NOW,
            "post_id": "post-1",
            "post_driver_id": "driver-1",
            "post_starting_location": "Downtown",
            "post_ending_location": "Airport",
            "post_start_time": NOW,
            "post_number_of_seats": 3,
            "post_additional_notes": None,
            "post_license_number": "ABC-1234",
            "post_model": "Civic",
            "post_phone_number": "5550001111",
            "post_email": "driver@example.com",
            "post_created_at": NOW,
        }
        row.update(overrides)
        return row

    def test_maps_request_with_post(self):
        request, post = map_row_to_join_request_with_post(self._row())

        self.assertEqual(request.driver_post_id, "post-1")
        self.assertEqual(post.id, "post-1")
        self.assertEqual(post.number_of_seats, 3)
        self.assertEqual(post.license_number, "ABC-1234")

    def test_missing_post_maps_to_none(self):
        nulls = {key: None for key in self._row() if key.startswith("post_")}

        request, post = map_row_to_join_request_with_post(self._row(**nulls))

        self.assertEqual(request.id, "jr-1")
        self.assertIsNone(post)


if __name__ == "__main__":
    unittest.main()
